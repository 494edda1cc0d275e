"""Application configuration using pydantic-settings."""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


# Find .env file: check backend dir first, then project root
_BACKEND_DIR = Path(__file__).parent.parent
_PROJECT_ROOT = _BACKEND_DIR.parent
_ENV_FILE = _BACKEND_DIR / ".env" if (_BACKEND_DIR / ".env").exists() else _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Variables are read with the ``DOCVIEWS_`` prefix, e.g.
    ``DOCVIEWS_MISSING_FIELD_POLICY=empty``.
    """

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        env_prefix="DOCVIEWS_",
        extra="ignore",
    )

    # Projection
    # "error" raises MissingFieldError, "empty" treats absent collections as empty
    missing_field_policy: Literal["error", "empty"] = "error"

    # Design document
    design_document_id: str = "_design/core"

    # Application
    log_level: str = "INFO"
    cors_origins: str = "http://localhost:3000"


settings = Settings()
