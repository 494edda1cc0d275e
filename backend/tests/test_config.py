"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from docviews.config import Settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        """Test defaults when no environment is set."""
        monkeypatch.delenv("DOCVIEWS_MISSING_FIELD_POLICY", raising=False)
        monkeypatch.delenv("DOCVIEWS_DESIGN_DOCUMENT_ID", raising=False)

        settings = Settings(_env_file=None)

        assert settings.missing_field_policy == "error"
        assert settings.design_document_id == "_design/core"

    def test_reads_prefixed_environment(self, monkeypatch):
        """Test DOCVIEWS_ variables override defaults."""
        monkeypatch.setenv("DOCVIEWS_MISSING_FIELD_POLICY", "empty")
        monkeypatch.setenv("DOCVIEWS_DESIGN_DOCUMENT_ID", "_design/people")

        settings = Settings(_env_file=None)

        assert settings.missing_field_policy == "empty"
        assert settings.design_document_id == "_design/people"

    def test_rejects_unknown_policy(self, monkeypatch):
        """Test the policy is limited to error/empty."""
        monkeypatch.setenv("DOCVIEWS_MISSING_FIELD_POLICY", "ignore")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
