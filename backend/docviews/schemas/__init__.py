"""Pydantic schemas."""

from docviews.schemas.views import (
    DesignDocument,
    EmittedRow,
    ProjectResponse,
    ViewListResponse,
    ViewSummary,
)

__all__ = [
    "DesignDocument",
    "EmittedRow",
    "ProjectResponse",
    "ViewListResponse",
    "ViewSummary",
]
