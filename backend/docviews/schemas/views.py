"""Pydantic schemas for the views API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class EmittedRow(BaseModel):
    """One index entry. Compound keys serialize as JSON arrays."""

    key: Any
    value: Any


class ViewSummary(BaseModel):
    """A registered view as listed by the API."""

    name: str
    description: str = ""
    has_map_source: bool = False


class ViewListResponse(BaseModel):
    views: list[ViewSummary]


class ProjectResponse(BaseModel):
    """Rows produced by running one view over one document."""

    view: str
    rows: list[EmittedRow]
    total_rows: int


class DesignDocument(BaseModel):
    """CouchDB design document holding the views' map functions."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    language: str = "javascript"
    views: dict[str, dict[str, str]] = Field(default_factory=dict)
