"""Document view system.

Views decompose documents into ``(key, value)`` index entries, the way
CouchDB map functions do, without storing anything.
"""

from docviews.projections.errors import (
    InvalidFieldError,
    InvalidViewPathError,
    MissingFieldError,
    ProjectionError,
    ViewNotFoundError,
)
from docviews.projections.projection import EmittedPair, Projection
from docviews.projections.registry import ViewConfig, ViewRegistry

__all__ = [
    "EmittedPair",
    "InvalidFieldError",
    "InvalidViewPathError",
    "MissingFieldError",
    "Projection",
    "ProjectionError",
    "ViewConfig",
    "ViewNotFoundError",
    "ViewRegistry",
]
