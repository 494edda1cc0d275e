"""View emitters.

Emitters are pure functions of one document that produce index entries.
"""

from docviews.projections.emitters.document import (
    project,
    project_language_proficiency,
    register_document_views,
)
from docviews.projections.emitters.path import PathStep, PathView, QueryView

__all__ = [
    "PathStep",
    "PathView",
    "QueryView",
    "project",
    "project_language_proficiency",
    "register_document_views",
]
