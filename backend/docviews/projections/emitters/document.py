"""Views over person-style documents.

Decomposes a document into index entries, one per nested item:

- names:                 ((id, index), name)
- externalIds:           ((id, providerId), externalId)
- level1[].level2[]:     ((id, level1param, level2param), level2)
- languageproficiencies: ((id, pos), languageproficiency)
"""

import logging
from dataclasses import replace
from functools import partial
from typing import Any

from docviews.config import settings
from docviews.projections.emitters.path import PathView, QueryView
from docviews.projections.fields import MissingFieldPolicy
from docviews.projections.projection import Projection
from docviews.projections.registry import ViewConfig, ViewRegistry

logger = logging.getLogger(__name__)

NAMES_VIEW = PathView.from_template("/docs/{id}/names/{index}")
EXTERNAL_IDS_VIEW = PathView.from_template("/docs/{id}/externalIds/{providerId}")
LEVEL2_VIEW = PathView.from_template("/docs/{id}/level1/{level1param}/level2/{level2param}")
LANGUAGE_PROFICIENCY_VIEW = PathView.from_template("/docs/{id}/languageproficiencies/{pos}")
ID_QUERY_VIEW = QueryView("id")

# Branch order of project()
DOCUMENT_VIEWS = (NAMES_VIEW, EXTERNAL_IDS_VIEW, LEVEL2_VIEW)


def _with_policy(view: PathView, policy: MissingFieldPolicy | None) -> PathView:
    return replace(view, policy=policy or view.policy or settings.missing_field_policy)


def _project_views(
    views: tuple[PathView, ...], document: Any, policy: MissingFieldPolicy | None
) -> Projection:
    """Validate every branch, then chain their rows in branch order."""
    bound = [_with_policy(view, policy) for view in views]
    for view in bound:
        view.validate(document)
    return Projection.chain(Projection(partial(view.rows, document)) for view in bound)


def project(document: Any, policy: MissingFieldPolicy | None = None) -> Projection:
    """Decompose a document into names, externalIds and level2 entries.

    Args:
        document: Mapping or attribute-style record with ``id``, ``names``,
            ``externalIds`` and ``level1`` fields.
        policy: Missing-field policy; defaults to the configured one.

    Returns:
        Restartable sequence of ``(key, value)`` pairs, names first, then
        externalIds, then level1/level2 entries.

    Raises:
        MissingFieldError: A referenced field is absent under the ``error``
            policy. Raised before any pair is produced.
        InvalidFieldError: A collection field is not a list.
    """
    return _project_views(DOCUMENT_VIEWS, document, policy)


def project_language_proficiency(
    document: Any, policy: MissingFieldPolicy | None = None
) -> Projection:
    """Decompose a document into one entry per language proficiency.

    Args:
        document: Record with ``id`` and ``languageproficiencies`` fields.
        policy: Missing-field policy; defaults to the configured one.

    Returns:
        Restartable sequence of ``((id, pos), languageproficiency)`` pairs.
    """
    return _project_views((LANGUAGE_PROFICIENCY_VIEW,), document, policy)


def _combined_source(views: tuple[PathView, ...]) -> str:
    return "function(doc){ " + " ".join(view.map_body() for view in views) + " }"


def register_document_views() -> None:
    """Register the document views with the registry.

    Called at application startup. Registers the two entry points plus every
    path view they are composed of, under its canonical name, and the
    ``by_query_id`` view for looking documents up by id.
    """
    ViewRegistry.register(
        ViewConfig(
            name="documents",
            projector=project,
            description="Names, external ids and level1/level2 entries of a document",
            map_source=_combined_source(DOCUMENT_VIEWS),
        )
    )
    ViewRegistry.register(
        ViewConfig(
            name="language_proficiencies",
            projector=project_language_proficiency,
            description="Language proficiencies of a document keyed by pos",
            map_source=LANGUAGE_PROFICIENCY_VIEW.map_source(),
        )
    )
    for view in (*DOCUMENT_VIEWS, LANGUAGE_PROFICIENCY_VIEW):
        ViewRegistry.register(
            ViewConfig(
                name=view.name,
                projector=view,
                description=f"Path view for {view.template}",
                map_source=view.map_source(),
            )
        )
    ViewRegistry.register(
        ViewConfig(
            name=ID_QUERY_VIEW.name,
            projector=ID_QUERY_VIEW,
            description="Whole documents keyed by id",
            map_source=ID_QUERY_VIEW.map_source(),
        )
    )
    logger.info(
        "Registered document views: %d path views, 1 query view", len(DOCUMENT_VIEWS) + 1
    )
