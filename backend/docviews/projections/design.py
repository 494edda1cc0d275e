"""CouchDB design document rendering.

Collects the JavaScript map functions of registered views into the design
document a CouchDB database would serve them from. Rendering only; nothing is
written anywhere.
"""

import logging
from collections.abc import Iterable

from docviews.config import settings
from docviews.projections.registry import ViewConfig

logger = logging.getLogger(__name__)

DESIGN_LANGUAGE = "javascript"


def render_design_document(
    views: Iterable[ViewConfig], doc_id: str | None = None
) -> dict:
    """Build a design document from view configurations.

    Args:
        views: Views to include. Views without ``map_source`` are skipped.
        doc_id: Design document id; defaults to ``settings.design_document_id``.

    Returns:
        Dictionary with ``_id``, ``language`` and ``views`` keys, where each
        view entry is ``{"map": <javascript source>}``.
    """
    rendered: dict[str, dict[str, str]] = {}
    for view in views:
        if not view.map_source:
            logger.debug("View %s has no map source, skipping", view.name)
            continue
        rendered[view.name] = {"map": view.map_source}

    return {
        "_id": doc_id or settings.design_document_id,
        "language": DESIGN_LANGUAGE,
        "views": rendered,
    }
