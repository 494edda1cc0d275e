"""Canonical view names and route template parsing."""

import re

# "/level1/{level1param}" -> ("level1", "level1param")
PATH_PARAM_RE = re.compile(r"/(\w*)/\{(\w*)\}")

# "/docs" or "/docs/{id}" -> "docs"
VIEW_PATH_RE = re.compile(r"/(\w*)(?:/\{\w*\})?")

QUERY_VIEW_PREFIX = "by_query_"
PATH_VIEW_PREFIX = "by_path_"


def make_query_view_name(param: str) -> str:
    """Name of the view backing a ``?param=`` filter."""
    return QUERY_VIEW_PREFIX + param


def make_path_view_name(path: str) -> str:
    """Name of the view backing a route template.

    Args:
        path: Route template such as ``/docs/{id}/level1/{level1param}``.

    Returns:
        ``by_path_`` followed by the collection segments joined with ``_``,
        e.g. ``by_path_docs_level1``.
    """
    segments = [name for name in VIEW_PATH_RE.findall(path) if name]
    return PATH_VIEW_PREFIX + "_".join(segments)

