"""View registry and configuration.

A view maps a document to index entries, the way a CouchDB map function does.
Views are registered by name so the HTTP layer and the design document
renderer can find them.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable

from docviews.projections.errors import ViewNotFoundError
from docviews.projections.projection import Projection

logger = logging.getLogger(__name__)


@dataclass
class ViewConfig:
    """Configuration for one named view.

    Args:
        name: Canonical view name (e.g. ``by_path_docs_names``).
        projector: Callable turning one document into a ``Projection``.
        description: Human readable summary shown by the API.
        map_source: JavaScript map function for the design document, if the
            view can be expressed as one.
    """

    name: str
    projector: Callable[[Any], Projection]
    description: str = ""
    map_source: str | None = None

    def project(self, document: Any) -> Projection:
        """Run the view over one document.

        Args:
            document: Document to decompose.

        Returns:
            Restartable sequence of emitted pairs.
        """
        return self.projector(document)


# Module-level storage (not class-level to avoid shared mutable state)
_registry_views: dict[str, ViewConfig] = {}


class ViewRegistry:
    """Registry of view configurations by name."""

    @classmethod
    def register(cls, config: ViewConfig) -> None:
        """Register a view, replacing any view with the same name.

        Args:
            config: The view configuration to register.
        """
        if config.name in _registry_views:
            logger.debug("Replacing registered view %s", config.name)
        _registry_views[config.name] = config

    @classmethod
    def get(cls, name: str) -> ViewConfig | None:
        """Get a view by name, or None if it is not registered."""
        return _registry_views.get(name)

    @classmethod
    def require(cls, name: str) -> ViewConfig:
        """Get a view by name.

        Raises:
            ViewNotFoundError: No view is registered under ``name``.
        """
        config = _registry_views.get(name)
        if config is None:
            raise ViewNotFoundError(name)
        return config

    @classmethod
    def has_view(cls, name: str) -> bool:
        return name in _registry_views

    @classmethod
    def all_views(cls) -> dict[str, ViewConfig]:
        """Get all registered views.

        Returns:
            Dictionary mapping view names to configs, in registration order.
        """
        return _registry_views.copy()

    @classmethod
    def _clear_for_testing(cls) -> None:
        """Clear all registered views. Internal use in tests only."""
        _registry_views.clear()
