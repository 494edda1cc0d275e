"""Exceptions raised while building or running document views."""


class ProjectionError(ValueError):
    """Base class for projection failures."""

    pass


class MissingFieldError(ProjectionError):
    """Raised when a document lacks a field a view needs.

    Attributes:
        field: Dotted path of the missing field (e.g. ``level1[0].level2``).
    """

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Document is missing required field '{field}'")


class InvalidFieldError(ProjectionError):
    """Raised when a collection field holds something other than a sequence."""

    def __init__(self, field: str, value: object):
        self.field = field
        super().__init__(
            f"Field '{field}' must be a list, got {type(value).__name__}"
        )


class ViewNotFoundError(ProjectionError):
    """Raised when a view name is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"View '{name}' is not registered")


class InvalidViewPathError(ProjectionError):
    """Raised when a route template cannot be turned into a path view."""

    pass
