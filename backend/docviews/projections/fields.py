"""Field access helpers shared by the view emitters.

Documents arrive either as JSON objects (any ``Mapping``) or as objects that
expose their fields as attributes. These helpers hide the difference and apply
the missing-field policy in one place.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Literal

from docviews.projections.errors import InvalidFieldError, MissingFieldError

MissingFieldPolicy = Literal["error", "empty"]

# Sentinel for "field not present at all"
MISSING = object()


def get_field(record: Any, name: str) -> Any:
    """Read a field from a mapping or an attribute-style record.

    Args:
        record: Document or nested item.
        name: Field name.

    Returns:
        The field value, or ``MISSING`` if the record has no such field.
    """
    if isinstance(record, Mapping):
        return record.get(name, MISSING)
    return getattr(record, name, MISSING)


def child_path(parent: str, name: str) -> str:
    """Join a dotted field path."""
    return f"{parent}.{name}" if parent else name


def item_path(parent: str, index: int) -> str:
    """Address one element of a collection in a field path."""
    return f"{parent}[{index}]"


def require_value(
    record: Any, name: str, path: str, policy: MissingFieldPolicy
) -> Any:
    """Read a key component.

    Args:
        record: Record holding the field.
        name: Field name.
        path: Dotted path of the field, used in error messages.
        policy: ``error`` raises on a missing field, ``empty`` yields None.

    Returns:
        Field value (None when missing under the ``empty`` policy).

    Raises:
        MissingFieldError: Field absent and policy is ``error``.
    """
    value = get_field(record, name)
    if value is MISSING:
        if policy == "error":
            raise MissingFieldError(path)
        return None
    return value


def require_collection(
    record: Any, name: str, path: str, policy: MissingFieldPolicy
) -> Sequence:
    """Read a collection field.

    A field set to None is treated the same as an absent one.

    Raises:
        MissingFieldError: Field absent or null and policy is ``error``.
        InvalidFieldError: Field present but not a list-like sequence.
    """
    value = get_field(record, name)
    if value is MISSING or value is None:
        if policy == "error":
            raise MissingFieldError(path)
        return ()
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Sequence):
        raise InvalidFieldError(path, value)
    return value
