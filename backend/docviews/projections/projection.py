"""Emitted rows and the lazy sequence that carries them."""

import itertools
from collections.abc import Callable, Iterable, Iterator
from typing import Any, NamedTuple


class EmittedPair(NamedTuple):
    """One index entry produced by a view.

    ``key`` is a tuple for compound keys (document id first) or a scalar for
    query views. ``value`` is the source item, never a copy.
    """

    key: Any
    value: Any


class Projection:
    """Finite, restartable, lazy sequence of emitted pairs.

    Each iteration calls the row factory again, so a projection can be walked
    any number of times and always yields the same pairs for the same input.
    """

    def __init__(self, rows: Callable[[], Iterator[EmittedPair]]):
        self._rows = rows

    def __iter__(self) -> Iterator[EmittedPair]:
        return self._rows()

    def __repr__(self) -> str:
        return f"Projection({self._rows!r})"

    @classmethod
    def chain(cls, projections: Iterable["Projection"]) -> "Projection":
        """Concatenate projections, preserving branch order."""
        parts = list(projections)
        return cls(lambda: itertools.chain.from_iterable(parts))
