"""Views generated from route templates and query parameters.

A route template such as ``/docs/{id}/level1/{level1param}/level2/{level2param}``
describes how to address an item nested inside a document. The matching
path view walks the same nesting and emits one row per innermost item, keyed
by every parameter on the way down:

    ((doc.id, level1.level1param, level2.level2param), level2)

The parameter name ``index`` is reserved: it keys the item by its position in
the collection instead of by one of its fields.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, replace
from typing import Any

import inflection

from docviews.config import settings
from docviews.projections.errors import InvalidViewPathError
from docviews.projections.fields import (
    MissingFieldPolicy,
    child_path,
    item_path,
    require_collection,
    require_value,
)
from docviews.projections.naming import (
    PATH_PARAM_RE,
    make_path_view_name,
    make_query_view_name,
)
from docviews.projections.projection import EmittedPair, Projection

logger = logging.getLogger(__name__)

INDEX_PARAM = "index"

# Names a generated loop variable may not take
JS_RESERVED_WORDS = frozenset(
    {
        "arguments", "await", "break", "case", "catch", "class", "const",
        "continue", "debugger", "default", "delete", "do", "else", "enum",
        "eval", "export", "extends", "false", "finally", "for", "function",
        "if", "implements", "import", "in", "instanceof", "interface", "let",
        "new", "null", "package", "private", "protected", "public", "return",
        "static", "super", "switch", "this", "throw", "true", "try", "typeof",
        "undefined", "var", "void", "while", "with", "yield", "emit",
    }
)


def _resolve_policy(policy: MissingFieldPolicy | None) -> MissingFieldPolicy:
    return policy or settings.missing_field_policy


@dataclass(frozen=True)
class PathStep:
    """One ``/<collection>/{<param>}`` segment below the document."""

    collection: str
    param: str

    @property
    def is_index(self) -> bool:
        return self.param == INDEX_PARAM


@dataclass(frozen=True)
class PathView:
    """Projector for one route template.

    Calling the view validates the whole document first, so a missing field
    fails before any row is produced, then returns a lazy ``Projection``.
    """

    template: str
    resource: str
    key_field: str
    steps: tuple[PathStep, ...] = ()
    policy: MissingFieldPolicy | None = None

    @classmethod
    def from_template(
        cls, template: str, policy: MissingFieldPolicy | None = None
    ) -> "PathView":
        """Parse a route template.

        Args:
            template: Route such as ``/docs/{id}/names/{index}``.
            policy: Missing-field policy; defaults to the configured one.

        Raises:
            InvalidViewPathError: Template is not a sequence of
                ``/<name>/{<param>}`` segments.
        """
        matches = PATH_PARAM_RE.findall(template)
        rebuilt = "".join(f"/{name}/{{{param}}}" for name, param in matches)
        if not matches or rebuilt != template.rstrip("/"):
            raise InvalidViewPathError(
                f"Route template '{template}' must be one or more /<name>/{{<param>}} segments"
            )
        if any(not name or not param for name, param in matches):
            raise InvalidViewPathError(f"Route template '{template}' has an empty segment")

        (resource, key_field), *nested = matches
        if key_field == INDEX_PARAM:
            raise InvalidViewPathError(
                f"Route template '{template}' cannot key the document by position"
            )
        steps = tuple(PathStep(collection, param) for collection, param in nested)
        logger.debug("Parsed path view %s with %d nested steps", template, len(steps))
        return cls(
            template=template,
            resource=resource,
            key_field=key_field,
            steps=steps,
            policy=policy,
        )

    @property
    def name(self) -> str:
        return make_path_view_name(self.template)

    def __call__(self, document: Any) -> Projection:
        bound = replace(self, policy=_resolve_policy(self.policy))
        bound.validate(document)
        return Projection(lambda: bound.rows(document))

    def validate(self, document: Any) -> None:
        """Check every field this view reads.

        Raises:
            MissingFieldError: A field is absent under the ``error`` policy.
            InvalidFieldError: A collection field is not a list.
        """
        for _ in self._walk(document, _resolve_policy(self.policy)):
            pass

    def rows(self, document: Any) -> Iterator[EmittedPair]:
        """Generate rows without validating up front."""
        return self._walk(document, _resolve_policy(self.policy))

    def _walk(self, document: Any, policy: MissingFieldPolicy) -> Iterator[EmittedPair]:
        doc_key = require_value(document, self.key_field, self.key_field, policy)
        if not self.steps:
            # Single segment: scalar key, the document is the value
            yield EmittedPair(doc_key, document)
            return
        yield from self._descend(document, "", self.steps, (doc_key,), policy)

    def _descend(
        self,
        record: Any,
        path: str,
        steps: tuple[PathStep, ...],
        key: tuple,
        policy: MissingFieldPolicy,
    ) -> Iterator[EmittedPair]:
        step, rest = steps[0], steps[1:]
        field_path = child_path(path, step.collection)
        items = require_collection(record, step.collection, field_path, policy)
        for position, item in enumerate(items):
            here = item_path(field_path, position)
            if step.is_index:
                component = position
            else:
                component = require_value(item, step.param, child_path(here, step.param), policy)
            if rest:
                yield from self._descend(item, here, rest, key + (component,), policy)
            else:
                yield EmittedPair(key + (component,), item)

    def map_source(self) -> str:
        """Render the equivalent CouchDB JavaScript map function."""
        return f"function(doc){{ {self.map_body()} }}"

    def map_body(self) -> str:
        """Statements of the map function, without the ``function(doc)`` wrapper."""
        if not self.steps:
            return f"emit(doc.{self.key_field}, doc);"

        taken = {"doc"}
        parent = "doc"
        opening = []
        components = [f"doc.{self.key_field}"]
        for step in self.steps:
            var = inflection.singularize(step.collection)
            if var[0].isdigit():
                var = "_" + var
            while (
                var in taken
                or var in JS_RESERVED_WORDS
                or (step.is_index and f"{var}Index" in taken)
            ):
                var += "Item"
            taken.add(var)

            if step.is_index:
                taken.add(f"{var}Index")
                opening.append(f"{parent}.{step.collection}.forEach(function({var}, {var}Index){{")
                components.append(f"{var}Index")
            else:
                opening.append(f"{parent}.{step.collection}.forEach(function({var}){{")
                components.append(f"{var}.{step.param}")
            parent = var

        body = f"emit([{', '.join(components)}], {parent});"
        closing = " ".join("});" for _ in self.steps)
        return f"{' '.join(opening)} {body} {closing}"


@dataclass(frozen=True)
class QueryView:
    """Projector keyed by one top-level field, backing ``?field=`` filters."""

    field: str
    policy: MissingFieldPolicy | None = None

    @property
    def name(self) -> str:
        return make_query_view_name(self.field)

    def __call__(self, document: Any) -> Projection:
        key = require_value(document, self.field, self.field, _resolve_policy(self.policy))
        return Projection(lambda: iter((EmittedPair(key, document),)))

    def map_source(self) -> str:
        return f"function(doc){{ emit(doc.{self.field}, doc); }}"
