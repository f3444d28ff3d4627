"""
Field mapping rules.

Each rule describes how one target field is produced from a source object
(``apply``) and, where the conversion is reversible, how the source value is
recovered from the target field (``invert``). Rules are immutable and hold no
per-call state, so a rule table can be shared freely between mappers and threads.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Optional, Tuple

from app.config import settings
from app.exceptions import FormatError, MappingError, MissingReferenceError
from domain.enums import CollectionKind, MissingPolicy
from domain.mappers.formats import (
    compile_number_pattern,
    format_date,
    format_number,
    parse_date,
    parse_number,
)

logger = logging.getLogger("moviemapper.rules")

_CONTAINERS = {
    CollectionKind.LIST: list,
    CollectionKind.SET: set,
    CollectionKind.TUPLE: tuple,
}


def read_field(obj: Any, name: str) -> Any:
    """Read ``name`` off an object or mapping; absent fields read as None."""
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def resolve_path(obj: Any, path: str) -> Any:
    """Follow a dotted path (``soundtrack.composer``); None at any step yields None."""
    for part in path.split("."):
        obj = read_field(obj, part)
        if obj is None:
            return None
    return obj


class FieldRule:
    """Base class for all mapping rules."""

    invertible = False

    def apply(self, source: Any, field: str) -> Any:
        raise NotImplementedError

    def invert(self, value: Any, field: str) -> Optional[Tuple[str, Any]]:
        """Return ``(source_field, source_value)`` or None for one-directional rules."""
        return None

    def describe(self) -> str:
        return type(self).__name__


@dataclass(frozen=True)
class Copy(FieldRule):
    """Identity copy; ``source`` defaults to the target field name."""

    source: Optional[str] = None

    invertible = True

    def source_field(self, field: str) -> str:
        return self.source or field

    def apply(self, source: Any, field: str) -> Any:
        return read_field(source, self.source_field(field))

    def invert(self, value: Any, field: str) -> Optional[Tuple[str, Any]]:
        return self.source_field(field), value

    def describe(self) -> str:
        return f"{type(self).__name__}({self.source})" if self.source else type(self).__name__


@dataclass(frozen=True)
class Rename(Copy):
    def __post_init__(self):
        if not self.source:
            raise ValueError("Rename requires a source field")


@dataclass(frozen=True)
class Default(FieldRule):
    """Copy that substitutes ``value`` when the source field is null or absent.

    The default is not re-applied on the way back: a null target field stays
    absent on the rebuilt source.
    """

    value: Any
    source: Optional[str] = None

    invertible = True

    def apply(self, source: Any, field: str) -> Any:
        found = read_field(source, self.source or field)
        if found is None:
            logger.debug("Field %s: source empty, using default %r", field, self.value)
            return self.value
        return found

    def invert(self, value: Any, field: str) -> Optional[Tuple[str, Any]]:
        return self.source or field, value

    def describe(self) -> str:
        return f"Default({self.value!r}, source={self.source or '-'})"


@dataclass(frozen=True)
class DateFormat(FieldRule):
    """Render a date as text; ``pattern`` falls back to ``settings.date_pattern``."""

    source: Optional[str] = None
    pattern: Optional[str] = None

    invertible = True

    def effective_pattern(self) -> str:
        return self.pattern or settings.date_pattern

    def apply(self, source: Any, field: str) -> Any:
        value = read_field(source, self.source or field)
        if value is None:
            return None
        try:
            return format_date(value, self.effective_pattern())
        except TypeError as exc:
            raise MappingError(
                f"Field '{field}' expects a date",
                details={"field": field, "type": type(value).__name__},
            ) from exc

    def invert(self, value: Any, field: str) -> Optional[Tuple[str, Any]]:
        try:
            parsed = parse_date(value, self.effective_pattern())
        except ValueError as exc:
            raise FormatError(field, value, str(exc)) from exc
        return self.source or field, parsed

    def describe(self) -> str:
        return f"DateFormat({self.source or '-'}, {self.effective_pattern()!r})"


@dataclass(frozen=True)
class NumberFormat(FieldRule):
    """
    Render a number as text; ``pattern`` falls back to ``settings.number_pattern``.

    Parsed values come back as ``number_type``: int for patterns without fraction
    digits, Decimal otherwise, unless given explicitly.
    """

    source: Optional[str] = None
    pattern: Optional[str] = None
    number_type: Optional[type] = None

    invertible = True

    def effective_pattern(self) -> str:
        return self.pattern or settings.number_pattern

    def parsed_type(self) -> type:
        if self.number_type is not None:
            return self.number_type
        return int if compile_number_pattern(self.effective_pattern()).decimals == 0 else Decimal

    def apply(self, source: Any, field: str) -> Any:
        value = read_field(source, self.source or field)
        if value is None:
            return None
        try:
            return format_number(value, self.effective_pattern())
        except (TypeError, ValueError) as exc:
            raise MappingError(
                f"Field '{field}' expects a finite number",
                details={"field": field, "type": type(value).__name__},
            ) from exc

    def invert(self, value: Any, field: str) -> Optional[Tuple[str, Any]]:
        try:
            parsed = parse_number(value, self.effective_pattern(), self.parsed_type())
        except ValueError as exc:
            raise FormatError(field, value, str(exc)) from exc
        return self.source or field, parsed

    def describe(self) -> str:
        return f"NumberFormat({self.source or '-'}, {self.effective_pattern()!r})"


@dataclass(frozen=True)
class Computed(FieldRule):
    """
    Derive a value from the whole source object.

    ``requires`` lists the dotted source references ``fn`` dereferences. When one
    of them is absent the rule returns None (``MissingPolicy.NULL``) or raises
    MissingReferenceError (``MissingPolicy.RAISE``) without calling ``fn``.
    Computed fields are not written back by inverse mapping.
    """

    fn: Callable[[Any], Any]
    requires: Tuple[str, ...] = ()
    on_missing: MissingPolicy = MissingPolicy.NULL

    def apply(self, source: Any, field: str) -> Any:
        for reference in self.requires:
            if resolve_path(source, reference) is None:
                if self.on_missing == MissingPolicy.RAISE:
                    raise MissingReferenceError(field, reference)
                logger.debug("Field %s: reference %s missing, leaving null", field, reference)
                return None
        return self.fn(source)

    def describe(self) -> str:
        name = getattr(self.fn, "__name__", "fn")
        return f"Computed({name}, requires={list(self.requires)}, on_missing={self.on_missing.value})"


@dataclass(frozen=True)
class Nested(FieldRule):
    """Flatten ``a.b`` onto one target field; one-directional."""

    path: str
    default: Any = None

    def apply(self, source: Any, field: str) -> Any:
        value = resolve_path(source, self.path)
        return self.default if value is None else value

    def describe(self) -> str:
        return f"Nested({self.path})"


@dataclass(frozen=True)
class Ignore(FieldRule):
    """Target field is never populated."""

    def apply(self, source: Any, field: str) -> Any:
        return None


@dataclass(frozen=True)
class Collection(FieldRule):
    """
    Map every element of a source collection through ``mapper``.

    ``kind`` is the target container (a set drops duplicates); ``source_kind``
    the container rebuilt on inverse mapping. Element order is not guaranteed.
    """

    mapper: Any
    source: Optional[str] = None
    kind: CollectionKind = CollectionKind.LIST
    source_kind: CollectionKind = CollectionKind.LIST

    invertible = True

    def _map_elements(self, items: Any, field: str, convert: Callable[[Any], Any]) -> list:
        if isinstance(items, (str, bytes, Mapping)):
            raise MappingError(
                f"Field '{field}' expects a collection",
                details={"field": field, "type": type(items).__name__},
            )
        mapped = []
        for index, item in enumerate(items):
            try:
                mapped.append(convert(item))
            except (FormatError, MissingReferenceError) as exc:
                raise exc.under(f"{field}[{index}]") from exc
        return mapped

    def apply(self, source: Any, field: str) -> Any:
        items = read_field(source, self.source or field)
        if items is None:
            return None
        mapped = self._map_elements(items, field, self.mapper.map_forward)
        return _CONTAINERS[self.kind](mapped)

    def invert(self, value: Any, field: str) -> Optional[Tuple[str, Any]]:
        mapped = self._map_elements(value, field, self.mapper.map_inverse)
        return self.source or field, _CONTAINERS[self.source_kind](mapped)

    def describe(self) -> str:
        name = getattr(self.mapper, "name", type(self.mapper).__name__)
        return f"Collection({self.source or '-'}, via={name}, kind={self.kind.value})"
