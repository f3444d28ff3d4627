"""
Generic mapping engine.

A ``Mapper`` pairs a source type with a target type and a rule table keyed by
target field name. Target fields the table does not mention are copied from the
same-named source field. The same table drives both directions: ``map_forward``
builds a new target from a source, ``map_inverse`` builds a new source from a
target using only the invertible rules.
"""

import dataclasses
import logging
from types import MappingProxyType
from typing import Any, Generic, Iterable, List, Mapping, Optional, Tuple, TypeVar

from pydantic import ValidationError

from app.exceptions import MappingError
from domain.mappers.rules import Copy, FieldRule, read_field

logger = logging.getLogger("moviemapper.engine")

S = TypeVar("S")
T = TypeVar("T")


def declared_fields(cls: type) -> Tuple[str, ...]:
    """Field names of a pydantic model or dataclass; empty for anything else."""
    model_fields = getattr(cls, "model_fields", None)
    if isinstance(model_fields, Mapping):
        return tuple(model_fields)
    if dataclasses.is_dataclass(cls):
        return tuple(f.name for f in dataclasses.fields(cls))
    return ()


class Mapper(Generic[S, T]):
    """Maps ``source_type`` instances to ``target_type`` instances and back."""

    def __init__(
        self,
        source_type: type,
        target_type: type,
        rules: Optional[Mapping[str, FieldRule]] = None,
        name: Optional[str] = None,
    ):
        self.source_type = source_type
        self.target_type = target_type
        self.name = name or f"{source_type.__name__}->{target_type.__name__}"

        explicit = dict(rules or {})
        for field, rule in explicit.items():
            if not isinstance(rule, FieldRule):
                raise TypeError(
                    f"{self.name}: rule for '{field}' must be a FieldRule, got {type(rule).__name__}"
                )

        target_fields = declared_fields(target_type)
        if target_fields:
            unknown = sorted(set(explicit) - set(target_fields))
            if unknown:
                raise ValueError(f"{self.name}: rules for unknown target fields {unknown}")
            table = {field: explicit.get(field, Copy()) for field in target_fields}
        else:
            table = explicit

        self._rules = MappingProxyType(table)
        logger.debug(
            "Mapper %s: %s",
            self.name,
            ", ".join(f"{f}={r.describe()}" for f, r in table.items()),
        )

    @property
    def rules(self) -> Mapping[str, FieldRule]:
        """Read-only rule table, implicit copies included."""
        return self._rules

    def invertible_fields(self) -> Tuple[str, ...]:
        return tuple(f for f, rule in self._rules.items() if rule.invertible)

    def map_forward(self, source: Optional[S]) -> Optional[T]:
        """Build a new target from ``source``; None maps to None."""
        if source is None:
            return None
        try:
            values = {field: rule.apply(source, field) for field, rule in self._rules.items()}
            target = self._build(self.target_type, values)
        except MappingError as exc:
            logger.warning("Mapper %s: forward mapping failed: %s", self.name, exc)
            raise
        logger.debug("Mapper %s: mapped %s forward", self.name, type(source).__name__)
        return target

    def map_inverse(self, target: Optional[T]) -> Optional[S]:
        """
        Build a new source from ``target``.

        Only invertible rules take part. Null target fields are left out, so
        the rebuilt source keeps its own defaults for them.
        """
        if target is None:
            return None
        values = {}
        try:
            for field, rule in self._rules.items():
                if not rule.invertible:
                    continue
                raw = read_field(target, field)
                if raw is None:
                    continue
                source_field, value = rule.invert(raw, field)
                if value is not None:
                    values[source_field] = value
            source = self._build(self.source_type, values)
        except MappingError as exc:
            logger.warning("Mapper %s: inverse mapping failed: %s", self.name, exc)
            raise
        logger.debug("Mapper %s: mapped %s back", self.name, type(target).__name__)
        return source

    def map_forward_many(self, sources: Iterable[S]) -> List[T]:
        return [self.map_forward(source) for source in sources]

    def _build(self, cls: type, values: dict) -> Any:
        try:
            return cls(**values)
        except ValidationError as exc:
            raise MappingError(
                f"{self.name}: {cls.__name__} rejected mapped values",
                details={"errors": exc.errors(include_url=False)},
            ) from exc
        except TypeError as exc:
            raise MappingError(
                f"{self.name}: cannot construct {cls.__name__}: {exc}",
                details={"fields": sorted(values)},
            ) from exc

    def __repr__(self) -> str:
        return f"Mapper({self.name!r}, fields={list(self._rules)})"
