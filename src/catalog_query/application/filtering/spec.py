"""Filtering – FieldKind, Bound, FilterFieldSpec."""
from __future__ import annotations

import dataclasses
import re
from enum import Enum
from typing import Any, Callable, Iterable, Mapping

from catalog_query.config.validation import ConfigurationError
from catalog_query.observability.logging import get_logger

log = get_logger(__name__)

_BOUND_PREFIX = re.compile(r"^(min|max)(?:_(?=[A-Za-z])|(?=[A-Z]))")


class FieldKind(str, Enum):
    """Recognised filter field kinds; anything else is a configuration error."""

    TEXT = "text"
    SELECT = "select"
    NUMBER = "number"
    CHECKBOX = "checkbox"
    RANGE = "range"
    DATE = "date"

    @classmethod
    def parse(cls, value: "str | FieldKind", *, key: str | None = None) -> "FieldKind":
        if isinstance(value, FieldKind):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            log.error("filters.unknown_kind", key=key, kind=value)
            raise ConfigurationError(
                f"Unknown filter kind {value!r} for field {key!r}",
                detail={"key": key, "kind": value, "allowed": [k.value for k in cls]},
            ) from None


class Bound(str, Enum):
    """Which side a single-bounded numeric or date filter constrains."""

    MIN = "min"
    MAX = "max"

    @classmethod
    def parse(cls, value: "str | Bound", *, key: str | None = None) -> "Bound":
        if isinstance(value, Bound):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ConfigurationError(
                f"Unknown bound {value!r} for field {key!r}",
                detail={"key": key, "bound": value},
            ) from None


_SINGLE_BOUNDED = frozenset({FieldKind.NUMBER, FieldKind.DATE})


def infer_bound(key: str) -> Bound:
    """``minLevel`` → MIN, ``maxLevel`` → MAX; unprefixed keys default to MIN."""
    match = _BOUND_PREFIX.match(key)
    if match and match.group(1) == "max":
        return Bound.MAX
    return Bound.MIN


def infer_field(key: str) -> str:
    """Record path a filter key reads by default: ``minPow`` → ``pow``, ``max_level`` → ``level``."""
    stripped = _BOUND_PREFIX.sub("", key, count=1)
    if stripped == key:
        return key
    return stripped[:1].lower() + stripped[1:]


@dataclasses.dataclass(frozen=True)
class FilterFieldSpec:
    """Declarative description of one filter control.

    It holds no data: it says how the value stored under ``key`` in a filter
    state is interpreted against each record.

    Attributes
    ----------
    key:
        Key in the filter state.
    kind:
        One of :class:`FieldKind`.
    field:
        Dotted record path the filter reads.  Defaults to ``key`` with any
        ``min``/``max`` prefix removed (``minPow`` → ``pow``).
    bound:
        For ``number`` and ``date`` fields, which side is constrained.
        Inferred from the key prefix, ``min`` when there is none.
    options:
        Choices offered by a ``select`` control.
    minimum, maximum:
        Input limits shown by the UI; not enforced on the data.
    predicate:
        Optional record test used by ``checkbox`` fields instead of the
        truthiness of ``field``.
    """

    key: str
    kind: FieldKind
    field: str | None = None
    bound: Bound | None = None
    options: tuple[str, ...] = ()
    minimum: float | None = None
    maximum: float | None = None
    predicate: Callable[[Mapping[str, Any]], bool] | None = dataclasses.field(default=None, compare=False)
    label: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.key, str) or not self.key:
            raise ConfigurationError("Filter key must be a non-empty string", detail={"key": self.key})
        kind = FieldKind.parse(self.kind, key=self.key)
        object.__setattr__(self, "kind", kind)
        if self.field is None:
            object.__setattr__(self, "field", infer_field(self.key) if kind in _SINGLE_BOUNDED else self.key)
        if kind in _SINGLE_BOUNDED:
            bound = infer_bound(self.key) if self.bound is None else Bound.parse(self.bound, key=self.key)
            object.__setattr__(self, "bound", bound)
        elif self.bound is not None:
            raise ConfigurationError(
                f"Filter {self.key!r} of kind {kind.value!r} does not take a bound",
                detail={"key": self.key, "kind": kind.value},
            )
        object.__setattr__(self, "options", tuple(self.options))

    @property
    def path(self) -> str:
        return self.field or self.key

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FilterFieldSpec":
        """Build from UI configuration data; ``type`` is accepted for ``kind``."""
        kind = data.get("kind", data.get("type"))
        if kind is None:
            raise ConfigurationError("Filter field is missing its kind", detail={"key": data.get("key")})
        options = tuple(
            opt.get("value") if isinstance(opt, Mapping) else opt
            for opt in data.get("options") or ()
        )
        return cls(
            key=data.get("key", ""),
            kind=kind,
            field=data.get("field"),
            bound=data.get("bound"),
            options=options,
            minimum=data.get("min", data.get("minimum")),
            maximum=data.get("max", data.get("maximum")),
            predicate=data.get("predicate"),
            label=data.get("label", ""),
        )


def validate_field_specs(
    specs: Iterable["FilterFieldSpec | Mapping[str, Any]"],
) -> tuple[FilterFieldSpec, ...]:
    """Normalise *specs* and reject duplicate keys."""
    normalized: list[FilterFieldSpec] = []
    seen: set[str] = set()
    for spec in specs:
        if isinstance(spec, Mapping):
            spec = FilterFieldSpec.from_mapping(spec)
        elif not isinstance(spec, FilterFieldSpec):
            raise ConfigurationError(
                f"Expected FilterFieldSpec, got {type(spec).__name__}",
                detail={"type": type(spec).__name__},
            )
        if spec.key in seen:
            log.error("filters.duplicate_key", key=spec.key)
            raise ConfigurationError(f"Duplicate filter key {spec.key!r}", detail={"key": spec.key})
        seen.add(spec.key)
        normalized.append(spec)
    return tuple(normalized)


__all__ = ["Bound", "FieldKind", "FilterFieldSpec", "infer_bound", "infer_field", "validate_field_specs"]
