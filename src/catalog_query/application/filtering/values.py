"""Filtering – typed filter values and coercion of raw UI input.

Filter state arrives from a live-filtering UI, so a value the user is still
typing (``"1e"`` in a number box) is not an error: it coerces to ``None``
and the field imposes no constraint.
"""
from __future__ import annotations

import dataclasses
import math
from datetime import UTC, date, datetime, time
from numbers import Real
from typing import Any, Mapping, Union

from catalog_query.application.filtering.spec import FieldKind, FilterFieldSpec
from catalog_query.kernel.paths import MISSING


@dataclasses.dataclass(frozen=True, slots=True)
class TextValue:
    text: str


@dataclasses.dataclass(frozen=True, slots=True)
class NumberValue:
    number: float


@dataclasses.dataclass(frozen=True, slots=True)
class BoolValue:
    flag: bool


@dataclasses.dataclass(frozen=True, slots=True)
class RangeValue:
    """Inclusive range; either side may be open (``None``)."""

    low: float | None
    high: float | None

    def contains(self, value: float) -> bool:
        if self.low is not None and value < self.low:
            return False
        if self.high is not None and value > self.high:
            return False
        return True


FilterValue = Union[TextValue, NumberValue, BoolValue, RangeValue]

_TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})
_FALSE_STRINGS = frozenset({"false", "0", "no", "off", ""})


def is_blank(raw: Any) -> bool:
    """``None``, ``MISSING`` and whitespace-only strings carry no value."""
    if raw is None or raw is MISSING:
        return True
    return isinstance(raw, str) and not raw.strip()


def to_number(raw: Any) -> float | None:
    """Finite float for numeric input, ``None`` for anything else."""
    if isinstance(raw, bool) or is_blank(raw):
        return None
    if isinstance(raw, Real):
        number = float(raw)
    elif isinstance(raw, str):
        try:
            number = float(raw.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number):
        return None
    return number


def to_timestamp(raw: Any) -> float | None:
    """POSIX timestamp for dates, datetimes, ISO strings and epoch numbers.

    Naive datetimes and plain dates are taken as UTC.
    """
    if isinstance(raw, datetime):
        moment = raw if raw.tzinfo is not None else raw.replace(tzinfo=UTC)
        return moment.timestamp()
    if isinstance(raw, date):
        return datetime.combine(raw, time.min, tzinfo=UTC).timestamp()
    if isinstance(raw, str) and not is_blank(raw):
        text = raw.strip()
        try:
            return to_timestamp(datetime.fromisoformat(text))
        except ValueError:
            return to_number(text)
    return to_number(raw)


def to_flag(raw: Any) -> bool | None:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        lowered = raw.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
        return None
    if isinstance(raw, Real):
        return bool(raw)
    return None


def _range_parts(raw: Any, state: Mapping[str, Any], key: str) -> tuple[Any, Any]:
    if isinstance(raw, (list, tuple)) and len(raw) == 2:
        return raw[0], raw[1]
    if isinstance(raw, Mapping):
        return raw.get("min"), raw.get("max")
    return state.get(f"{key}Min"), state.get(f"{key}Max")


def coerce_filter_value(
    spec: FilterFieldSpec,
    raw: Any,
    state: Mapping[str, Any] | None = None,
) -> FilterValue | None:
    """Coerce *raw* into the typed value for *spec*, or ``None`` for no constraint.

    ``range`` fields also read the ``<key>Min``/``<key>Max`` entries of
    *state* when *raw* is not itself a pair; ``date`` fields accept a pair to
    bound both sides.
    """
    kind = spec.kind
    if kind is FieldKind.TEXT or kind is FieldKind.SELECT:
        if isinstance(raw, bool) or is_blank(raw):
            return None
        if isinstance(raw, (str, Real)):
            return TextValue(str(raw))
        return None

    if kind is FieldKind.NUMBER:
        number = to_number(raw)
        return None if number is None else NumberValue(number)

    if kind is FieldKind.CHECKBOX:
        flag = to_flag(raw)
        return BoolValue(True) if flag else None

    if kind is FieldKind.DATE:
        if isinstance(raw, (list, tuple, Mapping)):
            low, high = _range_parts(raw, {}, spec.key)
            bounded = RangeValue(to_timestamp(low), to_timestamp(high))
            return None if bounded.low is None and bounded.high is None else bounded
        stamp = to_timestamp(raw)
        return None if stamp is None else NumberValue(stamp)

    low, high = _range_parts(raw, state or {}, spec.key)
    bounded = RangeValue(to_timestamp(low), to_timestamp(high))
    if bounded.low is None and bounded.high is None:
        return None
    return bounded


__all__ = [
    "BoolValue",
    "FilterValue",
    "NumberValue",
    "RangeValue",
    "TextValue",
    "coerce_filter_value",
    "is_blank",
    "to_flag",
    "to_number",
    "to_timestamp",
]
