"""Filtering – per-field predicates combined with logical AND.

Rules by kind (inactive fields impose no constraint):

========  =============================================================
text      search key → multi-language match; otherwise case-insensitive
          substring of the record's field (missing field fails)
select    exact equality, numeric when the record value is a number
          (missing field fails)
number    ``>=`` for min fields, ``<=`` for max fields (missing passes)
checkbox  ``True`` requires the predicate / truthy field; ``False`` is
          inactive (missing field fails when active)
range     inclusive, either side open (missing passes)
date      like number, on timestamps (missing passes)
========  =============================================================
"""
from __future__ import annotations

from numbers import Real
from typing import Any, Iterable, Mapping, Sequence, TypeVar

from catalog_query.application.filtering.spec import (
    Bound,
    FieldKind,
    FilterFieldSpec,
    validate_field_specs,
)
from catalog_query.application.filtering.values import (
    BoolValue,
    FilterValue,
    NumberValue,
    RangeValue,
    TextValue,
    coerce_filter_value,
    is_blank,
    to_number,
    to_timestamp,
)
from catalog_query.application.search import matches
from catalog_query.kernel.paths import MISSING, resolve_path
from catalog_query.kernel.specification import AllOf, BaseSpecification
from catalog_query.observability.logging import get_logger

R = TypeVar("R", bound=Mapping[str, Any])

DEFAULT_SEARCH_KEY = "search"

log = get_logger(__name__)


class FieldPredicate(BaseSpecification[Mapping[str, Any]]):
    """One active filter field bound to its coerced value."""

    def __init__(self, spec: FilterFieldSpec, value: FilterValue, *, search_key: str = DEFAULT_SEARCH_KEY) -> None:
        self.spec = spec
        self.value = value
        self._is_search = spec.kind is FieldKind.TEXT and spec.key == search_key

    def is_satisfied_by(self, candidate: Mapping[str, Any]) -> bool:
        spec, value = self.spec, self.value
        match value:
            case TextValue(text) if self._is_search:
                return matches(candidate, text)
            case TextValue(text) if spec.kind is FieldKind.TEXT:
                return _contains(resolve_path(candidate, spec.path), text)
            case TextValue(text):
                return _equals(resolve_path(candidate, spec.path), text)
            case BoolValue(flag):
                return not flag or self._check(candidate)
            case NumberValue(number):
                actual = self._comparable(candidate)
                if actual is None:
                    return True
                return actual >= number if spec.bound is Bound.MIN else actual <= number
            case RangeValue():
                actual = self._comparable(candidate)
                return actual is None or value.contains(actual)
        return True

    def _check(self, candidate: Mapping[str, Any]) -> bool:
        if self.spec.predicate is not None:
            return bool(self.spec.predicate(candidate))
        return bool(resolve_path(candidate, self.spec.path))

    def _comparable(self, candidate: Mapping[str, Any]) -> float | None:
        raw = resolve_path(candidate, self.spec.path)
        if self.spec.kind is FieldKind.NUMBER:
            return to_number(raw)
        return to_timestamp(raw)

    def __repr__(self) -> str:  # pragma: no cover
        return f"FieldPredicate({self.spec.key!r}, {self.value!r})"


def _contains(actual: Any, text: str) -> bool:
    if actual is MISSING:
        return False
    return text.casefold() in str(actual).casefold()


def _equals(actual: Any, text: str) -> bool:
    if actual is MISSING:
        return False
    if isinstance(actual, str):
        return actual == text
    if isinstance(actual, Real) and not isinstance(actual, bool):
        number = to_number(text)
        if number is not None:
            return actual == number
    return str(actual) == text


def build_predicate(
    field_specs: Iterable[FilterFieldSpec | Mapping[str, Any]],
    filter_state: Mapping[str, Any],
    *,
    search_key: str = DEFAULT_SEARCH_KEY,
) -> AllOf[Mapping[str, Any]]:
    """Conjunction of the active fields of *filter_state*.

    Raises :class:`ConfigurationError` for malformed *field_specs*.
    """
    predicates: list[BaseSpecification[Mapping[str, Any]]] = []
    for spec in validate_field_specs(field_specs):
        raw = filter_state.get(spec.key)
        value = coerce_filter_value(spec, raw, filter_state)
        if value is None:
            if not is_blank(raw) and raw is not False:
                log.debug("filters.ignored_value", key=spec.key, kind=spec.kind.value, value=raw)
            continue
        predicates.append(FieldPredicate(spec, value, search_key=search_key))
    return AllOf(predicates)


def evaluate(
    record: Mapping[str, Any],
    field_specs: Iterable[FilterFieldSpec | Mapping[str, Any]],
    filter_state: Mapping[str, Any],
    *,
    search_key: str = DEFAULT_SEARCH_KEY,
) -> bool:
    """True when *record* passes every active field of *filter_state*."""
    return build_predicate(field_specs, filter_state, search_key=search_key).is_satisfied_by(record)


def filter_records(
    records: Iterable[R],
    field_specs: Iterable[FilterFieldSpec | Mapping[str, Any]],
    filter_state: Mapping[str, Any],
    *,
    search_key: str = DEFAULT_SEARCH_KEY,
) -> list[R]:
    """Records passing the filter, in input order."""
    predicate = build_predicate(field_specs, filter_state, search_key=search_key)
    if not len(predicate):
        return list(records)
    return [record for record in records if predicate.is_satisfied_by(record)]


def has_active_filters(filter_state: Mapping[str, Any]) -> bool:
    """Whether the filter badge should show: any true flag, non-blank text or positive number."""
    for value in filter_state.values():
        if isinstance(value, bool):
            if value:
                return True
        elif isinstance(value, str):
            if value.strip():
                return True
        elif isinstance(value, (int, float)):
            if value > 0:
                return True
        elif isinstance(value, (list, tuple)):
            if any(not is_blank(part) for part in value):
                return True
    return False


def clear_filters(field_specs: Sequence[FilterFieldSpec | Mapping[str, Any]]) -> dict[str, Any]:
    """Filter state with every field of *field_specs* reset to its inactive default."""
    return {
        spec.key: False if spec.kind is FieldKind.CHECKBOX else ""
        for spec in validate_field_specs(field_specs)
    }


__all__ = [
    "DEFAULT_SEARCH_KEY",
    "FieldPredicate",
    "build_predicate",
    "clear_filters",
    "evaluate",
    "filter_records",
    "has_active_filters",
]
