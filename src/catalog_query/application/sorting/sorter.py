"""Sorting – stable, type-aware record ordering.

Comparison rules:

* both values strings → case-insensitive, locale-aware collation;
* both values numbers → numeric order;
* anything else → collation of ``str()`` of each value.

A missing (or ``None``/NaN) value stands in for the minimal value of the
other side's type – ``""`` against strings, ``-inf`` against numbers – so
malformed records sort first ascending instead of raising.  Descending order
negates the comparator; equal keys keep their input order either way.
"""
from __future__ import annotations

import functools
import locale
import math
from numbers import Real
from typing import Any, Iterable, Sequence, TypeVar

from catalog_query.application.sorting.spec import SortSpec
from catalog_query.kernel.paths import MISSING, resolve_path

T = TypeVar("T")


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _is_missing(value: Any) -> bool:
    if value is MISSING or value is None:
        return True
    return _is_number(value) and math.isnan(value)


def _minimal_like(other: Any) -> Any:
    if _is_number(other):
        return -math.inf
    return ""


def _collation_key(text: str) -> str:
    # strxfrm rejects embedded NUL characters
    return locale.strxfrm(text.casefold().replace("\x00", ""))


def _collate(a: str, b: str) -> int:
    ka, kb = _collation_key(a), _collation_key(b)
    return (ka > kb) - (ka < kb)


def compare_values(a: Any, b: Any) -> int:
    """Three-way comparison of two resolved sort values (-1, 0 or 1)."""
    a_missing, b_missing = _is_missing(a), _is_missing(b)
    if a_missing and b_missing:
        return 0
    if a_missing:
        a = _minimal_like(b)
    elif b_missing:
        b = _minimal_like(a)

    if isinstance(a, str) and isinstance(b, str):
        return _collate(a, b)
    if _is_number(a) and _is_number(b):
        return (a > b) - (a < b)
    return _collate(str(a), str(b))


def sort_records(records: Iterable[T], sort_spec: SortSpec | None) -> list[T]:
    """Return *records* ordered by *sort_spec*; ``None`` keeps input order."""
    items = list(records)
    if sort_spec is None:
        return items
    return multi_sort(items, [sort_spec])


def multi_sort(records: Iterable[T], sort_specs: Sequence[SortSpec]) -> list[T]:
    """Order by several criteria; later specs only break ties of earlier ones."""
    items = list(records)
    if not sort_specs:
        return items
    resolved = [
        tuple(resolve_path(item, spec.key) for spec in sort_specs)
        for item in items
    ]
    signs = [spec.direction.sign for spec in sort_specs]

    def _compare(i: int, j: int) -> int:
        for a, b, sign in zip(resolved[i], resolved[j], signs):
            result = compare_values(a, b)
            if result:
                return result * sign
        return 0

    order = sorted(range(len(items)), key=functools.cmp_to_key(_compare))
    return [items[i] for i in order]


__all__ = ["compare_values", "multi_sort", "sort_records"]
