"""Sorting – derived sort keys for catalog entities.

Pages that order by "total power" or rarity compute the key up front and
attach it as a plain field, so the generic sorter keeps ties in insertion
order.
"""
from __future__ import annotations

from numbers import Real
from typing import Any, Callable, Iterable, Mapping

from catalog_query.kernel.paths import MISSING, resolve_path

RARITY_ORDER: dict[str, int] = {"SSR+": 5, "SSR": 4, "SR": 3, "R": 2, "N": 1}


def rarity_rank(record: Mapping[str, Any], field: str = "rarity") -> int:
    """Numeric rank of the record's rarity; unknown rarities rank 0."""
    value = resolve_path(record, field)
    if not isinstance(value, str):
        return 0
    return RARITY_ORDER.get(value.strip().upper(), 0)


def stats_total(record: Mapping[str, Any], field: str = "stats") -> float:
    """Sum of the numeric values under *field*; non-numeric entries are skipped."""
    stats = resolve_path(record, field)
    if stats is MISSING or not isinstance(stats, Mapping):
        return 0
    return sum(
        value for value in stats.values()
        if isinstance(value, Real) and not isinstance(value, bool) and value == value
    )


def with_derived_keys(
    records: Iterable[Mapping[str, Any]],
    **derivers: Callable[[Mapping[str, Any]], Any],
) -> list[dict[str, Any]]:
    """Copy each record with one extra field per deriver.

    Example::

        rows = with_derived_keys(swimsuits, total=stats_total, rarity_rank=rarity_rank)
        sort_records(rows, SortSpec("total", SortDirection.DESC))
    """
    out: list[dict[str, Any]] = []
    for record in records:
        row = dict(record)
        for name, derive in derivers.items():
            row[name] = derive(record)
        out.append(row)
    return out


__all__ = ["RARITY_ORDER", "rarity_rank", "stats_total", "with_derived_keys"]
