"""Filtering – ready-made filter and sort configurations for catalog pages."""
from __future__ import annotations

from typing import Any, Mapping, Sequence

from catalog_query.application.filtering.spec import FieldKind, FilterFieldSpec
from catalog_query.application.sorting import SortOption
from catalog_query.kernel.specification import LambdaSpecification

STAT_NAMES: tuple[str, ...] = ("pow", "tec", "stm", "apl")


def _search(label: str = "Search") -> FilterFieldSpec:
    return FilterFieldSpec("search", FieldKind.TEXT, label=label)


def _select(key: str, options: Sequence[Any], label: str, field: str | None = None) -> FilterFieldSpec:
    return FilterFieldSpec(key, FieldKind.SELECT, field=field, options=tuple(str(o) for o in options), label=label)


def stat_filters(path: str = "stats") -> list[FilterFieldSpec]:
    """``minPow`` … ``minApl`` reading ``<path>.pow`` … ``<path>.apl``."""
    return [
        FilterFieldSpec(
            f"min{stat.capitalize()}",
            FieldKind.NUMBER,
            field=f"{path}.{stat}",
            minimum=0,
            label=f"Min {stat.upper()}",
        )
        for stat in STAT_NAMES
    ]


def _has_any(path: str) -> LambdaSpecification[Mapping[str, Any]]:
    def _check(record: Mapping[str, Any]) -> bool:
        value = record.get(path)
        if isinstance(value, (list, tuple, set, dict)):
            return len(value) > 0
        return bool(value)

    return LambdaSpecification(_check, name=f"has_{path}")


def character_filters(types: Sequence[str] = ("pow", "tec", "stm")) -> list[FilterFieldSpec]:
    return [
        _search(),
        _select("type", types, "Type"),
        FilterFieldSpec("minLevel", FieldKind.NUMBER, minimum=1, label="Min Level"),
        FilterFieldSpec("maxLevel", FieldKind.NUMBER, minimum=1, label="Max Level"),
        FilterFieldSpec("hasSwimsuit", FieldKind.CHECKBOX, predicate=_has_any("swimsuits"), label="Has Swimsuit"),
        FilterFieldSpec(
            "hasAccessories", FieldKind.CHECKBOX, predicate=_has_any("accessories"), label="Has Accessories"
        ),
        *stat_filters(),
    ]


def swimsuit_filters(
    rarities: Sequence[str],
    characters: Sequence[str],
    release_years: Sequence[Any] = (),
    versions: Sequence[str] = (),
) -> list[FilterFieldSpec]:
    return [
        _search(),
        _select("character", characters, "Character", field="character.name_en"),
        _select("rarity", rarities, "Rarity"),
        _select("releaseYear", release_years, "Release Year"),
        _select("version", versions, "Version"),
        FilterFieldSpec("hasSkills", FieldKind.CHECKBOX, predicate=_has_any("skills"), label="Has Skills"),
        *stat_filters(),
    ]


def accessory_filters(
    rarities: Sequence[str],
    types: Sequence[str],
    versions: Sequence[str] = (),
) -> list[FilterFieldSpec]:
    return [
        _search(),
        _select("rarity", rarities, "Rarity"),
        _select("type", types, "Type"),
        _select("version", versions, "Version"),
        *stat_filters(),
    ]


def event_filters(statuses: Sequence[str] = ("upcoming", "active", "ended")) -> list[FilterFieldSpec]:
    return [
        _search(),
        _select("status", statuses, "Status"),
        FilterFieldSpec("startDate", FieldKind.DATE, field="start_date", label="Starts after"),
        FilterFieldSpec("endDate", FieldKind.DATE, field="end_date", bound="max", label="Ends before"),
    ]


CHARACTER_SORT_OPTIONS: tuple[SortOption, ...] = (
    SortOption("translations.en", "Name"),
    SortOption("type", "Type"),
    SortOption("level", "Level"),
    SortOption("total", "Total Power"),
)

SWIMSUIT_SORT_OPTIONS: tuple[SortOption, ...] = (
    SortOption("translations.en", "Name"),
    SortOption("rarity_rank", "Rarity"),
    SortOption("total", "Stats"),
    SortOption("release_date_gl", "Release Date"),
)

ITEM_SORT_OPTIONS: tuple[SortOption, ...] = (
    SortOption("translations.en", "Name"),
    SortOption("type", "Type"),
    SortOption("rarity_rank", "Rarity"),
    SortOption("total", "Stats"),
)

EVENT_SORT_OPTIONS: tuple[SortOption, ...] = (
    SortOption("translations.en", "Name"),
    SortOption("start_date", "Start Date"),
    SortOption("end_date", "End Date"),
)


__all__ = [
    "CHARACTER_SORT_OPTIONS",
    "EVENT_SORT_OPTIONS",
    "ITEM_SORT_OPTIONS",
    "STAT_NAMES",
    "SWIMSUIT_SORT_OPTIONS",
    "accessory_filters",
    "character_filters",
    "event_filters",
    "stat_filters",
    "swimsuit_filters",
]
