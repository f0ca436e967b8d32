"""Unit tests for the catalog page filter presets."""

from __future__ import annotations

from catalog_query.application.filtering import Bound, FieldKind, clear_filters, filter_records
from catalog_query.application.filtering.presets import (
    CHARACTER_SORT_OPTIONS,
    EVENT_SORT_OPTIONS,
    STAT_NAMES,
    accessory_filters,
    character_filters,
    event_filters,
    stat_filters,
    swimsuit_filters,
)
from catalog_query.application.translation import augment_all
from catalog_query.kernel.specification import LambdaSpecification


def _keys(specs) -> list[str]:
    return [s.key for s in specs]


class TestStatFilters:
    def test_one_minimum_per_stat(self) -> None:
        specs = stat_filters()
        assert _keys(specs) == ["minPow", "minTec", "minStm", "minApl"]
        assert [s.path for s in specs] == [f"stats.{name}" for name in STAT_NAMES]
        assert all(s.kind is FieldKind.NUMBER and s.bound is Bound.MIN for s in specs)

    def test_custom_path(self) -> None:
        assert stat_filters("base_stats")[0].path == "base_stats.pow"

    def test_filters_on_nested_stats(self) -> None:
        records = [{"id": 1, "stats": {"pow": 120}}, {"id": 2, "stats": {"pow": 80}}]
        assert [r["id"] for r in filter_records(records, stat_filters(), {"minPow": 100})] == [1]


class TestCharacterFilters:
    def test_keys_are_unique_and_clearable(self) -> None:
        specs = character_filters()
        keys = _keys(specs)
        assert len(keys) == len(set(keys))
        cleared = clear_filters(specs)
        assert cleared["hasSwimsuit"] is False
        assert cleared["search"] == ""

    def test_level_bounds(self) -> None:
        by_key = {s.key: s for s in character_filters()}
        assert by_key["minLevel"].path == "level"
        assert by_key["minLevel"].bound is Bound.MIN
        assert by_key["maxLevel"].bound is Bound.MAX

    def test_has_swimsuit_checkbox(self) -> None:
        records = [
            {"id": 1, "swimsuits": ["s1"]},
            {"id": 2, "swimsuits": []},
            {"id": 3},
        ]
        result = filter_records(records, character_filters(), {"hasSwimsuit": True})
        assert [r["id"] for r in result] == [1]

    def test_checkbox_predicates_are_named_specifications(self) -> None:
        by_key = {s.key: s for s in character_filters()}
        predicate = by_key["hasAccessories"].predicate
        assert isinstance(predicate, LambdaSpecification)
        assert predicate.name == "has_accessories"
        assert predicate.is_satisfied_by({"accessories": {"hat": 1}})
        assert not predicate.is_satisfied_by({"accessories": ()})

    def test_unchecked_checkbox_keeps_everything(self) -> None:
        records = [{"id": 1}, {"id": 2, "swimsuits": ["s"]}]
        assert len(filter_records(records, character_filters(), {"hasSwimsuit": False})) == 2

    def test_search_and_type(self) -> None:
        records = augment_all([
            {"id": 1, "name_en": "Kasumi", "type": "tec"},
            {"id": 2, "name_en": "Kokoro", "type": "pow"},
            {"id": 3, "name_en": "Ayane", "type": "tec"},
        ])
        result = filter_records(records, character_filters(), {"search": "k", "type": "tec"})
        assert [r["id"] for r in result] == [1]


class TestSwimsuitFilters:
    def test_select_options_are_strings(self) -> None:
        specs = swimsuit_filters(["SSR", "SR"], ["Kasumi"], release_years=[2023, 2024])
        by_key = {s.key: s for s in specs}
        assert by_key["releaseYear"].options == ("2023", "2024")
        assert by_key["character"].path == "character.name_en"

    def test_release_year_matches_numeric_value(self) -> None:
        records = [{"id": 1, "releaseYear": 2023}, {"id": 2, "releaseYear": 2024}]
        specs = swimsuit_filters(["SSR"], [], release_years=[2023, 2024])
        assert [r["id"] for r in filter_records(records, specs, {"releaseYear": "2024"})] == [2]

    def test_character_nested_select(self) -> None:
        records = [
            {"id": 1, "character": {"name_en": "Kasumi"}},
            {"id": 2, "character": {"name_en": "Honoka"}},
        ]
        specs = swimsuit_filters(["SSR"], ["Kasumi", "Honoka"])
        assert [r["id"] for r in filter_records(records, specs, {"character": "Honoka"})] == [2]


class TestAccessoryFilters:
    def test_includes_stats(self) -> None:
        keys = _keys(accessory_filters(["SSR"], ["hat"]))
        assert {"rarity", "type", "version", "minPow", "minApl"} <= set(keys)


class TestEventFilters:
    def test_date_bounds(self) -> None:
        by_key = {s.key: s for s in event_filters()}
        assert by_key["startDate"].path == "start_date"
        assert by_key["startDate"].bound is Bound.MIN
        assert by_key["endDate"].bound is Bound.MAX

    def test_date_window(self) -> None:
        records = [
            {"id": 1, "start_date": "2024-01-01", "end_date": "2024-01-10"},
            {"id": 2, "start_date": "2024-02-01", "end_date": "2024-02-20"},
            {"id": 3, "start_date": "2024-03-01", "end_date": "2024-03-10"},
        ]
        state = {"startDate": "2024-01-15", "endDate": "2024-02-28"}
        assert [r["id"] for r in filter_records(records, event_filters(), state)] == [2]


class TestSortOptions:
    def test_name_sorts_on_english_view(self) -> None:
        assert CHARACTER_SORT_OPTIONS[0].key == "translations.en"
        assert {o.key for o in EVENT_SORT_OPTIONS} >= {"start_date", "end_date"}
