"""Unit tests for the query pipeline."""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from catalog_query.application.filtering import FilterFieldSpec, clear_filters
from catalog_query.application.pipeline import CatalogQuery, QueryPipeline, QueryResult, run_query
from catalog_query.application.sorting import SortDirection, SortSpec
from catalog_query.config.settings import QuerySettings
from catalog_query.config.validation import ConfigurationError

SPECS = [
    FilterFieldSpec("search", "text"),
    FilterFieldSpec("type", "select", options=("pow", "tec", "stm")),
    FilterFieldSpec("minLevel", "number"),
    FilterFieldSpec("maxLevel", "number"),
]


def _girls() -> list[dict]:
    return [
        {"id": 1, "name_en": "Kasumi", "name_jp": "かすみ", "type": "tec", "level": 10},
        {"id": 2, "name_en": "Honoka", "name_jp": "ほのか", "type": "pow", "level": 20},
        {"id": 3, "name_en": "Ayane", "name_jp": "あやね", "type": "tec", "level": 35},
        {"id": 4, "name_en": "Marie Rose", "type": "stm", "level": 20},
        {"id": 5, "name_en": "Nyotengu", "type": "pow", "level": 50},
    ]


def _ids(result: QueryResult) -> list[int]:
    return [r["id"] for r in result.items]


class TestQueryPipeline:
    def test_filter_sort_paginate(self) -> None:
        records = [{"name_en": "Kasumi", "level": 10}, {"name_en": "Honoka", "level": 20}]
        result = run_query(
            records,
            [{"key": "minLevel", "type": "number"}],
            CatalogQuery(filter_state={"minLevel": 15}, sort=SortSpec("level"), page=1, limit=10),
        )
        assert [r["name_en"] for r in result.items] == ["Honoka"]
        meta = result.page.metadata
        assert (meta.page, meta.total, meta.total_pages) == (1, 1, 1)
        assert not meta.has_next
        assert not meta.has_prev

    def test_result_records_carry_translations(self) -> None:
        result = run_query(_girls(), SPECS, CatalogQuery(limit=10))
        first = result.items[0]
        assert first["translations"]["en"] == "Kasumi"
        assert first["translations"]["kr"] == "Kasumi"
        assert result.items[3]["translations"]["jp"] == "Marie Rose"

    def test_input_records_not_mutated(self) -> None:
        records = _girls()
        run_query(records, SPECS, CatalogQuery(filter_state={"search": "kas"}))
        assert "translations" not in records[0]
        assert [r["id"] for r in records] == [1, 2, 3, 4, 5]

    def test_search_matches_any_locale(self) -> None:
        result = run_query(_girls(), SPECS, CatalogQuery(filter_state={"search": "すみ"}))
        assert _ids(result) == [1]

    def test_combined_filters(self) -> None:
        state = {"type": "tec", "minLevel": 20, "maxLevel": "", "search": ""}
        assert _ids(run_query(_girls(), SPECS, CatalogQuery(filter_state=state))) == [3]

    def test_multi_key_sort(self) -> None:
        query = CatalogQuery(
            sort=[SortSpec("level", SortDirection.DESC), SortSpec("translations.en")],
            limit=10,
        )
        assert _ids(run_query(_girls(), SPECS, query)) == [5, 3, 2, 4, 1]

    def test_sort_ties_keep_input_order(self) -> None:
        query = CatalogQuery(sort=SortSpec("level", SortDirection.DESC), limit=10)
        assert _ids(run_query(_girls(), SPECS, query)) == [5, 3, 2, 4, 1]

    def test_filtered_holds_every_match(self) -> None:
        result = run_query(_girls(), SPECS, CatalogQuery(page=2, limit=2))
        assert _ids(result) == [3, 4]
        assert result.count == 5
        assert [r["id"] for r in result.filtered] == [1, 2, 3, 4, 5]

    def test_page_beyond_end_is_clamped(self) -> None:
        result = run_query(_girls(), SPECS, CatalogQuery(page=9, limit=2))
        assert result.page.metadata.page == 3
        assert _ids(result) == [5]

    def test_empty_collection(self) -> None:
        result = run_query([], SPECS, CatalogQuery(filter_state={"search": "x"}))
        meta = result.page.metadata
        assert result.items == []
        assert (meta.page, meta.total, meta.total_pages) == (1, 0, 1)

    def test_no_query_returns_first_default_page(self) -> None:
        records = [{"id": i, "name_en": f"Girl {i}"} for i in range(20)]
        result = QueryPipeline(SPECS).run(records)
        assert len(result.items) == 8
        assert result.page.metadata.limit == 8

    def test_cleared_state_matches_everything(self) -> None:
        cleared = clear_filters(SPECS)
        assert _ids(run_query(_girls(), SPECS, CatalogQuery(filter_state=cleared, limit=10))) == [1, 2, 3, 4, 5]

    def test_same_inputs_give_same_result(self) -> None:
        pipeline = QueryPipeline(SPECS)
        query = CatalogQuery(filter_state={"minLevel": 20}, sort=SortSpec("translations.en"), limit=3)
        assert _ids(pipeline.run(_girls(), query)) == _ids(pipeline.run(_girls(), query))


class TestQueryPipelineSettings:
    def test_default_page_size_from_settings(self) -> None:
        settings = QuerySettings(default_page_size=2, max_page_size=4)
        result = run_query(_girls(), SPECS, settings=settings)
        assert _ids(result) == [1, 2]
        assert result.page.metadata.total_pages == 3

    def test_limit_above_max_raises(self) -> None:
        settings = QuerySettings(default_page_size=2, max_page_size=4)
        with pytest.raises(ConfigurationError) as exc_info:
            run_query(_girls(), SPECS, CatalogQuery(limit=5), settings=settings)
        assert exc_info.value.detail == {"limit": 5, "max_page_size": 4}

    def test_zero_limit_raises(self) -> None:
        with pytest.raises(ConfigurationError):
            run_query(_girls(), SPECS, CatalogQuery(limit=0))

    def test_unknown_label(self) -> None:
        settings = QuerySettings(unknown_label="???")
        result = run_query([{"id": 1}], SPECS, settings=settings)
        assert result.items[0]["translations"]["en"] == "???"

    def test_custom_search_key(self) -> None:
        settings = QuerySettings(search_key="q")
        specs = [FilterFieldSpec("q", "text")]
        result = run_query(_girls(), specs, CatalogQuery(filter_state={"q": "あや"}), settings=settings)
        assert _ids(result) == [3]

    def test_query_search_key_overrides_settings(self) -> None:
        specs = [FilterFieldSpec("q", "text"), FilterFieldSpec("name_en", "text")]
        query = CatalogQuery(filter_state={"q": "あや", "name_en": ""}, search_key="q")
        assert _ids(run_query(_girls(), specs, query)) == [3]


class TestQueryPipelineConfiguration:
    def test_unknown_kind_fails_at_construction(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            QueryPipeline([{"key": "mood", "type": "slider"}])
        assert exc_info.value.detail["kind"] == "slider"

    def test_duplicate_key_fails(self) -> None:
        with pytest.raises(ConfigurationError):
            QueryPipeline([FilterFieldSpec("type", "select"), FilterFieldSpec("type", "text")])

    def test_logs_completion(self) -> None:
        with capture_logs() as logs:
            run_query(_girls(), SPECS, CatalogQuery(filter_state={"type": "pow"}))
        completed = [e for e in logs if e["event"] == "query.completed"]
        assert len(completed) == 1
        assert completed[0]["matched"] == 2
        assert completed[0]["active_filters"] == 1
        assert completed[0]["total"] == 5

    def test_sort_specs_normalised(self) -> None:
        assert CatalogQuery().sort_specs == ()
        assert CatalogQuery(sort=SortSpec("a")).sort_specs == (SortSpec("a"),)
        assert CatalogQuery(sort=[SortSpec("a"), SortSpec("b")]).sort_specs == (SortSpec("a"), SortSpec("b"))
