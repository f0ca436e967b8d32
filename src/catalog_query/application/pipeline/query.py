"""Pipeline – augment → filter → sort → paginate.

Every run takes its inputs by value and returns a fresh result.  Callers
that trigger overlapping runs (rapid filter changes) keep the result of the
most recent run and discard the rest.
"""
from __future__ import annotations

import dataclasses
import itertools
import time
from typing import Any, Generic, Iterable, Mapping, Sequence, TypeVar

from catalog_query.application.filtering import FilterFieldSpec, build_predicate, validate_field_specs
from catalog_query.application.pagination import Page, paginate
from catalog_query.application.sorting import SortSpec, multi_sort
from catalog_query.application.translation import augment_all
from catalog_query.config.settings import QuerySettings
from catalog_query.config.validation import ConfigurationError
from catalog_query.observability.logging import bound_query_context, get_logger

T = TypeVar("T")

log = get_logger(__name__)

_run_ids = itertools.count(1)


@dataclasses.dataclass(frozen=True)
class CatalogQuery:
    """Inputs of one pipeline run.

    ``sort`` takes one :class:`SortSpec` or a sequence of them (applied
    lexicographically).  ``limit=None`` uses the configured default page size
    and ``search_key=None`` the configured search field.
    """

    filter_state: Mapping[str, Any] = dataclasses.field(default_factory=dict)
    sort: SortSpec | Sequence[SortSpec] | None = None
    page: int = 1
    limit: int | None = None
    search_key: str | None = None

    @property
    def sort_specs(self) -> tuple[SortSpec, ...]:
        if self.sort is None:
            return ()
        if isinstance(self.sort, SortSpec):
            return (self.sort,)
        return tuple(self.sort)


@dataclasses.dataclass(frozen=True)
class QueryResult(Generic[T]):
    """Page of the run plus the whole filtered, sorted collection."""

    page: Page[T]
    filtered: list[T]

    @property
    def items(self) -> list[T]:
        return self.page.items

    @property
    def count(self) -> int:
        return len(self.filtered)


class QueryPipeline:
    """Runs catalog queries against one list page's filter configuration.

    The field specs are validated once, here, so configuration errors
    surface when the page is wired up rather than on the first keystroke.
    """

    def __init__(
        self,
        field_specs: Iterable[FilterFieldSpec | Mapping[str, Any]],
        *,
        settings: QuerySettings | None = None,
    ) -> None:
        self.settings = settings or QuerySettings()
        self.field_specs: tuple[FilterFieldSpec, ...] = validate_field_specs(field_specs)

    def run(self, records: Iterable[Mapping[str, Any]], query: CatalogQuery | None = None) -> QueryResult[dict[str, Any]]:
        query = query or CatalogQuery()
        limit = self._limit(query.limit)
        with bound_query_context(query_run=next(_run_ids)):
            started = time.monotonic()
            augmented = augment_all(records, unknown=self.settings.unknown_label)
            predicate = build_predicate(
                self.field_specs,
                query.filter_state,
                search_key=query.search_key or self.settings.search_key,
            )
            filtered = [record for record in augmented if predicate.is_satisfied_by(record)]
            ordered = multi_sort(filtered, query.sort_specs)
            page = paginate(ordered, query.page, limit)
            log.debug(
                "query.completed",
                total=len(augmented),
                matched=len(ordered),
                active_filters=len(predicate),
                page=page.metadata.page,
                total_pages=page.metadata.total_pages,
                took_ms=int((time.monotonic() - started) * 1000),
            )
        return QueryResult(page=page, filtered=ordered)

    def _limit(self, requested: int | None) -> int:
        if requested is None:
            return self.settings.default_page_size
        if isinstance(requested, int) and not isinstance(requested, bool) and requested > self.settings.max_page_size:
            log.error("query.limit_too_large", limit=requested, max_page_size=self.settings.max_page_size)
            raise ConfigurationError(
                f"Page limit {requested} exceeds max_page_size {self.settings.max_page_size}",
                detail={"limit": requested, "max_page_size": self.settings.max_page_size},
            )
        return requested


def run_query(
    records: Iterable[Mapping[str, Any]],
    field_specs: Iterable[FilterFieldSpec | Mapping[str, Any]],
    query: CatalogQuery | None = None,
    *,
    settings: QuerySettings | None = None,
) -> QueryResult[dict[str, Any]]:
    """One-shot shortcut for ``QueryPipeline(field_specs).run(records, query)``."""
    return QueryPipeline(field_specs, settings=settings).run(records, query)


__all__ = ["CatalogQuery", "QueryPipeline", "QueryResult", "run_query"]
