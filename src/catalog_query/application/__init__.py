"""Application – the catalog query engine stages."""

from catalog_query.application.debounce import DebounceHandle, Debouncer
from catalog_query.application.filtering import FieldKind, FilterFieldSpec, evaluate, filter_records
from catalog_query.application.pagination import Page, PageMetadata, paginate
from catalog_query.application.pipeline import CatalogQuery, QueryPipeline, QueryResult, run_query
from catalog_query.application.search import matches
from catalog_query.application.sorting import SortDirection, SortSpec, sort_records
from catalog_query.application.translation import Locale, LocaleView, augment

__all__ = [
    "CatalogQuery",
    "DebounceHandle",
    "Debouncer",
    "FieldKind",
    "FilterFieldSpec",
    "Locale",
    "LocaleView",
    "Page",
    "PageMetadata",
    "QueryPipeline",
    "QueryResult",
    "SortDirection",
    "SortSpec",
    "augment",
    "evaluate",
    "filter_records",
    "matches",
    "paginate",
    "run_query",
    "sort_records",
]
