"""Application sorting – stable type-aware ordering of records."""
from catalog_query.application.sorting.keys import RARITY_ORDER, rarity_rank, stats_total, with_derived_keys
from catalog_query.application.sorting.sorter import compare_values, multi_sort, sort_records
from catalog_query.application.sorting.spec import SortDirection, SortOption, SortSpec, toggle_sort

__all__ = [
    "RARITY_ORDER",
    "SortDirection",
    "SortOption",
    "SortSpec",
    "compare_values",
    "multi_sort",
    "rarity_rank",
    "sort_records",
    "stats_total",
    "toggle_sort",
    "with_derived_keys",
]
