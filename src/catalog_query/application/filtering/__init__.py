"""Application filtering – declarative filter fields and their evaluation."""
from catalog_query.application.filtering.evaluator import (
    DEFAULT_SEARCH_KEY,
    FieldPredicate,
    build_predicate,
    clear_filters,
    evaluate,
    filter_records,
    has_active_filters,
)
from catalog_query.application.filtering.spec import (
    Bound,
    FieldKind,
    FilterFieldSpec,
    infer_bound,
    infer_field,
    validate_field_specs,
)
from catalog_query.application.filtering.values import (
    BoolValue,
    FilterValue,
    NumberValue,
    RangeValue,
    TextValue,
    coerce_filter_value,
)

__all__ = [
    "DEFAULT_SEARCH_KEY",
    "BoolValue",
    "Bound",
    "FieldKind",
    "FieldPredicate",
    "FilterFieldSpec",
    "FilterValue",
    "NumberValue",
    "RangeValue",
    "TextValue",
    "build_predicate",
    "clear_filters",
    "coerce_filter_value",
    "evaluate",
    "filter_records",
    "has_active_filters",
    "infer_bound",
    "infer_field",
    "validate_field_specs",
]
