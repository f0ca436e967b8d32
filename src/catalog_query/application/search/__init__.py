"""Application search – multi-language free-text matching."""
from catalog_query.application.search.matcher import matches, normalize_query, search, suggest

__all__ = ["matches", "normalize_query", "search", "suggest"]
