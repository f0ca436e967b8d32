"""Application pagination – clamped offset pages with derived metadata."""
from catalog_query.application.pagination.page import Page, PageMetadata, iter_pages, paginate

__all__ = ["Page", "PageMetadata", "iter_pages", "paginate"]
