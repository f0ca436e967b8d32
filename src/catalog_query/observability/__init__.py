"""Observability – logging for the query engine."""
from catalog_query.observability.logging import JsonLoggerFactory, bound_query_context, get_logger

__all__ = ["JsonLoggerFactory", "bound_query_context", "get_logger"]
