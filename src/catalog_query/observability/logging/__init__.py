"""Observability – structured logging helpers."""
from catalog_query.observability.logging.factory import JsonLoggerFactory
from catalog_query.observability.logging.processors import bound_query_context, get_logger

__all__ = ["JsonLoggerFactory", "bound_query_context", "get_logger"]
