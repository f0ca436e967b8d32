"""Observability – get_logger helper and query-context binding."""
from __future__ import annotations

import contextlib
from typing import Any, Iterator

import structlog


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


@contextlib.contextmanager
def bound_query_context(**values: Any) -> Iterator[None]:
    """Bind *values* into structlog's context vars for the duration of a query run."""
    with structlog.contextvars.bound_contextvars(**values):
        yield


__all__ = ["bound_query_context", "get_logger"]
