"""Application-layer errors – wiring problems between the UI and the engine."""

from __future__ import annotations

from catalog_query.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
