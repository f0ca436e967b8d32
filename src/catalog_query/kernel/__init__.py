"""Kernel – framework-agnostic building blocks."""

from catalog_query.kernel.errors import ApplicationError, BaseError
from catalog_query.kernel.paths import MISSING, resolve_path
from catalog_query.kernel.specification import AllOf, BaseSpecification, LambdaSpecification

__all__ = [
    "MISSING",
    "AllOf",
    "ApplicationError",
    "BaseError",
    "BaseSpecification",
    "LambdaSpecification",
    "resolve_path",
]
