"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError               (application.py)
        └── ConfigurationError         (config/validation/errors.py)
            ├── MissingRequiredSettingError
            └── InvalidSettingValueError

Malformed records never raise; only programmer errors do.
"""

from catalog_query.kernel.errors.application import ApplicationError
from catalog_query.kernel.errors.base import BaseError

__all__ = ["ApplicationError", "BaseError"]
