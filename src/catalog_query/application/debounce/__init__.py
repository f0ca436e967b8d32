"""Application debounce – cancellable quiet-period timer."""
from catalog_query.application.debounce.controller import DebounceHandle, Debouncer

__all__ = ["DebounceHandle", "Debouncer"]
