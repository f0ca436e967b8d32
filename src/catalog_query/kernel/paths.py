"""Dotted-path lookup over nested records."""
from __future__ import annotations

from typing import Any, Mapping


class _Missing:
    """Sentinel for a path that does not resolve."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def resolve_path(record: Any, path: str) -> Any:
    """Follow *path* (``"stats.pow"``) through mappings, sequences and attributes.

    Returns :data:`MISSING` as soon as a segment does not resolve; ``None``
    values along the way also resolve to :data:`MISSING`.
    """
    current = record
    for segment in path.split("."):
        if current is None or current is MISSING:
            return MISSING
        if isinstance(current, Mapping):
            if segment not in current:
                return MISSING
            current = current[segment]
        elif isinstance(current, (list, tuple)) and segment.lstrip("-").isdigit():
            try:
                current = current[int(segment)]
            except IndexError:
                return MISSING
        else:
            current = getattr(current, segment, MISSING)
    if current is None:
        return MISSING
    return current


__all__ = ["MISSING", "resolve_path"]
