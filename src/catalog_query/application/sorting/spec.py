"""Sorting – SortDirection, SortSpec, SortOption."""
from __future__ import annotations

import dataclasses
from enum import Enum

from catalog_query.config.validation import ConfigurationError


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: "str | SortDirection") -> "SortDirection":
        if isinstance(value, SortDirection):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ConfigurationError(
                f"Unknown sort direction {value!r}",
                detail={"direction": value, "allowed": [d.value for d in cls]},
            ) from None

    @property
    def sign(self) -> int:
        return -1 if self is SortDirection.DESC else 1

    def flipped(self) -> "SortDirection":
        return SortDirection.ASC if self is SortDirection.DESC else SortDirection.DESC


@dataclasses.dataclass(frozen=True)
class SortSpec:
    """Sort criterion; *key* may be a dotted path such as ``"stats.pow"``."""

    key: str
    direction: SortDirection = SortDirection.ASC

    def __post_init__(self) -> None:
        if not isinstance(self.key, str) or not self.key:
            raise ConfigurationError("Sort key must be a non-empty string", detail={"key": self.key})
        object.__setattr__(self, "direction", SortDirection.parse(self.direction))


@dataclasses.dataclass(frozen=True)
class SortOption:
    """A sort choice offered by a list page."""

    key: str
    label: str = ""


def toggle_sort(current: SortSpec | None, key: str) -> SortSpec:
    """Next sort after the user picks *key*.

    Picking the active key flips its direction; any other key starts ascending.
    """
    if current is not None and current.key == key:
        return SortSpec(key, current.direction.flipped())
    return SortSpec(key, SortDirection.ASC)


__all__ = ["SortDirection", "SortOption", "SortSpec", "toggle_sort"]
