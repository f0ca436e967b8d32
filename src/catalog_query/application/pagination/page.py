"""Application pagination – PageMetadata, Page, paginate."""
from __future__ import annotations

import dataclasses
import math
import sys
from typing import Any, Callable, Generic, Iterator, Sequence, TypeVar

from catalog_query.config.validation import ConfigurationError
from catalog_query.observability.logging import get_logger

T = TypeVar("T")

log = get_logger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class PageMetadata:
    """Navigation counters of one page; always derived, never updated in place.

    ``start_index``/``end_index`` are the 1-based positions of the first and
    last item shown (both ``0`` on an empty page).
    """

    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool
    start_index: int = 0
    end_index: int = 0

    @classmethod
    def compute(cls, total: int, page: Any, limit: int) -> "PageMetadata":
        """Clamp *page* into ``[1, total_pages]`` and derive the counters."""
        _check_limit(limit)
        total_pages = max(1, math.ceil(total / limit))
        current = min(max(_coerce_page(page), 1), total_pages)
        start = (current - 1) * limit
        end = min(start + limit, total)
        return cls(
            page=current,
            limit=limit,
            total=total,
            total_pages=total_pages,
            has_next=current < total_pages,
            has_prev=current > 1,
            start_index=start + 1 if end > start else 0,
            end_index=end,
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclasses.dataclass(frozen=True)
class Page(Generic[T]):
    """One page of records plus its metadata."""

    items: list[T]
    metadata: PageMetadata

    def map(self, fn: Callable[[T], Any]) -> "Page[Any]":
        """Return a new :class:`Page` with each item transformed by *fn*."""
        return Page(items=[fn(item) for item in self.items], metadata=self.metadata)

    def __len__(self) -> int:
        return len(self.items)


def _check_limit(limit: Any) -> None:
    if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
        log.error("pagination.invalid_limit", limit=limit)
        raise ConfigurationError(
            f"Page limit must be a positive integer, got {limit!r}",
            detail={"limit": limit},
        )


def _coerce_page(page: Any) -> int:
    """Requested page as an int; unparseable input is page 1, ``+inf`` is past the end."""
    if isinstance(page, bool):
        return 1
    if isinstance(page, int):
        return page
    try:
        number = float(page)
    except (TypeError, ValueError):
        return 1
    if math.isnan(number):
        return 1
    if math.isinf(number):
        return sys.maxsize if number > 0 else 1
    return int(number)


def paginate(records: Sequence[T], page: Any, limit: int) -> Page[T]:
    """Slice *records* into the requested 1-indexed page.

    Out-of-range pages clamp to the nearest valid page, and an empty
    collection is a single empty page.  ``limit <= 0`` raises
    :class:`ConfigurationError`.
    """
    items = list(records)
    metadata = PageMetadata.compute(len(items), page, limit)
    start = metadata.offset
    return Page(items=items[start:start + limit], metadata=metadata)


def iter_pages(records: Sequence[T], limit: int) -> Iterator[Page[T]]:
    """Every page of *records* in order, starting at page 1."""
    items = list(records)
    first = paginate(items, 1, limit)
    yield first
    for number in range(2, first.metadata.total_pages + 1):
        yield paginate(items, number, limit)


__all__ = ["Page", "PageMetadata", "iter_pages", "paginate"]
