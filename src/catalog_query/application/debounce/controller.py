"""Debounce – propagate a rapidly changing value once it settles.

Each :meth:`Debouncer.observe` call replaces the pending value and restarts
the quiet-period timer on the running asyncio loop.  Only the last value of
a burst reaches ``on_settle``; intermediate values are dropped, never
queued.  Closing the debouncer (the owning session ended) cancels the
pending update so it is never delivered.
"""
from __future__ import annotations

import asyncio
from typing import Any, Callable, Generic, TypeVar

from catalog_query.config.settings import QuerySettings
from catalog_query.config.validation import ConfigurationError
from catalog_query.observability.logging import get_logger

T = TypeVar("T")

log = get_logger(__name__)

_UNSET: Any = object()


class DebounceHandle(Generic[T]):
    """A scheduled propagation of one value."""

    __slots__ = ("value", "_owner", "_timer", "_future", "_cancelled", "_done")

    def __init__(self, value: T, owner: "Debouncer[T]") -> None:
        self.value = value
        self._owner = owner
        self._timer: asyncio.TimerHandle | None = None
        self._future: asyncio.Future[T] | None = None
        self._cancelled = False
        self._done = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def done(self) -> bool:
        return self._done

    def cancel(self) -> bool:
        """Cancel this propagation; ``False`` when it already fired or was cancelled."""
        return self._owner.cancel(self)

    def __repr__(self) -> str:  # pragma: no cover
        state = "done" if self._done else "cancelled" if self._cancelled else "pending"
        return f"DebounceHandle({self.value!r}, {state})"


class Debouncer(Generic[T]):
    """Cancellable quiet-period timer for one input (e.g. a search box).

    Example::

        debouncer = Debouncer(on_settle=lambda text: rerun_query(search=text))
        debouncer.observe("k")
        debouncer.observe("ka")
        debouncer.observe("kas")   # only "kas" is delivered, 500 ms later
        ...
        debouncer.close()          # page closed: nothing more is delivered

    ``delay_ms`` defaults to ``settings.search_debounce_ms``.  A delay of
    ``0`` (or less) propagates synchronously.
    """

    def __init__(
        self,
        on_settle: Callable[[T], Any] | None = None,
        *,
        settings: QuerySettings | None = None,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self._on_settle = on_settle
        self.delay_ms: float = (settings or QuerySettings()).search_debounce_ms
        self._loop = loop
        self._pending: DebounceHandle[T] | None = None
        self._settled: Any = _UNSET
        self._closed = False

    @property
    def pending(self) -> bool:
        return self._pending is not None

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def settled_value(self) -> T | None:
        """Last value delivered, ``None`` before the first delivery."""
        return None if self._settled is _UNSET else self._settled

    def observe(self, value: T, delay_ms: float | None = None) -> DebounceHandle[T]:
        """Schedule *value* to settle after *delay_ms* without a newer call."""
        if self._closed:
            raise ConfigurationError("Debouncer is closed", detail={"value": repr(value)})
        if self._pending is not None:
            self._discard(self._pending)

        delay = self.delay_ms if delay_ms is None else delay_ms
        handle: DebounceHandle[T] = DebounceHandle(value, self)
        if delay <= 0:
            self._fire(handle)
            return handle

        loop = self._loop or asyncio.get_running_loop()
        handle._future = loop.create_future()
        handle._timer = loop.call_later(delay / 1000.0, self._fire, handle)
        self._pending = handle
        return handle

    schedule = observe

    def cancel(self, handle: DebounceHandle[T] | None = None) -> bool:
        """Cancel *handle* (default: the pending one).  Stale handles are a no-op."""
        target = handle if handle is not None else self._pending
        if target is None or target is not self._pending:
            return False
        self._discard(target)
        return True

    def close(self) -> None:
        """End the owning session; a pending value is never delivered."""
        if self._pending is not None:
            self._discard(self._pending)
        self._closed = True

    async def wait(self) -> T | None:
        """Wait until no value is pending and return the last settled value."""
        while self._pending is not None:
            handle = self._pending
            future = handle._future
            if future is None:
                break
            try:
                await asyncio.shield(future)
            except asyncio.CancelledError:
                if not future.cancelled():
                    raise
        return self.settled_value

    def _discard(self, handle: DebounceHandle[T]) -> None:
        if handle._timer is not None:
            handle._timer.cancel()
        if handle._future is not None and not handle._future.done():
            handle._future.cancel()
        handle._cancelled = True
        if self._pending is handle:
            self._pending = None

    def _fire(self, handle: DebounceHandle[T]) -> None:
        if handle._cancelled or self._closed:
            return
        if self._pending is handle:
            self._pending = None
        handle._done = True
        self._settled = handle.value
        log.debug("debounce.settled")
        future = handle._future
        try:
            if self._on_settle is not None:
                self._on_settle(handle.value)
        except Exception as exc:
            if future is None:
                raise
            log.error("debounce.settle_failed", error=repr(exc))
            if not future.done():
                future.set_exception(exc)
            return
        if future is not None and not future.done():
            future.set_result(handle.value)

    def __enter__(self) -> "Debouncer[T]":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


__all__ = ["DebounceHandle", "Debouncer"]
