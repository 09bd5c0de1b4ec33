"""Type-ahead search for the select prompt.

Printable keys accumulate in the runtime's line buffer. The prompt matches the
buffer against display names and clears it after a short idle period. The core
owns no buffer, only the handle of the pending reset timer.
"""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Optional, Protocol, Sequence

from actionselect.core.choices import ChoiceEntry, is_selectable

SEARCH_RESET_DELAY = 0.7


class Cancellable(Protocol):
    def cancel(self) -> Any: ...


class Scheduler(Protocol):
    """Arms delayed callbacks. ``asyncio`` event loops satisfy this protocol."""

    def call_later(self, delay: float, callback: Callable[[], Any]) -> Cancellable: ...


def match(items: Sequence[ChoiceEntry], search_term: str) -> Optional[int]:
    """Return the index of the first selectable item whose name starts with ``search_term``.

    Matching is case-insensitive. An empty term never matches.
    """
    if not search_term:
        return None
    term = search_term.lower()
    for index, entry in enumerate(items):
        if not is_selectable(entry):
            continue
        if entry.display_name.lower().startswith(term):  # type: ignore[union-attr]
            return index
    return None


class AsyncioScheduler:
    """Scheduler bound to whichever asyncio loop is running at call time."""

    def call_later(self, delay: float, callback: Callable[[], Any]) -> Cancellable:
        return asyncio.get_running_loop().call_later(delay, callback)


class SearchResetTimer:
    """Holds the single pending search-reset callback of one prompt."""

    def __init__(self, scheduler: Scheduler, delay: float = SEARCH_RESET_DELAY) -> None:
        self._scheduler = scheduler
        self._delay = delay
        self._handle: Optional[Cancellable] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    @property
    def delay(self) -> float:
        return self._delay

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def arm(self, callback: Callable[[], Any]) -> None:
        """Cancel any pending reset, then schedule ``callback`` after the delay."""
        self.cancel()

        def _fire() -> None:
            self._handle = None
            callback()

        self._handle = self._scheduler.call_later(self._delay, _fire)


__all__ = [
    "SEARCH_RESET_DELAY",
    "AsyncioScheduler",
    "Cancellable",
    "Scheduler",
    "SearchResetTimer",
    "match",
]
