"""Pytest configuration and fixtures for all tests."""

from typing import Any, Callable, List, Optional

import pytest

from actionselect.core.theme import get_theme_manager


class FakeHandle:
    def __init__(self, scheduler: "FakeScheduler", when: float, callback: Callable[[], Any]):
        self._scheduler = scheduler
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """Deterministic stand-in for an event loop's ``call_later``."""

    def __init__(self) -> None:
        self.now = 0.0
        self.handles: List[FakeHandle] = []

    def call_later(self, delay: float, callback: Callable[[], Any]) -> FakeHandle:
        handle = FakeHandle(self, self.now + delay, callback)
        self.handles.append(handle)
        return handle

    @property
    def pending(self) -> List[FakeHandle]:
        return [h for h in self.handles if not h.cancelled and h.when > self.now]

    def advance(self, seconds: float) -> None:
        """Move time forward, firing due callbacks in order."""
        target = self.now + seconds
        while True:
            due = [h for h in self.handles if not h.cancelled and h.when <= target]
            if not due:
                break
            handle = min(due, key=lambda h: h.when)
            self.now = handle.when
            handle.cancelled = True
            handle.callback()
        self.now = target


class FakeLineEditor:
    """Line editor that records clear requests."""

    def __init__(self, line: str = "") -> None:
        self.line = line
        self.clear_count = 0

    def type(self, text: str) -> None:
        self.line += text

    def clear_line(self) -> None:
        self.line = ""
        self.clear_count += 1


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def line_editor() -> FakeLineEditor:
    return FakeLineEditor()


@pytest.fixture
def restore_theme():
    """Restore the global theme after a test switches it."""
    manager = get_theme_manager()
    original: Optional[str] = manager.current.name
    yield manager
    manager.set_theme(original)
