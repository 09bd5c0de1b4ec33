"""Decoded key events and their classifiers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class KeyPress:
    """A single decoded key event.

    ``name`` follows readline naming: a symbolic name (``"enter"``, ``"up"``,
    ``"space"``, ``"tab"``) for special keys, the lower-cased character for
    printable ones, and the bare letter with ``ctrl`` set for Ctrl-<letter>.
    """

    name: str
    ctrl: bool = False
    shift: bool = False


def is_enter_key(key: KeyPress) -> bool:
    return key.name in ("enter", "return")


def is_up_key(key: KeyPress) -> bool:
    return key.name == "up"


def is_down_key(key: KeyPress) -> bool:
    return key.name == "down"


def is_number_key(key: KeyPress) -> bool:
    return len(key.name) == 1 and key.name in "123456789"


def is_backspace_key(key: KeyPress) -> bool:
    return key.name == "backspace"


__all__ = [
    "KeyPress",
    "is_backspace_key",
    "is_down_key",
    "is_enter_key",
    "is_number_key",
    "is_up_key",
]
