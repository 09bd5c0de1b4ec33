"""Active index navigation for the select prompt."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Sequence

from actionselect.core.choices import Bounds, ChoiceEntry, is_selectable


class Direction(str, Enum):
    """Cursor move direction."""

    PREVIOUS = "previous"
    NEXT = "next"

    @property
    def offset(self) -> int:
        return -1 if self is Direction.PREVIOUS else 1


def can_move(active: int, direction: Direction, bounds: Bounds, loop: bool) -> bool:
    """Loop guard: without wraparound the cursor stops at the bounds."""
    if loop:
        return True
    if direction is Direction.PREVIOUS:
        return active != bounds.first
    return active != bounds.last


def move(
    current: int,
    direction: Direction,
    bounds: Bounds,
    total_length: int,
    loop: bool,
    is_selectable_at: Callable[[int], bool],
) -> int:
    """Return the next selectable index in ``direction``.

    Steps wrap through the whole list, separators included. At least one
    selectable index is guaranteed by ``bounds``, so the walk terminates.
    """
    if not can_move(current, direction, bounds, loop):
        return current

    offset = direction.offset
    index = current
    while True:
        index = (index + offset + total_length) % total_length
        if is_selectable_at(index):
            return index


def jump_to_digit(items: Sequence[ChoiceEntry], digit: int, current: int) -> int:
    """Jump to the 1-based position ``digit`` when it holds a selectable item."""
    position = digit - 1
    if 0 <= position < len(items) and is_selectable(items[position]):
        return position
    return current


__all__ = ["Direction", "can_move", "jump_to_digit", "move"]
