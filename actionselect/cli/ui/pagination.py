"""Scrolling window over the rendered choice rows."""

from typing import List, Sequence, TypeVar

T = TypeVar("T")

MORE_CHOICES_HINT = "(Use arrow keys to reveal more choices)"


def calculate_visible_range(
    cursor: int,
    total_items: int,
    max_visible: int,
    scroll_offset: int = 0,
) -> tuple[int, int, int]:
    """Calculate visible window for a scrolling list.

    Args:
        cursor: Current cursor position
        total_items: Total number of items
        max_visible: Maximum items that fit on screen
        scroll_offset: Current scroll offset

    Returns:
        Tuple of (start_idx, end_idx, new_scroll_offset)
    """
    if total_items <= max_visible:
        return 0, total_items, 0

    # Adjust scroll to keep cursor visible
    if cursor < scroll_offset:
        scroll_offset = cursor
    elif cursor >= scroll_offset + max_visible:
        scroll_offset = cursor - max_visible + 1

    start = scroll_offset
    end = min(start + max_visible, total_items)

    return start, end, scroll_offset


def calculate_looping_offset(
    cursor: int,
    total_items: int,
    max_visible: int,
    scroll_offset: int = 0,
) -> int:
    """Window start for a list that wraps around its end.

    The window only moves when the cursor leaves it, and then by the shorter
    way round so wrapping from last to first scrolls forward.
    """
    relative = (cursor - scroll_offset) % total_items
    if relative < max_visible:
        return scroll_offset
    below = relative - (max_visible - 1)
    above = total_items - relative
    if above < below:
        return cursor
    return (cursor - max_visible + 1) % total_items


class Paginator:
    """Keeps the scroll offset of one prompt between renders."""

    def __init__(self, page_size: int, loop: bool = True) -> None:
        self.page_size = page_size
        self.loop = loop
        self.scroll_offset = 0

    def needs_hint(self, total_items: int) -> bool:
        return total_items > self.page_size

    def page(self, rows: Sequence[T], active: int) -> List[T]:
        """Return the rows visible with ``active`` on screen."""
        total = len(rows)
        if total <= self.page_size:
            self.scroll_offset = 0
            return list(rows)

        if not self.loop:
            start, end, self.scroll_offset = calculate_visible_range(
                active, total, self.page_size, self.scroll_offset
            )
            return list(rows[start:end])

        self.scroll_offset = calculate_looping_offset(
            active, total, self.page_size, self.scroll_offset
        )
        return [rows[(self.scroll_offset + i) % total] for i in range(self.page_size)]


__all__ = [
    "MORE_CHOICES_HINT",
    "Paginator",
    "calculate_looping_offset",
    "calculate_visible_range",
]
