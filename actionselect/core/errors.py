"""Error types for actionselect."""

from __future__ import annotations


class SelectPromptError(Exception):
    """Base exception for all select prompt errors."""

    def __str__(self) -> str:
        return self.args[0] if self.args else "An error occurred in the select prompt"


class NoSelectableChoicesError(SelectPromptError, ValueError):
    """Raised at construction when every choice is a separator or disabled."""

    def __init__(self, message: str = "No selectable choices. All choices are disabled.") -> None:
        super().__init__(f"[select prompt] {message}")


__all__ = [
    "SelectPromptError",
    "NoSelectableChoicesError",
]
