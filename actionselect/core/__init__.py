"""Core state machine and models for the select prompt."""

from actionselect.core.choices import (
    NOT_FOUND,
    UNSET,
    Bounds,
    Choice,
    Separator,
    compute_bounds,
    is_selectable,
    normalize_choices,
    resolve_default_index,
)
from actionselect.core.config import Action, SelectConfig
from actionselect.core.errors import NoSelectableChoicesError, SelectPromptError
from actionselect.core.keys import KeyPress
from actionselect.core.navigation import Direction, can_move, jump_to_digit, move
from actionselect.core.search import SEARCH_RESET_DELAY, SearchResetTimer, match
from actionselect.core.state import (
    PromptResult,
    PromptState,
    PromptStatus,
    SelectPrompt,
    SelectSession,
    StateTransition,
    handle_key,
)

__all__ = [
    "NOT_FOUND",
    "SEARCH_RESET_DELAY",
    "UNSET",
    "Action",
    "Bounds",
    "Choice",
    "Direction",
    "KeyPress",
    "NoSelectableChoicesError",
    "PromptResult",
    "PromptState",
    "PromptStatus",
    "SearchResetTimer",
    "SelectConfig",
    "SelectPrompt",
    "SelectPromptError",
    "SelectSession",
    "Separator",
    "StateTransition",
    "can_move",
    "compute_bounds",
    "handle_key",
    "is_selectable",
    "jump_to_digit",
    "match",
    "move",
    "normalize_choices",
    "resolve_default_index",
]
