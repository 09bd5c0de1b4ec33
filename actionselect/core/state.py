"""Prompt state machine for the select prompt.

The machine is split in two:

- :func:`handle_key` is a pure-ish transition function. It takes the cached
  static facts of the list (:class:`SelectSession`), the current
  :class:`PromptState` and one key event, and returns a
  :class:`StateTransition` describing the new state plus the effects the
  runtime must apply (clear the line, arm the search reset, finish).
- :class:`SelectPrompt` is the per-invocation controller. It owns the state
  and the search-reset timer, applies effects and calls the completion
  callback exactly once.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, Iterable, Optional, Protocol, Sequence, Tuple

from actionselect.core.choices import (
    NOT_FOUND,
    UNSET,
    Bounds,
    Choice,
    ChoiceEntry,
    compute_bounds,
    is_selectable,
    resolve_default_index,
)
from actionselect.core.config import Action, SelectConfig
from actionselect.core.keys import (
    KeyPress,
    is_backspace_key,
    is_down_key,
    is_enter_key,
    is_number_key,
    is_up_key,
)
from actionselect.core.navigation import Direction, jump_to_digit, move
from actionselect.core.search import AsyncioScheduler, Scheduler, SearchResetTimer, match
from actionselect.utils.log import get_logger


logger = get_logger("select")


class PromptStatus(str, Enum):
    PENDING = "pending"
    DONE = "done"


@dataclass(frozen=True)
class PromptResult:
    """Completion payload: the chosen value and the action tag, if any."""

    answer: Any
    action: Any = None


@dataclass(frozen=True)
class PromptState:
    active: int
    status: PromptStatus = PromptStatus.PENDING
    selected_action: Optional[Action] = None
    # Cleared by the first key event; the view shows the navigation hint until then.
    first_render: bool = True

    @property
    def is_done(self) -> bool:
        return self.status is PromptStatus.DONE


@dataclass(frozen=True)
class StateTransition:
    state: PromptState
    clear_line: bool = False
    arm_search_reset: bool = False
    result: Optional[PromptResult] = None


class LineEditor(Protocol):
    """The runtime's line-editing buffer as seen by the prompt."""

    @property
    def line(self) -> str: ...

    def clear_line(self) -> None: ...


@dataclass(frozen=True)
class SelectSession:
    """Static facts about one prompt invocation, computed once."""

    items: Tuple[ChoiceEntry, ...]
    bounds: Bounds
    default_index: int = NOT_FOUND
    loop: bool = True
    actions: Tuple[Action, ...] = ()

    @classmethod
    def create(
        cls,
        items: Sequence[ChoiceEntry],
        *,
        default: Any = UNSET,
        loop: bool = True,
        actions: Iterable[Action] = (),
    ) -> "SelectSession":
        """Derive bounds and the default index.

        Raises:
            NoSelectableChoicesError: if no item can be selected.
        """
        frozen_items = tuple(items)
        bounds = compute_bounds(frozen_items)
        return cls(
            items=frozen_items,
            bounds=bounds,
            default_index=resolve_default_index(frozen_items, default),
            loop=loop,
            actions=tuple(actions),
        )

    @classmethod
    def from_config(cls, config: SelectConfig) -> "SelectSession":
        return cls.create(
            config.choices,
            default=config.default_value,
            loop=config.loop,
            actions=config.actions,
        )

    def initial_state(self) -> PromptState:
        active = self.bounds.first if self.default_index == NOT_FOUND else self.default_index
        return PromptState(active=active)

    def is_selectable_at(self, index: int) -> bool:
        return is_selectable(self.items[index])

    def choice_at(self, index: int) -> Choice:
        entry = self.items[index]
        if not isinstance(entry, Choice):
            raise TypeError(f"Entry {index} is a separator, not a choice")
        return entry

    def find_action(self, key: KeyPress) -> Optional[Action]:
        """First action bound to ``key``; later duplicates never match."""
        for action in self.actions:
            if action.key == key.name:
                return action
        return None


def _complete(session: SelectSession, state: PromptState, action: Optional[Action]) -> StateTransition:
    answer = session.choice_at(state.active).value
    done_state = replace(state, status=PromptStatus.DONE, selected_action=action)
    result = PromptResult(answer=answer, action=action.value if action is not None else None)
    return StateTransition(state=done_state, result=result)


def handle_key(
    session: SelectSession,
    state: PromptState,
    key: KeyPress,
    line_editor: LineEditor,
) -> StateTransition:
    """Classify one key event and compute the resulting transition."""
    if state.is_done:
        return StateTransition(state=state)
    if state.first_render:
        state = replace(state, first_render=False)

    action = session.find_action(key)
    if action is not None:
        return _complete(session, state, action)

    if is_enter_key(key):
        return _complete(session, state, None)

    if is_up_key(key) or is_down_key(key):
        direction = Direction.PREVIOUS if is_up_key(key) else Direction.NEXT
        active = move(
            state.active,
            direction,
            session.bounds,
            len(session.items),
            session.loop,
            session.is_selectable_at,
        )
        return StateTransition(state=replace(state, active=active), clear_line=True)

    if is_number_key(key):
        active = jump_to_digit(session.items, int(key.name), state.active)
        return StateTransition(state=replace(state, active=active), clear_line=True)

    if is_backspace_key(key):
        return StateTransition(state=state, clear_line=True)

    match_index = match(session.items, line_editor.line)
    if match_index is not None:
        state = replace(state, active=match_index)
    return StateTransition(state=state, arm_search_reset=True)


class SelectPrompt:
    """Controller for a single select prompt invocation.

    Args:
        config: Validated prompt configuration
        scheduler: Arms the search-reset timer; defaults to the running asyncio loop
        on_done: Called once with the :class:`PromptResult`

    Raises:
        NoSelectableChoicesError: at construction, when nothing is selectable.
    """

    def __init__(
        self,
        config: SelectConfig,
        *,
        scheduler: Optional[Scheduler] = None,
        on_done: Optional[Callable[[PromptResult], None]] = None,
    ) -> None:
        self.config = config
        self.session = SelectSession.from_config(config)
        self.state = self.session.initial_state()
        self.result: Optional[PromptResult] = None
        self._on_done = on_done
        self._search_reset = SearchResetTimer(
            scheduler or AsyncioScheduler(), config.search_reset_delay
        )
        logger.debug(
            "Prompt created",
            choice_count=len(self.session.items),
            first=self.session.bounds.first,
            last=self.session.bounds.last,
            active=self.state.active,
            action_keys=[action.key for action in self.session.actions],
        )

    @property
    def active(self) -> int:
        return self.state.active

    @property
    def active_choice(self) -> Choice:
        return self.session.choice_at(self.state.active)

    @property
    def status(self) -> PromptStatus:
        return self.state.status

    @property
    def is_done(self) -> bool:
        return self.state.is_done

    @property
    def selected_action(self) -> Optional[Action]:
        return self.state.selected_action

    @property
    def search_reset_pending(self) -> bool:
        return self._search_reset.pending

    def close(self) -> None:
        """Drop a pending search reset (the runtime is going away)."""
        self._search_reset.cancel()

    def handle_key(self, key: KeyPress, line_editor: LineEditor) -> StateTransition:
        """Process one key event to completion and apply its effects."""
        if self.state.is_done:
            return StateTransition(state=self.state)

        self._search_reset.cancel()
        transition = handle_key(self.session, self.state, key, line_editor)
        self.state = transition.state

        if transition.clear_line:
            line_editor.clear_line()
        if transition.arm_search_reset:
            self._search_reset.arm(line_editor.clear_line)
        if transition.result is not None:
            self.result = transition.result
            action = self.state.selected_action
            logger.debug(
                "Prompt completed",
                active=self.state.active,
                action=action.key if action is not None else None,
            )
            if self._on_done is not None:
                self._on_done(transition.result)
        return transition


__all__ = [
    "LineEditor",
    "PromptResult",
    "PromptState",
    "PromptStatus",
    "SelectPrompt",
    "SelectSession",
    "StateTransition",
    "handle_key",
]
