"""prompt_toolkit runtime for the select prompt.

This module is the terminal side of the prompt: it decodes prompt_toolkit key
presses into :class:`~actionselect.core.keys.KeyPress` events, keeps the
type-ahead line in a prompt_toolkit ``Buffer``, lays out the rendered rows
and runs the ``Application``. All decisions are delegated to
:class:`~actionselect.core.state.SelectPrompt`.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Sequence

from prompt_toolkit.application import Application
from prompt_toolkit.buffer import Buffer
from prompt_toolkit.formatted_text import StyleAndTextTuples
from prompt_toolkit.input import Input
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.output import Output
from prompt_toolkit.styles import Style

from actionselect.cli.ui.pagination import MORE_CHOICES_HINT, Paginator
from actionselect.core.choices import UNSET
from actionselect.core.config import Action, SelectConfig
from actionselect.core.keys import KeyPress
from actionselect.core.render import (
    render_answer,
    render_description,
    render_header,
    render_item,
)
from actionselect.core.search import Scheduler
from actionselect.core.state import PromptResult, SelectPrompt
from actionselect.core.theme import Theme, resolve_theme
from actionselect.utils.log import get_logger


logger = get_logger("select")

_SPECIAL_KEY_NAMES = {
    Keys.ControlM: "enter",
    Keys.ControlJ: "enter",
    Keys.Up: "up",
    Keys.Down: "down",
    Keys.ControlH: "backspace",
    Keys.ControlI: "tab",
    Keys.Escape: "escape",
}

# Printable characters that readline reports by name.
_NAMED_CHARACTERS = {" ": "space"}


def build_select_style(theme: Theme) -> Style:
    """Create the prompt_toolkit style for a theme's slots."""
    style_map = {slot.replace("_", "-"): value for slot, value in theme.style_slots().items()}
    return Style.from_dict(style_map)


def key_press_from_event(event: Any) -> KeyPress:
    """Translate a prompt_toolkit key press event into a :class:`KeyPress`."""
    key = event.key_sequence[0].key
    if isinstance(key, Keys):
        name = _SPECIAL_KEY_NAMES.get(key)
        if name is not None:
            return KeyPress(name=name)
        # "c-x" is reported as "x" with ctrl set, "s-tab" as "tab" with shift set.
        modifier, _, base = key.value.partition("-")
        if base and modifier in ("c", "s"):
            return KeyPress(name=base, ctrl=modifier == "c", shift=modifier == "s")
        return KeyPress(name=key.value)
    data = event.data
    if data in _NAMED_CHARACTERS:
        return KeyPress(name=_NAMED_CHARACTERS[data])
    return KeyPress(name=data.lower(), shift=data != data.lower())


def _inserts_text(event: Any) -> bool:
    key = event.key_sequence[0].key
    return not isinstance(key, Keys) or key == Keys.BracketedPaste


class BufferLineEditor:
    """Line editor over a prompt_toolkit ``Buffer``."""

    def __init__(self, buffer: Optional[Buffer] = None) -> None:
        self.buffer = buffer or Buffer(multiline=False)

    @property
    def line(self) -> str:
        return self.buffer.text

    def clear_line(self) -> None:
        self.buffer.reset()


class SelectPromptView:
    """Lays out the header, the visible page and the description."""

    def __init__(self, prompt: SelectPrompt, theme: Theme) -> None:
        self.prompt = prompt
        self.theme = theme
        self.paginator = Paginator(prompt.config.page_size, loop=prompt.config.loop)

    def get_fragments(self) -> StyleAndTextTuples:
        session = self.prompt.session
        state = self.prompt.state
        message = self.prompt.config.message

        if state.is_done:
            return list(render_answer(session, state, message, self.theme))

        fragments: StyleAndTextTuples = list(render_header(session, state, message, self.theme))
        rows = [
            render_item(entry, index == state.active, self.theme)
            for index, entry in enumerate(session.items)
        ]
        for row in self.paginator.page(rows, state.active):
            fragments.append(("", "\n"))
            fragments.extend(row)
        if self.paginator.needs_hint(len(rows)):
            fragments.append(("", "\n"))
            fragments.append(("class:help", MORE_CHOICES_HINT))

        description = render_description(session, state)
        if description:
            fragments.append(("", "\n"))
            fragments.extend(description)
        return fragments


def _build_key_bindings(prompt: SelectPrompt, line_editor: BufferLineEditor) -> KeyBindings:
    kb = KeyBindings()

    def _dispatch(event: Any) -> None:
        if _inserts_text(event):
            line_editor.buffer.insert_text(event.data)
        key = key_press_from_event(event)
        if key.name == "backspace":
            line_editor.buffer.delete_before_cursor()
        transition = prompt.handle_key(key, line_editor)
        if transition.result is not None:
            event.app.exit(result=transition.result, style="class:accepted")

    # Specific bindings outrank the catch-all and prompt_toolkit's defaults.
    kb.add("enter", eager=True)(_dispatch)
    kb.add("c-j", eager=True)(_dispatch)
    kb.add("up", eager=True)(_dispatch)
    kb.add("down", eager=True)(_dispatch)
    kb.add("c-h", eager=True)(_dispatch)
    kb.add("tab", eager=True)(_dispatch)
    kb.add("s-tab", eager=True)(_dispatch)
    kb.add("escape", eager=True)(_dispatch)
    kb.add("<any>")(_dispatch)

    @kb.add("c-c", eager=True)
    @kb.add("<sigint>", eager=True)
    def _interrupt(event: Any) -> None:  # noqa: ANN401
        prompt.close()
        event.app.exit(exception=KeyboardInterrupt, style="class:aborting")

    return kb


def build_select_application(
    config: SelectConfig,
    *,
    scheduler: Optional[Scheduler] = None,
    input: Optional[Input] = None,
    output: Optional[Output] = None,
) -> "Application[PromptResult]":
    """Create the (non-fullscreen) application for one select prompt.

    Raises:
        NoSelectableChoicesError: if no choice can be selected.
    """
    prompt = SelectPrompt(config, scheduler=scheduler)
    theme = resolve_theme(config.theme)
    view = SelectPromptView(prompt, theme)
    line_editor = BufferLineEditor()

    window = Window(
        FormattedTextControl(view.get_fragments, focusable=True, show_cursor=False),
        dont_extend_height=True,
        always_hide_cursor=True,
    )
    return Application(
        layout=Layout(HSplit([window])),
        key_bindings=_build_key_bindings(prompt, line_editor),
        style=build_select_style(theme),
        full_screen=False,
        input=input,
        output=output,
    )


def _coerce_action(raw: Any) -> Action:
    if isinstance(raw, Action):
        return raw
    if isinstance(raw, tuple):
        return Action(key=raw[0], value=raw[1], name=raw[2] if len(raw) > 2 else "")
    if isinstance(raw, Mapping):
        return Action(**raw)
    raise TypeError(f"Unsupported action type: {type(raw).__name__}")


def make_select_config(
    message: str,
    choices: Sequence[Any],
    *,
    default: Any = UNSET,
    loop: bool = True,
    page_size: int = 7,
    actions: Optional[Iterable[Any]] = None,
    theme: Optional[str] = None,
) -> SelectConfig:
    """Build a :class:`SelectConfig`, leaving ``default`` unset unless given."""
    values: dict[str, Any] = {
        "message": message,
        "choices": list(choices),
        "loop": loop,
        "page_size": page_size,
        "actions": [_coerce_action(raw) for raw in actions or ()],
        "theme": theme,
    }
    if default is not UNSET:
        values["default"] = default
    return SelectConfig(**values)


def prompt_select(
    message: str,
    choices: Sequence[Any],
    *,
    default: Any = UNSET,
    loop: bool = True,
    page_size: int = 7,
    actions: Optional[Iterable[Any]] = None,
    theme: Optional[str] = None,
) -> PromptResult:
    """Prompt the user to pick one choice, confirming with Enter or an action key.

    Args:
        message: The prompt message
        choices: ``Choice``/``Separator`` objects, strings, ``(value, name)``
            tuples or mappings
        default: Value of the item that starts active
        loop: Whether the cursor wraps around the list ends
        page_size: Number of rows shown at once
        actions: ``Action`` objects, ``(key, value[, name])`` tuples or mappings
        theme: Built-in theme name

    Returns:
        PromptResult with the chosen value and the action tag (None for Enter)

    Raises:
        NoSelectableChoicesError: if no choice can be selected.
        KeyboardInterrupt: if the user pressed Ctrl-C.

    Example:
        ```python
        result = prompt_select(
            "Pick a file",
            ["setup.py", "README.md"],
            actions=[("e", "edit", "Edit"), ("o", "open", "Open")],
        )
        if result.action == "edit":
            ...
        ```
    """
    config = make_select_config(
        message,
        choices,
        default=default,
        loop=loop,
        page_size=page_size,
        actions=actions,
        theme=theme,
    )
    result: PromptResult = build_select_application(config).run()
    logger.debug("Prompt answered", action=result.action)
    return result


async def prompt_select_async(
    message: str,
    choices: Sequence[Any],
    *,
    default: Any = UNSET,
    loop: bool = True,
    page_size: int = 7,
    actions: Optional[Iterable[Any]] = None,
    theme: Optional[str] = None,
) -> PromptResult:
    """Async variant of prompt_select for use inside running event loops."""
    config = make_select_config(
        message,
        choices,
        default=default,
        loop=loop,
        page_size=page_size,
        actions=actions,
        theme=theme,
    )
    result: PromptResult = await build_select_application(config).run_async()
    logger.debug("Prompt answered", action=result.action)
    return result


__all__ = [
    "BufferLineEditor",
    "SelectPromptView",
    "build_select_application",
    "build_select_style",
    "key_press_from_event",
    "make_select_config",
    "prompt_select",
    "prompt_select_async",
]
