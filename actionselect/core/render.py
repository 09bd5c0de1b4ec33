"""Render decisions for the select prompt.

Functions here decide which text goes on a line and which named style it uses.
They return prompt_toolkit style-and-text fragments (``[(style, text), ...]``)
and leave layout and paging to the UI layer.
"""

from __future__ import annotations

from typing import List, Tuple

from actionselect.core.choices import ChoiceEntry, Separator
from actionselect.core.state import PromptState, SelectSession
from actionselect.core.theme import Theme

Fragments = List[Tuple[str, str]]

NAVIGATION_HINT = "(Use arrow keys)"
DISABLED_LABEL = "(disabled)"


def render_item(entry: ChoiceEntry, is_active: bool, theme: Theme) -> Fragments:
    """Render one list row."""
    if Separator.is_separator(entry):
        return [("class:separator", f" {entry.separator}")]  # type: ignore[union-attr]

    line = entry.display_name  # type: ignore[union-attr]
    disabled = entry.disabled  # type: ignore[union-attr]
    if disabled:
        label = disabled if isinstance(disabled, str) else DISABLED_LABEL
        return [("class:disabled", f"- {line} {label}")]

    if is_active:
        return [("class:highlight", f"{theme.icons.cursor} {line}")]
    return [("", f"  {line}")]


def render_help_tip(session: SelectSession) -> Fragments:
    """``<name> <KEY>`` for every reachable action, space separated."""
    fragments: Fragments = []
    seen = set()
    for action in session.actions:
        if action.key in seen:
            continue
        seen.add(action.key)
        if fragments:
            fragments.append(("", " "))
        fragments.append(("class:help", action.display_name))
        fragments.append(("", " "))
        fragments.append(("class:key", action.key.upper()))
    return fragments


def render_header(session: SelectSession, state: PromptState, message: str, theme: Theme) -> Fragments:
    """Prefix, message, action help tip and (before the first key) the navigation hint."""
    parts: List[Fragments] = [[("class:prefix", theme.icons.prefix)]]
    if message:
        parts.append([("class:message", message)])
    help_tip = render_help_tip(session)
    if help_tip:
        parts.append(help_tip)
    if state.first_render:
        parts.append([("class:help", NAVIGATION_HINT)])

    fragments: Fragments = []
    for part in parts:
        if fragments:
            fragments.append(("", " "))
        fragments.extend(part)
    return fragments


def render_description(session: SelectSession, state: PromptState) -> Fragments:
    description = session.choice_at(state.active).description
    if not description:
        return []
    return [("class:description", description)]


def render_answer(session: SelectSession, state: PromptState, message: str, theme: Theme) -> Fragments:
    """Final line once the prompt is done."""
    fragments: Fragments = [("class:prefix-done", theme.icons.prefix_done)]
    if message:
        fragments.extend([("", " "), ("class:message", message)])
    if state.selected_action is not None:
        fragments.extend([("", " "), ("class:help", state.selected_action.display_name)])
    answer = session.choice_at(state.active).display_name
    fragments.extend([("", " "), ("class:answer", answer)])
    return fragments


__all__ = [
    "DISABLED_LABEL",
    "Fragments",
    "NAVIGATION_HINT",
    "render_answer",
    "render_description",
    "render_header",
    "render_help_tip",
    "render_item",
]
