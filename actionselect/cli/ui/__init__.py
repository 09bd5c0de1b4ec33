"""Terminal UI for the select prompt."""

from actionselect.cli.ui.select_prompt import (
    build_select_application,
    prompt_select,
    prompt_select_async,
)

__all__ = [
    "build_select_application",
    "prompt_select",
    "prompt_select_async",
]
