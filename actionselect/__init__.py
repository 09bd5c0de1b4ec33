"""actionselect - single-select terminal prompt with action keybindings.

Shows a list of choices, moves a cursor with the arrow keys or digits, narrows
the list by typing a prefix and confirms with Enter or with a custom action
key ("open" vs "edit"). The result carries both the answer and the action.

Quick Start:
    from actionselect import Separator, prompt_select

    result = prompt_select(
        "Pick a file",
        ["setup.py", Separator(), "README.md"],
        actions=[("e", "edit", "Edit")],
    )
"""

__version__ = "0.3.0"

from actionselect.cli.ui.select_prompt import prompt_select, prompt_select_async
from actionselect.core.choices import Choice, Separator
from actionselect.core.config import Action, SelectConfig
from actionselect.core.errors import NoSelectableChoicesError, SelectPromptError
from actionselect.core.state import PromptResult, SelectPrompt

__all__ = [
    "__version__",
    "Action",
    "Choice",
    "NoSelectableChoicesError",
    "PromptResult",
    "SelectConfig",
    "SelectPrompt",
    "SelectPromptError",
    "Separator",
    "prompt_select",
    "prompt_select_async",
]
