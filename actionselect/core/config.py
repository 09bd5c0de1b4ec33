"""Configuration models for the select prompt.

This module validates what a caller passes in: the choice list, the optional
default, loop and paging settings, and the action keybindings.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from actionselect.core.choices import UNSET, ChoiceEntry, normalize_choices
from actionselect.core.search import SEARCH_RESET_DELAY
from actionselect.utils.log import get_logger


logger = get_logger("config")

# Key names that the Enter classifier also answers to.
ENTER_KEY_NAMES = ("enter", "return")


class Action(BaseModel):
    """An alternate confirmation keybinding.

    Pressing ``key`` completes the prompt and tags the result with ``value``.
    ``name`` is the label shown in the help tip.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    value: Any
    name: str = ""

    @field_validator("key")
    @classmethod
    def _normalize_key(cls, value: str) -> str:
        normalized = value.strip().lower()
        if not normalized:
            raise ValueError("Action key must not be empty")
        return normalized

    @property
    def display_name(self) -> str:
        return self.name or str(self.value)


class SelectConfig(BaseModel):
    """Configuration for one select prompt invocation."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    message: str
    choices: List[Any]
    # Only meaningful when explicitly set; see ``default_value``.
    default: Any = None
    loop: bool = True
    page_size: int = Field(default=7, ge=1)
    actions: List[Action] = Field(default_factory=list)
    # Built-in theme name; None follows the global theme manager.
    theme: Optional[str] = None
    search_reset_delay: float = Field(default=SEARCH_RESET_DELAY, gt=0)

    @field_validator("choices")
    @classmethod
    def _normalize_choices(cls, value: List[Any]) -> List[ChoiceEntry]:
        try:
            return normalize_choices(value)
        except TypeError as exc:
            raise ValueError(str(exc)) from exc

    @model_validator(mode="after")
    def _check_action_keys(self) -> "SelectConfig":
        seen: Dict[str, Action] = {}
        for action in self.actions:
            if action.key in ENTER_KEY_NAMES:
                logger.warning(
                    "Action key shadows the Enter key; the action takes precedence",
                    key=action.key,
                    action=action.display_name,
                )
            if action.key in seen:
                logger.warning(
                    "Duplicate action key; the first definition wins",
                    key=action.key,
                    kept=seen[action.key].display_name,
                    ignored=action.display_name,
                )
                continue
            seen[action.key] = action
        return self

    @property
    def default_value(self) -> Any:
        """The configured default, or ``UNSET`` when the caller did not pass one."""
        if "default" not in self.model_fields_set:
            return UNSET
        return self.default


__all__ = ["Action", "ENTER_KEY_NAMES", "SelectConfig"]
