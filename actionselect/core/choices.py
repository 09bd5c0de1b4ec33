"""Choice list model.

Choices are either :class:`Separator` rows or :class:`Choice` items. This module
derives the static facts the prompt needs about a list: which entries are
selectable, the first/last selectable indices and where the default sits.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

from actionselect.core.errors import NoSelectableChoicesError

NOT_FOUND = -1


class _Unset:
    """Marker for "no default configured" (``None`` is a legal default value)."""

    _instance: Optional["_Unset"] = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


@dataclass(frozen=True, eq=False)
class Separator:
    """Decorative row. Never selectable."""

    separator: str = "──────────────"

    @staticmethod
    def is_separator(entry: object) -> bool:
        return isinstance(entry, Separator)


@dataclass(frozen=True, eq=False)
class Choice:
    """A selectable (unless disabled) item.

    Args:
        value: Returned as the answer when this item is confirmed
        name: Display text; falls back to ``str(value)``
        description: Shown under the list while the item is active
        disabled: ``True`` or a reason string to grey the item out
    """

    value: Any
    name: Optional[str] = None
    description: Optional[str] = None
    disabled: Union[bool, str] = False

    @property
    def display_name(self) -> str:
        return self.name or str(self.value)

    def __repr__(self) -> str:
        return f"Choice(value={self.value!r}, name={self.name!r})"


ChoiceEntry = Union[Choice, Separator]


@dataclass(frozen=True)
class Bounds:
    """First and last selectable indices of a choice list."""

    first: int
    last: int


def is_selectable(entry: object) -> bool:
    """Return True for items that are neither separators nor disabled."""
    if Separator.is_separator(entry) or not isinstance(entry, Choice):
        return False
    return not entry.disabled


def compute_bounds(items: Sequence[ChoiceEntry]) -> Bounds:
    """Return the first/last selectable indices.

    Raises:
        NoSelectableChoicesError: if no entry is selectable.
    """
    first = NOT_FOUND
    last = NOT_FOUND
    for index, entry in enumerate(items):
        if is_selectable(entry):
            if first == NOT_FOUND:
                first = index
            last = index

    if first == NOT_FOUND:
        raise NoSelectableChoicesError()
    return Bounds(first=first, last=last)


def resolve_default_index(items: Sequence[ChoiceEntry], default: Any = UNSET) -> int:
    """Index of the first selectable item whose value equals ``default``.

    Returns ``NOT_FOUND`` when no default was given or nothing matches.
    """
    if default is UNSET:
        return NOT_FOUND
    for index, entry in enumerate(items):
        if is_selectable(entry) and entry.value == default:  # type: ignore[union-attr]
            return index
    return NOT_FOUND


def _coerce_choice(raw: Any) -> ChoiceEntry:
    if isinstance(raw, (Choice, Separator)):
        return raw
    if isinstance(raw, str):
        return Choice(value=raw, name=raw)
    if isinstance(raw, tuple) and len(raw) == 2:
        value, name = raw
        return Choice(value=value, name=name)
    if isinstance(raw, Mapping):
        if "separator" in raw and "value" not in raw:
            return Separator(str(raw["separator"]))
        if "value" not in raw:
            raise ValueError(f"Choice mapping needs a 'value' key: {dict(raw)!r}")
        return Choice(
            value=raw["value"],
            name=raw.get("name"),
            description=raw.get("description"),
            disabled=raw.get("disabled", False),
        )
    raise TypeError(f"Unsupported choice type: {type(raw).__name__}")


def normalize_choices(raw_choices: Iterable[Any]) -> List[ChoiceEntry]:
    """Normalize strings, ``(value, name)`` tuples and mappings to choice entries."""
    return [_coerce_choice(raw) for raw in raw_choices]


__all__ = [
    "NOT_FOUND",
    "UNSET",
    "Bounds",
    "Choice",
    "ChoiceEntry",
    "Separator",
    "compute_bounds",
    "is_selectable",
    "normalize_choices",
    "resolve_default_index",
]
