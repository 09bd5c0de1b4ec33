"""Theme system for the select prompt.

Provides named style slots, icons and predefined themes with runtime switching.
Colors use hex values and ``bold`` so the same strings work both as
prompt_toolkit style definitions and as rich markup.
"""

import os
from dataclasses import dataclass, field, fields
from typing import Dict, List, Optional


@dataclass
class ThemeColors:
    """Theme color definitions - one slot per prompt fragment kind."""

    prefix: str = "bold #5fafff"  # "?" while pending
    prefix_done: str = "bold #50fa7b"  # check mark once answered
    message: str = "bold"
    help: str = "#808080"  # action labels, navigation hints
    key: str = "bold #8be9fd"  # action key names in the help tip
    answer: str = "#8be9fd"
    highlight: str = "#8be9fd"  # active row
    disabled: str = "#626262"
    description: str = "#d9d9d9"
    separator: str = "#626262"


@dataclass
class ThemeIcons:
    """Glyphs used around the list."""

    cursor: str = "❯"
    prefix: str = "?"
    prefix_done: str = "✔"


@dataclass
class Theme:
    """Complete theme definition."""

    name: str
    display_name: str
    description: str
    colors: ThemeColors = field(default_factory=ThemeColors)
    icons: ThemeIcons = field(default_factory=ThemeIcons)

    def get_color(self, slot: str) -> str:
        """Get color for a specific slot."""
        return getattr(self.colors, slot, "")

    def style_slots(self) -> Dict[str, str]:
        """All slots as a ``{slot: style}`` mapping."""
        return {f.name: getattr(self.colors, f.name) for f in fields(self.colors)}


# === Predefined themes ===

THEME_DARK = Theme(
    name="dark",
    display_name="Dark",
    description="Default dark theme with cyan accents",
    colors=ThemeColors(),
)

THEME_LIGHT = Theme(
    name="light",
    display_name="Light",
    description="Light theme for bright terminals",
    colors=ThemeColors(
        prefix="bold #0369a1",
        prefix_done="bold #047857",
        help="#6b7280",
        key="bold #0f766e",
        answer="#0f766e",
        highlight="#0369a1",
        disabled="#9ca3af",
        description="#374151",
        separator="#9ca3af",
    ),
)

THEME_MONOKAI = Theme(
    name="monokai",
    display_name="Monokai",
    description="Monokai-inspired color scheme",
    colors=ThemeColors(
        prefix="bold #66d9ef",  # Monokai cyan
        prefix_done="bold #a6e22e",  # Monokai green
        help="#75715e",  # Monokai comment
        key="bold #f92672",  # Monokai pink
        answer="#a6e22e",
        highlight="#f92672",
        disabled="#75715e",
        separator="#75715e",
    ),
)

THEME_DRACULA = Theme(
    name="dracula",
    display_name="Dracula",
    description="Dracula color scheme",
    colors=ThemeColors(
        prefix="bold #bd93f9",  # Dracula purple
        prefix_done="bold #50fa7b",  # Dracula green
        help="#6272a4",  # Dracula comment
        key="bold #ff79c6",  # Dracula pink
        answer="#50fa7b",
        highlight="#bd93f9",
        disabled="#6272a4",
        description="#f8f8f2",
        separator="#6272a4",
    ),
)

THEME_NORD = Theme(
    name="nord",
    display_name="Nord",
    description="Arctic, bluish color scheme",
    colors=ThemeColors(
        prefix="bold #81a1c1",  # Nord blue
        prefix_done="bold #a3be8c",  # Nord green
        help="#4c566a",  # Nord polar night
        key="bold #88c0d0",  # Nord frost
        answer="#a3be8c",
        highlight="#88c0d0",
        disabled="#4c566a",
        description="#d8dee9",
        separator="#4c566a",
    ),
    icons=ThemeIcons(cursor="›"),
)

# Theme registry
BUILTIN_THEMES: Dict[str, Theme] = {
    "dark": THEME_DARK,
    "light": THEME_LIGHT,
    "monokai": THEME_MONOKAI,
    "dracula": THEME_DRACULA,
    "nord": THEME_NORD,
}


class ThemeManager:
    """Theme manager - singleton pattern."""

    _instance: Optional["ThemeManager"] = None
    _current_theme: Theme

    def __new__(cls) -> "ThemeManager":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            initial = os.getenv("ACTIONSELECT_THEME", "").strip().lower()
            cls._instance._current_theme = BUILTIN_THEMES.get(initial, THEME_DARK)
        return cls._instance

    @property
    def current(self) -> Theme:
        """Get current theme."""
        return self._current_theme

    def set_theme(self, theme_name: str) -> bool:
        """Set theme by name."""
        theme = BUILTIN_THEMES.get(theme_name)
        if theme:
            self._current_theme = theme
            return True
        return False

    def list_themes(self) -> List[str]:
        """List all available theme names."""
        return list(BUILTIN_THEMES.keys())


# Global accessor functions
_theme_manager: Optional[ThemeManager] = None


def get_theme_manager() -> ThemeManager:
    """Get the global theme manager instance."""
    global _theme_manager
    if _theme_manager is None:
        _theme_manager = ThemeManager()
    return _theme_manager


def styled(text: str, slot: str, theme: Optional[Theme] = None) -> str:
    """Wrap text with rich markup for a theme slot."""
    color = (theme or get_current_theme()).get_color(slot)
    if not color:
        return text
    return f"[{color}]{text}[/]"


def get_current_theme() -> Theme:
    """Get the current active theme."""
    return get_theme_manager().current


def resolve_theme(theme_name: Optional[str]) -> Theme:
    """Return the named built-in theme, or the current one for ``None``/unknown names."""
    if theme_name:
        theme = BUILTIN_THEMES.get(theme_name)
        if theme is not None:
            return theme
    return get_current_theme()


__all__ = [
    "Theme",
    "ThemeColors",
    "ThemeIcons",
    "ThemeManager",
    "BUILTIN_THEMES",
    "get_theme_manager",
    "styled",
    "get_current_theme",
    "resolve_theme",
]
