"""UI theme definitions and selection helpers.

Themes are ANSI palettes for highlight tags and the status bar chrome.
Normal text always switches back to the terminal's default foreground.
"""

from __future__ import annotations

from dataclasses import dataclass

from .highlight import Highlight


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the frame renderer."""

    name: str
    number: str
    match: str
    control: str
    reverse: str
    reset: str
    default_fg: str

    def color_for(self, tag: Highlight) -> str | None:
        """Return the SGR sequence for ``tag``; ``None`` means default color."""
        if tag is Highlight.NUMBER:
            return self.number
        if tag is Highlight.MATCH:
            return self.match
        return None


DEFAULT_THEME = UITheme(
    name="default",
    number="\033[31m",
    match="\033[34m",
    control="\033[7m",
    reverse="\033[7m",
    reset="\033[m",
    default_fg="\033[39m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    number="\033[38;5;117m",
    match="\033[1;38;5;45m",
    control="\033[7m",
    reverse="\033[7m",
    reset="\033[m",
    default_fg="\033[39m",
)

PLAIN_THEME = UITheme(
    name="plain",
    number="",
    match="",
    control="",
    reverse="",
    reset="",
    default_fg="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
