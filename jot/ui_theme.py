"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the editor chrome: the directory pane, tab bar,
gutter, status bar and find highlights.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the renderer."""

    name: str
    divider: str
    reverse: str
    reset: str
    dim: str
    pane_title: str
    tree_dir: str
    tree_file: str
    tab_inactive: str
    tab_modified: str
    gutter: str
    gutter_current: str
    find_match: str
    find_current: str
    status: str
    status_prompt: str


DEFAULT_THEME = UITheme(
    name="default",
    divider="\033[2m",
    reverse="\033[7m",
    reset="\033[0m",
    dim="\033[2m",
    pane_title="\033[1;38;5;81m",
    tree_dir="\033[1;34m",
    tree_file="\033[38;5;252m",
    tab_inactive="\033[38;5;250m",
    tab_modified="\033[38;5;214m",
    gutter="\033[2;38;5;245m",
    gutter_current="\033[38;5;229m",
    find_match="\033[1m\033[4m",
    find_current="\033[7;1m",
    status="\033[7m",
    status_prompt="\033[1;38;5;229m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    divider="\033[2;38;5;31m",
    reverse="\033[7m",
    reset="\033[0m",
    dim="\033[2;38;5;110m",
    pane_title="\033[1;38;5;45m",
    tree_dir="\033[1;38;5;45m",
    tree_file="\033[38;5;252m",
    tab_inactive="\033[38;5;153m",
    tab_modified="\033[38;5;215m",
    gutter="\033[2;38;5;73m",
    gutter_current="\033[38;5;153m",
    find_match="\033[1m\033[4m",
    find_current="\033[7;1m",
    status="\033[7;38;5;31m",
    status_prompt="\033[1;38;5;45m",
)

PLAIN_THEME = UITheme(
    name="plain",
    divider="",
    reverse="",
    reset="",
    dim="",
    pane_title="",
    tree_dir="",
    tree_file="",
    tab_inactive="",
    tab_modified="",
    gutter="",
    gutter_current="",
    find_match="",
    find_current="",
    status="",
    status_prompt="",
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
