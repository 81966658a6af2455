"""Theme presets for the console."""

from __future__ import annotations

from textual.theme import BUILTIN_THEMES, Theme

from agent_console.tui.errors import ThemeNotFoundError

AURA = Theme(
    name="aura",
    primary="#a277ff",
    secondary="#61ffca",
    accent="#ffca85",
    foreground="#edecee",
    background="#15141b",
    surface="#1c1b22",
    panel="#29263c",
    success="#61ffca",
    warning="#ffca85",
    error="#ff6767",
    dark=True,
)

PRESETS: dict[str, Theme] = {
    AURA.name: AURA,
}


def resolve_theme(name: str) -> Theme:
    """
    Resolve a theme preset by name.

    Console presets take precedence over Textual's built-in themes.

    Raises:
        ThemeNotFoundError: If no preset has that name
    """
    theme = PRESETS.get(name) or BUILTIN_THEMES.get(name)
    if theme is None:
        raise ThemeNotFoundError(name, [*PRESETS, *BUILTIN_THEMES])
    return theme
