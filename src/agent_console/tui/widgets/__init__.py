"""TUI widgets for reusable components."""

from agent_console.tui.widgets.catalog import WIDGET_CATALOG
from agent_console.tui.widgets.settings import SettingsForm

__all__ = [
    "WIDGET_CATALOG",
    "SettingsForm",
]
