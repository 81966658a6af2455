"""Reusable widgets that console settings may register by name."""

from __future__ import annotations

from textual.widget import Widget
from textual.widgets import Button, Input, Label, Select, Switch

WIDGET_CATALOG: dict[str, type[Widget]] = {
    "Button": Button,
    "InputText": Input,
    "Label": Label,
    "Select": Select,
    "Switch": Switch,
}
