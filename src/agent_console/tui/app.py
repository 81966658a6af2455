"""Agent console TUI - application root and startup sequence."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.css.query import NoMatches
from textual.theme import Theme
from textual.widget import Widget
from textual.widgets import Footer, Header

from agent_console.config.app import ConsoleSettings
from agent_console.tui.controller import AgentController, LoggingAgentController
from agent_console.tui.errors import (
    AlreadyMountedError,
    MountAnchorError,
    StartupError,
    UnknownWidgetError,
    UnsupportedOptionError,
    WidgetAlreadyRegisteredError,
    WidgetNotRegisteredError,
)
from agent_console.tui.themes import resolve_theme
from agent_console.tui.widgets import WIDGET_CATALOG, SettingsForm

logger = logging.getLogger(__name__)

DOCUMENT_ANCHOR = "app"


class AnchorContainer(Container):
    """Fixed position in the document the root widget is mounted into."""

    DEFAULT_CSS = """
    AnchorContainer {
        width: 1fr;
        height: 1fr;
    }
    """


class ConsoleApp(App[None]):
    """Agent console application root.

    Configure it before running: ``use_theme`` and ``register_widget`` may be
    called any number of times, ``mount_root`` exactly once. The root widget
    is mounted when the app starts.
    """

    TITLE = "Agent Console"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, root_factory: Callable[[], Widget]) -> None:
        super().__init__()
        self.root_factory = root_factory
        self.theme_preset: Theme | None = None
        self.widget_registry: dict[str, type[Widget]] = {}
        self.mount_target: str | None = None
        self.mount_count = 0
        self.startup_error: StartupError | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield AnchorContainer(id=DOCUMENT_ANCHOR)
        yield Footer()

    def use_theme(self, options: Mapping[str, Any]) -> ConsoleApp:
        """
        Apply console options. Only ``{"theme": {"preset": Theme}}`` is recognised.

        Raises:
            UnsupportedOptionError: On any other option or a preset that is not a Theme
        """
        for key in options:
            if key != "theme":
                raise UnsupportedOptionError(key)

        theme_options = options.get("theme", {})
        if not isinstance(theme_options, Mapping):
            raise UnsupportedOptionError("theme", "expected a mapping")
        for key in theme_options:
            if key != "preset":
                raise UnsupportedOptionError(f"theme.{key}")

        preset = theme_options.get("preset")
        if preset is None:
            return self
        if not isinstance(preset, Theme):
            raise UnsupportedOptionError("theme.preset", "expected a Theme")

        self.register_theme(preset)
        self.theme_preset = preset
        logger.debug(f"Theme preset '{preset.name}' registered")
        return self

    def register_widget(self, name: str, widget_cls: type[Widget]) -> ConsoleApp:
        """Register a reusable widget class under a name."""
        if name in self.widget_registry:
            raise WidgetAlreadyRegisteredError(name)
        self.widget_registry[name] = widget_cls
        logger.debug(f"Widget '{name}' registered as {widget_cls.__name__}")
        return self

    def create_widget(self, name: str, *args: Any, **kwargs: Any) -> Widget:
        """Instantiate a registered widget by name."""
        widget_cls = self.widget_registry.get(name)
        if widget_cls is None:
            raise WidgetNotRegisteredError(name)
        return widget_cls(*args, **kwargs)

    def mount_root(self, anchor: str = DOCUMENT_ANCHOR) -> ConsoleApp:
        """
        Request the one-time mount of the root widget into ``#anchor``.

        Raises:
            AlreadyMountedError: If a mount was already requested
        """
        if self.mount_target is not None:
            raise AlreadyMountedError(self.mount_target)
        self.mount_target = anchor.lstrip("#")
        return self

    async def on_mount(self) -> None:
        """Activate the theme and mount the root widget."""
        if self.theme_preset is not None:
            self.theme = self.theme_preset.name

        if self.mount_target is None:
            return

        try:
            anchor = self.query_one(f"#{self.mount_target}")
        except NoMatches:
            self._fail_startup(MountAnchorError(self.mount_target))
            return

        await anchor.mount(self.root_factory())
        self.mount_count += 1
        logger.info(f"Root widget mounted at '#{self.mount_target}'")

    def _fail_startup(self, error: StartupError) -> None:
        logger.error(f"Console startup failed: {error}")
        self.startup_error = error
        self.exit(return_code=1, message=str(error))


def create_app(root_factory: Callable[[], Widget]) -> ConsoleApp:
    """Create the UI application root."""
    return ConsoleApp(root_factory)


def start_console(
    settings: ConsoleSettings,
    controller: AgentController | None = None,
) -> ConsoleApp:
    """
    Build the console: create the root, apply the theme, register widgets, request the mount.

    Raises:
        StartupError: If the theme or a widget name cannot be resolved
    """
    agent_controller = controller or LoggingAgentController()

    app = create_app(lambda: SettingsForm(controller=agent_controller, id="settings-form"))
    app.use_theme({"theme": {"preset": resolve_theme(settings.theme.preset)}})

    for name in settings.widgets:
        widget_cls = WIDGET_CATALOG.get(name)
        if widget_cls is None:
            raise UnknownWidgetError(name, WIDGET_CATALOG)
        app.register_widget(name, widget_cls)

    return app.mount_root()


def run_console(
    settings: ConsoleSettings,
    controller: AgentController | None = None,
) -> None:
    """Entry point for the TUI application."""
    app = start_console(settings, controller)
    app.run()
    if app.startup_error is not None:
        raise app.startup_error
