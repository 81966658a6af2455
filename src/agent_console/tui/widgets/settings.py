"""Agent settings form, the console's root widget."""

from __future__ import annotations

from typing import Any

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Button, Input, Select, Static

from agent_console.config.agent import Configuration, ConfigurationError, LogLevel
from agent_console.tui.controller import AgentController

# (input id, wire field, label, placeholder)
AGENT_FIELDS = [
    ("agent-server-port", "agentServerPort", "Agent server port", "1-65535"),
    ("worker-thread-number", "workerThreadNumber", "Worker threads", ">= 1"),
]
POOL_FIELDS = [
    ("check-interval", "checkInterval", "Check interval", "agent default"),
    ("fill-interval", "fillInterval", "Fill interval", "agent default"),
    ("max-pool-size", "maxPoolSize", "Max pool size", "0 disables pooling"),
]


class SettingsForm(Widget):
    """Form for editing agent settings and starting or stopping the agent."""

    DEFAULT_CSS = """
    SettingsForm {
        width: 1fr;
        height: 1fr;
    }

    SettingsForm .panel-title {
        text-style: bold;
        color: $primary;
        padding: 1;
    }

    SettingsForm .section-title {
        color: $secondary;
        padding: 1 1 0 1;
    }

    SettingsForm .form-row {
        height: auto;
        padding: 0 1;
    }

    SettingsForm .form-label {
        color: $text-muted;
    }

    SettingsForm .button-row {
        height: 3;
        margin: 1;
    }

    SettingsForm .button-row Button {
        margin-right: 1;
    }

    SettingsForm #agent-status {
        padding: 0 1;
        color: $text-muted;
    }

    SettingsForm #agent-status.--running {
        color: $success;
    }
    """

    agent_running = reactive(False)

    def __init__(
        self,
        controller: AgentController,
        configuration: Configuration | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.controller = controller
        self._initial_configuration = configuration

    def compose(self) -> ComposeResult:
        with VerticalScroll():
            yield Static("⚙ Agent Settings", classes="panel-title")

            with Horizontal(classes="form-row"):
                for input_id, _, label, placeholder in AGENT_FIELDS:
                    with Vertical():
                        yield Static(f"{label}:", classes="form-label")
                        yield Input(placeholder=placeholder, type="integer", id=input_id)
                with Vertical():
                    yield Static("Max log level:", classes="form-label")
                    yield Select(
                        [(level.value, level) for level in LogLevel],
                        prompt="Agent default",
                        id="max-log-level",
                    )

            yield Static(
                "Connection pool (leave all blank for agent default)",
                classes="section-title",
            )
            with Horizontal(classes="form-row"):
                for input_id, _, label, placeholder in POOL_FIELDS:
                    with Vertical():
                        yield Static(f"{label}:", classes="form-label")
                        yield Input(placeholder=placeholder, type="integer", id=input_id)

            with Horizontal(classes="button-row"):
                yield Button("Start Agent", variant="primary", id="btn-start")
                yield Button("Stop Agent", variant="error", id="btn-stop")
            yield Static("Agent stopped", id="agent-status")

    def on_mount(self) -> None:
        if self._initial_configuration is not None:
            self.load_configuration(self._initial_configuration)

    def _input_value(self, input_id: str) -> str | None:
        value = self.query_one(f"#{input_id}", Input).value.strip()
        return value or None

    def _read_fields(
        self,
        fields: list[tuple[str, str, str, str]],
        errors: list[tuple[str, str]],
        prefix: str = "",
    ) -> dict[str, int]:
        values: dict[str, int] = {}
        for input_id, wire_name, _, _ in fields:
            value = self._input_value(input_id)
            if value is None:
                continue
            try:
                values[wire_name] = int(value)
            except ValueError:
                errors.append((f"{prefix}{wire_name}", "Input should be a valid integer"))
        return values

    def read_configuration(self) -> Configuration:
        """
        Build a Configuration from the form.

        Blank optional inputs stay unset. The pool section is only sent when
        at least one pool input is filled, and then all three are required.

        Raises:
            ConfigurationError: If the inputs do not form a valid configuration
        """
        errors: list[tuple[str, str]] = []
        data: dict[str, Any] = self._read_fields(AGENT_FIELDS, errors)

        select = self.query_one("#max-log-level", Select)
        if not select.is_blank():
            data["maxLogLevel"] = select.value

        pool = self._read_fields(POOL_FIELDS, errors, prefix="connectionPoolConfiguration.")
        if pool:
            data["connectionPoolConfiguration"] = pool
        if errors:
            raise ConfigurationError(errors)

        return Configuration.from_wire(data)

    def load_configuration(self, configuration: Configuration) -> None:
        """Fill the form from an existing configuration."""
        self.query_one("#agent-server-port", Input).value = str(configuration.agent_server_port)
        self.query_one("#worker-thread-number", Input).value = str(
            configuration.worker_thread_number
        )
        select = self.query_one("#max-log-level", Select)
        if configuration.max_log_level is None:
            select.clear()
        else:
            select.value = configuration.max_log_level

        pool = configuration.connection_pool_configuration
        pool_values = (
            {}
            if pool is None
            else {
                "check-interval": pool.check_interval,
                "fill-interval": pool.fill_interval,
                "max-pool-size": pool.max_pool_size,
            }
        )
        for input_id, _, _, _ in POOL_FIELDS:
            value = pool_values.get(input_id)
            self.query_one(f"#{input_id}", Input).value = "" if value is None else str(value)

    def start_agent(self) -> Configuration | None:
        """Validate the form and hand the configuration to the controller."""
        try:
            configuration = self.read_configuration()
        except ConfigurationError as e:
            self.notify(str(e), title="Invalid configuration", severity="error")
            return None

        self.controller.start_agent(configuration)
        self.agent_running = True
        self.notify(configuration.summary(), title="Agent started")
        return configuration

    def stop_agent(self) -> None:
        self.controller.stop_agent()
        self.agent_running = False

    def watch_agent_running(self, running: bool) -> None:
        if not self.is_mounted:
            return
        status = self.query_one("#agent-status", Static)
        status.update("Agent running" if running else "Agent stopped")
        status.set_class(running, "--running")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == "btn-start":
            self.start_agent()
        elif event.button.id == "btn-stop":
            self.stop_agent()
