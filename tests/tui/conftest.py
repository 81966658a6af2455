from unittest.mock import MagicMock

import pytest

from agent_console.tui.app import ConsoleApp, create_app
from agent_console.tui.controller import LoggingAgentController
from agent_console.tui.widgets import SettingsForm


@pytest.fixture
def controller() -> LoggingAgentController:
    """Default logging controller."""
    return LoggingAgentController()


@pytest.fixture
def mock_controller() -> MagicMock:
    """Mock AgentController."""
    return MagicMock()


@pytest.fixture
def form_app(controller: LoggingAgentController) -> ConsoleApp:
    """Console app with a settings form mounted at the default anchor."""
    return create_app(lambda: SettingsForm(controller=controller)).mount_root()
