"""Agent console TUI.

A Textual-based terminal UI for editing agent settings and starting or
stopping the agent.
"""

from agent_console.tui.app import ConsoleApp, create_app, run_console, start_console

__all__ = ["ConsoleApp", "create_app", "run_console", "start_console"]
