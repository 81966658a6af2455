"""
Configuration package for the agent console.

Module structure:
- agent.py: Configuration, ConnectionPoolConfiguration, LogLevel (agent wire contract)
- app.py: ConsoleSettings and the YAML loader for the console itself
"""

from agent_console.config.agent import (
    ConfigurationError,
    Configuration,
    ConnectionPoolConfiguration,
    LogLevel,
    configuration_schema,
)
from agent_console.config.app import (
    ConsoleSettings,
    LoggingSettings,
    ThemeSettings,
    load_config,
)

__all__ = [
    "ConfigurationError",
    "Configuration",
    "ConnectionPoolConfiguration",
    "ConsoleSettings",
    "LogLevel",
    "LoggingSettings",
    "ThemeSettings",
    "configuration_schema",
    "load_config",
]
