"""Agent console - settings console for the proxy agent."""

__version__ = "0.1.0"
