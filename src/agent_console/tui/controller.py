"""Agent control seam used by the settings form."""

from __future__ import annotations

import logging
from typing import Protocol

from agent_console.config.agent import Configuration

logger = logging.getLogger(__name__)


class AgentController(Protocol):
    """Starts and stops the agent process with a given configuration."""

    def start_agent(self, configuration: Configuration) -> None: ...

    def stop_agent(self) -> None: ...


class LoggingAgentController:
    """Default controller that records and logs requests instead of launching a process."""

    def __init__(self) -> None:
        self.running = False
        self.last_configuration: Configuration | None = None

    def start_agent(self, configuration: Configuration) -> None:
        if self.running:
            logger.info("Agent already running, restarting with new configuration")
        logger.info(f"Received agent configuration: {configuration.to_json()}")
        self.last_configuration = configuration
        self.running = True

    def stop_agent(self) -> None:
        if not self.running:
            logger.debug("Stop requested but agent is not running")
            return
        logger.info("Stopping agent")
        self.running = False
