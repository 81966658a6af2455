"""
Shared utilities for CLI commands.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from agent_console.config.app import LoggingSettings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(settings: LoggingSettings, verbose: bool = False) -> None:
    """
    Configure file logging for the console.

    The terminal belongs to the TUI, so records go to a rotating log file.

    Args:
        settings: Logging configuration
        verbose: If True, enable DEBUG level logging
    """
    log_level = logging.DEBUG if verbose else getattr(logging, settings.level.upper())

    root = logging.getLogger()
    root.setLevel(log_level)

    # Avoid duplicate handlers when called twice in one process
    for handler in list(root.handlers):
        if isinstance(handler, RotatingFileHandler):
            root.removeHandler(handler)
            handler.close()

    log_file_path = Path(settings.file).expanduser()
    log_file_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        log_file_path,
        maxBytes=settings.max_size_mb * 1024 * 1024,
        backupCount=settings.backup_count,
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    root.addHandler(file_handler)

    # Silence noisy third-party loggers
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("markdown_it").setLevel(logging.WARNING)


def setup_cli_logging(verbose: bool = False) -> None:
    """
    Configure stream logging for commands that do not start the console.

    Args:
        verbose: If True, enable DEBUG level logging
    """
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
