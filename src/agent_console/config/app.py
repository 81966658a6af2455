"""
Configuration management for the agent console.

Provides YAML-based configuration with CLI overrides,
configuration hierarchy (CLI > YAML > Defaults), and validation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

DEFAULT_CONFIG_FILE = "~/.agent-console/config.yaml"


class ThemeSettings(BaseModel):
    """Theme configuration."""

    preset: str = Field(
        default="aura",
        description="Theme preset name (console preset or built-in Textual theme)",
    )

    @field_validator("preset")
    @classmethod
    def validate_preset(cls, v: str) -> str:
        """Validate preset name is not blank."""
        if not v.strip():
            raise ValueError("Theme preset must not be empty")
        return v.strip()


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: Literal["debug", "info", "warning", "error"] = Field(
        default="info",
        description="Log level",
    )
    file: str = Field(
        default="~/.agent-console/logs/console.log",
        description="Console log file path",
    )
    max_size_mb: int = Field(
        default=10,
        description="Maximum log file size in MB",
    )
    backup_count: int = Field(
        default=5,
        description="Number of backup log files to keep",
    )

    @field_validator("max_size_mb", "backup_count")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate value is positive."""
        if v <= 0:
            raise ValueError("Value must be positive")
        return v


class ConsoleSettings(BaseModel):
    """
    Main configuration for the agent console.

    Configuration is loaded with the following priority:
    1. CLI arguments (highest)
    2. YAML file (~/.agent-console/config.yaml)
    3. Defaults (lowest)
    """

    theme: ThemeSettings = Field(
        default_factory=ThemeSettings,
        description="Theme configuration",
    )
    widgets: list[str] = Field(
        default_factory=lambda: ["Button", "InputText"],
        description="Names of reusable widgets registered with the console at startup",
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration",
    )

    @field_validator("widgets")
    @classmethod
    def validate_widgets(cls, v: list[str]) -> list[str]:
        """Validate widget names are unique."""
        duplicates = sorted({name for name in v if v.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate widget names: {', '.join(duplicates)}")
        return v


def load_yaml(config_file: str) -> dict[str, Any]:
    """
    Read console settings from a YAML file.

    A missing or empty file yields an empty mapping, so defaults apply.

    Raises:
        ValueError: If the file is not ``.yaml``/``.yml``, does not parse, or
            does not hold a mapping at the top level
    """
    config_path = Path(config_file).expanduser()
    if not config_path.exists():
        return {}

    if config_path.suffix.lower() not in (".yaml", ".yml"):
        raise ValueError(f"Settings file must be YAML (.yaml or .yml): {config_path}")

    try:
        data = yaml.safe_load(config_path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping at top level: {config_path}")
    return data


def apply_cli_overrides(
    config_dict: dict[str, Any],
    cli_overrides: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Merge command-line overrides into a settings mapping in place.

    Dotted keys address nested sections, e.g. ``{"theme.preset": "nord"}``.
    """
    for key, value in (cli_overrides or {}).items():
        *sections, leaf = key.split(".")
        target = config_dict
        for section in sections:
            if not isinstance(target.get(section), dict):
                target[section] = {}
            target = target[section]
        target[leaf] = value
    return config_dict


def load_config(
    config_file: str | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> ConsoleSettings:
    """
    Load console settings. Command-line overrides win over the YAML file,
    which wins over defaults.

    Raises:
        ValueError: If the resulting settings are invalid
    """
    config_file = config_file or DEFAULT_CONFIG_FILE
    config_dict = apply_cli_overrides(load_yaml(config_file), cli_overrides)

    try:
        return ConsoleSettings.model_validate(config_dict)
    except ValidationError as e:
        raise ValueError(f"Configuration validation failed for {config_file}: {e}") from e
