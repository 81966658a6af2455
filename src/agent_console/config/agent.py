"""
Agent runtime configuration model.

Contains the Pydantic models the console exchanges with the agent process:
- LogLevel: closed, ordered severity ceiling
- ConnectionPoolConfiguration: outbound connection pool tuning
- Configuration: top-level agent runtime settings

The wire format is camelCase JSON. Integer fields are strict: booleans,
numeric strings and floats are rejected. Unset optional fields are omitted
from the wire form so "unset" stays distinguishable from an explicit zero.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

MIN_PORT = 1
MAX_PORT = 65535

# stdlib logging has no TRACE level
TRACE_LOGGING_LEVEL = 5


class ConfigurationError(ValueError):
    """Raised when agent configuration input is rejected."""

    def __init__(self, errors: list[tuple[str, str]]) -> None:
        self.errors = errors
        details = "; ".join(f"{loc}: {msg}" if loc else msg for loc, msg in errors)
        super().__init__(f"Invalid agent configuration: {details}")

    @classmethod
    def from_validation_error(cls, error: ValidationError) -> ConfigurationError:
        """Build from a pydantic ValidationError, keeping field locations."""
        errors = [
            (".".join(str(part) for part in err["loc"]), err["msg"]) for err in error.errors()
        ]
        return cls(errors)


class LogLevel(str, Enum):
    """Maximum log level the agent emits.

    Members are ordered from most restrictive to most verbose, so
    ``LogLevel.ERROR < LogLevel.DEBUG``. Plain level names compare the same
    way, and unknown names fall back to string comparison.
    """

    OFF = "OFF"
    ERROR = "ERROR"
    WARN = "WARN"
    INFO = "INFO"
    DEBUG = "DEBUG"
    TRACE = "TRACE"

    @property
    def rank(self) -> int:
        return _LEVEL_ORDER.index(self)

    def to_logging_level(self) -> int:
        """Return the equivalent stdlib logging threshold."""
        return _LOGGING_LEVELS[self]

    def _compare(self, other: object) -> int | None:
        if not isinstance(other, LogLevel):
            if not isinstance(other, str):
                return None
            try:
                other = LogLevel(other)
            except ValueError:
                return None
        return self.rank - other.rank

    def __lt__(self, other: object) -> bool:
        diff = self._compare(other)
        if diff is None:
            return NotImplemented
        return diff < 0

    def __le__(self, other: object) -> bool:
        diff = self._compare(other)
        if diff is None:
            return NotImplemented
        return diff <= 0

    def __gt__(self, other: object) -> bool:
        diff = self._compare(other)
        if diff is None:
            return NotImplemented
        return diff > 0

    def __ge__(self, other: object) -> bool:
        diff = self._compare(other)
        if diff is None:
            return NotImplemented
        return diff >= 0


_LEVEL_ORDER: list[LogLevel] = list(LogLevel)

_LOGGING_LEVELS: dict[LogLevel, int] = {
    LogLevel.OFF: logging.CRITICAL + 10,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARN: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.TRACE: TRACE_LOGGING_LEVEL,
}


class ConnectionPoolConfiguration(BaseModel):
    """Pool of reusable outbound connections held by the agent."""

    model_config = {"populate_by_name": True, "frozen": True}

    check_interval: int = Field(
        alias="checkInterval",
        strict=True,
        description="Interval between health checks of idle pooled connections",
    )
    fill_interval: int = Field(
        alias="fillInterval",
        strict=True,
        description="Interval between attempts to refill the pool toward capacity",
    )
    max_pool_size: int = Field(
        alias="maxPoolSize",
        strict=True,
        description="Upper bound on simultaneously held pooled connections (0 disables pooling)",
    )

    @field_validator("check_interval", "fill_interval", "max_pool_size")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        """Validate value is not negative."""
        if v < 0:
            raise ValueError("Value must not be negative")
        return v

    @property
    def pooling_enabled(self) -> bool:
        return self.max_pool_size > 0


class Configuration(BaseModel):
    """
    Desired agent runtime settings.

    A snapshot to hand to the agent, not observed agent state. Fields may be
    reassigned after construction; assignments are validated like
    construction.

    Example wire form:
    ```json
    {
      "agentServerPort": 8080,
      "workerThreadNumber": 4,
      "maxLogLevel": "INFO",
      "connectionPoolConfiguration": {
        "checkInterval": 30,
        "fillInterval": 10,
        "maxPoolSize": 100
      }
    }
    ```
    """

    model_config = {"populate_by_name": True, "validate_assignment": True}

    agent_server_port: int = Field(
        alias="agentServerPort",
        strict=True,
        description="TCP port the agent listens on",
    )
    worker_thread_number: int = Field(
        alias="workerThreadNumber",
        strict=True,
        description="Number of worker threads the agent runs",
    )
    max_log_level: LogLevel | None = Field(
        default=None,
        alias="maxLogLevel",
        description="Log level ceiling (unset: agent default)",
    )
    connection_pool_configuration: ConnectionPoolConfiguration | None = Field(
        default=None,
        alias="connectionPoolConfiguration",
        description="Connection pool settings (unset: agent default)",
    )

    @field_validator("agent_server_port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        """Validate port number is in valid range."""
        if not (MIN_PORT <= v <= MAX_PORT):
            raise ValueError(f"Port must be between {MIN_PORT} and {MAX_PORT}")
        return v

    @field_validator("worker_thread_number")
    @classmethod
    def validate_worker_threads(cls, v: int) -> int:
        """Validate at least one worker thread is requested."""
        if v < 1:
            raise ValueError("Worker thread number must be at least 1")
        return v

    def to_wire(self) -> dict[str, Any]:
        """Return the camelCase mapping sent to the agent, without unset fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: int | None = None) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)

    @classmethod
    def from_wire(cls, data: Any) -> Configuration:
        """
        Decode a wire mapping.

        Raises:
            ConfigurationError: If any field is missing or out of range
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError.from_validation_error(e) from e

    @classmethod
    def from_json(cls, text: str | bytes) -> Configuration:
        """
        Decode JSON text.

        Raises:
            ConfigurationError: If the text is not valid JSON or fails validation
        """
        try:
            return cls.model_validate_json(text)
        except ValidationError as e:
            raise ConfigurationError.from_validation_error(e) from e

    def summary(self) -> str:
        level = self.max_log_level.value if self.max_log_level else "default"
        pool = self.connection_pool_configuration
        if pool is None:
            pool_text = "default"
        elif not pool.pooling_enabled:
            pool_text = "disabled"
        else:
            pool_text = (
                f"max={pool.max_pool_size} check={pool.check_interval} fill={pool.fill_interval}"
            )
        return (
            f"port={self.agent_server_port} workers={self.worker_thread_number} "
            f"log={level} pool={pool_text}"
        )


def configuration_schema() -> dict[str, Any]:
    """JSON Schema of the agent configuration wire format."""
    return Configuration.model_json_schema(by_alias=True)
