"""Startup errors for the console bootstrap.

All of these are fatal: the console does not render and the launcher
reports the message.
"""

from __future__ import annotations

from collections.abc import Iterable


class StartupError(RuntimeError):
    """Base exception for console startup failures."""

    pass


class ThemeNotFoundError(StartupError):
    """Raised when a theme preset name cannot be resolved."""

    def __init__(self, name: str, available: Iterable[str]) -> None:
        self.name = name
        self.available = sorted(available)
        super().__init__(
            f"Theme preset '{name}' not found. Available presets: {', '.join(self.available)}"
        )


class UnsupportedOptionError(StartupError):
    """Raised when the console is configured with an option it does not recognise."""

    def __init__(self, option: str, reason: str = "unsupported option") -> None:
        self.option = option
        self.reason = reason
        super().__init__(f"Option '{option}': {reason}")


class UnknownWidgetError(StartupError):
    """Raised when settings name a widget the catalog does not provide."""

    def __init__(self, name: str, available: Iterable[str]) -> None:
        self.name = name
        self.available = sorted(available)
        super().__init__(
            f"Unknown widget '{name}'. Available widgets: {', '.join(self.available)}"
        )


class WidgetNotRegisteredError(StartupError):
    """Raised when a widget is requested by a name nobody registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Widget '{name}' is not registered")


class WidgetAlreadyRegisteredError(StartupError):
    """Raised when a widget name is registered twice."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Widget '{name}' is already registered")


class AlreadyMountedError(StartupError):
    """Raised when the root widget mount is requested more than once."""

    def __init__(self, anchor: str) -> None:
        self.anchor = anchor
        super().__init__(f"Root widget is already mounted at '{anchor}'")


class MountAnchorError(StartupError):
    """Raised when the mount anchor is missing from the document."""

    def __init__(self, anchor: str) -> None:
        self.anchor = anchor
        super().__init__(f"Mount anchor '{anchor}' not found")
