"""Core error types for managed plugins."""

from __future__ import annotations

from pathlib import Path


class ManagedPluginsError(RuntimeError):
    """Base error for managed plugins."""


class ConfigError(ManagedPluginsError):
    """Raised when the policy file exists but cannot be used."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        self.message = message
        self.path = Path(path) if path is not None else None
        detail = message
        if self.path is not None:
            detail = f"{message} (file: {self.path}; check file permissions and syntax)"
        super().__init__(detail)


class ConfigReadError(ConfigError):
    """Raised when the policy file cannot be read."""


class ConfigParseError(ConfigError):
    """Raised when the policy file is not well-formed."""
