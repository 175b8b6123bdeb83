"""Core utilities for managed plugins."""

from .errors import ConfigError, ConfigParseError, ConfigReadError, ManagedPluginsError

__all__ = [
    "ConfigError",
    "ConfigParseError",
    "ConfigReadError",
    "ManagedPluginsError",
]
