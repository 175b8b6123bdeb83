"""Environment-aware control over which host plugins may be active."""

from .bootstrap import ManagedPlugins, start
from .config import ConfigLoader, PolicyDocument, RuleSet, default_config_path, load
from .core.errors import ConfigError, ConfigParseError, ConfigReadError, ManagedPluginsError
from .environment import PRODUCTION, detect
from .plugins import (
    HookRegistry,
    InstalledInventory,
    ListReconciler,
    PolicyResolver,
    PolicyStatus,
    register_hooks,
)

__all__ = [
    "ConfigError",
    "ConfigLoader",
    "ConfigParseError",
    "ConfigReadError",
    "HookRegistry",
    "InstalledInventory",
    "ListReconciler",
    "ManagedPlugins",
    "ManagedPluginsError",
    "PRODUCTION",
    "PolicyDocument",
    "PolicyResolver",
    "PolicyStatus",
    "RuleSet",
    "default_config_path",
    "detect",
    "load",
    "register_hooks",
    "start",
]
