"""Plugin policy resolution and active-list reconciliation."""

from .hooks import (
    ACTIVE_PLUGINS_HOOK,
    EARLIEST_PRIORITY,
    NETWORK_ACTIVE_PLUGINS_HOOK,
    HookRegistry,
    register_hooks,
)
from .inventory import InstalledInventory
from .reconciler import ListReconciler, PolicyStatus
from .resolver import PolicyResolver

__all__ = [
    "ACTIVE_PLUGINS_HOOK",
    "EARLIEST_PRIORITY",
    "NETWORK_ACTIVE_PLUGINS_HOOK",
    "HookRegistry",
    "InstalledInventory",
    "ListReconciler",
    "PolicyResolver",
    "PolicyStatus",
    "register_hooks",
]
