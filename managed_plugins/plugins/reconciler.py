"""Reconcile the host's active plugin lists against the effective policy."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Callable, Container

from .inventory import InstalledInventory
from .resolver import PolicyResolver


@dataclass(frozen=True)
class PolicyStatus:
    environment: str
    disabled: tuple[str, ...]
    required: tuple[str, ...]
    disabled_installed: int
    required_installed: int
    required_missing: int


def _unique(items: list[Any]) -> list[Any]:
    # Host lists should hold strings only; anything else is compared by equality.
    seen: set[str] = set()
    ordered: list[Any] = []
    for item in items:
        if isinstance(item, str):
            if item in seen:
                continue
            seen.add(item)
        elif item in ordered:
            continue
        ordered.append(item)
    return ordered


class ListReconciler:
    """Applies the resolved policy to the host's active plugin list and network map."""

    def __init__(
        self,
        resolver: PolicyResolver,
        inventory: InstalledInventory,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.resolver = resolver
        self.inventory = inventory
        self._clock = clock

    def _addable(self, present: Container[str]) -> list[str]:
        """Required plugins that are installed, not disabled, and not in ``present``."""
        disabled = set(self.resolver.disabled())
        additions: list[str] = []
        for plugin_id in self.resolver.required():
            if plugin_id in disabled or plugin_id in present:
                continue
            if not self.inventory.contains(plugin_id):
                continue
            additions.append(plugin_id)
        return additions

    def filter_active(self, plugins: Any) -> Any:
        """Return a new active list with disabled plugins removed and required ones appended.

        Input that is not a list is handed back untouched.
        """
        if not isinstance(plugins, list):
            return plugins

        result = list(plugins)
        disabled = self.resolver.disabled()
        if disabled:
            blocked = set(disabled)
            result = [item for item in result if not (isinstance(item, str) and item in blocked)]

        if self.resolver.required():
            present = {item for item in result if isinstance(item, str)}
            result.extend(self._addable(present))

        return _unique(result)

    def filter_network_active(self, plugins: Any) -> Any:
        """Same policy for the network-wide ``{plugin_id: activated_at}`` map."""
        if not isinstance(plugins, dict):
            return plugins

        blocked = set(self.resolver.disabled())
        filtered = {plugin_id: ts for plugin_id, ts in plugins.items() if plugin_id not in blocked}

        if self.resolver.required():
            now = int(self._clock())
            for plugin_id in self._addable(filtered):
                filtered[plugin_id] = now
        return filtered

    def disabled_installed_count(self) -> int:
        disabled = self.resolver.disabled()
        if not disabled:
            return 0
        installed = self.inventory.keys()
        return sum(1 for plugin_id in disabled if plugin_id in installed)

    def required_installed_count(self) -> int:
        required = self.resolver.required()
        if not required:
            return 0
        installed = self.inventory.keys()
        return sum(1 for plugin_id in required if plugin_id in installed)

    def required_missing_count(self) -> int:
        required = self.resolver.required()
        if not required:
            return 0
        installed = self.inventory.keys()
        return sum(1 for plugin_id in required if plugin_id not in installed)

    def status(self) -> PolicyStatus:
        return PolicyStatus(
            environment=self.resolver.environment,
            disabled=self.resolver.disabled(),
            required=self.resolver.required(),
            disabled_installed=self.disabled_installed_count(),
            required_installed=self.required_installed_count(),
            required_missing=self.required_missing_count(),
        )
