"""Host filter wiring for the active plugin options."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Protocol

from .reconciler import ListReconciler

logger = logging.getLogger("managed_plugins.hooks")

ACTIVE_PLUGINS_HOOK = "option_active_plugins"
NETWORK_ACTIVE_PLUGINS_HOOK = "site_option_active_sitewide_plugins"
EARLIEST_PRIORITY = 1
DEFAULT_PRIORITY = 10

FilterCallback = Callable[[Any], Any]


class FilterHost(Protocol):
    def add_filter(self, name: str, callback: FilterCallback, priority: int = ...) -> Any:
        ...


@dataclass
class _Registration:
    priority: int
    order: int
    callback: FilterCallback


@dataclass
class HookRegistry:
    """Ordered value filters keyed by hook name.

    Filters run in ascending priority; equal priorities keep registration order.
    """

    _filters: dict[str, list[_Registration]] = field(default_factory=dict, init=False)
    _counter: int = field(default=0, init=False)

    def add_filter(self, name: str, callback: FilterCallback, priority: int = DEFAULT_PRIORITY) -> None:
        self._counter += 1
        entries = self._filters.setdefault(name, [])
        entries.append(_Registration(priority=int(priority), order=self._counter, callback=callback))
        entries.sort(key=lambda entry: (entry.priority, entry.order))

    def has_filter(self, name: str) -> bool:
        return bool(self._filters.get(name))

    def apply_filters(self, name: str, value: Any) -> Any:
        for entry in self._filters.get(name, []):
            value = entry.callback(value)
        return value


def register_hooks(host: FilterHost, reconciler: ListReconciler) -> None:
    """Attach both reconcilers ahead of any other filter on the host."""
    host.add_filter(ACTIVE_PLUGINS_HOOK, reconciler.filter_active, EARLIEST_PRIORITY)
    host.add_filter(NETWORK_ACTIVE_PLUGINS_HOOK, reconciler.filter_network_active, EARLIEST_PRIORITY)
    logger.debug(
        "registered %s and %s at priority %d",
        ACTIVE_PLUGINS_HOOK,
        NETWORK_ACTIVE_PLUGINS_HOOK,
        EARLIEST_PRIORITY,
    )
