"""Build the policy objects for one request or process."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from managed_plugins.config.load import ConfigLoader
from managed_plugins.environment import detect
from managed_plugins.plugins.hooks import FilterHost, register_hooks
from managed_plugins.plugins.inventory import InstalledInventory, InventoryProvider
from managed_plugins.plugins.reconciler import ListReconciler
from managed_plugins.plugins.resolver import PolicyResolver

logger = logging.getLogger("managed_plugins")


@dataclass(frozen=True)
class ManagedPlugins:
    environment: str
    loader: ConfigLoader
    resolver: PolicyResolver
    reconciler: ListReconciler


def start(
    config_path: str | Path,
    installed: InventoryProvider | Mapping[str, Any],
    *,
    registry: FilterHost | None = None,
    environ: Mapping[str, str] | None = None,
    constants: Mapping[str, Any] | None = None,
    home: str | Path | None = None,
) -> ManagedPlugins:
    """Detect the environment, load the policy and wire the filters.

    ``installed`` is either the host's installed-plugin mapping or a callable
    returning it; a callable is invoked at most once, and only when a filter
    or count needs it. Raises ``ConfigError`` for an unusable policy file
    outside production.
    """
    environment = detect(environ=environ, constants=constants, home=home)
    loader = ConfigLoader(config_path, environment)
    resolver = PolicyResolver(loader.document, environment)
    if isinstance(installed, Mapping):
        inventory = InstalledInventory.from_mapping(installed)
    else:
        inventory = InstalledInventory(installed)
    reconciler = ListReconciler(resolver, inventory)
    if registry is not None:
        register_hooks(registry, reconciler)
    logger.debug("managed plugins started for %s using %s", environment, loader.path)
    return ManagedPlugins(environment=environment, loader=loader, resolver=resolver, reconciler=reconciler)
