"""Installed-plugin inventory snapshot."""

from __future__ import annotations

from typing import Any, Callable, Mapping

InventoryProvider = Callable[[], Mapping[str, Any]]


class InstalledInventory:
    """Lazily reads the host's installed plugins once and keeps the key set."""

    def __init__(self, provider: InventoryProvider) -> None:
        self._provider = provider
        self._keys: frozenset[str] | None = None

    @classmethod
    def from_mapping(cls, installed: Mapping[str, Any]) -> "InstalledInventory":
        return cls(lambda: installed)

    @property
    def loaded(self) -> bool:
        return self._keys is not None

    def keys(self) -> frozenset[str]:
        if self._keys is None:
            installed = self._provider()
            if isinstance(installed, Mapping):
                self._keys = frozenset(key for key in installed if isinstance(key, str))
            else:
                self._keys = frozenset()
        return self._keys

    def contains(self, plugin_id: str) -> bool:
        return plugin_id in self.keys()

    def __contains__(self, plugin_id: object) -> bool:
        return plugin_id in self.keys()
