"""Default policy file location."""

from __future__ import annotations

from pathlib import Path

CONFIG_DIRNAME = "config"
CONFIG_FILENAME = "managed-plugins.json"


def default_config_path(site_root: str | Path) -> Path:
    """Return ``<parent of site_root>/config/managed-plugins.json``."""
    root = Path(site_root)
    return root.parent / CONFIG_DIRNAME / CONFIG_FILENAME
