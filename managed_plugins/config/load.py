"""Policy file loading with environment-aware failure handling."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from managed_plugins.core.errors import ConfigError, ConfigParseError, ConfigReadError
from managed_plugins.environment import PRODUCTION

from .models import PolicyDocument
from .normalize import normalize_document

logger = logging.getLogger("managed_plugins.config")

_YAML_SUFFIXES = {".yaml", ".yml"}


def _exists(path: Path) -> bool:
    try:
        path.stat()
    except (FileNotFoundError, NotADirectoryError):
        return False
    except OSError as exc:
        raise ConfigReadError(f"Failed to read config file: {path}", path) from exc
    return True


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigReadError(f"Failed to read config file: {path}", path) from exc


def _parse(path: Path, text: str) -> Any:
    try:
        if path.suffix.lower() in _YAML_SUFFIXES:
            return yaml.safe_load(text)
        return json.loads(text)
    except (ValueError, RecursionError, yaml.YAMLError) as exc:
        raise ConfigParseError(f"Failed to parse config file: {exc}", path) from exc


def _handle_config_error(error: ConfigError, environment: str) -> PolicyDocument:
    logger.error("Manage Plugins: %s", error.message)
    if environment != PRODUCTION:
        raise error
    logger.warning(
        "Manage Plugins: ignoring unusable config file %s in %s; no plugin rules applied",
        error.path,
        environment,
    )
    return PolicyDocument.empty()


def load(path: str | Path, environment: str) -> PolicyDocument:
    """Load and normalize the policy file at ``path``.

    A missing file yields the empty policy. A file that cannot be read or
    parsed raises ``ConfigError`` unless ``environment`` is production, where
    the failure is logged and the empty policy is returned instead.
    """
    cfg_path = Path(path)
    try:
        if not _exists(cfg_path):
            return PolicyDocument.empty()
        raw = _parse(cfg_path, _read_text(cfg_path))
    except ConfigError as exc:
        return _handle_config_error(exc, environment)
    return normalize_document(raw)


class ConfigLoader:
    """Loaded policy bound to one environment."""

    def __init__(self, path: str | Path, environment: str) -> None:
        self._path = Path(path)
        self._environment = environment
        self._document = load(self._path, environment)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def document(self) -> PolicyDocument:
        return self._document

    def get_disabled_plugins(self) -> list[str]:
        return list(self._document.effective_rules(self._environment).disabled)

    def get_required_plugins(self) -> list[str]:
        return list(self._document.effective_rules(self._environment).required)

    def get_config(self) -> dict[str, Any]:
        return self._document.as_dict()

    def get_environment(self) -> str:
        return self._environment
