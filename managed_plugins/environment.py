"""Deployment environment detection."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

PRODUCTION = "production"
ENV_VAR = "WP_ENV"
ENV_CONSTANT = "WP_ENVIRONMENT_TYPE"
MARKER_RELATIVE_PATH = Path("deploy") / "shared" / ".environment"


def marker_path(home: str | Path) -> Path:
    return Path(home) / MARKER_RELATIVE_PATH


def _read_marker(home: str | Path | None) -> str:
    if not home:
        return ""
    path = marker_path(home)
    try:
        if not path.is_file():
            return ""
        return path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError):
        return ""


def detect(
    environ: Mapping[str, str] | None = None,
    constants: Mapping[str, Any] | None = None,
    home: str | Path | None = None,
) -> str:
    """Return the active environment name.

    Sources, first non-empty wins:
    1. ``WP_ENV`` in the process environment
    2. the host's ``WP_ENVIRONMENT_TYPE`` constant
    3. ``<HOME>/deploy/shared/.environment`` written by the deploy tool
    4. ``"production"``
    """
    env = os.environ if environ is None else environ
    override = env.get(ENV_VAR)
    if override:
        return override

    if constants is not None:
        constant_value = constants.get(ENV_CONSTANT)
        if constant_value:
            return str(constant_value)

    marker = _read_marker(home if home is not None else env.get("HOME"))
    if marker:
        return marker

    return PRODUCTION
