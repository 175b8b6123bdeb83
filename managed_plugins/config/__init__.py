"""Policy configuration package."""

from .defaults import CONFIG_FILENAME, default_config_path
from .load import ConfigLoader, load
from .models import EMPTY_RULES, PolicyDocument, RuleSet
from .normalize import normalize_document, normalize_rules

__all__ = [
    "CONFIG_FILENAME",
    "ConfigLoader",
    "EMPTY_RULES",
    "PolicyDocument",
    "RuleSet",
    "default_config_path",
    "load",
    "normalize_document",
    "normalize_rules",
]
