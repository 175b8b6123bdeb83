"""Pure normalization of raw policy data into a PolicyDocument."""

from __future__ import annotations

from typing import Any, Mapping

from .models import EMPTY_RULES, PolicyDocument, RuleSet


def _string_items(raw: Any) -> tuple[str, ...]:
    if not isinstance(raw, (list, tuple)):
        return ()
    return tuple(dict.fromkeys(item for item in raw if isinstance(item, str)))


def normalize_rules(raw: Any) -> RuleSet:
    if not isinstance(raw, Mapping):
        return EMPTY_RULES
    return RuleSet(
        disabled=_string_items(raw.get("disabled")),
        required=_string_items(raw.get("required")),
    )


def normalize_document(raw: Any) -> PolicyDocument:
    """Coerce any decoded value into a PolicyDocument.

    Shape problems never raise: anything that is not the expected mapping
    collapses to its empty equivalent.
    """
    if not isinstance(raw, Mapping):
        return PolicyDocument.empty()
    environments_raw = raw.get("environments")
    environments: dict[str, RuleSet] = {}
    if isinstance(environments_raw, Mapping):
        for name, rules in environments_raw.items():
            if not isinstance(name, str):
                continue
            environments[name] = normalize_rules(rules)
    return PolicyDocument(
        global_rules=normalize_rules(raw.get("global")),
        environments=environments,
    )
