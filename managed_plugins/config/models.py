"""Policy data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True)
class RuleSet:
    disabled: tuple[str, ...] = ()
    required: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.disabled and not self.required

    def as_dict(self) -> dict[str, list[str]]:
        return {"disabled": list(self.disabled), "required": list(self.required)}


EMPTY_RULES = RuleSet()


@dataclass(frozen=True)
class PolicyDocument:
    """Normalized policy: global rules plus per-environment rules.

    Both members are always present. ``environments`` is read-only once the
    document is built.
    """

    global_rules: RuleSet = EMPTY_RULES
    environments: Mapping[str, RuleSet] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        if not isinstance(self.environments, MappingProxyType):
            object.__setattr__(self, "environments", MappingProxyType(dict(self.environments)))

    @classmethod
    def empty(cls) -> "PolicyDocument":
        return cls()

    def rules_for(self, environment: str) -> RuleSet:
        return self.environments.get(environment, EMPTY_RULES)

    def effective_rules(self, environment: str) -> RuleSet:
        """Global rules followed by environment rules not already listed."""
        env_rules = self.rules_for(environment)
        return RuleSet(
            disabled=tuple(dict.fromkeys([*self.global_rules.disabled, *env_rules.disabled])),
            required=tuple(dict.fromkeys([*self.global_rules.required, *env_rules.required])),
        )

    def as_dict(self) -> dict[str, Any]:
        return {
            "global": self.global_rules.as_dict(),
            "environments": {name: rules.as_dict() for name, rules in self.environments.items()},
        }
