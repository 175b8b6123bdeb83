"""Effective disabled/required sets for one resolution pass."""

from __future__ import annotations

from managed_plugins.config.models import PolicyDocument


class PolicyResolver:
    """Memoizing view over a PolicyDocument for a single environment.

    Each set is merged on first access and reused for the rest of the pass.
    A new pass needs a new resolver.
    """

    def __init__(self, document: PolicyDocument, environment: str) -> None:
        self._document = document
        self._environment = environment
        self._disabled: tuple[str, ...] | None = None
        self._required: tuple[str, ...] | None = None

    @property
    def document(self) -> PolicyDocument:
        return self._document

    @property
    def environment(self) -> str:
        return self._environment

    def disabled(self) -> tuple[str, ...]:
        if self._disabled is None:
            self._disabled = self._document.effective_rules(self._environment).disabled
        return self._disabled

    def required(self) -> tuple[str, ...]:
        if self._required is None:
            self._required = self._document.effective_rules(self._environment).required
        return self._required
