"""Rule Registry - the static dispatch table from node kind to rules."""

from collections.abc import Iterable

import structlog

from code_analyzer.errors import RuleRegistrationError
from code_analyzer.models.syntax import SyntaxKind
from code_analyzer.rules.base import RuleDescriptor


class RuleRegistry:
    """Maps each node kind to the ordered list of rules interested in it.

    Rules registered for the same kind are invoked in registration order.
    """

    def __init__(self, rules: Iterable[RuleDescriptor] = ()):
        self._by_kind: dict[SyntaxKind, list[RuleDescriptor]] = {}
        self._descriptors: dict[str, RuleDescriptor] = {}
        self._logger = structlog.get_logger(component="RuleRegistry")

        for descriptor in rules:
            self.register_rule(descriptor)

    @classmethod
    def default(cls) -> "RuleRegistry":
        """Registry loaded with every built-in rule."""
        from code_analyzer.rules import BUILTIN_RULES

        return cls(BUILTIN_RULES)

    def register(self, kind: SyntaxKind, rule: RuleDescriptor) -> None:
        """Associate a rule with a single node kind."""
        if not isinstance(kind, SyntaxKind):
            raise RuleRegistrationError(f"Rule {rule.id} registered for unknown kind {kind!r}")
        if kind not in rule.interested_kinds:
            raise RuleRegistrationError(f"Rule {rule.id} does not declare interest in {kind.value}")

        existing = self._descriptors.get(rule.id)
        if existing is not None and existing is not rule:
            raise RuleRegistrationError(f"Another rule is already registered as {rule.id}")

        rules = self._by_kind.setdefault(kind, [])
        if rule in rules:
            raise RuleRegistrationError(f"Rule {rule.id} is already registered for {kind.value}")

        rules.append(rule)
        self._descriptors.setdefault(rule.id, rule)

    def register_rule(self, descriptor: RuleDescriptor) -> None:
        """Register a descriptor for every kind it is interested in."""
        if not descriptor.interested_kinds:
            raise RuleRegistrationError(f"Rule {descriptor.id} declares no node kinds")
        if descriptor.id in self._descriptors:
            raise RuleRegistrationError(f"Rule {descriptor.id} is already registered")

        unknown = [k for k in descriptor.interested_kinds if not isinstance(k, SyntaxKind)]
        if unknown:
            raise RuleRegistrationError(f"Rule {descriptor.id} declares unknown kinds {unknown!r}")

        for kind in sorted(descriptor.interested_kinds, key=lambda k: k.value):
            self.register(kind, descriptor)

        self._logger.debug(
            "Rule registered",
            rule_id=descriptor.id,
            kinds=sorted(k.value for k in descriptor.interested_kinds),
        )

    def rules_for(self, kind: SyntaxKind) -> tuple[RuleDescriptor, ...]:
        return tuple(self._by_kind.get(kind, ()))

    def get(self, rule_id: str) -> RuleDescriptor | None:
        return self._descriptors.get(rule_id)

    @property
    def descriptors(self) -> tuple[RuleDescriptor, ...]:
        """Unique descriptors in registration order."""
        return tuple(self._descriptors.values())

    @property
    def kinds(self) -> frozenset[SyntaxKind]:
        return frozenset(k for k, rules in self._by_kind.items() if rules)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._descriptors
