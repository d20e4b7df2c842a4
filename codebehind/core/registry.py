"""Rule registry — stores and orders member rules."""

from __future__ import annotations

from codebehind.models import ConnectionRecord, SynthesisContext
from codebehind.rules.base import MemberRule


class MemberRuleRegistry:
    """
    Central registry for all member rules.

    Rules are registered at startup. During generation, the registry
    returns the applicable rules sorted by priority with dependencies
    resolved.
    """

    def __init__(self) -> None:
        self._rules: dict[str, MemberRule] = {}

    def register(self, rule: MemberRule) -> None:
        """Register a member rule."""
        self._rules[rule.get_id()] = rule

    def unregister(self, rule_id: str) -> None:
        """Remove a rule from the registry."""
        self._rules.pop(rule_id, None)

    def get_rule(self, rule_id: str) -> MemberRule | None:
        return self._rules.get(rule_id)

    def list_rules(self) -> list[MemberRule]:
        """Return all registered rules."""
        return list(self._rules.values())

    def get_applicable_rules(
        self, context: SynthesisContext, records: list[ConnectionRecord],
    ) -> list[MemberRule]:
        """
        Return rules that apply to one owner's records, sorted by priority.

        Respects GenerationConfig.enabled_rules and disabled_rules.
        """
        config = context.config
        candidates = list(self._rules.values())

        if config.enabled_rules:
            candidates = [r for r in candidates if r.get_id() in config.enabled_rules]

        if config.disabled_rules:
            candidates = [r for r in candidates if r.get_id() not in config.disabled_rules]

        applicable = [r for r in candidates if r.applies(context, records)]

        applicable.sort(key=lambda r: r.priority)
        return self._resolve_order(applicable)

    def _resolve_order(self, rules: list[MemberRule]) -> list[MemberRule]:
        """Topological sort respecting dependencies."""
        rule_map = {r.get_id(): r for r in rules}
        visited: set[str] = set()
        ordered: list[MemberRule] = []

        def visit(rule_id: str) -> None:
            if rule_id in visited:
                return
            visited.add(rule_id)
            rule = rule_map.get(rule_id)
            if rule is None:
                return
            for dep_id in rule.dependencies:
                visit(dep_id)
            ordered.append(rule)

        for r in rules:
            visit(r.get_id())

        return ordered


def create_default_registry() -> MemberRuleRegistry:
    """Create a registry with the standard action and outlet rules."""
    from codebehind.rules.actions import ActionMemberRule
    from codebehind.rules.outlets import OutletMemberRule

    registry = MemberRuleRegistry()
    registry.register(ActionMemberRule())
    registry.register(OutletMemberRule())
    return registry
