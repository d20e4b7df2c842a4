"""Action stubs — one partial method per distinct action label.

Actions sharing a label are merged into a single stub. The sender type is
the mapped class of the senders when they all agree, otherwise the
foundation root object type. No common ancestor is searched for.
"""

from __future__ import annotations
import logging

from codebehind.rules.base import MemberRule
from codebehind.core.listing import StubFormatter, build_stub_listing, render_action_stub
from codebehind.core.naming import map_type_name
from codebehind.core.resolver import resolve_reference
from codebehind.models import (
    ActionConnection, ActionStub, Attribute, ClassDeclaration, ClassMember,
    ConnectionRecord, GenericNode, GenerationConfig, SynthesisContext,
)


logger = logging.getLogger(__name__)


class ActionMemberRule(MemberRule):
    """Partial action methods with an Export binding per selector."""

    priority = 50

    def __init__(self, formatter: StubFormatter = render_action_stub) -> None:
        self.formatter = formatter

    def get_id(self) -> str:
        return "members.actions"

    def get_name(self) -> str:
        return "Action Method Stubs"

    def applies(self, context: SynthesisContext, records: list[ConnectionRecord]) -> bool:
        return any(isinstance(r.connection, ActionConnection) for r in records)

    def generate(
        self,
        context: SynthesisContext,
        declaration: ClassDeclaration,
        records: list[ConnectionRecord],
    ) -> list[ClassMember]:
        config = context.config
        members: list[ClassMember] = []

        # Group by label, keeping first-seen order
        by_label: dict[str, list[ActionConnection]] = {}
        for record in records:
            if isinstance(record.connection, ActionConnection):
                by_label.setdefault(record.connection.label, []).append(record.connection)

        for label, actions in by_label.items():
            sender_type = self._common_sender_type(actions, config)
            stub = self._create_stub(label, sender_type, config)
            members.append(stub)

            if config.stub_listing:
                self._attach_listing(declaration, stub)

        return members

    def _sender_type(self, action: ActionConnection, config: GenerationConfig) -> str:
        sender = resolve_reference(action.source)
        if isinstance(sender, GenericNode):
            return map_type_name(sender.class_tag, config)
        return config.foundation_object_type

    def _common_sender_type(self, actions: list[ActionConnection], config: GenerationConfig) -> str:
        """First sender's type, or the root object type on the first mismatch."""
        common: str | None = None
        for action in actions:
            candidate = self._sender_type(action, config)
            if common is None:
                common = candidate
            elif candidate != common:
                common = config.foundation_object_type
                break
        return common or config.foundation_object_type

    def _create_stub(self, label: str, sender_type: str, config: GenerationConfig) -> ActionStub:
        name = label
        if name.endswith(config.selector_separator):
            name = name[:-len(config.selector_separator)]
        return ActionStub(
            name=name,
            selector=label,
            sender_type=sender_type,
            attributes=[Attribute(name=config.attribute(config.export_attribute), argument=label)],
        )

    def _attach_listing(self, declaration: ClassDeclaration, stub: ActionStub) -> None:
        try:
            listing = build_stub_listing(stub, self.formatter)
        except Exception:
            logger.warning("Could not format stub listing for %s.%s", declaration.name, stub.name,
                           exc_info=True)
            return
        declaration.add_comment(listing)
