"""Outlet properties — one private property per outlet connection.

Outlets are not de-duplicated by label. Each property reads and writes the
native instance variable through the named-field accessors instead of a
backing field.
"""

from __future__ import annotations

from codebehind.rules.base import MemberRule
from codebehind.core.naming import map_type_name
from codebehind.core.resolver import resolve_reference
from codebehind.models import (
    Access, Attribute, ClassDeclaration, ClassMember, ConnectionRecord,
    GenericNode, GenerationConfig, NativeFieldAccess, OutletConnection,
    OutletProperty, SynthesisContext,
)


class OutletMemberRule(MemberRule):
    """Private outlet properties with a Connect binding."""

    priority = 60

    def get_id(self) -> str:
        return "members.outlets"

    def get_name(self) -> str:
        return "Outlet Properties"

    def applies(self, context: SynthesisContext, records: list[ConnectionRecord]) -> bool:
        return any(isinstance(r.connection, OutletConnection) for r in records)

    def generate(
        self,
        context: SynthesisContext,
        declaration: ClassDeclaration,
        records: list[ConnectionRecord],
    ) -> list[ClassMember]:
        config = context.config
        members: list[ClassMember] = []
        for record in records:
            outlet = record.connection
            if not isinstance(outlet, OutletConnection):
                continue
            members.append(self._create_property(outlet.label, self._widget_type(outlet, config), config))
        return members

    def _widget_type(self, outlet: OutletConnection, config: GenerationConfig) -> str:
        # Destination is the widget instance
        widget = resolve_reference(outlet.destination)
        if isinstance(widget, GenericNode):
            return map_type_name(widget.class_tag, config)
        return config.generic_object_type

    def _create_property(self, name: str, type_name: str, config: GenerationConfig) -> OutletProperty:
        return OutletProperty(
            name=name,
            type=type_name,
            access=Access.PRIVATE,
            attributes=[Attribute(name=config.attribute(config.connect_attribute), argument=name)],
            getter=NativeFieldAccess(method=config.native_field_getter, field=name, cast=type_name),
            setter=NativeFieldAccess(method=config.native_field_setter, field=name),
        )
