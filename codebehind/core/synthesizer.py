"""Type synthesis — one pending partial class per approved object record."""

from __future__ import annotations
import logging

from codebehind.models import (
    Attribute, ClassDeclaration, GenericNode, ObjectRecord, OrderedSetNode,
    ProxyNode, SynthesisContext,
)
from codebehind.core.naming import map_type_name
from codebehind.core.resolver import resolve_reference, resolved_id


logger = logging.getLogger(__name__)


class TypeSynthesizer:
    """
    Walks object records in document order and creates class declarations.

    A record becomes a declaration when its object has an identity, its
    custom class name is known, and that name is in the approved catalogue.
    Objects loaded from another nib are left to that nib's code-behind.
    """

    def synthesize(self, context: SynthesisContext, records: OrderedSetNode) -> None:
        config = context.config

        for record in records.ordered_objects:
            if not isinstance(record, ObjectRecord):
                continue

            obj_id = resolved_id(record.object)
            if obj_id is None:
                logger.debug("Skipping object record %s without identity", record.object_id)
                continue

            name = context.class_names.get(record.object_id)
            if name is None or not context.is_approved(name):
                continue

            declaration = ClassDeclaration(
                key=obj_id,
                name=name,
                is_partial=True,
                attributes=[Attribute(name=config.attribute(config.register_attribute), argument=name)],
            )

            obj = resolve_reference(record.object)
            base_type = config.foundation_object_type
            if isinstance(obj, ProxyNode):
                base_type = config.view_controller_type
            elif isinstance(obj, GenericNode):
                # Owned by another nib's code-behind
                nib_name = obj.get_property(config.external_nib_key)
                if isinstance(nib_name, str) and nib_name:
                    logger.debug("Skipping %s: loaded from external nib", name)
                    continue
                if obj.class_tag != config.custom_object_tag:
                    base_type = map_type_name(obj.class_tag, config)

            declaration.base_type_hint = base_type
            declaration.add_comment(f"Base type probably should be {base_type} or subclass")

            if obj_id in context.declarations:
                logger.warning(
                    "Object id %s declared twice; replacing %s with %s",
                    obj_id, context.declarations[obj_id].name, name,
                )
            context.declarations[obj_id] = declaration
