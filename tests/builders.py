"""Document graph builders shared by the tests."""

from __future__ import annotations

from pathlib import Path

from codebehind.models import (
    ActionConnection, ArrayNode, ConnectionRecord, DictionaryNode, GenericNode,
    IBDocument, ObjectRecord, OrderedSetNode, OutletConnection,
    PartialClassDescription, Reference, OBJECTS_KEY, CLASSES_KEY,
)


FIXTURES = Path(__file__).parent / "fixtures"


def ref(target, depth: int = 1):
    """Wrap a node in `depth` levels of Reference."""
    for _ in range(depth):
        target = Reference(target=target)
    return target


def outlet(connection_id: int, label: str, source, destination) -> ConnectionRecord:
    return ConnectionRecord(
        connection_id=connection_id,
        connection=OutletConnection(label=label, source=ref(source), destination=ref(destination)),
    )


def action(connection_id: int, label: str, source, destination) -> ConnectionRecord:
    return ConnectionRecord(
        connection_id=connection_id,
        connection=ActionConnection(label=label, source=ref(source), destination=ref(destination)),
    )


def build_document(
    nodes=(),
    custom_classes: dict[int, str] | None = None,
    approved=(),
    connections=(),
    include_classes: bool = True,
    include_connections: bool = True,
) -> IBDocument:
    """Assemble a document with the conventional Objects/Classes shape."""
    flattened = {
        f"{object_id}.CustomClassName": name
        for object_id, name in (custom_classes or {}).items()
    }
    objects_properties = {
        "flattenedProperties": DictionaryNode(entries=flattened),
        "objectRecords": OrderedSetNode(ordered_objects=[
            ObjectRecord(object_id=node.id, object=ref(node)) for node in nodes
        ]),
    }
    if include_connections:
        objects_properties["connectionRecords"] = ArrayNode(values=list(connections))

    properties = {OBJECTS_KEY: GenericNode(class_tag="IBObjectContainer", properties=objects_properties)}
    if include_classes:
        properties[CLASSES_KEY] = GenericNode(
            class_tag="IBClassDescriber",
            properties={
                "referencedPartialClassDescriptions": ArrayNode(values=[
                    PartialClassDescription(class_name=name) for name in approved
                ]),
            },
        )
    return IBDocument(properties=properties)


