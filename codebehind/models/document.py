"""Interface document graph — nodes, references, wiring records."""

from __future__ import annotations
from typing import Annotated, Any, Literal, Optional, Union
from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt, StrictStr


OBJECTS_KEY = "IBDocument.Objects"
CLASSES_KEY = "IBDocument.Classes"


class IBObject(BaseModel):
    """Base for every concrete node. Identity is optional."""
    id: Optional[int] = None


class GenericNode(IBObject):
    """Variant node: a class tag plus an arbitrary keyed property bag."""
    kind: Literal["object"] = "object"
    class_tag: str
    properties: dict[str, Value] = {}

    def get_property(self, name: str, default: Any = None) -> Any:
        return self.properties.get(name, default)


class ProxyNode(IBObject):
    """Placeholder for an object supplied at load time (e.g. File's Owner)."""
    kind: Literal["proxy"] = "proxy"
    properties: dict[str, Value] = {}


class Reference(BaseModel):
    """Indirection to another node or reference. Does not own its target."""
    kind: Literal["reference"] = "reference"
    target: Value = None


class ArrayNode(IBObject):
    kind: Literal["array"] = "array"
    values: list[Value] = []


class OrderedSetNode(IBObject):
    kind: Literal["ordered_set"] = "ordered_set"
    ordered_objects: list[Value] = []


class DictionaryNode(IBObject):
    """Keyed collection, e.g. the document's flattened properties."""
    kind: Literal["dictionary"] = "dictionary"
    entries: dict[str, Value] = {}


class ActionConnection(IBObject):
    """Sender (source) triggers a method on the owner (destination)."""
    kind: Literal["action_connection"] = "action_connection"
    label: str
    source: Value = None
    destination: Value = None


class OutletConnection(IBObject):
    """Owner (source) holds a reference to the widget (destination)."""
    kind: Literal["outlet_connection"] = "outlet_connection"
    label: str
    source: Value = None
    destination: Value = None


class ConnectionRecord(IBObject):
    kind: Literal["connection_record"] = "connection_record"
    connection_id: int
    connection: Value = None


class ObjectRecord(IBObject):
    kind: Literal["object_record"] = "object_record"
    object_id: Optional[int] = None
    object: Value = None


class PartialClassDescription(IBObject):
    kind: Literal["partial_class_description"] = "partial_class_description"
    class_name: Optional[str] = None
    superclass_name: Optional[str] = None


Node = Annotated[
    Union[
        GenericNode,
        ProxyNode,
        Reference,
        ArrayNode,
        OrderedSetNode,
        DictionaryNode,
        ActionConnection,
        OutletConnection,
        ConnectionRecord,
        ObjectRecord,
        PartialClassDescription,
    ],
    Field(discriminator="kind"),
]

Value = Union[Node, StrictBool, StrictInt, StrictFloat, StrictStr, None]


class IBDocument(BaseModel):
    """A deserialized interface document: the top-level property bag."""
    properties: dict[str, Value] = {}

    @property
    def objects(self) -> GenericNode | None:
        value = self.properties.get(OBJECTS_KEY)
        return value if isinstance(value, GenericNode) else None

    @property
    def classes(self) -> GenericNode | None:
        value = self.properties.get(CLASSES_KEY)
        return value if isinstance(value, GenericNode) else None


for _model in (
    GenericNode, ProxyNode, Reference, ArrayNode, OrderedSetNode, DictionaryNode,
    ActionConnection, OutletConnection, ConnectionRecord, ObjectRecord,
    PartialClassDescription, IBDocument,
):
    _model.model_rebuild()
