from .document import (
    IBObject, GenericNode, ProxyNode, Reference, ArrayNode, OrderedSetNode,
    DictionaryNode, ActionConnection, OutletConnection, ConnectionRecord,
    ObjectRecord, PartialClassDescription, IBDocument, Node, Value,
    OBJECTS_KEY, CLASSES_KEY,
)
from .declarations import (
    MemberKind, Access, Attribute, NativeFieldAccess, OutletProperty, ActionStub,
    ClassMember, ClassDeclaration, CodeBehind, GenerationStats,
)
from .parameters import GenerationConfig
from .context import SynthesisContext

__all__ = [
    "IBObject", "GenericNode", "ProxyNode", "Reference", "ArrayNode", "OrderedSetNode",
    "DictionaryNode", "ActionConnection", "OutletConnection", "ConnectionRecord",
    "ObjectRecord", "PartialClassDescription", "IBDocument", "Node", "Value",
    "OBJECTS_KEY", "CLASSES_KEY",
    "MemberKind", "Access", "Attribute", "NativeFieldAccess", "OutletProperty", "ActionStub",
    "ClassMember", "ClassDeclaration", "CodeBehind", "GenerationStats",
    "GenerationConfig",
    "SynthesisContext",
]
