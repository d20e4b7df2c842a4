"""Code-behind output models — pending class declarations and their members."""

from __future__ import annotations
from enum import Enum
from typing import Annotated, Literal, Optional, Union
from pydantic import BaseModel, Field


class MemberKind(str, Enum):
    OUTLET = "outlet"
    ACTION = "action"


class Access(str, Enum):
    PUBLIC = "public"
    PRIVATE = "private"


class Attribute(BaseModel):
    """Binding marker read by the native runtime, e.g. Register("MyView")."""
    name: str
    argument: str


class NativeFieldAccess(BaseModel):
    """Accessor that delegates to a named native field on the instance."""
    method: str
    field: str
    cast: Optional[str] = None


class OutletProperty(BaseModel):
    """Property wired to a widget instance through the native ivar."""
    kind: Literal["outlet"] = "outlet"
    name: str
    type: str
    access: Access = Access.PRIVATE
    attributes: list[Attribute] = []
    getter: NativeFieldAccess
    setter: NativeFieldAccess


class ActionStub(BaseModel):
    """Declaration-only action method; the body is left to the user."""
    kind: Literal["action"] = "action"
    name: str
    selector: str           # Original label, separator included
    sender_type: str
    parameter_name: str = "sender"
    return_type: str = "void"
    attributes: list[Attribute] = []


ClassMember = Annotated[
    Union[OutletProperty, ActionStub],
    Field(discriminator="kind"),
]


class ClassDeclaration(BaseModel):
    """A partial class pending code emission, keyed by owner identity."""
    key: int
    name: str
    is_partial: bool = True
    attributes: list[Attribute] = []
    base_type_hint: Optional[str] = None  # Advisory only, never enforced
    comments: list[str] = []
    members: list[ClassMember] = []

    def add_members(self, members: list[ClassMember]) -> None:
        self.members.extend(members)

    def add_comment(self, text: str) -> None:
        self.comments.append(text)

    @property
    def outlets(self) -> list[OutletProperty]:
        return [m for m in self.members if m.kind == MemberKind.OUTLET]

    @property
    def actions(self) -> list[ActionStub]:
        return [m for m in self.members if m.kind == MemberKind.ACTION]


class CodeBehind(BaseModel):
    """The complete set of declarations generated for one document."""
    declarations: list[ClassDeclaration]
    stats: GenerationStats = None  # type: ignore[assignment]

    def model_post_init(self, __context: object) -> None:
        if self.stats is None:
            self.stats = GenerationStats.from_declarations(self.declarations)

    def get_declaration(self, name: str) -> ClassDeclaration | None:
        for d in self.declarations:
            if d.name == name:
                return d
        return None


class GenerationStats(BaseModel):
    """Summary counts for a generated code-behind."""
    classes: int = 0
    outlets: int = 0
    actions: int = 0
    comments: int = 0

    @classmethod
    def from_declarations(cls, declarations: list[ClassDeclaration]) -> GenerationStats:
        return cls(
            classes=len(declarations),
            outlets=sum(len(d.outlets) for d in declarations),
            actions=sum(len(d.actions) for d in declarations),
            comments=sum(len(d.comments) for d in declarations),
        )
