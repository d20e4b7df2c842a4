"""Synthesis context — accumulates state during one generation pass."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .document import IBDocument, ConnectionRecord
from .declarations import ClassDeclaration
from .parameters import GenerationConfig


class SynthesisContext(BaseModel):
    """
    Holds all state for a single document.

    The grouper and indexer add lookups (owner groups, class names).
    The synthesizer adds pending declarations.
    Member rules attach members to those declarations.
    """
    # Input
    document: IBDocument
    config: GenerationConfig = Field(default_factory=GenerationConfig)

    # Analysis results
    connection_groups: dict[int, list[ConnectionRecord]] = {}
    class_names: dict[int, str] = {}
    approved_class_names: set[str] = set()

    # Output, keyed by owner identity in document order
    declarations: dict[int, ClassDeclaration] = {}

    def get_declaration(self, key: int) -> ClassDeclaration | None:
        return self.declarations.get(key)

    def is_approved(self, class_name: str) -> bool:
        return class_name in self.approved_class_names
