"""Abstract base class for all member rules.

Every rule in the system implements this interface. Rules are:
- Self-contained: each generates a specific kind of class member
- Composable: multiple rules run in sequence via the registry
- Conditional: each rule decides if it applies to an owner's connections
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from codebehind.models import ClassDeclaration, ClassMember, ConnectionRecord, SynthesisContext


class MemberRule(ABC):
    """
    Base class for all member rules.

    Subclasses implement `applies()` and `generate()`.
    For every owner with a pending declaration, the generator queries the
    registry, filters by `applies()`, sorts by `priority`, and calls
    `generate()` in order.
    """

    # Lower priority = runs first. Default 100.
    priority: int = 100

    # IDs of rules that must run before this one.
    dependencies: list[str] = []

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this rule (e.g., 'members.outlets')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'Outlet Properties')."""
        ...

    @abstractmethod
    def applies(self, context: SynthesisContext, records: list[ConnectionRecord]) -> bool:
        """Return True if this rule has anything to do for these records."""
        ...

    @abstractmethod
    def generate(
        self,
        context: SynthesisContext,
        declaration: ClassDeclaration,
        records: list[ConnectionRecord],
    ) -> list[ClassMember]:
        """
        Generate members for one owner's connection records.

        Rules may also attach informational comments to the declaration.
        """
        ...
