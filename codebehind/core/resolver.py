"""Reference resolution — follow indirection chains to the concrete node."""

from __future__ import annotations
from typing import Any

from codebehind.models import IBObject, Reference


def resolve_reference(value: Any) -> Any:
    """
    Unwrap zero or more Reference hops and return what they point at.

    Anything that is not a Reference is returned unchanged. Chains are
    acyclic in well-formed documents, so no cycle detection is done.
    """
    while isinstance(value, Reference):
        value = value.target
    return value


def resolved_id(value: Any) -> int | None:
    """Identity of the resolved node, or None if it has none."""
    obj = resolve_reference(value)
    if isinstance(obj, IBObject):
        return obj.id
    return None
