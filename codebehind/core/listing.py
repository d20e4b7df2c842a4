"""Readable listings of synthesized action stubs, attached as class comments."""

from __future__ import annotations
import io
from typing import Callable

from codebehind.models import ActionStub


StubFormatter = Callable[[ActionStub], str]

LISTING_HEADER = "Action method stubs:"


def render_action_stub(stub: ActionStub) -> str:
    """Render a stub as a C#-style partial method declaration."""
    lines = [f'[{attr.name}("{attr.argument}")]' for attr in stub.attributes]
    lines.append(
        f"partial {stub.return_type} {stub.name} ({stub.sender_type} {stub.parameter_name});"
    )
    return "\n".join(lines)


def build_stub_listing(stub: ActionStub, formatter: StubFormatter = render_action_stub) -> str:
    """
    Header plus the formatted stub. Formatter errors propagate to the caller,
    which decides whether to drop the listing.
    """
    with io.StringIO() as buffer:
        buffer.write(LISTING_HEADER + "\n\n")
        buffer.write(formatter(stub))
        buffer.write("\n")
        return buffer.getvalue()
