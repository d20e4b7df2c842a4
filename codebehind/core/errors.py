"""Errors raised while generating code-behind."""

from __future__ import annotations


class CodeBehindError(ValueError):
    """Raised when a document cannot be turned into code-behind."""


class UnresolvedConnectionError(CodeBehindError):
    """A connection's owner endpoint resolves to an object without identity."""

    def __init__(self, connection_id: int) -> None:
        super().__init__(f"Connection {connection_id} references null object ID")
        self.connection_id = connection_id
