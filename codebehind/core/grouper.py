"""Connection grouping — partition wiring records by owning object."""

from __future__ import annotations
import logging

from codebehind.models import (
    ActionConnection, ArrayNode, ConnectionRecord, OutletConnection,
)
from codebehind.core.errors import UnresolvedConnectionError
from codebehind.core.resolver import resolved_id


logger = logging.getLogger(__name__)


class ConnectionGrouper:
    """Groups connection records by the identity of the object that owns them."""

    def group(self, records: ArrayNode) -> dict[int, list[ConnectionRecord]]:
        """
        Return owner identity -> records, in document order.

        The owner of an action is its destination; the owner of an outlet
        is its source. Records of any other connection kind are dropped.

        Raises:
            UnresolvedConnectionError: If an owner endpoint has no identity.
        """
        groups: dict[int, list[ConnectionRecord]] = {}

        for record in records.values:
            if not isinstance(record, ConnectionRecord):
                continue

            connection = record.connection
            if isinstance(connection, ActionConnection):
                owner_id = resolved_id(connection.destination)
            elif isinstance(connection, OutletConnection):
                owner_id = resolved_id(connection.source)
            else:
                # Desktop documents use connection kinds we don't generate for
                logger.debug("Skipping unsupported connection %s", record.connection_id)
                continue

            if owner_id is None:
                raise UnresolvedConnectionError(record.connection_id)

            if owner_id not in groups:
                groups[owner_id] = []
            groups[owner_id].append(record)

        return groups
