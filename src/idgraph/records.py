"""Node and edge records stored by a digraph.

Records never point at each other. An edge keeps the ids of its endpoints and
a node keeps the ids of its incident edges; the store resolves ids back to
records. Building an ``EdgeRecord`` is the only operation that wires topology.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any

from idgraph._identity import require_value


class NodeRecord:
    """A node payload bound to its id and to the ids of its incident edges.

    Equality and hashing use ``id`` only, so two records with the same id are
    interchangeable whatever their payloads.
    """

    __slots__ = ("payload", "id", "_incoming", "_outgoing")

    def __init__(self, payload: Any, node_id: Hashable) -> None:
        self.payload = require_value(payload, "node payload")
        self.id = require_value(node_id, "node id")
        self._incoming: set[Hashable] = set()
        self._outgoing: set[Hashable] = set()

    @property
    def incoming(self) -> frozenset[Hashable]:
        """Ids of edges whose target is this node."""
        return frozenset(self._incoming)

    @property
    def outgoing(self) -> frozenset[Hashable]:
        """Ids of edges whose source is this node."""
        return frozenset(self._outgoing)

    @property
    def degree(self) -> int:
        return len(self._incoming) + len(self._outgoing)

    def _add_incoming(self, edge_id: Hashable) -> None:
        self._incoming.add(edge_id)

    def _add_outgoing(self, edge_id: Hashable) -> None:
        self._outgoing.add(edge_id)

    def _discard_incoming(self, edge_id: Hashable) -> None:
        self._incoming.discard(edge_id)

    def _discard_outgoing(self, edge_id: Hashable) -> None:
        self._outgoing.discard(edge_id)

    def frozen(self) -> NodeRecord:
        """Detached copy with the same payload, id and incidence."""
        copy = NodeRecord(self.payload, self.id)
        copy._incoming = set(self._incoming)
        copy._outgoing = set(self._outgoing)
        return copy

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, NodeRecord):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"NodeRecord(id={self.id!r}, in={len(self._incoming)}, out={len(self._outgoing)})"


class EdgeRecord:
    """An edge payload bound to its id and to its source and target node ids.

    Construction registers the edge into ``source.outgoing`` and
    ``target.incoming``. All arguments are checked before that happens, so a
    rejected edge leaves both nodes untouched.
    """

    __slots__ = ("payload", "id", "source_id", "target_id")

    def __init__(
        self,
        payload: Any,
        edge_id: Hashable,
        source: NodeRecord,
        target: NodeRecord,
    ) -> None:
        self.payload = require_value(payload, "edge payload")
        self.id = require_value(edge_id, "edge id")
        require_value(source, "source node")
        require_value(target, "target node")
        self.source_id = source.id
        self.target_id = target.id
        source._add_outgoing(self.id)
        target._add_incoming(self.id)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, EdgeRecord):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"EdgeRecord(id={self.id!r}, {self.source_id!r} -> {self.target_id!r})"
