"""Id-indexed storage backing both the builder and the built graph."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Mapping
from types import MappingProxyType

from idgraph.records import EdgeRecord, NodeRecord

logger = logging.getLogger(__name__)


class GraphStore:
    """Two id-keyed maps: node id -> NodeRecord and edge id -> EdgeRecord.

    Keys are unique. Putting a record under an id that is already present
    replaces the previous record.
    """

    def __init__(
        self,
        nodes_by_id: Mapping[Hashable, NodeRecord] | None = None,
        edges_by_id: Mapping[Hashable, EdgeRecord] | None = None,
    ) -> None:
        self._nodes_by_id: dict[Hashable, NodeRecord] = dict(nodes_by_id or {})
        self._edges_by_id: dict[Hashable, EdgeRecord] = dict(edges_by_id or {})

    @property
    def nodes_by_id(self) -> Mapping[Hashable, NodeRecord]:
        return MappingProxyType(self._nodes_by_id)

    @property
    def edges_by_id(self) -> Mapping[Hashable, EdgeRecord]:
        return MappingProxyType(self._edges_by_id)

    def get_node(self, node_id: Hashable) -> NodeRecord | None:
        return self._nodes_by_id.get(node_id)

    def get_edge(self, edge_id: Hashable) -> EdgeRecord | None:
        return self._edges_by_id.get(edge_id)

    def put_node(self, record: NodeRecord) -> NodeRecord:
        """Store a node record, replacing any record with the same id.

        The replaced record's incidence is not carried over. Edges already
        pointing at this id still resolve to the new record, but it starts
        with empty incoming and outgoing sets.
        """
        previous = self._nodes_by_id.get(record.id)
        if previous is not None and previous.degree:
            logger.warning(
                "Replacing node %r discards %d incident edge(s) wired to the previous record",
                record.id,
                previous.degree,
            )
        self._nodes_by_id[record.id] = record
        logger.debug("Stored node %r", record.id)
        return record

    def put_edge(self, record: EdgeRecord) -> EdgeRecord:
        """Store an edge record, replacing any record with the same id.

        The record has already registered itself with its endpoints. A
        replaced edge is first detached from its old endpoints, unless they
        are the endpoints the new record just registered with.
        """
        previous = self._edges_by_id.get(record.id)
        if previous is not None:
            self._detach(previous, keep=record)
        self._edges_by_id[record.id] = record
        logger.debug("Stored edge %r: %r -> %r", record.id, record.source_id, record.target_id)
        return record

    def _detach(self, previous: EdgeRecord, keep: EdgeRecord) -> None:
        if (previous.source_id, previous.target_id) != (keep.source_id, keep.target_id):
            logger.warning(
                "Replacing edge %r moves it from %r -> %r to %r -> %r",
                previous.id,
                previous.source_id,
                previous.target_id,
                keep.source_id,
                keep.target_id,
            )
        if previous.source_id != keep.source_id:
            source = self._nodes_by_id.get(previous.source_id)
            if source is not None:
                source._discard_outgoing(previous.id)
        if previous.target_id != keep.target_id:
            target = self._nodes_by_id.get(previous.target_id)
            if target is not None:
                target._discard_incoming(previous.id)

    def snapshot(self) -> GraphStore:
        """Copy of this store that later writes to ``self`` cannot reach."""
        nodes = {node_id: record.frozen() for node_id, record in self._nodes_by_id.items()}
        return GraphStore(nodes, self._edges_by_id)

    def __repr__(self) -> str:
        return f"GraphStore(nodes={len(self._nodes_by_id)}, edges={len(self._edges_by_id)})"
