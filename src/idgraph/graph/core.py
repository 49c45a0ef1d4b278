"""Digraph: the immutable, read-only view produced by DigraphBuilder."""

from __future__ import annotations

from collections.abc import Hashable
from typing import TYPE_CHECKING, Generic, TypeVar

import networkx as nx

from idgraph._identity import IdExtractors
from idgraph.graph._store import GraphStore

if TYPE_CHECKING:
    from idgraph._identity import IdExtractor
    from idgraph.graph.builder import DigraphBuilder
    from idgraph.records import NodeRecord

E = TypeVar("E")
N = TypeVar("N")


class Digraph(Generic[E, N]):
    """Immutable directed graph over caller-supplied node and edge payloads.

    Every edge has a source and a target node. The edge is an outgoing edge of
    its source and an incoming edge of its target. Nodes and edges are indexed
    by the ids their extractors produce, so lookups are O(1) on average and
    incidence queries are O(degree).

    Queries answer in terms of payloads, never records. They are total: a
    miss returns None or an empty tuple instead of raising. Collections come
    back as tuples, unique by id, so payloads do not have to be hashable.

    A Digraph is never mutated after construction and may be shared between
    threads once it has been handed off.

    Create one with ``Digraph.builder()``.
    """

    def __init__(self, store: GraphStore, extractors: IdExtractors) -> None:
        self._store = store
        self._extractors = extractors

    @staticmethod
    def builder(
        *,
        node_id: IdExtractor | None = None,
        edge_id: IdExtractor | None = None,
    ) -> DigraphBuilder[E, N]:
        """Create a builder, optionally configuring both id extractors.

        Args:
            node_id: Maps a node payload to its id (default: the payload)
            edge_id: Maps an edge payload to its id (default: the payload)
        """
        from idgraph.graph.builder import DigraphBuilder

        builder: DigraphBuilder[E, N] = DigraphBuilder()
        if node_id is not None:
            builder.id_node_extractor(node_id)
        if edge_id is not None:
            builder.id_edge_extractor(edge_id)
        return builder

    @property
    def extractors(self) -> IdExtractors:
        """The id extractors this graph was built with."""
        return self._extractors

    # -----------------
    # PAYLOADS
    # -----------------

    def nodes(self) -> tuple[N, ...]:
        """All node payloads, one per node id. Order is not defined."""
        return tuple(record.payload for record in self._store.nodes_by_id.values())

    def edges(self) -> tuple[E, ...]:
        """All edge payloads, one per edge id. Order is not defined."""
        return tuple(record.payload for record in self._store.edges_by_id.values())

    def node_ids(self) -> frozenset[Hashable]:
        return frozenset(self._store.nodes_by_id)

    def edge_ids(self) -> frozenset[Hashable]:
        return frozenset(self._store.edges_by_id)

    def number_of_nodes(self) -> int:
        return len(self._store.nodes_by_id)

    def number_of_edges(self) -> int:
        return len(self._store.edges_by_id)

    # -----------------
    # LOOKUP BY ID
    # -----------------

    def has_node_id(self, node_id: Hashable) -> bool:
        return node_id in self._store.nodes_by_id

    def has_edge_id(self, edge_id: Hashable) -> bool:
        return edge_id in self._store.edges_by_id

    def find_node_by_id(self, node_id: Hashable) -> N | None:
        """Node payload stored under node_id, or None."""
        record = self._store.get_node(node_id)
        return None if record is None else record.payload

    def find_edge_by_id(self, edge_id: Hashable) -> E | None:
        """Edge payload stored under edge_id, or None."""
        record = self._store.get_edge(edge_id)
        return None if record is None else record.payload

    # -----------------
    # LOOKUP BY PAYLOAD
    # -----------------

    def find_source_node_by_edge(self, edge: E) -> N | None:
        """Source node payload of edge, or None if edge is not in the graph.

        The edge extractor is applied even if the edge was never added, so it
        must accept any edge payload.
        """
        record = self._store.get_edge(self._extractors.edge_id(edge))
        if record is None:
            return None
        return self.find_node_by_id(record.source_id)

    def find_target_node_by_edge(self, edge: E) -> N | None:
        """Target node payload of edge, or None if edge is not in the graph."""
        record = self._store.get_edge(self._extractors.edge_id(edge))
        if record is None:
            return None
        return self.find_node_by_id(record.target_id)

    def find_incoming_edges_by_node(self, node: N) -> tuple[E, ...]:
        """Payloads of edges targeting node. Empty if node is not in the graph."""
        record = self._node_record(node)
        if record is None:
            return ()
        return self._edge_payloads(record.incoming)

    def find_outgoing_edges_by_node(self, node: N) -> tuple[E, ...]:
        """Payloads of edges leaving node. Empty if node is not in the graph."""
        record = self._node_record(node)
        if record is None:
            return ()
        return self._edge_payloads(record.outgoing)

    def _node_record(self, node: N) -> NodeRecord | None:
        return self._store.get_node(self._extractors.node_id(node))

    def _edge_payloads(self, edge_ids: frozenset[Hashable]) -> tuple[E, ...]:
        edges_by_id = self._store.edges_by_id
        return tuple(edges_by_id[edge_id].payload for edge_id in edge_ids)

    # -----------------
    # INTEROP
    # -----------------

    def to_networkx(self) -> nx.MultiDiGraph:
        """Export the topology as a new NetworkX MultiDiGraph.

        Graph nodes are node ids and each edge is keyed by its edge id, so
        parallel edges between the same pair of nodes are kept. Payloads are
        stored under the ``payload`` attribute. The returned graph is a copy;
        changing it does not affect this Digraph.
        """
        G = nx.MultiDiGraph()
        for node_id, record in self._store.nodes_by_id.items():
            G.add_node(node_id, payload=record.payload)
        for edge_id, record in self._store.edges_by_id.items():
            G.add_edge(record.source_id, record.target_id, key=edge_id, payload=record.payload)
        return G

    def __repr__(self) -> str:
        return f"Digraph(nodes={self.number_of_nodes()}, edges={self.number_of_edges()})"
