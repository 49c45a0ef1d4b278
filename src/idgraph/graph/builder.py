"""Mutable staging object that assembles a Digraph."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Hashable, Iterable
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from idgraph._identity import IdExtractors, require_extractor, require_id, require_value
from idgraph.exceptions import BuilderConsumedError, MissingNodeError
from idgraph.graph._store import GraphStore
from idgraph.records import EdgeRecord, NodeRecord

if TYPE_CHECKING:
    from idgraph._identity import IdExtractor
    from idgraph.graph.core import Digraph

logger = logging.getLogger(__name__)

E = TypeVar("E")
N = TypeVar("N")


class DigraphBuilder(Generic[E, N]):
    """Accumulate nodes and edges, then freeze them with ``build()``.

    A builder is either accumulating or consumed. ``build()`` consumes it:
    every later call, including another ``build()``, raises
    BuilderConsumedError.

    Id extractors are applied when a payload is inserted. Replacing an
    extractor does not re-key records that are already stored, so set both
    before adding anything that depends on them.

    Not thread-safe. Use one builder from one thread.

    Example:
        >>> graph = (
        ...     Digraph.builder(node_id=lambda n: n["id"], edge_id=lambda e: e["id"])
        ...     .edge({"id": "a-b"}, {"id": "a"}, {"id": "b"})
        ...     .build()
        ... )
        >>> graph.find_source_node_by_edge({"id": "a-b"})
        {'id': 'a'}
    """

    def __init__(self, extractors: IdExtractors | None = None) -> None:
        self._extractors = extractors or IdExtractors()
        self._store = GraphStore()
        self._consumed = False

    @property
    def extractors(self) -> IdExtractors:
        return self._extractors

    @property
    def consumed(self) -> bool:
        """True once ``build()`` has been called."""
        return self._consumed

    # -----------------
    # CONFIGURATION
    # -----------------

    def id_node_extractor(self, fn: IdExtractor) -> DigraphBuilder[E, N]:
        """Set the function mapping a node payload to its id."""
        self._ensure_accumulating("id_node_extractor")
        require_extractor(fn, "id_node_extractor")
        self._extractors = dataclasses.replace(self._extractors, node=fn)
        return self

    def id_edge_extractor(self, fn: IdExtractor) -> DigraphBuilder[E, N]:
        """Set the function mapping an edge payload to its id."""
        self._ensure_accumulating("id_edge_extractor")
        require_extractor(fn, "id_edge_extractor")
        self._extractors = dataclasses.replace(self._extractors, edge=fn)
        return self

    # -----------------
    # NODE OPERATIONS
    # -----------------

    def node(self, payload: N) -> DigraphBuilder[E, N]:
        """Add a node, replacing any node stored under the same id."""
        self._ensure_accumulating("node")
        require_value(payload, "node payload")
        self._put_node(payload, self._node_id(payload))
        return self

    def nodes(self, payloads: Iterable[N]) -> DigraphBuilder[E, N]:
        """Add every node in payloads, in iteration order.

        All payloads and their ids are checked first, so an invalid element
        means none of them is added.
        """
        self._ensure_accumulating("nodes")
        require_value(payloads, "node payloads")
        staged = []
        for payload in payloads:
            require_value(payload, "node payload")
            staged.append((payload, self._node_id(payload)))
        for payload, node_id in staged:
            self._put_node(payload, node_id)
        return self

    # -----------------
    # EDGE OPERATIONS
    # -----------------

    def edge(self, payload: E, source: N, target: N) -> DigraphBuilder[E, N]:
        """Add an edge between two node payloads.

        Endpoints whose id is not stored yet are added first. Endpoints that
        are already present are reused as they are; their payloads are not
        replaced. All three ids are checked before anything is added.
        """
        self._ensure_accumulating("edge")
        require_value(payload, "edge payload")
        require_value(source, "source node")
        require_value(target, "target node")
        edge_id = self._edge_id(payload)
        source_id = self._node_id(source)
        target_id = self._node_id(target)

        source_record = self._store.get_node(source_id)
        if source_record is None:
            source_record = self._put_node(source, source_id)
        target_record = self._store.get_node(target_id)
        if target_record is None:
            target_record = self._put_node(target, target_id)

        self._put_edge(payload, edge_id, source_record, target_record)
        return self

    def edge_with_node_ids(
        self,
        payload: E,
        source_id: Hashable,
        target_id: Hashable,
    ) -> DigraphBuilder[E, N]:
        """Add an edge between two nodes that are already present.

        Raises:
            MissingNodeError: If no node is stored under source_id or
                target_id. The source is checked first. Nothing is added.
        """
        self._ensure_accumulating("edge_with_node_ids")
        require_value(payload, "edge payload")
        require_id(source_id, "source node id")
        require_id(target_id, "target node id")
        edge_id = self._edge_id(payload)

        source_record = self._store.get_node(source_id)
        if source_record is None:
            raise MissingNodeError("source", source_id)
        target_record = self._store.get_node(target_id)
        if target_record is None:
            raise MissingNodeError("target", target_id)

        self._put_edge(payload, edge_id, source_record, target_record)
        return self

    # -----------------
    # BUILD
    # -----------------

    def build(self) -> Digraph[E, N]:
        """Freeze the accumulated nodes and edges into a Digraph.

        The graph gets its own copy of the store and the builder becomes
        consumed.
        """
        from idgraph.graph.core import Digraph

        self._ensure_accumulating("build")
        store = self._store.snapshot()
        self._consumed = True
        logger.debug(
            "Built digraph with %d nodes and %d edges",
            len(store.nodes_by_id),
            len(store.edges_by_id),
        )
        return Digraph(store, self._extractors)

    def _ensure_accumulating(self, operation: str) -> None:
        if self._consumed:
            raise BuilderConsumedError(operation)

    def _node_id(self, payload: Any) -> Hashable:
        return require_id(self._extractors.node_id(payload), "node id")

    def _edge_id(self, payload: Any) -> Hashable:
        return require_id(self._extractors.edge_id(payload), "edge id")

    def _put_node(self, payload: Any, node_id: Hashable) -> NodeRecord:
        return self._store.put_node(NodeRecord(payload, node_id))

    def _put_edge(
        self,
        payload: Any,
        edge_id: Hashable,
        source: NodeRecord,
        target: NodeRecord,
    ) -> EdgeRecord:
        return self._store.put_edge(EdgeRecord(payload, edge_id, source, target))

    def __repr__(self) -> str:
        state = "consumed" if self._consumed else "accumulating"
        return f"DigraphBuilder({state}, {self._store!r})"
