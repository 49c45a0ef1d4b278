"""Exceptions raised while assembling a digraph."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Literal

Side = Literal["source", "target"]


class MissingNodeError(LookupError):
    """Strict edge insertion referenced a node id that is not in the graph.

    Raised by ``DigraphBuilder.edge_with_node_ids`` before anything is added,
    so the builder stays usable after catching it.

    Attributes:
        side: Which endpoint could not be resolved ("source" or "target")
        node_id: The unresolved node id
        message: Human-readable error message
    """

    def __init__(
        self,
        side: Side,
        node_id: Hashable,
        message: str | None = None,
    ) -> None:
        self.side = side
        self.node_id = node_id
        self.message = message or self._default_message()
        super().__init__(self.message)

    def _default_message(self) -> str:
        return (
            f"Digraph is not well-formed: no {self.side} node with id {self.node_id!r}\n\n"
            f"How to fix:\n"
            f"  Add the node with .node() first, or use .edge() to create it implicitly"
        )


class BuilderConsumedError(RuntimeError):
    """A builder was used after ``build()`` handed its contents to a graph.

    Attributes:
        operation: Name of the rejected builder method
        message: Human-readable error message
    """

    def __init__(self, operation: str, message: str | None = None) -> None:
        self.operation = operation
        self.message = message or (
            f"Cannot call {operation}() on a builder that has already been built\n\n"
            f"How to fix:\n"
            f"  Create a new builder with Digraph.builder()"
        )
        super().__init__(self.message)
