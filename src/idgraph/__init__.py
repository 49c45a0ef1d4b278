"""idgraph - An immutable, identity-indexed directed graph container."""

from idgraph._identity import IdExtractor, IdExtractors, identity
from idgraph.exceptions import BuilderConsumedError, MissingNodeError
from idgraph.graph import Digraph, DigraphBuilder
from idgraph.records import EdgeRecord, NodeRecord

__version__ = "0.1.0"

__all__ = [
    # Graph
    "Digraph",
    "DigraphBuilder",
    # Identity
    "IdExtractor",
    "IdExtractors",
    "identity",
    # Records
    "NodeRecord",
    "EdgeRecord",
    # Exceptions
    "MissingNodeError",
    "BuilderConsumedError",
]
