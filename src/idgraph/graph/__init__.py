"""Graph package - builder, store and immutable query view."""

from idgraph.graph.builder import DigraphBuilder
from idgraph.graph.core import Digraph

__all__ = [
    "Digraph",
    "DigraphBuilder",
]
