"""Identity extraction for node and edge payloads.

An extractor is a pure function projecting a payload to the key it is stored
under. Both the builder and the built graph apply the same extractor, so it
must return the same id for the same payload every time.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass, field
from typing import Any

IdExtractor = Callable[[Any], Hashable]


def identity(value: Any) -> Any:
    """Default extractor: the payload is its own id."""
    return value


def require_value(value: Any, name: str) -> Any:
    """Return value unchanged, raising ValueError if it is None."""
    if value is None:
        raise ValueError(f"{name} must not be None")
    return value


def require_id(value: Any, name: str) -> Hashable:
    """Return an extracted id, raising if it cannot key a mapping."""
    require_value(value, name)
    try:
        hash(value)
    except TypeError:
        raise TypeError(
            f"{name} must be hashable, got {type(value).__name__}\n\n"
            f"How to fix:\n"
            f"  Return a hashable value from the id extractor, e.g. a str, int or tuple"
        ) from None
    return value


def require_extractor(fn: Any, name: str) -> IdExtractor:
    """Validate an id extractor before it is stored."""
    if fn is None:
        raise ValueError(f"{name} must not be None")
    if not callable(fn):
        raise TypeError(
            f"{name} must be callable, got {type(fn).__name__}\n\n"
            f"How to fix:\n"
            f"  Pass a function mapping a payload to its id, e.g. lambda n: n.id"
        )
    return fn


@dataclass(frozen=True)
class IdExtractors:
    """The pair of extractors a graph is keyed with.

    Attributes:
        node: Maps a node payload to its id
        edge: Maps an edge payload to its id
    """

    node: IdExtractor = field(default=identity)
    edge: IdExtractor = field(default=identity)

    def node_id(self, payload: Any) -> Hashable:
        return self.node(payload)

    def edge_id(self, payload: Any) -> Hashable:
        return self.edge(payload)
