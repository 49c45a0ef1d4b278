"""Shared fixtures: the reference four-node topology.

          -------->--------
         /                 \\
 1      2 /                   \\ 3      4
 o--->--o----------<----------o--->--o
"""

from dataclasses import dataclass

import pytest

from idgraph import Digraph


@dataclass(frozen=True)
class DummyNode:
    id: int
    name: str


@dataclass(frozen=True)
class DummyEdge:
    id: int
    name: str


@pytest.fixture
def node1():
    return DummyNode(1, "1")


@pytest.fixture
def node2():
    return DummyNode(2, "2")


@pytest.fixture
def node3():
    return DummyNode(3, "3")


@pytest.fixture
def node4():
    return DummyNode(4, "4")


@pytest.fixture
def edge12():
    return DummyEdge(12, "1 -> 2")


@pytest.fixture
def edge23():
    return DummyEdge(23, "2 -> 3")


@pytest.fixture
def edge32():
    return DummyEdge(32, "3 -> 2")


@pytest.fixture
def edge34():
    return DummyEdge(34, "3 -> 4")


@pytest.fixture
def new_edge():
    return DummyEdge(5, "dummy edge")


@pytest.fixture
def builder(node1, node2, node3, node4, edge12, edge23, edge32, edge34):
    """Builder holding the reference topology, keyed by the dummies' ids."""
    return (
        Digraph.builder()
        .id_node_extractor(lambda n: n.id)
        .id_edge_extractor(lambda e: e.id)
        .edge(edge12, node1, node2)
        .edge(edge23, node2, node3)
        .edge(edge32, node3, node2)
        .edge(edge34, node3, node4)
    )


@pytest.fixture
def digraph(builder):
    return builder.build()


@pytest.fixture
def make_node():
    """Factory for node payloads outside the reference topology."""
    return DummyNode


@pytest.fixture
def make_edge():
    """Factory for edge payloads outside the reference topology."""
    return DummyEdge
