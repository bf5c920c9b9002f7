"""Shared fixtures for Hypertour tests."""

import pytest

from hypertour import Hypertour
from hypertour.engine import HypergraphCore


def build(num_nodes: int, *edges: list[int]) -> HypergraphCore:
    """Engine hypergraph with the given edges, added in order."""
    graph = HypergraphCore(num_nodes)
    for members in edges:
        graph.add_hyperedge(members)
    return graph


@pytest.fixture()
def chain() -> HypergraphCore:
    """Four nodes in a line: 0 - 1 - 2 - 3, one pairwise edge per link."""
    return build(4, [0, 1], [1, 2], [2, 3])


@pytest.fixture()
def fork() -> HypergraphCore:
    """Node 0 links to leaf 1 and to hub 2; hub 2 links to leaves 3 and 4.

        1 - 0 - 2 - 3
                |
                4
    """
    return build(5, [0, 1], [0, 2], [2, 3], [2, 4])


@pytest.fixture()
def disconnected() -> HypergraphCore:
    """Two components, {0, 1} and {2, 3}, with no edge spanning both."""
    return build(4, [0, 1], [2, 3])


@pytest.fixture()
def ht() -> Hypertour:
    """Client over a small hypergraph.

    Edges (3):
        0: {0, 1, 2}
        1: {2, 3}
        2: {3, 4, 5}
    """
    ht = Hypertour(6)
    ht.edge([0, 1, 2])
    ht.edge([2, 3])
    ht.edge([3, 4, 5])
    return ht


@pytest.fixture()
def make_graph():
    """Factory building an engine hypergraph: ``make_graph(num_nodes, *edges)``."""
    return build
