"""Benchmark fixtures for hypergraph traversal performance tests."""

import pytest

from hypertour.engine import HypergraphCore
from hypertour.generate import random_hypergraph


@pytest.fixture
def graph_1k() -> HypergraphCore:
    """1K nodes, 2.5K edges - small benchmark graph."""
    return random_hypergraph(num_nodes=1000, num_edges=2500, min_edge_size=2, max_edge_size=4, seed=42)


@pytest.fixture
def graph_10k() -> HypergraphCore:
    """10K nodes, 25K edges - medium benchmark graph."""
    return random_hypergraph(
        num_nodes=10000, num_edges=25000, min_edge_size=2, max_edge_size=4, seed=42
    )


@pytest.fixture
def dense_graph_1k() -> HypergraphCore:
    """1K nodes with large hyperedges - high-degree neighborhoods."""
    return random_hypergraph(
        num_nodes=1000, num_edges=2000, min_edge_size=5, max_edge_size=10, seed=42
    )


@pytest.fixture
def sparse_chain_graph() -> HypergraphCore:
    """2K nodes in a single line - forces long backtracking walks."""
    graph = HypergraphCore(2000)
    for i in range(1999):
        graph.add_hyperedge([i, i + 1])
    return graph
