"""Random hypergraph generation for demos and benchmarks."""

from __future__ import annotations

import random

from hypertour.engine.core import HypergraphCore
from hypertour.errors import InvalidArgumentError


def random_hypergraph(
    num_nodes: int = 8,
    num_edges: int = 6,
    min_edge_size: int = 2,
    max_edge_size: int = 4,
    seed: int | None = None,
) -> HypergraphCore:
    """Generate a random hypergraph.

    Each edge draws its size uniformly from ``[min_edge_size, max_edge_size]``
    (capped at ``num_nodes``) and joins that many distinct random nodes. The
    result is not necessarily connected.

    Args:
        num_nodes: Number of nodes
        num_edges: Number of hyperedges to create
        min_edge_size: Smallest edge size
        max_edge_size: Largest edge size
        seed: Random seed for reproducibility

    Returns:
        HypergraphCore with random edges

    Raises:
        InvalidArgumentError: If the parameters cannot describe a hypergraph
    """
    if num_nodes < 1:
        raise InvalidArgumentError(f"num_nodes must be at least 1, got: {num_nodes}")
    if num_edges < 0:
        raise InvalidArgumentError(f"num_edges must be non-negative, got: {num_edges}")
    if min_edge_size < 1 or max_edge_size < min_edge_size:
        raise InvalidArgumentError(
            f"Edge sizes must satisfy 1 <= min <= max, got: {min_edge_size}..{max_edge_size}"
        )

    rng = random.Random(seed)
    graph = HypergraphCore(num_nodes)
    nodes = range(num_nodes)
    for _ in range(num_edges):
        size = min(rng.randint(min_edge_size, max_edge_size), num_nodes)
        graph.add_hyperedge(rng.sample(nodes, size))
    return graph
