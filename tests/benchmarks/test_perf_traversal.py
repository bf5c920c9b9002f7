"""Performance benchmarks for traversal operations."""

import time

import pytest

from hypertour.engine import StopReason, traverse
from hypertour.generate import random_hypergraph


class TestGraphBuildPerformance:
    """Benchmarks for building hypergraphs."""

    def test_build_10k(self):
        start = time.perf_counter()
        graph = random_hypergraph(num_nodes=10000, num_edges=25000, seed=42)
        elapsed = time.perf_counter() - start

        assert graph.num_edges == 25000
        assert elapsed < 5.0, f"Building 25K edges took {elapsed:.3f}s"

    def test_neighbor_queries_1k(self, graph_1k):
        start = time.perf_counter()
        for _ in range(10):
            for node in range(graph_1k.num_nodes):
                graph_1k.neighbors(node)
        elapsed = time.perf_counter() - start

        # 10K neighbor queries
        assert elapsed < 2.0, f"10K neighbor queries took {elapsed:.3f}s"

    def test_components_10k(self, graph_10k):
        start = time.perf_counter()
        components = graph_10k.connected_components()
        elapsed = time.perf_counter() - start

        assert sum(len(c) for c in components) == 10000
        assert elapsed < 2.0, f"Components of 10K graph took {elapsed:.3f}s"


class TestTraversalPerformance:
    """Benchmarks for full traversals."""

    def test_traverse_1k(self, graph_1k):
        start = time.perf_counter()
        run = traverse(graph_1k, 0)
        elapsed = time.perf_counter() - start

        print(f"\n1K traversal: {len(run.path)} steps, {run.repeated_transitions()} repeated")
        assert run.stop_reason in (StopReason.COMPLETE, StopReason.EXHAUSTED, StopReason.DEAD_END)
        assert elapsed < 5.0, f"1K traversal took {elapsed:.3f}s"

    def test_traverse_dense_1k(self, dense_graph_1k):
        start = time.perf_counter()
        run = traverse(dense_graph_1k, 0)
        elapsed = time.perf_counter() - start

        assert run.total_transitions() == len(run.path) - 1
        assert elapsed < 10.0, f"Dense 1K traversal took {elapsed:.3f}s"

    def test_traverse_chain_from_middle(self, sparse_chain_graph):
        start = time.perf_counter()
        run = traverse(sparse_chain_graph, 1000)
        elapsed = time.perf_counter() - start

        # Walks one half, comes back across the middle, then walks the other
        assert run.stop_reason is StopReason.COMPLETE
        assert len(run.path) < 3 * sparse_chain_graph.num_nodes
        assert elapsed < 2.0, f"Chain traversal took {elapsed:.3f}s"

    @pytest.mark.slow
    def test_traverse_10k(self, graph_10k):
        start = time.perf_counter()
        run = traverse(graph_10k, 0)
        elapsed = time.perf_counter() - start

        print(f"10K traversal: {len(run.path)} steps in {elapsed:.1f}s")
        assert run.total_transitions() == len(run.path) - 1
