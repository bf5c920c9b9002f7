"""Hypertour client — the primary interface for building and walking a hypergraph."""

from __future__ import annotations

from collections.abc import Generator, Iterable
from typing import Any

from hypertour.engine.core import Hyperedge as CoreEdge
from hypertour.engine.core import HypergraphCore
from hypertour.engine.traversal import TraversalRun, iter_steps, traverse
from hypertour.generate import random_hypergraph
from hypertour.models import (
    Hyperedge,
    HypergraphStats,
    Transition,
    TraversalResult,
    ValidationResult,
)

# --- Conversion helpers: engine core types <-> pydantic models ---


def _core_edge_to_model(ce: CoreEdge) -> Hyperedge:
    return Hyperedge(id=ce.id, members=ce.sorted_members)


def _run_to_model(run: TraversalRun) -> TraversalResult:
    assert run.stop_reason is not None, "Traversal run should be finished"
    return TraversalResult(
        start_node=run.start_node,
        path=list(run.path),
        visited=sorted(run.visited),
        unvisited=run.unvisited,
        transitions=[
            Transition(source=source, target=target, count=count)
            for (source, target), count in sorted(run.transitions.items())
        ],
        total_transitions=run.total_transitions(),
        repeated_transitions=run.repeated_transitions(),
        stop_reason=run.stop_reason.value,
        partial_coverage=run.partial_coverage,
    )


class Hypertour:
    """A hypergraph over integer nodes with a greedy covering traversal.

    Build the graph with ``edge()``, then call ``traverse()`` as often as
    needed; every traversal is independent of the previous ones.

    Example:
        ```python
        ht = Hypertour(4)
        ht.edge([0, 1, 2])
        ht.edge([2, 3])

        result = ht.traverse(0)
        result.path                   # [0, 2, 1, 0, 1, 2, 3]
        result.repeated_transitions   # 0
        ```
    """

    def __init__(self, num_nodes: int, *, _store: HypergraphCore | None = None) -> None:
        self._store = _store if _store is not None else HypergraphCore(num_nodes)

    def __repr__(self) -> str:
        return f"Hypertour(num_nodes={self.num_nodes}, edges={self._store.num_edges})"

    @property
    def num_nodes(self) -> int:
        """Number of nodes, fixed at construction."""
        return self._store.num_nodes

    @property
    def core(self) -> HypergraphCore:
        """The underlying engine hypergraph."""
        return self._store

    @classmethod
    def random(
        cls,
        num_nodes: int = 8,
        num_edges: int = 6,
        *,
        min_edge_size: int = 2,
        max_edge_size: int = 4,
        seed: int | None = None,
    ) -> Hypertour:
        """Build an instance over a randomly generated hypergraph.

        Args:
            num_nodes: Number of nodes.
            num_edges: Number of hyperedges.
            min_edge_size: Smallest edge size.
            max_edge_size: Largest edge size.
            seed: Random seed; the same seed gives the same edges.

        Returns:
            A new Hypertour instance.
        """
        store = random_hypergraph(
            num_nodes,
            num_edges,
            min_edge_size=min_edge_size,
            max_edge_size=max_edge_size,
            seed=seed,
        )
        return cls(store.num_nodes, _store=store)

    # --- Edges ---

    def edge(self, members: Iterable[int]) -> Hyperedge:
        """Add a hyperedge joining ``members``.

        Args:
            members: Node ids to join. Must be non-empty and within
                ``[0, num_nodes)``; duplicates collapse.

        Returns:
            The created Hyperedge, with the next sequential id.

        Raises:
            InvalidArgumentError: If ``members`` is empty or holds an invalid id.
        """
        return _core_edge_to_model(self._store.add_hyperedge(members))

    def get_edge(self, id: int) -> Hyperedge | None:
        """Get an edge by id, or ``None`` if there is no such edge."""
        ce = self._store.get_edge(id)
        return _core_edge_to_model(ce) if ce else None

    def edges(self) -> list[Hyperedge]:
        """All edges in insertion order."""
        return [_core_edge_to_model(e) for e in self._store.get_all_edges()]

    # --- Nodes ---

    def neighbors(self, node: int) -> list[int]:
        """Nodes sharing a hyperedge with ``node``, in ascending order.

        Raises:
            OutOfRangeError: If ``node`` is not a valid node id.
        """
        return sorted(self._store.neighbors(node))

    def edges_containing(self, node: int) -> list[int]:
        """Ids of the edges containing ``node``, in ascending order.

        Raises:
            OutOfRangeError: If ``node`` is not a valid node id.
        """
        return sorted(self._store.edges_containing(node))

    def node_degree(self, node: int) -> int:
        """Count how many edges contain ``node``."""
        return self._store.node_degree(node)

    def components(self) -> list[list[int]]:
        """Connected components as sorted node lists."""
        return self._store.connected_components()

    # --- Traversal ---

    def traverse(self, start_node: int, *, max_steps: int | None = None) -> TraversalResult:
        """Walk the hypergraph from ``start_node`` trying to visit every node.

        Args:
            start_node: Node to begin at.
            max_steps: Stop after this many moves (``None`` for no limit).

        Returns:
            A ``TraversalResult``. When some nodes cannot be reached the
            result has ``partial_coverage`` set; this is not an error.

        Raises:
            OutOfRangeError: If ``start_node`` is not a valid node id.
        """
        return _run_to_model(traverse(self._store, start_node, max_steps))

    def steps(
        self,
        start_node: int,
        *,
        max_steps: int | None = None,
    ) -> Generator[tuple[int, int], None, TraversalResult]:
        """Walk like ``traverse()`` but yield each ``(from, to)`` move as it is made.

        The generator's return value is the final ``TraversalResult``.

        Example:
            ```python
            for source, target in ht.steps(0):
                print(f"{source} -> {target}")
            ```
        """
        run = yield from iter_steps(self._store, start_node, max_steps)
        return _run_to_model(run)

    # --- Statistics & Validation ---

    def stats(self) -> HypergraphStats:
        """Get node, edge and component counts.

        Returns:
            A ``HypergraphStats`` summary.
        """
        s = self._store.stats()
        return HypergraphStats(
            node_count=s["num_nodes"],
            edge_count=s["num_edges"],
            component_count=s["num_components"],
            isolated_nodes=s.get("isolated_nodes", []),
            max_edge_size=s.get("max_edge_size", 0),
        )

    def validate(self) -> ValidationResult:
        """Check the hypergraph for internal consistency.

        Returns:
            A ``ValidationResult`` with ``valid``, ``errors``, and ``warnings`` fields.
        """
        result = self._store.validate()
        return ValidationResult(
            valid=result["valid"],
            errors=result.get("errors", []),
            warnings=result.get("warnings", []),
        )

    def to_dict(self) -> dict[str, Any]:
        """Export the graph as a plain dict (``num_nodes`` and ``edges``)."""
        return self._store.to_dict()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Hypertour:
        """Build a new instance from a dict produced by ``to_dict()``."""
        store = HypergraphCore.from_dict(data)
        return cls(store.num_nodes, _store=store)
