"""Core hypergraph data structures and operations.

A minimal hypergraph over integer nodes ``0 .. num_nodes - 1``. Hyperedges are
arbitrary non-empty node sets, identified by their insertion index. The
node-to-edges index is maintained incrementally so neighbor queries never
scan the whole edge list.

Thread Safety:
    All operations on HypergraphCore are protected by an internal RLock, so the
    graph can be read from multiple threads while it is being built. Once built
    it is treated as read-only by the traversal engine.

References:
- Bretto: "Hypergraph Theory: An Introduction" (2013)
"""

import threading
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from hypertour.errors import InvalidArgumentError, OutOfRangeError


def _is_node_id(value: object) -> bool:
    # bool is an int subclass, but True/False are not node ids
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Hyperedge:
    """A set of nodes grouped as one relation.

    Attributes:
        id: Position of the edge in its hypergraph, assigned on insertion
        members: The nodes joined by this edge (never empty)
    """

    id: int
    members: frozenset[int]

    def __contains__(self, node: object) -> bool:
        return node in self.members

    def __len__(self) -> int:
        return len(self.members)

    @property
    def sorted_members(self) -> list[int]:
        """Members in ascending node order."""
        return sorted(self.members)


class HypergraphCore:
    """Hypergraph storage with an indexed node-to-edges lookup.

    Design principles:
    - Nodes are plain integers, there are no node objects
    - Edge ids are dense and monotonic (``edges[i].id == i``)
    - ``add_hyperedge`` validates fully before it mutates anything
    """

    def __init__(self, num_nodes: int) -> None:
        if not _is_node_id(num_nodes) or num_nodes < 0:
            raise InvalidArgumentError(
                f"num_nodes must be a non-negative integer, got: {num_nodes!r}"
            )
        self._num_nodes = num_nodes
        self._edges: list[Hyperedge] = []
        self._node_to_edges: list[set[int]] = [set() for _ in range(num_nodes)]
        self._lock = threading.RLock()

    def __getstate__(self) -> dict[str, Any]:
        """Support for pickle/deepcopy - exclude the lock."""
        state = self.__dict__.copy()
        del state["_lock"]
        return state

    def __setstate__(self, state: dict[str, Any]) -> None:
        """Support for pickle/deepcopy - recreate the lock."""
        self.__dict__.update(state)
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        return f"HypergraphCore(num_nodes={self._num_nodes}, num_edges={len(self._edges)})"

    @property
    def num_nodes(self) -> int:
        """Number of nodes, fixed at construction."""
        return self._num_nodes

    def _check_node(self, node: object) -> int:
        if not _is_node_id(node) or not 0 <= node < self._num_nodes:  # type: ignore[operator]
            raise OutOfRangeError(node, self._num_nodes)
        return node  # type: ignore[return-value]

    def has_node(self, node: object) -> bool:
        """Check whether ``node`` is a valid node id for this hypergraph."""
        return _is_node_id(node) and 0 <= node < self._num_nodes  # type: ignore[operator]

    # ========== Edge Operations ==========

    def add_hyperedge(self, members: Iterable[int]) -> Hyperedge:
        """Add a hyperedge joining ``members``.

        The edge gets the next sequential id. Duplicate members collapse.

        Args:
            members: Node ids to join; must be non-empty and all in range

        Returns:
            The stored Hyperedge

        Raises:
            InvalidArgumentError: If ``members`` is empty or holds an invalid id.
                The hypergraph is left unchanged.
        """
        member_list = list(members)
        if not member_list:
            raise InvalidArgumentError("A hyperedge must contain at least one node")
        for node in member_list:
            if not _is_node_id(node):
                raise InvalidArgumentError(
                    f"Hyperedge members must be integers, got: {type(node).__name__}"
                )
            if not 0 <= node < self._num_nodes:
                raise InvalidArgumentError(
                    f"Hyperedge member {node} is out of range [0, {self._num_nodes})"
                )

        with self._lock:
            edge = Hyperedge(id=len(self._edges), members=frozenset(member_list))
            self._edges.append(edge)
            for node in edge.members:
                self._node_to_edges[node].add(edge.id)
            return edge

    def get_edge(self, edge_id: int) -> Hyperedge | None:
        """Get a hyperedge by id, or None if not found."""
        with self._lock:
            if _is_node_id(edge_id) and 0 <= edge_id < len(self._edges):
                return self._edges[edge_id]
            return None

    def get_all_edges(self) -> list[Hyperedge]:
        """Get all hyperedges in insertion order."""
        with self._lock:
            return list(self._edges)

    @property
    def num_edges(self) -> int:
        with self._lock:
            return len(self._edges)

    # ========== Node Queries ==========

    def edges_containing(self, node: int) -> frozenset[int]:
        """Ids of the hyperedges that contain ``node``.

        Raises:
            OutOfRangeError: If ``node`` is not a valid node id
        """
        self._check_node(node)
        with self._lock:
            return frozenset(self._node_to_edges[node])

    def neighbors(self, node: int) -> set[int]:
        """Nodes sharing at least one hyperedge with ``node``, excluding itself.

        Raises:
            OutOfRangeError: If ``node`` is not a valid node id
        """
        self._check_node(node)
        with self._lock:
            result: set[int] = set()
            for edge_id in self._node_to_edges[node]:
                result.update(self._edges[edge_id].members)
            result.discard(node)
            return result

    def node_degree(self, node: int) -> int:
        """Number of hyperedges containing ``node``."""
        self._check_node(node)
        with self._lock:
            return len(self._node_to_edges[node])

    def connected_components(self) -> list[list[int]]:
        """Partition the nodes into connected components.

        Two nodes are connected when a chain of shared hyperedges links them.
        A node in no hyperedge forms a component of its own.

        Returns:
            Sorted node lists, ordered by their smallest node
        """
        with self._lock:
            seen = [False] * self._num_nodes
            components: list[list[int]] = []
            for root in range(self._num_nodes):
                if seen[root]:
                    continue
                seen[root] = True
                component = [root]
                queue: deque[int] = deque([root])
                while queue:
                    node = queue.popleft()
                    for edge_id in self._node_to_edges[node]:
                        for other in self._edges[edge_id].members:
                            if not seen[other]:
                                seen[other] = True
                                component.append(other)
                                queue.append(other)
                components.append(sorted(component))
            return components

    def component_labels(self) -> list[int]:
        """Component index of every node, as positioned in ``connected_components()``."""
        labels = [0] * self._num_nodes
        for index, component in enumerate(self.connected_components()):
            for node in component:
                labels[node] = index
        return labels

    # ========== Statistics & Validation ==========

    def stats(self) -> dict[str, Any]:
        """Get hypergraph statistics.

        Returns:
            Dict with num_nodes, num_edges, num_components, isolated_nodes
            and max_edge_size
        """
        with self._lock:
            return {
                "num_nodes": self._num_nodes,
                "num_edges": len(self._edges),
                "num_components": len(self.connected_components()),
                "isolated_nodes": [n for n, ids in enumerate(self._node_to_edges) if not ids],
                "max_edge_size": max((len(e) for e in self._edges), default=0),
            }

    def validate(self) -> dict[str, Any]:
        """Validate hypergraph integrity.

        Checks for:
        - Edge ids that do not match their position
        - Empty or out-of-range edge members
        - Node-to-edges index consistency in both directions

        Isolated nodes and a disconnected graph are reported as warnings,
        since a traversal on such a graph can only cover part of it.

        Returns:
            Dict with 'valid' (bool), 'errors' and 'warnings' (lists of descriptions)
        """
        with self._lock:
            errors: list[str] = []
            warnings: list[str] = []

            for position, edge in enumerate(self._edges):
                if edge.id != position:
                    errors.append(f"Edge at position {position} has id {edge.id}")
                if not edge.members:
                    errors.append(f"Edge {edge.id} has no members")
                for node in edge.members:
                    if not 0 <= node < self._num_nodes:
                        errors.append(f"Edge {edge.id} references non-existent node: {node}")
                    elif edge.id not in self._node_to_edges[node]:
                        errors.append(f"Node-to-edges index for {node} is missing edge {edge.id}")

            for node, edge_ids in enumerate(self._node_to_edges):
                for edge_id in edge_ids:
                    if not 0 <= edge_id < len(self._edges):
                        errors.append(
                            f"Node-to-edges index for {node} references non-existent edge: {edge_id}"
                        )
                    elif node not in self._edges[edge_id].members:
                        errors.append(
                            f"Node-to-edges index for {node} lists edge {edge_id}, "
                            f"which does not contain it"
                        )

            isolated = [n for n, ids in enumerate(self._node_to_edges) if not ids]
            if isolated:
                warnings.append(f"Nodes in no hyperedge: {isolated}")
            num_components = len(self.connected_components())
            if num_components > 1:
                warnings.append(
                    f"Hypergraph has {num_components} connected components; "
                    f"a traversal cannot cover every node"
                )

            return {
                "valid": len(errors) == 0,
                "errors": errors,
                "warnings": warnings,
            }

    # ========== Serialization ==========

    def to_dict(self) -> dict[str, Any]:
        """Export to simple dict (for debugging/internal use)."""
        with self._lock:
            return {
                "num_nodes": self._num_nodes,
                "edges": [
                    {"id": e.id, "members": e.sorted_members} for e in self._edges
                ],
            }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HypergraphCore":
        """Import from simple dict.

        Edges are re-added in list order, so ids are reassigned densely.
        """
        store = cls(data["num_nodes"])
        for edge_data in data.get("edges", []):
            store.add_hyperedge(edge_data["members"])
        return store
