"""Exceptions raised by Hypertour."""

from __future__ import annotations


class HypertourError(Exception):
    """Base class for all Hypertour errors."""


class InvalidArgumentError(HypertourError, ValueError):
    """An argument is malformed, e.g. an empty hyperedge or a member outside the graph."""


class OutOfRangeError(HypertourError, IndexError):
    """A node id lies outside ``[0, num_nodes)``.

    Attributes:
        node: The offending node id
        num_nodes: Size of the hypergraph the id was checked against
    """

    def __init__(self, node: object, num_nodes: int) -> None:
        super().__init__(f"Node {node!r} is out of range for a hypergraph of {num_nodes} nodes")
        self.node = node
        self.num_nodes = num_nodes
