"""Pydantic models for Hypertour public API.

These are thin wrappers over the core engine types (engine.core,
engine.traversal), providing Pydantic validation and serialization for the
client-facing API.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

StopReasonName = Literal["complete", "dead_end", "exhausted", "step_limit"]


class Hyperedge(BaseModel):
    """A hyperedge: one relation joining one or more nodes.

    Members are kept in ascending node order.
    """

    id: int = Field(ge=0)
    members: list[int] = Field(min_length=1)

    @field_validator("members")
    @classmethod
    def _sort_members(cls, value: list[int]) -> list[int]:
        return sorted(set(value))

    def __repr__(self) -> str:
        return f"Hyperedge({self.id}: {self.members})"

    @property
    def size(self) -> int:
        """Number of distinct nodes joined by the edge."""
        return len(self.members)


class Transition(BaseModel):
    """A directed move between two nodes and how often it was taken."""

    source: int
    target: int
    count: int = Field(ge=1)


class TraversalResult(BaseModel):
    """Outcome of one traversal run.

    ``path`` lists nodes in the order they were entered, revisits included.
    A run that ends with ``partial_coverage`` left some nodes unvisited,
    because the walk reached a node with no neighbors (``dead_end``) or
    used up its connected component (``exhausted``).
    """

    start_node: int
    path: list[int]
    visited: list[int]
    unvisited: list[int] = Field(default_factory=list)
    transitions: list[Transition] = Field(default_factory=list)
    total_transitions: int = 0
    repeated_transitions: int = 0
    stop_reason: StopReasonName
    partial_coverage: bool = False

    def __repr__(self) -> str:
        return (
            f"TraversalResult(path={self.path}, stop_reason={self.stop_reason!r}, "
            f"repeated={self.repeated_transitions})"
        )

    @property
    def complete(self) -> bool:
        """True when every node was visited."""
        return not self.partial_coverage


class ValidationResult(BaseModel):
    """Result of a hypergraph consistency check.

    Contains a pass/fail flag, a list of errors, and a list of warnings
    found during validation.
    """

    valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class HypergraphStats(BaseModel):
    """Summary counts for a hypergraph."""

    node_count: int
    edge_count: int
    component_count: int
    isolated_nodes: list[int] = Field(default_factory=list)
    max_edge_size: int = 0
