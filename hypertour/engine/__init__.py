from hypertour.engine.core import Hyperedge, HypergraphCore
from hypertour.engine.traversal import (
    HypergraphTraversal,
    StopReason,
    TraversalRun,
    TraversalState,
    iter_steps,
    select_next_node,
    traverse,
)

__all__ = [
    "Hyperedge",
    "HypergraphCore",
    "HypergraphTraversal",
    "StopReason",
    "TraversalRun",
    "TraversalState",
    "iter_steps",
    "select_next_node",
    "traverse",
]
