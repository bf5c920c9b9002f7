"""Hypertour — greedy covering traversal of hypergraphs with revisit bookkeeping."""

__version__ = "0.1.0"

from hypertour.client import Hypertour
from hypertour.errors import HypertourError, InvalidArgumentError, OutOfRangeError
from hypertour.models import (
    Hyperedge,
    HypergraphStats,
    Transition,
    TraversalResult,
    ValidationResult,
)

__all__ = [
    "Hyperedge",
    "HypergraphStats",
    "Hypertour",
    "HypertourError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "Transition",
    "TraversalResult",
    "ValidationResult",
    "__version__",
]
