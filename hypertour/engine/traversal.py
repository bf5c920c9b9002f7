"""Greedy hypergraph traversal that keeps repeated transitions low.

The walk starts at a node and repeatedly moves to a neighbor until every node
has been visited:

- If unvisited neighbors exist, it moves to the one whose own neighborhood
  holds the most unvisited nodes (one-step lookahead).
- Otherwise it backtracks along the directed transition it has used the
  fewest times so far, spreading revisits across the available edges.

Every candidate enumeration runs in ascending node order, so two runs with
the same inputs always produce the same path.

A walk on a disconnected hypergraph can never finish: once the current
component is fully visited the backtracking rule always finds a move. The
walk therefore stops as soon as the current component has nothing left to
visit and reports partial coverage instead.

``traverse`` is a pure function that allocates fresh state on every call and
is safe to run concurrently on one graph. ``HypergraphTraversal`` wraps it as
a stateful engine that keeps the latest run for statistics queries.
"""

import enum
import logging
from collections.abc import Generator
from dataclasses import dataclass, field

from hypertour.engine.core import HypergraphCore
from hypertour.errors import InvalidArgumentError, OutOfRangeError

logger = logging.getLogger("hypertour.engine")

Transition = tuple[int, int]


class StopReason(str, enum.Enum):
    """Why a traversal ended."""

    COMPLETE = "complete"
    DEAD_END = "dead_end"
    EXHAUSTED = "exhausted"
    STEP_LIMIT = "step_limit"


class TraversalState(str, enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    DONE = "done"


@dataclass
class TraversalRun:
    """Bookkeeping for one traversal.

    Attributes:
        start_node: Node the walk began at
        num_nodes: Size of the hypergraph that was traversed
        path: Nodes in the order they were entered, revisits included
        visited: Distinct nodes entered so far
        transitions: Number of times each directed ``(from, to)`` move was taken
        stop_reason: Set once the walk has ended, None while it is in progress
    """

    start_node: int
    num_nodes: int
    path: list[int] = field(default_factory=list)
    visited: set[int] = field(default_factory=set)
    transitions: dict[Transition, int] = field(default_factory=dict)
    stop_reason: StopReason | None = None

    def enter(self, node: int) -> None:
        self.visited.add(node)
        self.path.append(node)

    def record(self, source: int, target: int) -> None:
        """Count one move from ``source`` to ``target`` and enter ``target``."""
        key = (source, target)
        self.transitions[key] = self.transitions.get(key, 0) + 1
        self.enter(target)

    def total_transitions(self) -> int:
        """Number of moves made, equal to ``len(path) - 1``."""
        return sum(self.transitions.values())

    def repeated_transitions(self) -> int:
        """Number of moves that reused an already-taken directed transition."""
        return sum(count - 1 for count in self.transitions.values() if count > 1)

    @property
    def partial_coverage(self) -> bool:
        """True when the walk ended with nodes left unvisited."""
        return len(self.visited) < self.num_nodes

    @property
    def unvisited(self) -> list[int]:
        return [node for node in range(self.num_nodes) if node not in self.visited]


# ========== Selection ==========


def _lookahead_score(graph: HypergraphCore, candidate: int, visited: set[int]) -> int:
    return sum(1 for node in graph.neighbors(candidate) if node not in visited)


def select_next_node(
    graph: HypergraphCore,
    current: int,
    visited: set[int],
    transitions: dict[Transition, int],
) -> int | None:
    """Pick the node to move to from ``current``.

    Args:
        graph: The hypergraph being walked
        current: Node the walk is at
        visited: Nodes entered so far
        transitions: Move counts recorded so far

    Returns:
        The chosen neighbor, or None when ``current`` has no neighbors at all
    """
    neighbors = sorted(graph.neighbors(current))
    if not neighbors:
        return None

    unvisited = [node for node in neighbors if node not in visited]
    if unvisited:
        best = unvisited[0]
        best_score = 0
        for candidate in unvisited:
            score = _lookahead_score(graph, candidate, visited)
            if score > best_score:
                best = candidate
                best_score = score
        return best

    # Every neighbor is visited: take the least-used outgoing transition.
    return min(neighbors, key=lambda node: transitions.get((current, node), 0))


# ========== Traversal ==========


def _check_start(graph: HypergraphCore, start_node: int, max_steps: int | None) -> None:
    if not graph.has_node(start_node):
        raise OutOfRangeError(start_node, graph.num_nodes)
    if max_steps is not None and (
        not isinstance(max_steps, int) or isinstance(max_steps, bool) or max_steps < 0
    ):
        raise InvalidArgumentError(
            f"max_steps must be None or a non-negative integer, got: {max_steps!r}"
        )


def iter_steps(
    graph: HypergraphCore,
    start_node: int,
    max_steps: int | None = None,
) -> Generator[Transition, None, TraversalRun]:
    """Walk the hypergraph from ``start_node``, yielding each move as it is made.

    The generator's return value is the finished TraversalRun, so
    ``run = yield from iter_steps(...)`` gives both the moves and the result.

    Args:
        graph: The hypergraph to walk; must not change during the walk
        start_node: Node to begin at
        max_steps: Stop after this many moves (None for no limit)

    Raises:
        OutOfRangeError: If ``start_node`` is not a valid node id
        InvalidArgumentError: If ``max_steps`` is negative or not an integer
    """
    _check_start(graph, start_node, max_steps)

    run = TraversalRun(start_node=start_node, num_nodes=graph.num_nodes)
    run.enter(start_node)

    labels = graph.component_labels()
    remaining: dict[int, int] = {}
    for label in labels:
        remaining[label] = remaining.get(label, 0) + 1
    remaining[labels[start_node]] -= 1

    logger.debug(
        "Traversal from node %d over %d nodes, %d edges",
        start_node,
        graph.num_nodes,
        graph.num_edges,
    )

    current = start_node
    while len(run.visited) < graph.num_nodes:
        next_node = select_next_node(graph, current, run.visited, run.transitions)
        if next_node is None:
            run.stop_reason = StopReason.DEAD_END
            break
        if remaining[labels[current]] == 0:
            run.stop_reason = StopReason.EXHAUSTED
            break
        if max_steps is not None and len(run.path) - 1 >= max_steps:
            run.stop_reason = StopReason.STEP_LIMIT
            break

        if next_node not in run.visited:
            remaining[labels[next_node]] -= 1
        run.record(current, next_node)
        yield (current, next_node)
        current = next_node
    else:
        run.stop_reason = StopReason.COMPLETE

    if run.partial_coverage and run.stop_reason is not StopReason.STEP_LIMIT:
        logger.info(
            "Traversal from node %d stopped at node %d (%s) with %d of %d nodes visited",
            start_node,
            current,
            run.stop_reason.value,
            len(run.visited),
            graph.num_nodes,
        )
    else:
        logger.debug(
            "Traversal from node %d finished (%s) after %d moves, %d repeated",
            start_node,
            run.stop_reason.value,
            run.total_transitions(),
            run.repeated_transitions(),
        )
    return run


def traverse(
    graph: HypergraphCore,
    start_node: int,
    max_steps: int | None = None,
) -> TraversalRun:
    """Run a complete traversal and return its freshly allocated TraversalRun.

    Raises:
        OutOfRangeError: If ``start_node`` is not a valid node id
        InvalidArgumentError: If ``max_steps`` is negative or not an integer
    """
    steps = iter_steps(graph, start_node, max_steps)
    while True:
        try:
            next(steps)
        except StopIteration as stop:
            return stop.value


class HypergraphTraversal:
    """Stateful traversal engine bound to one hypergraph.

    Each call to ``traverse`` replaces the previous run. The engine keeps the
    latest run so its path and statistics can be queried afterwards.

    Not safe for concurrent use: give each thread its own engine, or call the
    module-level ``traverse`` function directly.

    Example:
        engine = HypergraphTraversal(graph)
        path = engine.traverse(0)
        engine.repeated_transitions()
    """

    def __init__(self, graph: HypergraphCore) -> None:
        self.graph = graph
        self.state = TraversalState.IDLE
        self._run: TraversalRun | None = None

    def traverse(self, start_node: int, max_steps: int | None = None) -> list[int]:
        """Walk from ``start_node`` and return a copy of the path.

        Raises:
            OutOfRangeError: If ``start_node`` is not a valid node id
            RuntimeError: If a traversal is already running on this engine
        """
        if self.state is TraversalState.RUNNING:
            raise RuntimeError("A traversal is already running on this engine")
        _check_start(self.graph, start_node, max_steps)

        self._run = None
        self.state = TraversalState.RUNNING
        try:
            self._run = traverse(self.graph, start_node, max_steps)
        finally:
            self.state = TraversalState.DONE if self._run is not None else TraversalState.IDLE
        return list(self._run.path)

    @property
    def run(self) -> TraversalRun | None:
        """The latest run, or None before the first traversal."""
        return self._run

    @property
    def path(self) -> list[int]:
        return list(self._run.path) if self._run else []

    @property
    def visited(self) -> set[int]:
        return set(self._run.visited) if self._run else set()

    def total_transitions(self) -> int:
        return self._run.total_transitions() if self._run else 0

    def repeated_transitions(self) -> int:
        return self._run.repeated_transitions() if self._run else 0
