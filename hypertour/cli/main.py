"""Hypertour CLI — command-line interface for hypergraph traversal."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Callable, Generator

import click

from hypertour.client import Hypertour
from hypertour.errors import HypertourError
from hypertour.models import TraversalResult

logger = logging.getLogger("hypertour.cli")

DEFAULT_LOG_LEVEL = "WARNING"


def _parse_edges(
    ctx: click.Context, param: click.Parameter, value: tuple[str, ...]
) -> list[list[int]]:
    edges = []
    for raw in value:
        try:
            edges.append([int(part) for part in raw.split(",") if part.strip()])
        except ValueError:
            raise click.BadParameter(
                f"{raw!r} is not a comma-separated list of node ids", ctx=ctx, param=param
            ) from None
    return edges


def _build(num_nodes: int, edges: list[list[int]]) -> Hypertour:
    ht = Hypertour(num_nodes)
    for members in edges:
        ht.edge(members)
    logger.debug("Built %r", ht)
    return ht


def _echo_graph(ht: Hypertour) -> None:
    click.echo(f"Nodes: {ht.num_nodes}  Edges: {len(ht.edges())}")
    for e in ht.edges():
        click.echo(f"  {e.id}: {e.members}")


def _echo_result(ht: Hypertour, result: TraversalResult) -> None:
    click.echo("=== Traversal results ===")
    click.echo(f"Path: {result.path}")
    click.echo(f"Visited nodes: {len(result.visited)}/{ht.num_nodes}")
    click.echo(f"Total transitions: {result.total_transitions}")
    click.echo(f"Repeated transitions: {result.repeated_transitions}")
    click.echo(f"Stop reason: {result.stop_reason}")
    if result.partial_coverage:
        click.echo(f"Unvisited nodes: {result.unvisited}")


def _walk(ht: Hypertour, start: int, max_steps: int | None, show_steps: bool) -> TraversalResult:
    if not show_steps:
        return ht.traverse(start, max_steps=max_steps)
    steps: Generator[tuple[int, int], None, TraversalResult] = ht.steps(
        start, max_steps=max_steps
    )
    number = 0
    while True:
        try:
            source, target = next(steps)
        except StopIteration as stop:
            return stop.value
        number += 1
        click.echo(f"  step {number}: {source} -> {target}")


def _run(
    ht_factory: Callable[[], Hypertour], start: int, max_steps: int | None, show_steps: bool
) -> None:
    try:
        ht = ht_factory()
        _echo_graph(ht)
        result = _walk(ht, start, max_steps, show_steps)
    except HypertourError as exc:
        raise click.UsageError(str(exc)) from exc
    _echo_result(ht, result)


edge_option = click.option(
    "--edge",
    "edges",
    multiple=True,
    callback=_parse_edges,
    help="Hyperedge members as comma-separated node ids (repeatable).",
)
nodes_option = click.option("--nodes", "num_nodes", required=True, type=int, help="Number of nodes.")
start_option = click.option("--start", default=0, show_default=True, help="Start node.")
max_steps_option = click.option(
    "--max-steps", default=None, type=int, help="Stop after this many moves."
)
steps_option = click.option("--steps", "show_steps", is_flag=True, help="Print every move.")


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.version_option(package_name="hypertour")
def cli(verbose: bool) -> None:
    """Hypertour CLI — walk hypergraphs while keeping repeated moves low."""
    level = "DEBUG" if verbose else os.environ.get("HYPERTOUR_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    # Logs go to stderr, results to stdout
    logging.basicConfig(stream=sys.stderr, level=level.upper(), format="%(levelname)s: %(message)s")


@cli.command()
@nodes_option
@edge_option
@start_option
@max_steps_option
@steps_option
def run(
    num_nodes: int,
    edges: list[list[int]],
    start: int,
    max_steps: int | None,
    show_steps: bool,
) -> None:
    """Build a hypergraph from --edge options and traverse it."""
    _run(lambda: _build(num_nodes, edges), start, max_steps, show_steps)


@cli.command("random")
@click.option("--nodes", "num_nodes", default=8, show_default=True, help="Number of nodes.")
@click.option("--edges", "num_edges", default=6, show_default=True, help="Number of hyperedges.")
@click.option("--min-size", default=2, show_default=True, help="Smallest hyperedge size.")
@click.option("--max-size", default=4, show_default=True, help="Largest hyperedge size.")
@click.option("--seed", default=None, type=int, help="Random seed.")
@start_option
@max_steps_option
@steps_option
def random_cmd(
    num_nodes: int,
    num_edges: int,
    min_size: int,
    max_size: int,
    seed: int | None,
    start: int,
    max_steps: int | None,
    show_steps: bool,
) -> None:
    """Generate a random hypergraph and traverse it."""
    _run(
        lambda: Hypertour.random(
            num_nodes, num_edges, min_edge_size=min_size, max_edge_size=max_size, seed=seed
        ),
        start,
        max_steps,
        show_steps,
    )


@cli.command()
@nodes_option
@edge_option
@click.argument("node", type=int)
def neighbors(num_nodes: int, edges: list[list[int]], node: int) -> None:
    """List the neighbors of NODE and the edges containing it."""
    try:
        ht = _build(num_nodes, edges)
        found = ht.neighbors(node)
        containing = ht.edges_containing(node)
    except HypertourError as exc:
        raise click.UsageError(str(exc)) from exc
    click.echo(f"Neighbors of {node}: {found}")
    click.echo(f"Edges containing {node}: {containing}")


@cli.command()
@nodes_option
@edge_option
def stats(num_nodes: int, edges: list[list[int]]) -> None:
    """Show hypergraph statistics and validation warnings."""
    try:
        ht = _build(num_nodes, edges)
    except HypertourError as exc:
        raise click.UsageError(str(exc)) from exc
    s = ht.stats()
    click.echo(f"Nodes: {s.node_count}  Edges: {s.edge_count}  Components: {s.component_count}")
    click.echo(f"Largest edge: {s.max_edge_size}")
    if s.isolated_nodes:
        click.echo(f"Isolated nodes: {s.isolated_nodes}")
    result = ht.validate()
    for err in result.errors:
        click.echo(f"  ERROR: {err}")
    for warn in result.warnings:
        click.echo(f"  WARNING: {warn}")


if __name__ == "__main__":
    cli()
