"""Hypertour CLI — build or generate a hypergraph and walk it from the command line."""

from hypertour.cli.main import cli

__all__ = ["cli"]
