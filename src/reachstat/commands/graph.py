"""Command group: single-graph queries and dumps."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from reachstat.commands._base import ReachGroup
from reachstat.services.analysis import AnalysisService

if TYPE_CHECKING:
    from reachstat.commands._context import AppContext

_GRAPH_EXAMPLES = """\
  reachstat graph distance data/directed.txt 2 6
  reachstat graph adjacency data/directed.txt
  reachstat graph profile data/directed.txt"""

_FILE = click.Path(path_type=Path)


@click.group(cls=ReachGroup, examples=_GRAPH_EXAMPLES)
def graph() -> None:
    """Query, dump, and profile a single graph."""


@graph.command(
    examples="""\
  reachstat graph distance data/directed.txt 2 6
  reachstat --json graph distance data/directed.txt 0 2"""
)
@click.argument("file", type=_FILE)
@click.argument("start")
@click.argument("target")
@click.pass_obj
def distance(app: AppContext, file: Path, start: str, target: str) -> None:
    """Shortest-path distance from START to TARGET."""
    app.emit(AnalysisService(app.settings).distance(file, start, target))


@graph.command(
    examples="""\
  reachstat graph adjacency data/directed.txt
  reachstat --json graph adjacency data/undirected.txt"""
)
@click.argument("file", type=_FILE)
@click.pass_obj
def adjacency(app: AppContext, file: Path) -> None:
    """Print the adjacency list of FILE."""
    app.emit(AnalysisService(app.settings).adjacency(file))


@graph.command(
    examples="""\
  reachstat graph profile data/directed.txt
  reachstat -q graph profile data/directed_connected.txt"""
)
@click.argument("file", type=_FILE)
@click.pass_obj
def profile(app: AppContext, file: Path) -> None:
    """Exact reachable-pair share and diameter (all-pairs BFS)."""
    app.emit(AnalysisService(app.settings).profile(file))
