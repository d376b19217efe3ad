"""Command: analyze — sampled connectivity statistics for edge-list files."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from reachstat.commands._base import ReachCommand
from reachstat.services.analysis import AnalysisService

if TYPE_CHECKING:
    from reachstat.commands._context import AppContext


@click.command(
    cls=ReachCommand,
    examples="""\
  reachstat analyze data/directed.txt
  reachstat analyze data/directed_connected.txt --nodes 8 --iterations 1000
  reachstat analyze data/directed.txt data/undirected.txt --nodes 5 --seed 7
  reachstat analyze data/directed.txt --trace --adjacency
  reachstat --json analyze data/directed.txt -i 500""",
)
@click.argument("files", nargs=-1, required=True, type=click.Path(path_type=Path))
@click.option(
    "-n",
    "--nodes",
    "max_node_bound",
    type=click.IntRange(min=0),
    default=None,
    help="Largest node label to sample (inclusive).",
)
@click.option(
    "-i",
    "--iterations",
    type=click.IntRange(min=1),
    default=None,
    help="Number of random pairs to sample per file.",
)
@click.option("--seed", type=int, default=None, help="Seed for reproducible sampling.")
@click.option(
    "--trace/--no-trace",
    default=None,
    help="Show every sampled pair and its outcome.",
)
@click.option(
    "--adjacency/--no-adjacency",
    "dump_adjacency",
    default=None,
    help="Show the adjacency list of each graph.",
)
@click.pass_obj
def analyze(
    app: AppContext,
    files: tuple[Path, ...],
    max_node_bound: int | None,
    iterations: int | None,
    seed: int | None,
    trace: bool | None,
    dump_adjacency: bool | None,
) -> None:
    """Estimate pair connectivity of each FILE by random BFS sampling.

    Files are analyzed in order. An unreadable file is reported and
    skipped; the exit code is 1 if any file failed.
    """
    svc = AnalysisService(app.settings)
    app.emit_all(
        svc.analyze_batch(
            files,
            max_node_bound=max_node_bound,
            iterations=iterations,
            seed=seed,
            trace=trace,
            dump_adjacency=dump_adjacency,
        )
    )
