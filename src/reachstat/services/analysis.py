"""AnalysisService — load an edge list, sample pairs, summarize.

``analyze`` is the driver entry point: one file in, one connectivity
summary out. ``analyze_batch`` runs it over several files and isolates
failures per file. ``distance``, ``adjacency`` and ``profile`` expose the
single-query, dump and exact-statistics views of the same graph.
"""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

import structlog

from reachstat.domain.sampling import Trial, run_sampling
from reachstat.domain.statistics import summarize
from reachstat.domain.traversal import shortest_distance
from reachstat.infrastructure.edgelist import FileAccessError, LoadedGraph, read_edge_list
from reachstat.infrastructure.graph.engine import exact_profile
from reachstat.services.base import BaseService
from reachstat.services.result import ServiceResult
from reachstat.services.telemetry import get_current_span, trace_span, traced

log = structlog.get_logger(__name__)


def summary_tuple(result: ServiceResult) -> tuple[int, float, float | None, int]:
    """Unpack a successful ``analyze`` result into its four metrics.

    Returns ``(pairs_found, percent_connected, average_distance,
    longest_distance)``; ``average_distance`` is None when no pair was found.
    """
    if not result.ok or result.op != "analyze":
        msg = f"Not a successful analyze result: op={result.op!r} ok={result.ok}"
        raise ValueError(msg)
    d = result.data
    return (
        d["pairs_found"],
        d["percent_connected"],
        d["average_distance"],
        d["longest_distance"],
    )


def _trial_dict(trial: Trial) -> dict[str, Any]:
    return {
        "iteration": trial.iteration,
        "start": trial.start,
        "target": trial.target,
        "distance": trial.distance,
    }


class AnalysisService(BaseService):
    """Connectivity analysis over edge-list files."""

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _load(op: str, path: Path | str) -> LoadedGraph | ServiceResult:
        """Read *path*, or return the ``FILE_ACCESS`` failure for *op*."""
        try:
            loaded = read_edge_list(path)
        except FileAccessError as exc:
            log.warning("analysis.file_unreadable", file=str(exc.path), reason=exc.reason)
            return ServiceResult.failure(
                op,
                "FILE_ACCESS",
                str(exc),
                file=str(exc.path),
                reason=exc.reason,
            )

        span = get_current_span()
        if span:
            span.annotate("file", str(loaded.path))
            span.annotate("skipped_lines", len(loaded.malformed))
        return loaded

    @staticmethod
    def _malformed_warnings(loaded: LoadedGraph) -> list[str]:
        return [f"{loaded.path}: {bad.describe()}" for bad in loaded.malformed]

    # ------------------------------------------------------------------
    # analyze: Monte Carlo connectivity estimate
    # ------------------------------------------------------------------

    @traced
    def analyze(
        self,
        path: Path | str,
        *,
        max_node_bound: int | None = None,
        iterations: int | None = None,
        seed: int | None = None,
        trace: bool | None = None,
        dump_adjacency: bool | None = None,
    ) -> ServiceResult:
        """Estimate connectivity of the graph in *path* by sampling pairs.

        Arguments left as None fall back to the ``[sampling]`` and
        ``[report]`` settings.

        Args:
            path: Edge-list file.
            max_node_bound: Node labels are drawn from ``0..max_node_bound``.
            iterations: Number of sampled pairs; must be positive.
            seed: Seed for the run's random source. None draws a fresh seed
                from the OS; the seed used is always reported in ``data["seed"]``.
            trace: Include every sampled pair and its outcome in ``data["trials"]``.
            dump_adjacency: Include the adjacency lists in ``data["adjacency"]``.
        """
        sampling = self._settings.sampling
        report = self._settings.report
        bound = sampling.max_node_bound if max_node_bound is None else max_node_bound
        count = sampling.iterations if iterations is None else iterations
        seed = sampling.seed if seed is None else seed
        if seed is None:
            seed = random.SystemRandom().randrange(2**32)
        trace = report.trace if trace is None else trace
        dump_adjacency = report.dump_adjacency if dump_adjacency is None else dump_adjacency

        if count <= 0:
            return ServiceResult.failure(
                "analyze",
                "INVALID_ARGUMENT",
                f"iterations must be positive, got {count}",
                iterations=count,
            )
        if bound < 0:
            return ServiceResult.failure(
                "analyze",
                "INVALID_ARGUMENT",
                f"max_node_bound must be >= 0, got {bound}",
                max_node_bound=bound,
            )

        loaded = self._load("analyze", path)
        if isinstance(loaded, ServiceResult):
            return loaded
        graph = loaded.graph

        trials: list[dict[str, Any]] = []

        def _collect(trial: Trial) -> None:
            trials.append(_trial_dict(trial))

        rng = random.Random(seed)
        with trace_span("sampling") as span:
            totals = run_sampling(
                graph,
                bound,
                count,
                rng,
                on_trial=_collect if trace else None,
            )
            if span:
                span.annotate("iterations", totals.iterations)
                span.annotate("pairs_found", totals.pairs_found)

        summary = summarize(totals, count)
        log.debug(
            "analysis.complete",
            file=str(loaded.path),
            iterations=count,
            pairs_found=summary.pairs_found,
        )

        data: dict[str, Any] = {
            "file": str(loaded.path),
            "nodes": graph.node_count(),
            "edges": graph.edge_count(),
            "max_node_bound": bound,
            "iterations": count,
            "seed": seed,
            **summary.to_dict(),
        }
        if trace:
            data["trials"] = trials
        if dump_adjacency:
            data["adjacency"] = {node: list(nbrs) for node, nbrs in graph.adjacency().items()}

        return ServiceResult(
            ok=True,
            op="analyze",
            data=data,
            warnings=self._malformed_warnings(loaded),
        )

    def analyze_batch(
        self,
        paths: Iterable[Path | str],
        **options: Any,
    ) -> Iterator[ServiceResult]:
        """Run :meth:`analyze` on each file in order, yielding as it goes.

        A file that fails yields its own error result; the remaining files
        are still analyzed. *options* are passed to every call.
        """
        for path in paths:
            yield self.analyze(path, **options)

    # ------------------------------------------------------------------
    # distance: one BFS query
    # ------------------------------------------------------------------

    @traced
    def distance(self, path: Path | str, start: str, target: str) -> ServiceResult:
        """Shortest-path distance between two nodes of the graph in *path*."""
        loaded = self._load("distance", path)
        if isinstance(loaded, ServiceResult):
            return loaded

        dist = shortest_distance(loaded.graph, start, target)
        return ServiceResult(
            ok=True,
            op="distance",
            data={
                "file": str(loaded.path),
                "start": start,
                "target": target,
                "reachable": dist is not None,
                "distance": dist,
            },
            warnings=self._malformed_warnings(loaded),
        )

    # ------------------------------------------------------------------
    # adjacency: structure dump
    # ------------------------------------------------------------------

    @traced
    def adjacency(self, path: Path | str) -> ServiceResult:
        """Return the adjacency lists of the graph in *path*."""
        loaded = self._load("adjacency", path)
        if isinstance(loaded, ServiceResult):
            return loaded

        graph = loaded.graph
        return ServiceResult(
            ok=True,
            op="adjacency",
            data={
                "file": str(loaded.path),
                "nodes": graph.node_count(),
                "edges": graph.edge_count(),
                "adjacency": {node: list(nbrs) for node, nbrs in graph.adjacency().items()},
            },
            warnings=self._malformed_warnings(loaded),
        )

    # ------------------------------------------------------------------
    # profile: exact statistics via NetworkX
    # ------------------------------------------------------------------

    @traced
    def profile(self, path: Path | str) -> ServiceResult:
        """Exact reachable-pair share and diameter, for small graphs."""
        loaded = self._load("profile", path)
        if isinstance(loaded, ServiceResult):
            return loaded

        with trace_span("all_pairs_bfs") as span:
            prof = exact_profile(loaded.graph)
            if span:
                span.annotate("nodes", prof.nodes)
                span.annotate("edges", prof.edges)

        return ServiceResult(
            ok=True,
            op="profile",
            data={"file": str(loaded.path), **prof.to_dict()},
            warnings=self._malformed_warnings(loaded),
        )
