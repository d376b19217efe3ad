"""Monte Carlo sampling of node pairs.

Draws ``(start, target)`` pairs uniformly from ``[0, max_node_bound]``
(inclusive, with replacement), runs a BFS query per pair, and folds the
outcomes into :class:`SamplingTotals`.

The random source is always passed in. Tests seed it; the service layer
creates a fresh ``random.Random`` per run.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from reachstat.domain.traversal import NeighborView, shortest_distance


class RandomSource(Protocol):
    """The slice of ``random.Random`` the driver needs."""

    def randint(self, a: int, b: int) -> int: ...


@dataclass(frozen=True)
class Trial:
    """One sampled pair and its outcome."""

    iteration: int  # 1-based
    start: str
    target: str
    distance: int | None  # None when target is unreachable

    @property
    def reachable(self) -> bool:
        return self.distance is not None


@dataclass
class SamplingTotals:
    """Running totals for one sampling run."""

    iterations: int = 0
    pairs_found: int = 0
    distance_sum: int = 0
    longest_distance: int = 0

    def record(self, distance: int | None) -> None:
        """Fold one BFS outcome into the totals."""
        self.iterations += 1
        if distance is None:
            return
        self.pairs_found += 1
        self.distance_sum += distance
        if distance > self.longest_distance:
            self.longest_distance = distance


def run_sampling(
    graph: NeighborView,
    max_node_bound: int,
    iteration_count: int,
    rng: RandomSource,
    *,
    on_trial: Callable[[Trial], None] | None = None,
) -> SamplingTotals:
    """Sample *iteration_count* random pairs and accumulate BFS results.

    Args:
        graph: Read-only neighbor view, usually a ``GraphStore``.
        max_node_bound: Largest node label drawn (inclusive).
        iteration_count: Number of pairs to sample.
        rng: Random source; both endpoints are drawn independently.
        on_trial: Optional observer called with every :class:`Trial`.
            It only sees outcomes and cannot alter the totals.
    """
    if max_node_bound < 0:
        msg = f"max_node_bound must be >= 0, got {max_node_bound}"
        raise ValueError(msg)
    if iteration_count < 0:
        msg = f"iteration_count must be >= 0, got {iteration_count}"
        raise ValueError(msg)

    totals = SamplingTotals()
    for iteration in range(1, iteration_count + 1):
        start = str(rng.randint(0, max_node_bound))
        target = str(rng.randint(0, max_node_bound))
        distance = shortest_distance(graph, start, target)
        totals.record(distance)
        if on_trial is not None:
            on_trial(Trial(iteration=iteration, start=start, target=target, distance=distance))
    return totals
