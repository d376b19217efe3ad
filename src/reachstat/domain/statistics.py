"""Summary metrics derived from sampling totals."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from reachstat.domain.sampling import SamplingTotals


@dataclass(frozen=True)
class SummaryRecord:
    """Connectivity estimate for one sampling run.

    ``average_distance`` is None when no sampled pair was connected.
    """

    pairs_found: int
    percent_connected: float
    average_distance: float | None
    longest_distance: int

    def as_tuple(self) -> tuple[int, float, float | None, int]:
        return (
            self.pairs_found,
            self.percent_connected,
            self.average_distance,
            self.longest_distance,
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def summarize(totals: SamplingTotals, iteration_count: int) -> SummaryRecord:
    """Derive percentages and averages from *totals*.

    Raises:
        ValueError: If *iteration_count* is not positive.
    """
    if iteration_count <= 0:
        msg = f"iteration_count must be positive, got {iteration_count}"
        raise ValueError(msg)

    percent = totals.pairs_found / iteration_count * 100
    average: float | None = None
    if totals.pairs_found:
        average = totals.distance_sum / totals.pairs_found

    return SummaryRecord(
        pairs_found=totals.pairs_found,
        percent_connected=percent,
        average_distance=average,
        longest_distance=totals.longest_distance,
    )
