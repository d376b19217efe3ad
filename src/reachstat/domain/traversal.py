"""Unweighted single-pair shortest paths via breadth-first search.

Pure functions over a read-only graph view. Each query owns its own
visited set, queue and distance map; nothing survives between queries,
so queries over the same store may run concurrently.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from typing import Protocol


class NeighborView(Protocol):
    """Anything that can list the outgoing neighbors of a node."""

    def neighbors_of(self, node: str) -> Sequence[str]: ...


def shortest_distance(graph: NeighborView, start: str, target: str) -> int | None:
    """Return the number of edges on a shortest path from *start* to *target*.

    Returns ``None`` when *target* is not reachable. Every edge has weight 1.
    When ``start == target`` the answer is 0 and no edge is examined, even if
    *start* has no entry in the graph.
    """
    visited: set[str] = {start}
    queue: deque[str] = deque([start])
    distances: dict[str, int] = {start: 0}

    while queue:
        node = queue.popleft()
        if node == target:
            return distances[node]

        next_distance = distances[node] + 1
        for neighbor in graph.neighbors_of(node):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)
                distances[neighbor] = next_distance

    return None
