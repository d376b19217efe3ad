"""GraphStore — adjacency-list storage for directed, unweighted graphs.

Node identifiers are opaque strings. Numeric-looking labels are never
converted to numbers; ``"07"`` and ``"7"`` are different nodes.

INVARIANT: Neighbor order is insertion order. Duplicate edges and
self-loops are kept as given.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import TypeAlias

Edge: TypeAlias = tuple[str, str]

_NO_NEIGHBORS: tuple[str, ...] = ()


class GraphStore:
    """Mapping from source node to its ordered outgoing neighbors.

    Built once during edge loading, then only read. A node that only ever
    appears as a target has no entry and reports zero neighbors.
    """

    def __init__(self) -> None:
        self._adjacency: dict[str, list[str]] = {}

    @classmethod
    def from_edges(cls, edges: Iterable[Edge]) -> GraphStore:
        """Build a store from ``(source, target)`` pairs, in order."""
        store = cls()
        store.insert_edges(edges)
        return store

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def insert_edge(self, source: str, target: str) -> None:
        """Append *target* to the neighbor list of *source*."""
        self._adjacency.setdefault(source, []).append(target)

    def insert_edges(self, edges: Iterable[Edge]) -> None:
        for source, target in edges:
            self.insert_edge(source, target)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    def neighbors_of(self, node: str) -> Sequence[str]:
        """Return the ordered neighbors of *node* (empty if it has none)."""
        neighbors = self._adjacency.get(node)
        if neighbors is None:
            return _NO_NEIGHBORS
        return tuple(neighbors)

    def node_count(self) -> int:
        """Number of distinct nodes that appear as edge sources."""
        return len(self._adjacency)

    def edge_count(self) -> int:
        return sum(len(neighbors) for neighbors in self._adjacency.values())

    def adjacency(self) -> Mapping[str, Sequence[str]]:
        """Read-only snapshot of the adjacency mapping."""
        return MappingProxyType(
            {node: tuple(neighbors) for node, neighbors in self._adjacency.items()}
        )

    def __contains__(self, node: object) -> bool:
        return node in self._adjacency

    def __iter__(self) -> Iterator[str]:
        return iter(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GraphStore):
            return NotImplemented
        return self._adjacency == other._adjacency

    def __repr__(self) -> str:
        return f"GraphStore(nodes={self.node_count()}, edges={self.edge_count()})"
