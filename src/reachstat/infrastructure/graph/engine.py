"""GraphEngine — NetworkX view of a GraphStore for exact statistics.

The sampled estimate from :mod:`reachstat.domain.sampling` is cheap on
large graphs. For small graphs the exact numbers are affordable, and
they bound what sampling may report (e.g. the longest sampled distance
can never exceed the diameter computed here).
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any, TypeAlias

import networkx as nx

if TYPE_CHECKING:
    from reachstat.domain.graph import GraphStore

# Duplicate edges and self-loops are preserved, hence a multigraph.
_Graph: TypeAlias = nx.MultiDiGraph


@dataclass(frozen=True)
class GraphProfile:
    """Exact connectivity numbers over every ordered pair of distinct nodes."""

    nodes: int  # every identifier seen, as source or target
    source_nodes: int
    edges: int
    ordered_pairs: int
    reachable_pairs: int
    percent_connected: float
    diameter: int  # longest shortest path among reachable pairs

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def to_networkx(store: GraphStore) -> _Graph:
    """Convert *store* to a ``MultiDiGraph``.

    Adds source nodes first so nodes keep the store's insertion order,
    then one edge per stored neighbor entry.
    """
    g: _Graph = nx.MultiDiGraph()
    g.add_nodes_from(store)
    for source, neighbors in store.adjacency().items():
        for target in neighbors:
            g.add_edge(source, target)
    return g


def exact_profile(store: GraphStore) -> GraphProfile:
    """Compute exact reachability and diameter with all-pairs BFS."""
    g = to_networkx(store)
    n = g.number_of_nodes()
    ordered_pairs = n * (n - 1)

    reachable = 0
    diameter = 0
    for source, lengths in nx.all_pairs_shortest_path_length(g):
        for target, length in lengths.items():
            if target == source:
                continue
            reachable += 1
            diameter = max(diameter, length)

    percent = reachable / ordered_pairs * 100 if ordered_pairs else 0.0
    return GraphProfile(
        nodes=n,
        source_nodes=store.node_count(),
        edges=g.number_of_edges(),
        ordered_pairs=ordered_pairs,
        reachable_pairs=reachable,
        percent_connected=percent,
        diameter=diameter,
    )
