"""Tests for GraphStore adjacency storage."""

from __future__ import annotations

import pytest

from reachstat.domain.graph import GraphStore


class TestInsertEdge:
    def test_empty_store(self) -> None:
        g = GraphStore()
        assert g.node_count() == 0
        assert g.edge_count() == 0
        assert len(g) == 0

    def test_creates_entry_for_new_source(self) -> None:
        g = GraphStore()
        g.insert_edge("0", "4")
        assert "0" in g
        assert g.neighbors_of("0") == ("4",)

    def test_preserves_neighbor_order(self) -> None:
        g = GraphStore()
        g.insert_edge("7", "5")
        g.insert_edge("7", "6")
        g.insert_edge("7", "1")
        assert list(g.neighbors_of("7")) == ["5", "6", "1"]

    def test_keeps_duplicates_and_self_loops(self) -> None:
        g = GraphStore.from_edges([("a", "b"), ("a", "b"), ("a", "a")])
        assert list(g.neighbors_of("a")) == ["b", "b", "a"]
        assert g.edge_count() == 3

    def test_labels_stay_text(self) -> None:
        g = GraphStore.from_edges([("07", "1"), ("7", "2")])
        assert g.node_count() == 2
        assert list(g.neighbors_of("07")) == ["1"]
        assert list(g.neighbors_of("7")) == ["2"]


class TestReadAccess:
    def test_target_only_node_has_no_entry(self) -> None:
        g = GraphStore.from_edges([("0", "4")])
        assert "4" not in g
        assert g.neighbors_of("4") == ()

    def test_unknown_node_has_no_neighbors(self, directed_graph: GraphStore) -> None:
        assert directed_graph.neighbors_of("99") == ()

    def test_node_count_counts_sources(self, directed_graph: GraphStore) -> None:
        assert directed_graph.node_count() == 9
        assert directed_graph.edge_count() == 12

    def test_known_neighbor_lists(self, directed_graph: GraphStore) -> None:
        assert list(directed_graph.neighbors_of("0")) == ["4"]
        assert list(directed_graph.neighbors_of("7")) == ["5", "6"]
        assert list(directed_graph.neighbors_of("2")) == ["3"]

    def test_iterates_sources_in_insertion_order(self) -> None:
        g = GraphStore.from_edges([("b", "x"), ("a", "x"), ("b", "y")])
        assert list(g) == ["b", "a"]

    def test_adjacency_is_read_only(self, directed_graph: GraphStore) -> None:
        adjacency = directed_graph.adjacency()
        with pytest.raises(TypeError):
            adjacency["new"] = ("x",)  # type: ignore[index]
        assert adjacency["3"] == ("1", "8")

    def test_neighbors_of_returns_a_copy(self) -> None:
        g = GraphStore.from_edges([("a", "b")])
        neighbors = g.neighbors_of("a")
        assert isinstance(neighbors, tuple)
        g.insert_edge("a", "c")
        assert neighbors == ("b",)


class TestEquality:
    def test_same_edges_are_equal(self) -> None:
        edges = [("1", "2"), ("1", "3"), ("2", "3")]
        assert GraphStore.from_edges(edges) == GraphStore.from_edges(edges)

    def test_neighbor_order_matters(self) -> None:
        left = GraphStore.from_edges([("1", "2"), ("1", "3")])
        right = GraphStore.from_edges([("1", "3"), ("1", "2")])
        assert left != right

    def test_not_equal_to_other_types(self) -> None:
        assert GraphStore() != {}

    def test_repr(self, directed_graph: GraphStore) -> None:
        assert repr(directed_graph) == "GraphStore(nodes=9, edges=12)"
