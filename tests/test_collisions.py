"""Tests for layout/collisions.py: overlap graph."""

from __future__ import annotations

from conftest import item

from responsive_grid.layout.collisions import collision_graph, overlap_clusters, overlapping_pairs


class TestCollisionGraph:
    def test_nodes_carry_items(self):
        a = item("a", 0, 0)
        graph = collision_graph([a])
        assert list(graph.nodes) == ["a"]
        assert graph.nodes["a"]["item"] == a

    def test_edges_for_overlaps_only(self):
        layout = [item("a", 0, 0, 2, 2), item("b", 1, 1, 2, 2), item("c", 5, 5)]
        graph = collision_graph(layout)
        assert graph.number_of_edges() == 1
        assert graph.has_edge("a", "b")

    def test_overlapping_pairs_sorted(self):
        layout = [item("z", 0, 0, 3, 1), item("b", 1, 0), item("a", 2, 0)]
        assert overlapping_pairs(layout) == [("a", "z"), ("b", "z")]

    def test_clusters(self):
        layout = [item("a", 0, 0, 2, 1), item("b", 1, 0, 2, 1), item("c", 2, 0, 2, 1), item("d", 8, 8)]
        assert overlap_clusters(layout) == [["a", "b", "c"]]

    def test_empty(self):
        assert overlapping_pairs([]) == []
        assert overlap_clusters([]) == []
