"""Overlap analysis: builds a networkx graph of colliding items.

Compaction guarantees non-static items do not overlap, but stored layouts
and layouts compacted with ``none`` may. The graph makes those overlaps
easy to report and query (connected clusters, degree of an item).
"""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations

import networkx as nx

from responsive_grid.layout.compact import collides
from responsive_grid.types import GridItem


def collision_graph(layout: Sequence[GridItem]) -> nx.Graph:
    """Undirected graph: one node per item id, one edge per overlapping pair."""
    graph: nx.Graph = nx.Graph()
    for item in layout:
        graph.add_node(item.id, item=item)
    for a, b in combinations(layout, 2):
        if collides(a, b):
            graph.add_edge(a.id, b.id)
    return graph


def overlapping_pairs(layout: Sequence[GridItem]) -> list[tuple[str, str]]:
    graph = collision_graph(layout)
    return sorted(tuple(sorted(edge)) for edge in graph.edges())


def overlap_clusters(layout: Sequence[GridItem]) -> list[list[str]]:
    """Groups of ids that overlap each other directly or transitively."""
    graph = collision_graph(layout)
    clusters = [sorted(component) for component in nx.connected_components(graph) if len(component) > 1]
    return sorted(clusters)
