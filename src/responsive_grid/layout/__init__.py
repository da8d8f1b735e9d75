"""Layout generation, synchronization, compaction and validation."""

from __future__ import annotations

from responsive_grid.layout.collisions import collision_graph, overlap_clusters, overlapping_pairs
from responsive_grid.layout.compact import (
    all_collisions,
    bottom,
    collides,
    compact,
    correct_bounds,
    first_collision,
    sort_layout_items,
)
from responsive_grid.layout.generator import find_or_generate, scale_layout
from responsive_grid.layout.sync import auto_place, synchronize
from responsive_grid.layout.validate import validate_config, validate_layout, validate_layouts, validate_live_items

__all__ = [
    "all_collisions",
    "auto_place",
    "bottom",
    "collides",
    "collision_graph",
    "compact",
    "correct_bounds",
    "find_or_generate",
    "first_collision",
    "overlap_clusters",
    "overlapping_pairs",
    "scale_layout",
    "sort_layout_items",
    "synchronize",
    "validate_config",
    "validate_layout",
    "validate_layouts",
    "validate_live_items",
]
