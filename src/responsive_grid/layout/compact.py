"""Grid geometry and compaction.

Phases used by both the generator and the synchronizer:
  1. Bounds correction (pull items inside the grid, separate statics)
  2. Compaction along an axis (vertical, horizontal or none)

Items are immutable; every function returns new lists and never edits its
input.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import replace

from responsive_grid.types import CompactType, GridItem, Layout

# ─── Geometry ────────────────────────────────────────────────────────────────


def collides(a: GridItem, b: GridItem) -> bool:
    """True when two distinct items overlap."""
    if a.id == b.id:
        return False
    if a.x + a.w <= b.x:
        return False
    if a.x >= b.x + b.w:
        return False
    if a.y + a.h <= b.y:
        return False
    if a.y >= b.y + b.h:
        return False
    return True


def bottom(layout: Iterable[GridItem]) -> int:
    """Lowest occupied row boundary (0 for an empty layout)."""
    return max((item.bottom for item in layout), default=0)


def first_collision(layout: Iterable[GridItem], item: GridItem) -> GridItem | None:
    for other in layout:
        if collides(other, item):
            return other
    return None


def all_collisions(layout: Iterable[GridItem], item: GridItem) -> list[GridItem]:
    return [other for other in layout if collides(other, item)]


def statics(layout: Iterable[GridItem]) -> list[GridItem]:
    return [item for item in layout if item.static]


def sort_layout_items(layout: Sequence[GridItem], compact_type: CompactType) -> list[GridItem]:
    """Processing order for compaction: row-major, or column-major for horizontal."""
    if compact_type == CompactType.Horizontal:
        return sorted(layout, key=lambda item: (item.x, item.y))
    return sorted(layout, key=lambda item: (item.y, item.x))


# ─── Bounds Correction ───────────────────────────────────────────────────────


def correct_bounds(layout: Sequence[GridItem], cols: int) -> Layout:
    """Move items back inside ``[0, cols)`` and push overlapping statics down."""
    placed_statics: list[GridItem] = []
    out: Layout = []
    for item in layout:
        if item.x + item.w > cols:
            item = replace(item, x=cols - item.w)
        if item.x < 0:
            item = replace(item, x=0, w=cols)
        if item.static:
            while first_collision(placed_statics, item) is not None:
                item = replace(item, y=item.y + 1)
            placed_statics.append(item)
        out.append(item)
    return out


# ─── Compaction ──────────────────────────────────────────────────────────────


def _compact_item(placed: list[GridItem], item: GridItem, compact_type: CompactType, cols: int) -> GridItem:
    if compact_type == CompactType.Vertical:
        item = replace(item, y=min(bottom(placed), item.y))
        while item.y > 0 and first_collision(placed, replace(item, y=item.y - 1)) is None:
            item = replace(item, y=item.y - 1)
    elif compact_type == CompactType.Horizontal:
        item = _pull_left(placed, item)

    collision = first_collision(placed, item)
    while collision is not None:
        if compact_type == CompactType.Horizontal:
            item = replace(item, x=collision.x + collision.w)
            if item.x + item.w > cols:
                item = _pull_left(placed, replace(item, x=cols - item.w, y=item.y + 1))
        else:
            item = replace(item, y=collision.y + collision.h)
        collision = first_collision(placed, item)

    return replace(item, x=max(item.x, 0), y=max(item.y, 0))


def _pull_left(placed: list[GridItem], item: GridItem) -> GridItem:
    while item.x > 0 and first_collision(placed, replace(item, x=item.x - 1)) is None:
        item = replace(item, x=item.x - 1)
    return item


def compact(layout: Sequence[GridItem], compact_type: CompactType, cols: int) -> Layout:
    """Remove gaps along the compaction axis.

    Items are processed in ``sort_layout_items`` order; statics never move and
    act as obstacles. The result keeps the input order. With
    ``CompactType.NoCompaction`` only bounds are corrected.
    """
    if compact_type == CompactType.NoCompaction:
        return correct_bounds(layout, cols)

    placed = statics(layout)
    compacted: dict[str, GridItem] = {}
    for item in sort_layout_items(layout, compact_type):
        if not item.static:
            item = _compact_item(placed, item, compact_type, cols)
            placed.append(item)
        compacted[item.id] = item
    return [compacted[item.id] for item in layout]
