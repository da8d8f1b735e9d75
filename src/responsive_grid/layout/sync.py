"""Reconcile a layout with the set of items actually being rendered."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import replace

from responsive_grid.layout.compact import bottom, compact, correct_bounds, first_collision
from responsive_grid.layout.validate import validate_live_items
from responsive_grid.types import CompactType, GridItem, Layout, LiveItem, LiveItemLike

logger = logging.getLogger(__name__)


def auto_place(layout: Sequence[GridItem], item: GridItem, columns: int, compact_type: CompactType) -> GridItem:
    """Move ``item`` to the first free cell of ``layout``.

    Row-major scan for vertical/none compaction; column-major scan within the
    current layout height for horizontal. Falls back to the first column
    below everything.
    """
    floor = bottom(layout)
    max_x = max(0, columns - item.w)
    if compact_type == CompactType.Horizontal:
        candidates = ((x, y) for x in range(max_x + 1) for y in range(floor - item.h + 1))
    else:
        candidates = ((x, y) for y in range(floor + 1) for x in range(max_x + 1))
    for x, y in candidates:
        probe = GridItem(id=item.id, x=x, y=y, w=item.w, h=item.h)
        if first_collision(layout, probe) is None:
            return replace(item, x=x, y=y)
    return replace(item, x=0, y=floor)


def _new_item(live: LiveItem, columns: int) -> GridItem:
    return GridItem(
        id=live.id,
        x=live.x if live.x is not None else 0,
        y=live.y if live.y is not None else 0,
        w=max(1, min(live.w, columns)),
        h=max(1, live.h),
        static=live.static,
    )


def synchronize(
    layout: Sequence[GridItem],
    live_items: Iterable[LiveItemLike],
    columns: int,
    compact_type: CompactType,
) -> Layout:
    """Add layout entries for new live items, drop stale ones, then compact.

    Kept items stay in layout order; new items are appended in live order.
    """
    live = validate_live_items(live_items)
    live_ids = {item.id for item in live}
    kept: Layout = [item for item in layout if item.id in live_ids]
    dropped = [item.id for item in layout if item.id not in live_ids]
    if dropped:
        logger.debug("dropping layout entries without a live item: %s", dropped)

    known = {item.id for item in kept}
    for live_item in live:
        if live_item.id in known:
            continue
        item = _new_item(live_item, columns)
        if live_item.x is None or live_item.y is None:
            item = auto_place(kept, item, columns, compact_type)
        logger.debug("adding layout entry for '%s' at (%d, %d)", item.id, item.x, item.y)
        kept.append(item)
        known.add(item.id)

    return compact(correct_bounds(kept, columns), compact_type, columns)
