"""Find the stored layout for a breakpoint, or derive one from a neighbour."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from dataclasses import replace

from responsive_grid.breakpoints import sort_breakpoints
from responsive_grid.layout.compact import compact, correct_bounds
from responsive_grid.types import CompactType, GridItem, Layout

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def scale_layout(layout: Sequence[GridItem], from_cols: int, to_cols: int) -> Layout:
    """Rescale x/w from one column count to another; y/h are left alone."""
    if from_cols == to_cols or from_cols <= 0:
        return list(layout)
    ratio = to_cols / from_cols
    out: Layout = []
    for item in layout:
        w = min(to_cols, max(1, _round_half_up(item.w * ratio)))
        x = min(to_cols - w, max(0, _round_half_up(item.x * ratio)))
        out.append(replace(item, x=x, w=w))
    return out


def find_or_generate(
    layouts: Mapping[str, Sequence[GridItem]],
    breakpoints: Mapping[str, int],
    target: str,
    fallback: str,
    columns: int,
    compact_type: CompactType,
    cols_map: Mapping[str, int] | None = None,
) -> Layout:
    """Return the layout to show at ``target``.

    A layout stored for ``target`` is returned as a copy, untouched. Otherwise
    the nearest larger breakpoint with a stored layout is used as a basis,
    then the stored layout of ``fallback``, then an empty layout. A derived
    layout is rescaled from its basis column count (when ``cols_map`` knows
    it) to ``columns``, pulled inside the grid and compacted.
    """
    if target in layouts:
        return list(layouts[target])

    basis_name: str | None = None
    ordered = sort_breakpoints(breakpoints)
    above = ordered[ordered.index(target) + 1 :] if target in ordered else []
    for name in above:
        if name in layouts:
            basis_name = name
            break
    if basis_name is None and fallback in layouts:
        basis_name = fallback

    if basis_name is None:
        logger.debug("no stored layout to derive '%s' from; starting empty", target)
        return []

    logger.debug("deriving layout for '%s' from '%s'", target, basis_name)
    basis = list(layouts[basis_name])
    if cols_map is not None and basis_name in cols_map:
        basis = scale_layout(basis, cols_map[basis_name], columns)
    return compact(correct_bounds(basis, columns), compact_type, columns)
