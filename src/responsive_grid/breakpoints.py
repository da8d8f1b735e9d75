"""Breakpoint resolution: container width -> breakpoint name -> column count."""

from __future__ import annotations

from collections.abc import Mapping

from responsive_grid.errors import ConfigurationError


def sort_breakpoints(breakpoints: Mapping[str, int]) -> list[str]:
    """Breakpoint names ordered by threshold, smallest first.

    Equal thresholds keep mapping order.
    """
    return sorted(breakpoints, key=lambda name: breakpoints[name])


def resolve_breakpoint(breakpoints: Mapping[str, int], width: int) -> str:
    """Return the breakpoint with the largest threshold not exceeding ``width``.

    If every threshold is above ``width`` the smallest breakpoint is the
    catch-all. Equal thresholds resolve to whichever comes first in mapping
    order; well-formed tables use distinct thresholds.
    """
    if not breakpoints:
        raise ConfigurationError("Breakpoints map is empty")
    descending = sorted(breakpoints, key=lambda name: breakpoints[name], reverse=True)
    for name in descending:
        if breakpoints[name] <= width:
            return name
    return min(descending, key=lambda name: breakpoints[name])


def resolve_columns(breakpoint: str, cols: Mapping[str, int]) -> int:
    if breakpoint not in cols:
        raise ConfigurationError(f"{breakpoint} is required in the cols map: {dict(cols)}")
    return cols[breakpoint]
