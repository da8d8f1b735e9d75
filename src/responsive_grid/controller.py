"""Responsive controller: breakpoint/layout state machine.

Transitions are pure functions from (previous config, next config, previous
state) to a ``Transition``: the next ``EngineState``, the next
layouts-by-breakpoint map and the ordered callback effects. The
``ResponsiveController`` wraps them, owns the current state and dispatches
effects to the host callbacks only once a transition has been computed, so a
failing transition leaves the previous state intact and fires nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace
from typing import Any

from responsive_grid.breakpoints import resolve_breakpoint, resolve_columns
from responsive_grid.config import ResponsiveConfig
from responsive_grid.layout.generator import find_or_generate
from responsive_grid.layout.sync import synchronize
from responsive_grid.layout.validate import validate_config, validate_layout, validate_layouts
from responsive_grid.types import EngineState, GridItem, Layout

logger = logging.getLogger(__name__)

ON_BREAKPOINT_CHANGE = "on_breakpoint_change"
ON_LAYOUT_CHANGE = "on_layout_change"
ON_WIDTH_CHANGE = "on_width_change"
ON_INIT = "on_init"


@dataclass(frozen=True)
class Effect:
    """One host callback invocation: the config attribute name and its arguments."""

    name: str
    args: tuple[Any, ...]

    def dispatch(self, config: ResponsiveConfig) -> None:
        getattr(config, self.name)(*self.args)


@dataclass(frozen=True)
class Transition:
    state: EngineState
    layouts: dict[str, Layout]
    effects: tuple[Effect, ...] = ()


# ─── Pure Transitions ────────────────────────────────────────────────────────


def _layout_change(layout: Layout, layouts: Mapping[str, Layout]) -> Effect:
    return Effect(ON_LAYOUT_CHANGE, (list(layout), {name: list(value) for name, value in layouts.items()}))


def _width_inputs_changed(prev: ResponsiveConfig, nxt: ResponsiveConfig) -> bool:
    return (
        prev.width != nxt.width
        or prev.viewport_width != nxt.viewport_width
        or prev.breakpoint != nxt.breakpoint
        or dict(prev.breakpoints) != dict(nxt.breakpoints)
        or dict(prev.cols) != dict(nxt.cols)
    )


def initial_transition(config: ResponsiveConfig) -> Transition:
    """Resolve breakpoint, columns and layout for a fresh controller."""
    layouts = validate_config(config)
    breakpoint = resolve_breakpoint(config.breakpoints, config.width_for_breakpoint)
    columns = resolve_columns(breakpoint, config.cols)
    layout = find_or_generate(
        layouts,
        config.breakpoints,
        breakpoint,
        breakpoint,
        columns,
        config.effective_compact_type,
        cols_map=config.cols,
    )
    state = EngineState(breakpoint=breakpoint, columns=columns, layout=layout, width=config.width)
    return Transition(state=state, layouts=layouts, effects=(Effect(ON_INIT, (state,)),))


def on_config_change(
    prev_config: ResponsiveConfig,
    next_config: ResponsiveConfig,
    prev_state: EngineState,
) -> Transition:
    """Compute the transition caused by a host configuration change.

    Width-affecting changes (width, viewport width, breakpoint override,
    breakpoints or cols maps) take priority: when they move the breakpoint or
    change either map, a layout for the new breakpoint is found or derived,
    synchronized with the live items and reported via
    ``on_breakpoint_change`` then ``on_layout_change``; ``on_width_change``
    follows for every width-affecting change. Otherwise a changed layouts map
    re-derives the current breakpoint's layout and reports only
    ``on_layout_change``. Anything else is a no-op.
    """
    next_layouts = validate_config(next_config)
    compact_type = next_config.effective_compact_type

    if _width_inputs_changed(prev_config, next_config):
        maps_changed = dict(prev_config.breakpoints) != dict(next_config.breakpoints) or dict(prev_config.cols) != dict(
            next_config.cols
        )
        new_breakpoint = next_config.breakpoint or resolve_breakpoint(
            next_config.breakpoints, next_config.width_for_breakpoint
        )
        new_columns = resolve_columns(new_breakpoint, next_config.cols)
        last_breakpoint = prev_state.breakpoint

        state = replace(prev_state, width=next_config.width)
        layouts = next_layouts
        effects: list[Effect] = []

        if new_breakpoint != last_breakpoint or maps_changed:
            logger.debug("breakpoint %s -> %s (%d cols)", last_breakpoint, new_breakpoint, new_columns)
            working = dict(next_layouts)
            if last_breakpoint not in working:
                working[last_breakpoint] = list(prev_state.layout)
            layout = find_or_generate(
                working,
                next_config.breakpoints,
                new_breakpoint,
                last_breakpoint,
                new_columns,
                compact_type,
                cols_map={**next_config.cols, last_breakpoint: prev_state.columns},
            )
            live = next_config.items if next_config.items is not None else [item.id for item in layout]
            layout = synchronize(layout, live, new_columns, compact_type)
            working[new_breakpoint] = layout
            # A breakpoint dropped from the table has nowhere to live in the host's map.
            layouts = {name: value for name, value in working.items() if name in next_config.breakpoints}

            effects.append(Effect(ON_BREAKPOINT_CHANGE, (new_breakpoint, new_columns)))
            effects.append(_layout_change(layout, layouts))
            state = EngineState(breakpoint=new_breakpoint, columns=new_columns, layout=layout, width=next_config.width)

        effects.append(
            Effect(ON_WIDTH_CHANGE, (next_config.width, next_config.margin, new_columns, next_config.container_padding))
        )
        return Transition(state=state, layouts=layouts, effects=tuple(effects))

    if next_layouts != validate_layouts(prev_config.layouts, prev_config.breakpoints):
        logger.debug("layouts changed; re-deriving layout for '%s'", prev_state.breakpoint)
        layout = find_or_generate(
            next_layouts,
            next_config.breakpoints,
            prev_state.breakpoint,
            prev_state.breakpoint,
            prev_state.columns,
            compact_type,
            cols_map=next_config.cols,
        )
        layouts = {**next_layouts, prev_state.breakpoint: layout}
        state = replace(prev_state, layout=layout)
        return Transition(state=state, layouts=layouts, effects=(_layout_change(layout, layouts),))

    return Transition(state=prev_state, layouts=next_layouts)


# ─── Controller ──────────────────────────────────────────────────────────────


class ResponsiveController:
    """Owns the current ``EngineState`` and fires host callbacks.

    Usage::

        controller = ResponsiveController(config)
        controller.initialize()
        controller.update(config.replace(width=900))
    """

    def __init__(self, config: ResponsiveConfig) -> None:
        self.config = config
        self.state: EngineState | None = None
        self.layouts: dict[str, Layout] = {}

    def initialize(self) -> EngineState:
        self._apply(self.config, initial_transition(self.config))
        return self.state

    def update(self, next_config: ResponsiveConfig) -> EngineState:
        """Advance to ``next_config``; raises ``ConfigurationError`` without side effects."""
        if self.state is None:
            self._apply(next_config, initial_transition(next_config))
            return self.state
        transition = on_config_change(self.config, next_config, self.state)
        self._apply(next_config, transition)
        return self.state

    def handle_user_layout_change(self, layout: Sequence[GridItem]) -> Effect:
        """Report a user-driven rearrangement with the full per-breakpoint map."""
        if self.state is None:
            raise RuntimeError("controller is not initialized")
        normalized = validate_layout(layout, "layout")
        effect = _layout_change(normalized, {**self.layouts, self.state.breakpoint: normalized})
        effect.dispatch(self.config)
        return effect

    def grid_props(self) -> dict[str, Any]:
        """Props for the grid renderer: host render options plus the resolved layout."""
        if self.state is None:
            raise RuntimeError("controller is not initialized")
        return {
            **self.config.render_options,
            "layout": list(self.state.layout),
            "cols": self.state.columns,
            "on_layout_change": self.handle_user_layout_change,
        }

    def _apply(self, config: ResponsiveConfig, transition: Transition) -> None:
        self.config = config
        self.state = transition.state
        self.layouts = transition.layouts
        for effect in transition.effects:
            logger.debug("firing %s", effect.name)
            effect.dispatch(config)
