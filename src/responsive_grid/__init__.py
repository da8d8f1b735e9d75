"""responsive-grid: breakpoint resolution and layout reconciliation for responsive grids."""

from responsive_grid.breakpoints import resolve_breakpoint, resolve_columns, sort_breakpoints
from responsive_grid.config import PreviewConfig, ResponsiveConfig, default_breakpoints, default_cols
from responsive_grid.controller import Effect, ResponsiveController, Transition, initial_transition, on_config_change
from responsive_grid.errors import ConfigurationError
from responsive_grid.layout import compact, find_or_generate, synchronize, validate_layout
from responsive_grid.renderers import AsciiRenderer, render_layout
from responsive_grid.types import CompactType, EngineState, GridItem, Layout, LiveItem

__all__ = [
    "AsciiRenderer",
    "CompactType",
    "ConfigurationError",
    "Effect",
    "EngineState",
    "GridItem",
    "Layout",
    "LiveItem",
    "PreviewConfig",
    "ResponsiveConfig",
    "ResponsiveController",
    "Transition",
    "compact",
    "default_breakpoints",
    "default_cols",
    "find_or_generate",
    "initial_transition",
    "on_config_change",
    "render_layout",
    "resolve",
    "resolve_breakpoint",
    "resolve_columns",
    "sort_breakpoints",
    "synchronize",
    "validate_layout",
]


def resolve(config: ResponsiveConfig) -> EngineState:
    """Resolve the state for a single config without keeping a controller around.

    Args:
        config: Host configuration.

    Returns:
        The initial ``EngineState`` (``on_init`` is fired).

    Raises:
        ConfigurationError: If the config fails validation.
    """
    return ResponsiveController(config).initialize()
