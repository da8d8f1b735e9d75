"""Centralized configuration for responsive-grid.

``ResponsiveConfig`` is the per-transition input of the controller. Every
instance builds its own default maps; nothing mutable is shared at module
level.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from responsive_grid.errors import ConfigurationError
from responsive_grid.types import CompactType, GridItem, Layout, LiveItemLike


def default_breakpoints() -> dict[str, int]:
    return {"lg": 1200, "md": 996, "sm": 768, "xs": 480, "xxs": 0}


def default_cols() -> dict[str, int]:
    return {"lg": 12, "md": 10, "sm": 6, "xs": 4, "xxs": 2}


def noop(*args: Any) -> None:
    return None


# Wire key -> field name for ResponsiveConfig.from_dict.
_WIRE_KEYS: dict[str, str] = {
    "width": "width",
    "breakpointFromViewport": "breakpoint_from_viewport",
    "viewportWidth": "viewport_width",
    "breakpoints": "breakpoints",
    "cols": "cols",
    "layouts": "layouts",
    "breakpoint": "breakpoint",
    "compactType": "compact_type",
    "verticalCompact": "vertical_compact",
    "margin": "margin",
    "containerPadding": "container_padding",
    "items": "items",
}


@dataclass(frozen=True)
class ResponsiveConfig:
    """Host configuration for one transition."""

    width: int
    breakpoint_from_viewport: bool = False
    viewport_width: int | None = None
    breakpoints: Mapping[str, int] = field(default_factory=default_breakpoints)
    cols: Mapping[str, int] = field(default_factory=default_cols)
    layouts: Mapping[str, Sequence[GridItem | Mapping[str, Any]]] = field(default_factory=dict)
    breakpoint: str | None = None
    compact_type: CompactType | str | None = CompactType.Vertical
    vertical_compact: bool = True
    margin: tuple[int, int] = (10, 10)
    container_padding: tuple[int, int] | None = None
    items: Sequence[LiveItemLike] | None = None
    render_options: Mapping[str, Any] = field(default_factory=dict)
    on_breakpoint_change: Callable[[str, int], None] = noop
    on_layout_change: Callable[[Layout, dict[str, Layout]], None] = noop
    on_width_change: Callable[[int, tuple[int, int], int, tuple[int, int] | None], None] = noop
    on_init: Callable[[Any], None] = noop

    @property
    def width_for_breakpoint(self) -> int:
        if self.breakpoint_from_viewport:
            if self.viewport_width is None:
                raise ConfigurationError("breakpointFromViewport is set but viewportWidth is missing")
            return self.viewport_width
        return self.width

    @property
    def effective_compact_type(self) -> CompactType:
        # verticalCompact=False is the deprecated spelling of "no compaction".
        if not self.vertical_compact:
            return CompactType.NoCompaction
        return CompactType.parse(self.compact_type)

    def replace(self, **changes: Any) -> ResponsiveConfig:
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], **extra: Any) -> ResponsiveConfig:
        """Build a config from its JSON form; ``extra`` supplies callbacks and overrides."""
        if "width" not in data and "width" not in extra:
            raise ConfigurationError("Config requires a 'width'")
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _WIRE_KEYS.get(key)
            if name is None:
                raise ConfigurationError(f"Unknown config key '{key}'")
            kwargs[name] = value
        for name in ("margin", "container_padding"):
            if kwargs.get(name) is not None:
                kwargs[name] = tuple(kwargs[name])
        kwargs.update(extra)
        return cls(**kwargs)


@dataclass
class PreviewConfig:
    """Configuration for the text preview renderer."""

    unicode: bool = True
    cell_width: int = 6
    cell_height: int = 3
