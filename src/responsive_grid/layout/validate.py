"""Validation of host-supplied layouts and configuration.

Validation runs before any transition logic and raises ``ConfigurationError``
naming the offending path (``layouts.lg[2].w``). Successful validation
returns layouts normalized to ``GridItem`` lists.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Any

from responsive_grid.errors import ConfigurationError
from responsive_grid.types import GridItem, Layout, LiveItem

if TYPE_CHECKING:
    from responsive_grid.config import ResponsiveConfig

_REQUIRED_INTS: tuple[tuple[str, int], ...] = (("x", 0), ("y", 0), ("w", 1), ("h", 1))
_BOUNDS: tuple[str, ...] = ("min_w", "max_w", "min_h", "max_h")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _coerce_item(value: Any, path: str) -> GridItem:
    if isinstance(value, GridItem):
        return value
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"{path} must be a grid item or mapping, got {type(value).__name__}")
    if "i" not in value and "id" not in value:
        raise ConfigurationError(f"{path}.i is required")
    for key in ("x", "y", "w", "h"):
        if key not in value:
            raise ConfigurationError(f"{path}.{key} is required")
    try:
        return GridItem.from_dict(value)
    except TypeError as e:
        raise ConfigurationError(f"{path}: {e}") from e


def validate_item(item: GridItem, path: str) -> None:
    if not isinstance(item.id, str) or not item.id:
        raise ConfigurationError(f"{path}.i must be a non-empty string")
    for attr, minimum in _REQUIRED_INTS:
        value = getattr(item, attr)
        if not _is_int(value):
            raise ConfigurationError(f"{path}.{attr} must be an integer, got {value!r}")
        if value < minimum:
            raise ConfigurationError(f"{path}.{attr} must be >= {minimum}, got {value}")
    for attr in _BOUNDS:
        value = getattr(item, attr)
        if value is not None and not _is_int(value):
            raise ConfigurationError(f"{path}.{attr} must be an integer when set, got {value!r}")
    if not isinstance(item.static, bool):
        raise ConfigurationError(f"{path}.static must be a boolean")


def validate_layout(layout: Any, context: str = "layout") -> Layout:
    """Check one layout and return it as a list of ``GridItem``."""
    if isinstance(layout, (str, bytes, Mapping)) or not isinstance(layout, Sequence):
        raise ConfigurationError(f"{context} must be a list of grid items, got {type(layout).__name__}")
    out: Layout = []
    seen: set[str] = set()
    for index, value in enumerate(layout):
        path = f"{context}[{index}]"
        item = _coerce_item(value, path)
        validate_item(item, path)
        if item.id in seen:
            raise ConfigurationError(f"{path}.i '{item.id}' is not unique in {context}")
        seen.add(item.id)
        out.append(item)
    return out


def validate_live_items(values: Iterable[Any], context: str = "items") -> list[LiveItem]:
    """Coerce live items and check their size and position hints."""
    out: list[LiveItem] = []
    for index, value in enumerate(values):
        path = f"{context}[{index}]"
        try:
            live = LiveItem.coerce(value)
        except ConfigurationError as e:
            raise ConfigurationError(f"{path}: {e}") from e
        if not isinstance(live.id, str) or not live.id:
            raise ConfigurationError(f"{path}.i must be a non-empty string")
        for attr in ("w", "h"):
            size = getattr(live, attr)
            if not _is_int(size) or size < 1:
                raise ConfigurationError(f"{path}.{attr} must be an integer >= 1, got {size!r}")
        for attr in ("x", "y"):
            coord = getattr(live, attr)
            if coord is not None and (not _is_int(coord) or coord < 0):
                raise ConfigurationError(f"{path}.{attr} must be an integer >= 0 when set, got {coord!r}")
        if not isinstance(live.static, bool):
            raise ConfigurationError(f"{path}.static must be a boolean")
        out.append(live)
    return out


def validate_breakpoints(breakpoints: Any, cols: Any) -> None:
    if not isinstance(breakpoints, Mapping) or not breakpoints:
        raise ConfigurationError("breakpoints must be a non-empty mapping of name -> threshold")
    for name, threshold in breakpoints.items():
        if not _is_int(threshold) or threshold < 0:
            raise ConfigurationError(f"breakpoints.{name} must be a non-negative integer, got {threshold!r}")
    if not isinstance(cols, Mapping):
        raise ConfigurationError("cols must be a mapping of breakpoint -> column count")
    for name, count in cols.items():
        if not _is_int(count) or count < 1:
            raise ConfigurationError(f"cols.{name} must be a positive integer, got {count!r}")


def validate_layouts(layouts: Any, breakpoints: Mapping[str, int]) -> dict[str, Layout]:
    if not isinstance(layouts, Mapping):
        raise ConfigurationError(f"Layout property must be a mapping. Received: {type(layouts).__name__}")
    out: dict[str, Layout] = {}
    for key, layout in layouts.items():
        if key not in breakpoints:
            raise ConfigurationError(f"Each key in layouts must align with a key in breakpoints; got '{key}'")
        out[key] = validate_layout(layout, f"layouts.{key}")
    return out


def validate_config(config: ResponsiveConfig) -> dict[str, Layout]:
    """Validate a whole config; returns its layouts normalized to ``GridItem`` lists."""
    if not _is_int(config.width):
        raise ConfigurationError(f"width must be an integer, got {config.width!r}")
    if config.viewport_width is not None and not _is_int(config.viewport_width):
        raise ConfigurationError(f"viewportWidth must be an integer, got {config.viewport_width!r}")
    validate_breakpoints(config.breakpoints, config.cols)
    if config.items is not None:
        validate_live_items(config.items)
    return validate_layouts(config.layouts, config.breakpoints)
