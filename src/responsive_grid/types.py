"""Shared type definitions for responsive-grid.

Enums and small immutable records used across the resolver, layout
generation, synchronization and the controller.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from responsive_grid.errors import ConfigurationError


class CompactType(Enum):
    Vertical = "vertical"
    Horizontal = "horizontal"
    NoCompaction = "none"

    @classmethod
    def default(cls) -> CompactType:
        return cls.Vertical

    @classmethod
    def parse(cls, value: CompactType | str | None) -> CompactType:
        """Accept an enum member, its string value, or None (no compaction)."""
        if value is None:
            return cls.NoCompaction
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ConfigurationError(f"Unknown compact type '{value}'; use vertical, horizontal or none") from None


# Wire keys used by GridItem.from_dict / to_dict for optional fields.
_OPTIONAL_KEYS: dict[str, str] = {
    "min_w": "minW",
    "max_w": "maxW",
    "min_h": "minH",
    "max_h": "maxH",
    "is_draggable": "isDraggable",
    "is_resizable": "isResizable",
}


@dataclass(frozen=True)
class GridItem:
    """One positioned, sized cell of a layout."""

    id: str
    x: int
    y: int
    w: int = 1
    h: int = 1
    min_w: int | None = None
    max_w: int | None = None
    min_h: int | None = None
    max_h: int | None = None
    static: bool = False
    is_draggable: bool | None = None
    is_resizable: bool | None = None

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GridItem:
        """Build an item from its wire form (``i``, ``x``, ``y``, ``w``, ``h``, ``minW`` ...)."""
        kwargs: dict[str, Any] = {
            "id": data["i"] if "i" in data else data["id"],
            "x": data["x"],
            "y": data["y"],
            "w": data.get("w", 1),
            "h": data.get("h", 1),
            "static": data.get("static", False),
        }
        for attr, key in _OPTIONAL_KEYS.items():
            if key in data:
                kwargs[attr] = data[key]
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"i": self.id, "x": self.x, "y": self.y, "w": self.w, "h": self.h}
        for attr, key in _OPTIONAL_KEYS.items():
            value = getattr(self, attr)
            if value is not None:
                out[key] = value
        if self.static:
            out["static"] = True
        return out


Layout = list[GridItem]


@dataclass(frozen=True)
class LiveItem:
    """A rendered element the layout must account for.

    ``w``/``h`` are the size used when the element has no layout entry yet.
    When both ``x`` and ``y`` are given the element is placed there instead
    of being auto-placed.
    """

    id: str
    w: int = 1
    h: int = 1
    x: int | None = None
    y: int | None = None
    static: bool = False

    @classmethod
    def coerce(cls, value: LiveItem | str | Mapping[str, Any]) -> LiveItem:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls(id=value)
        if isinstance(value, Mapping):
            if "i" not in value and "id" not in value:
                raise ConfigurationError(f"Live item {dict(value)!r} has no id")
            return cls(
                id=value["i"] if "i" in value else value["id"],
                w=value.get("w", 1),
                h=value.get("h", 1),
                x=value.get("x"),
                y=value.get("y"),
                static=value.get("static", False),
            )
        raise ConfigurationError(f"Cannot interpret live item {value!r}")


LiveItemLike = Union[LiveItem, str, Mapping[str, Any]]


@dataclass(frozen=True)
class EngineState:
    """The single state unit owned by the controller."""

    breakpoint: str
    columns: int
    layout: Layout = field(default_factory=list)
    width: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "breakpoint": self.breakpoint,
            "columns": self.columns,
            "width": self.width,
            "layout": [item.to_dict() for item in self.layout],
        }
