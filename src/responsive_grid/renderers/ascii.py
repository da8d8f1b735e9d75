"""ASCII/Unicode text preview of a grid layout.

Each grid cell becomes a ``cell_width`` x ``cell_height`` block of
characters; every item is drawn as a box labelled with its id. Static items
use the heavy box style so they stand out.
"""

from __future__ import annotations

from collections.abc import Sequence

from responsive_grid.config import PreviewConfig
from responsive_grid.layout.compact import bottom
from responsive_grid.renderers.canvas import Canvas, Rect
from responsive_grid.renderers.charset import BoxChars, CharSet
from responsive_grid.types import GridItem


def _paint_item(canvas: Canvas, item: GridItem, cell_width: int, cell_height: int) -> None:
    rect = Rect(item.x * cell_width, item.y * cell_height, item.w * cell_width, item.h * cell_height)
    canvas.fill(rect, " ")
    canvas.draw_box(rect, BoxChars.for_charset(canvas.charset, heavy=item.static))
    if rect.height < 3:
        return

    inner_w = max(0, rect.width - 2)
    label = item.id[:inner_w]
    pad = max(0, inner_w - len(label)) // 2
    label_row = rect.y + (rect.height - 1) // 2
    canvas.write_str(rect.x + 1 + pad, label_row, label)


class AsciiRenderer:
    """Renders a layout to ASCII or Unicode box art."""

    def __init__(self, unicode: bool = True, cell_width: int = 6, cell_height: int = 3) -> None:
        if cell_width < 2 or cell_height < 2:
            raise ValueError("cell_width and cell_height must be at least 2")
        self.charset = CharSet.Unicode if unicode else CharSet.Ascii
        self.cell_width = cell_width
        self.cell_height = cell_height

    @classmethod
    def from_config(cls, config: PreviewConfig) -> AsciiRenderer:
        return cls(unicode=config.unicode, cell_width=config.cell_width, cell_height=config.cell_height)

    def render(self, layout: Sequence[GridItem], cols: int) -> str:
        if not layout:
            return ""
        grid_cols = max([cols] + [item.right for item in layout])
        canvas = Canvas(grid_cols * self.cell_width, bottom(layout) * self.cell_height, self.charset)
        # Statics are painted last.
        for item in sorted(layout, key=lambda item: item.static):
            _paint_item(canvas, item, self.cell_width, self.cell_height)
        return canvas.to_string()


def render_layout(layout: Sequence[GridItem], cols: int, unicode: bool = True) -> str:
    """Render ``layout`` with the default cell size."""
    return AsciiRenderer(unicode=unicode).render(layout, cols)
