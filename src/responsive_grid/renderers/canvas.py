"""Canvas: 2D character grid for rendering."""

from __future__ import annotations

from dataclasses import dataclass

from responsive_grid.renderers.charset import BoxChars, CharSet


@dataclass
class Rect:
    x: int
    y: int
    width: int
    height: int

    def right(self) -> int:
        return self.x + self.width

    def bottom(self) -> int:
        return self.y + self.height


class Canvas:
    """A 2D character grid onto which layout items are painted."""

    def __init__(self, width: int, height: int, charset: CharSet) -> None:
        self.width = width
        self.height = height
        self.charset = charset
        self.cells: list[list[str]] = [[" "] * width for _ in range(height)]

    def get(self, col: int, row: int) -> str:
        if 0 <= row < self.height and 0 <= col < self.width:
            return self.cells[row][col]
        return " "

    def set(self, col: int, row: int, c: str) -> None:
        if 0 <= row < self.height and 0 <= col < self.width:
            self.cells[row][col] = c

    def draw_box(self, rect: Rect, bc: BoxChars) -> None:
        if rect.width < 2 or rect.height < 2:
            return
        x0 = rect.x
        y0 = rect.y
        x1 = rect.right() - 1
        y1 = rect.bottom() - 1
        self.set(x0, y0, bc.top_left)
        self.set(x1, y0, bc.top_right)
        self.set(x0, y1, bc.bottom_left)
        self.set(x1, y1, bc.bottom_right)
        for col in range(x0 + 1, x1):
            self.set(col, y0, bc.horizontal)
            self.set(col, y1, bc.horizontal)
        for row in range(y0 + 1, y1):
            self.set(x0, row, bc.vertical)
            self.set(x1, row, bc.vertical)

    def fill(self, rect: Rect, c: str) -> None:
        for row in range(rect.y, rect.bottom()):
            for col in range(rect.x, rect.right()):
                self.set(col, row, c)

    def write_str(self, col: int, row: int, s: str) -> None:
        for offset, ch in enumerate(s):
            self.set(col + offset, row, ch)

    def to_string(self) -> str:
        """Rows with trailing spaces stripped; trailing blank rows are dropped."""
        rows = ["".join(row).rstrip() for row in self.cells]
        while rows and not rows[-1]:
            rows.pop()
        return "\n".join(rows) + "\n"

