"""Base renderer protocol."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from responsive_grid.types import GridItem


class Renderer(Protocol):
    """Protocol that all layout renderers must implement."""

    def render(self, layout: Sequence[GridItem], cols: int) -> str:
        """Render a resolved layout on a grid of ``cols`` columns."""
        ...
