"""Text preview renderers for resolved layouts."""

from responsive_grid.renderers.ascii import AsciiRenderer, render_layout

__all__ = ["AsciiRenderer", "render_layout"]
