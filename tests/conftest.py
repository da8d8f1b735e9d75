"""Shared fixtures and helpers for responsive-grid tests."""

from __future__ import annotations

import pytest

from responsive_grid.types import GridItem


def item(id: str, x: int, y: int, w: int = 1, h: int = 1, **kwargs) -> GridItem:
    """Shorthand GridItem constructor."""
    return GridItem(id=id, x=x, y=y, w=w, h=h, **kwargs)


class CallbackRecorder:
    """Records host callback invocations in order."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def _record(self, name: str):
        def callback(*args) -> None:
            self.calls.append((name, *args))

        return callback

    def callbacks(self) -> dict:
        return {
            name: self._record(name)
            for name in ("on_init", "on_breakpoint_change", "on_layout_change", "on_width_change")
        }

    def names(self) -> list[str]:
        return [call[0] for call in self.calls]

    def clear(self) -> None:
        self.calls.clear()


@pytest.fixture
def recorder() -> CallbackRecorder:
    return CallbackRecorder()
