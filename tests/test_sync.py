"""Tests for layout/sync.py: reconciling a layout with the live item set."""

from __future__ import annotations

import copy

import pytest
from conftest import item

from responsive_grid.errors import ConfigurationError
from responsive_grid.layout.collisions import overlapping_pairs
from responsive_grid.layout.sync import auto_place, synchronize
from responsive_grid.types import CompactType, LiveItem


class TestDropAndAdd:
    def test_stale_entries_are_dropped(self):
        layout = [item("a", 0, 0), item("b", 1, 0)]
        assert synchronize(layout, ["a"], 12, CompactType.Vertical) == [item("a", 0, 0)]

    def test_new_item_gets_first_free_cell(self):
        layout = [item("a", 0, 0, 2, 1)]
        result = synchronize(layout, ["a", "b"], 12, CompactType.Vertical)
        assert result == [item("a", 0, 0, 2, 1), item("b", 2, 0)]
        assert overlapping_pairs(result) == []

    def test_exactly_one_entry_per_live_item(self):
        layout = [item("a", 0, 0, 4, 2), item("b", 4, 0, 4, 2)]
        result = synchronize(layout, ["a", "b", "c", "c"], 8, CompactType.Vertical)
        assert [i.id for i in result] == ["a", "b", "c"]
        assert overlapping_pairs(result) == []

    def test_size_hint(self):
        layout = [item("a", 0, 0, 12, 1)]
        result = synchronize(layout, ["a", LiveItem("c", w=4, h=2)], 12, CompactType.Vertical)
        assert result[-1] == item("c", 0, 1, 4, 2)

    def test_explicit_position(self):
        result = synchronize([], [LiveItem("d", x=3, y=0)], 12, CompactType.Vertical)
        assert result == [item("d", 3, 0)]

    def test_width_clamped_to_columns(self):
        result = synchronize([], [LiveItem("e", w=20)], 6, CompactType.Vertical)
        assert result == [item("e", 0, 0, 6, 1)]

    def test_mapping_live_items(self):
        result = synchronize([], [{"i": "m", "w": 2, "h": 3}], 6, CompactType.Vertical)
        assert result == [item("m", 0, 0, 2, 3)]

    def test_static_flag_from_live_item(self):
        result = synchronize([], [LiveItem("s", static=True)], 6, CompactType.Vertical)
        assert result == [item("s", 0, 0, static=True)]

    def test_negative_position_hint_is_rejected(self):
        with pytest.raises(ConfigurationError, match=r"items\[1\]\.x"):
            synchronize([item("a", 0, 0)], ["a", LiveItem("n", x=-2, y=3)], 6, CompactType.Vertical)

    def test_negative_row_hint_is_rejected_without_compaction(self):
        with pytest.raises(ConfigurationError, match=r"items\[0\]\.y"):
            synchronize([], [LiveItem("n", x=0, y=-4)], 6, CompactType.NoCompaction)

    def test_does_not_mutate_input(self):
        layout = [item("a", 0, 3), item("b", 1, 0)]
        before = copy.deepcopy(layout)
        synchronize(layout, ["a", "c"], 12, CompactType.Vertical)
        assert layout == before


class TestHorizontal:
    def test_column_major_placement(self):
        layout = [item("a", 0, 0, 1, 2)]
        result = synchronize(layout, ["a", "b"], 4, CompactType.Horizontal)
        assert result == [item("a", 0, 0, 1, 2), item("b", 1, 0)]

    def test_empty_layout(self):
        assert synchronize([], ["b"], 4, CompactType.Horizontal) == [item("b", 0, 0)]


class TestAutoPlace:
    def test_row_major(self):
        layout = [item("a", 0, 0, 2, 1), item("b", 3, 0, 1, 1)]
        assert auto_place(layout, item("n", 0, 0, 1, 1), 4, CompactType.Vertical) == item("n", 2, 0)

    def test_falls_below_everything(self):
        layout = [item("a", 0, 0, 4, 1)]
        assert auto_place(layout, item("n", 0, 0, 1, 1), 4, CompactType.NoCompaction) == item("n", 0, 1)

    def test_keeps_other_fields(self):
        placed = auto_place([], item("n", 5, 5, 2, 2, min_w=1, static=True), 4, CompactType.Vertical)
        assert placed == item("n", 0, 0, 2, 2, min_w=1, static=True)


class TestIdempotence:
    LAYOUT = [
        item("a", 0, 4, 2, 2),
        item("b", 5, 1, 3, 1),
        item("stale", 0, 0, 1, 1),
        item("s", 2, 2, 1, 1, static=True),
        item("c", 9, 0, 6, 3),
    ]
    LIVE = ["a", "b", "s", "c", LiveItem("n1", w=2), LiveItem("n2", h=2)]

    @pytest.mark.parametrize("compact_type", list(CompactType))
    def test_synchronize_twice_is_stable(self, compact_type):
        once = synchronize(self.LAYOUT, self.LIVE, 8, compact_type)
        assert synchronize(once, self.LIVE, 8, compact_type) == once
        assert sorted(i.id for i in once) == ["a", "b", "c", "n1", "n2", "s"]
