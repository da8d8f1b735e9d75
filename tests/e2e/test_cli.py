"""End-to-end tests for the responsive-grid CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from responsive_grid.__main__ import main

DASHBOARD = {
    "width": 1300,
    "layouts": {
        "lg": [
            {"i": "a", "x": 0, "y": 0, "w": 6, "h": 2},
            {"i": "b", "x": 6, "y": 0, "w": 6, "h": 2},
        ]
    },
    "items": ["a", "b"],
}


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def dashboard(tmp_path: Path) -> Path:
    path = tmp_path / "dashboard.json"
    path.write_text(json.dumps(DASHBOARD))
    return path


class TestResolve:
    def test_default_table(self, runner):
        result = runner.invoke(main, ["resolve", "1024"])
        assert result.exit_code == 0
        assert result.output == "md 10\n"

    def test_custom_table(self, runner, tmp_path):
        path = tmp_path / "cfg.json"
        path.write_text(json.dumps({"breakpoints": {"wide": 800, "narrow": 0}, "cols": {"wide": 8, "narrow": 1}}))
        result = runner.invoke(main, ["resolve", "900", "--config", str(path)])
        assert result.exit_code == 0
        assert result.output == "wide 8\n"

    def test_missing_columns(self, runner, tmp_path):
        path = tmp_path / "cfg.json"
        path.write_text(json.dumps({"breakpoints": {"wide": 800, "narrow": 0}, "cols": {"wide": 8}}))
        result = runner.invoke(main, ["resolve", "10", "--config", str(path)])
        assert result.exit_code == 1
        assert "config error" in result.output


class TestLayout:
    def test_initial_json(self, runner, dashboard):
        result = runner.invoke(main, ["layout", str(dashboard)])
        assert result.exit_code == 0
        state = json.loads(result.output)
        assert state["breakpoint"] == "lg"
        assert state["columns"] == 12
        assert state["layout"] == DASHBOARD["layouts"]["lg"]

    def test_width_change(self, runner, dashboard):
        result = runner.invoke(main, ["layout", str(dashboard), "--width", "900"])
        assert result.exit_code == 0
        state = json.loads(result.output)
        assert (state["breakpoint"], state["columns"], state["width"]) == ("sm", 6, 900)
        assert state["layout"] == [
            {"i": "a", "x": 0, "y": 0, "w": 3, "h": 2},
            {"i": "b", "x": 3, "y": 0, "w": 3, "h": 2},
        ]

    def test_preview(self, runner, dashboard):
        result = runner.invoke(main, ["layout", str(dashboard), "--format", "preview", "--ascii"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "lg (12 cols, width 1300)"
        assert lines[1].startswith("+" + "-" * 34 + "++")

    def test_trace(self, runner, dashboard):
        result = runner.invoke(main, ["layout", str(dashboard), "--width", "900", "--trace"])
        assert result.exit_code == 0
        assert "on_breakpoint_change('sm', 6)" in result.output

    def test_bad_layout_key(self, runner, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({**DASHBOARD, "layouts": {"xl": []}}))
        result = runner.invoke(main, ["layout", str(path)])
        assert result.exit_code == 1
        assert "config error" in result.output

    def test_unknown_key(self, runner, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({**DASHBOARD, "colour": "red"}))
        result = runner.invoke(main, ["layout", str(path)])
        assert result.exit_code == 1
        assert "Unknown config key 'colour'" in result.output

    def test_invalid_json(self, runner, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        result = runner.invoke(main, ["layout", str(path)])
        assert result.exit_code == 1
        assert "not valid JSON" in result.output


class TestCheck:
    def test_clean(self, runner, dashboard):
        result = runner.invoke(main, ["check", str(dashboard)])
        assert result.exit_code == 0
        assert "no overlaps" in result.output

    def test_overlaps_reported(self, runner, tmp_path):
        path = tmp_path / "overlap.json"
        layout = [{"i": "a", "x": 0, "y": 0, "w": 4, "h": 2}, {"i": "b", "x": 2, "y": 1, "w": 4, "h": 2}]
        path.write_text(json.dumps({"width": 1300, "layouts": {"md": layout}}))
        result = runner.invoke(main, ["check", str(path)])
        assert result.exit_code == 1
        assert "md: 'a' overlaps 'b'" in result.output
