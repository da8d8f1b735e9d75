"""CLI entry point for responsive-grid."""

import json
import logging
import sys

import click

from responsive_grid.breakpoints import resolve_breakpoint, resolve_columns
from responsive_grid.config import PreviewConfig, ResponsiveConfig
from responsive_grid.controller import ResponsiveController
from responsive_grid.errors import ConfigurationError
from responsive_grid.layout.collisions import overlapping_pairs
from responsive_grid.layout.validate import validate_config
from responsive_grid.renderers.ascii import AsciiRenderer
from responsive_grid.renderers.base import Renderer


def _load_config(path: str, **extra) -> ResponsiveConfig:
    try:
        with open(path) as f:
            data = json.load(f)
    except OSError as e:
        click.echo(f"error: cannot read '{path}': {e}", err=True)
        sys.exit(1)
    except json.JSONDecodeError as e:
        click.echo(f"error: '{path}' is not valid JSON: {e}", err=True)
        sys.exit(1)
    if not isinstance(data, dict):
        click.echo(f"error: '{path}' must contain a JSON object", err=True)
        sys.exit(1)
    try:
        return ResponsiveConfig.from_dict(data, **extra)
    except ConfigurationError as e:
        click.echo(f"config error: {e}", err=True)
        sys.exit(1)


def _trace(name: str):
    def callback(*args) -> None:
        click.echo(f"{name}{_describe(args)}", err=True)

    return callback


def _describe(args: tuple) -> str:
    parts = []
    for arg in args:
        if isinstance(arg, list):
            parts.append(f"<layout {len(arg)} items>")
        elif isinstance(arg, dict):
            parts.append("{" + ", ".join(sorted(arg)) + "}")
        elif hasattr(arg, "breakpoint"):
            parts.append(f"<state {arg.breakpoint}>")
        else:
            parts.append(repr(arg))
    return "(" + ", ".join(parts) + ")"


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log engine decisions to stderr")
def main(verbose: bool) -> None:
    """Responsive grid breakpoint and layout resolver."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(name)s: %(message)s")


@main.command()
@click.argument("width", type=int)
@click.option("--config", "-c", "config_path", type=click.Path(exists=True), default=None, help="JSON config file")
def resolve(width: int, config_path: str | None) -> None:
    """Print the breakpoint and column count for WIDTH."""
    config = _load_config(config_path, width=width) if config_path else ResponsiveConfig(width=width)
    try:
        breakpoint = resolve_breakpoint(config.breakpoints, width)
        cols = resolve_columns(breakpoint, config.cols)
    except ConfigurationError as e:
        click.echo(f"config error: {e}", err=True)
        sys.exit(1)
    click.echo(f"{breakpoint} {cols}")


@main.command()
@click.argument("config_path", metavar="CONFIG", type=click.Path(exists=True))
@click.option("--width", "-w", type=int, default=None, help="Apply a width change after initializing")
@click.option("--viewport-width", type=int, default=None, help="Apply a viewport width change after initializing")
@click.option("--breakpoint", "-b", type=str, default=None, help="Apply an explicit breakpoint override")
@click.option("--format", "-f", "fmt", type=click.Choice(["json", "preview"]), default="json", help="Output format")
@click.option("--ascii", "-a", "use_ascii", is_flag=True, help="Use plain ASCII in the preview")
@click.option("--trace", "-t", is_flag=True, help="Print fired callbacks to stderr")
def layout(
    config_path: str,
    width: int | None,
    viewport_width: int | None,
    breakpoint: str | None,
    fmt: str,
    use_ascii: bool,
    trace: bool,
) -> None:
    """Resolve the layout for CONFIG, optionally after a width/breakpoint change."""
    callbacks = {}
    if trace:
        callbacks = {
            name: _trace(name) for name in ("on_init", "on_breakpoint_change", "on_layout_change", "on_width_change")
        }
    config = _load_config(config_path, **callbacks)
    controller = ResponsiveController(config)

    changes = {}
    if width is not None:
        changes["width"] = width
    if viewport_width is not None:
        changes["viewport_width"] = viewport_width
    if breakpoint is not None:
        changes["breakpoint"] = breakpoint

    try:
        state = controller.initialize()
        if changes:
            state = controller.update(config.replace(**changes))
    except ConfigurationError as e:
        click.echo(f"config error: {e}", err=True)
        sys.exit(1)

    if fmt == "json":
        click.echo(json.dumps(state.to_dict(), indent=2))
    else:
        renderer: Renderer = AsciiRenderer.from_config(PreviewConfig(unicode=not use_ascii))
        click.echo(f"{state.breakpoint} ({state.columns} cols, width {state.width})")
        click.echo(renderer.render(state.layout, state.columns), nl=False)


@main.command()
@click.argument("config_path", metavar="CONFIG", type=click.Path(exists=True))
def check(config_path: str) -> None:
    """Validate CONFIG and report overlapping items in its stored layouts."""
    config = _load_config(config_path)
    try:
        layouts = validate_config(config)
    except ConfigurationError as e:
        click.echo(f"config error: {e}", err=True)
        sys.exit(1)

    found = False
    for name, stored in layouts.items():
        for a, b in overlapping_pairs(stored):
            click.echo(f"{name}: '{a}' overlaps '{b}'")
            found = True
    if found:
        sys.exit(1)
    click.echo(f"ok: {len(layouts)} layout(s), no overlaps")


if __name__ == "__main__":
    main()
