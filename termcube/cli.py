"""termcube CLI using Click."""

from __future__ import annotations

import logging
import sys
from importlib.metadata import version

import click

from .cli_types import ShowArgs, TileArgs
from .commands import cmd_orderings, cmd_show, cmd_tile
from .constants import (
    BOUNDARY_INDEX,
    BOUNDARY_MODES,
    CUBE_FIRST_INDEX,
    CUBE_LAST_INDEX,
    DEFAULT_ORDERING,
    ORDERING_NAMES,
    TRAVERSAL_INVERTED,
    TRAVERSAL_NORMAL,
)
from .exceptions import TermCubeError, UserError

# Module logger
logger = logging.getLogger("termcube")


def setup_logging(debug: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if debug else logging.WARNING
    logger.setLevel(level)
    if any(
        isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr
        for h in logger.handlers
    ):
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=version("termcube"), prog_name="termcube")
@click.option(
    "--debug",
    "-d",
    is_flag=True,
    help="Enable debug logging to stderr.",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool):
    """termcube: show every fg/bg pairing of the 216-color ANSI cube."""
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    setup_logging(debug=debug)


@cli.command("show")
@click.option(
    "--ordering",
    "-o",
    type=click.Choice(ORDERING_NAMES, case_sensitive=False),
    default=DEFAULT_ORDERING,
    show_default=True,
    help="Cube ordering; the name lists axes from fastest to slowest.",
)
@click.option(
    "--inverted",
    "-i",
    is_flag=True,
    help="Hold the background and cycle the foreground instead.",
)
@click.option(
    "--boundary",
    type=click.Choice(BOUNDARY_MODES, case_sensitive=False),
    default=BOUNDARY_INDEX,
    show_default=True,
    help="Break lines on the cycling color's rank in the ordering or on the tile count.",
)
@click.option(
    "--pager",
    is_flag=True,
    help="Page the output (streamed, escape sequences preserved).",
)
def show(ordering: str, inverted: bool, boundary: str, pager: bool):
    """Render all 46656 foreground/background combinations of the color cube."""
    args = ShowArgs(
        ordering=ordering,
        traversal=TRAVERSAL_INVERTED if inverted else TRAVERSAL_NORMAL,
        boundary=boundary,
        pager=pager,
    )
    cmd_show(args)


@cli.command("orderings")
def orderings():
    """List cube orderings (slowest > fastest axis) and their first colors."""
    cmd_orderings()


@cli.command("tile")
@click.argument("fg", type=click.IntRange(CUBE_FIRST_INDEX, CUBE_LAST_INDEX))
@click.argument("bg", type=click.IntRange(CUBE_FIRST_INDEX, CUBE_LAST_INDEX))
def tile(fg: int, bg: int):
    """Render a single tile: FG text on BG background (palette indices 16-231)."""
    cmd_tile(TileArgs(fg=fg, bg=bg))


def main():
    """Main entry point for the CLI."""
    try:
        # click exits 1 on its own when stdout is a closed pipe (EPIPE)
        cli()
    except UserError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(e.rc)
    except TermCubeError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(2)
    except KeyboardInterrupt:
        click.echo("ERROR: Interrupted", err=True)
        sys.exit(130)
