"""termcube show command: render every fg/bg combination of the cube."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import click

from ..render import iter_tiles, render_cube
from ..utils import current_term, supports_256_colors

if TYPE_CHECKING:
    from ..cli_types import ShowArgs

logger = logging.getLogger("termcube.show")


def warn_if_no_256_colors() -> None:
    """Log a warning when TERM does not advertise 256 colors."""
    term = current_term()
    if not supports_256_colors(term):
        logger.warning(
            "TERM=%r does not advertise 256-color support; output may not render correctly "
            "(try TERM=xterm-256color)",
            term,
        )


def cmd_show(args: ShowArgs) -> None:
    """Render the full color cube to stdout, optionally through a pager."""
    warn_if_no_256_colors()
    if args.pager:
        # color=True keeps the SGR codes; click adds -R for less
        click.echo_via_pager(
            iter_tiles(args.ordering, args.traversal, boundary=args.boundary), color=True
        )
        return
    render_cube(sys.stdout, args.ordering, args.traversal, boundary=args.boundary)
    sys.stdout.flush()
