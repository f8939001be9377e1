"""termcube orderings command."""

from __future__ import annotations

import click

from ..constants import LAYER_SIZE
from ..cube import ORDERINGS, ordered
from ..utils import axes_description


def ordering_summary(name: str) -> str:
    """Return a one-line description of an ordering.

    Example: "rgb  b > g > r  16 52 88 124 160 196 ..."
    """
    head = " ".join(str(p.ansi_index) for p in ordered(name)[:LAYER_SIZE])
    return f"{name}  {axes_description(name)}  {head} ..."


def cmd_orderings() -> None:
    """List the available cube orderings."""
    for name in ORDERINGS:
        click.echo(ordering_summary(name))
