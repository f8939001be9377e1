"""termcube tile command."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from ..render import render_tile

if TYPE_CHECKING:
    from ..cli_types import TileArgs


def cmd_tile(args: TileArgs) -> None:
    """Print one tile for a foreground/background index pair."""
    render_tile(sys.stdout, args.fg, args.bg)
