"""termcube command implementations."""

from __future__ import annotations

from .orderings import cmd_orderings
from .show import cmd_show
from .tile import cmd_tile

__all__ = [
    "cmd_orderings",
    "cmd_show",
    "cmd_tile",
]
