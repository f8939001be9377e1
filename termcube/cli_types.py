"""Type definitions for CLI command arguments."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ShowArgs:
    """Arguments for show command."""

    ordering: str
    traversal: str
    boundary: str
    pager: bool


@dataclass
class TileArgs:
    """Arguments for tile command."""

    fg: int
    bg: int
