"""
termcube - survey every foreground/background pairing of the 216-color ANSI cube.

Design goals:
- Output is a plain stream of SGR-styled text, so it can be paged or captured.
- Tiles are grouped into layers of 6 and blocks of 36 to show cube structure.
- Deterministic: the same ordering and traversal always produce the same bytes.
"""

from __future__ import annotations

from .cli import main
from .constants import ORDERING_NAMES
from .cube import CUBE, ColorPoint, ordered
from .exceptions import TermCubeError, UserError
from .render import render_cube

__all__ = [
    "CUBE",
    "ORDERING_NAMES",
    "ColorPoint",
    "TermCubeError",
    "UserError",
    "main",
    "ordered",
    "render_cube",
]
