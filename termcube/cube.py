"""The 6x6x6 color cube of the 8-bit ANSI palette and its orderings."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from operator import attrgetter

from .constants import (
    CUBE_FIRST_INDEX,
    CUBE_LAST_INDEX,
    CUBE_OFFSET,
    CUBE_SIDE,
    DEFAULT_ORDERING,
)
from .exceptions import UserError


@dataclass(frozen=True)
class ColorPoint:
    """One cube color: coordinates in 0..5 and its palette index."""

    r: int
    g: int
    b: int
    ansi_index: int


def color_number(r: int, g: int, b: int) -> int:
    """Return the 8-bit palette index for cube coordinates."""
    return CUBE_OFFSET + (36 * r) + (6 * g) + b


def build_cube() -> tuple[ColorPoint, ...]:
    """Build all 216 cube points, r outermost and b fastest.

    In this order the palette index grows by one per step.
    """
    side = range(CUBE_SIDE)
    return tuple(
        ColorPoint(r, g, b, color_number(r, g, b)) for r in side for g in side for b in side
    )


CUBE = build_cube()

# Sort keys, primary -> tertiary. None keeps the build order.
ORDERINGS: dict[str, Callable[[ColorPoint], tuple[int, ...]] | None] = {
    "bgr": None,
    "brg": attrgetter("g", "r", "b"),
    "gbr": attrgetter("r", "b", "g"),
    "grb": attrgetter("b", "r", "g"),
    "rbg": attrgetter("g", "b", "r"),
    "rgb": attrgetter("b", "g", "r"),
}

_ORDERED: dict[str, tuple[ColorPoint, ...]] = {}


def ordered(name: str = DEFAULT_ORDERING) -> tuple[ColorPoint, ...]:
    """Return the cube sorted by the named ordering.

    Args:
        name: One of ORDERINGS, e.g. "rgb"

    Returns:
        Tuple of the 216 cube points

    Raises:
        UserError: If the ordering name is unknown
    """
    try:
        key = ORDERINGS[name]
    except KeyError:
        choices = ", ".join(ORDERINGS)
        raise UserError(f"Unknown ordering '{name}' (choose from: {choices})") from None
    if name not in _ORDERED:
        _ORDERED[name] = CUBE if key is None else tuple(sorted(CUBE, key=key))
    return _ORDERED[name]


def point_for_index(index: int) -> ColorPoint:
    """Return the cube point for a palette index in 16..231."""
    if not CUBE_FIRST_INDEX <= index <= CUBE_LAST_INDEX:
        raise UserError(
            f"Color {index} is outside the color cube ({CUBE_FIRST_INDEX}-{CUBE_LAST_INDEX})"
        )
    return CUBE[index - CUBE_OFFSET]
