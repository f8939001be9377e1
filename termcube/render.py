"""Tile pairing, separators and ANSI output for the color cube.

Every foreground color is paired with every background color. Tiles are
grouped into layers of 6 and blocks of 36 by looking at the color that
cycles fastest under the chosen traversal (the boundary channel).
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import TextIO

from .constants import (
    ANSI_RESET,
    BLOCK_SEPARATOR,
    BLOCK_SIZE,
    BOUNDARY_INDEX,
    BOUNDARY_MODES,
    BOUNDARY_POSITION,
    CUBE_OFFSET,
    DEFAULT_ORDERING,
    LAYER_SEPARATOR,
    LAYER_SIZE,
    TILE_SEPARATOR,
    TRAVERSAL_INVERTED,
    TRAVERSAL_NORMAL,
    TRAVERSALS,
)
from .cube import ColorPoint, ordered, point_for_index
from .exceptions import UserError

logger = logging.getLogger("termcube.render")

TilePair = tuple[ColorPoint, ColorPoint]


def _check_choice(kind: str, value: str, choices: tuple[str, ...]) -> None:
    if value not in choices:
        raise UserError(f"Unknown {kind} '{value}' (choose from: {', '.join(choices)})")


def iter_pairs(
    seq: Sequence[ColorPoint], traversal: str = TRAVERSAL_NORMAL
) -> Iterator[TilePair]:
    """Yield every (foreground, background) pair of seq.

    Normal traversal holds the foreground and cycles the background through
    seq; inverted traversal does the opposite.
    """
    _check_choice("traversal", traversal, TRAVERSALS)
    for slow in seq:
        for fast in seq:
            if traversal == TRAVERSAL_INVERTED:
                yield (fast, slow)
            else:
                yield (slow, fast)


def boundary_color(pair: TilePair, traversal: str = TRAVERSAL_NORMAL) -> ColorPoint:
    """Return the member of pair that cycles fastest under traversal."""
    fg, bg = pair
    return fg if traversal == TRAVERSAL_INVERTED else bg


def _classify(adjusted: int) -> str:
    if adjusted % BLOCK_SIZE == 0:
        return BLOCK_SEPARATOR
    if adjusted % LAYER_SIZE == 0:
        return LAYER_SEPARATOR
    return TILE_SEPARATOR


def separator_for(ansi_index: int) -> str:
    """Return the separator that follows a tile whose boundary color is ansi_index.

    Indices 16..231 are shifted to 1..216; multiples of 36 end a block,
    other multiples of 6 end a layer.
    """
    return _classify(ansi_index - CUBE_OFFSET + 1)


def separator_for_rank(rank: int) -> str:
    """Return the separator for a boundary color at 1-based rank in the active ordering.

    For bgr the rank equals ansi_index - 15, so this agrees with separator_for.
    """
    return _classify(rank)


def separator_for_position(n: int) -> str:
    """Return the separator for the n-th tile (1-based) of a run."""
    return _classify(n)


def format_tile(fg: ColorPoint, bg: ColorPoint) -> str:
    """Return the styled label for a tile, without separator."""
    label = f"  {fg.ansi_index:>3}  {bg.ansi_index:>3}  "
    return f"\033[48;5;{bg.ansi_index};38;5;{fg.ansi_index}m{label}{ANSI_RESET}"


def iter_tiles(
    ordering: str = DEFAULT_ORDERING,
    traversal: str = TRAVERSAL_NORMAL,
    *,
    boundary: str = BOUNDARY_INDEX,
) -> Iterator[str]:
    """Yield each tile of a full-cube run followed by its separator.

    Args:
        ordering: Cube ordering name (see cube.ORDERINGS)
        traversal: "normal" or "inverted"
        boundary: "index" to break on the boundary color's rank in the
            ordering, "position" to break on the running tile count

    Yields:
        One string per tile, 46656 in total
    """
    _check_choice("traversal", traversal, TRAVERSALS)
    _check_choice("boundary mode", boundary, BOUNDARY_MODES)
    seq = ordered(ordering)
    rank = {point: i for i, point in enumerate(seq, start=1)}
    position = 0
    for pair in iter_pairs(seq, traversal):
        position += 1
        if boundary == BOUNDARY_POSITION:
            sep = separator_for_position(position)
        else:
            sep = separator_for_rank(rank[boundary_color(pair, traversal)])
        yield format_tile(*pair) + sep


def render_cube(
    out: TextIO,
    ordering: str = DEFAULT_ORDERING,
    traversal: str = TRAVERSAL_NORMAL,
    *,
    boundary: str = BOUNDARY_INDEX,
) -> int:
    """Write a full-cube run to out, one tile at a time.

    Write errors (e.g. BrokenPipeError) propagate immediately; no reset
    sequence is emitted for tiles already written.

    Returns:
        Number of tiles written
    """
    logger.debug(
        "Rendering ordering=%s traversal=%s boundary=%s", ordering, traversal, boundary
    )
    count = 0
    for chunk in iter_tiles(ordering, traversal, boundary=boundary):
        out.write(chunk)
        count += 1
    logger.debug("Wrote %d tiles", count)
    return count


def render_tile(out: TextIO, fg_index: int, bg_index: int) -> None:
    """Write a single tile for two palette indices, followed by a newline."""
    fg = point_for_index(fg_index)
    bg = point_for_index(bg_index)
    out.write(format_tile(fg, bg) + "\n")
