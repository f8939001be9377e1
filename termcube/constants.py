"""termcube constants."""

from __future__ import annotations

# 8-bit palette layout (ESC[38;5;<n>m / ESC[48;5;<n>m):
#   0-  7: standard colors
#   8- 15: high intensity colors
#  16-231: 6 x 6 x 6 cube, 16 + 36*r + 6*g + b (0 <= r, g, b <= 5)
# 232-255: grayscale, dark to light in 24 steps
CUBE_OFFSET = 16
CUBE_SIDE = 6
CUBE_SIZE = CUBE_SIDE**3  # 216
CUBE_FIRST_INDEX = CUBE_OFFSET
CUBE_LAST_INDEX = CUBE_OFFSET + CUBE_SIZE - 1  # 231
PAIR_COUNT = CUBE_SIZE * CUBE_SIZE  # 46656

# Tiles per layer and per block
LAYER_SIZE = CUBE_SIDE
BLOCK_SIZE = CUBE_SIDE * CUBE_SIDE

# Separators emitted after each tile
TILE_SEPARATOR = " "
LAYER_SEPARATOR = "\n"
BLOCK_SEPARATOR = "\n\n"

# ANSI control codes
ANSI_RESET = "\033[0m"

# Orderings (name lists axes from fastest- to slowest-changing)
ORDERING_NAMES = ("bgr", "brg", "gbr", "grb", "rbg", "rgb")
DEFAULT_ORDERING = "bgr"

# Traversal policies
TRAVERSAL_NORMAL = "normal"
TRAVERSAL_INVERTED = "inverted"
TRAVERSALS = (TRAVERSAL_NORMAL, TRAVERSAL_INVERTED)

# Boundary detection modes
BOUNDARY_INDEX = "index"
BOUNDARY_POSITION = "position"
BOUNDARY_MODES = (BOUNDARY_INDEX, BOUNDARY_POSITION)

# TERM values containing one of these are assumed to render 256 colors
TERM_256_MARKERS = ("256color", "direct", "truecolor")
TERM_256_EXACT = ("alacritty", "foot", "kitty", "xterm-kitty", "xterm-ghostty", "wezterm")
