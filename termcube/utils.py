"""termcube utility functions."""

from __future__ import annotations

import os

from .constants import TERM_256_EXACT, TERM_256_MARKERS


def current_term() -> str:
    """Return the TERM environment variable, or empty string if unset."""
    return os.environ.get("TERM", "")


def supports_256_colors(term: str | None = None) -> bool:
    """Return True if the terminal type advertises 256-color support.

    Args:
        term: Terminal type to check (default: $TERM)

    Returns:
        True for values like "xterm-256color" or "kitty", False otherwise
    """
    if term is None:
        term = current_term()
    term = term.strip().lower()
    if not term:
        return False
    if term in TERM_256_EXACT:
        return True
    return any(marker in term for marker in TERM_256_MARKERS)


def axes_description(name: str) -> str:
    """Describe an ordering name as slowest -> fastest axes.

    Example: "bgr" -> "r > g > b"
    """
    return " > ".join(reversed(name))
