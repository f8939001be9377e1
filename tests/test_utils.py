"""Tests for termcube/utils.py - pure utility functions."""

from __future__ import annotations

import pytest
from termcube.utils import axes_description, current_term, supports_256_colors


class TestCurrentTerm:
    """Tests for current_term function."""

    def test_reads_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("TERM", "screen-256color")
        assert current_term() == "screen-256color"

    def test_unset(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("TERM", raising=False)
        assert current_term() == ""


class TestSupports256Colors:
    """Tests for supports_256_colors function."""

    @pytest.mark.parametrize(
        "term",
        [
            "xterm-256color",
            "screen-256color",
            "tmux-256color",
            "XTERM-256COLOR",
            "xterm-direct",
            "kitty",
            "xterm-kitty",
            "alacritty",
            "xterm-ghostty",
        ],
    )
    def test_supported(self, term: str):
        """Terminals advertising 256 colors are accepted."""
        assert supports_256_colors(term) is True

    @pytest.mark.parametrize("term", ["", "dumb", "xterm", "vt100", "linux", "  "])
    def test_unsupported(self, term: str):
        """Plain or missing TERM values are rejected."""
        assert supports_256_colors(term) is False

    def test_defaults_to_env(self, term_256: str):
        """Without an argument the TERM variable is checked."""
        assert supports_256_colors() is True

    def test_defaults_to_env_dumb(self, term_dumb: str):
        assert supports_256_colors() is False


class TestAxesDescription:
    """Tests for axes_description function."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("bgr", "r > g > b"), ("rgb", "b > g > r"), ("gbr", "r > b > g")],
    )
    def test_slowest_first(self, name: str, expected: str):
        """Ordering names read fastest-first, description reads slowest-first."""
        assert axes_description(name) == expected
