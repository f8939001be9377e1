"""Shared pytest fixtures for termcube tests."""

from __future__ import annotations

import pytest
from termcube.cli_types import ShowArgs


@pytest.fixture
def show_args() -> ShowArgs:
    """Create Args object for show command."""
    return ShowArgs(
        ordering="bgr",
        traversal="normal",
        boundary="index",
        pager=False,
    )


@pytest.fixture
def term_256(monkeypatch: pytest.MonkeyPatch) -> str:
    """Set TERM to a 256-color terminal."""
    monkeypatch.setenv("TERM", "xterm-256color")
    return "xterm-256color"


@pytest.fixture
def term_dumb(monkeypatch: pytest.MonkeyPatch) -> str:
    """Set TERM to a terminal without color support."""
    monkeypatch.setenv("TERM", "dumb")
    return "dumb"
