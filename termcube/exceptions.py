"""termcube exception classes."""

from __future__ import annotations


class TermCubeError(RuntimeError):
    """Base exception for termcube errors."""


class UserError(TermCubeError):
    """Errors that should be shown to user without traceback."""

    def __init__(self, message: str, rc: int = 2):
        super().__init__(message)
        self.rc = rc

