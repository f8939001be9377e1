"""Allow running termcube as a module: python -m termcube."""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    main()
