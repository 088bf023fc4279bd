"""Terminal width detection."""
from __future__ import annotations

import os
import sys


def current_width() -> int:
    """Return the column count of the terminal attached to stdout.

    ``COLUMNS`` wins when it holds a positive integer. Returns 0 when stdout is
    not a terminal (piped or redirected output), so callers fall back to their
    minimum layout.
    """
    raw = os.environ.get("COLUMNS", "").strip()
    if raw.isdigit() and int(raw) > 0:
        return int(raw)
    try:
        return os.get_terminal_size(sys.stdout.fileno()).columns
    except (AttributeError, OSError, ValueError):
        return 0


__all__ = ["current_width"]
