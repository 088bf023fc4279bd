from __future__ import annotations

import logging
import sys
from pathlib import Path

_CONFIGURED_KEY: tuple[str, str | None] | None = None
_LINTDEX_HANDLER: logging.Handler | None = None
_JSON_MODE_NULL_HANDLER_INSTALLED: bool = False

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_stdlib_logging(*, level: str = "WARNING", log_path: Path | None = None) -> None:
    """Configure Python stdlib logging for a CLI invocation.

    - With ``log_path``: records at ``level`` and above go to that file only.
    - Without it, and ``level`` below WARNING: records go to stderr.
    - Otherwise no handler is installed; WARNING+ records still reach stderr
      through logging's last-resort handler.

    Idempotent per-process: reconfiguring with the same arguments is a no-op.
    """
    global _CONFIGURED_KEY, _LINTDEX_HANDLER

    resolved = str(Path(log_path).resolve()) if log_path else None
    key = (str(level).upper(), resolved)
    if _CONFIGURED_KEY == key:
        return

    root = logging.getLogger()
    numeric = _level_from_name(level)
    root.setLevel(numeric)

    if _LINTDEX_HANDLER is not None:
        root.removeHandler(_LINTDEX_HANDLER)
        _LINTDEX_HANDLER.close()
        _LINTDEX_HANDLER = None

    handler: logging.Handler | None = None
    if resolved is not None:
        Path(resolved).parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(resolved, encoding="utf-8")
    elif numeric < logging.WARNING:
        handler = logging.StreamHandler(sys.stderr)

    if handler is not None:
        handler.setLevel(numeric)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
        _LINTDEX_HANDLER = handler

    _CONFIGURED_KEY = key


def reset_stdlib_logging_for_tests() -> None:
    """Test-only: drop the handler installed by this module."""
    global _CONFIGURED_KEY, _LINTDEX_HANDLER, _JSON_MODE_NULL_HANDLER_INSTALLED
    root = logging.getLogger()
    if _LINTDEX_HANDLER is not None:
        root.removeHandler(_LINTDEX_HANDLER)
        _LINTDEX_HANDLER.close()
    for h in list(root.handlers):
        if isinstance(h, logging.NullHandler):
            root.removeHandler(h)
    _CONFIGURED_KEY = None
    _LINTDEX_HANDLER = None
    _JSON_MODE_NULL_HANDLER_INSTALLED = False


def suppress_lastresort_in_json_mode() -> None:
    """Prevent stdlib logging's lastResort handler from polluting JSON output.

    Python's logging module emits WARNING+ messages to stderr via the implicit
    ``lastResort`` handler when no handlers are configured. Installing a
    NullHandler on an otherwise handler-less root keeps ``--json`` runs quiet
    without changing logger levels.
    """
    global _JSON_MODE_NULL_HANDLER_INSTALLED

    root = logging.getLogger()
    if root.handlers or _JSON_MODE_NULL_HANDLER_INSTALLED:
        return
    root.addHandler(logging.NullHandler())
    _JSON_MODE_NULL_HANDLER_INSTALLED = True


__all__ = [
    "configure_stdlib_logging",
    "reset_stdlib_logging_for_tests",
    "suppress_lastresort_in_json_mode",
]
