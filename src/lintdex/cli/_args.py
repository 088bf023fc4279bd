"""Common argument registration helpers for lintdex commands."""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode.

    Args:
        parser: ArgumentParser to add the flag to
    """
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_config_flag(parser: argparse.ArgumentParser) -> None:
    """Add --config flag for the project configuration file.

    Args:
        parser: ArgumentParser to add the flag to
    """
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        metavar="PATH",
        help="Project configuration file (default: .lintdex.yml in the current directory)",
    )


__all__ = ["add_json_flag", "add_config_flag"]
