"""
lintdex CLI package.

Commands are auto-discovered from ``lintdex.cli.commands``; each module
exposes ``SUMMARY``, ``register_args(parser)`` and ``main(args) -> int``.

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
"""
from ._output import OutputFormatter, format_json
from ._args import add_config_flag, add_json_flag

__all__ = [
    # Output formatting
    "OutputFormatter",
    "format_json",
    # Argument helpers
    "add_json_flag",
    "add_config_flag",
]
