"""
lintdex rules command.

SUMMARY: Display the list of rules and their identifiers
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict

from lintdex.cli import OutputFormatter, add_config_flag, add_json_flag
from lintdex.core.catalog import QuerySuccess, RulesQuery, run_rules_query
from lintdex.core.config import Settings, load_resolved_configuration
from lintdex.core.exceptions import ConfigurationError, LintdexError, RegistryError
from lintdex.core.rules import RulesRegistry, RuleType
from lintdex.core.utils import current_width

SUMMARY = "Display the list of rules and their identifiers"

_ERROR_CODES = {
    ConfigurationError: "configuration_error",
    RegistryError: "registry_error",
}


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "rule_id",
        nargs="?",
        default=None,
        help="The rule identifier to display description for",
    )
    parser.add_argument(
        "--enabled",
        "-e",
        action="store_true",
        dest="only_enabled",
        help="Only display enabled rules",
    )
    parser.add_argument(
        "--disabled",
        "-d",
        action="store_true",
        dest="only_disabled",
        help="Only display disabled rules",
    )
    add_config_flag(parser)
    add_json_flag(parser)


def rule_payload(rule_type: RuleType) -> Dict[str, Any]:
    """JSON descriptor for the single-rule view."""
    caps = rule_type.capabilities
    return {
        **rule_type.description.to_dict(),
        "opt_in": caps.opt_in,
        "correctable": caps.correctable,
        "analyzer": caps.analyzer,
        "configuration": rule_type.create().configuration_description,
    }


def main(args: argparse.Namespace) -> int:
    """List rules, or describe one rule."""
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        settings = Settings.load()
        registry = RulesRegistry.load()
        explicit = bool(getattr(args, "config", None))
        config_path = Path(args.config) if explicit else Path(settings.project_config_file)

        outcome = run_rules_query(
            RulesQuery(
                rule_id=getattr(args, "rule_id", None) or None,
                only_enabled=bool(getattr(args, "only_enabled", False)),
                only_disabled=bool(getattr(args, "only_disabled", False)),
            ),
            registry,
            lambda: load_resolved_configuration(config_path, registry, explicit=explicit),
            current_width,
            settings.table_layout(),
        )
    except LintdexError as e:
        formatter.error(e, error_code=_ERROR_CODES.get(type(e), "error"))
        return 1

    if not isinstance(outcome, QuerySuccess):
        formatter.error(outcome.error, error_code="usage_error")
        return 1

    if formatter.json_mode:
        if outcome.rule is not None:
            formatter.json_output(rule_payload(outcome.rule))
        else:
            rows = [row.to_dict() for row in outcome.rows or []]
            formatter.json_output({"rules": rows, "count": len(rows)})
    else:
        formatter.text(outcome.output)
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    args = parser.parse_args()
    sys.exit(main(args))
