"""Project configuration loading and rule resolution.

A project configuration is a YAML file (``.lintdex.yml`` by default)::

    disabled_rules: [todo]
    opt_in_rules: [no_print]
    line_length:
      warning: 100
    custom_rules:
      no_pdb:
        regex: "import pdb"
        severity: error

Resolution turns it into the ordered list of active rule instances used by
the catalog to decide which rules are "enabled in your config".
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from lintdex.core.exceptions import ConfigurationError
from lintdex.core.rules.models import Rule, RuleType
from lintdex.core.rules.registry import RulesRegistry
from lintdex.core.schemas import validate_payload_safe
from lintdex.core.utils.io import read_yaml

logger = logging.getLogger(__name__)

PROJECT_CONFIG_SCHEMA = "project-config.schema.yaml"

SELECTION_KEYS = ("disabled_rules", "opt_in_rules", "analyzer_rules", "only_rules")


@dataclass(frozen=True)
class ProjectConfiguration:
    """Parsed (but not yet resolved) project configuration."""

    disabled_rules: Tuple[str, ...] = ()
    opt_in_rules: Tuple[str, ...] = ()
    analyzer_rules: Tuple[str, ...] = ()
    only_rules: Optional[Tuple[str, ...]] = None
    rule_parameters: Mapping[str, Any] = field(default_factory=dict)
    path: Optional[Path] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, path: Optional[Path] = None) -> "ProjectConfiguration":
        only = data.get("only_rules")
        parameters: Dict[str, Any] = {
            str(k): v for k, v in data.items() if k not in SELECTION_KEYS
        }
        return cls(
            disabled_rules=tuple(data.get("disabled_rules") or ()),
            opt_in_rules=tuple(data.get("opt_in_rules") or ()),
            analyzer_rules=tuple(data.get("analyzer_rules") or ()),
            only_rules=tuple(only) if only is not None else None,
            rule_parameters=parameters,
            path=path,
        )


@dataclass(frozen=True)
class ResolvedConfiguration:
    """Active rule instances for a project, in registry order."""

    rules: Tuple[Rule, ...] = ()

    def find(self, identifier: str) -> Optional[Rule]:
        for rule in self.rules:
            if rule.identifier == identifier:
                return rule
        return None

    def identifiers(self) -> List[str]:
        return [r.identifier for r in self.rules]

    def __len__(self) -> int:
        return len(self.rules)


def load_project_configuration(path: Path, *, explicit: bool = False) -> ProjectConfiguration:
    """Read and validate a project configuration file.

    A missing file yields an empty configuration unless the caller named the
    file explicitly.

    Raises:
        ConfigurationError: Unreadable YAML, a non-mapping document, schema
            violations, or a missing explicit file.
    """
    path = Path(path)
    if not path.exists():
        if explicit:
            raise ConfigurationError(f"Configuration file not found: {path}", path=str(path))
        logger.debug("No project configuration at %s; using defaults", path)
        return ProjectConfiguration()

    try:
        data = read_yaml(path, default={}, raise_on_error=True)
    except Exception as exc:
        raise ConfigurationError(
            f"Cannot read configuration file {path}: {exc}", path=str(path)
        ) from exc

    if not isinstance(data, Mapping):
        raise ConfigurationError(
            f"Configuration file {path} must contain a YAML mapping, got {type(data).__name__}",
            path=str(path),
        )

    errors = validate_payload_safe(dict(data), PROJECT_CONFIG_SCHEMA)
    if errors:
        raise ConfigurationError(
            f"Invalid configuration file {path}:\n  - " + "\n  - ".join(errors),
            path=str(path),
            errors=errors,
        )

    logger.debug("Loaded project configuration from %s", path)
    return ProjectConfiguration.from_mapping(data, path=path)


def resolve_configuration(
    project: ProjectConfiguration, registry: RulesRegistry
) -> ResolvedConfiguration:
    """Decide which rules are active and build their instances."""
    _warn_unknown(registry, "disabled_rules", project.disabled_rules)
    _warn_unknown(registry, "opt_in_rules", project.opt_in_rules)
    _warn_unknown(registry, "analyzer_rules", project.analyzer_rules)
    if project.only_rules is not None:
        _warn_unknown(registry, "only_rules", project.only_rules)

    disabled = set(project.disabled_rules)
    opted_in = set(project.opt_in_rules)
    analyzers = set(project.analyzer_rules)

    for identifier in sorted(disabled & opted_in):
        logger.warning(
            "Rule '%s' is listed in both disabled_rules and opt_in_rules; it stays disabled",
            identifier,
        )

    if project.only_rules is not None:
        if disabled or opted_in:
            logger.warning("only_rules is set; disabled_rules and opt_in_rules are ignored")
        only = set(project.only_rules)

        def is_active(identifier: str, opt_in: bool, analyzer: bool) -> bool:
            return identifier in only and (not analyzer or identifier in analyzers)
    else:
        def is_active(identifier: str, opt_in: bool, analyzer: bool) -> bool:
            if identifier in disabled:
                return False
            if analyzer:
                return identifier in analyzers
            return not opt_in or identifier in opted_in

    for key in project.rule_parameters:
        if key not in registry:
            logger.warning("Unknown rule identifier in configuration: '%s'", key)

    active: List[Rule] = []
    for identifier, rule_type in registry.items():
        caps = rule_type.capabilities
        if not is_active(identifier, caps.opt_in, caps.analyzer):
            continue
        active.append(_create_rule(rule_type, project.rule_parameters.get(identifier)))

    logger.debug("Resolved %d active rules of %d", len(active), len(registry))
    return ResolvedConfiguration(rules=tuple(active))


def load_resolved_configuration(
    path: Path, registry: RulesRegistry, *, explicit: bool = False
) -> ResolvedConfiguration:
    return resolve_configuration(load_project_configuration(path, explicit=explicit), registry)


def _create_rule(rule_type: RuleType, payload: Any) -> Rule:
    if payload is None:
        return rule_type.create()
    try:
        return rule_type.create(payload)
    except ValueError as exc:
        logger.warning(
            "Invalid configuration for rule '%s': %s; using defaults",
            rule_type.identifier,
            exc,
        )
        return rule_type.create()


def _warn_unknown(registry: RulesRegistry, key: str, identifiers: Iterable[str]) -> None:
    for identifier in identifiers:
        if identifier not in registry:
            logger.warning("Unknown rule identifier in %s: '%s'", key, identifier)


__all__ = [
    "ProjectConfiguration",
    "ResolvedConfiguration",
    "load_project_configuration",
    "resolve_configuration",
    "load_resolved_configuration",
]
