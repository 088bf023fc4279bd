"""
Data models for lintdex rules.

- RuleKind: closed enumeration of rule categories
- RuleCapabilities: static facts about a rule type (opt-in, correctable, analyzer)
- RuleDescription: the immutable documentation of a rule
- RuleType: a registry entry; ``create()`` builds rule instances
- Rule: one instance of a rule type with a concrete configuration
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Tuple

from lintdex.core.rules.configurations import RuleConfiguration, build_configuration


class RuleKind(str, Enum):
    LINT = "lint"
    IDIOMATIC = "idiomatic"
    STYLE = "style"
    METRICS = "metrics"
    PERFORMANCE = "performance"


@dataclass(frozen=True)
class RuleCapabilities:
    """Static classification of a rule type, fixed at registration."""

    opt_in: bool = False
    correctable: bool = False
    analyzer: bool = False


@dataclass(frozen=True)
class RuleDescription:
    """Documentation of a rule.

    Attributes:
        identifier: Unique rule identifier (e.g. ``line_length``)
        name: Human-readable name
        description: One-paragraph summary
        kind: Rule category
        triggering_examples: Source snippets that violate the rule; the
            violation position is marked with ``↓``
        non_triggering_examples: Source snippets that pass the rule
    """

    identifier: str
    name: str
    description: str
    kind: RuleKind
    triggering_examples: Tuple[str, ...] = ()
    non_triggering_examples: Tuple[str, ...] = ()

    @property
    def console_description(self) -> str:
        return f"{self.name} ({self.identifier}): {self.description}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "identifier": self.identifier,
            "name": self.name,
            "description": self.description,
            "kind": self.kind.value,
            "triggering_examples": list(self.triggering_examples),
            "non_triggering_examples": list(self.non_triggering_examples),
        }


@dataclass(frozen=True)
class RuleType:
    """A rule as registered in the catalog: description, capabilities and defaults."""

    description: RuleDescription
    capabilities: RuleCapabilities = field(default_factory=RuleCapabilities)
    default_configuration: Mapping[str, Any] = field(
        default_factory=lambda: {"type": "severity", "severity": "warning"}
    )

    def __post_init__(self) -> None:
        # Fail at registration time rather than on first use.
        build_configuration(self.default_configuration)

    @property
    def identifier(self) -> str:
        return self.description.identifier

    def create(self, payload: Any = None) -> "Rule":
        """Build a rule instance.

        With no payload this is the default instance. A payload is layered
        over the default configuration; ``ValueError`` means it was rejected.
        """
        configuration = build_configuration(self.default_configuration)
        if payload is not None:
            configuration = configuration.apply(payload)
        return Rule(rule_type=self, configuration=configuration)


@dataclass(frozen=True)
class Rule:
    """A rule instance, either the default one or one built from project configuration."""

    rule_type: RuleType
    configuration: RuleConfiguration

    @property
    def identifier(self) -> str:
        return self.rule_type.identifier

    @property
    def description(self) -> RuleDescription:
        return self.rule_type.description

    @property
    def capabilities(self) -> RuleCapabilities:
        return self.rule_type.capabilities

    @property
    def configuration_description(self) -> str:
        return self.configuration.console_description


__all__ = [
    "RuleKind",
    "RuleCapabilities",
    "RuleDescription",
    "RuleType",
    "Rule",
]
