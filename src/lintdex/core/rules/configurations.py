"""
Rule configuration payloads.

Every rule instance carries exactly one configuration object. Configurations
are immutable; ``apply(payload)`` returns a new configuration with the
project's parameters layered over the defaults, or raises ``ValueError`` when
the payload does not fit.

Variants:
- SeverityConfiguration: a single severity (``warning`` / ``error``)
- SeverityLevelsConfiguration: integer thresholds (``warning`` / ``error``)
- CustomRulesConfiguration: composite holding user-defined pattern rules
"""
from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Mapping, Optional, Tuple

from lintdex.core.exceptions import RegistryError


class Severity(str, Enum):
    WARNING = "warning"
    ERROR = "error"

    @classmethod
    def parse(cls, value: Any) -> "Severity":
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"invalid severity: {value!r}") from None


class RuleConfiguration(ABC):
    """Base for rule configuration variants."""

    @property
    @abstractmethod
    def console_description(self) -> str:
        """One-line rendering shown in the catalog's configuration column."""

    @property
    def children(self) -> Optional[Tuple["RegexConfiguration", ...]]:
        """Sub-rule configurations for composite configurations, else None."""
        return None

    @abstractmethod
    def apply(self, payload: Any) -> "RuleConfiguration":
        """Return a copy with ``payload`` layered over this configuration."""


@dataclass(frozen=True)
class SeverityConfiguration(RuleConfiguration):
    severity: Severity = Severity.WARNING

    @property
    def console_description(self) -> str:
        return self.severity.value

    def apply(self, payload: Any) -> "SeverityConfiguration":
        if isinstance(payload, Mapping):
            unknown = set(payload) - {"severity"}
            if unknown:
                raise ValueError(f"unexpected keys: {', '.join(sorted(map(str, unknown)))}")
            if "severity" not in payload:
                return self
            payload = payload["severity"]
        if not isinstance(payload, str):
            raise ValueError(f"expected a severity, got {type(payload).__name__}")
        return replace(self, severity=Severity.parse(payload))


@dataclass(frozen=True)
class SeverityLevelsConfiguration(RuleConfiguration):
    warning: int
    error: Optional[int] = None

    def __post_init__(self) -> None:
        if self.warning < 0 or (self.error is not None and self.error < 0):
            raise ValueError("thresholds must be non-negative")

    @property
    def console_description(self) -> str:
        parts = [f"warning: {self.warning}"]
        if self.error is not None:
            parts.append(f"error: {self.error}")
        return ", ".join(parts)

    def apply(self, payload: Any) -> "SeverityLevelsConfiguration":
        # A bare threshold replaces the warning level and clears the error level.
        if isinstance(payload, bool):
            raise ValueError("expected a threshold, got bool")
        if isinstance(payload, int):
            return replace(self, warning=payload, error=None)
        if isinstance(payload, list):
            if not 1 <= len(payload) <= 2 or not all(_is_int(v) for v in payload):
                raise ValueError("expected [warning] or [warning, error] thresholds")
            return replace(
                self,
                warning=payload[0],
                error=payload[1] if len(payload) == 2 else None,
            )
        if isinstance(payload, Mapping):
            unknown = set(payload) - {"warning", "error"}
            if unknown:
                raise ValueError(f"unexpected keys: {', '.join(sorted(map(str, unknown)))}")
            warning = payload.get("warning", self.warning)
            error = payload["error"] if "error" in payload else self.error
            if not _is_int(warning) or not (error is None or _is_int(error)):
                raise ValueError("thresholds must be integers")
            return replace(self, warning=warning, error=error)
        raise ValueError(f"expected thresholds, got {type(payload).__name__}")


@dataclass(frozen=True)
class RegexConfiguration:
    """One user-defined pattern rule nested in ``custom_rules``."""

    identifier: str
    regex: str
    name: Optional[str] = None
    message: Optional[str] = None
    severity: Severity = Severity.WARNING

    @property
    def console_description(self) -> str:
        return self.regex

    @classmethod
    def from_mapping(cls, identifier: str, data: Mapping[str, Any]) -> "RegexConfiguration":
        if not identifier:
            raise ValueError("custom rule identifiers must be non-empty")
        if not isinstance(data, Mapping):
            raise ValueError(f"custom rule '{identifier}' must be a mapping")
        regex = data.get("regex")
        if not isinstance(regex, str) or not regex:
            raise ValueError(f"custom rule '{identifier}' needs a non-empty regex")
        try:
            re.compile(regex)
        except re.error as exc:
            raise ValueError(f"custom rule '{identifier}' has an invalid regex: {exc}") from exc
        return cls(
            identifier=identifier,
            regex=regex,
            name=data.get("name"),
            message=data.get("message"),
            severity=Severity.parse(data.get("severity", Severity.WARNING.value)),
        )


@dataclass(frozen=True)
class CustomRulesConfiguration(RuleConfiguration):
    custom_rule_configurations: Tuple[RegexConfiguration, ...] = field(default_factory=tuple)

    @property
    def console_description(self) -> str:
        if not self.custom_rule_configurations:
            return "user-defined"
        return ", ".join(c.identifier for c in self.custom_rule_configurations)

    @property
    def children(self) -> Tuple[RegexConfiguration, ...]:
        return self.custom_rule_configurations

    def apply(self, payload: Any) -> "CustomRulesConfiguration":
        if not isinstance(payload, Mapping):
            raise ValueError(f"expected a mapping of custom rules, got {type(payload).__name__}")
        configs = tuple(
            RegexConfiguration.from_mapping(str(identifier), data)
            for identifier, data in payload.items()
        )
        return replace(self, custom_rule_configurations=configs)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def build_configuration(spec: Mapping[str, Any]) -> RuleConfiguration:
    """Build the default configuration described by a registry entry."""
    kind = spec.get("type")
    try:
        if kind == "severity":
            return SeverityConfiguration(Severity.parse(spec.get("severity", "warning")))
        if kind == "severity_levels":
            return SeverityLevelsConfiguration(
                warning=int(spec["warning"]),
                error=int(spec["error"]) if spec.get("error") is not None else None,
            )
        if kind == "custom_rules":
            return CustomRulesConfiguration()
    except (KeyError, TypeError, ValueError) as exc:
        raise RegistryError(f"Invalid {kind} configuration: {exc}") from exc
    raise RegistryError(f"Unknown configuration type: {kind!r}")


__all__ = [
    "Severity",
    "RuleConfiguration",
    "SeverityConfiguration",
    "SeverityLevelsConfiguration",
    "RegexConfiguration",
    "CustomRulesConfiguration",
    "build_configuration",
]
