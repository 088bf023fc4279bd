"""
lintdex rule model and registry.

- models: RuleKind, RuleCapabilities, RuleDescription, RuleType, Rule
- configurations: per-rule configuration variants (severity, thresholds,
  custom pattern rules)
- registry: RulesRegistry, the ordered catalog of rule types
"""
from __future__ import annotations

from .configurations import (
    CustomRulesConfiguration,
    RegexConfiguration,
    RuleConfiguration,
    Severity,
    SeverityConfiguration,
    SeverityLevelsConfiguration,
)
from .models import Rule, RuleCapabilities, RuleDescription, RuleKind, RuleType
from .registry import RulesRegistry

__all__ = [
    # Models
    "Rule",
    "RuleCapabilities",
    "RuleDescription",
    "RuleKind",
    "RuleType",
    # Configurations
    "RuleConfiguration",
    "Severity",
    "SeverityConfiguration",
    "SeverityLevelsConfiguration",
    "RegexConfiguration",
    "CustomRulesConfiguration",
    # Registry
    "RulesRegistry",
]
