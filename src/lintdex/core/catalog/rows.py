"""Expansion of catalog entries into presentable table rows.

Every catalog entry is either a ``SimpleEntry`` (one rule, one row) or a
``CompositeEntry`` whose configuration holds named sub-rules, each of which
becomes its own row.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Tuple, Union

from lintdex.core.config.project import ResolvedConfiguration
from lintdex.core.rules.configurations import RegexConfiguration
from lintdex.core.rules.models import Rule, RuleType
from lintdex.core.rules.registry import RulesRegistry


@dataclass(frozen=True)
class PresentableRow:
    identifier: str
    opt_in: bool
    correctable: bool
    configured: bool
    kind: str
    analyzer: bool
    description: str

    def __post_init__(self) -> None:
        if not self.identifier:
            raise ValueError("row identifiers must be non-empty")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SimpleEntry:
    rule: Rule
    configured: bool


@dataclass(frozen=True)
class CompositeEntry:
    rule: Rule
    children: Tuple[RegexConfiguration, ...]


CatalogEntry = Union[SimpleEntry, CompositeEntry]


def classify(rule: Rule, configured: bool) -> CatalogEntry:
    """Wrap the effective rule instance in its catalog variant.

    A composite configuration without sub-rules is presented as a plain row so
    that every registry rule stays visible in the catalog.
    """
    children = rule.configuration.children
    if children:
        return CompositeEntry(rule=rule, children=tuple(children))
    return SimpleEntry(rule=rule, configured=configured)


def expand_rule(
    identifier: str, rule_type: RuleType, configuration: ResolvedConfiguration
) -> List[PresentableRow]:
    """Turn one registry entry into one or more rows."""
    default = rule_type.create()
    configured_rule = configuration.find(identifier)
    effective = configured_rule if configured_rule is not None else default
    entry = classify(effective, configured=configured_rule is not None)

    kind = default.description.kind.value
    if isinstance(entry, CompositeEntry):
        return [
            PresentableRow(
                identifier=child.identifier,
                opt_in=False,
                correctable=False,
                configured=True,
                kind=kind,
                analyzer=False,
                description=child.console_description,
            )
            for child in entry.children
        ]

    caps = default.capabilities
    return [
        PresentableRow(
            identifier=identifier,
            opt_in=caps.opt_in,
            correctable=caps.correctable,
            configured=entry.configured,
            kind=kind,
            analyzer=caps.analyzer,
            description=entry.rule.configuration_description,
        )
    ]


def expand_all(
    identifiers: List[str], registry: RulesRegistry, configuration: ResolvedConfiguration
) -> List[PresentableRow]:
    rows: List[PresentableRow] = []
    for identifier in identifiers:
        rule_type = registry.get(identifier)
        if rule_type is None:
            continue
        rows.extend(expand_rule(identifier, rule_type, configuration))
    return rows


__all__ = [
    "PresentableRow",
    "SimpleEntry",
    "CompositeEntry",
    "CatalogEntry",
    "classify",
    "expand_rule",
    "expand_all",
]
