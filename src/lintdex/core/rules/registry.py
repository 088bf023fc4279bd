"""Rules registry.

The registry is the read-only catalog of every rule lintdex knows about: an
insertion-ordered mapping from rule identifier to ``RuleType``.

Registry location:
    - Bundled: lintdex.data/rules/registry.yaml (default)
    - Any other YAML file with the same shape via ``RulesRegistry.load(path)``
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from lintdex.core.exceptions import RegistryError
from lintdex.core.rules.models import (
    RuleCapabilities,
    RuleDescription,
    RuleKind,
    RuleType,
)
from lintdex.core.schemas import validate_payload_safe
from lintdex.core.utils.io import read_yaml
from lintdex.data import get_data_path

logger = logging.getLogger(__name__)

REGISTRY_SCHEMA = "registry.schema.yaml"


class RulesRegistry:
    """Ordered, read-only mapping of rule identifier to rule type."""

    def __init__(self, rule_types: Iterable[RuleType]) -> None:
        self._rules: Dict[str, RuleType] = {}
        for rule_type in rule_types:
            identifier = rule_type.identifier
            if not identifier:
                raise RegistryError("Rule identifiers must be non-empty")
            if identifier in self._rules:
                raise RegistryError(
                    f"Duplicate rule identifier: {identifier}",
                    context={"identifier": identifier},
                )
            self._rules[identifier] = rule_type

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "RulesRegistry":
        """Load a registry from YAML (bundled registry when ``path`` is None)."""
        registry_path = Path(path) if path is not None else get_data_path("rules", "registry.yaml")
        try:
            data = read_yaml(registry_path, default=None, raise_on_error=True)
        except Exception as exc:
            raise RegistryError(
                f"Cannot read rule registry {registry_path}: {exc}",
                context={"path": str(registry_path)},
            ) from exc

        if not isinstance(data, Mapping) or not isinstance(data.get("rules"), list):
            raise RegistryError(
                f"Rule registry {registry_path} must be a mapping with a 'rules' list",
                context={"path": str(registry_path)},
            )

        errors = validate_payload_safe(dict(data), REGISTRY_SCHEMA)
        if errors:
            raise RegistryError(
                f"Invalid rule registry {registry_path}:\n  - " + "\n  - ".join(errors),
                context={"path": str(registry_path), "errors": errors},
            )

        registry = cls(rule_type_from_entry(entry) for entry in data["rules"])
        logger.debug("Loaded %d rules from %s", len(registry), registry_path)
        return registry

    def get(self, identifier: str) -> Optional[RuleType]:
        return self._rules.get(identifier)

    def identifiers(self) -> List[str]:
        return list(self._rules)

    def items(self) -> List[Tuple[str, RuleType]]:
        return list(self._rules.items())

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._rules

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)


def rule_type_from_entry(entry: Any) -> RuleType:
    """Build a ``RuleType`` from one registry YAML entry."""
    if not isinstance(entry, Mapping):
        raise RegistryError(f"Registry entries must be mappings, got {type(entry).__name__}")

    identifier = str(entry.get("identifier") or "").strip()
    if not identifier:
        raise RegistryError("Registry entry is missing an identifier", context={"entry": dict(entry)})

    missing = [k for k in ("name", "description", "kind") if not entry.get(k)]
    if missing:
        raise RegistryError(
            f"Rule {identifier}: missing {', '.join(missing)}",
            context={"identifier": identifier},
        )

    try:
        kind = RuleKind(str(entry["kind"]))
    except ValueError:
        raise RegistryError(
            f"Rule {identifier}: unknown kind {entry['kind']!r}",
            context={"identifier": identifier},
        ) from None

    description = RuleDescription(
        identifier=identifier,
        name=str(entry["name"]),
        description=str(entry["description"]).strip(),
        kind=kind,
        triggering_examples=_examples(entry.get("triggering_examples")),
        non_triggering_examples=_examples(entry.get("non_triggering_examples")),
    )
    capabilities = RuleCapabilities(
        opt_in=bool(entry.get("opt_in", False)),
        correctable=bool(entry.get("correctable", False)),
        analyzer=bool(entry.get("analyzer", False)),
    )
    configuration = entry.get("configuration") or {"type": "severity", "severity": "warning"}
    if not isinstance(configuration, Mapping):
        raise RegistryError(f"Rule {identifier}: configuration must be a mapping")
    try:
        return RuleType(
            description=description,
            capabilities=capabilities,
            default_configuration=dict(configuration),
        )
    except RegistryError as exc:
        raise RegistryError(f"Rule {identifier}: {exc}", context={"identifier": identifier}) from exc


def _examples(raw: Any) -> Tuple[str, ...]:
    # YAML block scalars keep their final newline; the detail view adds its own.
    return tuple(str(e).rstrip("\n") for e in raw or [])


__all__ = [
    "RulesRegistry",
    "rule_type_from_entry",
]
