"""Selection of catalog identifiers by activation state."""
from __future__ import annotations

from enum import Enum
from typing import List

from lintdex.core.config.project import ResolvedConfiguration
from lintdex.core.rules.registry import RulesRegistry


class FilterMode(str, Enum):
    ALL = "all"
    ONLY_ENABLED = "enabled"
    ONLY_DISABLED = "disabled"

    @classmethod
    def from_flags(cls, only_enabled: bool, only_disabled: bool) -> "FilterMode":
        """Map CLI flags to a mode. Callers reject the combination of both first."""
        if only_enabled and only_disabled:
            raise ValueError("only_enabled and only_disabled are mutually exclusive")
        if only_enabled:
            return cls.ONLY_ENABLED
        if only_disabled:
            return cls.ONLY_DISABLED
        return cls.ALL


def filter_rule_ids(
    mode: FilterMode, registry: RulesRegistry, configuration: ResolvedConfiguration
) -> List[str]:
    """Return registry identifiers selected by ``mode``, in registry order."""
    if mode is FilterMode.ALL:
        return registry.identifiers()
    want_enabled = mode is FilterMode.ONLY_ENABLED
    return [
        identifier
        for identifier in registry.identifiers()
        if (configuration.find(identifier) is not None) == want_enabled
    ]


__all__ = ["FilterMode", "filter_rule_ids"]
