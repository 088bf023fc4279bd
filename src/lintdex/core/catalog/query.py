"""The ``rules`` query: rule lookup or the filtered catalog table.

Usage errors (unknown rule identifier, conflicting filters) are returned as a
``QueryFailure`` and never raised. Registry and configuration errors raised
by the configuration loader propagate to the caller.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Union

from lintdex.core.catalog.filter import FilterMode, filter_rule_ids
from lintdex.core.catalog.render import render_rule_detail, render_table, sort_rows
from lintdex.core.catalog.rows import PresentableRow, expand_all
from lintdex.core.catalog.truncate import TableLayout
from lintdex.core.config.project import ResolvedConfiguration
from lintdex.core.exceptions import UsageError
from lintdex.core.rules.models import RuleType
from lintdex.core.rules.registry import RulesRegistry

logger = logging.getLogger(__name__)

CONFLICTING_FILTERS_MESSAGE = "You can't use --disabled and --enabled at the same time."

ConfigurationLoader = Callable[[], ResolvedConfiguration]
WidthProvider = Callable[[], int]


@dataclass(frozen=True)
class RulesQuery:
    rule_id: Optional[str] = None
    only_enabled: bool = False
    only_disabled: bool = False


@dataclass(frozen=True)
class QuerySuccess:
    output: str
    rows: Optional[List[PresentableRow]] = None
    rule: Optional[RuleType] = None
    ok: bool = field(default=True, init=False)


@dataclass(frozen=True)
class QueryFailure:
    error: UsageError
    ok: bool = field(default=False, init=False)

    @property
    def message(self) -> str:
        return str(self.error)


QueryOutcome = Union[QuerySuccess, QueryFailure]


def run_rules_query(
    query: RulesQuery,
    registry: RulesRegistry,
    configuration_loader: ConfigurationLoader,
    width_provider: WidthProvider,
    layout: TableLayout = TableLayout(),
) -> QueryOutcome:
    """Execute a rules query.

    Args:
        query: What to show.
        registry: The rule catalog.
        configuration_loader: Produces the resolved project configuration.
            Not called for single-rule lookups or rejected queries.
        width_provider: Returns the terminal width (0 when not a terminal).
        layout: Table formatting constants.
    """
    if query.rule_id:
        rule_type = registry.get(query.rule_id)
        if rule_type is None:
            return _fail(
                UsageError(
                    f"No rule with identifier: {query.rule_id}",
                    context={"rule_id": query.rule_id},
                )
            )
        return QuerySuccess(output=render_rule_detail(rule_type.description), rule=rule_type)

    if query.only_enabled and query.only_disabled:
        return _fail(UsageError(CONFLICTING_FILTERS_MESSAGE))

    configuration = configuration_loader()
    mode = FilterMode.from_flags(query.only_enabled, query.only_disabled)
    identifiers = filter_rule_ids(mode, registry, configuration)
    rows = expand_all(identifiers, registry, configuration)
    output = render_table(rows, width_provider(), layout)
    logger.debug("Rendered %d rows for %d rules (mode=%s)", len(rows), len(identifiers), mode.value)
    return QuerySuccess(output=output, rows=sort_rows(rows))


def _fail(error: UsageError) -> QueryFailure:
    logger.info("rules query rejected: %s", error)
    return QueryFailure(error=error)


__all__ = [
    "RulesQuery",
    "QuerySuccess",
    "QueryFailure",
    "QueryOutcome",
    "run_rules_query",
    "CONFLICTING_FILTERS_MESSAGE",
]
