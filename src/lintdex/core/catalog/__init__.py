"""
Rule catalog: filtering, row expansion, truncation and rendering.

The entry point is ``run_rules_query``; the other modules are its pure
building blocks.
"""
from __future__ import annotations

from .filter import FilterMode, filter_rule_ids
from .query import QueryFailure, QueryOutcome, QuerySuccess, RulesQuery, run_rules_query
from .render import COLUMNS, render_rule_detail, render_table, sort_rows
from .rows import CompositeEntry, PresentableRow, SimpleEntry, expand_rule
from .truncate import TableLayout, truncate_description

__all__ = [
    "FilterMode",
    "filter_rule_ids",
    "PresentableRow",
    "SimpleEntry",
    "CompositeEntry",
    "expand_rule",
    "TableLayout",
    "truncate_description",
    "COLUMNS",
    "sort_rows",
    "render_table",
    "render_rule_detail",
    "RulesQuery",
    "QuerySuccess",
    "QueryFailure",
    "QueryOutcome",
    "run_rules_query",
]
