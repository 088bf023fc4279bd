"""Text rendering for the rule catalog and the single-rule detail view."""
from __future__ import annotations

from typing import Iterable, List, Sequence

from lintdex.core.catalog.rows import PresentableRow
from lintdex.core.catalog.truncate import TableLayout, truncate_description
from lintdex.core.rules.models import RuleDescription
from lintdex.core.utils.text_table import TextTable

COLUMNS = (
    "identifier",
    "opt-in",
    "correctable",
    "enabled in your config",
    "kind",
    "analyzer",
    "configuration",
)

TRIGGERING_EXAMPLES_HEADER = "Triggering Examples (violation is marked with '↓'):"


def yes_no(value: bool) -> str:
    return "yes" if value else "no"


def sort_rows(rows: Iterable[PresentableRow]) -> List[PresentableRow]:
    """Order rows by identifier (code point order); ties keep their input order."""
    return sorted(rows, key=lambda row: row.identifier)


def row_cells(row: PresentableRow, terminal_width: int, layout: TableLayout) -> List[str]:
    return [
        row.identifier,
        yes_no(row.opt_in),
        yes_no(row.correctable),
        yes_no(row.configured),
        row.kind,
        yes_no(row.analyzer),
        truncate_description(row.description, terminal_width, layout),
    ]


def render_table(
    rows: Sequence[PresentableRow], terminal_width: int, layout: TableLayout = TableLayout()
) -> str:
    """Render the bordered catalog table. Rows are sorted here."""
    table = TextTable(COLUMNS)
    table.add_rows(row_cells(row, terminal_width, layout) for row in sort_rows(rows))
    return table.render()


def indent(text: str, prefix: str = "    ") -> str:
    return "\n".join(prefix + line for line in text.split("\n"))


def render_rule_detail(description: RuleDescription) -> str:
    """Full, untruncated documentation of one rule."""
    lines = [description.console_description]
    if description.triggering_examples:
        lines.append("")
        lines.append(TRIGGERING_EXAMPLES_HEADER)
        for number, example in enumerate(description.triggering_examples, start=1):
            lines.extend(["", f"Example #{number}", "", indent(example)])
    return "\n".join(lines)


__all__ = [
    "COLUMNS",
    "TRIGGERING_EXAMPLES_HEADER",
    "sort_rows",
    "row_cells",
    "render_table",
    "render_rule_detail",
]
