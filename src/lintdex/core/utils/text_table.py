"""Bordered plain-text tables.

Renders rows in the classic ASCII layout::

    +------------+--------+
    | identifier | opt-in |
    +------------+--------+
    | todo       | no     |
    +------------+--------+

Each column is as wide as its widest cell (header included).
"""
from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Sequence


class TextTable:
    """Accumulate rows under fixed headers and render them as text."""

    def __init__(self, headers: Sequence[str]) -> None:
        if not headers:
            raise ValueError("TextTable needs at least one column")
        self.headers: List[str] = [str(h) for h in headers]
        self.rows: List[List[str]] = []

    def add_row(self, values: Sequence[Any] | Mapping[str, Any]) -> None:
        """Append one row, given positionally or keyed by header."""
        if isinstance(values, Mapping):
            cells = [str(values.get(h, "")) for h in self.headers]
        else:
            cells = [str(v) for v in values]
        if len(cells) != len(self.headers):
            raise ValueError(
                f"Row has {len(cells)} cells, table has {len(self.headers)} columns"
            )
        self.rows.append(cells)

    def add_rows(self, rows: Iterable[Sequence[Any] | Mapping[str, Any]]) -> None:
        for row in rows:
            self.add_row(row)

    def column_widths(self) -> List[int]:
        widths: List[int] = []
        for idx, header in enumerate(self.headers):
            vals = [len(r[idx]) for r in self.rows]
            widths.append(max([len(header), *vals]))
        return widths

    def render(self) -> str:
        widths = self.column_widths()
        border = "+" + "+".join("-" * (w + 2) for w in widths) + "+"

        def _format_row(parts: List[str]) -> str:
            padded = [f" {cell.ljust(widths[idx])} " for idx, cell in enumerate(parts)]
            return "|" + "|".join(padded) + "|"

        lines: List[str] = [border, _format_row(self.headers), border]
        if self.rows:
            lines.extend(_format_row(row) for row in self.rows)
            lines.append(border)
        return "\n".join(lines)


__all__ = ["TextTable"]
