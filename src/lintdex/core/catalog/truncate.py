"""Width-aware truncation of the catalog's description column."""
from __future__ import annotations

from dataclasses import dataclass

DEFAULT_DESCRIPTION_COLUMN = 112
DEFAULT_ELLIPSIS = "..."
DEFAULT_MIN_WIDTH = len("configuration") - len(DEFAULT_ELLIPSIS)


@dataclass(frozen=True)
class TableLayout:
    """Formatting constants for the catalog table.

    Attributes:
        description_column: Terminal column at which the description cell
            starts (everything to its left is taken by the fixed columns).
        ellipsis: Marker appended to truncated descriptions.
        min_width: Narrowest description budget, used when the terminal is
            narrower than ``description_column`` or not a terminal at all.
    """

    description_column: int = DEFAULT_DESCRIPTION_COLUMN
    ellipsis: str = DEFAULT_ELLIPSIS
    min_width: int = DEFAULT_MIN_WIDTH

    def __post_init__(self) -> None:
        if self.min_width < 0:
            raise ValueError("min_width must be non-negative")

    @classmethod
    def from_word(cls, description_column: int, ellipsis: str, min_width_word: str) -> "TableLayout":
        return cls(
            description_column=description_column,
            ellipsis=ellipsis,
            min_width=max(0, len(min_width_word) - len(ellipsis)),
        )

    def budget(self, terminal_width: int) -> int:
        return max(self.min_width, terminal_width - self.description_column)


def escape_newlines(text: str) -> str:
    return text.replace("\n", "\\n")


def truncate_description(text: str, terminal_width: int, layout: TableLayout = TableLayout()) -> str:
    """Fit ``text`` on one line within the budget left by ``terminal_width``.

    Newlines become a literal ``\\n``. Text longer than the budget is cut to
    exactly ``budget`` characters followed by the ellipsis; anything else is
    returned unchanged.
    """
    single_line = escape_newlines(text)
    budget = layout.budget(terminal_width)
    if len(single_line) > budget:
        return single_line[:budget] + layout.ellipsis
    return single_line


__all__ = [
    "TableLayout",
    "escape_newlines",
    "truncate_description",
]
