from __future__ import annotations

import pytest

from lintdex.core.utils.text_table import TextTable


def test_render_sizes_columns_to_widest_cell() -> None:
    table = TextTable(["id", "kind"])
    table.add_row(["todo", "lint"])
    table.add_row({"id": "x", "kind": "metrics"})
    assert table.column_widths() == [4, 7]
    assert table.render() == (
        "+------+---------+\n"
        "| id   | kind    |\n"
        "+------+---------+\n"
        "| todo | lint    |\n"
        "| x    | metrics |\n"
        "+------+---------+"
    )


def test_header_only_table() -> None:
    assert TextTable(["identifier"]).render() == (
        "+------------+\n"
        "| identifier |\n"
        "+------------+"
    )


def test_cells_are_stringified() -> None:
    table = TextTable(["n"])
    table.add_rows([[1], [None]])
    assert table.rows == [["1"], ["None"]]


def test_row_length_must_match_headers() -> None:
    table = TextTable(["a", "b"])
    with pytest.raises(ValueError):
        table.add_row(["only one"])


def test_headers_required() -> None:
    with pytest.raises(ValueError):
        TextTable([])
