from __future__ import annotations

import os

import pytest

from lintdex.core.utils import terminal
from lintdex.core.utils.terminal import current_width


def _no_terminal(*_args):
    raise OSError("not a terminal")


def test_columns_env_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COLUMNS", "80")
    monkeypatch.setattr(terminal.os, "get_terminal_size", _no_terminal)
    assert current_width() == 80


class _Tty:
    def fileno(self) -> int:
        return 1


def test_falls_back_to_terminal_size(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COLUMNS", "0")
    monkeypatch.setattr(terminal.sys, "stdout", _Tty())
    monkeypatch.setattr(
        terminal.os, "get_terminal_size", lambda *_: os.terminal_size((99, 40))
    )
    assert current_width() == 99


@pytest.mark.parametrize("columns", [None, "", "wide", "-5"])
def test_non_terminal_is_zero(monkeypatch: pytest.MonkeyPatch, columns) -> None:
    if columns is not None:
        monkeypatch.setenv("COLUMNS", columns)
    monkeypatch.setattr(terminal.os, "get_terminal_size", _no_terminal)
    assert current_width() == 0
