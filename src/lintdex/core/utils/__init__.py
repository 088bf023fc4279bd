"""Utility helpers for lintdex core.

- io: YAML reading with error handling
- merge: recursive dictionary merging
- text_table: bordered plain-text tables
- terminal: terminal width detection
"""
from __future__ import annotations

from .io import read_yaml
from .merge import deep_merge
from .terminal import current_width
from .text_table import TextTable

__all__ = [
    "read_yaml",
    "deep_merge",
    "current_width",
    "TextTable",
]
