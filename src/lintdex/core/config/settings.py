"""Tool settings.

Settings sources (highest to lowest priority):
1. Environment variables: ``LINTDEX_<section>__<key>``
2. Bundled defaults: ``lintdex.data/config/defaults.yaml``

The merged result is validated against ``schemas/settings.schema.yaml``.
"""
from __future__ import annotations

import copy
import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from lintdex.core.catalog.truncate import TableLayout
from lintdex.core.exceptions import ConfigurationError
from lintdex.core.schemas import validate_payload_safe
from lintdex.core.utils.merge import deep_merge
from lintdex.data import read_yaml

logger = logging.getLogger(__name__)

ENV_PREFIX = "LINTDEX_"
SETTINGS_SCHEMA = "settings.schema.yaml"


class Settings:
    """Validated, read-only view over the merged settings mapping."""

    def __init__(self, data: Mapping[str, Any]) -> None:
        self._data: Dict[str, Any] = copy.deepcopy(dict(data))

    @classmethod
    def load(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Load bundled defaults, apply env overrides and validate.

        Raises:
            ConfigurationError: If an override produces invalid settings.
        """
        defaults = read_yaml("config", "defaults.yaml") or {}
        overrides = env_overrides(os.environ if environ is None else environ)
        merged = deep_merge(copy.deepcopy(defaults), overrides)
        _normalize_log_level(merged)

        errors = validate_payload_safe(merged, SETTINGS_SCHEMA)
        if errors:
            raise ConfigurationError(
                "Invalid lintdex settings:\n  - " + "\n  - ".join(errors),
                errors=errors,
            )
        return cls(merged)

    def as_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self._data)

    def section(self, name: str) -> Dict[str, Any]:
        return dict(self._data.get(name) or {})

    def table_layout(self) -> TableLayout:
        table = self.section("table")
        return TableLayout.from_word(
            description_column=int(table["description_column"]),
            ellipsis=str(table["ellipsis"]),
            min_width_word=str(table["min_width_word"]),
        )

    @property
    def log_level(self) -> str:
        return str(self.section("logging").get("level", "WARNING")).upper()

    @property
    def log_file(self) -> Optional[Path]:
        raw = self.section("logging").get("file")
        return Path(raw) if raw else None

    @property
    def project_config_file(self) -> str:
        return str(self.section("project")["config_file"])


def _normalize_log_level(data: Dict[str, Any]) -> None:
    # Level names are case-insensitive, matching ``--log-level``.
    section = data.get("logging")
    if isinstance(section, dict) and isinstance(section.get("level"), str):
        section["level"] = section["level"].strip().upper()


def env_overrides(environ: Mapping[str, str]) -> Dict[str, Any]:
    """Collect ``LINTDEX_<section>__<key>`` variables into a nested mapping.

    Keys are lower-cased. Variables without a ``__`` separator are ignored.
    """
    result: Dict[str, Any] = {}
    for path, value in _iter_env_overrides(environ):
        cur = result
        for part in path[:-1]:
            nxt = cur.get(part)
            if not isinstance(nxt, dict):
                nxt = {}
                cur[part] = nxt
            cur = nxt
        cur[path[-1]] = value
    return result


def _iter_env_overrides(environ: Mapping[str, str]) -> Iterator[Tuple[List[str], Any]]:
    for key in sorted(environ):
        if not key.startswith(ENV_PREFIX):
            continue
        raw = key[len(ENV_PREFIX):]
        if "__" not in raw:
            continue
        segs = raw.split("__")
        if any(seg == "" for seg in segs):
            logger.warning("Ignoring malformed settings override %s", key)
            continue
        yield [seg.lower() for seg in segs], coerce_value(environ[key])


def coerce_value(value: str) -> Any:
    """Convert an environment string to bool, int, float, JSON or null where it parses."""
    for caster in (_as_null, _as_bool, _as_int, _as_float, _as_json):
        result = caster(value)
        if result is not _UNSET:
            return result
    return value.strip()


_UNSET = object()


def _as_null(v: str) -> Any:
    return None if v.strip().lower() == "null" else _UNSET


def _as_bool(v: str) -> Any:
    low = v.strip().lower()
    if low in {"true", "false"}:
        return low == "true"
    return _UNSET


def _as_int(v: str) -> Any:
    s = v.strip()
    if re.fullmatch(r"[-+]?\d+", s or " "):
        return int(s)
    return _UNSET


def _as_float(v: str) -> Any:
    s = v.strip()
    if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
        return float(s)
    return _UNSET


def _as_json(v: str) -> Any:
    s = v.strip()
    if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
        try:
            return json.loads(s)
        except ValueError:
            return _UNSET
    return _UNSET


__all__ = [
    "Settings",
    "env_overrides",
    "coerce_value",
]
