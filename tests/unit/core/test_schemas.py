from __future__ import annotations

import pytest

from lintdex.core.schemas import load_schema, validate_payload_safe


def test_load_schema_appends_extension() -> None:
    schema = load_schema("project-config.schema")
    assert schema["type"] == "object"


def test_missing_schema() -> None:
    with pytest.raises(FileNotFoundError):
        load_schema("nope.schema")


def test_valid_project_configuration() -> None:
    payload = {
        "disabled_rules": ["todo"],
        "line_length": [100, 200],
        "file_length": {"warning": 500, "error": None},
        "bare_except": "error",
        "custom_rules": {"no_pdb": {"regex": "import pdb", "severity": "error"}},
    }
    assert validate_payload_safe(payload, "project-config.schema.yaml") == []


def test_errors_carry_paths() -> None:
    errors = validate_payload_safe({"opt_in_rules": [""], "todo": "fatal"}, "project-config.schema")
    assert errors[0].startswith("opt_in_rules.0:")
    assert errors[1].startswith("todo:")
