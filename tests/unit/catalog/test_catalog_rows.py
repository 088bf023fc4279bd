from __future__ import annotations

import pytest

from lintdex.core.catalog.rows import (
    CompositeEntry,
    PresentableRow,
    SimpleEntry,
    classify,
    expand_all,
    expand_rule,
)
from lintdex.core.config.project import ResolvedConfiguration
from lintdex.core.rules import RulesRegistry

from helpers.rules import make_rule_type

CUSTOM = {"type": "custom_rules"}


def test_unconfigured_rule_yields_one_default_row() -> None:
    rule_type = make_rule_type("no_print", "lint", opt_in=True, correctable=True)
    rows = expand_rule("no_print", rule_type, ResolvedConfiguration())
    assert rows == [
        PresentableRow(
            identifier="no_print",
            opt_in=True,
            correctable=True,
            configured=False,
            kind="lint",
            analyzer=False,
            description="warning",
        )
    ]


def test_configured_instance_supplies_description() -> None:
    rule_type = make_rule_type(
        "line_length",
        "metrics",
        configuration={"type": "severity_levels", "warning": 120, "error": 200},
    )
    configuration = ResolvedConfiguration(rules=(rule_type.create({"warning": 100}),))
    (row,) = expand_rule("line_length", rule_type, configuration)
    assert row.configured is True
    assert row.description == "warning: 100, error: 200"


def test_capabilities_come_from_rule_type() -> None:
    rule_type = make_rule_type("unused_import", analyzer=True, correctable=True)
    configuration = ResolvedConfiguration(rules=(rule_type.create(),))
    (row,) = expand_rule("unused_import", rule_type, configuration)
    assert (row.opt_in, row.correctable, row.analyzer) == (False, True, True)


@pytest.mark.parametrize("k", [1, 3])
def test_composite_expands_to_one_row_per_sub_rule(k: int) -> None:
    rule_type = make_rule_type("custom_rules", "style", configuration=CUSTOM)
    payload = {f"pattern_{i}": {"regex": f"p{i}+"} for i in range(k)}
    configuration = ResolvedConfiguration(rules=(rule_type.create(payload),))

    rows = expand_rule("custom_rules", rule_type, configuration)

    assert len(rows) == k
    assert [r.identifier for r in rows] == [f"pattern_{i}" for i in range(k)]
    assert all(r.identifier != "custom_rules" for r in rows)
    assert all(r.configured for r in rows)
    assert all(not (r.opt_in or r.correctable or r.analyzer) for r in rows)
    assert all(r.kind == "style" for r in rows)
    assert [r.description for r in rows] == [f"p{i}+" for i in range(k)]


def test_composite_without_sub_rules_keeps_parent_row() -> None:
    rule_type = make_rule_type("custom_rules", "style", configuration=CUSTOM)
    configuration = ResolvedConfiguration(rules=(rule_type.create(),))
    (row,) = expand_rule("custom_rules", rule_type, configuration)
    assert row.identifier == "custom_rules"
    assert row.configured is True
    assert row.description == "user-defined"


def test_unconfigured_composite_row() -> None:
    rule_type = make_rule_type("custom_rules", "style", configuration=CUSTOM)
    (row,) = expand_rule("custom_rules", rule_type, ResolvedConfiguration())
    assert row.configured is False


def test_classify_variants() -> None:
    rule_type = make_rule_type("custom_rules", "style", configuration=CUSTOM)
    composite = classify(rule_type.create({"a": {"regex": "a"}}), configured=True)
    simple = classify(rule_type.create(), configured=False)
    assert isinstance(composite, CompositeEntry)
    assert [c.identifier for c in composite.children] == ["a"]
    assert isinstance(simple, SimpleEntry)
    assert simple.configured is False


def test_expand_all_follows_identifier_order(two_rule_registry: RulesRegistry) -> None:
    rows = expand_all(["rule_a", "rule_b", "missing"], two_rule_registry, ResolvedConfiguration())
    assert [r.identifier for r in rows] == ["rule_a", "rule_b"]


def test_rows_need_identifiers() -> None:
    with pytest.raises(ValueError):
        PresentableRow("", False, False, False, "lint", False, "warning")


def test_row_to_dict() -> None:
    row = PresentableRow("todo", False, False, True, "lint", False, "warning")
    assert row.to_dict() == {
        "identifier": "todo",
        "opt_in": False,
        "correctable": False,
        "configured": True,
        "kind": "lint",
        "analyzer": False,
        "description": "warning",
    }
