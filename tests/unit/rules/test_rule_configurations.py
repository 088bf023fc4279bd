from __future__ import annotations

import pytest

from lintdex.core.exceptions import RegistryError
from lintdex.core.rules.configurations import (
    CustomRulesConfiguration,
    RegexConfiguration,
    RuleConfiguration,
    Severity,
    SeverityConfiguration,
    SeverityLevelsConfiguration,
    build_configuration,
)


class TestSeverityConfiguration:
    def test_default_is_warning(self) -> None:
        assert SeverityConfiguration().console_description == "warning"

    def test_apply_scalar_and_mapping(self) -> None:
        base = SeverityConfiguration()
        assert base.apply("error").severity is Severity.ERROR
        assert base.apply({"severity": "ERROR"}).severity is Severity.ERROR
        assert base.apply({}) == base

    @pytest.mark.parametrize("payload", [3, "fatal", {"level": "error"}, ["error"]])
    def test_rejects_bad_payloads(self, payload) -> None:
        with pytest.raises(ValueError):
            SeverityConfiguration().apply(payload)

    def test_apply_does_not_mutate(self) -> None:
        base = SeverityConfiguration()
        base.apply("error")
        assert base.severity is Severity.WARNING


class TestSeverityLevelsConfiguration:
    def test_console_description(self) -> None:
        assert SeverityLevelsConfiguration(120, 200).console_description == "warning: 120, error: 200"
        assert SeverityLevelsConfiguration(120).console_description == "warning: 120"

    def test_bare_threshold_replaces_warning_and_clears_error(self) -> None:
        applied = SeverityLevelsConfiguration(120, 200).apply(100)
        assert applied.console_description == "warning: 100"

    def test_mapping_keeps_unset_levels(self) -> None:
        base = SeverityLevelsConfiguration(120, 200)
        assert base.apply({"warning": 100}).console_description == "warning: 100, error: 200"
        assert base.apply({"error": None}).console_description == "warning: 120"

    def test_list_payload(self) -> None:
        base = SeverityLevelsConfiguration(120, 200)
        assert base.apply([50, 60]) == SeverityLevelsConfiguration(50, 60)
        assert base.apply([50]) == SeverityLevelsConfiguration(50, None)

    @pytest.mark.parametrize(
        "payload",
        [True, -1, [1, 2, 3], [], ["a"], {"warning": "high"}, {"critical": 1}, "error"],
    )
    def test_rejects_bad_payloads(self, payload) -> None:
        with pytest.raises(ValueError):
            SeverityLevelsConfiguration(120, 200).apply(payload)


class TestCustomRules:
    def test_regex_configuration_from_mapping(self) -> None:
        cfg = RegexConfiguration.from_mapping("no_pdb", {"regex": "import pdb", "severity": "error"})
        assert cfg.console_description == "import pdb"
        assert cfg.severity is Severity.ERROR
        assert cfg.name is None

    @pytest.mark.parametrize("data", [{}, {"regex": ""}, {"regex": "("}, "import pdb"])
    def test_regex_configuration_rejects_invalid(self, data) -> None:
        with pytest.raises(ValueError):
            RegexConfiguration.from_mapping("broken", data)

    def test_empty_container(self) -> None:
        cfg = CustomRulesConfiguration()
        assert cfg.children == ()
        assert cfg.console_description == "user-defined"

    def test_apply_keeps_declaration_order(self) -> None:
        cfg = CustomRulesConfiguration().apply(
            {"zeta": {"regex": "z+"}, "alpha": {"regex": "a+"}}
        )
        assert [c.identifier for c in cfg.children] == ["zeta", "alpha"]
        assert cfg.console_description == "zeta, alpha"

    def test_apply_rejects_non_mapping(self) -> None:
        with pytest.raises(ValueError):
            CustomRulesConfiguration().apply(["zeta"])


class TestBuildConfiguration:
    def test_known_types(self) -> None:
        assert isinstance(build_configuration({"type": "severity"}), SeverityConfiguration)
        levels = build_configuration({"type": "severity_levels", "warning": 10, "error": 20})
        assert levels == SeverityLevelsConfiguration(10, 20)
        assert isinstance(build_configuration({"type": "custom_rules"}), CustomRulesConfiguration)

    @pytest.mark.parametrize(
        "spec",
        [
            {"type": "bogus"},
            {},
            {"type": "severity_levels"},
            {"type": "severity", "severity": "loud"},
        ],
    )
    def test_invalid_specs_raise_registry_error(self, spec) -> None:
        with pytest.raises(RegistryError):
            build_configuration(spec)


class TestRuleConfigurationBase:
    def test_base_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            RuleConfiguration()

    def test_variant_must_implement_apply(self) -> None:
        class DescriptionOnly(RuleConfiguration):
            @property
            def console_description(self) -> str:
                return "fixed"

        with pytest.raises(TypeError, match="apply"):
            DescriptionOnly()
