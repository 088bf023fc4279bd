import logging
import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'lintdex' and tests/ importable for helpers
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from lintdex.core.rules import RulesRegistry
from lintdex.core.stdlib_logging import reset_stdlib_logging_for_tests
from helpers.rules import make_rule_type


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch):
    """Each test starts without terminal-width or settings overrides."""
    monkeypatch.delenv("COLUMNS", raising=False)
    for key in list(os.environ):
        if key.startswith("LINTDEX_"):
            monkeypatch.delenv(key, raising=False)

    root = logging.getLogger()
    saved_level = root.level
    yield
    reset_stdlib_logging_for_tests()
    root.setLevel(saved_level)


@pytest.fixture
def two_rule_registry() -> RulesRegistry:
    """rule_b is registered before rule_a on purpose."""
    return RulesRegistry(
        [
            make_rule_type("rule_b", "lint"),
            make_rule_type("rule_a", "style"),
        ]
    )


@pytest.fixture
def mixed_registry() -> RulesRegistry:
    return RulesRegistry(
        [
            make_rule_type("default_rule", "lint"),
            make_rule_type("optin_rule", "idiomatic", opt_in=True),
            make_rule_type("analyzer_rule", "lint", analyzer=True, correctable=True),
            make_rule_type(
                "thresholds",
                "metrics",
                configuration={"type": "severity_levels", "warning": 10, "error": 20},
            ),
            make_rule_type("custom_rules", "style", configuration={"type": "custom_rules"}),
        ]
    )


@pytest.fixture
def in_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty project directory with a wide terminal."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("COLUMNS", "200")
    return tmp_path
