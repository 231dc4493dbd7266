# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for effective-configuration resolution across extends and overrides."""

from __future__ import annotations

from pathlib import PurePosixPath

import pytest

from lintcore.config.cascade import matches_file, merge_config, resolve_extends, resolve_for_file
from lintcore.config.models import ConfigData, OverrideConfigData, parse_config_data
from lintcore.errors import ConfigError


def _resolver(configs: dict[str, dict[str, object]]):
    def resolve(name: str) -> ConfigData:
        return parse_config_data(configs[name], source=name)

    return resolve


def test_later_matching_override_wins() -> None:
    config = parse_config_data(
        {
            "rules": {"semi": "off"},
            "overrides": [
                {"files": "src/**/*.js", "rules": {"semi": "warn"}},
                {"files": "*.js", "rules": {"semi": "error"}},
            ],
        }
    )

    effective = resolve_for_file(config, "src/app/main.js")

    assert effective.rules == {"semi": "error"}


def test_override_order_does_not_affect_matching() -> None:
    config = parse_config_data(
        {
            "overrides": [
                {"files": "*.js", "rules": {"semi": "error"}},
                {"files": "*.ts", "rules": {"semi": "warn"}},
            ],
        }
    )

    assert resolve_for_file(config, "lib/index.js").rules == {"semi": "error"}
    assert resolve_for_file(config, "lib/index.ts").rules == {"semi": "warn"}
    assert resolve_for_file(config, "README.md").rules is None


def test_excluded_files_veto_a_match() -> None:
    override = OverrideConfigData(files=["*.js"], excluded_files="vendor/**")

    assert matches_file(override, "src/app.js")
    assert not matches_file(override, "vendor/lib/app.js")


def test_glob_patterns_with_directories_are_relative_to_base_dir() -> None:
    override = OverrideConfigData(files="tests/**/*.js")

    assert matches_file(override, PurePosixPath("/repo/tests/unit/a.js"), base_dir="/repo")
    assert matches_file(override, "/repo/tests/a.js", base_dir="/repo")
    assert not matches_file(override, "/repo/src/tests.js", base_dir="/repo")
    assert matches_file(OverrideConfigData(files="./tests/*.js"), "tests/a.js")


def test_single_star_stays_within_one_directory() -> None:
    override = OverrideConfigData(files="src/*.js")

    assert matches_file(override, "src/a.js")
    assert not matches_file(override, "src/deep/a.js")
    assert not matches_file(OverrideConfigData(files="src/**/index.js"), "src/deep/main.js")
    assert matches_file(OverrideConfigData(files="src/**/index.js"), "src/a/b/index.js")


def test_extends_are_applied_in_order_before_own_settings() -> None:
    resolve = _resolver(
        {
            "first": {"rules": {"semi": "error", "quotes": ["warn", "double"]}},
            "second": {"rules": {"semi": "warn"}, "env": {"node": True}},
        }
    )
    config = parse_config_data({"extends": ["first", "second"], "rules": {"eqeqeq": 2}, "env": {"browser": True}})

    effective = resolve_for_file(config, "a.js", resolver=resolve)

    assert effective.rules == {"semi": "warn", "quotes": ["warn", "double"], "eqeqeq": 2}
    assert effective.env == {"node": True, "browser": True}
    assert effective.extends is None


def test_extends_resolved_before_overrides_of_same_level() -> None:
    resolve = _resolver({"base": {"rules": {"semi": "error"}}})
    config = parse_config_data(
        {"extends": "base", "overrides": [{"files": "*.js", "rules": {"semi": "off"}}]},
    )

    assert resolve_for_file(config, "a.js", resolver=resolve).rules == {"semi": "off"}


def test_overrides_of_extended_configs_are_applied() -> None:
    resolve = _resolver({"base": {"overrides": [{"files": "*.spec.js", "env": {"jest": True}}]}})
    config = parse_config_data({"extends": "base"})

    assert resolve_for_file(config, "a.spec.js", resolver=resolve).env == {"jest": True}
    assert resolve_for_file(config, "a.js", resolver=resolve).env is None


def test_own_rules_beat_overrides_of_extended_configs() -> None:
    resolve = _resolver({"parent": {"overrides": [{"files": "*.ts", "rules": {"semi": "off", "quotes": 1}}]}})
    config = parse_config_data({"extends": "parent", "rules": {"semi": "error"}})

    assert resolve_for_file(config, "a.ts", resolver=resolve).rules == {"semi": "error", "quotes": 1}
    assert resolve_for_file(config, "a.js", resolver=resolve).rules == {"semi": "error"}


def test_own_overrides_apply_after_extended_overrides() -> None:
    resolve = _resolver({"parent": {"overrides": [{"files": "*.ts", "rules": {"semi": "off"}}]}})
    config = parse_config_data(
        {
            "extends": "parent",
            "rules": {"semi": "error"},
            "overrides": [{"files": "*.ts", "rules": {"semi": "warn"}}],
        }
    )

    assert resolve_for_file(config, "a.ts", resolver=resolve).rules == {"semi": "warn"}


def test_override_extends_are_resolved() -> None:
    resolve = _resolver({"testing": {"globals": {"describe": "readonly"}}})
    config = parse_config_data({"overrides": [{"files": "*.test.js", "extends": "testing"}]})

    assert resolve_for_file(config, "x.test.js", resolver=resolve).globals == {"describe": "readonly"}


def test_circular_extends_are_reported() -> None:
    resolve = _resolver({"a": {"extends": "b"}, "b": {"extends": "a"}})
    config = parse_config_data({"extends": "a"})

    with pytest.raises(ConfigError, match="Circular extends detected: a -> b -> a"):
        resolve_extends(config, resolve, "a.js")


def test_extends_without_resolver_fails() -> None:
    with pytest.raises(ConfigError, match="without a resolver"):
        resolve_for_file(parse_config_data({"extends": "base"}), "a.js")


def test_maps_merge_key_wise() -> None:
    config = parse_config_data(
        {
            "env": {"browser": True},
            "globals": {"window": "readonly"},
            "settings": {"react": {"version": "17", "pragma": "React"}},
            "parserOptions": {"ecmaVersion": 2018, "ecmaFeatures": {"jsx": True}},
            "overrides": [
                {
                    "files": "*.js",
                    "env": {"node": True},
                    "globals": {"process": "readonly"},
                    "settings": {"react": {"version": "18"}},
                    "parserOptions": {"ecmaFeatures": {"globalReturn": True}},
                }
            ],
        }
    )

    effective = resolve_for_file(config, "a.js")

    assert effective.env == {"browser": True, "node": True}
    assert effective.globals == {"window": "readonly", "process": "readonly"}
    assert effective.settings == {"react": {"version": "18", "pragma": "React"}}
    assert effective.to_dict()["parserOptions"] == {
        "ecmaVersion": 2018,
        "ecmaFeatures": {"jsx": True, "globalReturn": True},
    }


def test_severity_only_override_keeps_rule_options() -> None:
    merged = merge_config({"rules": {"quotes": ["error", "single"]}}, {"rules": {"quotes": "warn"}})

    assert merged["rules"] == {"quotes": ["warn", "single"]}


def test_plugins_are_concatenated_without_duplicates() -> None:
    merged = merge_config({"plugins": ["react", "import"]}, {"plugins": ["import", "jest"]})

    assert merged["plugins"] == ["react", "import", "jest"]


def test_nested_overrides_apply_after_their_parent() -> None:
    config = parse_config_data(
        {
            "overrides": [
                {
                    "files": "*.js",
                    "rules": {"semi": "warn"},
                    "overrides": [{"files": "*.min.js", "rules": {"semi": "off"}}],
                }
            ],
        }
    )

    assert resolve_for_file(config, "a.js").rules == {"semi": "warn"}
    assert resolve_for_file(config, "a.min.js").rules == {"semi": "off"}


def test_effective_config_is_flat_and_reports_directive_flag() -> None:
    config = parse_config_data(
        {
            "overrides": [{"files": "*.js", "reportUnusedDisableDirectives": True}],
        }
    )

    matched = resolve_for_file(config, "a.js")
    unmatched = resolve_for_file(config, "a.css")

    assert matched.overrides is None
    assert matched.report_unused_disable_directives is True
    assert unmatched.report_unused_disable_directives is False
    assert unmatched.to_dict()["reportUnusedDisableDirectives"] is False


def test_resolution_leaves_input_untouched() -> None:
    payload = {"rules": {"semi": "off"}, "overrides": [{"files": "*.js", "rules": {"semi": "error"}}]}
    config = parse_config_data(payload)
    before = config.to_dict()

    resolve_for_file(config, "a.js")

    assert config.to_dict() == before
    assert payload["rules"] == {"semi": "off"}
