# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for loading configuration documents from disk."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from lintcore.config.cascade import resolve_for_file
from lintcore.config.loaders import FileConfigResolver, load_config_file, read_config_document
from lintcore.errors import ConfigError


def test_load_json_config(tmp_path: Path) -> None:
    path = tmp_path / "lintrc.json"
    payload = {"root": True, "rules": {"semi": ["error", "always"]}, "overrides": [{"files": "*.ts", "parser": "ts"}]}
    path.write_text(json.dumps(payload), encoding="utf-8")

    config = load_config_file(path)

    assert config.root is True
    assert config.to_dict() == payload


def test_load_toml_config(tmp_path: Path) -> None:
    path = tmp_path / "lintrc.toml"
    path.write_text(
        """
root = true
plugins = ["react"]

[env]
browser = true

[rules]
semi = "error"
quotes = ["warn", "double"]

[[overrides]]
files = ["*.test.js"]
env = { jest = true }
""".strip(),
        encoding="utf-8",
    )

    config = load_config_file(path)

    assert config.plugins == ["react"]
    assert config.rules == {"semi": "error", "quotes": ["warn", "double"]}
    assert config.overrides is not None
    assert config.overrides[0].env == {"jest": True}


def test_missing_file_is_reported(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="does not exist"):
        load_config_file(tmp_path / "absent.json")


def test_unsupported_suffix_is_reported(tmp_path: Path) -> None:
    path = tmp_path / "lintrc.yaml"
    path.write_text("root: true\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Unsupported configuration format"):
        read_config_document(path)


@pytest.mark.parametrize(
    ("name", "content", "fragment"),
    [
        ("broken.json", "{not json", "Unable to parse"),
        ("broken.toml", "root = = true", "Unable to parse"),
        ("list.json", "[1, 2]", "must be an object"),
        ("invalid.json", '{"rules": {"semi": 9}}', "rule 'semi'"),
    ],
)
def test_invalid_documents_name_the_file(tmp_path: Path, name: str, content: str, fragment: str) -> None:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError) as excinfo:
        load_config_file(path)

    assert fragment in str(excinfo.value)
    assert str(path) in str(excinfo.value)


def test_file_resolver_follows_relative_extends(tmp_path: Path) -> None:
    shared = tmp_path / "shared"
    shared.mkdir()
    (shared / "base.json").write_text(
        json.dumps({"extends": "./strict.json", "rules": {"semi": "warn"}}),
        encoding="utf-8",
    )
    (shared / "strict.json").write_text(json.dumps({"rules": {"semi": "error", "eqeqeq": 2}}), encoding="utf-8")
    root = tmp_path / "lintrc.json"
    root.write_text(json.dumps({"extends": "shared/base.json", "rules": {"curly": 1}}), encoding="utf-8")

    config = load_config_file(root)
    effective = resolve_for_file(config, "a.js", resolver=FileConfigResolver(tmp_path))

    assert effective.rules == {"semi": "warn", "eqeqeq": 2, "curly": 1}
