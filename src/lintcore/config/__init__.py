# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models, cascade resolution and file loading."""

from __future__ import annotations

from .cascade import ExtendsResolver, matches_file, merge_config, resolve_extends, resolve_for_file
from .loaders import FileConfigResolver, load_config_file, read_config_document
from .models import (
    ConfigData,
    EcmaFeatures,
    OverrideConfigData,
    ParserOptions,
    Severity,
    normalize_global,
    parse_config_data,
    rule_severity,
    severity_level,
)

__all__ = [
    "ConfigData",
    "EcmaFeatures",
    "ExtendsResolver",
    "FileConfigResolver",
    "OverrideConfigData",
    "ParserOptions",
    "Severity",
    "load_config_file",
    "matches_file",
    "merge_config",
    "normalize_global",
    "parse_config_data",
    "read_config_document",
    "resolve_extends",
    "resolve_for_file",
    "rule_severity",
    "severity_level",
]
