# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Options normalization and cascading configuration for the lint engine."""

from __future__ import annotations

from .config.models import ConfigData, OverrideConfigData
from .errors import ConfigError, OptionsError, OptionTypeError, UnknownOptionsError
from .linter import Linter, create_linter
from .options import LinterOptions, validate_options
from .plugins import PluginById, PluginRegistry, PluginWithDefinition

__all__ = [
    "ConfigData",
    "ConfigError",
    "Linter",
    "LinterOptions",
    "OptionTypeError",
    "OptionsError",
    "OverrideConfigData",
    "PluginById",
    "PluginRegistry",
    "PluginWithDefinition",
    "UnknownOptionsError",
    "create_linter",
    "validate_options",
]
