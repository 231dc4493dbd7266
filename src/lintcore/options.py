# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Validation and defaulting of caller-supplied linter options.

Raw options arrive as a mapping keyed by camelCase option names. Validation
rejects unknown keys first, then checks every recognised option in a fixed
order and stops at the first mismatch. The working directory is only read
when ``cwd`` is absent, through an injectable provider, and is frozen into the
returned record.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Final

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .config.models import ConfigData, parse_config_data
from .errors import OptionsError, OptionTypeError, UnknownOptionsError
from .plugins import PluginRegistry

LOGGER = logging.getLogger(__name__)

CwdProvider = Callable[[], str]

DEFAULT_CACHE_LOCATION: Final[str] = ".eslintcache"
DEFAULT_PARSER: Final[str] = "espree"
DEFAULT_FIX_TYPES: Final[tuple[str, ...]] = ("problem", "suggestion", "layout")


class ValueKind(str, Enum):
    """Enumerate the value shapes an option may accept."""

    BOOLEAN = "boolean"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"
    NULL = "null"

    def accepts(self, value: object) -> bool:
        """Return whether ``value`` has this shape."""

        if self is ValueKind.BOOLEAN:
            return isinstance(value, bool)
        if self is ValueKind.STRING:
            return isinstance(value, str)
        if self is ValueKind.ARRAY:
            return isinstance(value, (list, tuple))
        if self is ValueKind.OBJECT:
            return isinstance(value, Mapping)
        return value is None


@dataclass(frozen=True, slots=True)
class OptionSpec:
    """Describe the default and accepted shapes of one option."""

    name: str
    kinds: tuple[ValueKind, ...]
    expected: str
    default: Callable[[Mapping[str, Any], CwdProvider], object]

    def accepts(self, value: object) -> bool:
        """Return whether ``value`` satisfies any accepted shape."""

        return any(kind.accepts(value) for kind in self.kinds)


def _constant(value: object) -> Callable[[Mapping[str, Any], CwdProvider], object]:
    def factory(_resolved: Mapping[str, Any], _cwd: CwdProvider) -> object:
        return list(value) if isinstance(value, tuple) else value

    return factory


def _current_directory(_resolved: Mapping[str, Any], cwd_provider: CwdProvider) -> object:
    return cwd_provider()


def _resolved_cwd(resolved: Mapping[str, Any], _cwd: CwdProvider) -> object:
    return resolved["cwd"]


_BOOLEAN = (ValueKind.BOOLEAN,)
_STRING = (ValueKind.STRING,)
_ARRAY = (ValueKind.ARRAY,)
_OBJECT_OR_NULL = (ValueKind.OBJECT, ValueKind.NULL)

# Validation order; the first failing option is reported.
OPTION_SPECS: Final[tuple[OptionSpec, ...]] = (
    OptionSpec("allowInlineConfig", _BOOLEAN, "a boolean", _constant(True)),
    OptionSpec("baseConfig", _OBJECT_OR_NULL, "an object or null", _constant(None)),
    OptionSpec("cache", _BOOLEAN, "a boolean", _constant(False)),
    OptionSpec("cacheLocation", _STRING, "a string", _constant(DEFAULT_CACHE_LOCATION)),
    OptionSpec("configFile", (ValueKind.STRING, ValueKind.NULL), "a string or null", _constant(None)),
    OptionSpec("cwd", _STRING, "a string", _current_directory),
    OptionSpec("envs", _ARRAY, "an array", _constant(())),
    OptionSpec("extensions", (ValueKind.ARRAY, ValueKind.NULL), "an array or null", _constant(None)),
    OptionSpec("fix", _BOOLEAN, "a boolean", _constant(False)),
    OptionSpec("fixTypes", _ARRAY, "an array", _constant(DEFAULT_FIX_TYPES)),
    OptionSpec("globals", _ARRAY, "an array", _constant(())),
    OptionSpec("globInputPaths", _BOOLEAN, "a boolean", _constant(True)),
    OptionSpec("ignore", _BOOLEAN, "a boolean", _constant(True)),
    OptionSpec("ignorePath", (ValueKind.STRING, ValueKind.NULL), "a string or null", _constant(None)),
    OptionSpec(
        "ignorePattern",
        (ValueKind.STRING, ValueKind.ARRAY),
        "a string or an array of strings",
        _constant(()),
    ),
    OptionSpec("parser", _STRING, "a string", _constant(DEFAULT_PARSER)),
    OptionSpec("parserOptions", _OBJECT_OR_NULL, "an object or null", _constant(None)),
    OptionSpec("plugins", _ARRAY, "an array", _constant(())),
    OptionSpec("reportUnusedDisableDirectives", _BOOLEAN, "a boolean", _constant(False)),
    OptionSpec("resolvePluginsRelativeTo", _STRING, "a string", _resolved_cwd),
    OptionSpec("rulePaths", _ARRAY, "an array", _constant(())),
    OptionSpec("rules", _OBJECT_OR_NULL, "an object or null", _constant(None)),
    OptionSpec("useEslintrc", _BOOLEAN, "a boolean", _constant(True)),
)

RECOGNIZED_OPTIONS: Final[frozenset[str]] = frozenset(spec.name for spec in OPTION_SPECS)


class LinterOptions(BaseModel):
    """Validated options handed to the engine.

    Attributes use snake_case; :meth:`to_dict` produces the camelCase mapping
    the engine consumes. ``plugins`` holds identifiers only.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    allow_inline_config: bool
    base_config: dict[str, Any] | None
    cache: bool
    cache_location: str
    config_file: str | None
    cwd: str
    envs: tuple[Any, ...]
    extensions: tuple[Any, ...] | None
    fix: bool
    fix_types: tuple[Any, ...]
    globals: tuple[Any, ...]
    glob_input_paths: bool
    ignore: bool
    ignore_path: str | None
    ignore_pattern: str | tuple[Any, ...]
    parser: str
    parser_options: dict[str, Any] | None
    plugins: tuple[str, ...]
    report_unused_disable_directives: bool
    resolve_plugins_relative_to: str
    rule_paths: tuple[Any, ...]
    rules: dict[str, Any] | None
    use_eslintrc: bool

    def to_dict(self) -> dict[str, Any]:
        """Return the engine-options mapping keyed by option name.

        Returns:
            dict[str, Any]: Every option, with sequences rendered as lists.
        """

        payload: dict[str, Any] = {}
        for name in self.__class__.model_fields:
            value = getattr(self, name)
            key = to_camel(name)
            payload[key] = list(value) if isinstance(value, tuple) else value
        return payload

    def base_config_data(self) -> ConfigData | None:
        """Return ``baseConfig`` validated as a configuration record."""

        if self.base_config is None:
            return None
        return parse_config_data(self.base_config, source="baseConfig")


def find_unknown_options(raw: Mapping[str, object]) -> list[str]:
    """Return keys of ``raw`` that are not recognised, in encounter order."""

    return [str(key) for key in raw if key not in RECOGNIZED_OPTIONS]


def validate_options(
    raw: Mapping[str, object] | None = None,
    *,
    cwd_provider: CwdProvider = os.getcwd,
) -> LinterOptions:
    """Validate ``raw`` options and apply defaults.

    Args:
        raw: Caller-supplied options keyed by option name. ``None`` is treated
            as an empty mapping.
        cwd_provider: Callable returning the working directory; only invoked
            when ``cwd`` is not supplied.

    Returns:
        LinterOptions: Fully populated options with plugin entries reduced
        to their identifiers.

    Raises:
        OptionsError: If ``raw`` is not a mapping.
        UnknownOptionsError: If ``raw`` contains unrecognised keys.
        OptionTypeError: If a recognised option has the wrong type or a plugin
            entry is malformed.
    """

    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise OptionsError("options must be an object.")
    unknown = find_unknown_options(raw)
    if unknown:
        raise UnknownOptionsError(unknown)

    resolved: dict[str, Any] = {}
    for spec in OPTION_SPECS:
        value = raw[spec.name] if spec.name in raw else spec.default(resolved, cwd_provider)
        if not spec.accepts(value):
            raise OptionTypeError(spec.name, spec.expected)
        resolved[spec.name] = value

    registry = PluginRegistry.from_entries(resolved["plugins"])
    resolved["plugins"] = registry.identifiers()
    for key in ("baseConfig", "parserOptions", "rules"):
        if resolved[key] is not None:
            resolved[key] = dict(resolved[key])
    options = LinterOptions.model_validate(resolved)
    LOGGER.debug(
        "validated linter options cwd=%s plugins=%d supplied=%s",
        options.cwd,
        len(options.plugins),
        ",".join(raw),
    )
    return options


__all__ = [
    "DEFAULT_CACHE_LOCATION",
    "DEFAULT_FIX_TYPES",
    "DEFAULT_PARSER",
    "LinterOptions",
    "OPTION_SPECS",
    "OptionSpec",
    "RECOGNIZED_OPTIONS",
    "ValueKind",
    "find_unknown_options",
    "validate_options",
]
