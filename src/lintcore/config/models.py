# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Cascading configuration models consumed by the lint engine.

The models mirror the on-disk configuration format: field names are exposed
in camelCase through aliases so that a document loaded from JSON or TOML dumps
back to the same shape. Only the keys a document actually sets are dumped,
which keeps unset values distinguishable from explicit ones when configs are
layered on top of each other.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import IntEnum
from typing import Any, Final, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from ..errors import ConfigError
from .types import GlobPatterns, OpaqueValue


class Severity(IntEnum):
    """Ordinal severity levels assigned to rules."""

    OFF = 0
    WARN = 1
    ERROR = 2


SeverityConf: TypeAlias = Literal[0, 1, 2, "off", "warn", "error"]
RuleConf: TypeAlias = SeverityConf | list[Any]
GlobalConf: TypeAlias = bool | Literal["off", "readable", "readonly", "writable", "writeable"]
EcmaVersion: TypeAlias = Literal[3, 5, 6, 7, 8, 9, 10, 11, 2015, 2016, 2017, 2018, 2019, 2020]
SourceType: TypeAlias = Literal["script", "module"]

_SEVERITY_BY_NAME: Final[dict[str, Severity]] = {
    "off": Severity.OFF,
    "warn": Severity.WARN,
    "error": Severity.ERROR,
}
_GLOBAL_ALIASES: Final[dict[object, str]] = {
    "off": "off",
    "readable": "readonly",
    "readonly": "readonly",
    "writable": "writable",
    "writeable": "writable",
}


def is_severity(value: object) -> bool:
    """Return ``True`` when ``value`` is a valid severity configuration."""

    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value in (0, 1, 2)
    return isinstance(value, str) and value in _SEVERITY_BY_NAME


def severity_level(conf: object) -> Severity:
    """Return the ordinal severity for a severity configuration.

    Args:
        conf: Numeric or named severity.

    Returns:
        Severity: Ordinal level corresponding to ``conf``.

    Raises:
        ValueError: If ``conf`` is not a recognised severity.
    """

    if not is_severity(conf):
        raise ValueError(f"invalid severity {conf!r}; expected 0, 1, 2, 'off', 'warn' or 'error'")
    if isinstance(conf, str):
        return _SEVERITY_BY_NAME[conf]
    return Severity(conf)


def validate_rule_conf(value: object) -> RuleConf:
    """Return ``value`` unchanged when it is a valid rule configuration.

    Raises:
        ValueError: If ``value`` is neither a severity nor a list led by one.
    """

    if is_severity(value):
        return value  # type: ignore[return-value]
    if isinstance(value, Sequence) and not isinstance(value, str):
        items = list(value)
        if items and is_severity(items[0]):
            return items
        raise ValueError("rule configuration arrays must start with a severity")
    raise ValueError(f"invalid rule configuration {value!r}")


def rule_severity(conf: object) -> Severity:
    """Return the severity of a rule configuration in either of its shapes."""

    if isinstance(conf, Sequence) and not isinstance(conf, str):
        return severity_level(conf[0] if conf else None)
    return severity_level(conf)


def rule_options(conf: object) -> list[Any]:
    """Return the rule-specific options following the severity, if any."""

    if isinstance(conf, Sequence) and not isinstance(conf, str):
        return list(conf[1:])
    return []


def with_severity(conf: object, severity: object) -> RuleConf:
    """Return ``conf`` with its severity replaced and its options preserved."""

    if not is_severity(severity):
        raise ValueError(f"invalid severity {severity!r}")
    options = rule_options(conf)
    return [severity, *options] if options else severity  # type: ignore[return-value]


def normalize_global(conf: object) -> str:
    """Collapse a global declaration to ``off``, ``readonly`` or ``writable``.

    Raises:
        ValueError: If ``conf`` is not a recognised global configuration.
    """

    if conf is True:
        return "writable"
    if conf is False:
        return "off"
    if isinstance(conf, str) and conf in _GLOBAL_ALIASES:
        return _GLOBAL_ALIASES[conf]
    raise ValueError(f"invalid global configuration {conf!r}")


class _ConfigModel(BaseModel):
    """Base model exposing camelCase aliases and round-trip dumping."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation containing only explicitly set keys."""

        return self.model_dump(mode="python", by_alias=True, exclude_unset=True)


class EcmaFeatures(_ConfigModel):
    """Optional syntax toggles forwarded to the parser."""

    model_config = ConfigDict(extra="allow")

    global_return: bool | None = None
    jsx: bool | None = None
    implied_strict: bool | None = None


class ParserOptions(_ConfigModel):
    """Parser settings passed through to the selected parser."""

    model_config = ConfigDict(extra="allow")

    ecma_features: EcmaFeatures | None = None
    ecma_version: EcmaVersion | None = None
    source_type: SourceType | None = None


class _SharedConfigFields(_ConfigModel):
    """Fields shared by root configurations and file-scoped overrides."""

    env: dict[str, bool] | None = None
    extends: GlobPatterns | None = None
    globals: dict[str, OpaqueValue] | None = None
    no_inline_config: bool | None = None
    overrides: list[OverrideConfigData] | None = None
    parser: str | None = None
    parser_options: ParserOptions | None = None
    plugins: list[str] | None = None
    processor: str | None = None
    rules: dict[str, OpaqueValue] | None = None
    settings: dict[str, OpaqueValue] | None = None

    @field_validator("rules")
    @classmethod
    def _check_rules(cls, value: dict[str, Any] | None) -> dict[str, Any] | None:
        if value is None:
            return value
        for rule_id, conf in value.items():
            try:
                validate_rule_conf(conf)
            except ValueError as exc:
                raise ValueError(f"rule '{rule_id}': {exc}") from exc
        return value

    @field_validator("globals")
    @classmethod
    def _check_globals(cls, value: dict[str, Any] | None) -> dict[str, Any] | None:
        if value is None:
            return value
        for name, conf in value.items():
            try:
                normalize_global(conf)
            except ValueError as exc:
                raise ValueError(f"global '{name}': {exc}") from exc
        return value

    def extends_list(self) -> list[str]:
        """Return ``extends`` as a list regardless of its declared shape."""

        return _as_list(self.extends)


class OverrideConfigData(_SharedConfigFields):
    """Configuration applied to files matching ``files`` but not ``excludedFiles``."""

    files: GlobPatterns
    excluded_files: GlobPatterns | None = None
    report_unused_disable_directives: bool | None = None

    @field_validator("files")
    @classmethod
    def _require_patterns(cls, value: GlobPatterns) -> GlobPatterns:
        if not _as_list(value):
            raise ValueError("files must contain at least one glob pattern")
        return value

    def file_patterns(self) -> list[str]:
        """Return the inclusion globs as a list."""

        return _as_list(self.files)

    def excluded_patterns(self) -> list[str]:
        """Return the exclusion globs as a list."""

        return _as_list(self.excluded_files)


class ConfigData(_SharedConfigFields):
    """Root configuration record for an analysis run.

    ``reportUnusedDisableDirectives`` always reads as a boolean, but
    :meth:`to_dict` only dumps it when the document set it. A loaded document
    therefore dumps back unchanged, while a record built without the key
    dumps without it even though the attribute is ``False``.
    """

    ignore_patterns: GlobPatterns | None = None
    report_unused_disable_directives: bool = False
    root: bool | None = None


def _as_list(value: GlobPatterns | None) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


_SharedConfigFields.model_rebuild()
OverrideConfigData.model_rebuild()
ConfigData.model_rebuild()


def parse_config_data(payload: Mapping[str, Any] | ConfigData, *, source: str | None = None) -> ConfigData:
    """Validate ``payload`` into a :class:`ConfigData` instance.

    Args:
        payload: Raw configuration mapping or an already validated record.
        source: Optional description of where the payload came from, used in
            error messages.

    Returns:
        ConfigData: Validated configuration record.

    Raises:
        ConfigError: If the payload does not match the configuration schema.
    """

    if isinstance(payload, ConfigData):
        return payload
    if not isinstance(payload, Mapping):
        raise ConfigError(f"{source or 'configuration'} must be an object")
    try:
        return ConfigData.model_validate(dict(payload))
    except ValidationError as exc:
        raise ConfigError(_describe_validation_error(exc, source)) from exc


def _describe_validation_error(exc: ValidationError, source: str | None) -> str:
    details = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "<root>"
        details.append(f"{location}: {error['msg']}")
    prefix = f"Invalid configuration in {source}" if source else "Invalid configuration"
    return f"{prefix}: " + "; ".join(details)


__all__ = [
    "ConfigData",
    "EcmaFeatures",
    "EcmaVersion",
    "GlobalConf",
    "OverrideConfigData",
    "ParserOptions",
    "RuleConf",
    "Severity",
    "SeverityConf",
    "SourceType",
    "is_severity",
    "normalize_global",
    "parse_config_data",
    "rule_options",
    "rule_severity",
    "severity_level",
    "validate_rule_conf",
    "with_severity",
]
