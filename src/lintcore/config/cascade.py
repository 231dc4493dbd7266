# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve the effective configuration for a single file.

The engine owns cascade resolution during a run; these helpers implement the
same ordering rules so callers can inspect what a configuration means for a
given path without running the engine:

* ``extends`` entries are layered first, in declaration order. Each one is
  flattened with its own matching overrides before the extending
  configuration is applied on top.
* ``overrides`` of a configuration apply after its own settings, in array
  order, so later entries win on conflicting keys for files they both match.
* ``rules``, ``globals``, ``env``, ``settings`` and ``parserOptions`` merge
  key-wise instead of being replaced.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from fnmatch import fnmatchcase
from pathlib import PurePath, PurePosixPath
from typing import Any, Final, TypeAlias

from ..errors import ConfigError
from .models import ConfigData, OverrideConfigData, is_severity, rule_options

LOGGER = logging.getLogger(__name__)

ExtendsResolver: TypeAlias = Callable[[str], ConfigData]

_KEYWISE_SECTIONS: Final[frozenset[str]] = frozenset({"env", "globals"})
_DEEP_SECTIONS: Final[frozenset[str]] = frozenset({"settings", "parserOptions"})
_CASCADE_ONLY_KEYS: Final[frozenset[str]] = frozenset({"extends", "overrides", "files", "excludedFiles"})


def matches_file(
    override: OverrideConfigData,
    file_path: str | PurePath,
    *,
    base_dir: str | PurePath | None = None,
) -> bool:
    """Return whether ``override`` applies to ``file_path``.

    Patterns without a ``/`` are compared with the file name alone; other
    patterns are compared segment by segment with the path relative to
    ``base_dir``, where ``*`` stays inside one segment and ``**`` spans any
    number of them.

    Args:
        override: Override whose ``files``/``excludedFiles`` are evaluated.
        file_path: Path of the analysed file.
        base_dir: Directory the override globs are relative to.

    Returns:
        bool: ``True`` when a ``files`` glob matches and no ``excludedFiles``
        glob vetoes the match.
    """

    relative = _relative_posix(file_path, base_dir)
    if not any(_glob_match(pattern, relative) for pattern in override.file_patterns()):
        return False
    return not any(_glob_match(pattern, relative) for pattern in override.excluded_patterns())


def merge_config(base: Mapping[str, Any], layer: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``layer`` applied on top of ``base`` using cascade semantics.

    Args:
        base: Wire-format configuration that ``layer`` refines.
        layer: Wire-format configuration taking precedence.

    Returns:
        dict[str, Any]: New mapping; neither argument is modified.
    """

    result: dict[str, Any] = dict(base)
    for key, value in layer.items():
        if key in _CASCADE_ONLY_KEYS:
            continue
        current = result.get(key)
        if key == "rules" and isinstance(current, Mapping) and isinstance(value, Mapping):
            result[key] = _merge_rules(current, value)
        elif key in _KEYWISE_SECTIONS and isinstance(current, Mapping) and isinstance(value, Mapping):
            result[key] = {**current, **value}
        elif key in _DEEP_SECTIONS and isinstance(current, Mapping) and isinstance(value, Mapping):
            result[key] = _deep_merge(current, value)
        elif key == "plugins" and isinstance(current, list) and isinstance(value, list):
            result[key] = list(dict.fromkeys([*current, *value]))
        else:
            result[key] = value
    return result


def resolve_extends(
    config: ConfigData | OverrideConfigData,
    resolver: ExtendsResolver | None,
    file_path: str | PurePath,
    *,
    base_dir: str | PurePath | None = None,
    _chain: tuple[str, ...] = (),
) -> dict[str, Any]:
    """Return the wire form of ``config`` flattened for ``file_path``.

    Layers are applied in this order: every extended configuration (itself
    flattened, so its own matching overrides are already in place), then
    ``config``, then the overrides of ``config`` that match ``file_path``.

    Args:
        config: Configuration whose ``extends`` entries should be resolved.
        resolver: Callable returning the configuration named by an entry.
        file_path: Path of the analysed file, used to select overrides.
        base_dir: Directory that override globs are relative to.
        _chain: Entries currently being resolved, used for cycle detection.

    Returns:
        dict[str, Any]: Flattened configuration without ``extends`` or
        ``overrides``.

    Raises:
        ConfigError: If an entry cannot be resolved or the chain is circular.
    """

    merged: dict[str, Any] = {}
    for name in config.extends_list():
        if name in _chain:
            raise ConfigError("Circular extends detected: " + " -> ".join((*_chain, name)))
        if resolver is None:
            raise ConfigError(f"Cannot resolve extends '{name}' without a resolver")
        parent = resolver(name)
        LOGGER.debug("resolved extends %s", name)
        layer = resolve_extends(parent, resolver, file_path, base_dir=base_dir, _chain=(*_chain, name))
        merged = merge_config(merged, layer)
    merged = merge_config(merged, config.to_dict())
    for index, override in enumerate(config.overrides or ()):
        if not matches_file(override, file_path, base_dir=base_dir):
            continue
        LOGGER.debug("override %d applies to %s", index, file_path)
        layer = resolve_extends(override, resolver, file_path, base_dir=base_dir, _chain=_chain)
        merged = merge_config(merged, layer)
    return merged


def resolve_for_file(
    config: ConfigData,
    file_path: str | PurePath,
    *,
    base_dir: str | PurePath | None = None,
    resolver: ExtendsResolver | None = None,
) -> ConfigData:
    """Return the effective configuration for ``file_path``.

    Args:
        config: Root configuration.
        file_path: Path of the analysed file.
        base_dir: Directory that override globs are relative to.
        resolver: Callable resolving ``extends`` entries.

    Returns:
        ConfigData: Flattened configuration without ``extends`` or
        ``overrides``; ``reportUnusedDisableDirectives`` is always set.
    """

    effective = resolve_extends(config, resolver, file_path, base_dir=base_dir)
    if effective.get("reportUnusedDisableDirectives") is None:
        effective["reportUnusedDisableDirectives"] = False
    return ConfigData.model_validate(effective)


def _merge_rules(base: Mapping[str, Any], layer: Mapping[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = dict(base)
    for rule_id, conf in layer.items():
        previous = result.get(rule_id)
        # A bare severity keeps the options configured further up the cascade.
        if is_severity(conf) and previous is not None and rule_options(previous):
            result[rule_id] = [conf, *rule_options(previous)]
        else:
            result[rule_id] = conf
    return result


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(value, Mapping):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _relative_posix(file_path: str | PurePath, base_dir: str | PurePath | None) -> str:
    path = PurePath(file_path)
    if base_dir is not None:
        try:
            path = path.relative_to(PurePath(base_dir))
        except ValueError:
            LOGGER.debug("%s is outside %s; matching globs against the path as given", path, base_dir)
    return PurePosixPath(*path.parts).as_posix()


def _glob_match(pattern: str, relative: str) -> bool:
    pattern = pattern.removeprefix("./")
    if "/" not in pattern:
        return fnmatchcase(PurePosixPath(relative).name, pattern)
    return _match_segments(pattern.strip("/").split("/"), relative.split("/"))


def _match_segments(pattern: list[str], parts: list[str]) -> bool:
    if not pattern:
        return not parts
    head, rest = pattern[0], pattern[1:]
    # Only ``**`` spans directories, including none at all.
    if head == "**":
        return any(_match_segments(rest, parts[start:]) for start in range(len(parts) + 1))
    return bool(parts) and fnmatchcase(parts[0], head) and _match_segments(rest, parts[1:])


__all__ = [
    "ExtendsResolver",
    "matches_file",
    "merge_config",
    "resolve_extends",
    "resolve_for_file",
]
