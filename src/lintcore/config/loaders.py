# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Load configuration documents (JSON, TOML) into :class:`ConfigData`."""

from __future__ import annotations

import json
import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from ..errors import ConfigError
from .models import ConfigData, parse_config_data

LOGGER = logging.getLogger(__name__)

JSON_SUFFIXES: Final[frozenset[str]] = frozenset({".json"})
TOML_SUFFIXES: Final[frozenset[str]] = frozenset({".toml"})


def read_config_document(path: Path) -> Mapping[str, Any]:
    """Return the raw mapping stored in ``path``.

    Args:
        path: JSON or TOML document.

    Returns:
        Mapping[str, Any]: Parsed top-level table.

    Raises:
        ConfigError: If the file is missing, unreadable, malformed, of an
            unsupported type, or does not hold a top-level object.
    """

    suffix = path.suffix.lower()
    if suffix not in JSON_SUFFIXES | TOML_SUFFIXES:
        raise ConfigError(f"Unsupported configuration format for {path}; expected .json or .toml")
    if not path.is_file():
        raise ConfigError(f"Configuration file {path} does not exist")
    try:
        if suffix in TOML_SUFFIXES:
            with path.open("rb") as handle:
                data: object = tomllib.load(handle)
        else:
            data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Unable to read {path}: {exc}") from exc
    except (json.JSONDecodeError, tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Unable to parse {path}: {exc}") from exc
    if not isinstance(data, Mapping):
        raise ConfigError(f"Configuration at {path} must be an object")
    LOGGER.debug("loaded configuration document %s", path)
    return data


def load_config_file(path: Path) -> ConfigData:
    """Load and validate the configuration stored in ``path``."""

    return parse_config_data(read_config_document(path), source=str(path))


class FileConfigResolver:
    """Resolve ``extends`` entries as configuration files on disk.

    Relative entries are resolved against the directory of the file that
    referenced them, so nested chains behave like includes.
    """

    def __init__(self, base_dir: Path) -> None:
        """Initialise the resolver.

        Args:
            base_dir: Directory anchoring entries of the root configuration.
        """

        self._base_dir = base_dir.resolve()
        self._loaded: dict[Path, ConfigData] = {}

    def __call__(self, name: str) -> ConfigData:
        """Return the configuration referenced by ``name``."""

        candidate = Path(name)
        path = candidate if candidate.is_absolute() else self._base_dir / candidate
        resolved = path.resolve()
        cached = self._loaded.get(resolved)
        if cached is not None:
            return cached
        config = load_config_file(resolved)
        nested_extends = config.extends_list()
        if nested_extends and resolved.parent != self._base_dir:
            config = _rebase_extends(config, resolved.parent)
        self._loaded[resolved] = config
        return config


def _rebase_extends(config: ConfigData, directory: Path) -> ConfigData:
    rebased = [entry if Path(entry).is_absolute() else str(directory / entry) for entry in config.extends_list()]
    return config.model_copy(update={"extends": rebased})


__all__ = [
    "FileConfigResolver",
    "load_config_file",
    "read_config_document",
]
