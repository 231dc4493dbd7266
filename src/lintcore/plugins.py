# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Plugin reference normalization and registration routing.

Callers list plugins either by identifier or as an identifier paired with an
inline definition. The engine options only carry identifiers; definitions are
registered with the engine separately, in the order they were listed. Every
registration is issued, so when two entries share an identifier the later
definition wins.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Final, TypeAlias, overload

from .errors import OptionTypeError
from .interfaces.engine import LintEngine

LOGGER = logging.getLogger(__name__)

_ID_KEY: Final[str] = "id"
_DEFINITION_KEY: Final[str] = "definition"
_ENTRY_EXPECTATION: Final[str] = "strings or objects with a string id"


@dataclass(frozen=True, slots=True)
class PluginById:
    """Plugin referenced by identifier and resolved by the engine."""

    id: str


@dataclass(frozen=True, slots=True)
class PluginWithDefinition:
    """Plugin supplied inline together with its definition."""

    id: str
    definition: object


PluginReference: TypeAlias = PluginById | PluginWithDefinition
PluginEntry: TypeAlias = str | Mapping[str, object] | PluginReference


def parse_plugin_reference(entry: PluginEntry) -> PluginReference:
    """Return the tagged reference described by ``entry``.

    Args:
        entry: Identifier string, ``{"id": ..., "definition": ...}`` mapping,
            or an already parsed reference.

    Returns:
        PluginReference: ``PluginById`` for bare identifiers and mappings
        without a definition, ``PluginWithDefinition`` otherwise.

    Raises:
        OptionTypeError: If ``entry`` has none of the supported shapes.
    """

    if isinstance(entry, (PluginById, PluginWithDefinition)):
        return entry
    if isinstance(entry, str):
        return PluginById(entry)
    if isinstance(entry, Mapping):
        plugin_id = entry.get(_ID_KEY)
        if isinstance(plugin_id, str):
            if _DEFINITION_KEY in entry:
                return PluginWithDefinition(plugin_id, entry[_DEFINITION_KEY])
            return PluginById(plugin_id)
    raise OptionTypeError(
        "plugins",
        _ENTRY_EXPECTATION,
        message=f"plugins entries must be {_ENTRY_EXPECTATION}.",
    )


def normalize_plugin_ids(entries: Iterable[PluginEntry]) -> list[str]:
    """Return the identifiers of ``entries`` in input order, duplicates included."""

    return [parse_plugin_reference(entry).id for entry in entries]


class PluginRegistry(Sequence[PluginReference]):
    """Ordered, read-only view of parsed plugin references."""

    def __init__(self, references: Iterable[PluginReference] = ()) -> None:
        """Initialise the registry with already parsed ``references``."""

        self._references: tuple[PluginReference, ...] = tuple(references)

    @classmethod
    def from_entries(cls, entries: Iterable[PluginEntry]) -> PluginRegistry:
        """Build a registry by parsing raw plugin entries.

        Args:
            entries: Raw ``plugins`` option entries.

        Returns:
            PluginRegistry: Registry preserving the input order.
        """

        return cls(parse_plugin_reference(entry) for entry in entries)

    def identifiers(self) -> list[str]:
        """Return the identifiers destined for the engine options."""

        return [reference.id for reference in self._references]

    def definitions(self) -> list[tuple[str, object]]:
        """Return ``(identifier, definition)`` pairs for inline plugins."""

        return [
            (reference.id, reference.definition)
            for reference in self._references
            if isinstance(reference, PluginWithDefinition)
        ]

    def register_with(self, engine: LintEngine) -> int:
        """Register every inline definition with ``engine``.

        Errors raised by the engine propagate unchanged; registrations issued
        before the failure are not rolled back.

        Args:
            engine: Engine receiving ``add_plugin`` calls.

        Returns:
            int: Number of registration calls issued.
        """

        count = 0
        for plugin_id, definition in self.definitions():
            LOGGER.debug("registering inline plugin %s", plugin_id)
            engine.add_plugin(plugin_id, definition)
            count += 1
        return count

    def __len__(self) -> int:
        return len(self._references)

    def __iter__(self) -> Iterator[PluginReference]:
        return iter(self._references)

    @overload
    def __getitem__(self, index: int) -> PluginReference: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[PluginReference]: ...

    def __getitem__(self, index: int | slice) -> PluginReference | Sequence[PluginReference]:
        return self._references[index]


__all__ = [
    "PluginById",
    "PluginEntry",
    "PluginReference",
    "PluginRegistry",
    "PluginWithDefinition",
    "normalize_plugin_ids",
    "parse_plugin_reference",
]
