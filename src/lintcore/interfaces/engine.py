# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Contracts of the analysis engine consuming normalized options."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Mapping
from typing import Protocol, runtime_checkable


class LintEngine(Protocol):
    """Define the engine surface the configuration layer relies upon.

    The engine parses sources and evaluates rules. The configuration layer
    only constructs it and registers inline plugin definitions; everything
    else belongs to the engine.
    """

    @abstractmethod
    def add_plugin(self, plugin_id: str, definition: object) -> None:
        """Make ``definition`` available to later runs under ``plugin_id``.

        Args:
            plugin_id: Identifier listed in the normalized ``plugins`` option.
            definition: Plugin bundle providing rules, configs, environments
                and processors.
        """
        raise NotImplementedError


class EngineFactory(Protocol):
    """Build an engine from the engine-options mapping."""

    def __call__(self, options: Mapping[str, object]) -> LintEngine:
        """Return a new engine configured with ``options``.

        Args:
            options: Normalized options keyed by their camelCase option names,
                with ``plugins`` reduced to identifiers.

        Returns:
            LintEngine: Engine ready for plugin registration.
        """
        raise NotImplementedError


@runtime_checkable
class ClosableEngine(Protocol):
    """Engines holding resources expose ``close`` to release them."""

    def close(self) -> None:
        """Release resources held by the engine."""
        raise NotImplementedError


__all__ = ["ClosableEngine", "EngineFactory", "LintEngine"]
