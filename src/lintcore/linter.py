# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Public construction entry point wiring options, plugins and the engine."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping, Sequence

from .interfaces.engine import ClosableEngine, EngineFactory, LintEngine
from .options import CwdProvider, LinterOptions, validate_options
from .plugins import PluginRegistry

LOGGER = logging.getLogger(__name__)


class Linter:
    """Validated options bound to an engine with inline plugins registered.

    Construction runs three steps: validate the raw options, build the engine
    from the normalized options, then register inline plugin definitions. The
    engine is only attached to the instance once every step succeeded. When
    registration fails the engine built for this instance is closed (if it
    supports ``close``) and dropped, and the engine's error propagates.
    """

    def __init__(
        self,
        options: Mapping[str, object] | None = None,
        *,
        engine_factory: EngineFactory,
        cwd_provider: CwdProvider = os.getcwd,
    ) -> None:
        """Validate ``options`` and build the engine.

        Args:
            options: Raw caller options keyed by option name.
            engine_factory: Callable building the engine from the normalized
                engine-options mapping.
            cwd_provider: Callable returning the working directory used when
                ``cwd`` is not supplied.

        Raises:
            ConfigError: If the options fail validation; the engine factory is
                not called in that case.
        """

        raw: Mapping[str, object] = options if options is not None else {}
        normalized = validate_options(raw, cwd_provider=cwd_provider)
        engine = engine_factory(normalized.to_dict())
        LOGGER.debug("engine created via %s", getattr(engine_factory, "__name__", type(engine_factory).__name__))

        raw_plugins = raw.get("plugins")
        if isinstance(raw_plugins, Sequence) and len(raw_plugins) > 0:
            try:
                registered = PluginRegistry.from_entries(raw_plugins).register_with(engine)
            except Exception:
                _discard(engine)
                raise
            LOGGER.debug("registered %d inline plugin(s)", registered)

        self._options = normalized
        self._engine = engine

    @property
    def options(self) -> LinterOptions:
        """Return the normalized options the engine was built with."""

        return self._options

    @property
    def engine(self) -> LintEngine:
        """Return the engine owned by this linter."""

        return self._engine


def create_linter(
    options: Mapping[str, object] | None = None,
    *,
    engine_factory: EngineFactory,
    cwd_provider: CwdProvider = os.getcwd,
) -> Linter:
    """Return a :class:`Linter` for ``options``; see :class:`Linter` for errors."""

    return Linter(options, engine_factory=engine_factory, cwd_provider=cwd_provider)


def _discard(engine: LintEngine) -> None:
    LOGGER.debug("discarding partially initialised engine %s", type(engine).__name__)
    if not isinstance(engine, ClosableEngine):
        return
    try:
        engine.close()
    except Exception:
        # The registration error is the one reported to the caller.
        LOGGER.warning("closing discarded engine failed", exc_info=True)


__all__ = ["Linter", "create_linter"]
