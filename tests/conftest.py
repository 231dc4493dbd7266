# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

import pytest


@dataclass
class RecordingEngine:
    """Engine double capturing the options and plugin registrations it receives."""

    options: dict[str, object]
    calls: list[tuple[str, object]] = field(default_factory=list)
    fail_on: str | None = None
    closed: bool = False

    def add_plugin(self, plugin_id: str, definition: object) -> None:
        self.calls.append((plugin_id, definition))
        if plugin_id == self.fail_on:
            raise RuntimeError(f"cannot load plugin {plugin_id}")

    def close(self) -> None:
        self.closed = True


@dataclass
class EngineRecorder:
    """Engine factory remembering every engine it built."""

    fail_on: str | None = None
    built: list[RecordingEngine] = field(default_factory=list)

    def __call__(self, options: Mapping[str, object]) -> RecordingEngine:
        engine = RecordingEngine(options=dict(options), fail_on=self.fail_on)
        self.built.append(engine)
        return engine


@pytest.fixture
def engine_factory() -> EngineRecorder:
    """Return a fresh recording engine factory."""
    return EngineRecorder()


@pytest.fixture
def fixed_cwd() -> str:
    """Return the working directory injected into option validation."""
    return "/workspace/project"


@pytest.fixture
def failing_engine_factory() -> EngineRecorder:
    """Return an engine factory whose engines reject the ``broken`` plugin."""
    return EngineRecorder(fail_on="broken")
