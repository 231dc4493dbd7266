# SPDX-License-Identifier: MIT
"""Shared typing utilities for configuration payloads."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeAlias

from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

if TYPE_CHECKING:
    OpaqueValue: TypeAlias = Any
else:

    class OpaqueValue:
        """Runtime stand-in treated as ``any`` by Pydantic schema generation.

        Rule options, shared settings and plugin definitions are owned by the
        engine and its plugins, so the configuration layer keeps them untouched.
        """

        @classmethod
        def __get_pydantic_core_schema__(cls, _source, _handler) -> core_schema.CoreSchema:  # type: ignore[override]
            return core_schema.any_schema()

        @classmethod
        def __get_pydantic_json_schema__(cls, _core_schema, _handler) -> JsonSchemaValue:  # type: ignore[override]
            return {}


GlobPatterns: TypeAlias = str | list[str]

__all__ = [
    "GlobPatterns",
    "OpaqueValue",
]
