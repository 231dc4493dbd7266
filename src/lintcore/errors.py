# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception types raised while normalizing linter configuration."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

RETIRED_CACHE_OPTION: Final[str] = "cacheFile"
_RETIRED_CACHE_HINT: Final[str] = "cacheFile has been deprecated. Please use the cacheLocation option instead. "


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class OptionsError(ConfigError):
    """Raised when a raw options mapping fails validation."""


class UnknownOptionsError(OptionsError):
    """Raised when the options mapping contains keys the linter does not recognise."""

    def __init__(self, options: Iterable[str]) -> None:
        """Initialise the error with the unrecognised option names.

        Args:
            options: Unknown option names in the order they were encountered.
        """

        self.options: tuple[str, ...] = tuple(options)
        hint = _RETIRED_CACHE_HINT if RETIRED_CACHE_OPTION in self.options else ""
        super().__init__(f"{hint}Unknown options given: {', '.join(self.options)}.")


class OptionTypeError(OptionsError):
    """Raised when a recognised option holds a value of the wrong type."""

    def __init__(self, option: str, expected: str, *, message: str | None = None) -> None:
        """Initialise the error for ``option``.

        Args:
            option: Name of the offending option.
            expected: Human readable description of the accepted type.
            message: Optional full message overriding the generated one.
        """

        self.option = option
        self.expected = expected
        super().__init__(message or f"{option} must be {expected}.")


__all__ = [
    "ConfigError",
    "OptionTypeError",
    "OptionsError",
    "RETIRED_CACHE_OPTION",
    "UnknownOptionsError",
]
