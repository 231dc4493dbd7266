# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing console messages with optional colour and emoji support."""

from __future__ import annotations

from functools import lru_cache

from rich.console import Console
from rich.text import Text


@lru_cache(maxsize=8)
def get_console(*, color: bool, stderr: bool = False) -> Console:
    """Return a shared console for the requested colour and stream settings.

    Args:
        color: Whether ANSI styling may be emitted.
        stderr: Whether the console writes to standard error.

    Returns:
        Console: Cached rich console instance.
    """

    return Console(no_color=not color, stderr=stderr, highlight=False, soft_wrap=True)


def emoji(symbol: str, enable: bool) -> str:
    """Return ``symbol`` when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _print_line(msg: str, *, style: str, use_color: bool, stderr: bool = False) -> None:
    console = get_console(color=use_color, stderr=stderr)
    text = Text(msg)
    if use_color:
        text.stylize(style)
    console.print(text)


def ok(msg: str, *, use_emoji: bool = True, use_color: bool = True) -> None:
    """Emit a success message."""

    _print_line(f"{emoji('✅ ', use_emoji)}{msg}", style="green", use_color=use_color)


def fail(msg: str, *, use_emoji: bool = True, use_color: bool = True) -> None:
    """Emit an error message on standard error."""

    _print_line(
        f"{emoji('❌ ', use_emoji)}{msg}",
        style="bold red",
        use_color=use_color,
        stderr=True,
    )


__all__ = ["emoji", "fail", "get_console", "ok"]
