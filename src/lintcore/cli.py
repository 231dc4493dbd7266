# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command line helpers for inspecting options and configuration files."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import typer

from .config.cascade import resolve_for_file
from .config.loaders import FileConfigResolver, load_config_file, read_config_document
from .errors import ConfigError
from .logging import fail, ok
from .options import validate_options

app = typer.Typer(help="Validate linter options and inspect cascading configuration.", no_args_is_help=True)
options_app = typer.Typer(help="Validate raw linter options.", no_args_is_help=True)
config_app = typer.Typer(help="Inspect configuration files.", no_args_is_help=True)
app.add_typer(options_app, name="options")
app.add_typer(config_app, name="config")

_NO_COLOR_OPTION = typer.Option(False, "--no-color", help="Disable coloured status messages.")
_NO_EMOJI_OPTION = typer.Option(False, "--no-emoji", help="Disable emoji in status messages.")


def _echo_json(payload: Mapping[str, Any]) -> None:
    typer.echo(json.dumps(payload, indent=2, sort_keys=True, default=str))


def _exit_with(exc: ConfigError, *, no_color: bool, no_emoji: bool) -> typer.Exit:
    fail(str(exc), use_emoji=not no_emoji, use_color=not no_color)
    return typer.Exit(code=1)


@options_app.command("validate")
def options_validate(
    path: Path = typer.Argument(..., help="JSON or TOML file holding the raw options."),
    cwd: str | None = typer.Option(None, "--cwd", help="Working directory used when the file omits cwd."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only report success or failure."),
    no_color: bool = _NO_COLOR_OPTION,
    no_emoji: bool = _NO_EMOJI_OPTION,
) -> None:
    """Validate raw options and print the normalized engine options."""

    try:
        raw = read_config_document(path)
        if cwd is None:
            normalized = validate_options(raw)
        else:
            normalized = validate_options(raw, cwd_provider=lambda: cwd)
    except ConfigError as exc:
        raise _exit_with(exc, no_color=no_color, no_emoji=no_emoji) from exc
    if quiet:
        ok(f"{path} holds valid options", use_emoji=not no_emoji, use_color=not no_color)
        return
    _echo_json(normalized.to_dict())


@config_app.command("show")
def config_show(
    path: Path = typer.Argument(..., help="Configuration file to validate."),
    no_color: bool = _NO_COLOR_OPTION,
    no_emoji: bool = _NO_EMOJI_OPTION,
) -> None:
    """Validate a configuration file and print it as JSON."""

    try:
        config = load_config_file(path)
    except ConfigError as exc:
        raise _exit_with(exc, no_color=no_color, no_emoji=no_emoji) from exc
    _echo_json(config.to_dict())


@config_app.command("resolve")
def config_resolve(
    path: Path = typer.Argument(..., help="Root configuration file."),
    target: Path = typer.Argument(..., help="File path whose effective configuration is printed."),
    no_color: bool = _NO_COLOR_OPTION,
    no_emoji: bool = _NO_EMOJI_OPTION,
) -> None:
    """Print the configuration that applies to ``target`` after the cascade."""

    base_dir = path.parent.resolve()
    try:
        config = load_config_file(path)
        effective = resolve_for_file(
            config,
            target,
            base_dir=base_dir if target.is_absolute() else None,
            resolver=FileConfigResolver(base_dir),
        )
    except ConfigError as exc:
        raise _exit_with(exc, no_color=no_color, no_emoji=no_emoji) from exc
    _echo_json(effective.to_dict())


def main() -> None:
    """Entry point for the ``lintcore`` console script."""

    app()


__all__ = ["app", "main"]
