# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer application factory shared by the CLI entry point."""

from __future__ import annotations

from dataclasses import dataclass

import typer


@dataclass(frozen=True, slots=True)
class TyperAppConfig:
    """Describe the top-level settings applied to a Typer application."""

    name: str | None = None
    help_text: str | None = None
    invoke_without_command: bool = False
    no_args_is_help: bool = True


def create_typer(*, config: TyperAppConfig | None = None) -> typer.Typer:
    """Return a Typer application configured from ``config``.

    Args:
        config: Application settings; defaults are used when omitted.

    Returns:
        typer.Typer: Configured application without shell-completion commands.
    """

    settings = config or TyperAppConfig()
    return typer.Typer(
        name=settings.name,
        help=settings.help_text,
        invoke_without_command=settings.invoke_without_command,
        no_args_is_help=settings.no_args_is_help,
        add_completion=False,
    )


__all__ = ["TyperAppConfig", "create_typer"]
