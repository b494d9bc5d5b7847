# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Hook installation CLI command package."""

from __future__ import annotations

import typer

from .command import install_command

__all__ = ["register"]


def register(app: typer.Typer) -> None:
    """Register the ``install`` command on the Typer application."""

    app.command(
        "install",
        help="Copy the pre-commit dispatcher and check scripts into .git/hooks.",
    )(install_command)
