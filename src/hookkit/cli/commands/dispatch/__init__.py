# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Hook dispatch CLI command package."""

from __future__ import annotations

import typer

from .command import dispatch_command

__all__ = ["register"]


def register(app: typer.Typer) -> None:
    """Register the ``dispatch`` command on the Typer application."""

    app.command(
        "dispatch",
        help="Run installed pre-commit check scripts in order, stopping at the first failure.",
    )(dispatch_command)
