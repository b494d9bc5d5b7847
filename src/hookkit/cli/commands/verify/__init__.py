# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Installation verification CLI command package."""

from __future__ import annotations

import typer

from .command import verify_command

__all__ = ["register"]


def register(app: typer.Typer) -> None:
    """Register the ``verify`` command on the Typer application."""

    app.command(
        "verify",
        help="Check that every installed hook exists and is executable.",
    )(verify_command)
