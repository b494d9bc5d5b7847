# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command invoked by the installed pre-commit dispatcher."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ....hooks import DEFAULT_PREFIX, dispatch_hooks
from ...core.shared import EMOJI_OPTION

CHECK_DIR_OPTION = Annotated[
    Path,
    typer.Option("--check-dir", help="Directory holding the check scripts to run."),
]
PREFIX_OPTION = Annotated[
    str,
    typer.Option("--prefix", help="Only run scripts whose filename starts with this prefix."),
]


def dispatch_command(
    check_dir: CHECK_DIR_OPTION = Path(".git/hooks/pre-commit.d"),
    prefix: PREFIX_OPTION = DEFAULT_PREFIX,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Run every matching check script and exit with the first failing status."""

    result = dispatch_hooks(check_dir, prefix=prefix, emoji=emoji)
    raise typer.Exit(code=result.exit_code)


__all__ = ["dispatch_command"]
