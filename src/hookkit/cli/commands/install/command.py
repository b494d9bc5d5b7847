# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command for installing git hooks."""

from __future__ import annotations

from pathlib import Path

import typer

from ...core.shared import CONFIG_OPTION, EMOJI_OPTION, ROOT_OPTION, CLIError, build_cli_logger
from .models import DRY_RUN_OPTION, HOOKS_DIR_OPTION, SOURCE_DIR_OPTION, InstallCLIOptions
from .services import emit_install_summary, perform_installation


def install_command(
    root: ROOT_OPTION = Path("."),
    source_dir: SOURCE_DIR_OPTION = None,
    hooks_dir: HOOKS_DIR_OPTION = None,
    config: CONFIG_OPTION = None,
    dry_run: DRY_RUN_OPTION = False,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Install the pre-commit dispatcher and check scripts for a repository."""

    options = InstallCLIOptions.from_cli(
        root,
        source_dir=source_dir,
        hooks_dir=hooks_dir,
        config=config,
        dry_run=dry_run,
        emoji=emoji,
    )
    logger = build_cli_logger(emoji=options.emoji)
    try:
        result = perform_installation(options, logger=logger)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc

    emit_install_summary(result, options, logger=logger)
    raise typer.Exit(code=0)


__all__ = ["install_command"]
