# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command wrapping a single external formatter or linter."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ....config import ConfigError, load_config
from ....hooks import run_check
from ...core.shared import CONFIG_OPTION, EMOJI_OPTION, ROOT_OPTION, build_cli_logger

USAGE_ERROR_STATUS = 2

NAME_ARGUMENT = Annotated[str, typer.Argument(help="Name of the configured check, e.g. cargo-fmt.")]


def check_command(
    name: NAME_ARGUMENT,
    root: ROOT_OPTION = Path("."),
    config: CONFIG_OPTION = None,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Run the check called ``name`` from the project root."""

    logger = build_cli_logger(emoji=emoji)
    project_root = root.resolve()
    try:
        settings = load_config(project_root, path=config)
        check = settings.get_check(name)
    except (ConfigError, KeyError) as exc:
        logger.fail(exc.args[0] if exc.args else str(exc))
        raise typer.Exit(code=USAGE_ERROR_STATUS) from exc

    outcome = run_check(check, cwd=project_root, emoji=emoji)
    raise typer.Exit(code=outcome.exit_code)


__all__ = ["check_command"]
