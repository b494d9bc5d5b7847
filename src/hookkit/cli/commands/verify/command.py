# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command reporting missing or non-executable hooks."""

from __future__ import annotations

from pathlib import Path

import typer

from ....config import ConfigError, load_config
from ....hooks import verify_installation
from ...core.shared import CONFIG_OPTION, EMOJI_OPTION, ROOT_OPTION, build_cli_logger
from ..install.models import HOOKS_DIR_OPTION, SOURCE_DIR_OPTION


def verify_command(
    root: ROOT_OPTION = Path("."),
    source_dir: SOURCE_DIR_OPTION = None,
    hooks_dir: HOOKS_DIR_OPTION = None,
    config: CONFIG_OPTION = None,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Exit non-zero when an expected hook is missing or not executable."""

    logger = build_cli_logger(emoji=emoji)
    try:
        settings = load_config(root, path=config)
        result = verify_installation(root, config=settings, source_dir=source_dir, hooks_dir=hooks_dir)
    except ConfigError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=2) from exc
    except FileNotFoundError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc

    for path in result.missing:
        logger.fail(f"Missing hook: {path}")
    for path in result.not_executable:
        logger.fail(f"Hook is not executable: {path}")
    if not result.ok:
        logger.warn("Run 'hookkit install' to repair the hooks directory")
        raise typer.Exit(code=1)

    logger.ok(f"{len(result.checked)} hooks installed and executable")
    raise typer.Exit(code=0)


__all__ = ["verify_command"]
