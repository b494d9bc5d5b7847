# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Helper services used by the hook installation CLI command."""

from __future__ import annotations

from ....config import ConfigError, load_config
from ....hooks import InstallResult, install_hooks
from ...core.shared import CLIError, CLILogger
from .models import InstallCLIOptions


def perform_installation(options: InstallCLIOptions, *, logger: CLILogger) -> InstallResult:
    """Install hooks for the provided options.

    Args:
        options: Normalized CLI options containing paths and runtime flags.
        logger: Logger used to emit user-facing messages.

    Returns:
        The result reported by :func:`install_hooks`.

    Raises:
        CLIError: Raised when configuration, templates, or the repository are unusable.
    """

    try:
        config = load_config(options.root, path=options.config)
        return install_hooks(
            options.root,
            config=config,
            source_dir=options.source_dir,
            hooks_dir=options.hooks_dir,
            dry_run=options.dry_run,
            emoji=options.emoji,
        )
    except ConfigError as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc), exit_code=2) from exc
    except OSError as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc)) from exc


def emit_install_summary(
    result: InstallResult,
    options: InstallCLIOptions,
    *,
    logger: CLILogger,
) -> None:
    """Emit summary warnings after attempting hook installation."""

    if result.backups:
        backup_paths = ", ".join(str(path) for path in result.backups)
        logger.warn(f"Backed up existing hooks: {backup_paths}")
    if options.dry_run and result.installed:
        planned = ", ".join(str(path) for path in result.installed)
        logger.warn(f"DRY RUN: would install {planned}")


__all__ = ["emit_install_summary", "perform_installation"]
