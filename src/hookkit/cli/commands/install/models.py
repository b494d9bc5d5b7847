# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data structures for the hook installation CLI command."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

SOURCE_DIR_OPTION = Annotated[
    Path | None,
    typer.Option(
        "--source-dir",
        help="Template directory containing resources/pre-commit.sh and hooks/* (default: bundled templates).",
    ),
]
HOOKS_DIR_OPTION = Annotated[
    Path | None,
    typer.Option("--hooks-dir", help="Overrides the hooks directory (default: .git/hooks)."),
]
DRY_RUN_OPTION = Annotated[
    bool,
    typer.Option("--dry-run", help="Show actions without modifying files."),
]


@dataclass(slots=True)
class InstallCLIOptions:
    """Capture CLI options for hook installation."""

    root: Path
    source_dir: Path | None
    hooks_dir: Path | None
    config: Path | None
    dry_run: bool
    emoji: bool

    @classmethod
    def from_cli(
        cls,
        root: Path,
        *,
        source_dir: Path | None,
        hooks_dir: Path | None,
        config: Path | None,
        dry_run: bool,
        emoji: bool,
    ) -> InstallCLIOptions:
        """Return options with every supplied path resolved."""

        return cls(
            root=root.resolve(),
            source_dir=source_dir.resolve() if source_dir is not None else None,
            hooks_dir=hooks_dir.resolve() if hooks_dir is not None else None,
            config=config.resolve() if config is not None else None,
            dry_run=dry_run,
            emoji=emoji,
        )


__all__ = ["DRY_RUN_OPTION", "HOOKS_DIR_OPTION", "InstallCLIOptions", "SOURCE_DIR_OPTION"]
