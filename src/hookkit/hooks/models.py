# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Dataclasses describing hook installation, dispatch, and check outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class HookLayout:
    """Describe filesystem locations used during hook installation."""

    project_root: Path
    git_dir: Path
    hooks_dir: Path
    check_dir: Path
    dispatcher_template: Path
    check_template_dir: Path
    dispatcher_name: str = "pre-commit"

    @property
    def dispatcher_path(self) -> Path:
        """Return the installed location of the dispatcher hook."""

        return self.hooks_dir / self.dispatcher_name

    def check_templates(self) -> list[Path]:
        """Return the check script templates in lexical filename order."""

        return sorted(
            (path for path in self.check_template_dir.iterdir() if path.is_file()),
            key=lambda path: path.name,
        )


@dataclass(slots=True)
class InstallResult:
    """Aggregate outcome from installing the dispatcher and check scripts."""

    installed: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    backups: list[Path] = field(default_factory=list)
    dry_run: bool = False


@dataclass(slots=True)
class DispatchResult:
    """Outcome of running the installed check scripts in sequence."""

    executed: list[str] = field(default_factory=list)
    failed: str | None = None
    exit_code: int = 0

    @property
    def ok(self) -> bool:
        """Return ``True`` when every executed hook succeeded."""

        return self.exit_code == 0


@dataclass(frozen=True, slots=True)
class CheckOutcome:
    """Result of running a single external formatter or linter."""

    name: str
    passed: bool
    exit_code: int
    message: str = ""


@dataclass(slots=True)
class VerifyResult:
    """Paths that break the executable-hooks invariant."""

    checked: list[Path] = field(default_factory=list)
    missing: list[Path] = field(default_factory=list)
    not_executable: list[Path] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Return ``True`` when every expected hook exists and is executable."""

        return not self.missing and not self.not_executable


__all__ = ["CheckOutcome", "DispatchResult", "HookLayout", "InstallResult", "VerifyResult"]
