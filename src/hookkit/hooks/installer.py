# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Copy the dispatcher and check scripts into a repository's git hooks directory."""

from __future__ import annotations

import os
import shutil
from datetime import datetime, timezone
from pathlib import Path
from typing import Final

from ..config import HookKitConfig
from ..logging import bold, info, ok, warn
from .models import HookLayout, InstallResult, VerifyResult
from .registry import bundled_source_dir, check_template_dir, dispatcher_template, matches_prefix

EXECUTABLE_MODE: Final[int] = 0o755


def resolve_layout(
    root: Path,
    *,
    config: HookKitConfig | None = None,
    source_dir: Path | None = None,
    hooks_dir: Path | None = None,
) -> HookLayout:
    """Return validated directories required for hook installation.

    Args:
        root: Repository root directory.
        config: Optional configuration supplying source and hooks directories.
        source_dir: Optional template directory overriding the configuration.
        hooks_dir: Optional target hooks directory overriding the configuration.

    Returns:
        HookLayout: Resolved project, git, hooks, and template locations.

    Raises:
        FileNotFoundError: Raised when the git directory or templates are missing.
    """

    settings = config or HookKitConfig()
    project_root = root.resolve()
    git_dir = project_root / ".git"
    if not git_dir.is_dir():
        raise FileNotFoundError("Not a git repository (missing .git directory)")

    source = source_dir or settings.source_dir or bundled_source_dir()
    if not source.is_absolute():
        source = project_root / source

    target = hooks_dir or settings.hooks_dir
    if not target.is_absolute():
        target = project_root / target

    template = dispatcher_template(source)
    if not template.is_file():
        raise FileNotFoundError(f"Dispatcher template not found: {template}")
    templates_dir = check_template_dir(source)
    if not templates_dir.is_dir():
        raise FileNotFoundError(f"Hook templates not found: {templates_dir}")

    return HookLayout(
        project_root=project_root,
        git_dir=git_dir,
        hooks_dir=target,
        check_dir=target / settings.check_dir_name,
        dispatcher_template=template,
        check_template_dir=templates_dir,
        dispatcher_name=settings.dispatcher_name,
    )


def install_hooks(
    root: Path,
    *,
    config: HookKitConfig | None = None,
    source_dir: Path | None = None,
    hooks_dir: Path | None = None,
    dry_run: bool = False,
    emoji: bool = True,
) -> InstallResult:
    """Install the dispatcher and every check script, marking each executable.

    Files are copied in order (dispatcher first, then check scripts by name).
    The first copy failure propagates and later files are left untouched;
    running the installer again completes the installation. Each destination
    is replaced atomically, so a reader never observes a half-written hook.

    Args:
        root: Repository root whose hooks should be installed.
        config: Optional configuration; defaults are used when omitted.
        source_dir: Optional template directory overriding the configuration.
        hooks_dir: Optional override for the target hooks directory.
        dry_run: When ``True`` avoid filesystem mutations while reporting actions.
        emoji: Whether log lines carry emoji prefixes.

    Returns:
        InstallResult: Installed, skipped, and backed-up paths.

    Raises:
        FileNotFoundError: Raised when the repository lacks required directories.
        OSError: Raised when copying a hook fails.
    """

    settings = config or HookKitConfig()
    layout = resolve_layout(root, config=settings, source_dir=source_dir, hooks_dir=hooks_dir)
    result = InstallResult(dry_run=dry_run)

    info(f"Install {bold(layout.dispatcher_name)} hook", use_emoji=emoji)
    destination = layout.dispatcher_path
    if settings.backup_foreign_dispatcher and _is_foreign(destination, layout.dispatcher_template):
        backup = _backup_path(destination)
        warn(f"Backing up existing {layout.dispatcher_name} hook to {backup}", use_emoji=emoji)
        if not dry_run:
            destination.rename(backup)
        result.backups.append(backup)
    if not dry_run:
        layout.hooks_dir.mkdir(parents=True, exist_ok=True)
        _copy_executable(layout.dispatcher_template, destination)
    result.installed.append(destination)

    if not dry_run:
        layout.check_dir.mkdir(parents=True, exist_ok=True)
    for entry in sorted(layout.check_template_dir.iterdir(), key=lambda path: path.name):
        if not entry.is_file():
            warn(f"Skipping {entry}: not a regular file", use_emoji=emoji)
            result.skipped.append(entry)
            continue
        info(f"Install hook script: {bold(entry.name)}", use_emoji=emoji)
        if not matches_prefix(entry.name, settings.prefix):
            warn(f"{entry.name} does not start with '{settings.prefix}' and will not be dispatched", use_emoji=emoji)
        target = layout.check_dir / entry.name
        if not dry_run:
            _copy_executable(entry, target)
        result.installed.append(target)

    if dry_run:
        ok(f"Dry run complete: would install {len(result.installed)} hooks", use_emoji=emoji)
    else:
        ok(f"Installed {len(result.installed)} hooks", use_emoji=emoji)
    return result


def verify_installation(
    root: Path,
    *,
    config: HookKitConfig | None = None,
    source_dir: Path | None = None,
    hooks_dir: Path | None = None,
) -> VerifyResult:
    """Report installed hooks that are missing or lack the executable bit.

    Expected files are the dispatcher plus one entry per check template; any
    additional file already present in the check directory must be executable too.

    Args:
        root: Repository root to inspect.
        config: Optional configuration; defaults are used when omitted.
        source_dir: Optional template directory overriding the configuration.
        hooks_dir: Optional override for the hooks directory.

    Returns:
        VerifyResult: Checked, missing, and non-executable paths.
    """

    layout = resolve_layout(root, config=config, source_dir=source_dir, hooks_dir=hooks_dir)
    expected = [layout.dispatcher_path]
    expected.extend(layout.check_dir / template.name for template in layout.check_templates())
    if layout.check_dir.is_dir():
        present = sorted(path for path in layout.check_dir.iterdir() if path.is_file())
        expected.extend(path for path in present if path not in expected)

    result = VerifyResult()
    for path in expected:
        result.checked.append(path)
        if not path.is_file():
            result.missing.append(path)
        elif not os.access(path, os.X_OK):
            result.not_executable.append(path)
    return result


def _copy_executable(source: Path, destination: Path) -> None:
    staging = destination.with_name(f".{destination.name}.{os.getpid()}.tmp")
    try:
        shutil.copyfile(source, staging)
        staging.chmod(EXECUTABLE_MODE)
        os.replace(staging, destination)
    except OSError:
        staging.unlink(missing_ok=True)
        raise


def _is_foreign(destination: Path, template: Path) -> bool:
    """Return whether ``destination`` holds a hook this installer did not write."""

    if destination.is_symlink() or not destination.is_file():
        return False
    return destination.read_bytes() != template.read_bytes()


def _backup_path(destination: Path) -> Path:
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    return destination.with_name(f"{destination.name}.backup.{timestamp}")


__all__ = ["EXECUTABLE_MODE", "install_hooks", "resolve_layout", "verify_installation"]
