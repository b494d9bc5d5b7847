# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run installed check scripts in lexical order, stopping at the first failure."""

from __future__ import annotations

from pathlib import Path

from ..logging import bold, fail, info, ok, warn
from ..process_utils import run_command
from .models import DispatchResult
from .registry import DEFAULT_PREFIX, matches_prefix

NOT_EXECUTABLE_STATUS = 126


def discover_hooks(check_dir: Path, prefix: str = DEFAULT_PREFIX) -> list[Path]:
    """Return regular files in ``check_dir`` whose name starts with ``prefix``.

    Args:
        check_dir: Directory holding installed check scripts.
        prefix: Filename prefix selecting the scripts to run.

    Returns:
        list[Path]: Matching scripts sorted lexically by filename.
    """

    if not check_dir.is_dir():
        return []
    return sorted(
        (path for path in check_dir.iterdir() if path.is_file() and matches_prefix(path.name, prefix)),
        key=lambda path: path.name,
    )


def dispatch_hooks(
    check_dir: Path,
    *,
    prefix: str = DEFAULT_PREFIX,
    cwd: Path | None = None,
    emoji: bool = True,
) -> DispatchResult:
    """Execute every discovered hook in turn and stop at the first failure.

    Hooks inherit stdout and stderr so their guidance reaches the committer.
    A hook the operating system refuses to execute fails with status 126.

    Args:
        check_dir: Directory holding installed check scripts.
        prefix: Filename prefix selecting the scripts to run.
        cwd: Working directory for the hooks; defaults to the current one.
        emoji: Whether log lines carry emoji prefixes.

    Returns:
        DispatchResult: Executed hook names, the failing hook, and exit status.
    """

    hooks = discover_hooks(check_dir, prefix)
    result = DispatchResult()
    if not hooks:
        warn(f"No hooks matching '{prefix}*' found in {check_dir}", use_emoji=emoji)
        return result

    for hook in hooks:
        info(f"Running hook: {bold(hook.name)}", use_emoji=emoji)
        result.executed.append(hook.name)
        try:
            completed = run_command([str(hook.resolve())], cwd=cwd)
            status = completed.returncode
        except OSError as exc:
            fail(f"Unable to execute {hook.name}: {exc}", use_emoji=emoji)
            status = NOT_EXECUTABLE_STATUS
        if status != 0:
            # Signal terminations come back negative; report them the way a shell does.
            exit_code = status if status > 0 else 128 - status
            fail(f"Hook {bold(hook.name)} failed with exit status {exit_code}", use_emoji=emoji)
            result.failed = hook.name
            result.exit_code = exit_code
            return result

    ok(f"All {len(result.executed)} hooks passed", use_emoji=emoji)
    return result


__all__ = ["NOT_EXECUTABLE_STATUS", "discover_hooks", "dispatch_hooks"]
