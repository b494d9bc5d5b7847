# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution."""

from __future__ import annotations

import shutil

# Bandit: subprocess usage is intentional; hooks and external formatters are
# executed from argument lists without ``shell=True``.
import subprocess  # nosec B404
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from subprocess import CompletedProcess as _CompletedProcess  # nosec B404


def _normalize_args(args: Sequence[str]) -> list[str]:
    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    resolved = shutil.which(head)
    if resolved is None:
        msg = f"Executable '{head}' was not found on PATH"
        raise FileNotFoundError(msg)
    return [resolved, *rest]


def run_command(
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    discard_stdout: bool = False,
    discard_stderr: bool = False,
) -> _CompletedProcess[str]:
    """Execute *args* after normalising the executable path.

    Streams that are not discarded are inherited from the current process,
    which is how hook output reaches the committer. A non-zero exit status is
    returned, never raised.

    Args:
        args: Command and arguments; the head is resolved against ``PATH``.
        cwd: Optional working directory for the child process.
        discard_stdout: Redirect stdout to ``/dev/null``.
        discard_stderr: Redirect stderr to ``/dev/null``.

    Returns:
        CompletedProcess[str]: Result of the finished child process.

    Raises:
        FileNotFoundError: The executable cannot be resolved.
    """

    normalized = _normalize_args(args)
    # Bandit: argument lists come from hook directories and validated config.
    return subprocess.run(  # nosec B603
        normalized,
        cwd=str(cwd) if cwd is not None else None,
        check=False,
        text=True,
        stdout=subprocess.DEVNULL if discard_stdout else None,
        stderr=subprocess.DEVNULL if discard_stderr else None,
    )


__all__ = ["run_command"]
