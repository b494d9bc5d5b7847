# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Thin wrappers that run one external formatter or linter per check."""

from __future__ import annotations

from pathlib import Path

from ..config import CheckDefinition, DiscardStream
from ..logging import bold, fail, ok
from ..process_utils import run_command
from .models import CheckOutcome

FAILURE_STATUS = 1


def run_check(
    check: CheckDefinition,
    *,
    cwd: Path | None = None,
    emoji: bool = True,
) -> CheckOutcome:
    """Run ``check`` and print its remedy when the tool reports issues.

    Args:
        check: Definition naming the command, remedy, and message.
        cwd: Working directory for the tool; defaults to the current one.
        emoji: Whether log lines carry emoji prefixes.

    Returns:
        CheckOutcome: ``passed`` is ``False`` and ``exit_code`` is 1 when the
        tool exits non-zero or cannot be found.
    """

    try:
        completed = run_command(
            check.command,
            cwd=cwd,
            discard_stdout=check.discard is DiscardStream.STDOUT,
            discard_stderr=check.discard is DiscardStream.STDERR,
        )
    except FileNotFoundError as exc:
        message = f"{exc}; cannot run {check.name}"
        fail(message, use_emoji=emoji)
        return CheckOutcome(name=check.name, passed=False, exit_code=FAILURE_STATUS, message=message)

    if completed.returncode != 0:
        fail(check.render_message(bold(check.remedy)), use_emoji=emoji)
        return CheckOutcome(
            name=check.name,
            passed=False,
            exit_code=FAILURE_STATUS,
            message=check.render_message(),
        )

    ok(f"{check.name} passed", use_emoji=emoji)
    return CheckOutcome(name=check.name, passed=True, exit_code=0)


__all__ = ["FAILURE_STATUS", "run_check"]
