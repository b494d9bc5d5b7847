# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the subprocess wrapper."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from hookkit.process_utils import run_command


def test_run_command_returns_nonzero_status() -> None:
    completed = run_command([sys.executable, "-c", "import sys; sys.exit(2)"])

    assert completed.returncode == 2


def test_run_command_uses_working_directory(tmp_path: Path) -> None:
    completed = run_command(
        [sys.executable, "-c", "import pathlib; pathlib.Path('marker.txt').write_text('here')"],
        cwd=tmp_path,
    )

    assert completed.returncode == 0
    assert (tmp_path / "marker.txt").read_text() == "here"


def test_run_command_inherits_streams(capfd: pytest.CaptureFixture[str]) -> None:
    run_command([sys.executable, "-c", "import sys; print('to-out'); print('to-err', file=sys.stderr)"])

    captured = capfd.readouterr()
    assert "to-out" in captured.out
    assert "to-err" in captured.err


def test_run_command_discards_selected_streams(capfd: pytest.CaptureFixture[str]) -> None:
    script = "import sys; print('to-out'); print('to-err', file=sys.stderr)"

    run_command([sys.executable, "-c", script], discard_stdout=True)
    captured = capfd.readouterr()
    assert "to-out" not in captured.out
    assert "to-err" in captured.err

    run_command([sys.executable, "-c", script], discard_stderr=True)
    captured = capfd.readouterr()
    assert "to-out" in captured.out
    assert "to-err" not in captured.err


def test_run_command_resolves_executable_on_path() -> None:
    with pytest.raises(FileNotFoundError, match="was not found on PATH"):
        run_command(["hookkit-definitely-missing"])


def test_run_command_requires_arguments() -> None:
    with pytest.raises(ValueError):
        run_command([])
