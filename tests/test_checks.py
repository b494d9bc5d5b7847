# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for check scripts wrapping external formatters and linters."""

from __future__ import annotations

import sys
from pathlib import Path
from subprocess import CompletedProcess

import pytest

from hookkit.config import DEFAULT_CHECKS, CheckDefinition, DiscardStream
from hookkit.hooks import run_check


def _python_check(code: str, **overrides: object) -> CheckDefinition:
    payload: dict[str, object] = {
        "name": "fmt",
        "command": [sys.executable, "-c", code],
        "remedy": "cargo fmt",
        "message": "There are some code style issues, run {remedy} first",
    }
    payload.update(overrides)
    return CheckDefinition.model_validate(payload)


def test_run_check_reports_remedy_on_failure(capsys: pytest.CaptureFixture[str]) -> None:
    outcome = run_check(_python_check("import sys; sys.exit(1)"), emoji=False)

    assert not outcome.passed
    assert outcome.exit_code == 1
    assert outcome.message == "There are some code style issues, run cargo fmt first"
    assert "run cargo fmt first" in capsys.readouterr().out


def test_run_check_normalises_tool_exit_status() -> None:
    outcome = run_check(_python_check("import sys; sys.exit(101)"), emoji=False)

    assert outcome.exit_code == 1


def test_run_check_passes_when_tool_is_clean(capsys: pytest.CaptureFixture[str]) -> None:
    outcome = run_check(_python_check("pass"), emoji=False)

    assert outcome.passed
    assert outcome.exit_code == 0
    assert "fmt passed" in capsys.readouterr().out


def test_run_check_missing_executable(capsys: pytest.CaptureFixture[str]) -> None:
    check = CheckDefinition(name="ghost", command=["hookkit-no-such-tool"], remedy="ghost fix")

    outcome = run_check(check, emoji=False)

    assert not outcome.passed
    assert outcome.exit_code == 1
    assert "hookkit-no-such-tool" in capsys.readouterr().out


def test_run_check_forwards_discard_and_cwd(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    calls: list[dict[str, object]] = []

    def fake_run_command(args, **kwargs):  # noqa: ANN001
        calls.append({"args": list(args), **kwargs})
        return CompletedProcess(args=list(args), returncode=0)

    monkeypatch.setattr("hookkit.hooks.checks.run_command", fake_run_command)

    run_check(DEFAULT_CHECKS["cargo-fmt"], cwd=tmp_path, emoji=False)
    run_check(DEFAULT_CHECKS["cargo-clippy"], cwd=tmp_path, emoji=False)

    assert calls[0]["args"] == ["cargo", "fmt", "--check"]
    assert calls[0]["discard_stdout"] is True
    assert calls[0]["discard_stderr"] is False
    assert calls[0]["cwd"] == tmp_path
    assert calls[1]["args"] == ["cargo", "clippy", "--", "-Dwarnings"]
    assert calls[1]["discard_stdout"] is False
    assert calls[1]["discard_stderr"] is True


def test_default_clippy_message_names_remedy() -> None:
    check = DEFAULT_CHECKS["cargo-clippy"]

    assert check.discard is DiscardStream.STDERR
    assert check.render_message() == "Clippy has suggestions, run cargo clippy and fix your code"
