# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI tests for the install, dispatch, check, and verify commands."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from pathlib import Path

from typer.testing import CliRunner

from hookkit.cli.app import app

WriteScript = Callable[[Path, str], Path]


def test_cli_install_and_verify(git_repo: Path, source_dir: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        app,
        ["install", "--root", str(git_repo), "--source-dir", str(source_dir), "--no-emoji"],
    )

    assert result.exit_code == 0, result.stdout
    assert "Install pre-commit hook" in result.stdout
    assert "Install hook script: pre-commit-fmt.sh" in result.stdout
    assert "Installed 3 hooks" in result.stdout
    assert "✅" not in result.stdout
    assert os.access(git_repo / ".git" / "hooks" / "pre-commit.d" / "pre-commit-lint.sh", os.X_OK)

    verify = runner.invoke(
        app,
        ["verify", "--root", str(git_repo), "--source-dir", str(source_dir), "--no-emoji"],
    )
    assert verify.exit_code == 0, verify.stdout
    assert "3 hooks installed and executable" in verify.stdout


def test_cli_install_dry_run(git_repo: Path, source_dir: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        app,
        ["install", "--root", str(git_repo), "--source-dir", str(source_dir), "--dry-run", "--no-emoji"],
    )

    assert result.exit_code == 0
    assert "Dry run complete" in result.stdout
    assert "DRY RUN" in result.stdout
    assert not (git_repo / ".git" / "hooks").exists()


def test_cli_install_outside_repository(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["install", "--root", str(tmp_path), "--no-emoji"])

    assert result.exit_code == 1
    assert "Not a git repository" in result.stdout


def test_cli_install_reads_source_dir_from_pyproject(git_repo: Path, write_script: WriteScript) -> None:
    write_script(git_repo / "scripts" / "git" / "resources" / "pre-commit.sh", "exit 0")
    write_script(git_repo / "scripts" / "git" / "hooks" / "pre-commit-custom.sh", "exit 0")
    (git_repo / "pyproject.toml").write_text('[tool.hookkit]\nsource_dir = "scripts/git"\n', encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(app, ["install", "--root", str(git_repo), "--no-emoji"])

    assert result.exit_code == 0, result.stdout
    assert (git_repo / ".git" / "hooks" / "pre-commit.d" / "pre-commit-custom.sh").is_file()


def test_cli_verify_reports_missing_hooks(git_repo: Path, source_dir: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        app,
        ["verify", "--root", str(git_repo), "--source-dir", str(source_dir), "--no-emoji"],
    )

    assert result.exit_code == 1
    assert "Missing hook:" in result.stdout
    assert "hookkit install" in result.stdout


def test_cli_dispatch_failing_check_script(git_repo: Path, tmp_path: Path, write_script: WriteScript) -> None:
    source = tmp_path / "failing-templates"
    write_script(source / "resources" / "pre-commit.sh", "exit 0")
    write_script(source / "hooks" / "pre-commit-fmt.sh", "exit 1")
    runner = CliRunner()
    install = runner.invoke(
        app,
        ["install", "--root", str(git_repo), "--source-dir", str(source), "--no-emoji"],
    )
    assert install.exit_code == 0, install.stdout

    result = runner.invoke(
        app,
        ["dispatch", "--check-dir", str(git_repo / ".git" / "hooks" / "pre-commit.d"), "--no-emoji"],
    )

    assert result.exit_code != 0
    assert "pre-commit-fmt.sh" in result.stdout


def test_cli_dispatch_all_passing(git_repo: Path, source_dir: Path) -> None:
    runner = CliRunner()
    runner.invoke(app, ["install", "--root", str(git_repo), "--source-dir", str(source_dir), "--no-emoji"])

    result = runner.invoke(
        app,
        ["dispatch", "--check-dir", str(git_repo / ".git" / "hooks" / "pre-commit.d"), "--no-emoji"],
    )

    assert result.exit_code == 0
    assert "All 2 hooks passed" in result.stdout


def test_cli_check_reports_remedy(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        f"""
[tool.hookkit.checks.fmt]
command = [{str(sys.executable)!r}, "-c", "import sys; sys.exit(1)"]
remedy = "cargo fmt"
message = "There are some code style issues, run {{remedy}} first"
""",
        encoding="utf-8",
    )
    runner = CliRunner()

    result = runner.invoke(app, ["check", "fmt", "--root", str(tmp_path), "--no-emoji"])

    assert result.exit_code == 1
    assert "There are some code style issues, run cargo fmt first" in result.stdout


def test_cli_check_unknown_name(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["check", "prettier", "--root", str(tmp_path), "--no-emoji"])

    assert result.exit_code == 2
    assert "Unknown check 'prettier'" in result.stdout


def test_cli_help_lists_commands() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    for command in ("install", "dispatch", "check", "verify"):
        assert command in result.stdout
