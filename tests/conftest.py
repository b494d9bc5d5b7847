# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


def _write_script(path: Path, body: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
    path.chmod(0o755)
    return path


@pytest.fixture
def write_script() -> Callable[[Path, str], Path]:
    """Return a helper writing executable ``/bin/sh`` scripts."""

    return _write_script


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Return a throwaway repository root containing an empty ``.git`` directory."""

    root = tmp_path / "repo"
    (root / ".git").mkdir(parents=True)
    return root


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """Return a template directory laid out like ``scripts/git``."""

    source = tmp_path / "templates"
    _write_script(source / "resources" / "pre-commit.sh", 'echo "dispatching"')
    _write_script(source / "hooks" / "pre-commit-fmt.sh", "exit 0")
    _write_script(source / "hooks" / "pre-commit-lint.sh", "exit 0")
    return source
