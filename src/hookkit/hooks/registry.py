# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Registry helpers describing where hook templates live."""

from __future__ import annotations

from pathlib import Path
from typing import Final

TEMPLATE_ROOT: Final[Path] = Path(__file__).resolve().parents[1] / "templates"
DISPATCHER_TEMPLATE: Final[Path] = Path("resources") / "pre-commit.sh"
CHECK_TEMPLATE_DIR: Final[Path] = Path("hooks")
DEFAULT_PREFIX: Final[str] = "pre-commit"


def bundled_source_dir() -> Path:
    """Return the template directory shipped with the package.

    Returns:
        Path: Directory holding ``resources/pre-commit.sh`` and ``hooks/*``.
    """

    return TEMPLATE_ROOT


def dispatcher_template(source_dir: Path) -> Path:
    """Return the dispatcher template inside ``source_dir``."""

    return source_dir / DISPATCHER_TEMPLATE


def check_template_dir(source_dir: Path) -> Path:
    """Return the directory of check script templates inside ``source_dir``."""

    return source_dir / CHECK_TEMPLATE_DIR


def matches_prefix(name: str, prefix: str = DEFAULT_PREFIX) -> bool:
    """Return whether ``name`` is picked up by a dispatcher using ``prefix``.

    Args:
        name: Filename of a check script.
        prefix: Filename prefix the dispatcher selects.

    Returns:
        bool: ``True`` when the dispatcher will execute the file.
    """

    return name.startswith(prefix)


__all__ = [
    "CHECK_TEMPLATE_DIR",
    "DEFAULT_PREFIX",
    "DISPATCHER_TEMPLATE",
    "TEMPLATE_ROOT",
    "bundled_source_dir",
    "check_template_dir",
    "dispatcher_template",
    "matches_prefix",
]
