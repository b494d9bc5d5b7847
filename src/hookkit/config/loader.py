# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Load ``[tool.hookkit]`` configuration from TOML documents."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError

from .models import DEFAULT_CHECKS, ConfigError, HookKitConfig

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "hookkit"


def _read_toml(path: Path) -> Mapping[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc


def _extract_section(document: Mapping[str, Any], path: Path) -> dict[str, Any]:
    tool_section = document.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ConfigError(f"[tool.hookkit] in {path} must be a table")
    return dict(section)


def _merge_checks(raw_checks: Any, path: Path) -> dict[str, Any]:
    """Overlay user check tables onto the defaults, keyed by check name."""

    merged: dict[str, Any] = {name: check.model_dump() for name, check in DEFAULT_CHECKS.items()}
    if raw_checks is None:
        return merged
    if not isinstance(raw_checks, Mapping):
        raise ConfigError(f"[tool.hookkit.checks] in {path} must be a table")
    for name, payload in raw_checks.items():
        if not isinstance(payload, Mapping):
            raise ConfigError(f"Check '{name}' in {path} must be a table")
        base = merged.get(name, {})
        merged[name] = {**base, **payload, "name": name}
    return merged


def load_config(root: Path, *, path: Path | None = None) -> HookKitConfig:
    """Return the hook configuration for ``root``.

    ``path`` points at an explicit TOML file; otherwise ``<root>/pyproject.toml``
    is consulted. Missing files and missing sections yield the defaults.

    Args:
        root: Project root used to anchor relative paths.
        path: Optional configuration file overriding ``pyproject.toml``.

    Returns:
        HookKitConfig: Validated configuration with absolute paths.

    Raises:
        ConfigError: When the document or its values are invalid.
    """

    project_root = root.resolve()
    config_path = path if path is not None else project_root / PYPROJECT_FILENAME
    section: dict[str, Any] = {}
    if config_path.is_file():
        section = _extract_section(_read_toml(config_path), config_path)
    elif path is not None:
        raise ConfigError(f"Configuration file not found: {config_path}")

    section["checks"] = _merge_checks(section.get("checks"), config_path)
    try:
        config = HookKitConfig.model_validate(section)
    except ValidationError as exc:
        raise ConfigError(f"Invalid hookkit configuration in {config_path}: {exc}") from exc
    return config.resolve_paths(project_root)


__all__ = ["PYPROJECT_FILENAME", "load_config"]
