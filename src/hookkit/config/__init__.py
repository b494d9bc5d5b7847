# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loaders."""

from __future__ import annotations

from .loader import PYPROJECT_FILENAME, load_config
from .models import DEFAULT_CHECKS, CheckDefinition, ConfigError, DiscardStream, HookKitConfig

__all__ = [
    "CheckDefinition",
    "ConfigError",
    "DEFAULT_CHECKS",
    "DiscardStream",
    "HookKitConfig",
    "PYPROJECT_FILENAME",
    "load_config",
]
