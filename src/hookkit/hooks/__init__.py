# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Hook installation, dispatch, and check services."""

from __future__ import annotations

from .checks import run_check
from .dispatcher import discover_hooks, dispatch_hooks
from .installer import install_hooks, resolve_layout, verify_installation
from .models import CheckOutcome, DispatchResult, HookLayout, InstallResult, VerifyResult
from .registry import DEFAULT_PREFIX, bundled_source_dir

__all__ = [
    "CheckOutcome",
    "DEFAULT_PREFIX",
    "DispatchResult",
    "HookLayout",
    "InstallResult",
    "VerifyResult",
    "bundled_source_dir",
    "discover_hooks",
    "dispatch_hooks",
    "install_hooks",
    "resolve_layout",
    "run_check",
    "verify_installation",
]
