# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for hook installation and check execution."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class DiscardStream(str, Enum):
    """Enumerate output streams a check may silence."""

    NONE = "none"
    STDOUT = "stdout"
    STDERR = "stderr"


class CheckDefinition(BaseModel):
    """Describe a single external formatter or linter invoked by a check script."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    command: list[str] = Field(min_length=1)
    remedy: str
    message: str = "{name} reported issues, run {remedy} first"
    discard: DiscardStream = DiscardStream.NONE

    @field_validator("message")
    @classmethod
    def _message_mentions_remedy(cls, value: str) -> str:
        if "{remedy}" not in value:
            raise ValueError("message must contain the '{remedy}' placeholder")
        try:
            value.format(name="", remedy="")
        except (KeyError, IndexError, AttributeError, ValueError) as exc:
            raise ValueError(
                f"message may only use the '{{name}}' and '{{remedy}}' placeholders: {exc!r}",
            ) from exc
        return value

    def render_message(self, remedy: str | None = None) -> str:
        """Return the failure message with the remedy command substituted.

        Args:
            remedy: Optional pre-formatted remedy text, e.g. wrapped in ANSI bold.

        Returns:
            str: One-line guidance shown when the check fails.
        """

        return self.message.format(name=self.name, remedy=remedy if remedy is not None else self.remedy)


DEFAULT_CHECKS: Final[dict[str, CheckDefinition]] = {
    "cargo-fmt": CheckDefinition(
        name="cargo-fmt",
        command=["cargo", "fmt", "--check"],
        remedy="cargo fmt",
        message="There are some code style issues, run {remedy} first",
        discard=DiscardStream.STDOUT,
    ),
    "cargo-clippy": CheckDefinition(
        name="cargo-clippy",
        command=["cargo", "clippy", "--", "-Dwarnings"],
        remedy="cargo clippy",
        message="Clippy has suggestions, run {remedy} and fix your code",
        discard=DiscardStream.STDERR,
    ),
}


class HookKitConfig(BaseModel):
    """Top-level configuration resolved from ``[tool.hookkit]``."""

    model_config = ConfigDict(extra="forbid")

    source_dir: Path | None = None
    hooks_dir: Path = Path(".git/hooks")
    dispatcher_name: str = "pre-commit"
    check_dir_name: str = "pre-commit.d"
    prefix: str = "pre-commit"
    backup_foreign_dispatcher: bool = True
    checks: dict[str, CheckDefinition] = Field(default_factory=lambda: dict(DEFAULT_CHECKS))

    def resolve_paths(self, root: Path) -> HookKitConfig:
        """Return a copy whose relative paths are anchored at ``root``."""

        updates: dict[str, Path] = {}
        if not self.hooks_dir.is_absolute():
            updates["hooks_dir"] = root / self.hooks_dir
        if self.source_dir is not None and not self.source_dir.is_absolute():
            updates["source_dir"] = root / self.source_dir
        return self.model_copy(update=updates)

    def get_check(self, name: str) -> CheckDefinition:
        """Return the check registered as ``name``.

        Raises:
            KeyError: When no such check is configured.
        """

        try:
            return self.checks[name]
        except KeyError:
            known = ", ".join(sorted(self.checks)) or "<none>"
            raise KeyError(f"Unknown check '{name}' (known: {known})") from None


__all__ = [
    "CheckDefinition",
    "ConfigError",
    "DEFAULT_CHECKS",
    "DiscardStream",
    "HookKitConfig",
]
