"""Custom exceptions for configuration handling."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from cleanurls.exceptions import CleanUrlsError


class ConfigError(CleanUrlsError):
    """Base exception for all configuration-related errors."""


class ConfigParseError(ConfigError):
    """Raised when a configuration file is not valid TOML or YAML."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse config at '{path}': {reason}")


class ConfigValidationError(ConfigError):
    """Raised when the configuration file fails validation."""

    def __init__(self, path: Path | None = None, errors: Sequence[dict[str, Any]] | None = None) -> None:
        self.path = path
        self.errors = list(errors or [])
        where = f" in '{path}'" if path else ""
        super().__init__(f"Configuration validation failed{where} with {len(self.errors)} error(s).")
