"""Configuration loading and dot-path access."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from scaffoldkit.errors import ConfigError

__all__ = ["Config"]


class Config:
    """Configuration accessor with dot-path key support."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    @classmethod
    def from_yaml(cls, path: str | Path) -> Config:
        """Load configuration from a YAML mapping file.

        Raises:
            ConfigError: If the file is missing, is not valid YAML, or is not a mapping.
        """
        path = Path(path)
        if not path.exists():
            raise ConfigError(message=f"Configuration file not found: {path}")

        try:
            parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError(message=f"Invalid YAML in configuration file: {path}", cause=e) from e

        if parsed is None:
            return cls()
        if not isinstance(parsed, dict):
            raise ConfigError(message=f"Configuration file must be a YAML mapping: {path}")
        return cls(parsed)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key."""
        parts = key.split(".")
        current: Any = self._data
        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current
