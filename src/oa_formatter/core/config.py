#!/usr/bin/env python3
"""Configuration loader that reads from config files."""
import os
from pathlib import Path
from typing import Any

import tomllib

DEFAULT_CONFIG: dict[str, Any] = {
    "registry": {
        # Abort a pipeline on the first failing step or hook
        "stop_on_error": True,
        # Reserved; pipelines always run sequentially
        "parallel": False,
    },
    "cli": {"default_pipelines": ["init"]},
}


def as_bool(value: Any) -> bool:
    """Interpret config flags; strings count as true only for "1", "true" or "yes"."""
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes"}
    return bool(value)


class ConfigLoader:
    """Load configuration from config files."""

    def __init__(self, config_path: str | Path | None = None) -> None:
        if config_path is None:
            config_path = self._default_config_path()

        self.config_file = str(config_path)
        config_path = Path(config_path)
        if config_path.exists():
            with open(config_path, "rb") as f:
                full_config = tomllib.load(f)
            formatter_config = full_config.get("formatter", {})
        else:
            formatter_config = {}

        self._config = self._merge_dicts(DEFAULT_CONFIG, formatter_config)

        env_stop = os.environ.get("OA_FORMATTER_STOP_ON_ERROR")
        if env_stop:
            # Rebuild the section so DEFAULT_CONFIG's nested dict is never mutated
            self._config["registry"] = {
                **self._config.get("registry", {}),
                "stop_on_error": as_bool(env_stop),
            }

    def _default_config_path(self) -> Path:
        env_path = os.environ.get("OA_FORMATTER_CONFIG")
        if env_path:
            return Path(env_path)
        return Path.home() / ".oa_formatter" / "config.toml"

    def _merge_dicts(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        merged = base.copy()
        for key, value in override.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = self._merge_dicts(merged[key], value)
            else:
                merged[key] = value
        return merged

    def get(self, key_path: str, default: Any = None) -> Any:
        """Get a value using dot notation (e.g., 'registry.stop_on_error')"""
        keys = key_path.split(".")
        value = self._config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    @property
    def stop_on_error(self) -> bool:
        return as_bool(self.get("registry.stop_on_error", True))

    @property
    def parallel(self) -> bool:
        return as_bool(self.get("registry.parallel", False))

    @property
    def default_pipelines(self) -> list[str]:
        pipelines = self.get("cli.default_pipelines", ["init"])
        if isinstance(pipelines, str):
            return [pipelines]
        return [str(name) for name in pipelines]


# Global singleton instance
_config_loader: ConfigLoader | None = None


def get_config() -> ConfigLoader:
    """Get the global config loader instance"""
    global _config_loader
    if _config_loader is None:
        _config_loader = ConfigLoader()
    return _config_loader


def reset_config() -> None:
    """Drop the cached loader so the next get_config() re-reads the file."""
    global _config_loader
    _config_loader = None


# Re-export logging functions
from .logging import setup_logging  # noqa: E402, F401
