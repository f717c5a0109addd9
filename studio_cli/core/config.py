"""Configuration loading."""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # Python 3.9-3.10
    import tomli as tomllib  # type: ignore[no-redef]


class ConfigError(RuntimeError):
    """Raised when config or input file parsing fails."""


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def expand_path(path_str: str) -> Path:
    """Expand user/env vars and return absolute path."""
    return Path(os.path.expandvars(path_str)).expanduser().resolve()


def default_config_path() -> Path:
    """Get default config file path."""
    raw = os.getenv("STUDIO_CONFIG_FILE", "~/.config/studio/config.toml")
    return expand_path(raw)


def _default_config() -> Dict[str, Any]:
    return {
        "defaults": {
            "athlete": "You",
            "date": None,
        },
        "schedule": {
            "file": None,
        },
        "classification": {
            "rules": {},
        },
        "session": {
            "email": None,
            "role": "member",
        },
    }


DEFAULT_CONFIG: Dict[str, Any] = _default_config()


def _read_config(path: Path) -> Dict[str, Any]:
    suffix = path.suffix.lower()
    text = path.read_text()
    try:
        if suffix in {".toml", ""}:
            loaded = tomllib.loads(text)
        else:
            loaded = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in config file {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in config file {path}: {exc}") from exc

    if not isinstance(loaded, dict):
        raise ConfigError(f"Config file {path} must contain an object/table at the root")
    return loaded


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration from disk, merged with defaults."""
    cfg_path = path or default_config_path()
    cfg = _default_config()
    if cfg_path.exists():
        cfg = _deep_merge(cfg, _read_config(cfg_path))
    return cfg


def resolve_schedule_file(config: Dict[str, Any], explicit: Optional[Path] = None) -> Optional[Path]:
    """Resolve a schedule file with CLI override first; None means the built-in week."""
    if explicit is not None:
        return explicit.expanduser().resolve()
    raw = os.getenv("STUDIO_SCHEDULE_FILE") or config.get("schedule", {}).get("file")
    if not raw:
        return None
    return expand_path(raw)


def resolve_athlete(config: Dict[str, Any]) -> str:
    """Label used for the current user's leaderboard rows."""
    return str(config.get("defaults", {}).get("athlete") or "You")
