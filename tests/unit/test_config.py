from __future__ import annotations

import json
from pathlib import Path

import pytest

from studio_cli.core.config import (
    ConfigError,
    _deep_merge,
    default_config_path,
    expand_path,
    load_config,
    resolve_athlete,
    resolve_schedule_file,
)


def test_deep_merge_nested_dicts() -> None:
    base = {"a": {"b": 1, "c": 2}, "x": 3}
    override = {"a": {"b": 9}, "y": 4}
    merged = _deep_merge(base, override)
    assert merged == {"a": {"b": 9, "c": 2}, "x": 3, "y": 4}
    assert base["a"]["b"] == 1


def test_expand_path_expands_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("STUDIO_TMP_PATH", str(tmp_path))
    assert expand_path("$STUDIO_TMP_PATH/config.toml") == (tmp_path / "config.toml").resolve()


def test_default_config_path_uses_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    path = tmp_path / "custom.toml"
    monkeypatch.setenv("STUDIO_CONFIG_FILE", str(path))
    assert default_config_path() == path.resolve()


def test_load_config_missing_file_returns_defaults(tmp_path: Path) -> None:
    cfg = load_config(tmp_path / "missing.toml")
    assert cfg["defaults"]["athlete"] == "You"
    assert cfg["session"]["role"] == "member"
    assert cfg["schedule"]["file"] is None


def test_load_config_from_toml(write_temp_toml) -> None:
    path = write_temp_toml(
        "config.toml",
        """
[defaults]
athlete = "Jordan"

[classification.rules]
"load-based" = ["heavy"]
""",
    )
    cfg = load_config(path)
    assert cfg["defaults"]["athlete"] == "Jordan"
    assert cfg["classification"]["rules"]["load-based"] == ["heavy"]
    assert cfg["session"]["role"] == "member"


def test_load_config_from_json(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"session": {"role": "admin"}}))
    assert load_config(path)["session"]["role"] == "admin"


def test_load_config_invalid_json_raises(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{broken")
    with pytest.raises(ConfigError):
        load_config(path)


def test_load_config_invalid_toml_raises(tmp_path: Path) -> None:
    path = tmp_path / "broken.toml"
    path.write_text("[defaults\nathlete = 3")
    with pytest.raises(ConfigError):
        load_config(path)


def test_load_config_non_table_root_raises(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    path.write_text("[1, 2]")
    with pytest.raises(ConfigError):
        load_config(path)


def test_resolve_schedule_file_prefers_explicit(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("STUDIO_SCHEDULE_FILE", str(tmp_path / "env.yaml"))
    explicit = tmp_path / "cli.yaml"
    assert resolve_schedule_file({}, explicit=explicit) == explicit.resolve()
    assert resolve_schedule_file({}) == (tmp_path / "env.yaml").resolve()


def test_resolve_schedule_file_defaults_to_builtin() -> None:
    assert resolve_schedule_file({"schedule": {"file": None}}) is None


def test_resolve_athlete() -> None:
    assert resolve_athlete({}) == "You"
    assert resolve_athlete({"defaults": {"athlete": "Sam"}}) == "Sam"
