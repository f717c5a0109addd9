from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Callable, Dict, List

import pytest
import yaml
from typer.testing import CliRunner

from studio_cli.core.models import ClassSession


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("STUDIO_CONFIG_FILE", str(tmp_path / "no-config.toml"))
    monkeypatch.delenv("STUDIO_SCHEDULE_FILE", raising=False)


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def fixed_clock() -> Callable[[], datetime]:
    start = datetime(2026, 10, 21, 8, 0, tzinfo=timezone.utc)
    return lambda: start


@pytest.fixture()
def steady_clock() -> Callable[[], datetime]:
    ticks = iter(range(1000))
    start = datetime(2026, 10, 21, 8, 0, tzinfo=timezone.utc)
    return lambda: start + timedelta(seconds=next(ticks))


@pytest.fixture()
def open_session() -> ClassSession:
    return ClassSession(
        id="wed-1",
        start="07:00",
        end="08:00",
        name="CrossFit WOD",
        instructor="Sarah Coach",
        location="CrossFit Box",
        capacity=20,
        booked=5,
        description="12 Min AMRAP: 9 Deadlifts (155/105 lbs), 12 Push-ups, 15 Air Squats",
    )


@pytest.fixture()
def time_candidates() -> List[Dict[str, Any]]:
    return [
        {"workout_id": "mon-1", "workout_name": "CrossFit WOD", "modality": "time-based", "time": "9:15", "athlete": "Sarah"},
        {"workout_id": "mon-1", "workout_name": "CrossFit WOD", "modality": "time-based", "time": "8:32", "athlete": "Alex"},
        {"workout_id": "mon-1", "workout_name": "CrossFit WOD", "modality": "time-based", "time": "9:48", "athlete": "Mike"},
    ]


@pytest.fixture()
def write_temp_json(tmp_path: Path):
    def _write(name: str, payload: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload, indent=2) + "\n")
        return path

    return _write


@pytest.fixture()
def write_temp_yaml(tmp_path: Path):
    def _write(name: str, payload: Any) -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(payload, sort_keys=False))
        return path

    return _write


@pytest.fixture()
def write_temp_toml(tmp_path: Path):
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content.strip() + "\n")
        return path

    return _write
