"""Weekly class schedule."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional

import yaml
from loguru import logger

from studio_cli.core.config import ConfigError
from studio_cli.core.constants import WEEKDAYS
from studio_cli.core.models import ClassSession

_DEFAULT_WEEK: Dict[str, List[ClassSession]] = {
    "monday": [
        ClassSession(
            id="mon-1",
            start="07:00",
            end="08:00",
            name="CrossFit WOD",
            instructor="Sarah Coach",
            location="CrossFit Box",
            capacity=20,
            booked=15,
            description="21-15-9 reps for time of: Thrusters (95/65 lbs), Pull-ups",
        ),
        ClassSession(
            id="mon-2",
            start="12:00",
            end="13:00",
            name="Open Gym",
            instructor="Mike Coach",
            location="Gym Floor",
            capacity=15,
            booked=12,
            kind="opengym",
            description="Free access to all gym equipment and space for personal training",
        ),
        ClassSession(
            id="mon-3",
            start="18:00",
            end="19:00",
            name="CrossFit Strength",
            instructor="Alex Coach",
            location="CrossFit Box",
            capacity=12,
            booked=8,
            description="Work up to a 1RM Back Squat, then 3x8 Front Squats at 75%",
        ),
    ],
    "tuesday": [
        ClassSession(
            id="tue-1",
            start="06:30",
            end="07:30",
            name="CrossFit WOD",
            instructor="Emma Coach",
            location="CrossFit Box",
            capacity=16,
            booked=16,
            description="For time: 400m Run, 21 KB Swings (24/16kg), 12 Pull-ups, 400m Run",
        ),
        ClassSession(
            id="tue-2",
            start="10:00",
            end="11:00",
            name="Open Gym",
            instructor="James Coach",
            location="Main Gym",
            capacity=18,
            booked=14,
            kind="opengym",
            description="Open access to all equipment - perfect for personal training sessions",
        ),
        ClassSession(
            id="tue-3",
            start="17:30",
            end="18:30",
            name="CrossFit Metcon",
            instructor="Lisa Coach",
            location="CrossFit Box",
            capacity=25,
            booked=22,
            description="5 Rounds: 200m Run, 10 Burpees, 15 Box Jumps (24/20)",
        ),
    ],
    "wednesday": [
        ClassSession(
            id="wed-1",
            start="07:00",
            end="08:00",
            name="CrossFit WOD",
            instructor="Sarah Coach",
            location="CrossFit Box",
            capacity=20,
            booked=11,
            description="12 Min AMRAP: 9 Deadlifts (155/105 lbs), 12 Push-ups, 15 Air Squats",
        ),
        ClassSession(
            id="wed-2",
            start="19:00",
            end="20:00",
            name="Open Gym",
            instructor="Alex Coach",
            location="Main Gym",
            capacity=12,
            booked=9,
            kind="opengym",
            description="Evening open gym session - bring your own workout or ask for coaching tips",
        ),
    ],
    "thursday": [
        ClassSession(
            id="thu-1",
            start="06:00",
            end="07:00",
            name="CrossFit AMRAP",
            instructor="Robert Coach",
            location="CrossFit Box",
            capacity=20,
            booked=18,
            description="20 Min AMRAP: 5 Pull-ups, 10 Push-ups, 15 Air Squats",
        ),
        ClassSession(
            id="thu-2",
            start="12:30",
            end="13:30",
            name="Open Gym",
            instructor="Emma Coach",
            location="Main Gym",
            capacity=15,
            booked=13,
            kind="opengym",
            description="Lunch break workout - perfect for quick training sessions",
        ),
        ClassSession(
            id="thu-3",
            start="18:00",
            end="19:00",
            name="CrossFit Open",
            instructor="Mike Coach",
            location="CrossFit Box",
            capacity=16,
            booked=10,
            description=(
                "CrossFit Open 24.1: 21-18-15-12-9-6-3 reps: "
                "Burpees over Box, Box Jump Overs (24/20)"
            ),
        ),
    ],
    "friday": [
        ClassSession(
            id="fri-1",
            start="07:30",
            end="08:30",
            name="CrossFit WOD",
            instructor="Sarah Coach",
            location="CrossFit Box",
            capacity=20,
            booked=16,
            description=(
                "Friday Team WOD: Partner up! 100 Wall Balls, 80 KB Swings, "
                "60 Burpees, 40 Pull-ups"
            ),
        ),
        ClassSession(
            id="fri-2",
            start="17:00",
            end="18:00",
            name="Open Gym",
            instructor="Alex Coach",
            location="Main Gym",
            capacity=15,
            booked=12,
            kind="opengym",
            description="Friday wind-down session - lighter workouts and recovery focus",
        ),
    ],
    "saturday": [],
    "sunday": [],
}


def weekday_key(day: date) -> str:
    """Map a calendar date to its schedule key."""
    return WEEKDAYS[day.weekday()]


class ScheduleStore:
    """Read-only per-weekday list of class sessions."""

    def __init__(self, week: Optional[Mapping[str, Iterable[ClassSession]]] = None) -> None:
        source = _DEFAULT_WEEK if week is None else week
        self._week: Dict[str, List[ClassSession]] = {
            day: list(source.get(day, [])) for day in WEEKDAYS
        }
        self._by_id: Dict[str, ClassSession] = {}
        for sessions in self._week.values():
            for session in sessions:
                self._by_id[session.id] = session

    def for_weekday(self, name: str) -> List[ClassSession]:
        return list(self._week.get(name.strip().lower(), []))

    def for_date(self, day: date) -> List[ClassSession]:
        return self.for_weekday(weekday_key(day))

    def get(self, session_id: str) -> Optional[ClassSession]:
        return self._by_id.get(session_id)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._by_id

    def __len__(self) -> int:
        return len(self._by_id)


def _int_field(raw: Mapping[str, Any], key: str, default: Optional[int] = None) -> int:
    value = raw.get(key, default)
    if value is None:
        raise ConfigError(f"Session {raw.get('id')!r} is missing '{key}'")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Session {raw.get('id')!r} has non-integer '{key}': {value!r}") from exc


def _clock_field(raw: Mapping[str, Any], key: str) -> str:
    value = raw.get(key)
    # YAML reads an unquoted 17:00 as 1020 (minutes).
    if isinstance(value, int) and not isinstance(value, bool):
        hours, minutes = divmod(value, 60)
        return f"{hours:02d}:{minutes:02d}"
    return str(value or "")


def session_from_dict(raw: Mapping[str, Any]) -> ClassSession:
    """Build a ClassSession from a schedule file row."""
    for key in ("id", "start", "name"):
        if not raw.get(key):
            raise ConfigError(f"Schedule entry is missing '{key}': {dict(raw)!r}")

    capacity = _int_field(raw, "capacity")
    booked = _int_field(raw, "booked", default=0)
    if capacity <= 0:
        raise ConfigError(f"Session {raw['id']!r} must have a positive capacity")
    if booked < 0:
        raise ConfigError(f"Session {raw['id']!r} has a negative booked count")

    return ClassSession(
        id=str(raw["id"]),
        start=_clock_field(raw, "start"),
        end=_clock_field(raw, "end"),
        name=str(raw["name"]),
        instructor=str(raw.get("instructor") or ""),
        location=str(raw.get("location") or ""),
        capacity=capacity,
        booked=booked,
        kind=str(raw.get("kind") or "crossfit"),
        description=str(raw.get("description") or ""),
    )


def load_schedule_file(path: Path) -> ScheduleStore:
    """Load a weekday -> sessions mapping from YAML or JSON."""
    if not path.exists():
        raise ConfigError(f"Schedule file not found: {path}")

    try:
        raw = yaml.safe_load(path.read_text())
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid schedule file {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"Schedule file {path} must map weekday names to session lists")

    week: Dict[str, List[ClassSession]] = {}
    for day, rows in raw.items():
        key = str(day).strip().lower()
        if key not in WEEKDAYS:
            raise ConfigError(f"Unknown weekday in schedule file: {day!r}")
        if not isinstance(rows, list):
            raise ConfigError(f"Sessions for {day!r} must be a list")
        week[key] = [session_from_dict(row) for row in rows if isinstance(row, dict)]

    store = ScheduleStore(week)
    logger.debug(f"Loaded {len(store)} sessions from {path}")
    return store
