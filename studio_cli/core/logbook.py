"""Append-only store of logged workout results."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional

from loguru import logger

from studio_cli.core.classify import classify
from studio_cli.core.constants import DEFAULT_ATHLETE, SCALE_ALIASES
from studio_cli.core.models import (
    CompletionResult,
    LoadResult,
    Performance,
    RoundsResult,
    ScaleTier,
    TimeResult,
    WorkoutLogEntry,
    WorkoutModality,
)
from studio_cli.utils.parsing import is_blank, parse_float, parse_int

# Scoring names used by the class board and older log files.
_MODALITY_ALIASES = {
    "fortime": WorkoutModality.TIME,
    "for-time": WorkoutModality.TIME,
    "amrap": WorkoutModality.ROUNDS,
    "strength": WorkoutModality.LOAD,
    "emom": WorkoutModality.COMPLETION,
}


class LogValidationError(ValueError):
    """Raised when a submitted result is missing a field its modality needs."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def parse_modality(value: Any) -> WorkoutModality:
    if isinstance(value, WorkoutModality):
        return value
    text = str(value).strip().lower()
    if text in _MODALITY_ALIASES:
        return _MODALITY_ALIASES[text]
    try:
        return WorkoutModality(text)
    except ValueError as exc:
        raise LogValidationError("modality", f"Unknown workout modality: {value!r}") from exc


def parse_scale(value: Any) -> ScaleTier:
    if is_blank(value):
        return ScaleTier.STANDARD
    if isinstance(value, ScaleTier):
        return value
    tier = SCALE_ALIASES.get(str(value).strip().lower())
    if tier is None:
        raise LogValidationError("scale", f"Unknown scale tier: {value!r}")
    return ScaleTier(tier)


def _number(parse: Callable[[Any], Any], candidate: Mapping[str, Any], field: str, *keys: str) -> Any:
    for key in (field,) + keys:
        value = candidate.get(key)
        if is_blank(value):
            continue
        try:
            number = parse(value)
        except (TypeError, ValueError) as exc:
            raise LogValidationError(field, f"Invalid {field}: {value!r}") from exc
        if number < 0:
            raise LogValidationError(field, f"{field.capitalize()} cannot be negative")
        return number
    return None


def build_performance(modality: WorkoutModality, candidate: Mapping[str, Any]) -> Performance:
    """Turn raw form fields into the payload for ``modality``."""
    if modality is WorkoutModality.TIME:
        text = candidate.get("time")
        # YAML reads an unquoted 9:15 as the integer 555.
        if isinstance(text, int) and not isinstance(text, bool):
            if text < 0:
                raise LogValidationError("time", "Time cannot be negative")
            return TimeResult.from_parts(*divmod(text, 60))
        if not is_blank(text):
            return TimeResult(text=str(text).strip())
        minutes = _number(parse_int, candidate, "minutes")
        seconds = _number(parse_int, candidate, "seconds")
        if minutes is None and seconds is None:
            raise LogValidationError("time", "Please enter a time for this timed workout")
        return TimeResult.from_parts(minutes, seconds)

    if modality is WorkoutModality.ROUNDS:
        rounds = _number(parse_int, candidate, "rounds")
        if rounds is None:
            raise LogValidationError("rounds", "Please enter the number of rounds completed")
        return RoundsResult(rounds=rounds, reps=_number(parse_int, candidate, "reps"))

    if modality is WorkoutModality.LOAD:
        load = _number(parse_float, candidate, "load", "weight")
        if load is None:
            raise LogValidationError("load", "Please enter the weight lifted")
        return LoadResult(load=load)

    return CompletionResult()


class WorkoutLogStore:
    """Validating, append-only sequence of workout log entries."""

    def __init__(
        self,
        entries: Optional[List[WorkoutLogEntry]] = None,
        clock: Callable[[], datetime] = _utcnow,
        athlete: str = DEFAULT_ATHLETE,
    ) -> None:
        self._entries: List[WorkoutLogEntry] = entries if entries is not None else []
        self._clock = clock
        self._athlete = athlete

    def _next_timestamp(self) -> datetime:
        now = self._clock()
        if self._entries and now <= self._entries[-1].created_at:
            now = self._entries[-1].created_at + timedelta(microseconds=1)
        return now

    def append(self, candidate: Mapping[str, Any]) -> WorkoutLogEntry:
        """Validate a submission and append it.

        Raises LogValidationError naming the offending field; the store is
        left unchanged in that case.
        """
        workout_id = candidate.get("workout_id")
        if is_blank(workout_id):
            raise LogValidationError("workout_id", "Please select a workout to log")

        name = str(candidate.get("workout_name") or candidate.get("name") or "")
        description = str(
            candidate.get("workout_description") or candidate.get("description") or ""
        )
        raw_modality = candidate.get("modality") or candidate.get("workout_type")
        modality = parse_modality(raw_modality) if raw_modality else classify(name, description)

        try:
            result = build_performance(modality, candidate)
            scale = parse_scale(candidate.get("scale"))
        except LogValidationError as exc:
            logger.debug(f"Rejected {modality.value} log for {workout_id}: {exc}")
            raise

        entry = WorkoutLogEntry(
            workout_id=str(workout_id),
            workout_name=name,
            workout_description=description,
            instructor=str(candidate.get("instructor") or ""),
            modality=modality,
            result=result,
            scale=scale,
            notes=str(candidate.get("notes") or ""),
            athlete=str(candidate.get("athlete") or self._athlete),
            created_at=self._next_timestamp(),
            sequence=len(self._entries),
        )
        self._entries.append(entry)
        logger.debug(f"Logged {modality.value} result for {entry.workout_id}")
        return entry

    @property
    def entries(self) -> List[WorkoutLogEntry]:
        return list(self._entries)

    def for_workout(self, workout_id: str) -> List[WorkoutLogEntry]:
        return [entry for entry in self._entries if entry.workout_id == workout_id]

    def __iter__(self) -> Iterator[WorkoutLogEntry]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)


def entry_to_dict(entry: WorkoutLogEntry) -> Dict[str, Any]:
    """JSON-friendly view of a log entry."""
    payload: Dict[str, Any] = {
        "workout_id": entry.workout_id,
        "workout_name": entry.workout_name,
        "modality": entry.modality.value,
        "scale": entry.scale.value,
        "athlete": entry.athlete,
        "notes": entry.notes,
        "created_at": entry.created_at.isoformat(),
    }
    result = entry.result
    if isinstance(result, TimeResult):
        payload["time"] = result.text
    elif isinstance(result, RoundsResult):
        payload["rounds"] = result.rounds
        payload["reps"] = result.reps
    elif isinstance(result, LoadResult):
        payload["load"] = result.load
    return payload
