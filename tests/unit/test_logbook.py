from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Dict, List

import pytest

from studio_cli.core.logbook import (
    LogValidationError,
    WorkoutLogStore,
    entry_to_dict,
    parse_modality,
    parse_scale,
)
from studio_cli.core.models import (
    CompletionResult,
    LoadResult,
    RoundsResult,
    ScaleTier,
    TimeResult,
    WorkoutLogEntry,
    WorkoutModality,
)


def test_rounds_log_without_rounds_is_rejected() -> None:
    store = WorkoutLogStore()
    with pytest.raises(LogValidationError) as excinfo:
        store.append({"workout_id": "wed-1", "modality": "rounds-based", "reps": 4})
    assert excinfo.value.field == "rounds"
    assert len(store) == 0


@pytest.mark.parametrize(
    ("modality", "field"),
    [("time-based", "time"), ("rounds-based", "rounds"), ("load-based", "load")],
)
def test_missing_payload_field_names_the_field(modality: str, field: str) -> None:
    store = WorkoutLogStore()
    with pytest.raises(LogValidationError) as excinfo:
        store.append({"workout_id": "w", "modality": modality, "minutes": "", "rounds": " "})
    assert excinfo.value.field == field
    assert store.entries == []


def test_time_from_minutes_and_seconds() -> None:
    store = WorkoutLogStore()
    entry = store.append({"workout_id": "mon-1", "modality": "time-based", "minutes": "8", "seconds": "5"})
    assert entry.result == TimeResult(text="8:05")


def test_time_with_only_seconds_is_accepted() -> None:
    entry = WorkoutLogStore().append({"workout_id": "mon-1", "modality": "time-based", "seconds": 45})
    assert entry.result == TimeResult(text="0:45")


def test_time_string_is_kept_as_entered() -> None:
    entry = WorkoutLogStore().append({"workout_id": "mon-1", "modality": "time-based", "time": " 9:15 "})
    assert entry.result == TimeResult(text="9:15")


def test_rounds_with_optional_reps() -> None:
    store = WorkoutLogStore()
    with_reps = store.append({"workout_id": "wed-1", "modality": "rounds-based", "rounds": "7", "reps": "4"})
    without = store.append({"workout_id": "wed-1", "modality": "rounds-based", "rounds": 6})
    assert with_reps.result == RoundsResult(rounds=7, reps=4)
    assert without.result == RoundsResult(rounds=6, reps=None)


def test_load_accepts_weight_alias() -> None:
    entry = WorkoutLogStore().append({"workout_id": "mon-3", "modality": "load-based", "weight": "227.5"})
    assert entry.result == LoadResult(load=227.5)


def test_completion_needs_no_payload() -> None:
    entry = WorkoutLogStore().append({"workout_id": "x", "modality": "completion-based"})
    assert entry.result == CompletionResult()


def test_non_numeric_rounds_is_rejected() -> None:
    store = WorkoutLogStore()
    with pytest.raises(LogValidationError) as excinfo:
        store.append({"workout_id": "wed-1", "modality": "rounds-based", "rounds": "seven"})
    assert excinfo.value.field == "rounds"
    assert len(store) == 0


def test_negative_load_is_rejected() -> None:
    with pytest.raises(LogValidationError):
        WorkoutLogStore().append({"workout_id": "mon-3", "modality": "load-based", "load": -5})


def test_missing_workout_id_is_rejected() -> None:
    with pytest.raises(LogValidationError) as excinfo:
        WorkoutLogStore().append({"modality": "time-based", "time": "5:00"})
    assert excinfo.value.field == "workout_id"


def test_modality_is_classified_when_omitted() -> None:
    entry = WorkoutLogStore().append(
        {"workout_id": "wed-1", "name": "CrossFit WOD", "description": "12 Min AMRAP", "rounds": 5}
    )
    assert entry.modality is WorkoutModality.ROUNDS
    assert entry.workout_name == "CrossFit WOD"


def test_legacy_workout_type_names() -> None:
    assert parse_modality("fortime") is WorkoutModality.TIME
    assert parse_modality("amrap") is WorkoutModality.ROUNDS
    assert parse_modality("strength") is WorkoutModality.LOAD
    assert parse_modality("emom") is WorkoutModality.COMPLETION
    with pytest.raises(LogValidationError):
        parse_modality("tabata")


def test_scale_aliases() -> None:
    assert parse_scale(None) is ScaleTier.STANDARD
    assert parse_scale("rx") is ScaleTier.STANDARD
    assert parse_scale("Rx+") is ScaleTier.ELEVATED
    assert parse_scale("rxplus") is ScaleTier.ELEVATED
    assert parse_scale("scaled") is ScaleTier.SCALED
    with pytest.raises(LogValidationError) as excinfo:
        parse_scale("beginner")
    assert excinfo.value.field == "scale"


def test_timestamps_strictly_increase(fixed_clock: Callable[[], datetime]) -> None:
    store = WorkoutLogStore(clock=fixed_clock)
    entries = [
        store.append({"workout_id": "mon-1", "modality": "time-based", "time": "9:00"})
        for _ in range(3)
    ]
    stamps = [entry.created_at for entry in entries]
    assert stamps == sorted(stamps)
    assert len(set(stamps)) == 3
    assert [entry.sequence for entry in entries] == [0, 1, 2]


def test_default_athlete_label() -> None:
    store = WorkoutLogStore(athlete="Jordan")
    entry = store.append({"workout_id": "mon-1", "modality": "time-based", "time": "9:00"})
    assert entry.athlete == "Jordan"


def test_for_workout_filters(time_candidates: List[Dict[str, Any]]) -> None:
    store = WorkoutLogStore()
    for candidate in time_candidates:
        store.append(candidate)
    store.append({"workout_id": "wed-1", "modality": "rounds-based", "rounds": 3})
    assert len(store.for_workout("mon-1")) == 3
    assert len(list(store)) == 4


def test_entry_rejects_mismatched_payload(fixed_clock: Callable[[], datetime]) -> None:
    with pytest.raises(TypeError):
        WorkoutLogEntry(
            workout_id="mon-1",
            workout_name="CrossFit WOD",
            modality=WorkoutModality.TIME,
            result=RoundsResult(rounds=3),
            created_at=fixed_clock(),
            sequence=0,
        )


def test_entry_to_dict() -> None:
    entry = WorkoutLogStore().append(
        {"workout_id": "wed-1", "modality": "rounds-based", "rounds": 7, "reps": 2, "scale": "scaled"}
    )
    payload = entry_to_dict(entry)
    assert payload["modality"] == "rounds-based"
    assert payload["rounds"] == 7
    assert payload["reps"] == 2
    assert payload["scale"] == "scaled"


def test_unquoted_yaml_time_is_read_as_seconds() -> None:
    entry = WorkoutLogStore().append({"workout_id": "mon-1", "modality": "time-based", "time": 555})
    assert entry.result == TimeResult(text="9:15")
