"""Leaderboard ranking over logged workout results."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from loguru import logger

from studio_cli.core.constants import PLACEHOLDER_RESULTS, PLACEHOLDER_WORKOUT, RESULT_LABELS
from studio_cli.core.models import (
    Leaderboard,
    LeaderboardEntry,
    LoadResult,
    ProgressSummary,
    RoundsResult,
    TimeResult,
    WorkoutLogEntry,
    WorkoutModality,
)
from studio_cli.utils.formatting import format_result
from studio_cli.utils.parsing import time_sort_key


def placeholder_entries() -> List[LeaderboardEntry]:
    """Canned for-time board shown when a workout has no results yet."""
    return [
        LeaderboardEntry(
            athlete=athlete,
            result=result,
            is_rx=is_rx,
            rank=index,
            modality=WorkoutModality.TIME,
        )
        for index, (athlete, result, is_rx) in enumerate(PLACEHOLDER_RESULTS, 1)
    ]


def group_by_workout(logs: Iterable[WorkoutLogEntry]) -> Dict[str, List[WorkoutLogEntry]]:
    """Group logs by workout id, keeping first-seen order."""
    groups: Dict[str, List[WorkoutLogEntry]] = {}
    for log in logs:
        groups.setdefault(log.workout_id, []).append(log)
    return groups


def _time_key(entry: WorkoutLogEntry) -> float:
    if not isinstance(entry.result, TimeResult):
        return float("inf")
    key = time_sort_key(entry.result.text)
    if key == float("inf"):
        logger.debug(f"Unparseable time {entry.result.text!r} for {entry.workout_id}; ranking last")
    return key


def _rounds_key(entry: WorkoutLogEntry) -> float:
    # Reps are shown but not compared; equal rounds keep submission order.
    if not isinstance(entry.result, RoundsResult):
        return float("inf")
    return -entry.result.rounds


def _load_key(entry: WorkoutLogEntry) -> float:
    if not isinstance(entry.result, LoadResult):
        return float("inf")
    return -entry.result.load


_SORT_KEYS: Dict[WorkoutModality, Callable[[WorkoutLogEntry], Any]] = {
    WorkoutModality.TIME: _time_key,
    WorkoutModality.ROUNDS: _rounds_key,
    WorkoutModality.LOAD: _load_key,
}


def rank(logs: Sequence[WorkoutLogEntry], workout_id: str) -> List[LeaderboardEntry]:
    """Rank all results for one workout.

    The scoring direction follows the most recent entry's modality. Sorting
    is stable, so equal results keep submission order. With no results the
    canned placeholder board is returned instead of an empty list.
    """
    selected = [log for log in logs if log.workout_id == workout_id]
    if not selected:
        logger.debug(f"No results for workout {workout_id}; using placeholder board")
        return placeholder_entries()

    modality = selected[-1].modality
    sort_key = _SORT_KEYS.get(modality)
    ordered = sorted(selected, key=sort_key) if sort_key else selected

    return [
        LeaderboardEntry(
            athlete=log.athlete,
            result=format_result(log.result),
            is_rx=log.scale.is_rx,
            rank=index,
            modality=log.modality,
        )
        for index, log in enumerate(ordered, 1)
    ]


def build_leaderboard(
    logs: Sequence[WorkoutLogEntry],
    workout_id: Optional[str] = None,
) -> Leaderboard:
    """Assemble a renderable board; defaults to the latest logged workout."""
    if workout_id is None and logs:
        workout_id = logs[-1].workout_id

    selected = [log for log in logs if log.workout_id == workout_id] if workout_id else []
    entries = rank(logs, workout_id) if workout_id else placeholder_entries()

    if not selected:
        return Leaderboard(
            workout_id=workout_id,
            workout_name=PLACEHOLDER_WORKOUT["name"],
            workout_details=PLACEHOLDER_WORKOUT["details"],
            result_label=RESULT_LABELS[WorkoutModality.TIME.value],
            entries=entries,
            placeholder=True,
        )

    latest = selected[-1]
    return Leaderboard(
        workout_id=workout_id,
        workout_name=latest.workout_name or workout_id,
        workout_details=latest.workout_description,
        result_label=RESULT_LABELS[latest.modality.value],
        entries=entries,
    )


def progress_summary(logs: Sequence[WorkoutLogEntry]) -> ProgressSummary:
    return ProgressSummary(
        workouts_logged=len(logs),
        rx_workouts=sum(1 for log in logs if log.scale.is_rx),
        modalities=len({log.modality for log in logs}),
        classes_attended=len(logs),
    )


def leaderboard_to_dict(board: Leaderboard) -> Dict[str, Any]:
    return {
        "workout_id": board.workout_id,
        "workout_name": board.workout_name,
        "workout_details": board.workout_details,
        "result_label": board.result_label,
        "placeholder": board.placeholder,
        "entries": [
            {
                "rank": entry.rank,
                "athlete": entry.athlete,
                "result": entry.result,
                "rx": entry.is_rx,
                "modality": entry.modality.value,
            }
            for entry in board.entries
        ],
    }


def progress_to_dict(summary: ProgressSummary) -> Dict[str, Any]:
    return {
        "workouts_logged": summary.workouts_logged,
        "rx_workouts": summary.rx_workouts,
        "modalities": summary.modalities,
        "classes_attended": summary.classes_attended,
    }
