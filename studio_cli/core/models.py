"""Lightweight data models used across commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple, Union


class WorkoutModality(str, Enum):
    """How a workout is scored."""

    TIME = "time-based"
    ROUNDS = "rounds-based"
    LOAD = "load-based"
    COMPLETION = "completion-based"


class ScaleTier(str, Enum):
    """Whether a performance met the prescribed standard."""

    SCALED = "scaled"
    STANDARD = "standard"
    ELEVATED = "elevated"

    @property
    def is_rx(self) -> bool:
        return self is not ScaleTier.SCALED


@dataclass(frozen=True)
class ClassSession:
    """One bookable class on the schedule."""

    id: str
    start: str
    end: str
    name: str
    instructor: str
    location: str
    capacity: int
    booked: int = 0
    kind: str = "crossfit"
    description: str = ""


@dataclass(frozen=True)
class BookingStatus:
    kind: str
    label: str


@dataclass(frozen=True)
class TimeResult:
    """Elapsed time as entered, e.g. ``"9:15"``."""

    text: str

    @classmethod
    def from_parts(cls, minutes: Optional[int], seconds: Optional[int]) -> "TimeResult":
        return cls(text=f"{minutes or 0}:{seconds or 0:02d}")


@dataclass(frozen=True)
class RoundsResult:
    rounds: int
    reps: Optional[int] = None


@dataclass(frozen=True)
class LoadResult:
    load: float


@dataclass(frozen=True)
class CompletionResult:
    pass


Performance = Union[TimeResult, RoundsResult, LoadResult, CompletionResult]

PERFORMANCE_TYPES = {
    WorkoutModality.TIME: TimeResult,
    WorkoutModality.ROUNDS: RoundsResult,
    WorkoutModality.LOAD: LoadResult,
    WorkoutModality.COMPLETION: CompletionResult,
}


@dataclass(frozen=True)
class WorkoutLogEntry:
    """A single logged performance. Entries are never edited."""

    workout_id: str
    workout_name: str
    modality: WorkoutModality
    result: Performance
    created_at: datetime
    sequence: int
    workout_description: str = ""
    instructor: str = ""
    scale: ScaleTier = ScaleTier.STANDARD
    notes: str = ""
    athlete: str = "You"

    def __post_init__(self) -> None:
        expected = PERFORMANCE_TYPES[self.modality]
        if not isinstance(self.result, expected):
            raise TypeError(
                f"{self.modality.value} entry requires {expected.__name__}, "
                f"got {type(self.result).__name__}"
            )


@dataclass(frozen=True)
class LoggableWorkout:
    """A booked class the user can log a result for."""

    id: str
    name: str
    instructor: str
    location: str
    start: str
    modality: WorkoutModality
    details: str


@dataclass(frozen=True)
class LeaderboardEntry:
    athlete: str
    result: str
    is_rx: bool
    rank: int
    modality: WorkoutModality


@dataclass(frozen=True)
class Leaderboard:
    """Ranked results for one workout, ready for rendering."""

    workout_id: Optional[str]
    workout_name: str
    workout_details: str
    result_label: str
    entries: List[LeaderboardEntry] = field(default_factory=list)
    placeholder: bool = False


@dataclass(frozen=True)
class ProgressSummary:
    workouts_logged: int
    rx_workouts: int
    modalities: int
    classes_attended: int


@dataclass(frozen=True)
class User:
    id: str
    name: str
    email: str
    role: str = "member"

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


@dataclass(frozen=True)
class Coach:
    id: str
    name: str
    email: str
    specialties: Tuple[str, ...] = ()
    bio: str = ""


@dataclass(frozen=True)
class Member:
    id: str
    name: str
    email: str
    membership_type: str = "standard"
    join_date: str = ""


@dataclass(frozen=True)
class WorkoutTemplate:
    id: str
    name: str
    kind: str
    description: str
    duration: int = 60
