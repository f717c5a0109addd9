"""One browsing session: schedule, bookings, results and admin data."""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Tuple

from studio_cli.core import accounts
from studio_cli.core.admin import (
    Registry,
    default_coaches,
    default_members,
    default_templates,
)
from studio_cli.core.booking import BookingLedger
from studio_cli.core.classify import classify_session
from studio_cli.core.constants import MODALITY_RULES
from studio_cli.core.leaderboard import build_leaderboard, progress_summary
from studio_cli.core.logbook import WorkoutLogStore
from studio_cli.core.models import (
    ClassSession,
    Coach,
    Leaderboard,
    LoggableWorkout,
    Member,
    ProgressSummary,
    User,
    WorkoutLogEntry,
    WorkoutTemplate,
)
from studio_cli.core.schedule import ScheduleStore


class SessionError(RuntimeError):
    """Raised for requests the session cannot carry out."""


class StudioSession:
    """Owns all mutable state for one user session."""

    def __init__(
        self,
        schedule: ScheduleStore,
        ledger: Optional[BookingLedger] = None,
        logbook: Optional[WorkoutLogStore] = None,
        rules: Sequence[Tuple[str, Sequence[str]]] = MODALITY_RULES,
        coaches: Optional[Registry[Coach]] = None,
        members: Optional[Registry[Member]] = None,
        templates: Optional[Registry[WorkoutTemplate]] = None,
    ) -> None:
        self.schedule = schedule
        self.ledger = ledger if ledger is not None else BookingLedger(schedule)
        self.logbook = logbook if logbook is not None else WorkoutLogStore()
        self.rules = rules
        self.coaches = coaches if coaches is not None else default_coaches()
        self.members = members if members is not None else default_members()
        self.templates = templates if templates is not None else default_templates()
        self.user: Optional[User] = None

    # Accounts

    def login(self, email: str, role: str = "member") -> User:
        self.user = accounts.login(email, role)
        return self.user

    def logout(self) -> None:
        self.user = None

    # Booking

    def classes_for(self, day: date) -> List[ClassSession]:
        return self.schedule.for_date(day)

    def book(self, session_id: str) -> None:
        self.ledger.book(session_id)

    def cancel(self, session_id: str) -> None:
        self.ledger.cancel(session_id)

    def available_workouts(self, day: date) -> List[LoggableWorkout]:
        """Classes booked for ``day``, tagged with how they are scored."""
        return [
            LoggableWorkout(
                id=session.id,
                name=session.name,
                instructor=session.instructor,
                location=session.location,
                start=session.start,
                modality=classify_session(session, rules=self.rules),
                details=session.description or "Workout details not available",
            )
            for session in self.ledger.booked_sessions(self.classes_for(day))
        ]

    # Results

    def log_workout(self, day: date, workout_id: str, **fields: Any) -> WorkoutLogEntry:
        """Log a result for one of the classes booked on ``day``."""
        workout = next((w for w in self.available_workouts(day) if w.id == workout_id), None)
        if workout is None:
            raise SessionError(f"No booked class {workout_id!r} on {day.isoformat()} to log")

        candidate: Dict[str, Any] = dict(fields)
        candidate.update(
            {
                "workout_id": workout.id,
                "workout_name": workout.name,
                "workout_description": workout.details,
                "instructor": workout.instructor,
                "modality": workout.modality,
            }
        )
        return self.logbook.append(candidate)

    def leaderboard(self, workout_id: Optional[str] = None) -> Leaderboard:
        return build_leaderboard(self.logbook.entries, workout_id)

    def progress(self) -> ProgressSummary:
        return progress_summary(self.logbook.entries)

    # Admin

    def add_coach(self, name: str, email: str, specialties: Sequence[str] = (), bio: str = "") -> Coach:
        accounts.require_admin(self.user)
        return self.coaches.add(
            Coach(id="", name=name, email=email, specialties=tuple(specialties), bio=bio)
        )

    def remove_coach(self, coach_id: str) -> bool:
        accounts.require_admin(self.user)
        return self.coaches.remove(coach_id)

    def add_member(
        self,
        name: str,
        email: str,
        membership_type: str = "standard",
        join_date: str = "",
    ) -> Member:
        accounts.require_admin(self.user)
        return self.members.add(
            Member(
                id="",
                name=name,
                email=email,
                membership_type=membership_type,
                join_date=join_date,
            )
        )

    def remove_member(self, member_id: str) -> bool:
        accounts.require_admin(self.user)
        return self.members.remove(member_id)

    def add_template(self, name: str, kind: str, description: str, duration: int = 60) -> WorkoutTemplate:
        accounts.require_admin(self.user)
        return self.templates.add(
            WorkoutTemplate(id="", name=name, kind=kind, description=description, duration=duration)
        )
