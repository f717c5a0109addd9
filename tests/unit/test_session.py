from __future__ import annotations

from datetime import date

import pytest

from studio_cli.core.accounts import AccessDeniedError
from studio_cli.core.logbook import LogValidationError
from studio_cli.core.models import WorkoutModality
from studio_cli.core.schedule import ScheduleStore
from studio_cli.core.session import SessionError, StudioSession

WEDNESDAY = date(2026, 10, 21)
MONDAY = date(2026, 10, 19)


def _session() -> StudioSession:
    return StudioSession(schedule=ScheduleStore())


def test_available_workouts_are_booked_classes_for_the_day() -> None:
    session = _session()
    session.book("wed-1")
    session.book("mon-3")

    workouts = session.available_workouts(WEDNESDAY)
    assert [workout.id for workout in workouts] == ["wed-1"]
    assert workouts[0].modality is WorkoutModality.ROUNDS
    assert session.available_workouts(MONDAY)[0].modality is WorkoutModality.LOAD


def test_log_workout_uses_class_details() -> None:
    session = _session()
    session.book("wed-1")
    entry = session.log_workout(WEDNESDAY, "wed-1", rounds="7", reps="4", scale="rx")
    assert entry.workout_name == "CrossFit WOD"
    assert entry.instructor == "Sarah Coach"
    assert entry.modality is WorkoutModality.ROUNDS

    board = session.leaderboard()
    assert board.workout_id == "wed-1"
    assert [item.result for item in board.entries] == ["7+4"]


def test_log_workout_requires_booking() -> None:
    session = _session()
    with pytest.raises(SessionError):
        session.log_workout(WEDNESDAY, "wed-1", rounds=5)


def test_log_workout_validation_leaves_store_unchanged() -> None:
    session = _session()
    session.book("mon-3")
    with pytest.raises(LogValidationError):
        session.log_workout(MONDAY, "mon-3", rounds=5)
    assert len(session.logbook) == 0
    assert session.progress().workouts_logged == 0


def test_cancel_removes_workout_from_loggable_list() -> None:
    session = _session()
    session.book("wed-1")
    session.cancel("wed-1")
    assert session.available_workouts(WEDNESDAY) == []


def test_admin_operations_require_admin_role() -> None:
    session = _session()
    with pytest.raises(AccessDeniedError):
        session.add_coach("Dana Coach", "dana@example.com")

    session.login("member@example.com", "member")
    with pytest.raises(AccessDeniedError):
        session.remove_member("member-1")

    session.login("admin@example.com", "admin")
    coach = session.add_coach("Dana Coach", "dana@example.com", specialties=["Gymnastics"])
    assert coach.specialties == ("Gymnastics",)
    assert session.add_member("Pat", "pat@example.com").id == "member-3"
    assert session.remove_member("member-1")
    assert session.add_template("Hero WOD", "crossfit", "Murph").id == "template-4"
    assert session.remove_coach(coach.id)

    session.logout()
    assert session.user is None
