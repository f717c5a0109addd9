"""Formatting helpers used by exports and console output."""

from __future__ import annotations

from studio_cli.core.constants import SESSION_KIND_LABELS
from studio_cli.core.models import (
    ClassSession,
    LoadResult,
    Performance,
    RoundsResult,
    TimeResult,
)
from studio_cli.utils.parsing import parse_time


def format_time(text: str) -> str:
    """Normalize ``M:SS``; unparseable input is shown as entered."""
    parsed = parse_time(text)
    if parsed is None:
        return text
    minutes, seconds = parsed
    return f"{minutes}:{seconds:02d}"


def format_load(load: float) -> str:
    value = int(load) if float(load).is_integer() else load
    return f"{value} lbs"


def format_result(result: Performance) -> str:
    """Render a performance payload for the leaderboard."""
    if isinstance(result, TimeResult):
        return format_time(result.text)
    if isinstance(result, RoundsResult):
        return f"{result.rounds}+{result.reps}" if result.reps else f"{result.rounds}"
    if isinstance(result, LoadResult):
        return format_load(result.load)
    return "N/A"


def format_session_window(session: ClassSession) -> str:
    return f"{session.start} - {session.end}" if session.end else session.start


def format_session_kind(kind: str) -> str:
    return SESSION_KIND_LABELS.get(kind, kind.title())
