"""Shared command helpers."""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from typing import Any, Dict, Optional, Union

import typer
from rich.table import Table

from studio_cli.core.config import resolve_schedule_file
from studio_cli.core.logbook import WorkoutLogStore
from studio_cli.core.schedule import ScheduleStore, load_schedule_file
from studio_cli.core.session import StudioSession
from studio_cli.core.state import CLIState
from studio_cli.utils.dates import resolve_day


def get_state(ctx: typer.Context) -> CLIState:
    """Extract validated CLI state from Typer context."""
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=2)
    return state


def print_json_payload(state: CLIState, payload: Any) -> None:
    """Print JSON payload with plain-mode fallback for piping."""
    if state.plain_output:
        typer.echo(json.dumps(payload, separators=(",", ":")))
        return
    state.console.print_json(data=payload)


def default_day(state: CLIState, date_value: Optional[Union[str, date]], weekday: Optional[str]) -> date:
    """Resolve the working day: CLI flags, then config, then today."""
    if date_value is None and weekday is None:
        date_value = state.default_date
    return resolve_day(date_value=date_value, weekday=weekday)


def build_session(state: CLIState, schedule_file: Optional[Path] = None) -> StudioSession:
    """Create a fresh session wired from config."""
    path = resolve_schedule_file(state.config, explicit=schedule_file) if schedule_file else state.schedule_file
    schedule = load_schedule_file(path) if path else ScheduleStore()

    session = StudioSession(
        schedule=schedule,
        logbook=WorkoutLogStore(athlete=state.athlete),
        rules=state.rules,
    )

    session_cfg = state.config.get("session", {})
    if session_cfg.get("email"):
        session.login(str(session_cfg["email"]), str(session_cfg.get("role") or "member"))
    return session


def print_leaderboard(state: CLIState, board: Dict[str, Any], progress: Dict[str, Any]) -> None:
    """Render a serialized leaderboard plus progress summary as a table or plain lines."""
    if state.plain_output:
        typer.echo(f"workout\t{board['workout_name']}")
        for entry in board["entries"]:
            tier = "rx" if entry["rx"] else "scaled"
            typer.echo(f"{entry['rank']}\t{entry['athlete']}\t{entry['result']}\t{tier}")
        return

    table = Table(title=board["workout_name"], caption=board["workout_details"] or None)
    table.add_column("#", justify="right")
    table.add_column("Athlete")
    table.add_column(board["result_label"], justify="right")
    table.add_column("Scale")
    for entry in board["entries"]:
        table.add_row(
            str(entry["rank"]),
            entry["athlete"],
            entry["result"],
            "Rx" if entry["rx"] else "Scaled",
        )
    state.console.print(table)
    if board["placeholder"]:
        state.console.print("No results logged yet; showing sample leaderboard")
    state.console.print(
        f"Logged: {progress['workouts_logged']}  Rx: {progress['rx_workouts']}  "
        f"Workout types: {progress['modalities']}  Classes attended: {progress['classes_attended']}"
    )
