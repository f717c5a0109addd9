"""Replay a scripted booking/logging session."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

import typer
import yaml

from studio_cli.commands.common import (
    build_session,
    default_day,
    get_state,
    print_json_payload,
    print_leaderboard,
)
from studio_cli.core.accounts import AccessDeniedError
from studio_cli.core.config import ConfigError
from studio_cli.core.leaderboard import leaderboard_to_dict, progress_to_dict
from studio_cli.core.logbook import LogValidationError, entry_to_dict
from studio_cli.core.session import SessionError, StudioSession
from studio_cli.core.state import CLIState
from studio_cli.utils.dates import validate_date
from studio_cli.utils.parsing import load_records

_LOG_FIELDS = ("time", "minutes", "seconds", "rounds", "reps", "load", "weight", "scale", "notes", "athlete")

Handler = Callable[[StudioSession, date, Mapping[str, Any]], Tuple[str, Dict[str, Any]]]


def _require(action: Mapping[str, Any], key: str) -> str:
    value = action.get(key)
    if value is None or str(value).strip() == "":
        raise SessionError(f"'{action.get('action')}' needs '{key}'")
    return str(value)


def _login(session: StudioSession, day: date, action: Mapping[str, Any]) -> Tuple[str, Dict[str, Any]]:
    user = session.login(_require(action, "email"), str(action.get("role") or "member"))
    return f"Signed in as {user.name} ({user.role})", {"user_id": user.id, "role": user.role}


def _logout(session: StudioSession, day: date, action: Mapping[str, Any]) -> Tuple[str, Dict[str, Any]]:
    session.logout()
    return "Signed out", {}


def _book(session: StudioSession, day: date, action: Mapping[str, Any]) -> Tuple[str, Dict[str, Any]]:
    session_id = _require(action, "id")
    item = session.schedule.get(session_id)
    if item is None:
        return f"Unknown class {session_id}; nothing booked", {"booked": False}
    if session.ledger.is_booked(session_id):
        return f"{item.name} already booked", {"booked": True}
    if not session.ledger.can_book(item):
        raise SessionError(f"{item.name} ({session_id}) is full")
    session.book(session_id)
    return f"Booked {item.name} at {item.start}", {"booked": True}


def _cancel(session: StudioSession, day: date, action: Mapping[str, Any]) -> Tuple[str, Dict[str, Any]]:
    session_id = _require(action, "id")
    session.cancel(session_id)
    return f"Cancelled {session_id}", {"booked": False}


def _log(session: StudioSession, day: date, action: Mapping[str, Any]) -> Tuple[str, Dict[str, Any]]:
    fields = {key: action[key] for key in _LOG_FIELDS if key in action}
    entry = session.log_workout(day, _require(action, "id"), **fields)
    return f"Logged {entry.workout_name} ({entry.modality.value})", entry_to_dict(entry)


def _leaderboard(session: StudioSession, day: date, action: Mapping[str, Any]) -> Tuple[str, Dict[str, Any]]:
    board = session.leaderboard(action.get("workout"))
    return f"Leaderboard for {board.workout_name}", {
        "leaderboard": leaderboard_to_dict(board),
        "progress": progress_to_dict(session.progress()),
    }


def _add_coach(session: StudioSession, day: date, action: Mapping[str, Any]) -> Tuple[str, Dict[str, Any]]:
    coach = session.add_coach(
        name=_require(action, "name"),
        email=_require(action, "email"),
        specialties=list(action.get("specialties") or []),
        bio=str(action.get("bio") or ""),
    )
    return f"Added coach {coach.name}", {"id": coach.id}


def _remove_coach(session: StudioSession, day: date, action: Mapping[str, Any]) -> Tuple[str, Dict[str, Any]]:
    removed = session.remove_coach(_require(action, "id"))
    return ("Removed coach" if removed else "No such coach"), {"removed": removed}


def _add_member(session: StudioSession, day: date, action: Mapping[str, Any]) -> Tuple[str, Dict[str, Any]]:
    member = session.add_member(
        name=_require(action, "name"),
        email=_require(action, "email"),
        membership_type=str(action.get("membership_type") or "standard"),
        join_date=str(action.get("join_date") or day.isoformat()),
    )
    return f"Added member {member.name}", {"id": member.id}


def _remove_member(session: StudioSession, day: date, action: Mapping[str, Any]) -> Tuple[str, Dict[str, Any]]:
    removed = session.remove_member(_require(action, "id"))
    return ("Removed member" if removed else "No such member"), {"removed": removed}


def _add_template(session: StudioSession, day: date, action: Mapping[str, Any]) -> Tuple[str, Dict[str, Any]]:
    template = session.add_template(
        name=_require(action, "name"),
        kind=str(action.get("kind") or "crossfit"),
        description=str(action.get("description") or ""),
        duration=int(action.get("duration") or 60),
    )
    return f"Added template {template.name}", {"id": template.id}


HANDLERS: Dict[str, Handler] = {
    "login": _login,
    "logout": _logout,
    "book": _book,
    "cancel": _cancel,
    "log": _log,
    "leaderboard": _leaderboard,
    "add-coach": _add_coach,
    "remove-coach": _remove_coach,
    "add-member": _add_member,
    "remove-member": _remove_member,
    "add-template": _add_template,
}


def run_actions(session: StudioSession, day: date, actions: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Apply actions in order; a failed step is reported and the replay continues."""
    results: List[Dict[str, Any]] = []
    for step, action in enumerate(actions, 1):
        name = str(action.get("action") or "").strip().lower()
        row: Dict[str, Any] = {"step": step, "action": name}
        handler = HANDLERS.get(name)
        try:
            if handler is None:
                raise SessionError(f"Unknown action: {name or '<missing>'}")
            message, data = handler(session, day, action)
            row.update({"status": "ok", "message": message, "data": data})
        except LogValidationError as exc:
            row.update({"status": "error", "message": str(exc), "field": exc.field})
        except (AccessDeniedError, SessionError, ValueError) as exc:
            row.update({"status": "error", "message": str(exc)})
        results.append(row)
    return results


def _print_results(state: CLIState, results: List[Dict[str, Any]]) -> None:
    for row in results:
        marker = "ok" if row["status"] == "ok" else "error"
        if state.plain_output:
            typer.echo(f"{row['step']}\t{row['action']}\t{marker}\t{row['message']}")
        else:
            state.console.print(f"[{row['step']}] {row['action']}: {row['message']}", markup=False)
        if row["action"] == "leaderboard" and row["status"] == "ok":
            print_leaderboard(state, row["data"]["leaderboard"], row["data"]["progress"])


def session_command(
    ctx: typer.Context,
    script: Path = typer.Argument(..., help="Session script (YAML or JSON list of actions)"),
    date_value: Optional[str] = typer.Option(None, "--date", help="Session day (YYYY-MM-DD)", callback=validate_date),
    schedule_file: Optional[Path] = typer.Option(None, help="Schedule file (YAML/JSON)"),
) -> None:
    """Replay booking, logging and admin actions in one session."""
    state = get_state(ctx)
    if not script.exists():
        raise typer.BadParameter(f"File not found: {script}")

    try:
        session = build_session(state, schedule_file=schedule_file)
        records = load_records(script)
    except (ConfigError, ValueError, yaml.YAMLError) as exc:
        state.console.print(f"Input error: {exc}")
        raise typer.Exit(code=1)

    # A single mapping may carry its own date and an action list.
    actions = records
    script_date: Optional[str] = None
    if len(records) == 1 and isinstance(records[0].get("actions"), list):
        raw_date = records[0].get("date")
        script_date = str(raw_date) if raw_date else None
        actions = [item for item in records[0]["actions"] if isinstance(item, dict)]

    try:
        day = default_day(state, date_value or script_date, None)
    except (TypeError, ValueError) as exc:
        state.console.print(f"Input error: {exc}")
        raise typer.Exit(code=1)

    results = run_actions(session, day, actions)

    if state.json_output:
        print_json_payload(state, {"date": day.isoformat(), "steps": results})
    else:
        _print_results(state, results)

    if any(row["status"] == "error" for row in results):
        raise typer.Exit(code=1)
