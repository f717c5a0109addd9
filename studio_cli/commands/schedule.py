"""Class schedule command."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
from rich.table import Table

from studio_cli.commands.common import build_session, default_day, get_state, print_json_payload
from studio_cli.core.config import ConfigError
from studio_cli.core.models import ClassSession
from studio_cli.core.schedule import weekday_key
from studio_cli.core.state import CLIState
from studio_cli.utils.dates import validate_date, validate_weekday
from studio_cli.utils.formatting import format_session_kind, format_session_window


def schedule_command(
    ctx: typer.Context,
    date_value: Optional[str] = typer.Option(None, "--date", help="Day to show (YYYY-MM-DD)", callback=validate_date),
    weekday: Optional[str] = typer.Option(None, "--day", help="Weekday in the current week", callback=validate_weekday),
    book: Optional[List[str]] = typer.Option(None, "--book", help="Session id to book (repeatable)"),
    schedule_file: Optional[Path] = typer.Option(None, help="Schedule file (YAML/JSON)"),
) -> None:
    """Show the day's classes with seat availability."""
    state = get_state(ctx)
    try:
        session = build_session(state, schedule_file=schedule_file)
        day = default_day(state, date_value, weekday)
    except (ConfigError, TypeError, ValueError) as exc:
        state.console.print(f"Schedule error: {exc}")
        raise typer.Exit(code=1)

    notices: List[str] = []
    for session_id in book or []:
        item = session.schedule.get(session_id)
        if item is None:
            notices.append(f"Unknown class: {session_id}")
            continue
        if not session.ledger.can_book(item) and not session.ledger.is_booked(item.id):
            notices.append(f"Class {session_id} is full")
            continue
        session.book(session_id)

    classes = session.classes_for(day)
    booked_today = session.ledger.booked_sessions(classes)

    rows = [
        {
            "id": item.id,
            "start": item.start,
            "end": item.end,
            "name": item.name,
            "instructor": item.instructor,
            "location": item.location,
            "kind": item.kind,
            "capacity": item.capacity,
            "booked": item.booked,
            "available": session.ledger.available_seats(item),
            "status": session.ledger.status(item).label,
            "description": item.description,
        }
        for item in classes
    ]

    if state.json_output:
        print_json_payload(
            state,
            {
                "date": day.isoformat(),
                "weekday": weekday_key(day),
                "booked_today": [item.id for item in booked_today],
                "classes": rows,
                "notices": notices,
            },
        )
    else:
        for notice in notices:
            state.console.print(notice)
        if state.plain_output:
            for row in rows:
                typer.echo(f"{row['id']}\t{row['start']}\t{row['name']}\t{row['status']}")
        else:
            _print_schedule_table(state, day, classes, rows, len(booked_today))

    if notices:
        raise typer.Exit(code=1)


def _print_schedule_table(
    state: CLIState,
    day: date,
    classes: List[ClassSession],
    rows: List[Dict[str, Any]],
    booked_count: int,
) -> None:
    if not rows:
        state.console.print("No classes available")
        state.console.print("Check back tomorrow for new classes!")
        return

    noun = "class" if len(rows) == 1 else "classes"
    title = f"{weekday_key(day).title()} {day.isoformat()} - {len(rows)} {noun} available"
    if booked_count:
        title += f", {booked_count} booked today"

    table = Table(title=title)
    table.add_column("Id")
    table.add_column("Time")
    table.add_column("Class")
    table.add_column("Type")
    table.add_column("Coach")
    table.add_column("Location")
    table.add_column("Booked", justify="right")
    table.add_column("Status")
    for item, row in zip(classes, rows):
        table.add_row(
            item.id,
            format_session_window(item),
            item.name,
            format_session_kind(item.kind),
            item.instructor,
            item.location,
            f"{item.booked}/{item.capacity}",
            row["status"],
        )
    state.console.print(table)
