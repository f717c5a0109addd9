"""Leaderboard command."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
import yaml

from studio_cli.commands.common import build_session, get_state, print_json_payload, print_leaderboard
from studio_cli.core.config import ConfigError
from studio_cli.core.leaderboard import leaderboard_to_dict, progress_to_dict
from studio_cli.core.logbook import LogValidationError
from studio_cli.core.session import StudioSession
from studio_cli.exporters.json_export import leaderboard_payload, write_leaderboard_json
from studio_cli.exporters.markdown import write_leaderboard_markdown
from studio_cli.utils.parsing import load_records


def _with_schedule_details(session: StudioSession, record: Dict[str, Any]) -> Dict[str, Any]:
    """Fill class name/description from the schedule when the record omits them."""
    known = session.schedule.get(str(record.get("workout_id") or ""))
    if known is None:
        return record
    merged = dict(record)
    merged.setdefault("workout_name", known.name)
    merged.setdefault("workout_description", known.description)
    merged.setdefault("instructor", known.instructor)
    return merged


def leaderboard_command(
    ctx: typer.Context,
    logs_file: Path = typer.Argument(..., help="Logged results (YAML or JSON)"),
    workout_id: Optional[str] = typer.Option(None, "--workout", help="Workout id (default: latest logged)"),
    schedule_file: Optional[Path] = typer.Option(None, help="Schedule file (YAML/JSON)"),
    output_file: Optional[Path] = typer.Option(None, help="Write leaderboard to file (.md or .json)"),
) -> None:
    """Rank logged results for a workout."""
    state = get_state(ctx)
    if not logs_file.exists():
        raise typer.BadParameter(f"File not found: {logs_file}")

    try:
        session = build_session(state, schedule_file=schedule_file)
        records = load_records(logs_file)
    except (ConfigError, ValueError, yaml.YAMLError) as exc:
        state.console.print(f"Input error: {exc}")
        raise typer.Exit(code=1)

    rejected: List[Dict[str, Any]] = []
    for index, record in enumerate(records, 1):
        try:
            session.logbook.append(_with_schedule_details(session, record))
        except LogValidationError as exc:
            rejected.append({"index": index, "field": exc.field, "message": str(exc)})

    board = session.leaderboard(workout_id)
    progress = session.progress()

    if output_file:
        if output_file.suffix.lower() == ".md":
            write_leaderboard_markdown(output_file, board, progress)
        else:
            write_leaderboard_json(output_file, board, progress)

    if state.json_output:
        payload = leaderboard_payload(board, progress)
        payload["rejected"] = rejected
        print_json_payload(state, payload)
        if rejected:
            raise typer.Exit(code=1)
        return

    for row in rejected:
        state.console.print(f"Rejected entry {row['index']} ({row['field']}): {row['message']}")

    print_leaderboard(state, leaderboard_to_dict(board), progress_to_dict(progress))

    if rejected:
        raise typer.Exit(code=1)
