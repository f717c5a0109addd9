"""Markdown leaderboard export."""

from __future__ import annotations

from pathlib import Path
from typing import List

from studio_cli.core.models import Leaderboard, ProgressSummary


def leaderboard_to_markdown(board: Leaderboard, progress: ProgressSummary) -> str:
    """Convert a leaderboard to a markdown document."""
    lines: List[str] = [f"# {board.workout_name}", ""]
    if board.workout_details:
        lines.extend([f"> {board.workout_details}", ""])
    if board.placeholder:
        lines.extend(["_No results logged yet; sample leaderboard shown._", ""])

    lines.append(f"| # | Athlete | {board.result_label} | Scale |")
    lines.append("|---|---------|------|-------|")
    for entry in board.entries:
        scale = "Rx" if entry.is_rx else "Scaled"
        lines.append(f"| {entry.rank} | {entry.athlete} | {entry.result} | {scale} |")

    lines.extend(
        [
            "",
            "## Your Progress",
            "",
            f"- **Workouts logged:** {progress.workouts_logged}",
            f"- **Rx workouts:** {progress.rx_workouts}",
            f"- **Different workout types:** {progress.modalities}",
            f"- **Classes attended:** {progress.classes_attended}",
        ]
    )
    return "\n".join(lines) + "\n"


def write_leaderboard_markdown(path: Path, board: Leaderboard, progress: ProgressSummary) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(leaderboard_to_markdown(board, progress))
    return path
