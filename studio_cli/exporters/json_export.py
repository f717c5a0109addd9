"""JSON leaderboard export."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from studio_cli.core.leaderboard import leaderboard_to_dict, progress_to_dict
from studio_cli.core.models import Leaderboard, ProgressSummary


def leaderboard_payload(board: Leaderboard, progress: ProgressSummary) -> Dict[str, Any]:
    return {"leaderboard": leaderboard_to_dict(board), "progress": progress_to_dict(progress)}


def write_json(path: Path, payload: Any) -> Path:
    """Write payload as pretty JSON and return path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2) + "\n")
    return path


def write_leaderboard_json(path: Path, board: Leaderboard, progress: ProgressSummary) -> Path:
    return write_json(path, leaderboard_payload(board, progress))
