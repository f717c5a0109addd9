from pathlib import Path

from studio_cli.core.leaderboard import build_leaderboard, progress_summary
from studio_cli.core.logbook import WorkoutLogStore
from studio_cli.exporters.markdown import leaderboard_to_markdown, write_leaderboard_markdown


def test_leaderboard_markdown_table(tmp_path: Path) -> None:
    store = WorkoutLogStore()
    store.append({"workout_id": "mon-3", "workout_name": "CrossFit Strength", "modality": "load-based", "load": 315})
    board = build_leaderboard(store.entries, "mon-3")

    markdown = leaderboard_to_markdown(board, progress_summary(store.entries))
    assert markdown.startswith("# CrossFit Strength")
    assert "| # | Athlete | Weight | Scale |" in markdown
    assert "| 1 | You | 315 lbs | Rx |" in markdown
    assert "- **Workouts logged:** 1" in markdown

    path = write_leaderboard_markdown(tmp_path / "out" / "board.md", board, progress_summary(store.entries))
    assert path.read_text() == markdown


def test_placeholder_markdown_notes_sample_data() -> None:
    board = build_leaderboard([])
    markdown = leaderboard_to_markdown(board, progress_summary([]))
    assert "sample leaderboard" in markdown
    assert "| 4 | Emily Chen | 10:22 | Scaled |" in markdown
