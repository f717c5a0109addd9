"""Entry point for studio-cli."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from studio_cli import __version__
from studio_cli.commands.classify import classify_command
from studio_cli.commands.leaderboard import leaderboard_command
from studio_cli.commands.schedule import schedule_command
from studio_cli.commands.session import session_command
from studio_cli.core.classify import classification_rules_from_config
from studio_cli.core.config import (
    ConfigError,
    default_config_path,
    load_config,
    resolve_athlete,
    resolve_schedule_file,
)
from studio_cli.core.logger import setup_logging
from studio_cli.core.state import CLIState

app = typer.Typer(
    add_completion=False,
    help="Fitness studio class booking and leaderboard CLI",
    invoke_without_command=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output JSON where available"),
    plain_output: bool = typer.Option(
        False,
        "--plain",
        help="Output plain text (no rich formatting/tables)",
    ),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Quiet output"),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
) -> None:
    """Initialize global CLI state."""
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if json_output and plain_output:
        typer.echo("Options --json and --plain are mutually exclusive.")
        raise typer.Exit(code=2)

    setup_logging(verbose=verbose, quiet=quiet)

    cfg_path = (config or default_config_path()).expanduser().resolve()
    try:
        cfg = load_config(cfg_path)
    except ConfigError as exc:
        typer.echo(f"Config error: {exc}")
        raise typer.Exit(code=2)

    console = Console(
        quiet=quiet,
        no_color=plain_output,
        log_time=False,
        log_path=False,
    )
    ctx.obj = CLIState(
        json_output=(json_output and not plain_output),
        plain_output=plain_output,
        verbose=verbose,
        quiet=quiet,
        config_path=cfg_path,
        config=cfg,
        console=console,
        schedule_file=resolve_schedule_file(cfg),
        athlete=resolve_athlete(cfg),
        default_date=cfg.get("defaults", {}).get("date"),
        rules=classification_rules_from_config(cfg),
    )

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=0)


app.command("schedule")(schedule_command)
app.command("classify")(classify_command)
app.command("leaderboard")(leaderboard_command)
app.command("session")(session_command)


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
