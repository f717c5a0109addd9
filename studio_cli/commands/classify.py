"""Workout classification command."""

from __future__ import annotations

import typer

from studio_cli.commands.common import get_state, print_json_payload
from studio_cli.core.classify import classify
from studio_cli.core.constants import RESULT_LABELS


def classify_command(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Workout or class name"),
    description: str = typer.Option("", "--description", "-d", help="Workout description"),
) -> None:
    """Show how a workout would be scored."""
    state = get_state(ctx)
    modality = classify(name, description, rules=state.rules)

    if state.json_output:
        print_json_payload(
            state,
            {"name": name, "modality": modality.value, "result_label": RESULT_LABELS[modality.value]},
        )
        return

    if state.plain_output:
        typer.echo(modality.value)
        return

    state.console.print(f"{name}: {modality.value} ({RESULT_LABELS[modality.value]})")
