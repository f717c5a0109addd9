"""Date option parsing helpers."""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional, Union

import typer

from studio_cli.core.constants import WEEKDAYS

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def validate_date(value: Optional[str]) -> Optional[str]:
    """Typer callback that validates YYYY-MM-DD format for date options."""
    if value is None:
        return value
    if not _DATE_RE.match(value):
        raise typer.BadParameter(
            f"Invalid date '{value}'. Expected format: YYYY-MM-DD (e.g. 2026-01-15)"
        )
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        raise typer.BadParameter(
            f"Invalid date '{value}'. Expected format: YYYY-MM-DD (e.g. 2026-01-15)"
        )
    return value


def validate_weekday(value: Optional[str]) -> Optional[str]:
    """Typer callback accepting full or three-letter weekday names."""
    if value is None:
        return value
    key = value.strip().lower()
    for day in WEEKDAYS:
        if key in (day, day[:3]):
            return day
    raise typer.BadParameter(f"Invalid weekday '{value}'. Expected e.g. monday or mon")


def parse_date(value: Union[str, date]) -> date:
    """Parse YYYY-MM-DD date string; TOML and YAML may already give a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(str(value).strip(), "%Y-%m-%d").date()


def resolve_day(
    date_value: Optional[Union[str, date]] = None,
    weekday: Optional[str] = None,
    today: Optional[date] = None,
) -> date:
    """Resolve --date/--day flags to a calendar date in the current week."""
    now = today or date.today()
    if date_value:
        return parse_date(date_value)
    if weekday:
        offset = WEEKDAYS.index(weekday) - now.weekday()
        return date.fromordinal(now.toordinal() + offset)
    return now
