"""Per-invocation state shared by studio commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from rich.console import Console

from studio_cli.core.constants import DEFAULT_ATHLETE, MODALITY_RULES


@dataclass
class CLIState:
    """Output flags plus the studio settings resolved from config."""

    json_output: bool
    plain_output: bool
    verbose: bool
    quiet: bool
    config_path: Path
    config: Dict[str, Any]
    console: Console
    # None means the built-in week.
    schedule_file: Optional[Path] = None
    athlete: str = DEFAULT_ATHLETE
    default_date: Optional[Union[str, date]] = None
    rules: List[Tuple[str, List[str]]] = field(
        default_factory=lambda: [(modality, list(keywords)) for modality, keywords in MODALITY_RULES]
    )
