"""Parsing helpers for user-entered results and input files."""

from __future__ import annotations

import json
import math
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

_TIME_RE = re.compile(r"^\s*(\d+):(\d{1,2})\s*$")


def is_blank(value: Any) -> bool:
    """True for values an empty form field would produce."""
    return value is None or (isinstance(value, str) and not value.strip())


def parse_time(value: Optional[str]) -> Optional[Tuple[int, int]]:
    """Parse ``M:SS`` into (minutes, seconds); None when malformed."""
    if value is None:
        return None
    match = _TIME_RE.match(str(value))
    if not match:
        return None
    return int(match.group(1)), int(match.group(2))


def time_sort_key(value: Optional[str]) -> float:
    """Total seconds for ranking; malformed times sort last."""
    parsed = parse_time(value)
    if parsed is None:
        return math.inf
    minutes, seconds = parsed
    return float(minutes * 60 + seconds)


def parse_int(value: Any) -> Optional[int]:
    """Parse a whole number from form input; blank means absent."""
    if is_blank(value):
        return None
    if isinstance(value, bool):
        raise ValueError(f"Expected a whole number, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"Expected a whole number, got {value!r}")
    if isinstance(value, str):
        return int(value.strip())
    return int(value)


def parse_float(value: Any) -> Optional[float]:
    """Parse a decimal number from form input; blank means absent."""
    if is_blank(value):
        return None
    if isinstance(value, bool):
        raise ValueError(f"Expected a number, got {value!r}")
    number = float(str(value).strip()) if isinstance(value, str) else float(value)
    if math.isnan(number) or math.isinf(number):
        raise ValueError(f"Expected a finite number, got {value!r}")
    return number


def load_records(file_path: Path) -> List[Dict[str, Any]]:
    """Load record object(s) from a YAML or JSON file."""
    text = file_path.read_text()
    raw_data: Any
    if file_path.suffix.lower() in {".yaml", ".yml"}:
        raw_data = yaml.safe_load(text)
    else:
        raw_data = json.loads(text)

    if isinstance(raw_data, dict):
        return [raw_data]
    if isinstance(raw_data, list):
        return [item for item in raw_data if isinstance(item, dict)]
    return []
