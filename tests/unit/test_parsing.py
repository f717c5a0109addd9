import json
import math
from pathlib import Path

import pytest

from studio_cli.utils.parsing import (
    is_blank,
    load_records,
    parse_float,
    parse_int,
    parse_time,
    time_sort_key,
)


def test_parse_time() -> None:
    assert parse_time("9:15") == (9, 15)
    assert parse_time(" 10:05 ") == (10, 5)
    assert parse_time("0:7") == (0, 7)
    assert parse_time("9.15") is None
    assert parse_time("1:02:03") is None
    assert parse_time(None) is None


def test_time_sort_key() -> None:
    assert time_sort_key("8:32") == 512.0
    assert time_sort_key("garbage") == math.inf
    assert time_sort_key("") == math.inf


def test_is_blank() -> None:
    assert is_blank(None)
    assert is_blank("  ")
    assert not is_blank(0)
    assert not is_blank("0")


def test_parse_int() -> None:
    assert parse_int("7") == 7
    assert parse_int(7.0) == 7
    assert parse_int("") is None
    with pytest.raises(ValueError):
        parse_int("7.5")
    with pytest.raises(ValueError):
        parse_int(7.5)
    with pytest.raises(ValueError):
        parse_int(True)


def test_parse_float() -> None:
    assert parse_float("227.5") == 227.5
    assert parse_float(135) == 135.0
    assert parse_float(None) is None
    with pytest.raises(ValueError):
        parse_float("heavy")
    with pytest.raises(ValueError):
        parse_float("nan")


def test_load_records_yaml_list(tmp_path: Path) -> None:
    path = tmp_path / "logs.yaml"
    path.write_text("- workout_id: mon-1\n  time: '9:15'\n- not-a-record\n")
    assert load_records(path) == [{"workout_id": "mon-1", "time": "9:15"}]


def test_load_records_json_object(tmp_path: Path) -> None:
    path = tmp_path / "log.json"
    path.write_text(json.dumps({"workout_id": "wed-1", "rounds": 5}))
    assert load_records(path) == [{"workout_id": "wed-1", "rounds": 5}]


def test_load_records_scalar_is_empty(tmp_path: Path) -> None:
    path = tmp_path / "log.json"
    path.write_text("42")
    assert load_records(path) == []
