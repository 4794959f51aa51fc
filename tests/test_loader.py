"""Tests for the generation request loader."""

import json
import tempfile
from pathlib import Path

import pytest

from src.core.loader import load_requests


def _write(tmpdir, name, text):
    path = Path(tmpdir) / name
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_json_array_with_inferred_kinds():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, "requests.json", json.dumps([
            {"id": "tango-2024-01-01", "seed": "tango-2024-01-01", "size": 6},
            {"seed": "zip-2024-01-01-v1", "size": "7x7"},
            {"kind": "Queens", "size": 8},
        ]))
        requests = load_requests(path)

    assert [r["kind"] for r in requests] == ["tango", "zip", "queens"]
    assert [r["size"] for r in requests] == [6, 7, 8]
    assert requests[1]["id"] == "zip-2024-01-01-v1"
    assert requests[2]["seed"] is None
    assert requests[2]["id"] == "queens-2"


def test_dates_become_daily_seeds():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, "daily.json", json.dumps({"kind": "zip", "date": "2024-06-01", "version": 2}))
        requests = load_requests(path)

    assert requests == [{"id": "zip-2024-06-01-v2", "kind": "zip", "size": None, "seed": "zip-2024-06-01-v2"}]


def test_bad_dates_are_flagged_per_row():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, "daily.json", json.dumps([
            {"kind": "zip", "date": "2024-13-01"},
            {"kind": "sudoku", "date": "2024-06-01"},
            {"kind": "tango", "date": "2024-06-01"},
        ]))
        requests = load_requests(path)

    assert [r["seed"] for r in requests] == [None, None, "tango-2024-06-01"]
    assert "2024-13-01" in requests[0]["error"]
    assert "error" in requests[1]
    assert "error" not in requests[2]


def test_jsonl_skips_malformed_lines():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, "requests.jsonl", '{"kind": "tango", "size": 4}\n{broken\n\n{"kind": "zip"}\n')
        requests = load_requests(path)

    assert [r["kind"] for r in requests] == ["tango", "zip"]


def test_json_extension_holding_jsonl():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, "lines.json", '{"kind": "tango"}\n{"kind": "queens"}\n')
        requests = load_requests(path)

    assert len(requests) == 2


def test_missing_file():
    with pytest.raises(FileNotFoundError):
        load_requests("/nonexistent/requests.json")


def test_parquet_requests():
    pytest.importorskip("pyarrow")
    import pandas as pd

    with tempfile.TemporaryDirectory() as tmpdir:
        path = str(Path(tmpdir) / "requests.parquet")
        pd.DataFrame([
            {"kind": "tango", "size": 6, "seed": "tango-2024-01-01"},
            {"kind": "zip", "size": None, "seed": None},
        ]).to_parquet(path)
        requests = load_requests(path)

    assert requests[0] == {"id": "tango-2024-01-01", "kind": "tango", "size": 6, "seed": "tango-2024-01-01"}
    assert requests[1]["size"] is None
    assert requests[1]["seed"] is None
