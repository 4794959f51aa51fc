"""Tests that the tracer captures generation steps and writes them out."""

import csv
import tempfile
from pathlib import Path

from engine import generate_puzzle
from src.utils.trace import Tracer, enable_tracing, get_tracer, reset_tracer


def test_tracer_captures_steps():
    reset_tracer()
    tracer = get_tracer()

    tracer.log_attempt("queens", 1)
    tracer.log_place("queens", 0, 2, depth=0)
    tracer.log_backtrack("queens", 1, -1)
    tracer.log_rejected("queens", 1, "not unique")
    tracer.log_attempt("queens", 2)
    tracer.log_solution_found("queens", 2)

    summary = tracer.summary()
    # Placements and backtracks are counted but not stored unless verbose.
    assert summary["total_steps"] == 4
    assert summary["num_attempts"] == 2
    assert summary["num_placements"] == 1
    assert summary["num_backtracks"] == 1
    assert summary["num_rejections"] == 1
    assert [s.step_number for s in tracer.steps] == [1, 2, 3, 4]


def test_verbose_tracer_records_placements():
    reset_tracer(verbose=True)
    generate_puzzle("tango", 4, "verbose", tracer=get_tracer())
    summary = get_tracer().summary()
    assert summary["action_counts"]["place"] == summary["num_placements"]
    assert summary["action_counts"]["mask"] == 1
    reset_tracer()


def test_generators_without_a_tracer_leave_the_global_one_empty():
    reset_tracer()
    for i in range(5):
        generate_puzzle("queens", 6, f"quiet-{i}")
        generate_puzzle("tango", 4, f"quiet-{i}")
        generate_puzzle("zip", 4, f"quiet-{i}")
    assert get_tracer().steps == []
    assert get_tracer().summary()["num_placements"] == 0


def test_disabled_tracer_records_nothing():
    reset_tracer()
    enable_tracing(False)
    get_tracer().log_attempt("zip", 1)
    assert get_tracer().steps == []
    reset_tracer()


def test_trace_csv_round_trip():
    tracer = Tracer(verbose=True)
    generate_puzzle("zip", 3, "csv", tracer=tracer)

    with tempfile.TemporaryDirectory() as tmpdir:
        out = Path(tmpdir) / "nested" / "trace.csv"
        tracer.to_csv(out)
        with open(out, newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))

    assert len(rows) == len(tracer.steps)
    assert rows[0]["action_type"] == "attempt"
    assert rows[-1]["action_type"] == "solution_found"
    assert {row["engine"] for row in rows} == {"zip"}
