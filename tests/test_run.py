import json
import sys
import tempfile
from pathlib import Path

import run
from run import build_config, main, write_results_csv
from src.core.errors import GenerationFailure


def _failing_generator(kind, size, seed, config=None, tracer=None):
    raise GenerationFailure(kind, size or 0, seed, 1, "forced")


def test_main_single_practice_puzzle(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["run.py", "--kind", "tango", "--size", "4", "--seed", "cli"])
    results = main()

    assert len(results) == 1
    assert results[0]["id"] == "cli"
    assert results[0]["puzzle"]["kind"] == "tango"
    assert results[0]["steps"] > 0
    assert "cli: tango size=4" in capsys.readouterr().out


def test_main_daily(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["run.py", "--kind", "zip", "--daily", "2024-06-01", "--version", "2"])
    results = main()
    assert results[0]["id"] == "zip-2024-06-01-v2"
    assert results[0]["size"] == 9


def test_main_count_generates_distinct_ids():
    results = main(["--kind", "zip", "--size", "3", "--count", "3"])
    assert [r["id"] for r in results] == ["zip-practice-0", "zip-practice-1", "zip-practice-2"]


def test_main_directory_input():
    with tempfile.TemporaryDirectory() as tmpdir:
        tmpdir_path = Path(tmpdir)
        for i in range(3):
            f = tmpdir_path / f"request{i}.json"
            f.write_text(json.dumps({"id": f"tango-{i}", "size": 4}))
        (tmpdir_path / "notes.txt").write_text("ignored")

        results = main([str(tmpdir_path)])

    assert [r["id"] for r in results] == ["tango-0", "tango-1", "tango-2"]
    assert all(r["kind"] == "tango" for r in results)


def test_main_records_failures(monkeypatch, capsys):
    monkeypatch.setattr(run, "generate_puzzle", _failing_generator)
    results = main(["--kind", "queens", "--size", "3", "--seed", "boom"])

    assert results[0]["steps"] == -1
    assert results[0]["puzzle"] == {}
    assert "ERROR: Failed to generate puzzle boom" in capsys.readouterr().out


def test_main_bad_daily_row_does_not_stop_the_batch(capsys):
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "requests.json"
        path.write_text(json.dumps([
            {"kind": "tango", "size": 4, "seed": "ok"},
            {"kind": "zip", "date": "2024-13-01"},
            {"kind": "queens", "size": 5, "seed": "after"},
        ]))
        results = main([str(path)])

    assert [r["id"] for r in results] == ["ok", "zip-1", "after"]
    assert [r["steps"] == -1 for r in results] == [False, True, False]
    assert "ERROR: Failed to generate puzzle zip-1" in capsys.readouterr().out


def test_csv_and_json_output():
    with tempfile.TemporaryDirectory() as tmpdir:
        output_path = Path(tmpdir) / "results.csv"
        json_path = Path(tmpdir) / "out" / "puzzles.json"
        trace_dir = Path(tmpdir) / "traces"
        main([
            "--kind", "zip", "--size", "4", "--seed", "zip-csv",
            "--output", str(output_path),
            "--json-output", str(json_path),
            "--include-solution",
            "--trace-dir", str(trace_dir),
        ])

        content = output_path.read_text()
        dumped = json.loads(json_path.read_text())
        traces = list(trace_dir.iterdir())

    assert "id,kind,size,seed,puzzle,steps" in content
    assert "zip-csv" in content
    assert dumped[0]["id"] == "zip-csv"
    assert len(dumped[0]["solution"]) == 16
    assert [t.name for t in traces] == ["zip-csv.csv"]


def test_build_config_applies_overrides(monkeypatch):
    args = run.parse_args(["--max-steps", "10", "--wall-probability", "0.5"])
    config = build_config("zip", args)
    assert config.max_steps == 10
    assert config.wall_probability == 0.5
    assert build_config("queens", args).max_attempts == 20000


def test_write_results_csv_compact_json():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "r.csv"
        write_results_csv([
            {"id": "x", "kind": "queens", "size": 1, "seed": None,
             "puzzle": {"kind": "queens", "size": 1, "regions": [[0]]}, "steps": 1},
        ], path)
        lines = path.read_text().splitlines()

    assert lines[1].startswith("x,queens,1,,")
    assert '{""kind"":""queens"",""size"":1,""regions"":[[0]]}' in lines[1]
