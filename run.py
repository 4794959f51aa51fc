"""CLI entrypoint: generate puzzle(s), report search effort, write results."""

import argparse
import csv
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from engine import generate_puzzle
from src.core.errors import GenerationFailure
from src.core.loader import load_requests
from src.core.seeds import DAILY_SIZES, PUZZLE_KINDS, daily_seed
from src.queens import QueensConfig
from src.tango import TangoConfig
from src.utils.io import save_json
from src.utils.trace import get_tracer, reset_tracer
from src.zip import ZipConfig


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Generate Queens, Tango and Zip puzzles")
    parser.add_argument("input", type=Path, nargs="?", default=None,
                        help="Optional request file (.json/.jsonl/.parquet) or directory of them")
    parser.add_argument("--kind", choices=PUZZLE_KINDS, default="queens", help="Puzzle type when no input is given")
    parser.add_argument("--size", type=int, default=None, help="Board size (defaults per puzzle type)")
    parser.add_argument("--seed", default=None, help="Seed string; omit for a practice puzzle")
    parser.add_argument("--daily", default=None, metavar="DATE",
                        help="Generate the daily puzzle for an ISO date (overrides --seed)")
    parser.add_argument("--version", type=int, default=0, help="Daily reroll counter (zip only)")
    parser.add_argument("--count", type=int, default=1, help="Number of practice puzzles to generate")
    parser.add_argument("--output", type=Path, default=None, help="Optional path to write results CSV")
    parser.add_argument("--json-output", type=Path, default=None, help="Optional path to dump puzzles as JSON")
    parser.add_argument("--include-solution", action="store_true",
                        help="Include private solutions in --json-output (debug only).")
    parser.add_argument("--trace-dir", type=Path, default=None, help="Write one trace CSV per request here")
    parser.add_argument("--max-attempts", type=int, default=None, help="Queens attempt cap")
    parser.add_argument("--max-steps", type=int, default=None, help="Tango/Zip search step cap")
    parser.add_argument("--wall-probability", type=float, default=None, help="Zip wall probability")
    parser.add_argument("--reveal-ratio", type=float, default=None, help="Tango share of fixed hints")
    return parser.parse_args(argv)


def build_config(kind: str, args) -> Any:
    """Engine config with CLI overrides applied on top of the defaults."""
    if kind == "queens":
        overrides = {"max_attempts": args.max_attempts}
        config_cls = QueensConfig
    elif kind == "tango":
        overrides = {"max_steps": args.max_steps, "reveal_ratio": args.reveal_ratio}
        config_cls = TangoConfig
    elif kind == "zip":
        overrides = {"max_steps": args.max_steps, "wall_probability": args.wall_probability}
        config_cls = ZipConfig
    else:
        raise KeyError(f"Unknown puzzle type: {kind!r}")
    return config_cls(**{k: v for k, v in overrides.items() if v is not None})


def build_requests(args) -> List[Dict[str, Any]]:
    requests: List[Dict[str, Any]] = []
    if args.input is not None:
        if args.input.is_file():
            requests = load_requests(str(args.input))
        elif args.input.is_dir():
            for file_path in sorted(args.input.iterdir()):
                if file_path.suffix in [".json", ".jsonl", ".parquet"]:
                    requests.extend(load_requests(str(file_path)))
        else:
            raise ValueError(f"Input path {args.input} is neither file nor directory")
        return requests

    if args.daily:
        seed = daily_seed(args.kind, args.daily, args.version)
        size = args.size or DAILY_SIZES[args.kind]
        return [{"id": seed, "kind": args.kind, "size": size, "seed": seed}]

    for i in range(max(args.count, 1)):
        request_id = args.seed if args.seed and args.count == 1 else f"{args.kind}-{args.seed or 'practice'}-{i}"
        requests.append({"id": request_id, "kind": args.kind, "size": args.size, "seed": args.seed})
    return requests


def search_steps(kind: str, summary: Dict[str, Any]) -> int:
    # Queens effort is measured in candidate layouts, the others in cell placements.
    if kind == "queens":
        return summary["num_attempts"]
    return summary["num_placements"]


def write_results_csv(results, output_path: Path):
    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["id", "kind", "size", "seed", "puzzle", "steps"])

        for r in results:
            writer.writerow([
                r["id"],
                r["kind"],
                r["size"],
                r["seed"] or "",
                json.dumps(r["puzzle"], ensure_ascii=False, separators=(",", ":")),
                r["steps"]
            ])


def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)
    requests = build_requests(args)
    results = []
    dumps = []

    for request in requests:
        reset_tracer()
        tracer = get_tracer()
        kind = request["kind"]
        request_id = request["id"]

        try:
            if request.get("error"):
                raise ValueError(request["error"])
            config = build_config(kind, args)
            puzzle = generate_puzzle(kind, request["size"], request["seed"], config=config, tracer=tracer)
            summary = tracer.summary()
            results.append({
                "id": request_id,
                "kind": kind,
                "size": puzzle.size,
                "seed": request["seed"],
                "puzzle": puzzle.to_dict(),
                "steps": search_steps(kind, summary),
            })
            dumps.append({"id": request_id, **puzzle.to_dict(include_solution=args.include_solution)})
        except (GenerationFailure, KeyError, TypeError, ValueError) as e:
            print(f"ERROR: Failed to generate puzzle {request_id}: {e}")
            results.append({
                "id": request_id,
                "kind": kind,
                "size": request["size"],
                "seed": request["seed"],
                "puzzle": {},
                "steps": -1,
            })

        if args.trace_dir:
            tracer.to_csv(args.trace_dir / f"{request_id}.csv")

    if args.json_output:
        save_json(args.json_output, dumps)
    if args.output:
        write_results_csv(results, args.output)
    else:
        for r in results:
            print(f"{r['id']}: {r['kind']} size={r['size']} steps={r['steps']}")
    return results


if __name__ == "__main__":
    main()
