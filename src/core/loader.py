import json
import os
import re
from typing import Any, Dict, List, Optional

import pandas as pd

from src.core.seeds import daily_seed, infer_kind
from src.utils.io import load_json


def load_requests(file_path: str) -> List[Dict[str, Any]]:
    """
    Reads generation requests from a file. Handles .parquet, .json and .jsonl formats.
    Returns a list of normalized request dictionaries with keys
    id, kind, size (int or None) and seed (str or None). A row whose daily seed
    cannot be built also carries an "error" message instead of failing the load.
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    def _is_nonempty_str(value: Any) -> bool:
        return isinstance(value, str) and value.strip() != ""

    def _coerce_size(value: Any) -> Optional[int]:
        if value is None:
            return None
        if isinstance(value, str):
            # Accept "8", "8x8" and "8*8".
            match = re.match(r"\s*(\d+)", value)
            return int(match.group(1)) if match else None
        try:
            if pd.isna(value):
                return None
        except (TypeError, ValueError):
            pass
        return int(value)

    def _coerce_version(value: Any) -> int:
        if value is None:
            return 0
        try:
            if pd.isna(value):
                return 0
        except (TypeError, ValueError):
            pass
        return int(value)

    def _normalize_record(record: Dict[str, Any], position: int) -> Dict[str, Any]:
        request_id = record.get("id") if _is_nonempty_str(record.get("id")) else None
        seed = record.get("seed") if _is_nonempty_str(record.get("seed")) else None

        kind = record.get("kind") or record.get("puzzle_type") or record.get("game")
        if _is_nonempty_str(kind):
            kind = kind.strip().lower()
        else:
            kind = infer_kind(request_id or seed or "")

        error = None
        if seed is None and _is_nonempty_str(record.get("date")):
            try:
                seed = daily_seed(kind, record["date"], _coerce_version(record.get("version")))
            except (KeyError, TypeError, ValueError) as e:
                # Reported per request by the caller; the rest of the file still loads.
                error = f"bad daily request {record['date']!r}: {e}"

        normalized = {
            "id": request_id or seed or f"{kind}-{position}",
            "kind": kind,
            "size": _coerce_size(record.get("size")),
            "seed": seed.strip() if seed else None,
        }
        if error:
            normalized["error"] = error
        return normalized

    def _normalize_all(records: List[Any]) -> List[Dict[str, Any]]:
        return [
            _normalize_record(r, i)
            for i, r in enumerate(records)
            if isinstance(r, dict)
        ]

    # Case 1: Parquet File (Binary)
    if file_path.endswith('.parquet'):
        try:
            df = pd.read_parquet(file_path)
            df = df.astype(object).where(pd.notna(df), None)
            return _normalize_all(df.to_dict(orient="records"))
        except Exception as e:
            print(f"Error reading parquet: {e}")
            return []

    # Case 2: JSON File (Text; array or object)
    if file_path.endswith(".json"):
        try:
            payload = load_json(file_path)
            if isinstance(payload, list):
                return _normalize_all(payload)
            if isinstance(payload, dict):
                return _normalize_all([payload])
            return []
        except json.JSONDecodeError:
            # Some sources use ".json" but actually store JSONL; fall back to line-delimited parsing.
            pass

    # Case 3: JSONL File (Text)
    data = []
    with open(file_path, 'r', encoding='utf-8') as f:
        for line in f:
            if line.strip():
                try:
                    obj = json.loads(line)
                except json.JSONDecodeError:
                    continue
                if isinstance(obj, dict):
                    data.append(obj)
    return _normalize_all(data)
