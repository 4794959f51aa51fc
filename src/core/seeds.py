"""Daily-challenge seed conventions.

The seed strings are shared with every client that renders a daily puzzle, so
their format must not change:

- queens: the ISO date itself, e.g. ``2024-06-01``
- tango:  ``tango-<date>``
- zip:    ``zip-<date>`` plus ``-v<N>`` once an admin has rerolled the day
"""

from datetime import date, datetime
from typing import Dict, Union

DateLike = Union[str, date]

PUZZLE_KINDS = ("queens", "tango", "zip")

DAILY_SIZES: Dict[str, int] = {
    "queens": 8,
    "tango": 6,
    "zip": 9,
}


def _normalize_date(day: DateLike) -> str:
    if isinstance(day, datetime):
        return day.date().isoformat()
    if isinstance(day, date):
        return day.isoformat()
    if isinstance(day, str):
        text = day.strip()
        # Validate eagerly so typos do not silently become a different daily puzzle.
        return date.fromisoformat(text).isoformat()
    raise TypeError("day must be an ISO date string or a date")


def daily_seed(kind: str, day: DateLike, version: int = 0) -> str:
    """Build the seed string for the daily puzzle of `kind` on `day`."""
    iso_day = _normalize_date(day)
    key = (kind or "").strip().lower()
    if version < 0:
        raise ValueError("version must be non-negative")
    if key == "queens":
        return iso_day
    if key == "tango":
        return f"tango-{iso_day}"
    if key == "zip":
        suffix = f"-v{version}" if version > 0 else ""
        return f"zip-{iso_day}{suffix}"
    raise KeyError(f"Unknown puzzle type: {kind!r}")


def infer_kind(identifier: str) -> str:
    """Guess the puzzle kind from a request id or seed prefix."""
    text = (identifier or "").strip().lower()
    for kind in ("tango", "zip", "queens"):
        if text.startswith(f"{kind}-") or text == kind:
            return kind
    return "queens"
