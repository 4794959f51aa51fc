"""Top-level puzzle generation interface.

Expose `generate_puzzle(kind, size, seed)` for the three puzzle families and
`generate_daily(kind, day, version)` for the shared daily challenges.
"""

from typing import Any, Callable, Dict, Optional

from src.core.seeds import DAILY_SIZES, DateLike, daily_seed
from src.queens import generate as generate_queens
from src.tango import generate as generate_tango
from src.utils.trace import Tracer
from src.zip import generate as generate_zip

GENERATORS: Dict[str, Callable[..., Any]] = {
    "queens": generate_queens,
    "tango": generate_tango,
    "zip": generate_zip,
}


def _resolve(kind: Any) -> Callable[..., Any]:
    if not isinstance(kind, str):
        raise TypeError("kind must be a string")
    key = kind.strip().lower()
    if key not in GENERATORS:
        raise KeyError(f"Unknown puzzle type: {kind!r}")
    return GENERATORS[key]


def generate_puzzle(
    kind: str,
    size: Optional[int] = None,
    seed: Optional[str] = None,
    *,
    config: Any = None,
    tracer: Optional[Tracer] = None,
) -> Any:
    """
    Generate a puzzle of the given kind ("queens", "tango" or "zip").
    A seed makes the result reproducible; without one a practice puzzle is drawn.
    Raises GenerationFailure when the generator gives up.
    """
    generator = _resolve(kind)
    return generator(size, seed, config=config, tracer=tracer)


def generate_daily(
    kind: str,
    day: DateLike,
    version: int = 0,
    *,
    size: Optional[int] = None,
    tracer: Optional[Tracer] = None,
) -> Any:
    """Generate the daily challenge for `kind` on `day` at the daily board size."""
    _resolve(kind)
    key = kind.strip().lower()
    seed = daily_seed(key, day, version)
    return generate_puzzle(key, size or DAILY_SIZES[key], seed, tracer=tracer)


__all__ = ["GENERATORS", "generate_puzzle", "generate_daily"]
