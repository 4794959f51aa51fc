"""Shared leaf utilities for the puzzle engines: seeded RNG, errors, daily seeds."""

from .errors import GenerationFailure
from .rng import SeededRandom, make_rng
from .seeds import DAILY_SIZES, daily_seed

__all__ = [
    "GenerationFailure",
    "SeededRandom",
    "make_rng",
    "DAILY_SIZES",
    "daily_seed",
]
