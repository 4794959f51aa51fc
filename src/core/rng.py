"""Deterministic pseudo-random generator shared by every puzzle generator."""

import secrets
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, TypeVar

T = TypeVar("T")

UINT32_MAX = 0xFFFFFFFF
UINT32_SCALE = float(UINT32_MAX) + 1.0

HASH_INIT = 0xDEADBEEF
HASH_MULTIPLIER = 2654435761
LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223


def _utf16_units(text: str) -> Iterator[int]:
    # Daily seeds must hash the same way as browser clients, which see UTF-16 code units.
    for ch in text:
        code = ord(ch)
        if code > 0xFFFF:
            code -= 0x10000
            yield 0xD800 + (code >> 10)
            yield 0xDC00 + (code & 0x3FF)
        else:
            yield code


def hash_seed(seed: str) -> int:
    """Fold a seed string into a 32-bit initial state."""
    h = HASH_INIT
    for unit in _utf16_units(seed):
        h = ((h ^ unit) * HASH_MULTIPLIER) & UINT32_MAX
    return (h ^ (h >> 16)) & UINT32_MAX


@dataclass
class SeededRandom:
    """Linear congruential generator over a single 32-bit state."""

    state: int

    def __post_init__(self) -> None:
        self.state &= UINT32_MAX

    @classmethod
    def from_string(cls, seed: str) -> "SeededRandom":
        if not isinstance(seed, str):
            raise TypeError("seed must be a string")
        return cls(hash_seed(seed))

    @classmethod
    def from_entropy(cls) -> "SeededRandom":
        return cls(secrets.randbits(32))

    def random(self) -> float:
        """Advance the state and return a float in [0, 1)."""
        self.state = (LCG_MULTIPLIER * self.state + LCG_INCREMENT) & UINT32_MAX
        return self.state / UINT32_SCALE

    next = random

    def randint(self, n: int) -> int:
        """Return a random integer in [0, n)."""
        if n <= 0:
            raise ValueError("Upper bound must be positive")
        return int(self.random() * n)

    def choice(self, items: Sequence[T]) -> T:
        if not items:
            raise IndexError("Cannot choose from an empty sequence")
        return items[self.randint(len(items))]

    def shuffle(self, items: List[T]) -> None:
        """Fisher-Yates shuffle in place."""
        for i in range(len(items) - 1, 0, -1):
            j = self.randint(i + 1)
            items[i], items[j] = items[j], items[i]


def make_rng(seed: Optional[str] = None) -> SeededRandom:
    """Seeded generator for daily puzzles, entropy-seeded one for practice games."""
    if seed:
        return SeededRandom.from_string(seed)
    return SeededRandom.from_entropy()
