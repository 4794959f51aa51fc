"""Tango puzzle definition, play-state cells and generator settings."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class Symbol(str, Enum):
    SUN = "SUN"
    MOON = "MOON"


@dataclass(frozen=True)
class TangoConfig:
    # Share of cells revealed as fixed hints.
    reveal_ratio: float = 0.4
    max_steps: int = 200000
    enforce_unique_lines: bool = True
    default_size: int = 6


@dataclass(frozen=True)
class TangoCell:
    value: Optional[Symbol]
    is_fixed: bool


@dataclass(frozen=True)
class TangoPuzzle:
    """A partially revealed Tango grid plus the full solution it was masked from."""

    size: int
    grid: Tuple[Tuple[TangoCell, ...], ...]
    solution: Tuple[Tuple[Symbol, ...], ...] = field(repr=False)

    def hints(self) -> int:
        return sum(1 for row in self.grid for cell in row if cell.is_fixed)

    def to_dict(self, include_solution: bool = False) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "kind": "tango",
            "size": self.size,
            "grid": [
                [
                    {"value": cell.value.value if cell.value else None, "isFixed": cell.is_fixed}
                    for cell in row
                ]
                for row in self.grid
            ],
        }
        if include_solution:
            payload["solution"] = [[s.value for s in row] for row in self.solution]
        return payload


@dataclass
class TangoCellState:
    row: int
    col: int
    value: Optional[Symbol] = None
    is_fixed: bool = False
    is_error: bool = False


def line_key(values: List[Optional[Symbol]]) -> str:
    """Compact string for a row or column, e.g. 'SMMS'."""
    return "".join("S" if v == Symbol.SUN else "M" for v in values)
