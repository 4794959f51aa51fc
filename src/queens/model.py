"""Queens puzzle definition, play-state cells and generator settings."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Sequence, Tuple

Position = Tuple[int, int]
Regions = Tuple[Tuple[int, ...], ...]


def count_region_sizes(size: int, regions: Sequence[Sequence[int]]) -> List[int]:
    """Number of cells in each region id 0..size-1."""
    sizes = [0] * size
    for row in regions:
        for region_id in row:
            sizes[region_id] += 1
    return sizes


class CellState(str, Enum):
    EMPTY = "EMPTY"
    QUEEN = "QUEEN"
    CROSS = "CROSS"


@dataclass(frozen=True)
class QueensConfig:
    max_attempts: int = 20000
    # Generation stops counting solutions once this many are found.
    solution_limit: int = 2
    max_singleton_regions: int = 1
    default_size: int = 8


@dataclass(frozen=True)
class QueensPuzzle:
    """An N x N board split into N regions with exactly one valid queen placement."""

    size: int
    regions: Regions
    solution: Tuple[Position, ...] = field(repr=False)

    def region_sizes(self) -> List[int]:
        return count_region_sizes(self.size, self.regions)

    def to_dict(self, include_solution: bool = False) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "kind": "queens",
            "size": self.size,
            "regions": [list(row) for row in self.regions],
        }
        if include_solution:
            payload["solution"] = [list(pos) for pos in self.solution]
        return payload


@dataclass
class QueensCell:
    row: int
    col: int
    region_id: int
    state: CellState = CellState.EMPTY
    is_error: bool = False
