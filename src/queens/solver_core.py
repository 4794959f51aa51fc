"""Backtracking solver that counts Queens placements for a region layout."""

from dataclasses import dataclass, field
from typing import List, Sequence, Set

from .model import Position


@dataclass
class _SearchState:
    """Mutable search state threaded through the recursion."""

    size: int
    regions: Sequence[Sequence[int]]
    limit: int
    current: List[Position] = field(default_factory=list)
    used_cols: Set[int] = field(default_factory=set)
    used_regions: Set[int] = field(default_factory=set)
    solutions: List[List[Position]] = field(default_factory=list)


def solve(size: int, regions: Sequence[Sequence[int]], limit: int = 2) -> List[List[Position]]:
    """
    Enumerate queen placements for `regions`, one queen per row, column and region,
    no two queens touching. Stops after `limit` solutions.
    """
    if len(regions) != size or any(len(row) != size for row in regions):
        raise ValueError("regions must be a size x size matrix")
    if limit <= 0:
        return []
    state = _SearchState(size=size, regions=regions, limit=limit)
    _backtrack(state, 0)
    return state.solutions


def _touches(current: List[Position], row: int, col: int) -> bool:
    for q_row, q_col in current:
        if abs(q_row - row) <= 1 and abs(q_col - col) <= 1:
            return True
    return False


def _backtrack(state: _SearchState, row: int) -> None:
    if len(state.solutions) >= state.limit:
        return
    if row == state.size:
        state.solutions.append(list(state.current))
        return

    for col in range(state.size):
        region = state.regions[row][col]
        if col in state.used_cols or region in state.used_regions:
            continue
        if _touches(state.current, row, col):
            continue

        state.current.append((row, col))
        state.used_cols.add(col)
        state.used_regions.add(region)

        _backtrack(state, row + 1)

        state.used_regions.discard(region)
        state.used_cols.discard(col)
        state.current.pop()
