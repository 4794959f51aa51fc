"""Zip generator: Warnsdorff-ordered Hamiltonian path, checkpoints, then walls."""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from src.core.rng import SeededRandom, make_rng
from src.utils.trace import Tracer

from .model import Position, ZipCell, ZipConfig, ZipPuzzle

ENGINE = "zip"

_ORTHOGONAL = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass
class _PathSearch:
    size: int
    rng: SeededRandom
    max_steps: int
    tracer: Tracer
    visited: Set[Position] = field(default_factory=set)
    path: List[Position] = field(default_factory=list)
    steps: int = 0

    def open_neighbors(self, row: int, col: int) -> List[Position]:
        return [
            (row + d_row, col + d_col)
            for d_row, d_col in _ORTHOGONAL
            if 0 <= row + d_row < self.size
            and 0 <= col + d_col < self.size
            and (row + d_row, col + d_col) not in self.visited
        ]


def generate(
    size: Optional[int] = None,
    seed: Optional[str] = None,
    *,
    config: Optional[ZipConfig] = None,
    tracer: Optional[Tracer] = None,
) -> ZipPuzzle:
    """
    Generate a Zip puzzle. Always succeeds for size >= 2: when the path search
    runs out of steps the row-by-row snake path is used instead.
    """
    config = config or ZipConfig()
    tracer = tracer or Tracer(enabled=False)
    size = config.default_size if size is None else size
    if not isinstance(size, int) or isinstance(size, bool):
        raise TypeError("size must be an integer")
    if size < 2:
        raise ValueError("size must be at least 2")

    rng = make_rng(seed)
    tracer.log_attempt(ENGINE, 1)
    path = hamiltonian_path(size, rng, config.max_steps, tracer)
    checkpoints = place_checkpoints(path, config.min_checkpoints, config.checkpoint_spacing)
    right_walls, bottom_walls = place_walls(size, path, rng, config.wall_probability)

    grid = tuple(
        tuple(
            ZipCell(
                value=checkpoints.get((r, c)),
                is_checkpoint=(r, c) in checkpoints,
                right_wall=(r, c) in right_walls,
                bottom_wall=(r, c) in bottom_walls,
            )
            for c in range(size)
        )
        for r in range(size)
    )
    tracer.log_solution_found(ENGINE, 1)
    return ZipPuzzle(
        size=size,
        grid=grid,
        checkpoints=len(checkpoints),
        total_cells=len(path),
        solution=tuple(path),
    )


def hamiltonian_path(size: int, rng: SeededRandom, max_steps: int, tracer: Optional[Tracer] = None) -> List[Position]:
    """Random start, backtracking with Warnsdorff ordering, snake path on step exhaustion."""
    tracer = tracer or Tracer(enabled=False)
    start = (rng.randint(size), rng.randint(size))
    search = _PathSearch(size=size, rng=rng, max_steps=max_steps, tracer=tracer)
    if _walk(search, start):
        return search.path

    tracer.log_fallback(ENGINE, f"no path from {start} within {max_steps} steps")
    return snake_path(size)


def _walk(search: _PathSearch, start: Position) -> bool:
    """
    Depth-first path search on an explicit stack.

    `pending[d]` holds the untried neighbors of `search.path[d]`, stored in
    reverse so the next candidate is popped from the end.
    """
    pending: List[List[Position]] = []
    cell = start
    while True:
        search.steps += 1
        if search.steps > search.max_steps:
            return False

        search.path.append(cell)
        search.visited.add(cell)
        search.tracer.log_place(ENGINE, cell[0], cell[1], depth=len(search.path) - 1)
        if len(search.path) == search.size * search.size:
            return True

        neighbors = search.open_neighbors(*cell)
        search.rng.shuffle(neighbors)
        # Warnsdorff: visit the most constrained neighbor first.
        neighbors.sort(key=lambda n: len(search.open_neighbors(*n)))
        neighbors.reverse()
        pending.append(neighbors)

        while pending and not pending[-1]:
            pending.pop()
            dead_end = search.path.pop()
            search.visited.discard(dead_end)
            search.tracer.log_backtrack(ENGINE, dead_end[0], dead_end[1])
        if not pending:
            return False
        cell = pending[-1].pop()


def snake_path(size: int) -> List[Position]:
    """Boustrophedon path: left-to-right on even rows, right-to-left on odd rows."""
    path: List[Position] = []
    for r in range(size):
        cols = range(size) if r % 2 == 0 else range(size - 1, -1, -1)
        path.extend((r, c) for c in cols)
    return path


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def place_checkpoints(path: List[Position], minimum: int = 3, spacing: int = 5) -> Dict[Position, int]:
    """
    Number evenly spaced path cells 1..count; the last one sits on the path's end.
    At most one checkpoint per cell, so short paths get fewer than `minimum`.
    """
    if spacing < 1 or minimum < 1:
        raise ValueError("spacing and minimum must be at least 1")
    count = min(max(minimum, len(path) // spacing), len(path))
    last = len(path) - 1
    checkpoints: Dict[Position, int] = {}
    for i in range(count):
        index = last if i == count - 1 else _round_half_up(i * last / (count - 1))
        checkpoints[path[index]] = i + 1
    return checkpoints


def place_walls(size: int, path: List[Position], rng: SeededRandom, probability: float):
    """Randomly wall off adjacent cell pairs that are not consecutive on `path`."""
    order = {pos: i for i, pos in enumerate(path)}
    right_walls: Set[Position] = set()
    bottom_walls: Set[Position] = set()

    def _connected(a: Position, b: Position) -> bool:
        return abs(order[a] - order[b]) == 1

    for r in range(size):
        for c in range(size):
            if c < size - 1 and not _connected((r, c), (r, c + 1)):
                if rng.random() < probability:
                    right_walls.add((r, c))
            if r < size - 1 and not _connected((r, c), (r + 1, c)):
                if rng.random() < probability:
                    bottom_walls.add((r, c))
    return right_walls, bottom_walls
