"""Queens generator: random solution, randomized region growth, uniqueness check."""

from typing import List, Optional, Tuple

from src.core.errors import GenerationFailure
from src.core.rng import SeededRandom, make_rng
from src.utils.trace import Tracer

from .model import Position, QueensConfig, QueensPuzzle, count_region_sizes
from .solver_core import solve

ENGINE = "queens"

_ORTHOGONAL = ((-1, 0), (1, 0), (0, -1), (0, 1))


def generate(
    size: Optional[int] = None,
    seed: Optional[str] = None,
    *,
    config: Optional[QueensConfig] = None,
    tracer: Optional[Tracer] = None,
) -> QueensPuzzle:
    """
    Generate a Queens puzzle whose regions admit exactly one valid placement.
    Raises GenerationFailure once `config.max_attempts` candidates were rejected.
    """
    config = config or QueensConfig()
    tracer = tracer or Tracer(enabled=False)
    size = config.default_size if size is None else size
    if not isinstance(size, int) or isinstance(size, bool):
        raise TypeError("size must be an integer")
    if size < 1:
        raise ValueError("size must be at least 1")

    rng = make_rng(seed)
    for attempt in range(1, config.max_attempts + 1):
        tracer.log_attempt(ENGINE, attempt)

        queens = place_queens(size, rng, tracer)
        if queens is None:
            tracer.log_rejected(ENGINE, attempt, "no queen placement")
            continue

        regions = grow_regions(size, queens, rng)

        singletons = _count_singletons(size, regions)
        if singletons > config.max_singleton_regions:
            tracer.log_rejected(ENGINE, attempt, f"{singletons} singleton regions")
            continue

        solutions = solve(size, regions, config.solution_limit)
        if len(solutions) != 1:
            tracer.log_rejected(ENGINE, attempt, "not unique")
            continue

        tracer.log_solution_found(ENGINE, attempt)
        return QueensPuzzle(
            size=size,
            regions=tuple(tuple(row) for row in regions),
            solution=tuple(queens),
        )

    raise GenerationFailure(ENGINE, size, seed, config.max_attempts, "no unique region layout found")


def place_queens(size: int, rng: SeededRandom, tracer: Optional[Tracer] = None) -> Optional[List[Position]]:
    """One queen per row, distinct columns, no two queens touching (king's move)."""
    tracer = tracer or Tracer(enabled=False)
    cols = list(range(size))
    rng.shuffle(cols)
    queens: List[Position] = []
    if _place_row(queens, cols, 0, size, tracer):
        return queens
    return None


def _place_row(queens: List[Position], cols: List[int], row: int, size: int, tracer: Tracer) -> bool:
    if row == size:
        return True
    for col in cols:
        if _can_place(queens, row, col):
            queens.append((row, col))
            tracer.log_place(ENGINE, row, col, depth=row)
            if _place_row(queens, cols, row + 1, size, tracer):
                return True
            queens.pop()
    tracer.log_backtrack(ENGINE, row, -1)
    return False


def _can_place(queens: List[Position], row: int, col: int) -> bool:
    for q_row, q_col in queens:
        if q_col == col:
            return False
        if abs(q_row - row) <= 1 and abs(q_col - col) <= 1:
            return False
    return True


def grow_regions(size: int, queens: List[Position], rng: SeededRandom) -> List[List[int]]:
    """
    Grow one region per queen by randomized flood fill.

    A uniformly random frontier cell is expanded each step, which yields
    irregular shapes instead of the round wavefronts of a plain BFS.
    """
    regions = [[-1] * size for _ in range(size)]
    frontier: List[Tuple[int, int, int]] = []
    for region_id, (row, col) in enumerate(queens):
        regions[row][col] = region_id
        frontier.append((row, col, region_id))

    while frontier:
        row, col, region_id = frontier.pop(rng.randint(len(frontier)))
        for d_row, d_col in _ORTHOGONAL:
            n_row, n_col = row + d_row, col + d_col
            if 0 <= n_row < size and 0 <= n_col < size and regions[n_row][n_col] == -1:
                regions[n_row][n_col] = region_id
                frontier.append((n_row, n_col, region_id))

    for row in range(size):
        for col in range(size):
            if regions[row][col] != -1:
                continue
            assigned = [
                regions[row + d_row][col + d_col]
                for d_row, d_col in _ORTHOGONAL
                if 0 <= row + d_row < size
                and 0 <= col + d_col < size
                and regions[row + d_row][col + d_col] != -1
            ]
            regions[row][col] = rng.choice(assigned) if assigned else 0

    return regions


def _count_singletons(size: int, regions: List[List[int]]) -> int:
    return sum(1 for s in count_region_sizes(size, regions) if s == 1)
