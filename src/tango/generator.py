"""Tango generator: randomized row-major backtracking, then hint masking."""

from dataclasses import dataclass, field
from typing import List, Optional

from src.core.errors import GenerationFailure
from src.core.rng import SeededRandom, make_rng
from src.utils.trace import Tracer

from .model import Symbol, TangoCell, TangoConfig, TangoPuzzle

ENGINE = "tango"

Grid = List[List[Optional[Symbol]]]


class _StepLimitExceeded(Exception):
    pass


@dataclass
class _FillState:
    """Owned backtracking state: the grid being filled plus step accounting."""

    size: int
    rng: SeededRandom
    config: TangoConfig
    tracer: Tracer
    grid: Grid = field(default_factory=list)
    steps: int = 0

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[None] * self.size for _ in range(self.size)]


def generate(
    size: Optional[int] = None,
    seed: Optional[str] = None,
    *,
    config: Optional[TangoConfig] = None,
    tracer: Optional[Tracer] = None,
) -> TangoPuzzle:
    """
    Generate a Tango puzzle. The full solution is balanced, run-free and (with
    `enforce_unique_lines`) has pairwise distinct rows and columns; about
    `reveal_ratio` of it is kept as fixed hints.
    """
    config = config or TangoConfig()
    tracer = tracer or Tracer(enabled=False)
    size = config.default_size if size is None else size
    if not isinstance(size, int) or isinstance(size, bool):
        raise TypeError("size must be an integer")
    if size < 2 or size % 2:
        raise ValueError("size must be a positive even integer")

    rng = make_rng(seed)
    state = _FillState(size=size, rng=rng, config=config, tracer=tracer)
    tracer.log_attempt(ENGINE, 1)

    try:
        solved = _fill(state)
    except _StepLimitExceeded:
        raise GenerationFailure(ENGINE, size, seed, 1, f"exceeded {config.max_steps} search steps") from None
    if not solved:
        raise GenerationFailure(ENGINE, size, seed, 1, "search space exhausted")

    solution = tuple(tuple(row) for row in state.grid)
    grid = mask_solution(solution, rng, config.reveal_ratio)
    revealed = sum(1 for row in grid for cell in row if cell.is_fixed)
    tracer.log_mask(ENGINE, revealed, size * size)
    tracer.log_solution_found(ENGINE, 1)
    return TangoPuzzle(size=size, grid=grid, solution=solution)


def _fill(state: _FillState) -> bool:
    """
    Row-major backtracking over cell indices without recursion.

    `untried[i]` holds the values still to try at cell i; a cell is cleared
    before its next value is tried, so backtracking leaves no stale symbols.
    """
    size = state.size
    total = size * size
    untried: List[List[Symbol]] = []
    index = 0
    while index < total:
        row, col = divmod(index, size)
        if len(untried) == index:
            untried.append([Symbol.SUN, Symbol.MOON] if state.rng.random() > 0.5 else [Symbol.MOON, Symbol.SUN])
        state.grid[row][col] = None

        placed = False
        while untried[index]:
            value = untried[index].pop(0)
            if not is_legal_placement(state.grid, row, col, value, size, state.config.enforce_unique_lines):
                continue
            state.steps += 1
            if state.steps > state.config.max_steps:
                raise _StepLimitExceeded()
            state.grid[row][col] = value
            state.tracer.log_place(ENGINE, row, col, value.value, depth=index)
            placed = True
            break

        if placed:
            index += 1
            continue
        state.tracer.log_backtrack(ENGINE, row, col)
        untried.pop()
        if index == 0:
            return False
        index -= 1
    return True


def is_legal_placement(
    grid: Grid, row: int, col: int, value: Symbol, size: int, unique_lines: bool = True
) -> bool:
    """
    Whether `value` may go at (row, col) when cells are filled in row-major order.

    Only cells left of / above the target are looked at: no third symbol in a
    run, no more than size/2 of a symbol per line, and (optionally) a completed
    row or column must differ from every earlier one.
    """
    if col >= 2 and grid[row][col - 1] == value and grid[row][col - 2] == value:
        return False
    if row >= 2 and grid[row - 1][col] == value and grid[row - 2][col] == value:
        return False

    half = size // 2
    row_count = 1 + sum(1 for c in range(col) if grid[row][c] == value)
    if row_count > half:
        return False
    col_count = 1 + sum(1 for r in range(row) if grid[r][col] == value)
    if col_count > half:
        return False

    if unique_lines:
        if col == size - 1:
            candidate = grid[row][:col] + [value]
            if any(grid[r] == candidate for r in range(row)):
                return False
        if row == size - 1:
            candidate = [grid[r][col] for r in range(row)] + [value]
            for c in range(col):
                if [grid[r][c] for r in range(size)] == candidate:
                    return False

    return True


def mask_solution(solution, rng: SeededRandom, reveal_ratio: float):
    """Keep roughly `reveal_ratio` of the cells as fixed hints, blank the rest."""
    threshold = 1.0 - reveal_ratio
    return tuple(
        tuple(
            TangoCell(value=value, is_fixed=True) if rng.random() > threshold else TangoCell(value=None, is_fixed=False)
            for value in row
        )
        for row in solution
    )
