"""Rule checks for Tango grids.

Works on anything with a ``value`` attribute per cell, so both the immutable
puzzle grid and the mutable play-state can be validated.
"""

from typing import Dict, List, Sequence, Tuple

from .model import Symbol, line_key

Position = Tuple[int, int]


class _ErrorSet:
    """Ordered, deduplicated collection of offending cells."""

    def __init__(self):
        self.cells: List[Position] = []
        self._seen = set()

    def add(self, row: int, col: int) -> None:
        if (row, col) not in self._seen:
            self._seen.add((row, col))
            self.cells.append((row, col))


def _values(grid: Sequence[Sequence]) -> List[List]:
    return [[cell.value for cell in row] for row in grid]


def validate_board(grid: Sequence[Sequence]) -> List[Position]:
    """Return every cell that breaks the run, balance or uniqueness rule."""
    values = _values(grid)
    size = len(values)
    errors = _ErrorSet()
    _check_runs(values, size, errors)
    _check_balance(values, size, errors)
    _check_unique_lines(values, size, errors)
    return errors.cells


def _check_runs(values: List[List], size: int, errors: _ErrorSet) -> None:
    for r in range(size):
        for c in range(size):
            value = values[r][c]
            if value is None:
                continue
            if c < size - 2 and values[r][c + 1] == value and values[r][c + 2] == value:
                for offset in range(3):
                    errors.add(r, c + offset)
            if r < size - 2 and values[r + 1][c] == value and values[r + 2][c] == value:
                for offset in range(3):
                    errors.add(r + offset, c)


def _check_balance(values: List[List], size: int, errors: _ErrorSet) -> None:
    half = size / 2
    for i in range(size):
        row = values[i]
        if None not in row and (row.count(Symbol.SUN) > half or row.count(Symbol.MOON) > half):
            for j in range(size):
                errors.add(i, j)
        col = [values[j][i] for j in range(size)]
        if None not in col and (col.count(Symbol.SUN) > half or col.count(Symbol.MOON) > half):
            for j in range(size):
                errors.add(j, i)


def _check_unique_lines(values: List[List], size: int, errors: _ErrorSet) -> None:
    rows: Dict[str, List[int]] = {}
    cols: Dict[str, List[int]] = {}
    for i in range(size):
        row = values[i]
        if None not in row:
            rows.setdefault(line_key(row), []).append(i)
        col = [values[j][i] for j in range(size)]
        if None not in col:
            cols.setdefault(line_key(col), []).append(i)

    for indices in rows.values():
        if len(indices) > 1:
            for r in indices:
                for c in range(size):
                    errors.add(r, c)
    for indices in cols.values():
        if len(indices) > 1:
            for c in indices:
                for r in range(size):
                    errors.add(r, c)


def check_win(grid: Sequence[Sequence]) -> bool:
    """Every cell filled, no rule broken, all rows and all columns distinct."""
    values = _values(grid)
    size = len(values)
    if any(value is None for row in values for value in row):
        return False
    if validate_board(grid):
        return False

    rows = {line_key(row) for row in values}
    cols = {line_key([values[r][c] for r in range(size)]) for c in range(size)}
    return len(rows) == size and len(cols) == size
