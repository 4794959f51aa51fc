"""Move and win checks for a Zip play-state (grid of ZipCellState)."""

from typing import List, Optional, Sequence

from .model import Position, ZipCellState, ZipPuzzle

Grid = Sequence[Sequence[ZipCellState]]


def is_valid_move(grid: Grid, from_pos: Position, to_pos: Position) -> bool:
    """
    A move extends the path from `from_pos` to `to_pos` when the target is on
    the board, unvisited, orthogonally adjacent and not separated by a wall.
    """
    size = len(grid)
    to_row, to_col = to_pos
    from_row, from_col = from_pos
    if not (0 <= to_row < size and 0 <= to_col < size):
        return False
    if grid[to_row][to_col].path_index is not None:
        return False

    d_row, d_col = to_row - from_row, to_col - from_col
    if abs(d_row) + abs(d_col) != 1:
        return False

    # A wall belongs to the cell on its left (right_wall) or above it (bottom_wall).
    if d_col == 1 and grid[from_row][from_col].right_wall:
        return False
    if d_col == -1 and grid[to_row][to_col].right_wall:
        return False
    if d_row == 1 and grid[from_row][from_col].bottom_wall:
        return False
    if d_row == -1 and grid[to_row][to_col].bottom_wall:
        return False
    return True


def ordered_path(grid: Grid) -> List[Optional[ZipCellState]]:
    """Visited cells indexed by their path position."""
    visited = [cell for row in grid for cell in row if cell.path_index is not None]
    path: List[Optional[ZipCellState]] = [None] * len(visited)
    for cell in visited:
        if cell.path_index < len(path):
            path[cell.path_index] = cell
    return path


def highest_checkpoint(grid: Grid) -> int:
    """Largest checkpoint number already on the path, 0 if none."""
    best = 0
    for row in grid:
        for cell in row:
            if cell.path_index is not None and cell.is_checkpoint and cell.value and cell.value > best:
                best = cell.value
    return best


def check_win(grid: Grid, level: ZipPuzzle) -> bool:
    """All cells visited and checkpoints met as 1, 2, ... with none skipped."""
    path = ordered_path(grid)
    if len(path) != level.total_cells or any(cell is None for cell in path):
        return False

    next_checkpoint = 1
    for cell in path:
        if cell.is_checkpoint:
            if cell.value != next_checkpoint:
                return False
            next_checkpoint += 1
    return next_checkpoint == level.checkpoints + 1
