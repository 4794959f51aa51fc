"""Rule checks for a Queens play-state (grid of QueensCell)."""

from typing import List, Sequence

from .model import CellState, Position, QueensCell

Board = Sequence[Sequence[QueensCell]]

_KING_MOVES = ((-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1))


def conflicting_queens(board: Board, row: int, col: int, size: int) -> List[Position]:
    """Queens sharing a row, column or region with (row, col), or touching it."""
    conflicts: List[Position] = []
    seen = set()

    def _add(r: int, c: int) -> None:
        if (r, c) != (row, col) and (r, c) not in seen and board[r][c].state == CellState.QUEEN:
            seen.add((r, c))
            conflicts.append((r, c))

    for c in range(size):
        _add(row, c)
    for r in range(size):
        _add(r, col)

    region_id = board[row][col].region_id
    for r in range(size):
        for c in range(size):
            if board[r][c].region_id == region_id:
                _add(r, c)

    for d_row, d_col in _KING_MOVES:
        r, c = row + d_row, col + d_col
        if 0 <= r < size and 0 <= c < size:
            _add(r, c)

    return conflicts


def is_valid_placement(board: Board, row: int, col: int, size: int) -> bool:
    """A queen at (row, col) is valid when no other queen conflicts with it."""
    return not conflicting_queens(board, row, col, size)


def update_errors(board: Board) -> List[Position]:
    """
    Recompute every error flag from scratch.

    Each queen that fails `is_valid_placement` is flagged together with all the
    queens it conflicts with. Returns the flagged positions in board order.
    """
    size = len(board)
    for row in board:
        for cell in row:
            cell.is_error = False

    for r in range(size):
        for c in range(size):
            if board[r][c].state != CellState.QUEEN:
                continue
            conflicts = conflicting_queens(board, r, c, size)
            if conflicts:
                board[r][c].is_error = True
                for q_row, q_col in conflicts:
                    board[q_row][q_col].is_error = True

    return [(cell.row, cell.col) for row in board for cell in row if cell.is_error]


def check_win(board: Board) -> bool:
    """Won when exactly `size` queens are placed and none is flagged."""
    size = len(board)
    queens = 0
    for row in board:
        for cell in row:
            if cell.is_error:
                return False
            if cell.state == CellState.QUEEN:
                queens += 1
    return queens == size
