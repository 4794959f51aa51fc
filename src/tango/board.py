"""Mutable Tango play-state: clicks cycle empty -> SUN -> MOON -> empty."""

from dataclasses import dataclass, field
from typing import List, Optional

from .model import Symbol, TangoCellState, TangoPuzzle
from .validator import Position, check_win, validate_board

_CYCLE = {None: Symbol.SUN, Symbol.SUN: Symbol.MOON, Symbol.MOON: None}


@dataclass
class TangoBoard:
    puzzle: TangoPuzzle
    cells: List[List[TangoCellState]] = field(default_factory=list)
    won: bool = False

    @classmethod
    def from_puzzle(cls, puzzle: TangoPuzzle) -> "TangoBoard":
        cells = [
            [TangoCellState(row=r, col=c, value=cell.value, is_fixed=cell.is_fixed) for c, cell in enumerate(row)]
            for r, row in enumerate(puzzle.grid)
        ]
        board = cls(puzzle=puzzle, cells=cells)
        board.refresh()
        return board

    @property
    def size(self) -> int:
        return self.puzzle.size

    def _cell(self, row: int, col: int) -> TangoCellState:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(f"Cell ({row}, {col}) is outside a {self.size}x{self.size} board")
        return self.cells[row][col]

    def cycle(self, row: int, col: int) -> bool:
        """Advance a non-fixed cell to its next symbol. Returns False for ignored clicks."""
        cell = self._cell(row, col)
        if self.won or cell.is_fixed:
            return False
        cell.value = _CYCLE[cell.value]
        self.refresh()
        return True

    def set_value(self, row: int, col: int, value: Optional[Symbol]) -> bool:
        cell = self._cell(row, col)
        if self.won or cell.is_fixed:
            return False
        cell.value = Symbol(value) if value is not None else None
        self.refresh()
        return True

    def fill_solution(self) -> None:
        """Reveal: write the private solution into every non-fixed cell."""
        for r, row in enumerate(self.cells):
            for c, cell in enumerate(row):
                if not cell.is_fixed:
                    cell.value = self.puzzle.solution[r][c]
        self.refresh()

    def refresh(self) -> List[Position]:
        """Full recompute of error flags and the win flag."""
        errors = validate_board(self.cells)
        for row in self.cells:
            for cell in row:
                cell.is_error = False
        for r, c in errors:
            self.cells[r][c].is_error = True
        self.won = check_win(self.cells)
        return errors

    def errors(self) -> List[Position]:
        return [(c.row, c.col) for row in self.cells for c in row if c.is_error]

    def check_win(self) -> bool:
        return check_win(self.cells)
