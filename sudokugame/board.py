"""The Sudoku board: clues, current state, one level of undo and a mistake count."""

from __future__ import annotations

from collections.abc import Sequence

SIZE = 9
BOX = 3
DIGITS = frozenset(range(1, SIZE + 1))

Grid = list[list[int]]


class BoardError(ValueError):
    """Raised for a malformed puzzle or a cell outside the board."""


def _copy_grid(puzzle: Sequence[Sequence[int]]) -> Grid:
    rows = [list(row) for row in puzzle]
    if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
        raise BoardError(f"a puzzle must be {SIZE}x{SIZE}")
    for row in rows:
        for value in row:
            if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= SIZE:
                raise BoardError(f"cell values must be integers 0-{SIZE}, got {value!r}")
    return rows


class Board:
    """A puzzle being played.

    ``original`` holds the clues (0 marks an empty cell), ``current`` the
    state of play and ``previous`` the state before the last accepted move.
    ``is_original_cell`` and ``is_valid_move`` take 0-based coordinates;
    ``make_move`` takes the 1-based coordinates a player types.
    """

    def __init__(self, puzzle: Sequence[Sequence[int]]) -> None:
        self.original: Grid = []
        self.current: Grid = []
        self.previous: Grid = []
        self.mistakes = 0
        self.reset(puzzle)

    def reset(self, puzzle: Sequence[Sequence[int]]) -> None:
        """Start over with ``puzzle`` as the clues and clear the mistake count."""
        grid = _copy_grid(puzzle)
        self.original = grid
        self.current = [row[:] for row in grid]
        self.previous = [row[:] for row in grid]
        self.mistakes = 0

    def undo(self) -> bool:
        """Restore the state before the last move; False if there is nothing to undo."""
        if self.current == self.previous:
            return False
        self.current = [row[:] for row in self.previous]
        return True

    @staticmethod
    def _check_cell(row: int, col: int) -> None:
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise BoardError(f"cell ({row}, {col}) is outside the board")

    def is_original_cell(self, row: int, col: int) -> bool:
        """Whether the 0-based cell holds a clue."""
        self._check_cell(row, col)
        return self.original[row][col] != 0

    def is_valid_move(self, row: int, col: int, num: int) -> bool:
        """Whether ``num`` may go in the 0-based cell under Sudoku rules."""
        self._check_cell(row, col)
        if self.original[row][col] != 0:
            return False
        if num in self.current[row]:
            return False
        if any(line[col] == num for line in self.current):
            return False
        box_row = row - row % BOX
        box_col = col - col % BOX
        return all(
            num not in line[box_col:box_col + BOX]
            for line in self.current[box_row:box_row + BOX]
        )

    def make_move(self, row: int, col: int, num: int) -> bool:
        """Place ``num`` at the 1-based cell if the move is valid."""
        if not self.is_valid_move(row - 1, col - 1, num):
            return False
        self.previous = [line[:] for line in self.current]
        self.current[row - 1][col - 1] = num
        return True

    def _units(self):
        yield from self.current
        yield from zip(*self.current)
        for box_row in range(0, SIZE, BOX):
            for box_col in range(0, SIZE, BOX):
                yield [
                    value
                    for line in self.current[box_row:box_row + BOX]
                    for value in line[box_col:box_col + BOX]
                ]

    def is_solved(self) -> bool:
        """Whether every row, column and box holds each digit exactly once."""
        if any(0 in line for line in self.current):
            return False
        return all(len(unit) == SIZE and set(unit) == DIGITS for unit in self._units())

    def record_mistake(self) -> int:
        """Count one more mistake and return the new total."""
        self.mistakes += 1
        return self.mistakes