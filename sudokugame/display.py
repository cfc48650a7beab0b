"""Text rendering of the board with its stats panel, and of the rules."""

from __future__ import annotations

from collections.abc import Sequence

from sudokugame.board import BOX, SIZE, Board, BoardError
from sudokugame.puzzles import Difficulty

MAX_MISTAKES = 5

_COLUMNS = "     1  2  3   4  5  6   7  8  9       STATS"
_RULE = "   +---------+---------+---------+"
_STATS_RULE = "     ---------------------------------------"

_RULES_TEXT = (
    "\n=========== SUDOKU RULES ===========\n"
    "1. Fill each row with numbers 1-9 without repetition\n"
    "2. Fill each column with numbers 1-9 without repetition\n"
    "3. Fill each 3x3 box with numbers 1-9 without repetition\n"
    "4. You cannot change the given numbers (clues)\n"
    "5. You have a limited time based on difficulty:\n"
    "   - Easy: 15 minutes\n"
    "   - Medium: 13 minutes\n"
    "   - Hard: 11 minutes\n"
    "6. You are allowed 5 mistakes maximum\n\n"
)


def _grid_of(board: Board | Sequence[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in (board.current if isinstance(board, Board) else board)]
    if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
        raise BoardError(f"a board must be {SIZE}x{SIZE}")
    return rows


def _cells(row: Sequence[int]) -> str:
    groups = (
        "".join(" . " if value == 0 else f" {value} " for value in row[start:start + BOX])
        for start in range(0, SIZE, BOX)
    )
    return "|".join(groups)


def render_board(
    board: Board | Sequence[Sequence[int]],
    difficulty: str | Difficulty,
    level: int,
    mistakes: int,
    time_left: int,
) -> str:
    """Draw the grid with the difficulty, level, mistakes and remaining time beside it.

    ``board`` is a Board (its current state is drawn) or a 9x9 grid where 0
    marks an empty cell; ``time_left`` is in seconds.
    """
    grid = _grid_of(board)
    if time_left < 0:
        raise ValueError("time left must not be negative")
    name = difficulty.value if isinstance(difficulty, Difficulty) else str(difficulty)
    minutes, seconds = divmod(int(time_left), 60)

    side = {
        0: f"     Difficulty : {name}     Level : {level}",
        1: _STATS_RULE,
        3: "     Undo : -1 -1 -1",
        4: "     Exit : 0 0 0",
    }
    separators = {
        2: f"{_RULE}     Mistakes : {mistakes}/{MAX_MISTAKES}"
        f"     Time Left : {minutes:02d}:{seconds:02d}",
        5: f"{_RULE}{_STATS_RULE}",
    }

    lines = ["", "Your Sudoku Board:", "", _COLUMNS, f"{_RULE}{_STATS_RULE}"]
    for index, row in enumerate(grid):
        prefix = f"{index + 1}  |{_cells(row)}|"
        if index in separators:
            lines.append(prefix + "     ")
            lines.append(separators[index])
        else:
            lines.append(prefix + side.get(index, ""))
    lines.append(_RULE)
    return "\n".join(lines) + "\n"


def render_rules() -> str:
    """The rules shown before a game starts."""
    return _RULES_TEXT