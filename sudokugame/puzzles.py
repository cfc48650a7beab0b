"""Puzzle collections: one text file of numbered puzzles per difficulty."""

from __future__ import annotations

import enum
import os
from pathlib import Path

from sudokugame.board import SIZE, Board, Grid

LEVELS = 10
CELLS = SIZE * SIZE


class PuzzleError(ValueError):
    """Raised when a puzzle file cannot be read or does not hold the puzzle asked for."""


class Difficulty(enum.Enum):
    """The three puzzle collections, named as the player types them."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, name: str | Difficulty) -> Difficulty:
        """Return the difficulty called ``name``; raise PuzzleError for any other word."""
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            raise PuzzleError(f"invalid difficulty level: {name!r}") from None


def parse_puzzles(text: str) -> list[Grid]:
    """Split whitespace-separated digits into 9x9 grids, in file order.

    Lines and blank lines between puzzles carry no meaning; only the run of
    numbers does, 81 to a puzzle.
    """
    values: list[int] = []
    for token in text.split():
        try:
            value = int(token)
        except ValueError:
            raise PuzzleError(f"not a number in puzzle data: {token!r}") from None
        if not 0 <= value <= SIZE:
            raise PuzzleError(f"cell values must be 0-{SIZE}, got {value}")
        values.append(value)
    if len(values) % CELLS:
        raise PuzzleError(
            f"puzzle data ends part-way through a puzzle ({len(values) % CELLS} "
            f"of {CELLS} cells)"
        )
    return [
        [values[start + row * SIZE:start + (row + 1) * SIZE] for row in range(SIZE)]
        for start in range(0, len(values), CELLS)
    ]


def load_puzzles(path: str | os.PathLike[str]) -> list[Grid]:
    """Read every puzzle in the file at ``path``."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise PuzzleError(f"Error opening {os.fspath(path)}: {exc.strerror}") from exc
    return parse_puzzles(text)


def load_puzzle(
    difficulty: str | Difficulty,
    level: int,
    directory: str | os.PathLike[str] | None = None,
) -> Board:
    """Load puzzle number ``level`` (1-10) of a difficulty as a fresh board.

    The collection is read from ``<difficulty>.txt`` in ``directory``, or in
    the working directory when none is given.
    """
    chosen = Difficulty.parse(difficulty)
    if isinstance(level, bool) or not isinstance(level, int) or not 1 <= level <= LEVELS:
        raise PuzzleError(f"Invalid level. Please select a level between 1 and {LEVELS}.")
    folder = Path(directory) if directory is not None else Path()
    puzzles = load_puzzles(folder / f"{chosen.value}.txt")
    if level > len(puzzles):
        raise PuzzleError(
            f"{chosen.value}.txt holds {len(puzzles)} puzzles, level {level} is missing"
        )
    return Board(puzzles[level - 1])