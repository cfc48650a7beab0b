"""The interactive game: a timed session with undo, mistakes and a menu loop."""

from __future__ import annotations

import argparse
import enum
import sys
import time
from collections.abc import Callable, Sequence

from sudokugame.board import Board
from sudokugame.display import MAX_MISTAKES, render_board, render_rules
from sudokugame.puzzles import LEVELS, Difficulty, PuzzleError, load_puzzle

ReadLine = Callable[[], str]
Write = Callable[[str], object]
Clock = Callable[[], float]

_TIME_LIMIT_MINUTES = {
    Difficulty.EASY: 15,
    Difficulty.MEDIUM: 13,
    Difficulty.HARD: 11,
}

_YES = frozenset({"yes", "y", "Y"})

_BANNER_FRAMES = ("S     ", "SU    ", "SUD   ", "SUDO  ", "SUDOK ", "SUDOKU")

_MOVE_PROMPT = "\nEnter row, column, number (or -1 -1 -1 for undo or 0 0 0 to quit): "


class Outcome(enum.Enum):
    """How a game ended."""

    SOLVED = "solved"
    QUIT = "quit"
    TIME_UP = "time up"
    TOO_MANY_MISTAKES = "too many mistakes"


class GameSession:
    """One puzzle being played at a chosen difficulty and level."""

    def __init__(self, difficulty: str | Difficulty, level: int, board: Board) -> None:
        self.difficulty = Difficulty.parse(difficulty)
        self.level = level
        self.board = board

    @property
    def time_limit(self) -> int:
        """Minutes allowed for this difficulty."""
        return _TIME_LIMIT_MINUTES[self.difficulty]

    def render(self, time_left: int) -> str:
        """The board with its stats panel."""
        return render_board(
            self.board, self.difficulty, self.level, self.board.mistakes, time_left
        )


def _stdin_line() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line


def _stdout_write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _read_tokens(read_line: ReadLine, count: int) -> list[str]:
    """Gather ``count`` whitespace-separated words, reading more lines as needed."""
    tokens: list[str] = []
    while len(tokens) < count:
        tokens.extend(read_line().split())
    return tokens[:count]


def _read_move(read_line: ReadLine) -> tuple[int, int, int] | None:
    """Three integers, or None when what was typed is not three integers."""
    tokens = _read_tokens(read_line, 3)
    try:
        row, col, num = (int(token) for token in tokens)
    except ValueError:
        return None
    return row, col, num


def play_game(
    session: GameSession,
    read_line: ReadLine | None = None,
    write: Write | None = None,
    clock: Clock | None = None,
) -> Outcome:
    """Run the move loop until the puzzle is solved, time runs out, the
    player quits or makes too many mistakes. End of input counts as quitting."""
    read_line = _stdin_line if read_line is None else read_line
    write = _stdout_write if write is None else write
    clock = time.monotonic if clock is None else clock

    board = session.board
    total_seconds = session.time_limit * 60
    start = clock()

    write("\nGAME STARTS!\nYou have limited time and 5 mistakes allowed.\n")
    write(session.render(total_seconds))

    while True:
        time_passed = int(clock() - start)
        time_left = total_seconds - time_passed
        if time_left <= 0:
            write("\nTime's up! Game Over.\n")
            return Outcome.TIME_UP

        write(_MOVE_PROMPT)
        try:
            move = _read_move(read_line)
        except EOFError:
            write("Exiting...\n")
            return Outcome.QUIT

        if move == (0, 0, 0):
            write("Exiting...\n")
            return Outcome.QUIT

        if move == (-1, -1, -1):
            if board.undo():
                write("Move undone successfully.\n")
            else:
                write("No moves to undo.\n")
            write(session.render(time_left))
            continue

        if move is None or not all(1 <= value <= 9 for value in move):
            write("Invalid input! Must be 1-9.\n")
            continue

        row, col, num = move
        if board.is_original_cell(row - 1, col - 1):
            write("Cannot modify original clue!\n")
            continue

        if board.make_move(row, col, num):
            write("Move accepted!\n")
            write(session.render(time_left))
            if board.is_solved():
                write("\nCongratulations! You solved the Sudoku!\nWell played! ")
                write(f"Time taken: {time_passed // 60} minutes\n")
                return Outcome.SOLVED
        else:
            mistakes = board.record_mistake()
            write(f"Invalid move! Mistakes: {mistakes}/{MAX_MISTAKES}\n")
            if mistakes >= MAX_MISTAKES:
                write("Too many mistakes! Game Over.\nBetter luck next time!\n")
                return Outcome.TOO_MANY_MISTAKES


def _type_banner(write: Write, speed_millis: int = 500, repeats: int = 1) -> None:
    for _ in range(repeats):
        for frame in _BANNER_FRAMES:
            write(f"\r{frame}")
            time.sleep(speed_millis / 1000)
    write("\n")


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="sudokugame", description="Play Sudoku in the terminal.")
    parser.add_argument(
        "--directory",
        default=None,
        help="folder holding easy.txt, medium.txt and hard.txt (default: working directory)",
    )
    parser.add_argument(
        "--no-banner", action="store_true", help="skip the opening animation"
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Welcome the player and run games until they decline another."""
    args = _parse_args(argv)
    write = _stdout_write
    read_line = _stdin_line

    if not args.no_banner:
        _type_banner(write)

    write("\n========== WELCOME TO SUDOKU ==========\n")
    write(render_rules())
    write("Start Game? (yes/no): ")

    try:
        choice = _read_tokens(read_line, 1)[0]
        while choice in _YES:
            write("\nChoose difficulty (easy/medium/hard): ")
            diff = _read_tokens(read_line, 1)[0]

            write(f"Choose level (1-{LEVELS}): ")
            level_text = _read_tokens(read_line, 1)[0]
            try:
                level = int(level_text)
            except ValueError:
                level = 0
            if not 1 <= level <= LEVELS:
                write(
                    f"Invalid level! Please choose a level between 1 and {LEVELS}.\n"
                )
                continue

            try:
                difficulty = Difficulty.parse(diff)
            except PuzzleError:
                write("Invalid difficulty.\n")
                continue

            try:
                board = load_puzzle(difficulty, level, args.directory)
            except PuzzleError as exc:
                write(f"{exc}\n")
                return 1

            play_game(GameSession(difficulty, level, board), read_line, write)

            write("\nPlay again? (yes/no): ")
            choice = _read_tokens(read_line, 1)[0]
    except EOFError:
        write("\n")

    write("Thank you for playing Sudoku! 🎉\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())