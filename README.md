# sudokugame

A Sudoku game for the terminal. It has three difficulties with ten
levels each, a countdown timer, a limit of five mistakes and a one-step
undo.

## Installing

```
pip install .
```

## Puzzle files

The game reads its puzzles from `easy.txt`, `medium.txt` and `hard.txt`.
Each file holds puzzles one after another as whitespace-separated
numbers from 0 to 9, 81 to a puzzle, with `0` marking an empty cell.
Line breaks and blank lines between puzzles are allowed but carry no
meaning. Level `n` is the `n`-th puzzle in the file.

The package ships no puzzle files and does not generate puzzles; you
supply the three files yourself.

## Playing

```
sudoku
```

Options:

- `--directory DIR` reads the puzzle files from `DIR` instead of the
  working directory.
- `--no-banner` skips the opening animation.

Answer `yes`, `y` or `Y` to start, then choose a difficulty
(`easy`, `medium` or `hard`) and a level from 1 to 10. Each turn, enter
three numbers: row, column and value, all from 1 to 9.

- `-1 -1 -1` undoes the last accepted move.
- `0 0 0` leaves the current game. End of input also leaves it.

Time limits are 15 minutes for easy, 13 for medium and 11 for hard.
A move into an empty cell that repeats a number already in its row,
column or 3x3 box counts as a mistake; the fifth mistake ends the game.
Clue cells cannot be changed, and trying to does not count as a
mistake. If a puzzle file is missing or malformed, the command prints
the error and exits with status 1.

## Using the library

```python
from sudokugame.puzzles import load_puzzle
from sudokugame.display import render_board

board = load_puzzle("easy", 1, ".")        # a Board
if board.make_move(1, 3, 4):
    print("accepted")
print(render_board(board, "easy", 1, board.mistakes, 15 * 60))
```

- `sudokugame.board.Board` holds the clues (`original`), the state of
  play (`current`), the state before the last accepted move
  (`previous`) and a `mistakes` count. `make_move` takes 1-based row and
  column numbers; `is_valid_move` and `is_original_cell` take 0-based
  positions. `undo` restores the previous state and returns `False` when
  there is nothing to undo. `is_solved` checks every row, column and
  box. `record_mistake` increments and returns the count. A malformed
  puzzle or an out-of-range cell raises `BoardError`.
- `sudokugame.puzzles` offers `Difficulty` (with `Difficulty.parse`),
  `parse_puzzles`, `load_puzzles` and `load_puzzle`; problems raise
  `PuzzleError`.
- `sudokugame.display` offers `render_board`, which takes a `Board` or a
  9x9 grid, and `render_rules`.
- `sudokugame.game` offers `GameSession` and `play_game`, which runs one
  game with injectable input, output and clock functions and returns an
  `Outcome` (`SOLVED`, `QUIT`, `TIME_UP` or `TOO_MANY_MISTAKES`).
- `sudokugame.timer` offers `Timer`, a countdown read on demand with
  `start`, `remaining` and `is_time_up`, and `format_time`, which renders
  seconds as `Time: MM:SS`.

## Running the tests

```
pip install .[test]
pytest
```