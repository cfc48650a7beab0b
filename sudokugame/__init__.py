"""A terminal Sudoku game with timed levels, mistake limits and undo."""

__version__ = "1.0.0"