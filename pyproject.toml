[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sudokugame"
version = "1.0.0"
description = "A terminal Sudoku game with timed levels, mistake limits and undo"
requires-python = ">=3.10"
dependencies = []
keywords = ["sudoku", "puzzle", "game", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sudoku = "sudokugame.game:main"

[tool.hatch.build.targets.wheel]
packages = ["sudokugame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
