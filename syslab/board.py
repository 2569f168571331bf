"""Building game boards: the default board and the compressed board format."""

from __future__ import annotations

import enum
import re
from typing import List, Optional

from syslab.common import Board, Cell
from syslab.game import place_food

DEFAULT_WIDTH = 20
DEFAULT_HEIGHT = 10

_HEADER = re.compile(r"B\s*([+-]?[0-9]+)x\s*([+-]?[0-9]+)", re.ASCII)
_RUN = re.compile(r"(.)([0-9]*)", re.DOTALL | re.ASCII)
_RUN_FLAGS = {"W": Cell.WALL, "E": Cell.PLAIN, "S": Cell.SNAKE}


class BoardInitStatus(enum.Enum):
    """Outcome of building a board."""

    SUCCESS = 0
    INCORRECT_DIMENSIONS = 1
    WRONG_SNAKE_NUM = 2
    BAD_CHAR = 3


class BoardInitError(ValueError):
    """A board description could not be turned into a board."""

    def __init__(self, status: BoardInitStatus, message: Optional[str] = None) -> None:
        super().__init__(message or status.name)
        self.status = status


def initialize_default_board() -> Board:
    """Return the 20x10 board walled on every edge with the snake at (2, 2)."""
    width, height = DEFAULT_WIDTH, DEFAULT_HEIGHT
    cells: List[int] = [Cell.PLAIN] * (width * height)
    for col in range(width):
        cells[col] = Cell.WALL
        cells[col + width * (height - 1)] = Cell.WALL
    for row in range(height):
        cells[row * width] = Cell.WALL
        cells[row * width + width - 1] = Cell.WALL
    cells[width * 2 + 2] = Cell.SNAKE
    return Board(width, height, cells)


def decompress_board_str(compressed: str) -> Board:
    """Build a board from a string such as ``B3x4|W4|W1S1E1W1|W4``.

    The header gives height then width; each ``|``-separated row is a run of
    a letter (W, E or S) followed by its count. Raises :class:`BoardInitError`.
    """
    header = _HEADER.match(compressed)
    if header is None:
        raise BoardInitError(
            BoardInitStatus.INCORRECT_DIMENSIONS, "malformed dimensions header"
        )
    height, width = int(header.group(1)), int(header.group(2))
    if height < 0 or width < 0:
        raise BoardInitError(
            BoardInitStatus.INCORRECT_DIMENSIONS, "negative board dimensions"
        )
    if compressed.count("|") != height:
        raise BoardInitError(
            BoardInitStatus.INCORRECT_DIMENSIONS,
            f"expected {height} rows",
        )
    if compressed.count("S") != 1:
        raise BoardInitError(
            BoardInitStatus.WRONG_SNAKE_NUM, "board must hold exactly one snake"
        )

    cells: List[int] = []
    for row_number, row in enumerate(compressed.split("|")[1:]):
        row_cells: List[int] = []
        row_sum = 0
        for run in _RUN.finditer(row):
            kind, digits = run.group(1), run.group(2)
            count = int(digits) if digits else 0
            if kind == "S" and count != 1:
                raise BoardInitError(
                    BoardInitStatus.WRONG_SNAKE_NUM, "snake run must have length 1"
                )
            row_sum += count
            flag = _RUN_FLAGS.get(kind)
            if flag is None:
                raise BoardInitError(
                    BoardInitStatus.BAD_CHAR, f"unexpected character {kind!r}"
                )
            if row_sum <= width:
                row_cells.extend([flag] * count)
        if row_sum != width:
            raise BoardInitError(
                BoardInitStatus.INCORRECT_DIMENSIONS,
                f"row {row_number} holds {row_sum} cells, expected {width}",
            )
        cells.extend(row_cells)
    return Board(width, height, cells)


def initialize_game(board_rep: Optional[str] = None) -> Board:
    """Build the board (the default one when ``board_rep`` is None) and place food."""
    if board_rep is None:
        board = initialize_default_board()
    else:
        board = decompress_board_str(board_rep)
    place_food(board)
    return board