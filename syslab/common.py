"""Shared types for the snake game: cells, inputs, the board and the snake."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass, field
from typing import List

from syslab.linked_list import DoublyLinkedList


class Cell(enum.IntFlag):
    """Bit flags describing what a board cell holds."""

    PLAIN = 0b0001
    SNAKE = 0b0010
    WALL = 0b0100
    FOOD = 0b1000


class InputKey(enum.Enum):
    """A player's input for one step of the game."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    NONE = 4


class Direction(enum.Enum):
    """Direction the snake is moving in."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


_CELL_CHARS = {
    Cell.PLAIN: ".",
    Cell.SNAKE: "S",
    Cell.WALL: "X",
    Cell.FOOD: "O",
}


@dataclass
class Board:
    """A row-major grid of cell flags."""

    width: int
    height: int
    cells: List[int]

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("board dimensions must not be negative")
        if len(self.cells) != self.width * self.height:
            raise ValueError(
                f"board of {self.width}x{self.height} needs "
                f"{self.width * self.height} cells, got {len(self.cells)}"
            )

    def index(self, row: int, col: int) -> int:
        """Return the position of (``row``, ``col``) in ``cells``."""
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"cell ({row}, {col}) is outside the board")
        return row * self.width + col

    def to_string(self) -> str:
        """Render the cells row by row as one line of '.', 'S', 'X', 'O' or '?'."""
        return "".join(_CELL_CHARS.get(cell, "?") for cell in self.cells)


@dataclass
class Snake:
    """The snake's body as a list of (x, y) positions, head first."""

    body: DoublyLinkedList = field(default_factory=DoublyLinkedList)

    @property
    def length(self) -> int:
        return len(self.body)


_rng = random.Random()


def set_seed(seed: int) -> None:
    """Seed the generator used for food placement."""
    _rng.seed(seed)


def generate_index(size: int) -> int:
    """Return a random index in [0, ``size``)."""
    if size <= 0:
        raise ValueError("size must be positive")
    return _rng.randrange(size)