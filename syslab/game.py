"""Advancing the snake game one step at a time and reading the player's name."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, TextIO, Tuple

from syslab.common import Board, Cell, InputKey, generate_index
from syslab.mbstrings import mbslen


def place_food(board: Board) -> int:
    """Turn a random plain cell of ``board`` into food and return its index.

    Raises ``ValueError`` if the board has no plain cell left.
    """
    if Cell.PLAIN not in board.cells:
        raise ValueError("no empty cell left for food")
    while True:
        index = generate_index(len(board.cells))
        if board.cells[index] == Cell.PLAIN:
            board.cells[index] = Cell.FOOD
            return index


def _step(position: int, key: InputKey, width: int, height: int) -> Tuple[int, bool]:
    """Return the position one step from ``position`` and whether it wrapped."""
    area = width * height
    if key is InputKey.UP:
        target = position - width
        if target < 0:
            return target + area, True
    elif key is InputKey.DOWN:
        target = position + width
        if target >= area:
            return target - area, True
    elif key is InputKey.LEFT:
        target = position - 1
        if target < 0 or target % width == width - 1:
            return target + width, True
    elif key is InputKey.RIGHT:
        target = position + 1
        if target % width == 0:
            return target - width, True
    else:
        target = position
    return target, False


@dataclass
class GameState:
    """Score, game-over flag, player name and the last direction moved in."""

    game_over: bool = False
    score: int = 0
    name: str = ""
    name_len: int = 0
    last_direction: InputKey = InputKey.RIGHT

    def update(self, board: Board, input_key: InputKey, growing: bool = False) -> None:
        """Move the snake one step on ``board`` according to ``input_key``.

        With no input the snake keeps its last direction. Running into a wall
        ends the game and leaves the snake in place; eating food scores a
        point and places new food. Moving off an edge wraps around the board.
        The snake does not grow yet, whatever ``growing`` says.
        """
        try:
            snake_pos = board.cells.index(Cell.SNAKE)
        except ValueError:
            return

        if input_key is InputKey.NONE:
            input_key = self.last_direction
        else:
            self.last_direction = input_key

        new_pos, wrapped = _step(snake_pos, input_key, board.width, board.height)

        if board.cells[new_pos] == Cell.WALL and not wrapped:
            self.game_over = True
            return

        if board.cells[new_pos] == Cell.FOOD:
            self.score += 1
            place_food(board)

        board.cells[snake_pos] = Cell.PLAIN
        board.cells[new_pos] = Cell.SNAKE

    def read_name(
        self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None
    ) -> str:
        """Prompt until a non-empty name is entered; store and return it.

        Raises ``EOFError`` if the input ends before a name is given.
        """
        stdin = sys.stdin if stdin is None else stdin
        stdout = sys.stdout if stdout is None else stdout
        while True:
            stdout.write("Name > ")
            stdout.flush()
            line = stdin.readline()
            if not line:
                raise EOFError("input ended before a name was entered")
            name = line[:-1] if line.endswith("\n") else line
            if name:
                self.name = name
                self.name_len = mbslen(name)
                stdout.write(str(self.name_len))
                stdout.flush()
                return name
            stdout.write("Name Invalid: must be longer than 0 characters.\n")