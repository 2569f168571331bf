"""Drawing the snake game and its game-over screen in a curses window."""

from __future__ import annotations

import curses
import math
from typing import Any, Tuple

from syslab.common import Board, Cell
from syslab.game import GameState

COLOR_BASE = 1
COLOR_SNAKE = 2
COLOR_WALL = 3
COLOR_FOOD = 4
COLOR_TEXT = 5

BOARD_OFFSET_X = 0
BOARD_OFFSET_Y = 1
GAME_OVER_OFFSET_X = 0
GAME_OVER_OFFSET_Y = 2

BLOCK = "\u2588"


class TerminalTooSmallError(RuntimeError):
    """The terminal cannot hold the board and its score line."""

    def __init__(
        self, required_width: int, required_height: int, width: int, height: int
    ) -> None:
        super().__init__(
            f"Terminal window must be at least {required_width} by "
            f"{required_height} characters in size! Yours is {width} by {height}."
        )
        self.required_width = required_width
        self.required_height = required_height
        self.width = width
        self.height = height


def _put(stdscr: Any, y: int, x: int, text: str, attr: int = 0) -> None:
    try:
        stdscr.addstr(y, x, text, attr)
    except curses.error:
        # Writes outside the window are dropped, as curses reports them.
        pass


def check_terminal_size(stdscr: Any, width: int, height: int) -> Tuple[int, int]:
    """Return the terminal's (lines, columns), raising if the board won't fit."""
    lines, cols = stdscr.getmaxyx()
    required_height = height + 2
    required_width = width
    if lines < required_height or cols < required_width:
        raise TerminalTooSmallError(required_width, required_height, cols, lines)
    return lines, cols


def initialize_window(stdscr: Any, width: int, height: int) -> None:
    """Set up input mode, the cursor and colour pairs for a board of this size."""
    curses.halfdelay(1)
    stdscr.keypad(True)
    check_terminal_size(stdscr, width, height)
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    stdscr.refresh()

    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(COLOR_BASE, curses.COLOR_BLACK, -1)
    curses.init_pair(COLOR_SNAKE, curses.COLOR_YELLOW, -1)
    curses.init_pair(COLOR_WALL, curses.COLOR_BLUE, -1)
    curses.init_pair(COLOR_FOOD, curses.COLOR_RED, -1)
    curses.init_pair(COLOR_TEXT, curses.COLOR_WHITE, -1)
    curses.init_pair(COLOR_SNAKE, curses.COLOR_GREEN, curses.COLOR_GREEN)


def render_game(stdscr: Any, board: Board, score: int) -> None:
    """Draw every cell of ``board`` and the score line above it."""
    for index, cell in enumerate(board.cells):
        row, col = divmod(index, board.width)
        y, x = row + BOARD_OFFSET_Y, col + BOARD_OFFSET_X
        if cell & Cell.SNAKE:
            _put(stdscr, y, x, BLOCK, curses.color_pair(COLOR_SNAKE))
        elif cell & Cell.FOOD:
            _put(stdscr, y, x, "O", curses.color_pair(COLOR_FOOD))
        elif cell & Cell.WALL:
            _put(stdscr, y, x, BLOCK, curses.color_pair(COLOR_WALL))
        else:
            _put(stdscr, y, x, " ")
    _put(stdscr, BOARD_OFFSET_Y - 1, BOARD_OFFSET_X, f"SCORE: {score}")
    stdscr.refresh()


def render_game_over(stdscr: Any, width: int, height: int, state: GameState) -> None:
    """Draw the game-over screen with the player's name and score."""
    y_center = height // 2
    x_center = width // 2

    def write(y: int, x: int, text: str) -> None:
        _put(stdscr, y + GAME_OVER_OFFSET_Y, x + GAME_OVER_OFFSET_X, text)

    write(y_center - 4, x_center - 4, "GAME OVER")
    write(y_center - 2, x_center - state.name_len // 2, state.name)
    digits = math.ceil(math.log10(state.score)) if state.score else 1
    write(y_center - 1, x_center - (7 + digits) // 2, f"SCORE: {state.score}")
    write(y_center + 2, x_center - 10, "PRESS ANY KEY TO EXIT")
    stdscr.refresh()