"""The snake game as a command: argument handling, input and the main loop."""

from __future__ import annotations

import curses
import locale
import re
import sys
import time
from typing import Any, List, Optional, Sequence, Tuple

from syslab.board import BoardInitError, initialize_game
from syslab.common import Board, InputKey
from syslab.game import GameState
from syslab.render import (
    TerminalTooSmallError,
    initialize_window,
    render_game,
    render_game_over,
)

USAGE = "usage: snake <GROWS: 0|1> [BOARD STRING]"
GROWS_ERROR = "snake_grows must be either 1 (grows) or 0 (does not grow)"
STEP_DELAY = 0.1
GAME_OVER_DELAY = 1.0

_KEYS = {
    curses.KEY_UP: InputKey.UP,
    curses.KEY_DOWN: InputKey.DOWN,
    curses.KEY_LEFT: InputKey.LEFT,
    curses.KEY_RIGHT: InputKey.RIGHT,
}

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def get_input(stdscr: Any) -> InputKey:
    """Read one key; anything but an arrow key (or no key at all) is NONE."""
    return _KEYS.get(stdscr.getch(), InputKey.NONE)


def end_game(stdscr: Any, board: Board, state: GameState) -> None:
    """Show the game-over screen, pause, then wait for any key."""
    render_game_over(stdscr, board.width, board.height, state)
    time.sleep(GAME_OVER_DELAY)
    curses.cbreak()
    stdscr.getch()


def run(stdscr: Any, board: Board, state: GameState) -> int:
    """Play until the game is over and return the final score."""
    initialize_window(stdscr, board.width, board.height)
    while not state.game_over:
        time.sleep(STEP_DELAY)
        key = get_input(stdscr)
        state.update(board, key, False)
        render_game(stdscr, board, state.score)
    end_game(stdscr, board, state)
    return state.score


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def parse_args(argv: Sequence[str]) -> Tuple[bool, Optional[str]]:
    """Return (snake grows, board string or None) from the command arguments.

    Raises ``ValueError`` carrying the message to show the user.
    """
    args: List[str] = list(argv)
    if len(args) not in (1, 2):
        raise ValueError(USAGE)
    grows = _atoi(args[0])
    if grows not in (0, 1):
        raise ValueError(GROWS_ERROR)
    board_rep = args[1] if len(args) == 2 and args[1] else None
    return bool(grows), board_rep


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    try:
        _grows, board_rep = parse_args(args)
    except ValueError as exc:
        print(exc)
        return 0

    try:
        board = initialize_game(board_rep)
    except BoardInitError as exc:
        print(f"snake: invalid board: {exc}", file=sys.stderr)
        return 1

    state = GameState()
    try:
        state.read_name()
    except EOFError:
        return 1

    locale.setlocale(locale.LC_ALL, "")
    try:
        curses.wrapper(run, board, state)
    except TerminalTooSmallError as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())