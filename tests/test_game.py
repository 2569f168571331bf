import io

import pytest

from syslab.board import initialize_game
from syslab.common import Board, Cell, InputKey, set_seed
from syslab.game import GameState, place_food

_CHAR_TO_CELL = {".": Cell.PLAIN, "S": Cell.SNAKE, "X": Cell.WALL, "O": Cell.FOOD}

_KEYS = {
    "U": InputKey.UP,
    "D": InputKey.DOWN,
    "L": InputKey.LEFT,
    "R": InputKey.RIGHT,
    "N": InputKey.NONE,
}


def _board(width, rows):
    cells = [_CHAR_TO_CELL[ch] for row in rows for ch in row]
    return Board(width, len(rows), cells)


def _run_trace(board, state, inputs, growing=False):
    for ch in inputs:
        state.update(board, _KEYS[ch], growing)
    return board


def test_move_right_into_open_cell():
    board = _board(5, ["XXXXX", "XS..X", "XXXXX"])
    state = GameState()
    state.update(board, InputKey.RIGHT, False)
    assert board.to_string() == "XXXXX" + "X.S.X" + "XXXXX"
    assert state.game_over is False
    assert state.score == 0


def test_none_keeps_default_direction_right():
    board = _board(5, ["XXXXX", "XS..X", "XXXXX"])
    state = GameState()
    state.update(board, InputKey.NONE, False)
    assert board.to_string() == "XXXXX" + "X.S.X" + "XXXXX"


def test_none_repeats_last_direction():
    board = _board(3, ["XXX", "X.X", "X.X", "XSX", "XXX"])
    state = GameState()
    _run_trace(board, state, "UN")
    assert board.to_string() == "XXX" + "XSX" + "X.X" + "X.X" + "XXX"
    assert state.last_direction is InputKey.UP
    assert state.game_over is False


def test_running_into_wall_ends_game_without_moving():
    board = _board(4, ["XXXX", "XS.X", "XXXX"])
    state = GameState()
    state.update(board, InputKey.LEFT, False)
    assert state.game_over is True
    assert board.to_string() == "XXXX" + "XS.X" + "XXXX"


def test_eating_food_scores_and_places_new_food():
    board = _board(5, ["XSO.X"])
    state = GameState()
    state.update(board, InputKey.RIGHT, False)
    assert state.score == 1
    assert board.to_string() == "X.SOX"


@pytest.mark.parametrize(
    "start, key, end",
    [
        (5, InputKey.RIGHT, 3),
        (3, InputKey.LEFT, 5),
        (1, InputKey.UP, 7),
        (7, InputKey.DOWN, 1),
        (4, InputKey.RIGHT, 5),
        (4, InputKey.DOWN, 7),
    ],
)
def test_moves_wrap_around_open_board(start, key, end):
    cells = [Cell.PLAIN] * 9
    cells[start] = Cell.SNAKE
    board = Board(3, 3, cells)
    state = GameState()
    state.update(board, key, False)
    assert board.cells.index(Cell.SNAKE) == end
    assert board.cells.count(Cell.SNAKE) == 1
    assert state.game_over is False


def test_wrapping_onto_wall_does_not_end_game():
    board = _board(3, ["X.S"])
    state = GameState()
    state.update(board, InputKey.RIGHT, False)
    assert state.game_over is False
    assert board.to_string() == "S.."


def test_board_without_snake_is_left_alone():
    board = _board(3, ["X.X"])
    state = GameState()
    state.update(board, InputKey.LEFT, False)
    assert board.to_string() == "X.X"
    assert state.game_over is False


def test_growing_does_not_lengthen_snake():
    board = _board(5, ["XSO.X"])
    state = GameState()
    state.update(board, InputKey.RIGHT, True)
    assert board.cells.count(Cell.SNAKE) == 1
    assert state.score == 1


def test_default_board_up_twice_hits_top_wall():
    set_seed(7)
    board = initialize_game(None)
    state = GameState()
    _run_trace(board, state, "UU")
    assert state.game_over is True
    assert board.cells[22] == Cell.SNAKE


def test_default_board_left_twice_hits_left_wall():
    set_seed(3)
    board = initialize_game(None)
    state = GameState()
    _run_trace(board, state, "LL")
    assert state.game_over is True
    assert board.cells[41] == Cell.SNAKE


@pytest.mark.parametrize("seed", [0, 1, 2, 42, 1234])
def test_square_trace_keeps_one_snake_and_one_food(seed):
    set_seed(seed)
    board = initialize_game(None)
    state = GameState()
    _run_trace(board, state, "RRRRDDDDLLLLUUUU")
    assert state.game_over is False
    assert board.cells[42] == Cell.SNAKE
    assert board.cells.count(Cell.SNAKE) == 1
    assert board.cells.count(Cell.FOOD) == 1
    assert board.cells.count(Cell.WALL) == 56
    assert 0 <= state.score <= 16


def test_place_food_uses_only_plain_cell():
    board = _board(4, ["XS.X"])
    index = place_food(board)
    assert index == 2
    assert board.to_string() == "XSOX"


def test_place_food_without_room_raises():
    board = _board(3, ["XSX"])
    with pytest.raises(ValueError):
        place_food(board)


def test_read_name_retries_on_empty_line():
    state = GameState()
    out = io.StringIO()
    name = state.read_name(io.StringIO("\nAlice\n"), out)
    assert name == "Alice"
    assert state.name == "Alice"
    assert state.name_len == 5
    assert out.getvalue() == (
        "Name > Name Invalid: must be longer than 0 characters.\nName > 5"
    )


def test_read_name_counts_code_points():
    state = GameState()
    out = io.StringIO()
    state.read_name(io.StringIO("h\u00e9llo \u4e16\u754c\n"), out)
    assert state.name == "h\u00e9llo \u4e16\u754c"
    assert state.name_len == 8
    assert out.getvalue().endswith("8")


def test_read_name_without_trailing_newline():
    state = GameState()
    assert state.read_name(io.StringIO("Bob"), io.StringIO()) == "Bob"
    assert state.name_len == 3


def test_read_name_at_end_of_input_raises():
    state = GameState()
    with pytest.raises(EOFError):
        state.read_name(io.StringIO("\n"), io.StringIO())