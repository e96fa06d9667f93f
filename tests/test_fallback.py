import numpy as np

from zengo.core import (
    BoardState,
    Coordinate,
    Stone,
    create_board_state,
    get_random_valid_move,
    is_legal_move,
    resign,
)


def test_random_move_on_empty_board_is_legal():
    state = create_board_state(19)
    move = get_random_valid_move(state, np.random.default_rng(0))
    assert move is not None
    assert is_legal_move(state, move.x, move.y)


def test_scan_returns_first_legal_cell_in_row_major_order():
    board = np.full((5, 5), Stone.BLACK, dtype=np.int8)
    board[2, 3] = Stone.EMPTY
    board[4, 4] = Stone.EMPTY
    state = BoardState(board=board, current_player=Stone.BLACK)

    move = get_random_valid_move(state, np.random.default_rng(1), attempts=0)
    assert move == Coordinate(3, 2)


def test_crowded_board_still_finds_move():
    board = np.full((9, 9), Stone.BLACK, dtype=np.int8)
    board[8, 7] = Stone.EMPTY
    board[8, 8] = Stone.EMPTY
    state = BoardState(board=board, current_player=Stone.WHITE)

    move = get_random_valid_move(state, np.random.default_rng(5))
    assert move in {Coordinate(7, 8), Coordinate(8, 8)}


def test_no_legal_move_returns_none():
    # Every empty point is a single-point eye of white; black cannot play.
    board = np.full((3, 3), Stone.WHITE, dtype=np.int8)
    board[0, 0] = Stone.EMPTY
    board[2, 2] = Stone.EMPTY
    state = BoardState(board=board, current_player=Stone.BLACK)

    assert get_random_valid_move(state, np.random.default_rng(2)) is None


def test_game_over_returns_none():
    state = resign(create_board_state(9))
    assert get_random_valid_move(state, np.random.default_rng(3)) is None


def test_same_seed_same_move():
    state = create_board_state(9)
    first = get_random_valid_move(state, np.random.default_rng(42))
    second = get_random_valid_move(state, np.random.default_rng(42))
    assert first == second
