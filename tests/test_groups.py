import numpy as np
import pytest

from zengo.core import Coordinate, Stone, find_group


def make_board(size: int, black=(), white=()) -> np.ndarray:
    board = np.zeros((size, size), dtype=np.int8)
    for x, y in black:
        board[y, x] = Stone.BLACK
    for x, y in white:
        board[y, x] = Stone.WHITE
    return board


def test_single_stone_in_centre_has_four_liberties():
    board = make_board(5, black=[(2, 2)])
    group = find_group(board, Coordinate(2, 2), Stone.BLACK)
    assert group.stones == (Coordinate(2, 2),)
    assert group.liberties == 4


def test_corner_stone_has_two_liberties():
    board = make_board(5, white=[(0, 0)])
    assert find_group(board, Coordinate(0, 0), Stone.WHITE).liberties == 2


def test_shared_liberties_counted_once():
    # An L shape: (1,1) is adjacent to both (1,0) and (0,1).
    board = make_board(5, black=[(0, 0), (1, 0), (0, 1)])
    group = find_group(board, Coordinate(0, 0), Stone.BLACK)
    assert len(group) == 3
    # (2,0), (1,1), (0,2)
    assert group.liberties == 3


def test_group_stops_at_opponent_and_empty_cells():
    board = make_board(5, black=[(0, 0), (1, 0), (3, 0)], white=[(2, 0)])
    group = find_group(board, Coordinate(0, 0), Stone.BLACK)
    assert set(group.stones) == {Coordinate(0, 0), Coordinate(1, 0)}
    assert Coordinate(3, 0) not in group


def test_diagonal_stones_are_separate_groups():
    board = make_board(5, black=[(1, 1), (2, 2)])
    group = find_group(board, Coordinate(1, 1), Stone.BLACK)
    assert group.stones == (Coordinate(1, 1),)


def test_find_group_is_deterministic():
    rng = np.random.default_rng(3)
    board = rng.integers(0, 3, size=(9, 9)).astype(np.int8)
    board[4, 4] = Stone.BLACK
    first = find_group(board, Coordinate(4, 4), Stone.BLACK)
    second = find_group(board, Coordinate(4, 4), Stone.BLACK)
    assert first == second


def test_wrong_colour_start_raises():
    board = make_board(5, black=[(2, 2)])
    with pytest.raises(ValueError):
        find_group(board, Coordinate(2, 2), Stone.WHITE)
    with pytest.raises(ValueError):
        find_group(board, Coordinate(0, 0), Stone.BLACK)
    with pytest.raises(ValueError):
        find_group(board, Coordinate(5, 0), Stone.BLACK)
