import numpy as np
import pytest

from zengo.core import Stone, create_board_state, play_move
from zengo.features import calculate_influence, classify_territory, influence_delta, influence_kernel


def test_kernel_weights_by_manhattan_distance():
    kernel = influence_kernel((6, 4, 2, 1))
    assert kernel.shape == (7, 7)
    assert kernel[3, 3] == 6
    assert kernel[3, 4] == 4
    assert kernel[4, 4] == 2
    assert kernel[3, 6] == 1
    assert kernel[0, 0] == 0
    assert kernel[1, 5] == 0  # distance 4


def test_single_black_stone_in_centre():
    state = play_move(create_board_state(9), 4, 4).state
    influence = calculate_influence(state)

    assert influence[4, 4] == 6
    assert influence[4, 5] == 4
    assert influence[5, 5] == 2
    assert influence[4, 7] == 1
    assert influence[4, 8] == 0
    assert influence.sum() == 6 + 4 * 4 + 2 * 8 + 1 * 12


def test_white_stone_is_negative_and_clipped_at_edge():
    board = np.zeros((9, 9), dtype=np.int8)
    board[0, 0] = Stone.WHITE
    influence = calculate_influence(board)

    assert influence[0, 0] == -6
    assert influence[0, 1] == -4
    assert influence[1, 1] == -2
    assert influence[0, 3] == -1
    assert influence.sum() == -(6 + 4 * 2 + 2 * 3 + 1 * 4)


def test_contributions_accumulate():
    board = np.zeros((5, 5), dtype=np.int8)
    board[2, 1] = Stone.BLACK
    board[2, 3] = Stone.BLACK
    influence = calculate_influence(board)
    assert influence[2, 2] == 8


def test_opposing_stones_cancel():
    board = np.zeros((5, 5), dtype=np.int8)
    board[2, 1] = Stone.BLACK
    board[2, 3] = Stone.WHITE
    influence = calculate_influence(board)
    assert influence[2, 2] == 0
    assert influence[2, 1] == 6 - 2


def test_empty_board_has_no_influence():
    assert not calculate_influence(create_board_state(19)).any()


def test_custom_weights():
    board = np.zeros((5, 5), dtype=np.int8)
    board[2, 2] = Stone.BLACK
    influence = calculate_influence(board, weights=(3, 1))
    assert influence[2, 2] == 3
    assert influence[2, 3] == 1
    assert influence[3, 3] == 0


def test_tiny_board_larger_kernel():
    board = np.array([[Stone.BLACK]], dtype=np.int8)
    assert calculate_influence(board).tolist() == [[6]]


def test_influence_delta_shows_new_stone():
    before = play_move(create_board_state(9), 2, 2).state
    after = play_move(before, 6, 6).state
    delta = influence_delta(before, after)

    assert delta[6, 6] == -6
    assert delta[2, 2] == 0


def test_influence_delta_rejects_mismatched_boards():
    with pytest.raises(ValueError):
        influence_delta(create_board_state(9), create_board_state(13))


def test_classify_territory_threshold():
    influence = np.array([[3, 2, -2, -3]])
    assert classify_territory(influence, 2).tolist() == [[1, 0, 0, -1]]
