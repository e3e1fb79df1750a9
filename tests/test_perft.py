"""Tests for perft move-generation counts."""

import pytest
from oware_engine.core import GameStatus, create_board, create_starting_board
from oware_engine.explorer import PerftCounter, divide, perft


def test_perft_shallow():
    board = create_starting_board()

    assert perft(board, 0) == 1
    assert perft(board, 1) == 6
    # Every reply to an opening move is legal: player 1 still has 4+ seeds per pit
    assert perft(board, 2) == 36


def test_perft_cache_matches_uncached():
    board = create_starting_board()

    cached = PerftCounter(use_cache=True)
    uncached = PerftCounter(use_cache=False)

    assert cached.count(board, 4) == uncached.count(board, 4)
    assert uncached.cache_hits == 0
    assert uncached.cache == {}


def test_divide_sums_to_perft():
    board = create_starting_board()

    results = divide(board, 3)

    assert sorted(results) == [0, 1, 2, 3, 4, 5]
    assert sum(results.values()) == perft(board, 3)


def test_perft_finished_game_has_no_children():
    board = create_board(1, [31, 17], [0] * 12, status=GameStatus.PLAYER0_WON)

    assert perft(board, 0) == 1
    assert perft(board, 3) == 0


def test_perft_negative_depth():
    with pytest.raises(ValueError):
        perft(create_starting_board(), -1)


def test_divide_needs_a_root_move():
    with pytest.raises(ValueError):
        divide(create_starting_board(), 0)


@pytest.mark.slow
def test_perft_deeper_cache_consistency():
    board = create_starting_board()
    assert PerftCounter().count(board, 6) == PerftCounter(use_cache=False).count(board, 6)


def test_perft_recomputes_stale_root_moves():
    """A parsed root may list an empty pit; perft uses the real legal moves."""
    board = create_board(0, [0, 0], [0] + [4] * 11, [0])

    assert perft(board, 1) == 5
    assert sorted(divide(board, 1)) == [1, 2, 3, 4, 5]


def test_perft_with_scores_beyond_any_fixed_width():
    """Any valid position can be cached, whatever its scores."""
    board = create_board(0, [64, 0], [4] * 12, [0, 1, 2, 3, 4, 5])

    assert perft(board, 1) == 6
    # Every reply is already won for player 0, so nothing lies two plies down
    assert perft(board, 2) == 0
