import numpy as np
import pytest

from capture_go.game import GoGame, Stone
from capture_go.opponent import (
    DefensivePlayer,
    Difficulty,
    GreedyPlayer,
    RandomPlayer,
    create_opponent,
)

from conftest import make_game, snapshot, assert_unchanged


def rng():
    return np.random.default_rng(1234)


def test_random_player_picks_empty_cell():
    game = make_game(black=[(0, 0), (1, 1)], white=[(2, 2)])
    player = RandomPlayer(rng=rng())
    for _ in range(20):
        x, y = player.select_move(game)
        assert game.stone_at(x, y) == Stone.EMPTY


def test_random_player_full_board():
    game = GoGame(board_size=3)
    game.board[:, :] = Stone.BLACK
    assert RandomPlayer(rng=rng()).select_move(game) is None


def test_defensive_player_never_suggests_suicide():
    game = make_game(white=[(1, 2), (3, 2), (2, 1), (2, 3)])
    player = DefensivePlayer(rng=rng())
    for _ in range(30):
        assert player.select_move(game) != (2, 2)


def test_defensive_player_rescues_group_in_atari():
    # White stone at (2,2) has a single liberty at (2,3).
    game = make_game(black=[(1, 2), (3, 2), (2, 1)], white=[(2, 2)], to_move=Stone.WHITE)
    player = DefensivePlayer(rng=rng())
    before = snapshot(game)
    assert player.select_move(game) == (2, 3)
    assert_unchanged(game, before)


def test_defensive_player_skips_useless_extension():
    # Extending (0,0) to (0,1) would still leave a single liberty.
    game = make_game(
        black=[(1, 0), (1, 1)],
        white=[(0, 0)],
        to_move=Stone.WHITE,
    )
    player = DefensivePlayer(rng=rng())
    assert player._rescue_moves(game, game.legal_moves()) == []


def test_greedy_player_takes_largest_capture():
    game = make_game(
        size=7,
        # Single white stone at (1,1) in atari at (1,2)
        # Two white stones (4,4),(5,4) in atari at (6,4)
        black=[(0, 1), (2, 1), (1, 0), (4, 3), (5, 3), (4, 5), (5, 5), (3, 4)],
        white=[(1, 1), (4, 4), (5, 4)],
    )
    player = GreedyPlayer(rng=rng())
    assert game.would_capture(1, 2) == 1
    assert game.would_capture(6, 4) == 2
    assert player.select_move(game) == (6, 4)


def test_greedy_player_falls_back_to_legal_move():
    game = make_game(white=[(1, 2), (3, 2), (2, 1), (2, 3)])
    point = GreedyPlayer(rng=rng()).select_move(game)
    assert point is not None
    assert game.is_legal(*point)


@pytest.mark.parametrize("difficulty, cls", [
    ("easy", RandomPlayer),
    ("medium", DefensivePlayer),
    (Difficulty.HARD, GreedyPlayer),
])
def test_create_opponent(difficulty, cls):
    assert type(create_opponent(difficulty)) is cls


def test_create_opponent_unknown():
    with pytest.raises(ValueError, match="Unknown difficulty"):
        create_opponent("impossible")
