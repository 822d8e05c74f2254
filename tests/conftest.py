import pytest

from capture_go.game import GoGame, Stone


def make_game(size=5, black=(), white=(), to_move=Stone.BLACK, capture_limit=10):
    """Build a game with stones placed directly on the board."""
    game = GoGame(board_size=size, capture_limit=capture_limit)
    for x, y in black:
        game.board[y, x] = Stone.BLACK
    for x, y in white:
        game.board[y, x] = Stone.WHITE
    game.current_player = to_move
    return game


def snapshot(game):
    return (
        game.board.copy(),
        game.previous_board.copy(),
        game.current_player,
        game.captured_black,
        game.captured_white,
        game.game_over,
        game.winner,
        len(game.move_history),
    )


def assert_unchanged(game, before):
    after = snapshot(game)
    assert (after[0] == before[0]).all()
    assert (after[1] == before[1]).all()
    assert after[2:] == before[2:]


@pytest.fixture
def game():
    return GoGame(board_size=9)
