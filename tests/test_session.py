import pytest

from capture_go.config import GameConfig
from capture_go.game import Rejected, RejectReason, Stone
from capture_go.session import GameSession


def computer_session(**kwargs):
    return GameSession(GameConfig(board_size=9, mode="computer", seed=5, **kwargs))


def test_two_player_session_alternates_colors():
    session = GameSession(GameConfig(board_size=9))
    assert session.play(4, 4).ok
    assert session.game.stone_at(4, 4) == Stone.BLACK
    assert session.play(3, 3).ok
    assert session.game.stone_at(3, 3) == Stone.WHITE
    assert not session.opponent_pending()


def test_computer_replies_after_human_move():
    session = computer_session()
    assert not session.opponent_pending()
    session.play(4, 4)
    assert session.opponent_pending()

    token = session.schedule_token()
    outcome = session.run_opponent(token)
    assert outcome is not None and outcome.ok
    assert session.game.current_player == Stone.BLACK
    assert len(session.game.move_history) == 2
    assert session.game.move_history[-1][2] == Stone.WHITE


def test_human_cannot_move_for_computer():
    session = computer_session()
    session.play(4, 4)
    assert session.play(3, 3) == Rejected(RejectReason.WRONG_TURN)


def test_reset_cancels_pending_computer_move():
    session = computer_session()
    session.play(4, 4)
    token = session.schedule_token()
    session.reset()

    assert session.run_opponent(token) is None
    assert not session.game.board.any()
    assert session.game.current_player == Stone.BLACK


def test_reset_then_new_move_still_ignores_old_token():
    session = computer_session()
    session.play(4, 4)
    stale = session.schedule_token()
    session.reset()
    session.play(0, 0)

    assert session.run_opponent(stale) is None
    assert len(session.game.move_history) == 1
    assert session.run_opponent(session.schedule_token()).ok


def test_mode_change_cancels_pending_computer_move():
    session = computer_session()
    session.play(4, 4)
    token = session.schedule_token()
    session.set_mode("human")

    assert session.run_opponent(token) is None
    assert session.game.current_player == Stone.WHITE
    assert session.play(3, 3).ok


def test_switching_to_computer_mid_game():
    session = GameSession(GameConfig(board_size=9, seed=1))
    session.play(4, 4)
    session.set_mode("computer")
    assert session.opponent_pending()
    assert session.run_opponent(session.schedule_token()).ok


def test_run_opponent_when_not_pending():
    session = computer_session()
    assert session.run_opponent(session.schedule_token()) is None
    assert not session.game.board.any()


def test_set_mode_rejects_unknown():
    with pytest.raises(ValueError):
        computer_session().set_mode("network")


def test_set_difficulty_swaps_opponent():
    session = computer_session()
    token = session.schedule_token()
    session.set_difficulty("hard")
    assert session.difficulty.value == "hard"
    assert type(session.opponent).__name__ == "GreedyPlayer"
    assert session.schedule_token() != token


class StubbornOpponent:
    """Always suggests an occupied cell."""

    def __init__(self):
        self.calls = 0

    def select_move(self, game):
        self.calls += 1
        return (4, 4)


def test_illegal_suggestions_fall_back_to_legal_move():
    session = computer_session()
    session.play(4, 4)
    stub = StubbornOpponent()
    session.opponent = stub

    outcome = session.run_opponent(session.schedule_token())
    assert outcome.ok
    assert stub.calls > 1
    assert session.game.current_player == Stone.BLACK


def test_computer_game_runs_to_completion():
    session = GameSession(GameConfig(
        board_size=5, capture_limit=3, mode="computer", difficulty="hard", seed=3,
    ))
    for _ in range(500):
        if session.game.game_over:
            break
        if session.opponent_pending():
            session.run_opponent(session.schedule_token())
            continue
        legal = session.game.legal_moves()
        if not legal:
            break
        session.play(*legal[0])

    game = session.game
    if game.game_over:
        assert game.winner in (Stone.BLACK, Stone.WHITE)
        assert max(game.captured_black, game.captured_white) >= 3
