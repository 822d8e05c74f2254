"""Computer opponents of increasing strength."""

import logging
import numpy as np
from enum import Enum
from typing import List, Optional, Union

from .game import GoGame, Point

logger = logging.getLogger(__name__)


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class RandomPlayer:
    """Picks any empty cell, legal or not."""

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng()

    def _choose(self, candidates: List[Point]) -> Optional[Point]:
        if not candidates:
            return None
        x, y = candidates[self.rng.integers(len(candidates))]
        return (x, y)

    def select_move(self, game: GoGame) -> Optional[Point]:
        """Select a random empty cell, or None if the board is full."""
        return self._choose(game.empty_cells())


class DefensivePlayer(RandomPlayer):
    """Plays legal moves and rescues its own groups in atari."""

    def _rescue_moves(self, game: GoGame, legal: List[Point]) -> List[Point]:
        color = game.current_player
        atari_liberties = set()
        for group in game.groups():
            x, y = next(iter(group))
            if game.stone_at(x, y) != color:
                continue
            liberties = game.get_liberties(group)
            if len(liberties) == 1:
                atari_liberties |= liberties

        rescues = []
        for x, y in legal:
            if (x, y) not in atari_liberties:
                continue
            # Only count it as a rescue if the extended group ends up with
            # more than one liberty.
            trial = game.copy()
            trial.attempt_move(x, y, color)
            if trial.liberty_count(trial.get_group(x, y, color)) > 1:
                rescues.append((x, y))
        return rescues

    def select_move(self, game: GoGame) -> Optional[Point]:
        legal = game.legal_moves()
        rescues = self._rescue_moves(game, legal)
        if rescues:
            logger.debug("Defensive candidates: %s", rescues)
            return self._choose(rescues)
        return self._choose(legal)


class GreedyPlayer(DefensivePlayer):
    """Captures as many stones as possible, otherwise plays defensively."""

    def select_move(self, game: GoGame) -> Optional[Point]:
        legal = game.legal_moves()
        best_count = 0
        best_moves: List[Point] = []
        for x, y in legal:
            count = game.would_capture(x, y)
            if count > best_count:
                best_count = count
                best_moves = [(x, y)]
            elif count == best_count and count > 0:
                best_moves.append((x, y))

        if best_moves:
            logger.debug("Greedy capture of %d stone(s) available: %s", best_count, best_moves)
            return self._choose(best_moves)
        return super().select_move(game)


_PLAYERS = {
    Difficulty.EASY: RandomPlayer,
    Difficulty.MEDIUM: DefensivePlayer,
    Difficulty.HARD: GreedyPlayer,
}


def create_opponent(
    difficulty: Union[Difficulty, str],
    rng: Optional[np.random.Generator] = None,
) -> RandomPlayer:
    """Build the move selector for a difficulty level."""
    try:
        difficulty = Difficulty(difficulty)
    except ValueError:
        raise ValueError(
            f"Unknown difficulty {difficulty!r}; expected one of "
            f"{', '.join(d.value for d in Difficulty)}"
        ) from None
    return _PLAYERS[difficulty](rng=rng)
