"""A game session: engine, play mode and the computer's deferred reply."""

import logging
import numpy as np
from typing import Optional

from .config import GameConfig, MODES
from .game import GoGame, MoveOutcome, Rejected, RejectReason, Stone
from .opponent import Difficulty, create_opponent

logger = logging.getLogger(__name__)

COMPUTER_COLOR = Stone.WHITE
HUMAN_COLOR = Stone.BLACK

# Suggestions from the easy opponent may be illegal; after this many
# rejections the session falls back to a random legal move.
MAX_OPPONENT_ATTEMPTS = 10


class GameSession:
    """Owns one game plus the settings the front end can change.

    A computer reply is run in two steps so the front end can repaint in
    between: it grabs ``schedule_token()`` after the human move and later
    calls ``run_opponent(token)``. Any reset or mode change bumps
    ``generation``, so a stale token makes the deferred call a no-op.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = (config or GameConfig()).validate()
        self.game = GoGame(
            board_size=self.config.board_size,
            capture_limit=self.config.capture_limit,
        )
        self.mode = self.config.mode
        self.difficulty = Difficulty(self.config.difficulty)
        self.rng = np.random.default_rng(self.config.seed)
        self.opponent = create_opponent(self.difficulty, rng=self.rng)
        self.generation = 0

    @property
    def vs_computer(self) -> bool:
        return self.mode == "computer"

    def _invalidate(self):
        self.generation += 1

    def reset(self):
        """Start a new game, cancelling any pending computer move."""
        self._invalidate()
        self.game.reset()
        logger.info("New game (mode=%s, difficulty=%s)", self.mode, self.difficulty.value)

    def set_mode(self, mode: str):
        if mode not in MODES:
            raise ValueError(f"mode must be one of {', '.join(MODES)}")
        self._invalidate()
        self.mode = mode
        logger.info("Mode set to %s", mode)

    def set_difficulty(self, difficulty):
        self.opponent = create_opponent(difficulty, rng=self.rng)
        self.difficulty = Difficulty(difficulty)
        self._invalidate()
        logger.info("Difficulty set to %s", self.difficulty.value)

    def play(self, x: int, y: int) -> MoveOutcome:
        """Play a human move at (x, y).

        Against the computer the human always plays Black; otherwise the
        move is made for whichever color is to move.
        """
        color = HUMAN_COLOR if self.vs_computer else self.game.current_player
        return self.game.attempt_move(x, y, color)

    def opponent_pending(self) -> bool:
        """True if the computer should move next."""
        return (
            self.vs_computer
            and not self.game.game_over
            and self.game.current_player == COMPUTER_COLOR
        )

    def schedule_token(self) -> int:
        return self.generation

    def run_opponent(self, token: int) -> Optional[MoveOutcome]:
        """Make the computer's move if ``token`` is still current.

        Returns None when the call was cancelled or the computer has nothing
        to do.
        """
        if token != self.generation or not self.opponent_pending():
            logger.debug("Skipping stale computer move (token=%d, generation=%d)", token, self.generation)
            return None

        outcome: MoveOutcome = Rejected(RejectReason.OCCUPIED)
        for _ in range(MAX_OPPONENT_ATTEMPTS):
            point = self.opponent.select_move(self.game)
            if point is None:
                return None
            outcome = self.game.attempt_move(point[0], point[1], COMPUTER_COLOR)
            if outcome.ok:
                return outcome

        legal = self.game.legal_moves(COMPUTER_COLOR)
        if not legal:
            logger.warning("Computer has no legal move")
            return outcome
        x, y = legal[self.rng.integers(len(legal))]
        return self.game.attempt_move(x, y, COMPUTER_COLOR)
