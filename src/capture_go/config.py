"""Game configuration."""

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional

from .game import DEFAULT_BOARD_SIZE, DEFAULT_CAPTURE_LIMIT, MAX_BOARD_SIZE
from .opponent import Difficulty

MODES = ("human", "computer")


@dataclass
class GameConfig:
    """Settings for a game session."""
    board_size: int = DEFAULT_BOARD_SIZE
    capture_limit: int = DEFAULT_CAPTURE_LIMIT
    mode: str = "human"  # "human" or "computer"
    difficulty: str = Difficulty.EASY.value
    opponent_delay: float = 0.5  # Seconds before the computer replies
    seed: Optional[int] = None

    def validate(self) -> "GameConfig":
        """Raise ValueError if any setting is out of range."""
        if not 2 <= self.board_size <= MAX_BOARD_SIZE:
            raise ValueError(f"board_size must be between 2 and {MAX_BOARD_SIZE}")
        if self.capture_limit < 1:
            raise ValueError("capture_limit must be at least 1")
        if self.mode not in MODES:
            raise ValueError(f"mode must be one of {', '.join(MODES)}")
        if self.difficulty not in [d.value for d in Difficulty]:
            raise ValueError(f"difficulty must be one of {', '.join(d.value for d in Difficulty)}")
        if self.opponent_delay < 0:
            raise ValueError("opponent_delay must not be negative")
        return self

    def save(self, path: Path):
        """Save config to JSON."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(asdict(self), f, indent=2)

    @classmethod
    def load(cls, path: Path) -> "GameConfig":
        """Load config from JSON."""
        with open(path) as f:
            return cls(**json.load(f)).validate()
