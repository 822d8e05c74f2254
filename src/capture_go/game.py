"""Capture Go engine: placement, captures, suicide and Ko rules."""

import logging
import numpy as np
from dataclasses import dataclass, field
from typing import Optional, Set, Tuple, List, Union
from enum import Enum, IntEnum

logger = logging.getLogger(__name__)

Point = Tuple[int, int]

DEFAULT_BOARD_SIZE = 19
DEFAULT_CAPTURE_LIMIT = 10
COLUMN_LETTERS = "ABCDEFGHJKLMNOPQRSTUVWXYZ"
MAX_BOARD_SIZE = len(COLUMN_LETTERS)


class Stone(IntEnum):
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    @property
    def opponent(self) -> "Stone":
        if self == Stone.BLACK:
            return Stone.WHITE
        elif self == Stone.WHITE:
            return Stone.BLACK
        return Stone.EMPTY


class RejectReason(Enum):
    """Why a move was refused."""
    OUT_OF_BOUNDS = "out_of_bounds"
    OCCUPIED = "occupied"
    WRONG_TURN = "wrong_turn"
    KO_VIOLATION = "ko_violation"
    SUICIDE = "suicide"
    GAME_OVER = "game_over"

    @property
    def message(self) -> str:
        return _REJECT_MESSAGES[self]


_REJECT_MESSAGES = {
    RejectReason.OUT_OF_BOUNDS: "Position is off the board",
    RejectReason.OCCUPIED: "Position is already occupied",
    RejectReason.WRONG_TURN: "It is not that color's turn",
    RejectReason.KO_VIOLATION: "Ko rule: the move would repeat the previous position",
    RejectReason.SUICIDE: "Suicide move not allowed",
    RejectReason.GAME_OVER: "The game is over",
}


@dataclass(frozen=True)
class Committed:
    """A move that was applied to the board."""
    captured: List[Point]
    next_player: Stone
    game_over: bool = False
    winner: Optional[Stone] = None

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    """A move that was refused; the game state is untouched."""
    reason: RejectReason

    @property
    def ok(self) -> bool:
        return False


MoveOutcome = Union[Committed, Rejected]


@dataclass
class GoGame:
    """Board state and rules for a capture-count game of Go.

    The board is indexed ``board[y, x]``. ``captured_black`` counts black
    stones taken by White and ``captured_white`` counts white stones taken by
    Black; whoever takes ``capture_limit`` stones wins.
    """
    board_size: int = DEFAULT_BOARD_SIZE
    capture_limit: int = DEFAULT_CAPTURE_LIMIT
    board: np.ndarray = field(default=None)
    current_player: Stone = Stone.BLACK
    captured_black: int = 0
    captured_white: int = 0
    previous_board: np.ndarray = field(default=None)
    game_over: bool = False
    winner: Optional[Stone] = None
    move_history: List[Tuple[int, int, Stone]] = field(default_factory=list)
    last_captures: List[Point] = field(default_factory=list)

    def __post_init__(self):
        if not 2 <= self.board_size <= MAX_BOARD_SIZE:
            raise ValueError(f"Board size must be between 2 and {MAX_BOARD_SIZE}, got {self.board_size}")
        if self.capture_limit < 1:
            raise ValueError(f"Capture limit must be positive, got {self.capture_limit}")
        if self.board is None:
            self.board = np.zeros((self.board_size, self.board_size), dtype=np.int8)
        if self.previous_board is None:
            self.previous_board = np.zeros_like(self.board)

    def reset(self):
        """Return to the initial position with Black to move."""
        self.board = np.zeros((self.board_size, self.board_size), dtype=np.int8)
        self.previous_board = np.zeros_like(self.board)
        self.current_player = Stone.BLACK
        self.captured_black = 0
        self.captured_white = 0
        self.game_over = False
        self.winner = None
        self.move_history = []
        self.last_captures = []
        logger.debug("Game reset (%dx%d)", self.board_size, self.board_size)

    def copy(self) -> "GoGame":
        """Create a deep copy of the game state."""
        return GoGame(
            board_size=self.board_size,
            capture_limit=self.capture_limit,
            board=self.board.copy(),
            current_player=self.current_player,
            captured_black=self.captured_black,
            captured_white=self.captured_white,
            previous_board=self.previous_board.copy(),
            game_over=self.game_over,
            winner=self.winner,
            move_history=self.move_history.copy(),
            last_captures=self.last_captures.copy(),
        )

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.board_size and 0 <= y < self.board_size

    def stone_at(self, x: int, y: int) -> Stone:
        return Stone(self.board[y, x])

    def _get_neighbors(self, x: int, y: int) -> List[Point]:
        """Get valid neighboring positions."""
        neighbors = []
        for dx, dy in [(-1, 0), (1, 0), (0, -1), (0, 1)]:
            nx, ny = x + dx, y + dy
            if 0 <= nx < self.board_size and 0 <= ny < self.board_size:
                neighbors.append((nx, ny))
        return neighbors

    def get_group(self, x: int, y: int, color: Stone) -> Set[Point]:
        """Get the connected group of ``color`` containing (x, y).

        Uses an explicit stack so large groups never hit the recursion
        limit. Returns an empty set if the cell is off the board or does not
        hold ``color``.
        """
        if not self.in_bounds(x, y) or color == Stone.EMPTY or self.board[y, x] != color:
            return set()

        group = set()
        stack = [(x, y)]

        while stack:
            cx, cy = stack.pop()
            if (cx, cy) in group:
                continue
            group.add((cx, cy))

            for nx, ny in self._get_neighbors(cx, cy):
                if self.board[ny, nx] == color and (nx, ny) not in group:
                    stack.append((nx, ny))

        return group

    def get_liberties(self, group: Set[Point]) -> Set[Point]:
        """Empty cells orthogonally adjacent to any stone of the group."""
        liberties = set()
        for x, y in group:
            for nx, ny in self._get_neighbors(x, y):
                if self.board[ny, nx] == Stone.EMPTY:
                    liberties.add((nx, ny))
        return liberties

    def liberty_count(self, group: Set[Point]) -> int:
        return len(self.get_liberties(group))

    def groups(self) -> List[Set[Point]]:
        """All groups currently on the board."""
        seen: Set[Point] = set()
        result = []
        for y in range(self.board_size):
            for x in range(self.board_size):
                stone = self.board[y, x]
                if stone == Stone.EMPTY or (x, y) in seen:
                    continue
                group = self.get_group(x, y, Stone(stone))
                seen |= group
                result.append(group)
        return result

    def empty_cells(self) -> List[Point]:
        ys, xs = np.nonzero(self.board == Stone.EMPTY)
        return [(int(x), int(y)) for x, y in zip(xs, ys)]

    def _remove_group(self, group: Set[Point]) -> int:
        """Remove a group from the board, return number of stones removed."""
        for x, y in group:
            self.board[y, x] = Stone.EMPTY
        return len(group)

    def _check_preconditions(self, x: int, y: int, color: Stone) -> Optional[RejectReason]:
        if self.game_over:
            return RejectReason.GAME_OVER
        if color != self.current_player:
            return RejectReason.WRONG_TURN
        if not self.in_bounds(x, y):
            return RejectReason.OUT_OF_BOUNDS
        if self.board[y, x] != Stone.EMPTY:
            return RejectReason.OCCUPIED
        return None

    def _apply(self, x: int, y: int, color: Stone) -> Tuple[Optional[RejectReason], List[Point]]:
        """Place a stone and resolve captures on the live board.

        The caller owns rollback: on a rejection the board is left in the
        provisional state and must be restored from a snapshot.
        """
        self.board[y, x] = color

        # Capture opponent stones
        captured: List[Point] = []
        opponent = color.opponent
        for nx, ny in self._get_neighbors(x, y):
            if self.board[ny, nx] != opponent:
                continue
            group = self.get_group(nx, ny, opponent)
            if not self.get_liberties(group):
                self._remove_group(group)
                captured.extend(sorted(group))

        # Suicide is judged after captures, which may free liberties
        if not self.get_liberties(self.get_group(x, y, color)):
            return RejectReason.SUICIDE, captured

        if np.array_equal(self.board, self.previous_board):
            return RejectReason.KO_VIOLATION, captured

        return None, captured

    def attempt_move(self, x: int, y: int, color: Stone) -> MoveOutcome:
        """Try to play ``color`` at (x, y).

        Illegal moves return ``Rejected`` and leave every field exactly as it
        was; legal moves are committed and return ``Committed``.
        """
        reason = self._check_preconditions(x, y, color)
        if reason is not None:
            logger.debug("Rejected %s at (%d, %d): %s", color.name, x, y, reason.value)
            return Rejected(reason)

        before = self.board.copy()
        reason, captured = self._apply(x, y, color)
        if reason is not None:
            self.board = before
            logger.debug("Rejected %s at (%d, %d): %s", color.name, x, y, reason.value)
            return Rejected(reason)

        self.previous_board = before
        if color == Stone.BLACK:
            self.captured_white += len(captured)
        else:
            self.captured_black += len(captured)
        self.move_history.append((x, y, color))
        self.last_captures = captured
        self.current_player = color.opponent

        if captured:
            logger.debug("%s at (%d, %d) captured %d stone(s)", color.name, x, y, len(captured))
        else:
            logger.debug("%s played (%d, %d)", color.name, x, y)

        self._check_winner()
        return Committed(
            captured=captured,
            next_player=self.current_player,
            game_over=self.game_over,
            winner=self.winner,
        )

    def _check_winner(self):
        if self.captured_black >= self.capture_limit:
            self.winner = Stone.WHITE
        elif self.captured_white >= self.capture_limit:
            self.winner = Stone.BLACK
        else:
            return
        self.game_over = True
        logger.info(
            "%s wins by capture (black lost %d, white lost %d)",
            self.winner.name.capitalize(), self.captured_black, self.captured_white,
        )

    def is_legal(self, x: int, y: int, color: Optional[Stone] = None) -> bool:
        """Check whether ``attempt_move`` would commit, without playing."""
        return self._dry_run(x, y, color)[0] is None

    def would_capture(self, x: int, y: int, color: Optional[Stone] = None) -> int:
        """Number of stones a move would capture; 0 if the move is illegal."""
        reason, captured = self._dry_run(x, y, color)
        return 0 if reason is not None else len(captured)

    def _dry_run(self, x: int, y: int, color: Optional[Stone]) -> Tuple[Optional[RejectReason], List[Point]]:
        if color is None:
            color = self.current_player
        reason = self._check_preconditions(x, y, color)
        if reason is not None:
            return reason, []
        before = self.board.copy()
        try:
            return self._apply(x, y, color)
        finally:
            self.board = before

    def legal_moves(self, color: Optional[Stone] = None) -> List[Point]:
        """Get all legal moves for ``color`` (default: the player to move)."""
        return [(x, y) for x, y in self.empty_cells() if self.is_legal(x, y, color)]

    def __str__(self) -> str:
        """String representation of the board."""
        symbols = {Stone.EMPTY: ".", Stone.BLACK: "●", Stone.WHITE: "○"}
        cols = "   " + " ".join(column_label(x) for x in range(self.board_size))
        rows = []
        for y in range(self.board_size - 1, -1, -1):
            row = f"{y+1:2} "
            row += " ".join(symbols[Stone(self.board[y, x])] for x in range(self.board_size))
            rows.append(row)
        return cols + "\n" + "\n".join(rows)


def column_label(x: int) -> str:
    """Column letter for x, skipping 'I'."""
    return COLUMN_LETTERS[x]


def parse_move(move_str: str, board_size: int) -> Optional[Point]:
    """Parse a move string like 'D4' into (x, y)."""
    move_str = move_str.strip().upper()
    if len(move_str) < 2:
        return None

    col = move_str[0]
    x = COLUMN_LETTERS.find(col)
    if x < 0:
        return None

    try:
        y = int(move_str[1:]) - 1
    except ValueError:
        return None

    if 0 <= x < board_size and 0 <= y < board_size:
        return (x, y)
    return None


def format_move(x: int, y: int, board_size: int) -> str:
    """Format a point as a string like 'D4'."""
    if not (0 <= x < board_size and 0 <= y < board_size):
        raise ValueError(f"Point ({x}, {y}) is off a {board_size}x{board_size} board")
    return f"{column_label(x)}{y + 1}"
