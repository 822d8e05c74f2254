"""Play view for human-vs-human and human-vs-computer games."""

from functools import partial
from textual.app import ComposeResult
from textual.containers import Container
from textual.widgets import Static, Input, Footer, Header
from textual.screen import Screen
from textual.timer import Timer
from rich.text import Text
from typing import Optional, List, Tuple

from ..game import GoGame, MoveOutcome, Rejected, Stone, format_move, parse_move
from ..session import GameSession
from .board_widget import BoardWidget


class GameInfo(Static):
    """Panel showing game information."""

    DEFAULT_CSS = """
    GameInfo {
        width: 100%;
        height: auto;
        padding: 1;
        background: #1a1a2e;
        border: solid #4a4a6a;
    }
    """

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.current_player = Stone.BLACK
        self.move_count = 0
        self.captured_black = 0
        self.captured_white = 0
        self.capture_limit = 10
        self.mode_label = ""

    def update_info(self, session: GameSession):
        """Update game information."""
        game = session.game
        self.current_player = game.current_player
        self.move_count = len(game.move_history)
        self.captured_black = game.captured_black
        self.captured_white = game.captured_white
        self.capture_limit = game.capture_limit
        if session.vs_computer:
            self.mode_label = f"vs computer ({session.difficulty.value})"
        else:
            self.mode_label = "two players"
        self.refresh()

    def render(self) -> Text:
        """Render game info."""
        player_symbol = "● Black" if self.current_player == Stone.BLACK else "○ White"
        player_color = "white" if self.current_player == Stone.BLACK else "cyan"

        lines = [
            Text("To play: ", style="dim") + Text(player_symbol, style=player_color),
            Text(f"Move: {self.move_count}", style="dim"),
            Text(f"Captured by Black: {self.captured_white}/{self.capture_limit}", style="white"),
            Text(f"Captured by White: {self.captured_black}/{self.capture_limit}", style="cyan"),
            Text(f"Mode: {self.mode_label}", style="yellow"),
        ]

        return Text("\n").join(lines)


class MoveHistory(Static):
    """Panel showing move history."""

    DEFAULT_CSS = """
    MoveHistory {
        width: 100%;
        height: 100%;
        padding: 1;
        background: #1a1a2e;
        border: solid #4a4a6a;
        overflow-y: auto;
    }
    """

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.moves: List[Tuple[int, str, Stone, int]] = []

    def set_game(self, game: GoGame):
        """Rebuild history from the game's committed moves."""
        self.moves = [
            (i + 1, format_move(x, y, game.board_size), color, 0)
            for i, (x, y, color) in enumerate(game.move_history)
        ]
        if self.moves and game.last_captures:
            num, move_str, color, _ = self.moves[-1]
            self.moves[-1] = (num, move_str, color, len(game.last_captures))
        self.refresh()

    def render(self) -> Text:
        """Render move history."""
        if not self.moves:
            return Text("No moves yet", style="dim")

        lines = []
        for move_num, move_str, player, captured in self.moves[-30:]:
            color = "white" if player == Stone.BLACK else "cyan"
            symbol = "●" if player == Stone.BLACK else "○"
            suffix = f" (x{captured})" if captured else ""
            lines.append(Text(f"{move_num:3}. {symbol} {move_str}{suffix}", style=color))

        return Text("\n").join(lines)


class PlayView(Screen):
    """Screen for playing a game."""

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("n", "new_game", "New Game"),
        ("m", "toggle_mode", "Toggle Mode"),
        ("escape", "menu", "Menu"),
    ]

    CSS = """
    PlayView {
        layout: grid;
        grid-size: 2 2;
        grid-columns: 2fr 1fr;
        grid-rows: 3fr 1fr;
    }

    #board-container {
        row-span: 2;
        padding: 1;
    }

    #info-container {
        padding: 1;
    }

    #input-container {
        padding: 1;
        height: auto;
    }

    #move-input {
        width: 100%;
    }

    .title {
        text-style: bold;
        color: cyan;
        padding-bottom: 1;
    }

    #message {
        color: yellow;
        padding: 1;
    }
    """

    def __init__(self, session: GameSession, **kwargs):
        super().__init__(**kwargs)
        self.session = session
        self._opponent_timer: Optional[Timer] = None

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        yield Header()

        with Container(id="board-container"):
            yield Static("Go Board", classes="title")
            yield BoardWidget(id="board")

        with Container(id="info-container"):
            yield Static("Game Info", classes="title")
            yield GameInfo(id="info")
            yield Static("Move History", classes="title")
            yield MoveHistory(id="history")

        with Container(id="input-container"):
            yield Static("Enter move (e.g., D4):", classes="title")
            yield Input(placeholder="Your move...", id="move-input")
            yield Static("", id="message")

        yield Footer()

    def on_mount(self) -> None:
        self._update_display()

    def _update_display(self):
        """Update all display widgets."""
        game = self.session.game
        self.query_one("#board", BoardWidget).set_game(game)
        self.query_one("#info", GameInfo).update_info(self.session)
        self.query_one("#history", MoveHistory).set_game(game)

    def _set_message(self, message: str):
        self.query_one("#message", Static).update(message)

    def _cancel_opponent(self):
        if self._opponent_timer is not None:
            self._opponent_timer.stop()
            self._opponent_timer = None

    def _schedule_opponent(self):
        """Let the screen repaint, then ask the computer for its move."""
        if not self.session.opponent_pending():
            return
        self._cancel_opponent()
        token = self.session.schedule_token()
        self._set_message("Computer is thinking...")
        self._opponent_timer = self.set_timer(
            self.session.config.opponent_delay,
            partial(self._opponent_move, token),
        )

    def _opponent_move(self, token: int):
        self._opponent_timer = None
        outcome = self.session.run_opponent(token)
        if outcome is None:
            return
        self._show_outcome(outcome, "Computer")

    def _show_outcome(self, outcome: MoveOutcome, who: str):
        game = self.session.game
        if isinstance(outcome, Rejected):
            self._set_message(f"Illegal move: {outcome.reason.message}")
            self.notify(outcome.reason.message, severity="warning")
            return

        self._update_display()
        x, y, _ = game.move_history[-1]
        message = f"{who} played {format_move(x, y, game.board_size)}"
        if outcome.captured:
            message += f", capturing {len(outcome.captured)}"
        if outcome.game_over:
            winner = "Black" if outcome.winner == Stone.BLACK else "White"
            message = f"Game Over: {winner} wins by capturing {game.capture_limit} stones! Press N for a new game."
        self._set_message(message)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle move input."""
        game = self.session.game
        move_str = event.value.strip()
        event.input.value = ""

        if game.game_over:
            self._set_message("Game is over. Press N for new game.")
            return

        if self.session.opponent_pending():
            self._set_message("Wait for the computer to move.")
            return

        point = parse_move(move_str, game.board_size)
        if point is None:
            self._set_message(f"Invalid move format: {move_str}")
            return

        outcome = self.session.play(*point)
        self._show_outcome(outcome, "You" if self.session.vs_computer else "Player")
        if outcome.ok:
            self._schedule_opponent()

    def action_new_game(self):
        """Start a new game."""
        self._cancel_opponent()
        self.session.reset()
        self._update_display()
        self._set_message("")

    def action_toggle_mode(self):
        """Switch between two players and playing the computer."""
        self._cancel_opponent()
        self.session.set_mode("human" if self.session.vs_computer else "computer")
        self._update_display()
        self._set_message(f"Mode: {self.query_one('#info', GameInfo).mode_label}")
        self._schedule_opponent()

    def action_menu(self):
        self._cancel_opponent()
        self.app.pop_screen()

    def action_quit(self):
        """Quit the game."""
        self._cancel_opponent()
        self.app.exit()
