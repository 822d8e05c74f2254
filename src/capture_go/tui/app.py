"""Main Textual application for Capture Go."""

from textual.app import App, ComposeResult
from textual.containers import Container, Horizontal
from textual.widgets import Static, Button, Select, Header, Footer
from textual.screen import Screen
from typing import Optional

from ..config import GameConfig
from ..opponent import Difficulty
from ..session import GameSession
from .play_view import PlayView


class MenuScreen(Screen):
    """Main menu: pick a mode and difficulty."""

    CSS = """
    MenuScreen {
        align: center middle;
    }

    #menu-container {
        width: 60;
        height: auto;
        padding: 2;
        background: #1a1a2e;
        border: solid #4a4a6a;
    }

    #title {
        text-align: center;
        text-style: bold;
        color: cyan;
        padding-bottom: 2;
    }

    #subtitle {
        text-align: center;
        color: #888888;
        padding-bottom: 2;
    }

    Button {
        width: 100%;
        margin: 1 0;
    }

    .section-title {
        text-style: bold;
        color: yellow;
        padding-top: 1;
    }

    .config-row {
        height: 3;
        margin: 1 0;
    }

    .config-label {
        width: 20;
    }

    Select {
        width: 30;
    }
    """

    def __init__(self, config: GameConfig, **kwargs):
        super().__init__(**kwargs)
        self.config = config

    def compose(self) -> ComposeResult:
        """Create menu widgets."""
        yield Header()

        with Container(id="menu-container"):
            yield Static("Capture Go", id="title")
            yield Static(
                f"First to capture {self.config.capture_limit} stones wins",
                id="subtitle",
            )

            yield Static("Play", classes="section-title")
            yield Button("Two Players", id="btn-human", variant="primary")
            yield Button("Play vs Computer", id="btn-computer", variant="success")

            with Horizontal(classes="config-row"):
                yield Static("Difficulty:", classes="config-label")
                yield Select(
                    [(d.value.capitalize(), d.value) for d in Difficulty],
                    value=self.config.difficulty,
                    allow_blank=False,
                    id="difficulty",
                )

            yield Static("", classes="section-title")
            yield Button("Quit", id="btn-quit", variant="error")

        yield Footer()

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id == "difficulty":
            self.config.difficulty = event.value
            self.notify(f"Computer set to {event.value} difficulty.")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == "btn-human":
            self.config.mode = "human"
            self.app.push_screen(PlayView(GameSession(self.config)))

        elif event.button.id == "btn-computer":
            self.config.mode = "computer"
            self.app.push_screen(PlayView(GameSession(self.config)))

        elif event.button.id == "btn-quit":
            self.app.exit()


class CaptureGoApp(App):
    """Main application."""

    TITLE = "Capture Go"
    CSS = """
    Screen {
        background: #0f0f1a;
    }
    """

    def __init__(self, config: Optional[GameConfig] = None, start_game: bool = False, **kwargs):
        super().__init__(**kwargs)
        self.config = config or GameConfig()
        self.start_game = start_game

    def on_mount(self) -> None:
        """Show main menu on start, optionally jumping straight into a game."""
        self.push_screen(MenuScreen(self.config))
        if self.start_game:
            self.push_screen(PlayView(GameSession(self.config)))
