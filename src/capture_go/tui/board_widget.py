"""Go board widget for Textual TUI."""

from textual.widget import Widget
from textual.reactive import reactive
from rich.text import Text
from rich.style import Style
from rich.console import RenderableType
from typing import Optional, Tuple, List

from ..game import GoGame, Stone, column_label


class BoardWidget(Widget):
    """Widget displaying a Go board with proper grid lines."""

    DEFAULT_CSS = """
    BoardWidget {
        width: auto;
        height: auto;
        padding: 1;
        background: #1a1a2e;
        border: solid #4a4a6a;
    }
    """

    show_coordinates: reactive[bool] = reactive(True)
    highlight_captures: reactive[bool] = reactive(True)

    BLACK_STONE = "⬤"
    WHITE_STONE = "◯"
    CAPTURED = "×"

    # Grid intersection characters
    GRID_TL = "┌"  # Top-left
    GRID_TR = "┐"  # Top-right
    GRID_BL = "└"  # Bottom-left
    GRID_BR = "┘"  # Bottom-right
    GRID_T = "┬"   # Top edge
    GRID_B = "┴"   # Bottom edge
    GRID_L = "├"   # Left edge
    GRID_R = "┤"   # Right edge
    GRID_C = "┼"   # Center
    GRID_H = "─"   # Horizontal line
    STAR = "●"     # Star point (hoshi)

    STAR_POINTS_9 = [(2, 2), (6, 2), (2, 6), (6, 6), (4, 4)]
    STAR_POINTS_13 = [(3, 3), (9, 3), (3, 9), (9, 9), (6, 6), (3, 6), (9, 6), (6, 3), (6, 9)]
    STAR_POINTS_19 = [(3, 3), (9, 3), (15, 3), (3, 9), (9, 9), (15, 9), (3, 15), (9, 15), (15, 15)]

    def __init__(self, game: Optional[GoGame] = None, **kwargs):
        super().__init__(**kwargs)
        self._game: Optional[GoGame] = game

    def get_star_points(self, board_size: int) -> List[Tuple[int, int]]:
        """Get star point positions for board size."""
        if board_size == 9:
            return self.STAR_POINTS_9
        elif board_size == 13:
            return self.STAR_POINTS_13
        elif board_size == 19:
            return self.STAR_POINTS_19
        return []

    def _get_grid_char(self, x: int, y: int, board_size: int) -> str:
        """Get the grid character for an empty intersection."""
        is_top = (y == board_size - 1)
        is_bottom = (y == 0)
        is_left = (x == 0)
        is_right = (x == board_size - 1)

        if is_top and is_left:
            return self.GRID_TL
        elif is_top and is_right:
            return self.GRID_TR
        elif is_bottom and is_left:
            return self.GRID_BL
        elif is_bottom and is_right:
            return self.GRID_BR
        elif is_top:
            return self.GRID_T
        elif is_bottom:
            return self.GRID_B
        elif is_left:
            return self.GRID_L
        elif is_right:
            return self.GRID_R
        else:
            return self.GRID_C

    def _last_move(self) -> Optional[Tuple[int, int]]:
        if self._game is None or not self._game.move_history:
            return None
        x, y, _ = self._game.move_history[-1]
        return (x, y)

    def render(self) -> RenderableType:
        """Render the board with grid lines."""
        if self._game is None:
            return Text("No game loaded")

        board_size = self._game.board_size
        star_points = self.get_star_points(board_size)
        last_move = self._last_move()
        captures = set(self._game.last_captures) if self.highlight_captures else set()

        lines = []

        # Column labels
        if self.show_coordinates:
            cols = "   " + "─".join(column_label(x) for x in range(board_size))
            lines.append(Text(cols, style="dim cyan"))

        # Board rows (top to bottom = high y to low y)
        for y in range(board_size - 1, -1, -1):
            row_text = Text()

            if self.show_coordinates:
                row_text.append(f"{y+1:2} ", style="dim cyan")

            for x in range(board_size):
                stone = self._game.board[y, x]
                char, style = self._get_cell_display(
                    x, y, board_size, stone,
                    is_last=(last_move == (x, y)),
                    is_star=(x, y) in star_points,
                    is_captured=(x, y) in captures,
                )
                row_text.append(char, style=style)

                # Add horizontal connector between cells (except last column)
                if x < board_size - 1:
                    if stone == Stone.EMPTY and self._game.board[y, x + 1] == Stone.EMPTY:
                        row_text.append(self.GRID_H, style=Style(color="#5a5a7a"))
                    else:
                        row_text.append(" ", style=Style(color="#5a5a7a"))

            lines.append(row_text)

        cap_text = Text()
        cap_text.append("Captured: ", style="dim")
        cap_text.append(f"⬤ {self._game.captured_white}", style="white")
        cap_text.append("  ", style="dim")
        cap_text.append(f"◯ {self._game.captured_black}", style="cyan")
        lines.append(Text(""))
        lines.append(cap_text)

        return Text("\n").join(lines)

    def _get_cell_display(
        self,
        x: int,
        y: int,
        board_size: int,
        stone: Stone,
        is_last: bool,
        is_star: bool,
        is_captured: bool,
    ) -> Tuple[str, Style]:
        """Get character and style for a cell."""
        if stone == Stone.BLACK:
            if is_last:
                return self.BLACK_STONE, Style(color="bright_green", bold=True)
            return self.BLACK_STONE, Style(color="white")

        if stone == Stone.WHITE:
            if is_last:
                return self.WHITE_STONE, Style(color="bright_green", bold=True)
            return self.WHITE_STONE, Style(color="cyan")

        if is_captured:
            return self.CAPTURED, Style(color="bright_red", bold=True)
        if is_star:
            return self.STAR, Style(color="#7a7a9a")

        grid_char = self._get_grid_char(x, y, board_size)
        return grid_char, Style(color="#5a5a7a")

    def set_game(self, game: GoGame):
        """Update the displayed game."""
        self._game = game
        self.refresh()
