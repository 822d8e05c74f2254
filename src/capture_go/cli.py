"""Command-line interface for Capture Go."""

import logging
import click
from pathlib import Path
from typing import Optional

from .config import GameConfig, MODES
from .game import GoGame, Stone
from .opponent import Difficulty, create_opponent

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
DIFFICULTIES = [d.value for d in Difficulty]


def setup_logging(level: str, log_file: Optional[str] = None, console: bool = True):
    """Configure the root logger.

    The TUI owns the terminal, so it passes ``console=False`` and logs only
    go to ``log_file`` (or nowhere).
    """
    handlers = []
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    elif console:
        handlers.append(logging.StreamHandler())
    else:
        handlers.append(logging.NullHandler())
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
        force=True,
    )


def _load_config(config_path: Optional[str]) -> GameConfig:
    if config_path is None:
        return GameConfig()
    try:
        return GameConfig.load(Path(config_path))
    except (ValueError, TypeError) as e:
        raise click.BadParameter(str(e), param_hint="--config")


@click.group()
@click.option("--log-level", default="WARNING", type=click.Choice(LOG_LEVELS, case_sensitive=False))
@click.option("--log-file", default=None, help="Write logs to this file")
@click.pass_context
def main(ctx, log_level, log_file):
    """Capture Go - first to capture enough stones wins."""
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = log_level
    ctx.obj["log_file"] = log_file


@main.command()
@click.option("--config", "config_path", default=None, type=click.Path(exists=True), help="Config JSON file")
@click.option("--board-size", "-b", default=None, type=int, help="Board size (default 19)")
@click.option("--mode", "-m", default=None, type=click.Choice(MODES), help="Opponent: human or computer")
@click.option("--difficulty", "-d", default=None, type=click.Choice(DIFFICULTIES))
@click.pass_context
def play(ctx, config_path, board_size, mode, difficulty):
    """Launch the interactive TUI."""
    from .tui.app import CaptureGoApp

    setup_logging(ctx.obj["log_level"], ctx.obj["log_file"], console=False)

    config = _load_config(config_path)
    if board_size is not None:
        config.board_size = board_size
    if mode is not None:
        config.mode = mode
    if difficulty is not None:
        config.difficulty = difficulty
    try:
        config.validate()
    except ValueError as e:
        raise click.BadParameter(str(e))

    app = CaptureGoApp(config=config, start_game=mode is not None)
    app.run()


@main.command()
@click.option("--games", "-g", default=10, type=int, help="Number of games to play")
@click.option("--board-size", "-b", default=9, type=int, help="Board size")
@click.option("--capture-limit", default=10, type=int, help="Captures needed to win")
@click.option("--black", default="hard", type=click.Choice(DIFFICULTIES), help="Black's difficulty")
@click.option("--white", default="easy", type=click.Choice(DIFFICULTIES), help="White's difficulty")
@click.option("--max-moves", default=None, type=int, help="Stop a game after this many attempts")
@click.option("--seed", default=None, type=int, help="Random seed")
@click.option("--show-board", is_flag=True, help="Print the final position of each game")
@click.pass_context
def simulate(ctx, games, board_size, capture_limit, black, white, max_moves, seed, show_board):
    """Play computer-vs-computer games headlessly and report the results."""
    import numpy as np

    setup_logging(ctx.obj["log_level"], ctx.obj["log_file"])

    try:
        GoGame(board_size=board_size, capture_limit=capture_limit)
    except ValueError as e:
        raise click.BadParameter(str(e))

    rng = np.random.default_rng(seed)
    players = {
        Stone.BLACK: create_opponent(black, rng=rng),
        Stone.WHITE: create_opponent(white, rng=rng),
    }
    if max_moves is None:
        max_moves = board_size * board_size * 3  # Prevent endless games

    wins = {Stone.BLACK: 0, Stone.WHITE: 0, None: 0}

    for game_num in range(games):
        game = GoGame(board_size=board_size, capture_limit=capture_limit)
        attempts = 0
        while not game.game_over and attempts < max_moves:
            attempts += 1
            color = game.current_player
            point = players[color].select_move(game)
            if point is None:
                break
            game.attempt_move(point[0], point[1], color)

        wins[game.winner] += 1
        result = f"{game.winner.name.capitalize()} wins" if game.winner else "No winner"
        click.echo(
            f"Game {game_num + 1}/{games}: {result} "
            f"(captured B/W: {game.captured_white}/{game.captured_black}, moves: {len(game.move_history)})"
        )
        if show_board:
            click.echo(str(game))

    click.echo(f"\nResults over {games} games:")
    click.echo(f"  Black ({black}): {wins[Stone.BLACK]}")
    click.echo(f"  White ({white}): {wins[Stone.WHITE]}")
    click.echo(f"  Unfinished: {wins[None]}")


@main.command("config")
@click.option("--output", "-o", default="capture_go.json", help="Where to write the config")
def write_config(output):
    """Write a default configuration file."""
    GameConfig().save(Path(output))
    click.echo(f"Wrote default config to {output}")


if __name__ == "__main__":
    main()
