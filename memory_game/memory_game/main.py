"""Main entry point for the terminal memory game."""

import argparse
import logging
import random
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import Callable

from pydantic import ValidationError

from memory_game.config import Config, GameLogConfig, load_config
from memory_game.game.engine import InvalidConfigurationError
from memory_game.game.session import GameSession
from memory_game.logging import GameLogger
from memory_game.models.game_state import GameState
from memory_game.utils.logger import GameDisplay, setup_logging

logger = logging.getLogger(__name__)

QUIT_COMMANDS = {"q", "quit", "exit"}


def generate_log_filename(log_dir: str) -> str:
    """Generate log filename with timestamp.

    Format: {ISO timestamp}_memory.jsonl

    Args:
        log_dir: Directory for log files.

    Returns:
        Full path to log file.
    """
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    return str(Path(log_dir) / f"{timestamp}_memory.jsonl")


def parse_selection(text: str, rows: int, columns: int) -> int | None:
    """Parse a card selection typed by the player.

    Accepts a 1-based card number ("7") or a 1-based row and column
    ("2,3" or "2 3").

    Args:
        text: Raw input.
        rows: Number of table rows.
        columns: Number of table columns.

    Returns:
        0-based deck position, or None if the input is not a valid card.
    """
    parts = text.replace(",", " ").split()
    try:
        numbers = [int(p) for p in parts]
    except ValueError:
        return None

    if len(numbers) == 1:
        index = numbers[0] - 1
        return index if 0 <= index < rows * columns else None
    if len(numbers) == 2:
        row, column = numbers[0] - 1, numbers[1] - 1
        if 0 <= row < rows and 0 <= column < columns:
            return row * columns + column
    return None


def play(
    session: GameSession,
    config: Config,
    display: GameDisplay,
    game_logger: GameLogger,
    read: Callable[[str], str] = input,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Play the session's game until victory or quit.

    Args:
        session: Session holding the dealt game.
        config: Configuration (timing and table size).
        display: Output helper.
        game_logger: Event logger, attached to the game here.
        read: Prompt function.
        sleep: Pause function used before resets and hides.

    Returns:
        Exit code (0 for victory or quit)
    """
    game_logger.attach(session.game)
    display.print_game_start(session)

    while session.game.state != GameState.VICTORY:
        display.print_table(session)
        display.print_dashboard(session)

        try:
            text = read("Card> ").strip().lower()
        except EOFError:
            print()
            return 0
        if text in QUIT_COMMANDS:
            return 0

        index = parse_selection(text, config.game.rows, config.game.columns)
        if index is None:
            print(f"Enter a card number (1-{config.game.card_count}) or row,column.")
            continue

        result = session.select(index)
        if not result.flipped:
            display.print_not_allowed()
            continue

        if result.mismatch:
            display.print_table(session)
            display.print_mismatch()
            sleep(config.timing.reset_delay)
            game_logger.log_reset(session.game, session.game.active_cards)
            session.reset_choices()
        elif result.completed_group and config.game.remove_on_match:
            display.print_table(session)
            sleep(config.timing.hide_delay)
            session.hide_matched()

    display.print_table(session)
    display.print_dashboard(session)
    return 0


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    parser = argparse.ArgumentParser(
        description="Memory matching card game"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-r",
        "--rows",
        type=int,
        help="Number of table rows (overrides config)",
    )
    parser.add_argument(
        "-C",
        "--columns",
        type=int,
        help="Number of table columns (overrides config)",
    )
    parser.add_argument(
        "-m",
        "--match-size",
        type=int,
        help="Cards per matched group (overrides config)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for the shuffle",
    )
    parser.add_argument(
        "--remove-on-match",
        action="store_true",
        help="Hide matched groups after a pause",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Directory for game log files (filename auto-generated)",
    )

    args = parser.parse_args()

    # Load config
    config = load_config(args.config)

    # Apply command-line overrides
    try:
        if args.rows is not None:
            config.game.rows = args.rows
        if args.columns is not None:
            config.game.columns = args.columns
        if args.match_size is not None:
            config.game.match_size = args.match_size
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1
    if args.remove_on_match:
        config.game.remove_on_match = True
    if args.verbose:
        config.logging.level = "DEBUG"

    # Determine game log directory (CLI argument overrides config file)
    if args.game_log is not None:
        game_log_config = GameLogConfig(
            enabled=True, output_path=generate_log_filename(str(args.game_log))
        )
    else:
        game_log_config = config.game_log

    setup_logging(config.logging.level)

    rng = random.Random(args.seed) if args.seed is not None else None
    try:
        session = GameSession(config.game, rng)
    except InvalidConfigurationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    display = GameDisplay()
    if game_log_config.enabled:
        print(f"Game log: {game_log_config.output_path}")

    try:
        with GameLogger(game_log_config) as game_logger:
            return play(session, config, display, game_logger)
    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        return 1


if __name__ == "__main__":
    sys.exit(main())
