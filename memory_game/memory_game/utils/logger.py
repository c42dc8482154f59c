"""Logging utilities and game table display."""

import logging
import sys
from typing import TYPE_CHECKING

from memory_game.logging.formatters import format_row
from memory_game.models.game_state import GameState

if TYPE_CHECKING:
    from memory_game.game.session import GameSession


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


class GameDisplay:
    """Display the card table to stdout."""

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def print_table(self, session: "GameSession") -> None:
        """Print the table with row and column numbers."""
        columns = session.config.columns
        header = " ".join(f"{c + 1:^4}" for c in range(columns))
        print(f"     {header}")
        for r, row in enumerate(session.rows):
            hidden = [session.is_hidden(card) for card in row]
            print(f"{r + 1:>3}  {format_row(row, hidden)}")

    def dashboard_text(self, session: "GameSession") -> str:
        """Score line shown under the table."""
        if session.game.state == GameState.VICTORY:
            return "Victory!"
        return f"Score: {session.score}"

    def print_dashboard(self, session: "GameSession") -> None:
        """Print the score line."""
        print(self.dashboard_text(session))

    def print_game_start(self, session: "GameSession") -> None:
        """Print game start message."""
        self.print_separator()
        config = session.config
        print(
            f"MEMORY {config.rows}x{config.columns} "
            f"(match {config.match_size})"
        )
        self.print_separator()

    def print_mismatch(self) -> None:
        """Print mismatch message."""
        print("No match.")

    def print_not_allowed(self) -> None:
        """Print message for a card that cannot be turned."""
        print("That card cannot be turned right now.")
