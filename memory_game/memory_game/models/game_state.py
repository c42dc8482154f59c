"""Game state models."""

from enum import Enum


class GameState(str, Enum):
    """Overall game state, derived from the deck on every read."""

    SELECTING = "selecting"  # New cards may be turned face up
    MISMATCH = "mismatch"  # Active cards disagree; waiting for a reset
    VICTORY = "victory"  # Every card is matched

    def __str__(self) -> str:
        return self.name
