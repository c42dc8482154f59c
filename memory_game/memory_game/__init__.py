"""Memory matching card game."""

from .game import Game, GameSession, InvalidConfigurationError
from .models import Card, CardOrientation, CardPolicy, GameState

__version__ = "0.1.0"

__all__ = [
    "Card",
    "CardOrientation",
    "CardPolicy",
    "Game",
    "GameSession",
    "GameState",
    "InvalidConfigurationError",
]
