"""Game logic."""

from .engine import Game, InvalidConfigurationError
from .notifier import ChangeNotifier, StateWatcher
from .session import GameSession, SelectionResult

__all__ = [
    "ChangeNotifier",
    "Game",
    "GameSession",
    "InvalidConfigurationError",
    "SelectionResult",
    "StateWatcher",
]
