"""Game models."""

from .card import Card, CardOrientation, CardPolicy, create_deck, shuffle_cards
from .game_state import GameState

__all__ = [
    "Card",
    "CardOrientation",
    "CardPolicy",
    "GameState",
    "create_deck",
    "shuffle_cards",
]
