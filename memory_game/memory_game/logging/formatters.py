"""Formatters for card output."""

from typing import Iterable

from memory_game.models.card import Card

FACE_DOWN_MARK = "##"
HIDDEN_MARK = "  "


def format_card(card: Card, hidden: bool = False) -> str:
    """Format a single card to a fixed-width cell.

    Args:
        card: Card to format.
        hidden: Draw the card as removed from the table.

    Returns:
        Formatted string (e.g., "[ 3]" face up, "[##]" face down).
    """
    if hidden:
        return f"[{HIDDEN_MARK}]"
    if not card.is_face_up:
        return f"[{FACE_DOWN_MARK}]"
    return f"[{card.value:>2}]"


def format_row(cards: Iterable[Card], hidden: Iterable[bool] | None = None) -> str:
    """Format a row of cards separated by spaces.

    Args:
        cards: Cards in display order.
        hidden: Per-card hidden flags. All cards shown if None.

    Returns:
        Space-separated card cells.
    """
    cards = list(cards)
    flags = list(hidden) if hidden is not None else [False] * len(cards)
    return " ".join(format_card(c, h) for c, h in zip(cards, flags))


def format_values(cards: Iterable[Card]) -> list[int]:
    """List card values regardless of orientation."""
    return [c.value for c in cards]
