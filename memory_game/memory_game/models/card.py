"""Card and CardPolicy models."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from enum import Enum
from typing import MutableSequence, TypeVar

T = TypeVar("T")


class CardOrientation(str, Enum):
    """Which side of the card is showing."""

    FACE_UP = "face_up"
    FACE_DOWN = "face_down"


class CardPolicy(ABC):
    """Authority a card consults before every flip.

    A card asks its policy whether a flip is allowed, and tells the policy
    after the flip has happened. Alternative game rules are alternative
    implementations of this class.
    """

    @abstractmethod
    def can_face_up(self, card: Card) -> bool:
        """Check whether the card may be turned face up."""

    @abstractmethod
    def can_face_down(self, card: Card) -> bool:
        """Check whether the card may be turned face down."""

    @abstractmethod
    def on_face_up(self, card: Card) -> None:
        """Called after the card has been turned face up."""

    @abstractmethod
    def on_face_down(self, card: Card) -> None:
        """Called after the card has been turned face down."""


class Card:
    """Single card in the deck.

    Cards compare by identity: two cards carrying the same value are still
    different members of the deck.
    """

    def __init__(self, policy: CardPolicy, value: int):
        """Initialize card.

        Args:
            policy: Policy consulted on every flip.
            value: Match group this card belongs to.
        """
        self._policy = policy
        self._value = value
        self._orientation = CardOrientation.FACE_DOWN

    @property
    def value(self) -> int:
        """Match group value."""
        return self._value

    @property
    def orientation(self) -> CardOrientation:
        """Current orientation."""
        return self._orientation

    @property
    def is_face_up(self) -> bool:
        """Check if the card is showing its value."""
        return self._orientation == CardOrientation.FACE_UP

    def can_face_up(self) -> bool:
        """Check if the card is face down and the policy allows turning it up."""
        return (
            self._orientation == CardOrientation.FACE_DOWN
            and self._policy.can_face_up(self)
        )

    def can_face_down(self) -> bool:
        """Check if the card is face up and the policy allows turning it down."""
        return (
            self._orientation == CardOrientation.FACE_UP
            and self._policy.can_face_down(self)
        )

    def face_up(self) -> None:
        """Turn the card face up. Does nothing if the flip is not allowed."""
        if not self.can_face_up():
            return
        # Policy must see the new orientation when it reacts
        self._orientation = CardOrientation.FACE_UP
        self._policy.on_face_up(self)

    def face_down(self) -> None:
        """Turn the card face down. Does nothing if the flip is not allowed."""
        if not self.can_face_down():
            return
        self._orientation = CardOrientation.FACE_DOWN
        self._policy.on_face_down(self)

    def __str__(self) -> str:
        if self.is_face_up:
            return f"[{self._value}]"
        return "[?]"

    def __repr__(self) -> str:
        return f"Card(value={self._value}, orientation={self._orientation.name})"


def create_deck(policy: CardPolicy, card_count: int, match_size: int) -> list[Card]:
    """Create an unshuffled deck.

    Values run from 1 to ``card_count // match_size``, each shared by
    ``match_size`` consecutive cards.

    Args:
        policy: Policy every card is bound to.
        card_count: Total number of cards.
        match_size: Cards per matched group.

    Returns:
        List of face-down cards, sorted by value.
    """
    group_count = card_count // match_size
    return [
        Card(policy, value)
        for value in range(1, group_count + 1)
        for _ in range(match_size)
    ]


def shuffle_cards(
    items: MutableSequence[T], rng: random.Random | None = None
) -> None:
    """Shuffle a sequence in place.

    Each position ``i`` up to the second to last is swapped with a uniformly
    chosen position in ``[i, len(items))``.

    Args:
        items: Sequence to shuffle.
        rng: Random source. Uses the module-level generator if None.
    """
    rand = rng or random
    for i in range(len(items) - 1):
        j = rand.randrange(i, len(items))
        items[i], items[j] = items[j], items[i]
