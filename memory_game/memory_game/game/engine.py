"""Game engine for the memory game."""

from __future__ import annotations

import logging
import random

from memory_game.models.card import (
    Card,
    CardOrientation,
    CardPolicy,
    create_deck,
    shuffle_cards,
)
from memory_game.models.game_state import GameState

from .notifier import ChangeNotifier

logger = logging.getLogger(__name__)


class InvalidConfigurationError(ValueError):
    """Raised when the card count and match size cannot form a deck."""


class Game(CardPolicy):
    """Standard memory game.

    The game is the policy for every card in its deck. Besides tracking
    active and matched cards it decides whether further cards may be turned
    over. It does not run timers: resetting a mismatch and any animation are
    left to the caller.
    """

    def __init__(
        self,
        card_count: int,
        match_size: int,
        rng: random.Random | None = None,
    ):
        """Initialize game.

        Args:
            card_count: Total number of cards.
            match_size: Number of same-valued cards forming a group.
            rng: Random source for the shuffle (module generator if None).

        Raises:
            InvalidConfigurationError: If match_size is not positive, or
                card_count is negative or not a multiple of match_size.
        """
        if match_size <= 0:
            raise InvalidConfigurationError(
                f"Match size must be positive, got {match_size}"
            )
        if card_count < 0 or card_count % match_size != 0:
            raise InvalidConfigurationError(
                f"The card count ({card_count}) must be a multiple "
                f"of the match size ({match_size})"
            )

        self._card_count = card_count
        self._match_size = match_size
        self._cards = create_deck(self, card_count, match_size)
        self._active_cards: list[Card] = []
        self._in_reset = False
        self._pending_down: list[Card] = []
        self.changes = ChangeNotifier()

        shuffle_cards(self._cards, rng)
        logger.debug(
            f"New game: {card_count} cards in groups of {match_size}"
        )

    @property
    def card_count(self) -> int:
        """Total number of cards."""
        return self._card_count

    @property
    def match_size(self) -> int:
        """Cards per matched group."""
        return self._match_size

    @property
    def cards(self) -> list[Card]:
        """The shuffled deck (a copy)."""
        return list(self._cards)

    @property
    def active_cards(self) -> list[Card]:
        """Face-up cards not yet part of a full matched group (a copy)."""
        return list(self._active_cards)

    @property
    def matched_cards(self) -> list[Card]:
        """Face-up cards locked into full groups, in deck order.

        Matched and active cards never overlap.
        """
        return [
            card
            for card in self._cards
            if card.orientation == CardOrientation.FACE_UP
            and card not in self._active_cards
        ]

    @property
    def state(self) -> GameState:
        """Current state, recomputed from the deck on every access."""
        if len(self.matched_cards) == self._card_count:
            return GameState.VICTORY
        for current, following in zip(self._active_cards, self._active_cards[1:]):
            if current.value != following.value:
                return GameState.MISMATCH
        return GameState.SELECTING

    # CardPolicy

    def can_face_up(self, card: Card) -> bool:
        """Any card may turn up while selecting, none otherwise."""
        return self.state == GameState.SELECTING

    def can_face_down(self, card: Card) -> bool:
        """Only active cards may turn down, and only during a reset."""
        return self._in_reset and card in self._active_cards

    def on_face_up(self, card: Card) -> None:
        """Add the card to the active list, locking in a completed group."""
        self._active_cards.append(card)
        state = self.state
        if (
            state != GameState.MISMATCH
            and len(self._active_cards) == self._match_size
        ):
            logger.debug(f"Matched group of {card.value}")
            self._active_cards = []
            state = self.state

        logger.debug(f"Card {card.value} face up, state={state}")
        if state == GameState.VICTORY:
            logger.info("All cards matched")
        self.changes.publish(card)

    def on_face_down(self, card: Card) -> None:
        """Queue the card for notification once the reset has finished.

        The active list is left alone: this game turns every active card
        down at once in reset_choices.
        """
        self._pending_down.append(card)

    def reset_choices(self) -> None:
        """Turn all active cards face down.

        This is the only way from MISMATCH back to SELECTING. The caller
        decides when to call it.
        """
        choices = list(self._active_cards)
        self._in_reset = True
        try:
            for card in choices:
                card.face_down()
        finally:
            self._in_reset = False
        self._active_cards = []
        logger.debug(f"Reset {len(choices)} active cards")

        # Every turned-down card is published; the first subscriber error is
        # re-raised once all have been sent
        pending, self._pending_down = self._pending_down, []
        error: Exception | None = None
        for card in pending:
            try:
                self.changes.publish(card)
            except Exception as e:
                if error is None:
                    error = e
        if error is not None:
            raise error

    def __repr__(self) -> str:
        return (
            f"Game(card_count={self._card_count}, match_size={self._match_size}, "
            f"state={self.state.name})"
        )
