"""Card change notification."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from memory_game.models.card import Card
from memory_game.models.game_state import GameState

if TYPE_CHECKING:
    from .engine import Game

logger = logging.getLogger(__name__)

CardCallback = Callable[[Card], None]


class ChangeNotifier:
    """Publish/subscribe stream of cards that just changed orientation.

    Callbacks run synchronously, in subscription order, on the thread that
    flipped the card. Exceptions raised by a callback propagate to the caller.
    """

    def __init__(self) -> None:
        self._subscribers: list[CardCallback] = []

    @property
    def subscriber_count(self) -> int:
        """Number of active subscribers."""
        return len(self._subscribers)

    def subscribe(self, callback: CardCallback) -> Callable[[], None]:
        """Register a callback.

        Args:
            callback: Called with each card that changed.

        Returns:
            Function that removes this subscription. Calling it twice is harmless.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def publish(self, card: Card) -> None:
        """Send a card to every subscriber."""
        # Subscribers may unsubscribe while being notified
        for callback in list(self._subscribers):
            callback(card)


class StateWatcher:
    """Turns card changes into de-duplicated game state changes."""

    def __init__(self, game: Game, on_change: Callable[[GameState], None]):
        """Initialize watcher.

        Args:
            game: Game whose changes are watched.
            on_change: Called with the new state whenever it differs from
                the last one seen.
        """
        self._game = game
        self._on_change = on_change
        self._last_state = game.state
        self._unsubscribe: Callable[[], None] | None = game.changes.subscribe(
            self._handle_change
        )

    @property
    def last_state(self) -> GameState:
        """Most recently observed state."""
        return self._last_state

    def _handle_change(self, card: Card) -> None:
        state = self._game.state
        if state == self._last_state:
            return
        logger.debug(f"Game state {self._last_state} -> {state}")
        self._last_state = state
        self._on_change(state)

    def close(self) -> None:
        """Stop watching the game."""
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None
