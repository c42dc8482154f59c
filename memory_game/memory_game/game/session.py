"""Game session: the current game plus front-end bookkeeping."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from memory_game.config import GameConfig
from memory_game.models.card import Card
from memory_game.models.game_state import GameState

from .engine import Game

logger = logging.getLogger(__name__)


@dataclass
class SelectionResult:
    """Outcome of selecting a card."""

    flipped: bool
    state: GameState
    mismatch: bool = False  # Caller should schedule reset_choices()
    completed_group: bool = False  # Caller may schedule hide_matched()


class GameSession:
    """Holds one game at a time and interprets card selections.

    The session runs no timers. A selection result tells the caller what to
    schedule; the caller calls back into reset_choices() or hide_matched()
    when its own pause has elapsed.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: random.Random | None = None,
    ):
        """Initialize session and deal the first game.

        Args:
            config: Game configuration (uses defaults if not provided)
            rng: Random source for shuffling

        Raises:
            InvalidConfigurationError: If the table size does not fit the match size.
        """
        self.config = config or GameConfig()
        self._rng = rng
        self._hidden: set[Card] = set()
        self._game = self.new_game()

    @property
    def game(self) -> Game:
        """The current game."""
        return self._game

    def new_game(self) -> Game:
        """Discard the current game and deal a new one."""
        self._game = Game(self.config.card_count, self.config.match_size, self._rng)
        self._hidden = set()
        logger.info(
            f"Dealt {self.config.rows}x{self.config.columns} table, "
            f"groups of {self.config.match_size}"
        )
        return self._game

    @property
    def rows(self) -> list[list[Card]]:
        """The deck laid out row by row."""
        cards = self._game.cards
        columns = self.config.columns
        return [
            cards[row * columns:(row + 1) * columns]
            for row in range(self.config.rows)
        ]

    @property
    def score(self) -> int:
        """Number of matched cards."""
        return len(self._game.matched_cards)

    def select(self, index: int) -> SelectionResult:
        """Try to turn the card at a deck position face up.

        Args:
            index: 0-based position in the deck.

        Returns:
            SelectionResult describing what the caller should do next.

        Raises:
            IndexError: If the index is outside the deck.
        """
        cards = self._game.cards
        if not 0 <= index < len(cards):
            raise IndexError(f"No card at position {index}")
        card = cards[index]

        if not card.can_face_up():
            return SelectionResult(flipped=False, state=self._game.state)

        before = self._game.state
        card.face_up()
        after = self._game.state

        if after != before and after == GameState.MISMATCH:
            return SelectionResult(flipped=True, state=after, mismatch=True)
        return SelectionResult(
            flipped=True,
            state=after,
            completed_group=not self._game.active_cards,
        )

    def reset_choices(self) -> None:
        """Turn the current choices back down."""
        self._game.reset_choices()

    def hide_matched(self) -> None:
        """Hide every matched card, if remove_on_match is enabled."""
        if not self.config.remove_on_match:
            return
        for card in self._game.matched_cards:
            self._hidden.add(card)

    def is_hidden(self, card: Card) -> bool:
        """Check whether the front end should stop drawing a card."""
        return self.config.remove_on_match and card in self._hidden
