"""Game logger for detailed game replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, TextIO

from memory_game.config import GameLogConfig
from memory_game.game.engine import Game
from memory_game.models.card import Card
from memory_game.models.game_state import GameState

from .formatters import format_values


class GameLogger:
    """Logger for game events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    Card events are picked up from the game's change notifier once the
    logger is attached.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None
        self._game: Game | None = None
        self._unsubscribe: Callable[[], None] | None = None
        self._flip_count = 0

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Detach from the game and close the log file."""
        self.detach()
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def attach(self, game: Game) -> None:
        """Log the start of a game and follow its card changes.

        Args:
            game: Freshly dealt game. Any previously attached game is detached.
        """
        self.detach()
        self._game = game
        self._flip_count = 0
        self._unsubscribe = game.changes.subscribe(self._on_change)
        self._write({
            "type": "game_start",
            "timestamp": datetime.now().isoformat(),
            "card_count": game.card_count,
            "match_size": game.match_size,
            "deck": format_values(game.cards),
        })

    def detach(self) -> None:
        """Stop following the attached game."""
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None
        self._game = None

    def _on_change(self, card: Card) -> None:
        game = self._game
        if game is None:
            return
        if card.is_face_up:
            self._flip_count += 1
        state = game.state
        self._write({
            "type": "flip",
            "index": game.cards.index(card),
            "value": card.value,
            "orientation": card.orientation.value,
            "state": state.value,
            "active": len(game.active_cards),
            "matched": len(game.matched_cards),
        })
        if state == GameState.VICTORY and card.is_face_up:
            self._write({
                "type": "victory",
                "timestamp": datetime.now().isoformat(),
                "flips": self._flip_count,
            })

    def log_reset(self, game: Game, cards: list[Card]) -> None:
        """Log a reset of mismatched choices.

        Call before reset_choices() so the record precedes the face-down
        flips it causes.

        Args:
            game: Game about to be reset.
            cards: Cards that are about to be turned down.
        """
        all_cards = game.cards
        self._write({
            "type": "reset",
            "indices": [all_cards.index(c) for c in cards],
            "values": format_values(cards),
        })
