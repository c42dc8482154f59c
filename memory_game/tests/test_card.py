"""Tests for card models."""

from collections import Counter

import pytest

from memory_game.models.card import (
    Card,
    CardOrientation,
    CardPolicy,
    create_deck,
    shuffle_cards,
)


class RecordingPolicy(CardPolicy):
    """Policy with switchable answers that records callbacks."""

    def __init__(self, allow_up: bool = True, allow_down: bool = True):
        self.allow_up = allow_up
        self.allow_down = allow_down
        self.events: list[tuple[str, CardOrientation]] = []

    def can_face_up(self, card):
        return self.allow_up

    def can_face_down(self, card):
        return self.allow_down

    def on_face_up(self, card):
        self.events.append(("up", card.orientation))

    def on_face_down(self, card):
        self.events.append(("down", card.orientation))


class LastIndexRandom:
    """Random stub that always picks the last index."""

    def __init__(self):
        self.calls: list[tuple[int, int]] = []

    def randrange(self, start, stop):
        self.calls.append((start, stop))
        return stop - 1


@pytest.fixture
def policy():
    return RecordingPolicy()


class TestCard:
    """Tests for Card class."""

    def test_initial_state(self, policy):
        """Test that a new card is face down with its value."""
        card = Card(policy, 3)
        assert card.value == 3
        assert card.orientation == CardOrientation.FACE_DOWN
        assert not card.is_face_up

    def test_face_up(self, policy):
        """Test turning a card face up."""
        card = Card(policy, 1)
        card.face_up()
        assert card.orientation == CardOrientation.FACE_UP
        assert card.is_face_up

    def test_state_changes_before_callback(self, policy):
        """Test that the policy observes the new orientation."""
        card = Card(policy, 1)
        card.face_up()
        card.face_down()
        assert policy.events == [
            ("up", CardOrientation.FACE_UP),
            ("down", CardOrientation.FACE_DOWN),
        ]

    def test_can_face_up_requires_face_down(self, policy):
        """Test that a face-up card cannot be turned up again."""
        card = Card(policy, 1)
        assert card.can_face_up()
        card.face_up()
        assert not card.can_face_up()

    def test_can_face_down_requires_face_up(self, policy):
        """Test that a face-down card cannot be turned down."""
        card = Card(policy, 1)
        assert not card.can_face_down()
        card.face_up()
        assert card.can_face_down()

    def test_denied_face_up_is_noop(self):
        """Test that a refused flip leaves the card alone without raising."""
        policy = RecordingPolicy(allow_up=False)
        card = Card(policy, 1)

        assert not card.can_face_up()
        card.face_up()

        assert card.orientation == CardOrientation.FACE_DOWN
        assert policy.events == []

    def test_denied_face_down_is_noop(self):
        """Test that a refused face-down flip is ignored."""
        policy = RecordingPolicy(allow_down=False)
        card = Card(policy, 1)
        card.face_up()

        card.face_down()

        assert card.orientation == CardOrientation.FACE_UP
        assert policy.events == [("up", CardOrientation.FACE_UP)]

    def test_repeated_face_up_calls_policy_once(self, policy):
        """Test that flipping an already face-up card does nothing."""
        card = Card(policy, 1)
        card.face_up()
        card.face_up()
        assert len(policy.events) == 1

    def test_identity_equality(self, policy):
        """Test that cards with equal values are distinct."""
        card1 = Card(policy, 2)
        card2 = Card(policy, 2)

        assert card1 != card2
        assert card1 in [card1]
        assert card2 not in [card1]
        assert len({card1, card2}) == 2

    def test_card_string(self, policy):
        """Test card string representation."""
        card = Card(policy, 5)
        assert str(card) == "[?]"
        card.face_up()
        assert str(card) == "[5]"
        assert "FACE_UP" in repr(card)


class TestCreateDeck:
    """Tests for deck creation."""

    @pytest.mark.parametrize(
        "card_count,match_size",
        [(6, 2), (24, 2), (12, 3), (16, 4), (5, 5), (0, 2)],
    )
    def test_composition(self, policy, card_count, match_size):
        """Test that every value appears exactly match_size times."""
        deck = create_deck(policy, card_count, match_size)

        assert len(deck) == card_count
        counts = Counter(c.value for c in deck)
        assert sorted(counts) == list(range(1, card_count // match_size + 1))
        assert all(n == match_size for n in counts.values())

    def test_cards_face_down(self, policy):
        """Test that dealt cards start face down and bound to the policy."""
        deck = create_deck(policy, 4, 2)
        assert all(c.orientation == CardOrientation.FACE_DOWN for c in deck)

        deck[0].face_up()
        assert policy.events == [("up", CardOrientation.FACE_UP)]


class TestShuffleCards:
    """Tests for the in-place shuffle."""

    def test_swap_order(self):
        """Test that each position swaps with an index from the remaining range."""
        items = ["a", "b", "c", "d"]
        rng = LastIndexRandom()

        shuffle_cards(items, rng)

        assert rng.calls == [(0, 4), (1, 4), (2, 4)]
        assert items == ["d", "a", "b", "c"]

    def test_preserves_items(self):
        """Test that shuffling only permutes."""
        import random

        items = list(range(50))
        shuffle_cards(items, random.Random(7))

        assert sorted(items) == list(range(50))

    def test_seeded_is_reproducible(self):
        """Test that the same seed gives the same order."""
        import random

        first = list(range(20))
        second = list(range(20))
        shuffle_cards(first, random.Random(42))
        shuffle_cards(second, random.Random(42))

        assert first == second

    @pytest.mark.parametrize("items", [[], ["only"]])
    def test_short_sequences(self, items):
        """Test that empty and single-item sequences are untouched."""
        original = list(items)
        shuffle_cards(items, LastIndexRandom())
        assert items == original
