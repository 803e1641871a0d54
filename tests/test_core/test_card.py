"""
Tests for Card and deck functions.
"""

import dataclasses
import random
from collections import Counter

import pytest
from holdem_engine.core.card import (
    Card, Suit, RANKS, create_deck, shuffle_deck, deal_card, parse_cards,
)

from helpers import ScriptedRandom


class TestCard:
    """Tests for Card class."""

    def test_card_creation(self):
        """Test creating a card."""
        card = Card.of("A", Suit.SPADES)
        assert card.rank == "A"
        assert card.suit == Suit.SPADES
        assert card.value == 14

    def test_rank_values(self):
        """Values run 2..14 in rank order."""
        assert Card.of("2", Suit.CLUBS).value == 2
        assert Card.of("10", Suit.CLUBS).value == 10
        assert Card.of("J", Suit.CLUBS).value == 11
        assert Card.of("Q", Suit.CLUBS).value == 12
        assert Card.of("K", Suit.CLUBS).value == 13

    def test_card_from_string(self):
        """Test creating cards from string notation."""
        card1 = Card.from_string("As")
        assert card1 == Card.of("A", Suit.SPADES)

        # With symbol
        card2 = Card.from_string("K♥")
        assert card2 == Card.of("K", Suit.HEARTS)

        # Ten, both spellings
        assert Card.from_string("10d") == Card.of("10", Suit.DIAMONDS)
        assert Card.from_string("Td") == Card.of("10", Suit.DIAMONDS)

    @pytest.mark.parametrize("bad", ["", "A", "1s", "Ax", "11h"])
    def test_invalid_strings(self, bad):
        """Malformed card strings are rejected."""
        with pytest.raises(ValueError):
            Card.from_string(bad)

    def test_mismatched_value_rejected(self):
        """A card's value must agree with its rank."""
        with pytest.raises(ValueError):
            Card(suit=Suit.SPADES, rank="A", value=13)

    def test_card_is_immutable(self):
        """Cards cannot be changed once created."""
        card = Card.of("A", Suit.SPADES)
        with pytest.raises(dataclasses.FrozenInstanceError):
            card.value = 2

    def test_card_str(self):
        """Test card string representation."""
        card = Card.of("A", Suit.SPADES)
        assert str(card) == "A♠"
        assert card.short_str == "As"
        assert str(Card.of("10", Suit.HEARTS)) == "10♥"

    def test_card_color(self):
        """Test card color."""
        assert Card.of("A", Suit.SPADES).color == "black"
        assert Card.of("K", Suit.HEARTS).color == "red"
        assert Card.of("K", Suit.DIAMONDS).color == "red"

    def test_card_hash(self):
        """Test card hashing (for use in sets/dicts)."""
        card_set = {Card.of("A", Suit.SPADES)}
        assert Card.from_string("As") in card_set


class TestDeck:
    """Tests for deck construction, shuffling and dealing."""

    def test_deck_has_52_unique_cards(self):
        """A new deck holds every suit/rank pair exactly once."""
        deck = create_deck(random.Random(1))
        assert len(deck) == 52
        assert len({(c.suit, c.rank) for c in deck}) == 52

    def test_deck_covers_every_rank_and_suit(self):
        deck = create_deck(random.Random(2))
        assert Counter(c.rank for c in deck) == {rank: 4 for rank in RANKS}
        assert Counter(c.suit for c in deck) == {suit: 13 for suit in Suit}

    def test_shuffle_preserves_cards(self):
        """Repeated shuffles never add, drop or duplicate cards."""
        rng = random.Random(3)
        deck = create_deck(rng)
        reference = Counter(deck)
        for _ in range(20):
            deck = shuffle_deck(deck, rng)
            assert Counter(deck) == reference

    def test_shuffle_does_not_touch_input(self):
        deck = create_deck(random.Random(4))
        before = list(deck)
        shuffled = shuffle_deck(deck, random.Random(5))
        assert deck == before
        assert shuffled is not deck

    def test_shuffle_is_deterministic_with_seed(self):
        deck = create_deck(random.Random(6))
        assert shuffle_deck(deck, random.Random(7)) == shuffle_deck(deck, random.Random(7))

    def test_shuffle_swaps_from_the_back(self):
        """Each slot from the last down to 1 swaps with the drawn index."""

        class LowestIndex(ScriptedRandom):
            def randint(self, a, b):
                return a

        a, b, c = parse_cards("2h 3h 4h")
        # i=2 swaps with 0 -> [c, b, a]; i=1 swaps with 0 -> [b, c, a]
        assert shuffle_deck([a, b, c], LowestIndex()) == [b, c, a]
        # Drawing the slot itself leaves everything in place
        assert shuffle_deck([a, b, c], ScriptedRandom()) == [a, b, c]

    def test_shuffle_is_roughly_uniform(self):
        """All 6 orderings of 3 cards show up about equally often."""
        rng = random.Random(8)
        three = parse_cards("2h 3h 4h")
        counts = Counter(tuple(shuffle_deck(three, rng)) for _ in range(6000))
        assert len(counts) == 6
        assert all(850 <= n <= 1150 for n in counts.values())

    def test_deal_card_pops_top(self):
        """Dealing takes the card at the end of the list."""
        deck = parse_cards("2h 3h 4h")
        card = deal_card(deck)
        assert card == Card.from_string("4h")
        assert len(deck) == 2

    def test_deal_from_empty_deck(self):
        """An empty deck deals nothing instead of raising."""
        deck = []
        assert deal_card(deck) is None
        assert deck == []


class TestParseCards:
    """Tests for parse_cards function."""

    def test_parse_space_separated(self):
        cards = parse_cards("As Kh 10d")
        assert [c.rank for c in cards] == ["A", "K", "10"]

    def test_parse_with_symbols(self):
        cards = parse_cards("A♠ K♥ Q♦")
        assert [c.suit for c in cards] == [Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS]
