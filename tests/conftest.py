"""
Pytest configuration and shared fixtures for holdem-engine tests.
"""

import random

import pytest
from holdem_engine.core.card import Card, Suit, parse_cards
from holdem_engine.core.game import PokerEngine
from holdem_engine.core.player import Player
from holdem_engine.core.rules import GamePhase

from helpers import advance_to


@pytest.fixture
def cards():
    """Parse cards from a string like 'As Kh 10d'."""
    return parse_cards


@pytest.fixture
def rng():
    """A seeded random source."""
    return random.Random(1234)


@pytest.fixture
def engine(rng):
    """An engine with a seeded random source and no table yet."""
    return PokerEngine(rng=rng)


@pytest.fixture
def four_player_game(engine):
    """A 4-player table with 1000 chips each, hand dealt (dealer seat 0)."""
    engine.init_game(player_count=4, starting_chips=1000)
    engine.deal_cards()
    return engine


@pytest.fixture
def heads_up_game(engine):
    """A 2-player table with 1000 chips each, hand dealt (dealer seat 0)."""
    engine.init_game(player_count=2, starting_chips=1000)
    engine.deal_cards()
    return engine


@pytest.fixture
def river_game(four_player_game):
    """The 4-player hand checked and called down to the river."""
    advance_to(four_player_game, GamePhase.RIVER)
    return four_player_game


@pytest.fixture
def sample_player():
    """Create a sample player with 1000 chips."""
    return Player(id=1, name="Player 2", chips=1000)


@pytest.fixture
def royal_flush():
    """Create a royal flush hand."""
    return [
        Card.of("A", Suit.SPADES),
        Card.of("K", Suit.SPADES),
        Card.of("Q", Suit.SPADES),
        Card.of("J", Suit.SPADES),
        Card.of("10", Suit.SPADES),
    ]


@pytest.fixture
def wheel_straight():
    """Create a wheel straight (A-2-3-4-5)."""
    return [
        Card.of("A", Suit.SPADES),
        Card.of("2", Suit.DIAMONDS),
        Card.of("3", Suit.CLUBS),
        Card.of("4", Suit.HEARTS),
        Card.of("5", Suit.SPADES),
    ]
