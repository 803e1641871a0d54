"""
Core - Pure Python Texas Hold'em Game Logic

This module contains all table logic; it performs no I/O.
"""

from holdem_engine.core.card import Card, Suit, create_deck, shuffle_deck, deal_card
from holdem_engine.core.player import Player
from holdem_engine.core.hand import HandCategory, HandRank, evaluate_hand, describe_hand
from holdem_engine.core.rules import GamePhase, ActionType, Personality
from holdem_engine.core.state import GameState
from holdem_engine.core.game import PokerEngine

__all__ = [
    "Card",
    "Suit",
    "create_deck",
    "shuffle_deck",
    "deal_card",
    "Player",
    "HandCategory",
    "HandRank",
    "evaluate_hand",
    "describe_hand",
    "GamePhase",
    "ActionType",
    "Personality",
    "GameState",
    "PokerEngine",
]
