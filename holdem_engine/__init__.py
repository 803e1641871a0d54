"""
holdem-engine - Texas Hold'em Rules Engine

A self-contained engine for a single Texas Hold'em table:
- Deck, shuffle and dealing
- Betting state machine across preflop, flop, turn and river
- Hand evaluation and showdown
- Heuristic opponents with personalities

Usage:
    from holdem_engine import PokerEngine
    engine = PokerEngine()
    engine.init_game(player_count=4, starting_chips=1000)
    engine.deal_cards()
"""

__version__ = "0.1.0"

from holdem_engine.core.card import Card, Suit, create_deck, shuffle_deck
from holdem_engine.core.player import Player
from holdem_engine.core.state import GameState
from holdem_engine.core.game import PokerEngine
from holdem_engine.core.hand import HandCategory, HandRank, evaluate_hand
from holdem_engine.core.rules import GamePhase, ActionType, Personality
from holdem_engine.config import GameConfig

__all__ = [
    "Card",
    "Suit",
    "create_deck",
    "shuffle_deck",
    "Player",
    "GameState",
    "PokerEngine",
    "HandCategory",
    "HandRank",
    "evaluate_hand",
    "GamePhase",
    "ActionType",
    "Personality",
    "GameConfig",
    "__version__",
]
