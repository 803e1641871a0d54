"""
The shared table state.

One GameState describes everything about the current hand. It is owned by a
single PokerEngine, replaced wholesale when a game is initialised and mutated
field by field by every other engine operation.
"""

from __future__ import annotations
from typing import List, Optional
from dataclasses import dataclass, field

from holdem_engine.core.card import Card
from holdem_engine.core.player import Player
from holdem_engine.core.rules import (
    GamePhase,
    DEFAULT_BIG_BLIND,
    DEFAULT_SMALL_BLIND,
)


@dataclass
class GameState:
    """
    Table state for one game.

    Attributes:
        players: Seated players, in fixed seat order
        community_cards: The board (0-5 cards)
        pot: Chips collected from players this hand
        current_bet: Highest bet on the current street
        phase: Current phase of the hand
        dealer_index: Seat holding the dealer button
        current_player_index: Seat whose turn it is
        deck: Undealt cards; the end of the list is the top of the deck
        winner: The player who took the last pot, if decided
        small_blind: Small blind amount
        big_blind: Big blind amount
    """
    players: List[Player] = field(default_factory=list)
    community_cards: List[Card] = field(default_factory=list)
    pot: int = 0
    current_bet: int = 0
    phase: GamePhase = GamePhase.WAITING
    dealer_index: int = 0
    current_player_index: int = 0
    deck: List[Card] = field(default_factory=list)
    winner: Optional[Player] = None
    small_blind: int = DEFAULT_SMALL_BLIND
    big_blind: int = DEFAULT_BIG_BLIND

    @property
    def num_players(self) -> int:
        return len(self.players)

    @property
    def is_hand_running(self) -> bool:
        """A hand is in progress between the deal and the showdown."""
        return self.phase not in (GamePhase.WAITING, GamePhase.SHOWDOWN)

    @property
    def current_player(self) -> Optional[Player]:
        """The player whose turn it is, or None outside a running hand."""
        if not self.is_hand_running:
            return None
        if not 0 <= self.current_player_index < len(self.players):
            return None
        return self.players[self.current_player_index]

    @property
    def active_players(self) -> List[Player]:
        """Players who have not folded, in seat order."""
        return [p for p in self.players if not p.folded]

    @property
    def total_chips(self) -> int:
        """
        Every stack plus the pot.

        Constant from the deal until the pot is awarded. The pot figure stays
        on the state after the award, so at showdown this reads the pre-hand
        total plus the pot until the next deal.
        """
        return sum(p.chips for p in self.players) + self.pot
