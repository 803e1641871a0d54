"""
Player record for Texas Hold'em.

Manages player state including:
- Chip count
- Hole cards
- Current bet in the betting round
- Folded / dealer / acting flags
"""

from __future__ import annotations
from typing import List, Optional
from dataclasses import dataclass, field

from holdem_engine.core.card import Card
from holdem_engine.core.hand import HandRank
from holdem_engine.core.rules import Personality, HUMAN_SEAT


@dataclass
class Player:
    """
    A player seated at the table.

    Attributes:
        id: Seat number, fixed for the whole game
        name: Display name
        chips: Current chip count (never negative)
        hand: The player's hole cards (0-2 cards)
        bet: Amount put in during the current betting round
        folded: Whether the player has folded this hand
        is_dealer: Whether the player holds the dealer button
        is_current_player: Whether it is this player's turn
        hand_rank: Evaluated hand, filled in at showdown
        personality: Playing style of a computer seat, None for the human
    """
    id: int
    name: str
    chips: int
    hand: List[Card] = field(default_factory=list)
    bet: int = 0
    folded: bool = False
    is_dealer: bool = False
    is_current_player: bool = False
    hand_rank: Optional[HandRank] = None
    personality: Optional[Personality] = None

    def reset_for_new_hand(self, is_dealer: bool) -> None:
        """Reset player state for a new hand."""
        self.hand = []
        self.bet = 0
        self.folded = False
        self.is_dealer = is_dealer
        self.is_current_player = False
        self.hand_rank = None

    def pay(self, amount: int) -> int:
        """
        Move chips from the stack into the current bet.

        Args:
            amount: Amount requested

        Returns:
            Actual amount paid (capped at the remaining chips)
        """
        if amount <= 0:
            return 0

        actual = min(amount, self.chips)
        self.chips -= actual
        self.bet += actual
        return actual

    def amount_to_call(self, current_bet: int) -> int:
        """Chips still owed to match the table bet."""
        return max(0, current_bet - self.bet)

    @property
    def is_human(self) -> bool:
        return self.id == HUMAN_SEAT

    @property
    def is_all_in(self) -> bool:
        """Still in the hand with nothing left to bet."""
        return not self.folded and self.chips == 0

    def __repr__(self) -> str:
        return (
            f"Player({self.id}, chips={self.chips}, "
            f"bet={self.bet}, folded={self.folded})"
        )

    def __str__(self) -> str:
        cards_str = " ".join(str(c) for c in self.hand) if self.hand else "??"
        return f"{self.name} [{cards_str}] ${self.chips}"
