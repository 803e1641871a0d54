"""
Pydantic snapshots of the game state for presentation layers.

Snapshots are detached copies: mutating one never touches the engine.
"""

from typing import List, Optional
from pydantic import BaseModel

from holdem_engine.core.card import Card
from holdem_engine.core.hand import HandRank
from holdem_engine.core.player import Player
from holdem_engine.core.state import GameState


class CardSchema(BaseModel):
    """Card representation."""
    suit: str
    rank: str
    value: int
    text: str
    color: str

    @classmethod
    def from_card(cls, card: Card) -> "CardSchema":
        return cls(
            suit=card.suit.value,
            rank=card.rank,
            value=card.value,
            text=str(card),
            color=card.color,
        )


class HandRankSchema(BaseModel):
    """Evaluated hand."""
    rank: int
    name: str
    cards: List[CardSchema]

    @classmethod
    def from_hand_rank(cls, hand_rank: HandRank) -> "HandRankSchema":
        return cls(
            rank=int(hand_rank.rank),
            name=hand_rank.name,
            cards=[CardSchema.from_card(c) for c in hand_rank.cards],
        )


class PlayerSchema(BaseModel):
    """Player information. ``hand`` is None when hidden from the viewer."""
    id: int
    name: str
    chips: int
    bet: int
    folded: bool
    is_dealer: bool
    is_current_player: bool
    personality: Optional[str] = None
    hand: Optional[List[CardSchema]] = None
    hand_rank: Optional[HandRankSchema] = None

    @classmethod
    def from_player(cls, player: Player, show_cards: bool) -> "PlayerSchema":
        return cls(
            id=player.id,
            name=player.name,
            chips=player.chips,
            bet=player.bet,
            folded=player.folded,
            is_dealer=player.is_dealer,
            is_current_player=player.is_current_player,
            personality=player.personality.value if player.personality is not None else None,
            hand=[CardSchema.from_card(c) for c in player.hand] if show_cards else None,
            hand_rank=(
                HandRankSchema.from_hand_rank(player.hand_rank)
                if player.hand_rank is not None else None
            ),
        )


class GameStateSchema(BaseModel):
    """Complete table state as seen by one viewer."""
    phase: str
    pot: int
    current_bet: int
    community_cards: List[CardSchema]
    dealer_index: int
    current_player_index: Optional[int] = None
    players: List[PlayerSchema]
    winner_id: Optional[int] = None
    small_blind: int
    big_blind: int
    cards_remaining: int


def snapshot_state(state: GameState, viewer_id: Optional[int] = None) -> GameStateSchema:
    """
    Build a snapshot of ``state``.

    Args:
        state: The live table state
        viewer_id: Seat whose hole cards are shown. After a contested
            showdown the hands still in play are shown to everyone.
    """
    reveal_all = state.winner is not None and len(state.active_players) > 1
    current = state.current_player

    return GameStateSchema(
        phase=state.phase.value,
        pot=state.pot,
        current_bet=state.current_bet,
        community_cards=[CardSchema.from_card(c) for c in state.community_cards],
        dealer_index=state.dealer_index,
        current_player_index=current.id if current is not None else None,
        players=[
            PlayerSchema.from_player(
                p,
                show_cards=(reveal_all and not p.folded) or (viewer_id is not None and p.id == viewer_id),
            )
            for p in state.players
        ],
        winner_id=state.winner.id if state.winner is not None else None,
        small_blind=state.small_blind,
        big_blind=state.big_blind,
        cards_remaining=len(state.deck),
    )
