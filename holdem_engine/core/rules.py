"""
Texas Hold'em Rules and Constants.

Table rules used by the engine:

1. Blinds: the small blind sits one seat left of the dealer and the big blind
   two seats left, for every table size (no heads-up exception).

2. Preflop action opens on the seat left of the big blind. On later streets
   the first non-folded seat left of the dealer acts first.

3. Raises carry no minimum: a raise is accepted whenever the player can pay
   for it. An unaffordable raise is ignored but still passes the turn.

4. One pot only. The best hand at showdown takes everything.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Dict, Optional, Tuple


class GamePhase(Enum):
    """Phases of a Texas Hold'em hand."""
    WAITING = "waiting"      # Table built, no hand dealt yet
    PREFLOP = "preflop"      # After hole cards dealt, before flop
    FLOP = "flop"            # After 3 community cards
    TURN = "turn"            # After 4th community card
    RIVER = "river"          # After 5th community card
    SHOWDOWN = "showdown"    # Winner decided, hand is over


class ActionType(Enum):
    """Possible player actions."""
    FOLD = "FOLD"
    CHECK = "CHECK"
    CALL = "CALL"
    RAISE = "RAISE"
    ALL_IN = "ALL_IN"


class Personality(Enum):
    """Playing styles for computer-controlled seats."""
    TIGHT = "tight"
    LOOSE = "loose"
    AGGRESSIVE = "aggressive"
    PASSIVE = "passive"


@dataclass(frozen=True)
class PersonalityModifiers:
    """Scalars that bend the decision thresholds of a personality."""
    aggression: float
    tightness: float


PERSONALITY_MODIFIERS: Dict[Personality, PersonalityModifiers] = {
    Personality.TIGHT: PersonalityModifiers(aggression=0.3, tightness=0.7),
    Personality.LOOSE: PersonalityModifiers(aggression=0.5, tightness=0.2),
    Personality.AGGRESSIVE: PersonalityModifiers(aggression=0.8, tightness=0.4),
    Personality.PASSIVE: PersonalityModifiers(aggression=0.2, tightness=0.5),
}

# Seat personalities cycle through this order (seat i -> i % 4)
PERSONALITY_CYCLE = (
    Personality.TIGHT,
    Personality.LOOSE,
    Personality.AGGRESSIVE,
    Personality.PASSIVE,
)
DEFAULT_PERSONALITY = Personality.PASSIVE

# Default game settings
DEFAULT_SMALL_BLIND = 10
DEFAULT_BIG_BLIND = 20
DEFAULT_STARTING_CHIPS = 1000
DEFAULT_PLAYER_COUNT = 4
MIN_PLAYERS = 2
MAX_PLAYERS = 10

# The human player always sits in seat 0
HUMAN_SEAT = 0

# Cards per phase
HOLE_CARDS = 2
FLOP_CARDS = 3
TURN_CARDS = 1
RIVER_CARDS = 1
TOTAL_COMMUNITY_CARDS = 5

# Street transitions: current phase -> (next phase, community cards to deal)
STREET_PROGRESSION: Dict[GamePhase, Tuple[GamePhase, int]] = {
    GamePhase.PREFLOP: (GamePhase.FLOP, FLOP_CARDS),
    GamePhase.FLOP: (GamePhase.TURN, TURN_CARDS),
    GamePhase.TURN: (GamePhase.RIVER, RIVER_CARDS),
    GamePhase.RIVER: (GamePhase.SHOWDOWN, 0),
}


def personality_for_seat(seat: int) -> Optional[Personality]:
    """Seat 0 is the human and has no personality; others cycle the styles."""
    if seat == HUMAN_SEAT:
        return None
    return PERSONALITY_CYCLE[seat % len(PERSONALITY_CYCLE)]


def get_blind_positions(num_players: int, dealer_position: int) -> Tuple[int, int]:
    """
    Calculate small blind and big blind positions.

    Args:
        num_players: Number of seats at the table
        dealer_position: Position of the dealer (0-indexed)

    Returns:
        Tuple of (small_blind_position, big_blind_position)
    """
    if num_players < MIN_PLAYERS:
        raise ValueError("Need at least 2 players")

    sb_pos = (dealer_position + 1) % num_players
    bb_pos = (dealer_position + 2) % num_players
    return sb_pos, bb_pos


def get_first_to_act_preflop(num_players: int, dealer_position: int) -> int:
    """The seat left of the big blind opens preflop action."""
    _, bb_pos = get_blind_positions(num_players, dealer_position)
    return (bb_pos + 1) % num_players
