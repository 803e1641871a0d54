"""
Heuristic Agent Implementation.

Picks actions for computer seats from a rough hand strength, the pot odds
and the seat's personality. Every random draw goes through the injected
``rng`` so a scripted source makes decisions fully predictable.

Draw order per decision: one draw for strength noise, then one more for
raise sizing or for the coin flip on marginal calls.
"""

import math
import random
from typing import Optional

from holdem_engine.agents.base import BaseAgent, Decision
from holdem_engine.core.card import ACE_VALUE
from holdem_engine.core.hand import HandCategory, HandRank, evaluate_hand
from holdem_engine.core.player import Player
from holdem_engine.core.rules import (
    ActionType,
    GamePhase,
    Personality,
    PersonalityModifiers,
    PERSONALITY_MODIFIERS,
    DEFAULT_PERSONALITY,
)
from holdem_engine.core.state import GameState


# Preflop there is no board yet, so trust the hole cards less
PHASE_CONFIDENCE = {
    GamePhase.PREFLOP: 0.8,
}

STRENGTH_NOISE = 0.2          # total width, i.e. +/- 0.1
RAISE_SIZE_VARIATION = 0.3    # total width, i.e. +/- 15%
ALL_IN_THRESHOLD = 0.75
POT_ODDS_CALL_LIMIT = 0.3
POT_ODDS_MIN_STRENGTH = 0.3
SMALL_CALL_RATIO = 0.3
LARGE_CALL_RATIO = 0.5


def calculate_hand_strength(hand_rank: HandRank, phase: GamePhase) -> float:
    """
    Rough strength of a hand on a 0-1 scale.

    The category gives the base (rank / 10), scaled by how much the phase can
    be trusted. Pairs and high cards get a small bonus from their value.
    """
    strength = int(hand_rank.rank) / 10
    strength *= PHASE_CONFIDENCE.get(phase, 1.0)

    if hand_rank.rank == HandCategory.ONE_PAIR:
        strength += (hand_rank.top_value / ACE_VALUE) * 0.1
    elif hand_rank.rank == HandCategory.HIGH_CARD:
        strength += (hand_rank.top_value / ACE_VALUE) * 0.05

    return min(strength, 1.0)


def calculate_pot_odds(call_amount: int, pot: int) -> float:
    """Share of the resulting pot that a call costs, 0 when nothing is owed."""
    if call_amount <= 0:
        return 0.0
    return call_amount / (pot + call_amount)


def get_personality_modifiers(personality: Optional[Personality]) -> PersonalityModifiers:
    """Aggression/tightness for a personality; a seat without one plays passive."""
    if personality is None:
        personality = DEFAULT_PERSONALITY
    return PERSONALITY_MODIFIERS[personality]


class HeuristicAgent(BaseAgent):
    """
    Threshold-based opponent.

    Thresholds move with personality:
        raise: 0.65 - aggression * 0.15
        call:  0.35 - tightness * 0.15
        fold:  0.25 + tightness * 0.1
    """

    def __init__(self, rng: Optional[random.Random] = None, name: Optional[str] = None):
        super().__init__(name)
        self.rng = rng or random.Random()

    def act(self, state: GameState, player: Player) -> Decision:
        hand_rank = evaluate_hand(player.hand, state.community_cards)
        strength = calculate_hand_strength(hand_rank, state.phase)
        call_amount = state.current_bet - player.bet
        pot_odds = calculate_pot_odds(call_amount, state.pot)
        modifiers = get_personality_modifiers(player.personality)

        adjusted = strength + (self.rng.random() - 0.5) * STRENGTH_NOISE
        return self.decide(adjusted, call_amount, pot_odds, player.chips, state.big_blind, modifiers)

    def decide(
        self,
        strength: float,
        call_amount: int,
        pot_odds: float,
        chips: int,
        big_blind: int,
        modifiers: PersonalityModifiers,
    ) -> Decision:
        """
        Apply the threshold policy to an already noise-adjusted strength.

        Args:
            strength: Adjusted hand strength
            call_amount: Chips owed to match the table bet
            pot_odds: call / (pot + call)
            chips: The acting player's stack
            big_blind: Big blind amount
            modifiers: Personality scalars

        Returns:
            The chosen Decision
        """
        raise_threshold = 0.65 - modifiers.aggression * 0.15
        call_threshold = 0.35 - modifiers.tightness * 0.15
        fold_threshold = 0.25 + modifiers.tightness * 0.1

        if call_amount <= 0:
            # Free to check
            if strength > raise_threshold and chips > big_blind * 3:
                return self._raise(strength, modifiers.aggression, big_blind)
            return Decision(ActionType.CHECK)

        if call_amount >= chips:
            # Calling means committing the whole stack
            if strength > ALL_IN_THRESHOLD:
                return Decision(ActionType.ALL_IN)
            return Decision(ActionType.FOLD)

        call_ratio = call_amount / chips

        if (
            strength > raise_threshold
            and call_ratio < SMALL_CALL_RATIO
            and chips > call_amount + big_blind * 2
        ):
            return self._raise(strength, modifiers.aggression, big_blind)
        if strength > call_threshold or (
            pot_odds < POT_ODDS_CALL_LIMIT and strength > POT_ODDS_MIN_STRENGTH
        ):
            return Decision(ActionType.CALL)
        if strength < fold_threshold or call_ratio > LARGE_CALL_RATIO:
            return Decision(ActionType.FOLD)

        # Marginal spot
        if self.rng.random() > 0.5:
            return Decision(ActionType.CALL)
        return Decision(ActionType.FOLD)

    def _raise(self, strength: float, aggression: float, big_blind: int) -> Decision:
        return Decision(ActionType.RAISE, self.calculate_raise_size(strength, aggression, big_blind))

    def calculate_raise_size(self, strength: float, aggression: float, big_blind: int) -> int:
        """Raise increment: 2 big blinds scaled by strength and aggression, +/- 15%."""
        base_raise = big_blind * 2
        strength_multiplier = 1 + strength * 2
        aggression_multiplier = 1 + aggression

        raise_size = math.floor(base_raise * strength_multiplier * aggression_multiplier)
        variation = 1 + (self.rng.random() - 0.5) * RAISE_SIZE_VARIATION
        return math.floor(raise_size * variation)
