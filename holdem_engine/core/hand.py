"""
Hand Evaluation for Texas Hold'em.

This module classifies up to 7 cards (hole cards plus board) into one of the
standard poker categories. Categories are tried best-first from an ordered
table, and the first one that matches wins.

Hand Rankings (best to worst):
10. Royal Flush: A♠ K♠ Q♠ J♠ 10♠
 9. Straight Flush: 5 consecutive cards of same suit
 8. Four of a Kind: 4 cards of same rank
 7. Full House: 3 of a kind + pair
 6. Flush: 5 cards of same suit
 5. Straight: 5 consecutive cards
 4. Three of a Kind: 3 cards of same rank
 3. Two Pair: 2 different pairs
 2. One Pair: 2 cards of same rank
 1. High Card: No made hand
 0. No Cards: nothing to evaluate

Note: Ace can be low in A-2-3-4-5 straight (wheel).

Only the cards that make the category are reported (the 4 quads, the 2 pair
cards, the single high card...). Kickers are not part of the result.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from holdem_engine.core.card import ACE_VALUE, Card, Suit


class HandCategory(IntEnum):
    """Hand categories from best (highest value) to worst (lowest value)."""
    ROYAL_FLUSH = 10
    STRAIGHT_FLUSH = 9
    FOUR_OF_A_KIND = 8
    FULL_HOUSE = 7
    FLUSH = 6
    STRAIGHT = 5
    THREE_OF_A_KIND = 4
    TWO_PAIR = 3
    ONE_PAIR = 2
    HIGH_CARD = 1
    NO_CARDS = 0


# Hand category names for display
HAND_CATEGORY_NAMES = {
    HandCategory.ROYAL_FLUSH: "Royal Flush",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FLUSH: "Flush",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.ONE_PAIR: "One Pair",
    HandCategory.HIGH_CARD: "High Card",
    HandCategory.NO_CARDS: "No Cards",
}

STRAIGHT_LENGTH = 5
FLUSH_LENGTH = 5
# A-2-3-4-5, shown 5-4-3-2-A
WHEEL_VALUES = (5, 4, 3, 2, ACE_VALUE)


@dataclass(frozen=True)
class HandRank:
    """
    Result of evaluating a hand.

    Attributes:
        rank: The hand category (an IntEnum, so it compares as 0-10)
        name: Display name of the category
        cards: The cards forming the hand, most significant first
    """
    rank: HandCategory
    name: str
    cards: Tuple[Card, ...]

    @property
    def top_value(self) -> int:
        """Value of the first (most significant) card, 0 if there is none."""
        return self.cards[0].value if self.cards else 0


@dataclass
class _HandAnalysis:
    """Cards sorted high to low plus their value groups, computed once."""
    cards: List[Card]
    quads: List[List[Card]]
    trips: List[List[Card]]
    pairs: List[List[Card]]


def evaluate_hand(hand: Sequence[Card], community_cards: Sequence[Card]) -> HandRank:
    """
    Evaluate the best hand made from hole cards and community cards.

    Args:
        hand: The player's hole cards (0-2)
        community_cards: The board (0-5)

    Returns:
        HandRank with the category, its display name and the cards forming it.
        An empty input yields the rank-0 "No Cards" result.
    """
    all_cards = sorted([*hand, *community_cards], key=lambda c: c.value, reverse=True)
    analysis = _analyze(all_cards)

    for category, detector in _CATEGORY_TABLE:
        made = detector(analysis)
        if made is not None:
            return HandRank(
                rank=category,
                name=HAND_CATEGORY_NAMES[category],
                cards=tuple(made),
            )

    return HandRank(
        rank=HandCategory.NO_CARDS,
        name=HAND_CATEGORY_NAMES[HandCategory.NO_CARDS],
        cards=(),
    )


def _analyze(cards: List[Card]) -> _HandAnalysis:
    """Bucket cards by value; each group list is ordered by value, high first."""
    by_value: Dict[int, List[Card]] = {}
    for card in cards:
        by_value.setdefault(card.value, []).append(card)

    groups = sorted(by_value.values(), key=lambda g: g[0].value, reverse=True)
    return _HandAnalysis(
        cards=cards,
        quads=[g for g in groups if len(g) == 4],
        trips=[g for g in groups if len(g) == 3],
        pairs=[g for g in groups if len(g) == 2],
    )


def find_straight(cards: Sequence[Card]) -> Optional[List[Card]]:
    """
    Find a straight among ``cards`` (sorted high to low).

    The wheel (A-2-3-4-5) is checked first and wins whenever it is present,
    even if a higher straight such as 2-3-4-5-6 is also available; that is a
    known simplification. Otherwise distinct values are scanned high to low
    for 5 values that step down by exactly 1.
    """
    first_by_value: Dict[int, Card] = {}
    for card in cards:
        first_by_value.setdefault(card.value, card)

    if all(v in first_by_value for v in WHEEL_VALUES):
        return [first_by_value[v] for v in WHEEL_VALUES]

    values = sorted(first_by_value, reverse=True)
    for i in range(len(values) - STRAIGHT_LENGTH + 1):
        window = values[i:i + STRAIGHT_LENGTH]
        if all(window[j] - window[j + 1] == 1 for j in range(STRAIGHT_LENGTH - 1)):
            return [first_by_value[v] for v in window]
    return None


def _suited(cards: Sequence[Card]) -> List[List[Card]]:
    """Cards of every suit holding at least five, in suit order."""
    result = []
    for suit in Suit:
        suit_cards = [c for c in cards if c.suit == suit]
        if len(suit_cards) >= FLUSH_LENGTH:
            result.append(suit_cards)
    return result


def _straight_flush(a: _HandAnalysis) -> Optional[List[Card]]:
    for suit_cards in _suited(a.cards):
        straight = find_straight(suit_cards)
        if straight is not None:
            return straight
    return None


def _royal_flush(a: _HandAnalysis) -> Optional[List[Card]]:
    straight = _straight_flush(a)
    if straight is not None and straight[0].value == ACE_VALUE:
        return straight
    return None


def _four_of_a_kind(a: _HandAnalysis) -> Optional[List[Card]]:
    return list(a.quads[0]) if a.quads else None


def _full_house(a: _HandAnalysis) -> Optional[List[Card]]:
    if not a.trips:
        return None
    # Only a real pair fills the house; a second set of trips does not
    if not a.pairs:
        return None
    return list(a.trips[0]) + list(a.pairs[0])


def _flush(a: _HandAnalysis) -> Optional[List[Card]]:
    suited = _suited(a.cards)
    return suited[0][:FLUSH_LENGTH] if suited else None


def _straight(a: _HandAnalysis) -> Optional[List[Card]]:
    return find_straight(a.cards)


def _three_of_a_kind(a: _HandAnalysis) -> Optional[List[Card]]:
    return list(a.trips[0]) if a.trips else None


def _two_pair(a: _HandAnalysis) -> Optional[List[Card]]:
    if len(a.pairs) < 2:
        return None
    return list(a.pairs[0]) + list(a.pairs[1])


def _one_pair(a: _HandAnalysis) -> Optional[List[Card]]:
    return list(a.pairs[0]) if a.pairs else None


def _high_card(a: _HandAnalysis) -> Optional[List[Card]]:
    return [a.cards[0]] if a.cards else None


# Evaluated top-down; the first detector that returns cards decides the hand.
_CATEGORY_TABLE: Tuple[Tuple[HandCategory, Callable[[_HandAnalysis], Optional[List[Card]]]], ...] = (
    (HandCategory.ROYAL_FLUSH, _royal_flush),
    (HandCategory.STRAIGHT_FLUSH, _straight_flush),
    (HandCategory.FOUR_OF_A_KIND, _four_of_a_kind),
    (HandCategory.FULL_HOUSE, _full_house),
    (HandCategory.FLUSH, _flush),
    (HandCategory.STRAIGHT, _straight),
    (HandCategory.THREE_OF_A_KIND, _three_of_a_kind),
    (HandCategory.TWO_PAIR, _two_pair),
    (HandCategory.ONE_PAIR, _one_pair),
    (HandCategory.HIGH_CARD, _high_card),
)


def describe_hand(hand_rank: HandRank) -> str:
    """Get a human-readable description of an evaluated hand."""
    category = hand_rank.rank
    cards = hand_rank.cards

    if category == HandCategory.NO_CARDS:
        return "No cards"
    elif category == HandCategory.ROYAL_FLUSH:
        return "Royal Flush"
    elif category == HandCategory.STRAIGHT_FLUSH:
        return f"Straight Flush, {_value_name(cards[0].value)} high"
    elif category == HandCategory.FOUR_OF_A_KIND:
        return f"Four of a Kind, {_plural(cards[0].value)}"
    elif category == HandCategory.FULL_HOUSE:
        return f"Full House, {_plural(cards[0].value)} full of {_plural(cards[3].value)}"
    elif category == HandCategory.FLUSH:
        return f"Flush, {_value_name(cards[0].value)} high"
    elif category == HandCategory.STRAIGHT:
        if cards[-1].value == ACE_VALUE:
            return "Straight, Five high (Wheel)"
        return f"Straight, {_value_name(cards[0].value)} high"
    elif category == HandCategory.THREE_OF_A_KIND:
        return f"Three of a Kind, {_plural(cards[0].value)}"
    elif category == HandCategory.TWO_PAIR:
        return f"Two Pair, {_plural(cards[0].value)} and {_plural(cards[2].value)}"
    elif category == HandCategory.ONE_PAIR:
        return f"Pair of {_plural(cards[0].value)}"
    else:
        return f"High Card, {_value_name(cards[0].value)}"


_VALUE_NAMES = {
    2: "Two", 3: "Three", 4: "Four", 5: "Five", 6: "Six", 7: "Seven",
    8: "Eight", 9: "Nine", 10: "Ten", 11: "Jack", 12: "Queen", 13: "King",
    14: "Ace",
}


def _value_name(value: int) -> str:
    """Get the name of a card value."""
    return _VALUE_NAMES[value]


def _plural(value: int) -> str:
    name = _value_name(value)
    return f"{name}es" if name == "Six" else f"{name}s"
