"""
Cards and deck handling for Texas Hold'em.

A deck is a plain list of immutable Card objects. Dealing pops from the end
of the list (the "top" of the deck), so an exhausted deck simply yields
nothing instead of inventing cards.

Randomness is always drawn from an injectable source so that tests can seed
or script the shuffle.
"""

from __future__ import annotations
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence


class Suit(Enum):
    """Card suits, in deck construction order."""
    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"


# Rank labels, lowest first. Value = index + 2 (so Ace = 14).
RANKS = ("2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K", "A")
RANK_VALUES = {rank: i + 2 for i, rank in enumerate(RANKS)}
ACE_VALUE = 14

SUIT_SYMBOLS = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
}

SUIT_CHARS = {
    Suit.HEARTS: "h",
    Suit.DIAMONDS: "d",
    Suit.CLUBS: "c",
    Suit.SPADES: "s",
}

# Reverse mappings
CHAR_TO_SUIT = {v: k for k, v in SUIT_CHARS.items()}
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}
CHAR_TO_RANK = {rank: rank for rank in RANKS}
CHAR_TO_RANK["T"] = "10"  # Also accept "T"


@dataclass(frozen=True)
class Card:
    """
    A playing card.

    Cards can be created from:
    - Rank label and Suit: Card.of("A", Suit.SPADES)
    - String notation: Card.from_string("As"), Card.from_string("10h")
      or Card.from_string("K♥")

    ``value`` is derived from the rank (2..14) and kept on the card so the
    evaluator never has to look it up.
    """
    suit: Suit
    rank: str
    value: int

    def __post_init__(self) -> None:
        if self.rank not in RANK_VALUES:
            raise ValueError(f"Invalid rank: {self.rank}")
        if RANK_VALUES[self.rank] != self.value:
            raise ValueError(f"Value {self.value} does not match rank {self.rank}")

    @classmethod
    def of(cls, rank: str, suit: Suit) -> Card:
        """Create a card from its rank label and suit."""
        if rank not in RANK_VALUES:
            raise ValueError(f"Invalid rank: {rank}")
        return cls(suit=suit, rank=rank, value=RANK_VALUES[rank])

    @classmethod
    def from_string(cls, s: str) -> Card:
        """
        Create a card from string notation.

        Accepts formats:
        - "As", "Kh", "Td", "10d", "2c" (rank + suit char)
        - "A♠", "K♥", "10♦", "2♣" (rank + suit symbol)
        """
        s = s.strip()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_part = s[:-1].upper()
        suit_part = s[-1]

        if rank_part not in CHAR_TO_RANK:
            raise ValueError(f"Invalid rank: {rank_part}")

        if suit_part.lower() in CHAR_TO_SUIT:
            suit = CHAR_TO_SUIT[suit_part.lower()]
        elif suit_part in SYMBOL_TO_SUIT:
            suit = SYMBOL_TO_SUIT[suit_part]
        else:
            raise ValueError(f"Invalid suit: {suit_part}")

        return cls.of(CHAR_TO_RANK[rank_part], suit)

    def __str__(self) -> str:
        return f"{self.rank}{SUIT_SYMBOLS[self.suit]}"

    @property
    def short_str(self) -> str:
        """Short string like 'As', '10h'."""
        return f"{self.rank}{SUIT_CHARS[self.suit]}"

    @property
    def color(self) -> str:
        """Return 'red' for hearts/diamonds, 'black' for clubs/spades."""
        return "red" if self.suit in (Suit.HEARTS, Suit.DIAMONDS) else "black"


def shuffle_deck(cards: Sequence[Card], rng: Optional[random.Random] = None) -> List[Card]:
    """
    Return a uniformly shuffled copy of ``cards`` (Fisher-Yates).

    Walks from the last index down to 1 and swaps each slot with a uniformly
    chosen index at or before it. The input sequence is not modified.
    """
    rng = rng or random
    shuffled = list(cards)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def create_deck(rng: Optional[random.Random] = None) -> List[Card]:
    """Build the 52-card deck (every suit x rank) and shuffle it."""
    deck = [Card.of(rank, suit) for suit in Suit for rank in RANKS]
    return shuffle_deck(deck, rng)


def deal_card(deck: List[Card]) -> Optional[Card]:
    """Pop the top card off ``deck``, or return None when it is empty."""
    if not deck:
        return None
    return deck.pop()


def parse_cards(cards_str: str) -> List[Card]:
    """
    Parse space-separated cards, e.g. "As Kh 10d" or "A♠ K♥ T♦".

    Returns:
        List of Card objects
    """
    return [Card.from_string(s) for s in cards_str.split()]
