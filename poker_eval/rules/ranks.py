"""Card rank definitions and utilities.

Rank order (high to low): A > K > Q > J > 10 > 9 > 8 > 7 > 6 > 5 > 4 > 3 > 2

Ranks are plain integers 2-14 (11=J, 12=Q, 13=K, 14=A). Rank 1 only ever
appears on the synthetic low ace used for A-2-3-4-5 straight detection.

This module provides:
- Suit definitions
- Card representation (rank, suit, display label)
- Rank/suit group counts
- Deck construction and sorting utilities
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, List


class Suit(IntEnum):
    """Card suits. Suits carry no ordering for hand strength."""

    HEART = 0
    DIAMOND = 1
    CLUB = 2
    SPADE = 3

    @property
    def display_name(self) -> str:
        return SUIT_NAMES[self]

    @property
    def letter(self) -> str:
        return SUIT_LETTERS[self]


# Suit names used in card display names ("A of spades")
SUIT_NAMES = {
    Suit.HEART: "hearts",
    Suit.DIAMOND: "diamonds",
    Suit.CLUB: "clubs",
    Suit.SPADE: "spades",
}

# Suit symbols for compact display
SUIT_SYMBOLS = {
    Suit.HEART: "♥",
    Suit.DIAMOND: "♦",
    Suit.CLUB: "♣",
    Suit.SPADE: "♠",
}

# Shorthand letters accepted by the parser
SUIT_LETTERS = {
    Suit.HEART: "H",
    Suit.DIAMOND: "D",
    Suit.CLUB: "C",
    Suit.SPADE: "S",
}

MIN_RANK = 2
MAX_RANK = 14
ACE_HIGH = 14
ACE_LOW = 1

# Rank labels for display and grouping
RANK_LABELS = {
    2: "2",
    3: "3",
    4: "4",
    5: "5",
    6: "6",
    7: "7",
    8: "8",
    9: "9",
    10: "10",
    11: "J",
    12: "Q",
    13: "K",
    14: "A",
}

# Label to rank mapping (for parsing)
LABEL_TO_RANK = {v: k for k, v in RANK_LABELS.items()}

# Suit letter to suit mapping (for parsing)
LETTER_TO_SUIT = {v: k for k, v in SUIT_LETTERS.items()}


class ParseError(ValueError):
    """Raised when shorthand card text cannot be turned into cards."""

    pass


class InvalidSuitToken(ParseError):
    """Unknown suit letter."""

    def __init__(self, token: str):
        super().__init__(f"Invalid suit in card: {token}")
        self.token = token


class InvalidRankToken(ParseError):
    """Unknown rank label."""

    def __init__(self, token: str):
        super().__init__(f"Invalid rank in card: {token}")
        self.token = token


@dataclass(frozen=True)
class Card:
    """A playing card with rank, suit and display label.

    Cards are ordered by rank only: two cards of equal rank are neither less
    nor greater than each other, even though they are distinct cards.
    Immutable and hashable for use in sets.
    """

    rank: int
    suit: Suit
    label: str

    @property
    def name(self) -> str:
        """Display name, e.g. 'A of spades'."""
        suit_name = SUIT_NAMES.get(self.suit, str(self.suit))
        return f"{self.label} of {suit_name}"

    def compare(self, other: "Card") -> int:
        """Compare by rank: 0 if equal, -1 if lower, 1 if higher."""
        if self.rank == other.rank:
            return 0
        if self.rank < other.rank:
            return -1
        return 1

    def __lt__(self, other: "Card") -> bool:
        return self.rank < other.rank

    def __le__(self, other: "Card") -> bool:
        return self.rank <= other.rank

    def __gt__(self, other: "Card") -> bool:
        return self.rank > other.rank

    def __ge__(self, other: "Card") -> bool:
        return self.rank >= other.rank

    def __str__(self) -> str:
        return f"{self.label}{SUIT_SYMBOLS.get(self.suit, '?')}"

    def __repr__(self) -> str:
        return f"Card({self.label}{SUIT_SYMBOLS.get(self.suit, '?')})"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from shorthand like 'AS', '10d', '3h' or 'Tc'.

        Raises:
            InvalidSuitToken: If the last character is not a suit letter
            InvalidRankToken: If the rest is not a rank label
        """
        s = s.strip()
        if len(s) < 2:
            raise InvalidRankToken(s)

        suit = LETTER_TO_SUIT.get(s[-1].upper())
        if suit is None:
            raise InvalidSuitToken(s)

        rank_str = s[:-1].upper()
        if rank_str == "T":
            rank_str = "10"
        if rank_str not in LABEL_TO_RANK:
            raise InvalidRankToken(s)

        rank = LABEL_TO_RANK[rank_str]
        return cls(rank=rank, suit=suit, label=RANK_LABELS[rank])


def make_card(rank: int, suit: Suit) -> Card:
    """Create a card with the standard label for its rank."""
    return Card(rank=rank, suit=suit, label=RANK_LABELS[rank])


def get_rank_counts(cards: Iterable[Card]) -> Dict[str, int]:
    """Count occurrences of each rank label in a list of cards.

    Grouping is by label rather than numeric rank so the synthetic low ace
    never splits an ace group.
    """
    counts: Dict[str, int] = {}
    for card in cards:
        counts[card.label] = counts.get(card.label, 0) + 1
    return counts


def get_suit_counts(cards: Iterable[Card]) -> Dict[Suit, int]:
    """Count occurrences of each suit in a list of cards."""
    counts: Dict[Suit, int] = {}
    for card in cards:
        counts[card.suit] = counts.get(card.suit, 0) + 1
    return counts


def create_standard_deck() -> List[Card]:
    """Create a standard 52-card deck.

    Returns:
        List of 52 Card objects (13 ranks × 4 suits)
    """
    deck = []
    for suit in Suit:
        for rank in range(MIN_RANK, MAX_RANK + 1):
            deck.append(make_card(rank, suit))
    return deck


def sort_cards(cards: Iterable[Card], descending: bool = False) -> List[Card]:
    """Sort cards by rank. Equal ranks keep their input order."""
    return sorted(cards, key=lambda c: c.rank, reverse=descending)


def make_cards_from_string(s: str) -> List[Card]:
    """Parse cards from a string like "AS KS QS JS 10S"."""
    return [Card.from_string(token) for token in s.split()]
