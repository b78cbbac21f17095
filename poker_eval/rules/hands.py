"""Hand category detection.

Categories (low to high):
- High card
- Pair: two cards of the same label
- Two pair: two labels with two cards each
- Three of a kind
- Straight: 5 consecutive ranks, ace high or low
- Flush: exactly 5 cards of one suit
- Full house: three of a kind plus a pair
- Four of a kind
- Straight flush: the flush cards form a straight
- Royal flush: the flush cards are 10-J-Q-K-A

Evaluation rules:
- Hands hold 5 to 7 cards (5-card draw, or 2 pocket + 5 community)
- Checks run from the highest category down; the first match wins
- Group counts are computed once per evaluation and never reused
"""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Optional, Sequence, Tuple

from .ranks import (
    ACE_HIGH,
    ACE_LOW,
    Card,
    Suit,
    get_rank_counts,
    get_suit_counts,
    sort_cards,
    LABEL_TO_RANK,
    RANK_LABELS,
)

logger = logging.getLogger(__name__)

STRAIGHT_LENGTH = 5
FLUSH_SIZE = 5
ROYAL_LOW_RANK = 10


class Category(IntEnum):
    """Hand categories ordered by strength (higher value = stronger)."""

    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    @property
    def tag(self) -> str:
        """Lower-case tag, e.g. 'two_pair'."""
        return self.name.lower()


@dataclass(frozen=True)
class EvaluationContext:
    """Derived group counts for a single evaluation.

    Attributes:
        cards: The evaluated cards, in input order
        rank_counts: Label -> number of cards with that label
        suit_counts: Suit -> number of cards of that suit
    """

    cards: Tuple[Card, ...]
    rank_counts: Dict[str, int]
    suit_counts: Dict[Suit, int]

    @classmethod
    def from_cards(cls, cards: Sequence[Card]) -> "EvaluationContext":
        cards = tuple(cards)
        return cls(
            cards=cards,
            rank_counts=get_rank_counts(cards),
            suit_counts=get_suit_counts(cards),
        )

    def labels_with_count(self, count: int) -> List[str]:
        """Labels appearing exactly `count` times, highest rank first."""
        labels = [label for label, n in self.rank_counts.items() if n == count]
        return sorted(labels, key=_label_rank, reverse=True)


@dataclass(frozen=True)
class HandResult:
    """A classified poker hand.

    Attributes:
        category: The best category the hand satisfies
        cards: The evaluated cards
        label: Distinguishing label (pair/trips/quads label, trips of a full
            house, higher pair of two pair), or None
        secondary_label: Pair of a full house or lower pair of two pair, or None
        flush_cards: The 5 flush cards when the hand holds a flush, else None
    """

    category: Category
    cards: Tuple[Card, ...]
    label: Optional[str] = None
    secondary_label: Optional[str] = None
    flush_cards: Optional[Tuple[Card, ...]] = None

    def __len__(self) -> int:
        return len(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(c) for c in sort_cards(self.cards, descending=True))
        return f"{self.category.name}({cards_str})"

    def describe(self) -> str:
        """Human-readable result line, e.g. 'You have a pair of 2s!'."""
        category = self.category
        if category == Category.ROYAL_FLUSH:
            return "You have a royal flush!"
        if category == Category.STRAIGHT_FLUSH:
            return "You have a straight flush!"
        if category == Category.FOUR_OF_A_KIND:
            return f"You have four {self.label}s!"
        if category == Category.FULL_HOUSE:
            return "You have a full house!"
        if category == Category.FLUSH:
            return "You have a flush!"
        if category == Category.STRAIGHT:
            return "You have a straight!"
        if category == Category.THREE_OF_A_KIND:
            return f"You have three {self.label}s!"
        if category == Category.TWO_PAIR:
            return "You have two pair!"
        if category == Category.PAIR:
            return f"You have a pair of {self.label}s!"
        return "You have a high card!"


def _label_rank(label: str) -> int:
    return LABEL_TO_RANK.get(label, 0)


def _first_label_with_count(ctx: EvaluationContext, count: int) -> Optional[str]:
    labels = ctx.labels_with_count(count)
    return labels[0] if labels else None


# ============================================================================
# Straight detection
# ============================================================================


def check_straight_ranks(cards: Sequence[Card]) -> bool:
    """Check for 5 consecutive descending ranks anywhere in a sorted sequence.

    Args:
        cards: Cards sorted by rank, highest first (5 to 7 cards)

    Returns:
        True if some window of 5 adjacent positions holds 5 consecutive ranks
    """
    for i in range(len(cards) - STRAIGHT_LENGTH + 1):
        window = cards[i : i + STRAIGHT_LENGTH]
        if all(window[j + 1].rank == window[j].rank - 1 for j in range(STRAIGHT_LENGTH - 1)):
            return True
    return False


def check_straight(cards: Sequence[Card]) -> bool:
    """Check whether cards contain a straight, with the ace playing high or low.

    The windows run over the hand as dealt, sorted by rank. A repeated rank
    inside the five positions breaks the run, so 9-8-8-7-6-5-2 is not a
    straight.
    """
    if len(cards) < STRAIGHT_LENGTH:
        return False

    sorted_cards = sort_cards(cards, descending=True)

    if sorted_cards[0].rank == ACE_HIGH:
        # A-2-3-4-5: drop the ace and re-add it below the 2
        low_ace = Card(rank=ACE_LOW, suit=sorted_cards[-1].suit, label=sorted_cards[0].label)
        ace_low_sorted = sorted_cards[1:] + [low_ace]
        if check_straight_ranks(ace_low_sorted):
            return True

    return check_straight_ranks(sorted_cards)


# ============================================================================
# Category checks
# ============================================================================


def check_flush(ctx: EvaluationContext) -> Optional[Tuple[Card, ...]]:
    """Return the cards of the suit with exactly 5 cards, or None.

    A suit holding 6 or 7 cards is not treated as a flush.
    """
    for suit, count in ctx.suit_counts.items():
        if count == FLUSH_SIZE:
            return tuple(card for card in ctx.cards if card.suit == suit)
    return None


def check_royal_flush(ctx: EvaluationContext) -> bool:
    flush_cards = check_flush(ctx)
    if flush_cards is None or not check_straight(flush_cards):
        return False
    ranks = [card.rank for card in flush_cards]
    return max(ranks) == ACE_HIGH and min(ranks) == ROYAL_LOW_RANK


def check_straight_flush(ctx: EvaluationContext) -> bool:
    flush_cards = check_flush(ctx)
    return flush_cards is not None and check_straight(flush_cards)


def check_four_of_a_kind(ctx: EvaluationContext) -> Optional[str]:
    return _first_label_with_count(ctx, 4)


def check_three_of_a_kind(ctx: EvaluationContext) -> Optional[str]:
    return _first_label_with_count(ctx, 3)


def check_pair(ctx: EvaluationContext) -> Optional[str]:
    return _first_label_with_count(ctx, 2)


def check_full_house(ctx: EvaluationContext) -> Optional[Tuple[str, str]]:
    """Return (trips label, pair label) when both groups exist, else None."""
    trips = check_three_of_a_kind(ctx)
    pair = check_pair(ctx)
    if trips is None or pair is None:
        return None
    return trips, pair


def check_two_pair(ctx: EvaluationContext) -> Optional[Tuple[str, str]]:
    """Return the two highest pair labels when at least two pairs exist.

    Three pairs can only occur in 7-card hands; they report the top two.
    """
    pairs = ctx.labels_with_count(2)
    if len(pairs) < 2:
        return None
    return pairs[0], pairs[1]


# ============================================================================
# Cascade
# ============================================================================


def evaluate_hand(cards: Sequence[Card], verbose: bool = False) -> HandResult:
    """Classify 5 to 7 cards into their best category.

    Args:
        cards: Cards to evaluate
        verbose: If True, print the cards and the result line

    Returns:
        HandResult for the highest-precedence category the cards satisfy
    """
    ctx = EvaluationContext.from_cards(cards)
    result = _run_cascade(ctx)

    logger.debug("Classified %s as %s", " ".join(str(c) for c in ctx.cards), result.category.tag)

    if verbose:
        print("Your cards: " + ", ".join(card.name for card in ctx.cards))
        print(result.describe())

    return result


def evaluate_holdem(
    pocket: Sequence[Card], community: Sequence[Card], verbose: bool = False
) -> HandResult:
    """Classify a Hold'em hand (2 pocket + 5 community cards)."""
    result = evaluate_hand(list(pocket) + list(community))

    if verbose:
        print("Community cards: " + ", ".join(card.name for card in community))
        print("Your cards: " + ", ".join(card.name for card in pocket))
        print(result.describe())

    return result


def classify(cards: Sequence[Card]) -> Category:
    """Return only the category of a hand."""
    return evaluate_hand(cards).category


def _run_cascade(ctx: EvaluationContext) -> HandResult:
    flush_cards = check_flush(ctx)

    def result(category, label=None, secondary_label=None):
        return HandResult(
            category=category,
            cards=ctx.cards,
            label=label,
            secondary_label=secondary_label,
            flush_cards=flush_cards,
        )

    if check_royal_flush(ctx):
        return result(Category.ROYAL_FLUSH)

    if check_straight_flush(ctx):
        return result(Category.STRAIGHT_FLUSH)

    quads = check_four_of_a_kind(ctx)
    if quads is not None:
        return result(Category.FOUR_OF_A_KIND, quads)

    full_house = check_full_house(ctx)
    if full_house is not None:
        return result(Category.FULL_HOUSE, *full_house)

    if flush_cards is not None:
        return result(Category.FLUSH)

    if check_straight(ctx.cards):
        return result(Category.STRAIGHT)

    trips = check_three_of_a_kind(ctx)
    if trips is not None:
        return result(Category.THREE_OF_A_KIND, trips)

    two_pair = check_two_pair(ctx)
    if two_pair is not None:
        return result(Category.TWO_PAIR, *two_pair)

    pair = check_pair(ctx)
    if pair is not None:
        return result(Category.PAIR, pair)

    return result(Category.HIGH_CARD)


def describe_categories() -> dict:
    """Get a description of each category.

    Returns:
        Dict mapping Category to description string
    """
    return {
        Category.HIGH_CARD: "No other category applies",
        Category.PAIR: "Two cards of the same rank",
        Category.TWO_PAIR: "Two different pairs",
        Category.THREE_OF_A_KIND: "Three cards of the same rank",
        Category.STRAIGHT: "5 consecutive ranks (ace high or low)",
        Category.FLUSH: "Exactly 5 cards of one suit",
        Category.FULL_HOUSE: "Three of a kind plus a pair",
        Category.FOUR_OF_A_KIND: "Four cards of the same rank",
        Category.STRAIGHT_FLUSH: "The flush cards form a straight",
        Category.ROYAL_FLUSH: "The flush cards are 10-J-Q-K-A",
    }


# Helper functions for creating hands for testing


def make_cards_from_ranks(ranks: List[int], suits: Optional[List[Suit]] = None) -> List[Card]:
    """Create cards from a list of ranks and optional suits.

    If suits not provided, cycles through suits for variety.

    Args:
        ranks: List of ranks (2-14)
        suits: Optional list of Suit values (must match length of ranks if provided)

    Returns:
        List of Card objects
    """
    if suits is None:
        suits = [Suit(i % 4) for i in range(len(ranks))]

    if len(ranks) != len(suits):
        raise ValueError("ranks and suits must have same length")

    return [Card(rank=r, suit=s, label=RANK_LABELS[r]) for r, s in zip(ranks, suits)]
