"""Poker rules implementations.

This module provides:
- Card and rank definitions (ranks.py)
- Hand category detection (hands.py)
"""

from .ranks import (
    Suit,
    Card,
    RANK_LABELS,
    LABEL_TO_RANK,
    SUIT_NAMES,
    SUIT_SYMBOLS,
    SUIT_LETTERS,
    MIN_RANK,
    MAX_RANK,
    ACE_HIGH,
    ACE_LOW,
    make_card,
    get_rank_counts,
    get_suit_counts,
    create_standard_deck,
    sort_cards,
    make_cards_from_string,
    ParseError,
    InvalidSuitToken,
    InvalidRankToken,
)

from .hands import (
    Category,
    EvaluationContext,
    HandResult,
    check_royal_flush,
    check_straight_flush,
    check_four_of_a_kind,
    check_full_house,
    check_flush,
    check_straight,
    check_straight_ranks,
    check_three_of_a_kind,
    check_two_pair,
    check_pair,
    evaluate_hand,
    evaluate_holdem,
    classify,
    describe_categories,
    make_cards_from_ranks,
)

__all__ = [
    # Ranks
    "Suit",
    "Card",
    "RANK_LABELS",
    "LABEL_TO_RANK",
    "SUIT_NAMES",
    "SUIT_SYMBOLS",
    "SUIT_LETTERS",
    "MIN_RANK",
    "MAX_RANK",
    "ACE_HIGH",
    "ACE_LOW",
    "make_card",
    "get_rank_counts",
    "get_suit_counts",
    "create_standard_deck",
    "sort_cards",
    "make_cards_from_string",
    "ParseError",
    "InvalidSuitToken",
    "InvalidRankToken",
    # Hands
    "Category",
    "EvaluationContext",
    "HandResult",
    "check_royal_flush",
    "check_straight_flush",
    "check_four_of_a_kind",
    "check_full_house",
    "check_flush",
    "check_straight",
    "check_straight_ranks",
    "check_three_of_a_kind",
    "check_two_pair",
    "check_pair",
    "evaluate_hand",
    "evaluate_holdem",
    "classify",
    "describe_categories",
    "make_cards_from_ranks",
]
