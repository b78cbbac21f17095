"""Poker Eval - poker hand classification.

Classifies 5 to 7 card poker hands (5-card draw or Texas Hold'em) into the
best category from high card through royal flush.
"""

__version__ = "0.1.0"
__author__ = "Poker Eval Team"

from poker_eval.utils.seeding import set_seed
from poker_eval.rules import Card, Category, HandResult, Suit, classify, evaluate_hand

__all__ = [
    "__version__",
    "set_seed",
    "Card",
    "Category",
    "HandResult",
    "Suit",
    "classify",
    "evaluate_hand",
]
