"""Deck, parsing and round dealing.

This module provides:
- Deck: Live 52-card deck with dealing, removal and reset
- parse_card / parse_cards / prompt_for_cards: Shorthand card input
- ParseError and its variants
- Game: Deals and evaluates rounds, runs simulations
"""

from poker_eval.rules.ranks import ParseError, InvalidSuitToken, InvalidRankToken

from .deck import Deck
from .parsing import (
    InvalidCardCount,
    CardUnavailable,
    USAGE_HINT,
    parse_card,
    parse_cards,
    prompt_for_cards,
)
from .game import (
    Game,
    Round,
    SimulationStats,
    Variant,
    POCKET_SIZE,
    COMMUNITY_SIZE,
    DRAW_SIZE,
)

__all__ = [
    "Deck",
    "ParseError",
    "InvalidCardCount",
    "InvalidSuitToken",
    "InvalidRankToken",
    "CardUnavailable",
    "USAGE_HINT",
    "parse_card",
    "parse_cards",
    "prompt_for_cards",
    "Game",
    "Round",
    "SimulationStats",
    "Variant",
    "POCKET_SIZE",
    "COMMUNITY_SIZE",
    "DRAW_SIZE",
]
