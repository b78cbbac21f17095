"""Dealing and evaluating rounds.

This module provides:
- Variant: 5-card draw or Hold'em (2 pocket + 5 community)
- Round: One dealt and evaluated hand
- Game: Owns a live deck, deals rounds, runs simulations
- SimulationStats: Category tallies over many rounds

Round flow:
1. Deal the pocket cards (all 5 cards for 5-card draw)
2. Deal the community cards (Hold'em only)
3. Evaluate the combined hand
4. Reset the deck before the next round of a simulation
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from poker_eval.rules import Card, Category, HandResult, evaluate_hand, evaluate_holdem
from .deck import Deck

logger = logging.getLogger(__name__)

POCKET_SIZE = 2
COMMUNITY_SIZE = 5
DRAW_SIZE = 5


class Variant(Enum):
    """Game variants and their card counts."""

    FIVE_CARD_DRAW = "draw"
    HOLDEM = "holdem"

    @property
    def pocket_size(self) -> int:
        return DRAW_SIZE if self is Variant.FIVE_CARD_DRAW else POCKET_SIZE

    @property
    def community_size(self) -> int:
        return 0 if self is Variant.FIVE_CARD_DRAW else COMMUNITY_SIZE

    @property
    def hand_size(self) -> int:
        return self.pocket_size + self.community_size


@dataclass(frozen=True)
class Round:
    """A dealt and evaluated hand.

    Attributes:
        pocket: The player's cards (all 5 cards in 5-card draw)
        community: Shared cards (empty in 5-card draw)
        result: Classification of pocket + community
    """

    pocket: Tuple[Card, ...]
    community: Tuple[Card, ...]
    result: HandResult

    @property
    def category(self) -> Category:
        return self.result.category

    @property
    def cards(self) -> Tuple[Card, ...]:
        return self.pocket + self.community


@dataclass
class SimulationStats:
    """Category counts over a number of rounds."""

    counts: Counter = field(default_factory=Counter)
    total_rounds: int = 0

    def record(self, category: Category) -> None:
        self.counts[category] += 1
        self.total_rounds += 1

    def record_counts(self, counts: Dict[Category, int]) -> None:
        """Add pre-tallied counts (e.g. from the batched classifier)."""
        for category, n in counts.items():
            self.counts[category] += n
            self.total_rounds += n

    def frequency(self, category: Category) -> float:
        if self.total_rounds == 0:
            return 0.0
        return self.counts[category] / self.total_rounds


class Game:
    """Deals hands from a live deck and evaluates them."""

    def __init__(
        self,
        variant: Variant = Variant.FIVE_CARD_DRAW,
        seed: Optional[int] = None,
        verbose: bool = False,
    ):
        self.variant = variant
        self.deck = Deck(seed=seed)
        self.verbose = verbose

    def deal(self) -> Tuple[List[Card], List[Card]]:
        """Deal pocket and community cards for one round."""
        pocket = self.deck.deal(self.variant.pocket_size)
        community = self.deck.deal(self.variant.community_size)
        return pocket, community

    def play_round(
        self,
        pocket: Optional[Sequence[Card]] = None,
        community: Optional[Sequence[Card]] = None,
    ) -> Round:
        """Deal whatever is missing and evaluate the hand.

        Cards passed in must already be out of the deck (e.g. parsed with
        the deck), so dealing the rest never repeats them.

        Raises:
            ValueError: If the given cards do not match the variant's sizes
        """
        if pocket is None:
            pocket = self.deck.deal(self.variant.pocket_size)
        if community is None:
            community = self.deck.deal(self.variant.community_size)

        if len(pocket) != self.variant.pocket_size:
            raise ValueError(
                f"Expected {self.variant.pocket_size} pocket cards, got {len(pocket)}"
            )
        if len(community) != self.variant.community_size:
            raise ValueError(
                f"Expected {self.variant.community_size} community cards, got {len(community)}"
            )

        if self.variant is Variant.HOLDEM:
            result = evaluate_holdem(pocket, community, verbose=self.verbose)
        else:
            result = evaluate_hand(pocket, verbose=self.verbose)

        logger.debug("Round result: %s", result)
        return Round(pocket=tuple(pocket), community=tuple(community), result=result)

    def simulate(self, rounds: int) -> SimulationStats:
        """Play independent rounds, resetting the deck before each one."""
        stats = SimulationStats()
        for _ in range(rounds):
            self.deck.reset()
            stats.record(self.play_round().category)
        self.deck.reset()
        return stats
