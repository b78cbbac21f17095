"""GPU-accelerated batched hand classification.

This module provides:
- Fixed card index encoding (0-51)
- Batched category computation for many hands at once using PyTorch
- Random hand dealing on the device for simulations

Key insight: Instead of running the category cascade card by card for every
hand, we reduce each hand to rank and suit count vectors and evaluate every
category as a tensor predicate; the cascade becomes a sequence of overrides.

Card encoding: card_idx = suit * 13 + (rank - 2)
- suit: 0=Heart, 1=Diamond, 2=Club, 3=Spade
- rank: 2..14, so index 0 within a suit is the 2 and index 12 is the ace
"""

from typing import Dict, List, Optional, Sequence

import torch
import torch.nn.functional as F

from poker_eval.rules import Card, Category, Suit, make_card
from poker_eval.rules.hands import FLUSH_SIZE, STRAIGHT_LENGTH


NUM_RANKS = 13
NUM_SUITS = 4
NUM_CARDS = NUM_RANKS * NUM_SUITS

# Positions on the extended rank axis: 0 is the low ace, 1..13 are ranks 2..14
EXTENDED_RANKS = NUM_RANKS + 1

# Rank indices of 10, J, Q, K, A
ROYAL_RANK_INDICES = list(range(10 - 2, 14 - 1))


def card_to_idx(card: Card) -> int:
    """Convert Card to index 0-51."""
    return int(card.suit) * NUM_RANKS + (card.rank - 2)


def idx_to_card(idx: int) -> Card:
    """Convert index 0-51 to Card."""
    return make_card(idx % NUM_RANKS + 2, Suit(idx // NUM_RANKS))


def cards_to_tensor(hands: Sequence[Sequence[Card]], device: torch.device) -> torch.Tensor:
    """Convert equally sized hands to a [batch, num_cards] index tensor."""
    return torch.tensor(
        [[card_to_idx(card) for card in hand] for hand in hands],
        dtype=torch.long,
        device=device,
    )


def deal_random_hands(
    batch_size: int,
    num_cards: int,
    device: torch.device,
    generator: Optional[torch.Generator] = None,
) -> torch.Tensor:
    """Deal batch_size independent hands of distinct cards.

    Returns:
        [batch, num_cards] long tensor of card indices
    """
    if not 0 < num_cards <= NUM_CARDS:
        raise ValueError(f"num_cards must be in 1..{NUM_CARDS}, got {num_cards}")
    keys = torch.rand(batch_size, NUM_CARDS, generator=generator, device=device)
    return keys.argsort(dim=1)[:, :num_cards]


class GPUHandClassifier:
    """Batched hand classifier.

    Keeps lookup tensors on the device to avoid CPU-GPU transfer overhead.
    Follows the same rules as evaluate_hand: a flush needs exactly 5 cards of
    one suit, straights may use the ace high or low, and three pairs count as
    two pair.
    """

    device: torch.device

    # Pre-computed tensors
    straight_ends: torch.Tensor  # [10, 14] - top and bottom rank of each straight
    straight_middles: torch.Tensor  # [10, 14] - the three ranks between them
    royal_mask: torch.Tensor  # [13] - ranks 10..A

    def __init__(self, device: torch.device):
        self.device = device
        self._build_tensors()

    def _build_tensors(self) -> None:
        """Build pre-computed tensors for category computation."""
        ends = []
        middles = []
        for low in range(EXTENDED_RANKS - STRAIGHT_LENGTH + 1):
            high = low + STRAIGHT_LENGTH - 1
            ends.append([i in (low, high) for i in range(EXTENDED_RANKS)])
            middles.append([low < i < high for i in range(EXTENDED_RANKS)])
        self.straight_ends = torch.tensor(ends, dtype=torch.bool, device=self.device)
        self.straight_middles = torch.tensor(middles, dtype=torch.bool, device=self.device)

        royal = torch.zeros(NUM_RANKS, dtype=torch.bool, device=self.device)
        royal[ROYAL_RANK_INDICES] = True
        self.royal_mask = royal

    def has_straight(self, rank_counts: torch.Tensor) -> torch.Tensor:
        """Check each row of [batch, 13] rank counts for a straight.

        Matches the sliding window over the rank-sorted hand: the window's top
        and bottom ranks must be present, and the three ranks between them must
        appear exactly once (a repeat would push the bottom card out of the
        window). The ace is copied below the 2 so A-2-3-4-5 is found as well.
        """
        extended = torch.cat([rank_counts[:, -1:], rank_counts], dim=1)  # [B, 14]
        present = (extended >= 1).unsqueeze(1)
        single = (extended == 1).unsqueeze(1)
        ends_ok = (present | ~self.straight_ends.unsqueeze(0)).all(dim=2)  # [B, 10]
        middles_ok = (single | ~self.straight_middles.unsqueeze(0)).all(dim=2)
        return (ends_ok & middles_ok).any(dim=1)

    def classify_batched(self, hands: torch.Tensor) -> torch.Tensor:
        """Classify a batch of hands.

        Args:
            hands: [batch, num_cards] tensor of card indices (5 to 7 cards)

        Returns:
            [batch] long tensor of Category values
        """
        hands = hands.to(self.device).long()
        ranks = hands % NUM_RANKS
        suits = hands // NUM_RANKS

        rank_onehot = F.one_hot(ranks, NUM_RANKS)  # [B, N, 13]
        rank_counts = rank_onehot.sum(dim=1)  # [B, 13]
        suit_counts = F.one_hot(suits, NUM_SUITS).sum(dim=1)  # [B, 4]

        # Flush: a suit with exactly 5 cards
        flush_suits = suit_counts == FLUSH_SIZE
        is_flush = flush_suits.any(dim=1)
        flush_suit = flush_suits.long().argmax(dim=1)
        in_flush = (suits == flush_suit.unsqueeze(1)) & is_flush.unsqueeze(1)  # [B, N]
        flush_counts = (rank_onehot * in_flush.unsqueeze(2)).sum(dim=1)  # [B, 13]
        flush_presence = flush_counts > 0

        is_straight = self.has_straight(rank_counts)
        is_straight_flush = is_flush & self.has_straight(flush_counts)
        is_royal = is_straight_flush & (flush_presence | ~self.royal_mask).all(dim=1)

        num_pairs = (rank_counts == 2).sum(dim=1)
        has_trips = (rank_counts == 3).any(dim=1)
        has_quads = (rank_counts == 4).any(dim=1)

        # Lowest precedence first so stronger categories override
        overrides = [
            (num_pairs >= 1, Category.PAIR),
            (num_pairs >= 2, Category.TWO_PAIR),
            (has_trips, Category.THREE_OF_A_KIND),
            (is_straight, Category.STRAIGHT),
            (is_flush, Category.FLUSH),
            (has_trips & (num_pairs >= 1), Category.FULL_HOUSE),
            (has_quads, Category.FOUR_OF_A_KIND),
            (is_straight_flush, Category.STRAIGHT_FLUSH),
            (is_royal, Category.ROYAL_FLUSH),
        ]
        categories = torch.full(
            (hands.shape[0],), int(Category.HIGH_CARD), dtype=torch.long, device=self.device
        )
        for condition, category in overrides:
            categories = torch.where(
                condition, torch.full_like(categories, int(category)), categories
            )
        return categories

    def classify_cards(self, hands: Sequence[Sequence[Card]]) -> List[Category]:
        """Classify Card hands (all the same size)."""
        if not hands:
            return []
        categories = self.classify_batched(cards_to_tensor(hands, self.device))
        return [Category(c) for c in categories.tolist()]


def category_counts(categories: torch.Tensor) -> Dict[Category, int]:
    """Tally a [batch] tensor of category values."""
    counts = torch.bincount(categories.flatten().cpu(), minlength=len(Category))
    return {category: int(counts[int(category)]) for category in Category}
