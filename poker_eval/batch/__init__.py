"""Batched hand classification on PyTorch tensors."""

from .gpu_classifier import (
    GPUHandClassifier,
    NUM_CARDS,
    card_to_idx,
    idx_to_card,
    cards_to_tensor,
    deal_random_hands,
    category_counts,
)

__all__ = [
    "GPUHandClassifier",
    "NUM_CARDS",
    "card_to_idx",
    "idx_to_card",
    "cards_to_tensor",
    "deal_random_hands",
    "category_counts",
]
