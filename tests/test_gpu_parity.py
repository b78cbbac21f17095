"""Parity checks for the batched classifier against the reference evaluator.

Every hand classified on tensors should get exactly the category that
evaluate_hand gives the same cards.
"""

from typing import List
import random

import pytest
import torch

from poker_eval.batch import (
    GPUHandClassifier,
    NUM_CARDS,
    card_to_idx,
    idx_to_card,
    cards_to_tensor,
    deal_random_hands,
    category_counts,
)
from poker_eval.rules import Card, Category, classify, create_standard_deck, make_cards_from_string


CURATED_HANDS = [
    ("JS AS 10S QS KS", Category.ROYAL_FLUSH),
    ("4S 5S AS 2S 3S", Category.STRAIGHT_FLUSH),
    ("JS 8S 10S 7S 9S", Category.STRAIGHT_FLUSH),
    ("2S 2H 2D 2C 7D", Category.FOUR_OF_A_KIND),
    ("2S 2H 3D 3C 3H", Category.FULL_HOUSE),
    ("2S KS AS QS 7S", Category.FLUSH),
    ("JS 8H 9C 10D 7S", Category.STRAIGHT),
    ("2S AH 3C 5D 4S", Category.STRAIGHT),
    ("2S 2H 4H 2C 7D", Category.THREE_OF_A_KIND),
    ("2S 2H 4H 4C 7D", Category.TWO_PAIR),
    ("2S 2H 4H JC 7D", Category.PAIR),
    ("2S 8H 4H JC 7D", Category.HIGH_CARD),
    ("JS 8H 9C 10D 7S AS KC", Category.STRAIGHT),
    ("10H JH QH KH AH 2D 3S", Category.ROYAL_FLUSH),
    ("AH 2H 3H 4H 5H KD KS", Category.STRAIGHT_FLUSH),
    ("7H 7D 7C 8H 8D 9C 10S", Category.FULL_HOUSE),
    ("2S 2H 4D 4C 6H 6S KD", Category.TWO_PAIR),
    ("3S 3H 3D 2S 2H 2D KC", Category.THREE_OF_A_KIND),
    ("2H 4H 6H 8H 10H QH KD", Category.HIGH_CARD),
    ("9S 8H 8D 7C 6S 5H 2D", Category.PAIR),
    ("9S 9H 8D 7C 6S 5H 2D", Category.STRAIGHT),
    ("9S 8H 7D 6C 5S 5H 2D", Category.STRAIGHT),
    ("AS AD 2H 3C 4D 5S 9H", Category.STRAIGHT),
    ("AS 2H 2D 3C 4D 5S 9H", Category.PAIR),
    ("2H 5H 6H 7H 9H 8C 10D", Category.FLUSH),
]


def _make_random_hand(rng: random.Random, size: int) -> List[Card]:
    deck = create_standard_deck()
    rng.shuffle(deck)
    return deck[:size]


@pytest.fixture
def classifier():
    return GPUHandClassifier(torch.device("cpu"))


def test_card_index_round_trip():
    for idx in range(NUM_CARDS):
        assert card_to_idx(idx_to_card(idx)) == idx
    assert sorted(card_to_idx(c) for c in create_standard_deck()) == list(range(NUM_CARDS))


@pytest.mark.parametrize("cards,expected", CURATED_HANDS)
def test_curated_hands_match_expected(classifier, cards, expected):
    hand = make_cards_from_string(cards)
    assert classify(hand) == expected
    assert classifier.classify_cards([hand]) == [expected]


@pytest.mark.parametrize("size,seed", [(5, 123), (7, 456)])
def test_random_hands_match_cpu(classifier, size, seed):
    rng = random.Random(seed)
    hands = [_make_random_hand(rng, size) for _ in range(500)]

    gpu = classifier.classify_cards(hands)
    cpu = [classify(hand) for hand in hands]

    assert gpu == cpu


def test_batched_dealing_matches_cpu(classifier):
    device = torch.device("cpu")
    generator = torch.Generator(device=device)
    generator.manual_seed(7)
    hands = deal_random_hands(300, 7, device, generator)

    assert hands.shape == (300, 7)
    for row in hands.tolist():
        assert len(set(row)) == 7

    categories = classifier.classify_batched(hands)
    for row, category in zip(hands.tolist(), categories.tolist()):
        cards = [idx_to_card(idx) for idx in row]
        assert classify(cards) == Category(category)


def test_cards_to_tensor_shape():
    hands = [make_cards_from_string("2S 2H 4H JC 7D"), make_cards_from_string("JS AS 10S QS KS")]
    tensor = cards_to_tensor(hands, torch.device("cpu"))
    assert tensor.shape == (2, 5)
    assert tensor.dtype == torch.long


def test_category_counts(classifier):
    hands = [make_cards_from_string(cards) for cards, _ in CURATED_HANDS[:12]]
    tensor = cards_to_tensor(hands, torch.device("cpu"))
    counts = category_counts(classifier.classify_batched(tensor))
    assert sum(counts.values()) == 12
    assert counts[Category.STRAIGHT] == 2
    assert counts[Category.STRAIGHT_FLUSH] == 2
    assert counts[Category.ROYAL_FLUSH] == 1


def test_deal_random_hands_rejects_bad_size():
    with pytest.raises(ValueError):
        deal_random_hands(4, 0, torch.device("cpu"))


def test_empty_input(classifier):
    assert classifier.classify_cards([]) == []
