"""Live deck with dealing, removal and reset.

The deck starts with the 52 standard cards. Dealing or removing cards moves
them to the dealt pile; reset() returns every dealt card to the deck.
"""

import random
from typing import Iterable, List, Optional

from poker_eval.rules import Card, Suit, create_standard_deck


class Deck:
    """A standard 52-card deck that tracks which cards are still available.

    Attributes:
        cards: Cards still available, in standard deck order
        dealt: Cards dealt or removed since the last reset
        rng: Random number generator used for dealing
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random(seed)
        self.cards: List[Card] = create_standard_deck()
        self.dealt: List[Card] = []

    def __len__(self) -> int:
        return len(self.cards)

    def __contains__(self, card: Card) -> bool:
        return card in self.cards

    def deal(self, n: int) -> List[Card]:
        """Remove and return n random cards.

        Raises:
            ValueError: If fewer than n cards remain
        """
        if n < 0:
            raise ValueError(f"Cannot deal {n} cards")
        if n > len(self.cards):
            raise ValueError(f"Cannot deal {n} cards, only {len(self.cards)} left")

        hand = self.rng.sample(self.cards, n)
        self.remove_cards(hand)
        return hand

    def remove_cards(self, cards: Iterable[Card]) -> None:
        """Remove specific cards from the deck.

        Raises:
            ValueError: If a card is not available
        """
        for card in cards:
            if card not in self.cards:
                raise ValueError(f"{card.name} is not in the deck")
            self.cards.remove(card)
            self.dealt.append(card)

    def find(self, rank: int, suit: Suit) -> Optional[Card]:
        """Look up an available card by rank and suit."""
        for card in self.cards:
            if card.rank == rank and card.suit == suit:
                return card
        return None

    def reset(self) -> None:
        """Return all dealt cards to the deck."""
        self.cards = create_standard_deck()
        self.dealt = []
