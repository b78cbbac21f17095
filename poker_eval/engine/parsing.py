"""Shorthand card parsing.

Tokens are a rank label followed by a suit letter, case-insensitive:
"AS", "10d", "3h", "Tc". Parsing errors are reported with a small exception
hierarchy so an interactive caller can print a hint and ask again.
"""

import logging
from typing import Callable, List, Optional

from poker_eval.rules import Card
from poker_eval.rules.ranks import ParseError

logger = logging.getLogger(__name__)

USAGE_HINT = (
    "Enter cards as rank + suit separated by spaces, e.g. 'AS 10D 3H'. "
    "Ranks: 2-10, J, Q, K, A. Suits: S, H, D, C."
)


class InvalidCardCount(ParseError):
    """Wrong number of card tokens."""

    def __init__(self, expected: int, actual: int):
        super().__init__(f"Expected {expected} cards, got {actual}")
        self.expected = expected
        self.actual = actual


class CardUnavailable(ParseError):
    """The card is valid but not in the live deck (already dealt or repeated)."""

    def __init__(self, card: Card):
        super().__init__(f"{card.name} is not available")
        self.card = card


def parse_card(token: str) -> Card:
    """Parse a single shorthand token into a Card.

    Raises:
        InvalidSuitToken: If the last character is not a suit letter
        InvalidRankToken: If the rest is not a rank label
    """
    return Card.from_string(token)


def parse_cards(text: str, deck=None, count: Optional[int] = None) -> List[Card]:
    """Parse space-separated tokens into cards.

    Args:
        text: Shorthand tokens, e.g. "AS KD 10H"
        deck: Optional live Deck; parsed cards are looked up and removed from it
        count: Required number of cards, or None for any number

    Returns:
        List of Card objects

    Raises:
        ParseError: On a bad token, wrong count or unavailable card. The deck
            is left untouched when an error is raised.
    """
    tokens = text.split()
    if count is not None and len(tokens) != count:
        raise InvalidCardCount(count, len(tokens))

    cards = [parse_card(token) for token in tokens]

    if deck is not None:
        live = []
        for card in cards:
            found = deck.find(card.rank, card.suit)
            if found is None or found in live:
                raise CardUnavailable(card)
            live.append(found)
        deck.remove_cards(live)
        cards = live

    return cards


def prompt_for_cards(
    ask: Callable[[], str],
    deck=None,
    count: Optional[int] = None,
    on_error: Optional[Callable[[ParseError], None]] = None,
    max_attempts: Optional[int] = None,
) -> List[Card]:
    """Ask for cards until the answer parses.

    Args:
        ask: Returns the next line of user input
        deck: Optional live Deck to draw the cards from
        count: Required number of cards
        on_error: Called with each ParseError before asking again
        max_attempts: Give up after this many failures (None = keep asking)

    Raises:
        ParseError: The last error, once max_attempts failures have happened
    """
    attempts = 0
    while True:
        try:
            return parse_cards(ask(), deck=deck, count=count)
        except ParseError as e:
            attempts += 1
            logger.debug("Rejected card input (attempt %d): %s", attempts, e)
            if on_error is not None:
                on_error(e)
            if max_attempts is not None and attempts >= max_attempts:
                raise
