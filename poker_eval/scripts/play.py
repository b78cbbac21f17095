#!/usr/bin/env python3
"""
Type in a hand (or let the deck deal one) and see its category.

Usage:
    python -m poker_eval.scripts.play
    python -m poker_eval.scripts.play --variant holdem
    python -m poker_eval.scripts.play --deal --seed 7

Input tips:
- "AS KD 10H 3c 3d": cards as rank + suit, case-insensitive
- Enter on an empty line: deal random cards for that step
- "quit": exit
"""

from __future__ import annotations

import argparse
import logging
from typing import Callable, List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.text import Text
from rich import box

from poker_eval.engine import (
    USAGE_HINT,
    Deck,
    Game,
    ParseError,
    Round,
    Variant,
    prompt_for_cards,
)
from poker_eval.rules import Card, Suit, sort_cards

console = Console()
logger = logging.getLogger(__name__)

SUIT_STYLES = {
    Suit.HEART: "bold red1",
    Suit.DIAMOND: "bold red1",
    Suit.CLUB: "bold green1",
    Suit.SPADE: "bold cyan1",
}


class QuitRequested(Exception):
    """The player typed 'quit'."""


def card_text(cards: List[Card]) -> Text:
    """Render cards as colored symbols."""
    text = Text()
    for i, card in enumerate(cards):
        if i:
            text.append(" ")
        text.append(str(card), style=SUIT_STYLES.get(card.suit, "bold"))
    return text


def ask_cards(
    ask: Callable[[], str],
    deck: Deck,
    count: int,
    out: Console = console,
) -> List[Card]:
    """Read `count` cards from the player, dealing them if the line is empty.

    Parse errors print the usage hint and ask again.

    Raises:
        QuitRequested: If the player typed 'quit'
    """

    def read_line() -> str:
        line = ask().strip()
        if line.lower() in ("q", "quit", "exit"):
            raise QuitRequested()
        if not line:
            # Picked, not dealt: parsing the tokens takes them out of the deck
            picked = deck.rng.sample(deck.cards, count)
            return " ".join(f"{c.label}{c.suit.letter}" for c in picked)
        return line

    def show_error(error: ParseError) -> None:
        out.print(Text(str(error), style="red"))
        out.print(f"[dim]{USAGE_HINT}[/dim]")

    return prompt_for_cards(read_line, deck=deck, count=count, on_error=show_error)


def show_round(played: Round, out: Console = console) -> None:
    body = Text()
    if played.community:
        body.append("Community: ")
        body.append_text(card_text(list(played.community)))
        body.append("\n")
        body.append("Pocket:    ")
    else:
        body.append("Cards:     ")
    body.append_text(card_text(sort_cards(played.pocket, descending=True)))
    body.append("\n\n")
    body.append(played.result.describe(), style="bold yellow")
    out.print(Panel(body, title=played.category.tag, box=box.ROUNDED))


def play_once(
    game: Game,
    ask: Optional[Callable[[], str]] = None,
    out: Console = console,
) -> Round:
    """Play one round: read (or deal) the cards, evaluate and show the result."""
    game.deck.reset()
    if ask is None:
        pocket, community = game.deal()
    else:
        pocket_prompt = "Your cards" if game.variant is Variant.FIVE_CARD_DRAW else "Pocket cards"
        out.print(f"[bold]{pocket_prompt} ({game.variant.pocket_size}):[/bold]")
        pocket = ask_cards(ask, game.deck, game.variant.pocket_size, out)
        community = []
        if game.variant.community_size:
            out.print(f"[bold]Community cards ({game.variant.community_size}):[/bold]")
            community = ask_cards(ask, game.deck, game.variant.community_size, out)

    played = game.play_round(pocket, community)
    logger.debug("Played %s", played.result)
    show_round(played, out)
    return played


def main():
    parser = argparse.ArgumentParser(description="Classify poker hands interactively")
    parser.add_argument(
        "--variant",
        choices=[v.value for v in Variant],
        default=Variant.FIVE_CARD_DRAW.value,
        help="draw: 5 cards; holdem: 2 pocket + 5 community (default: draw)",
    )
    parser.add_argument("--deal", action="store_true", help="Deal one random hand and exit")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for dealing")
    args = parser.parse_args()

    game = Game(variant=Variant(args.variant), seed=args.seed)

    if args.deal:
        play_once(game)
        return

    console.print(Panel("[bold cyan]Poker Hand Classifier[/bold cyan]", box=box.HEAVY))
    console.print(f"[dim]{USAGE_HINT} Empty line deals random cards, 'quit' exits.[/dim]\n")

    try:
        while True:
            play_once(game, ask=lambda: Prompt.ask(">"))
    except (QuitRequested, KeyboardInterrupt, EOFError):
        console.print("\n[dim]Bye.[/dim]")


if __name__ == "__main__":
    main()
