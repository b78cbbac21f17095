"""Tests for the deck, the shorthand parser and round dealing.

Tests cover:
- Deck size, dealing, removal, lookup and reset
- Parsing tokens, parse error variants, live-deck lookups
- Retry loop for interactive input
- Game rounds for 5-card draw and Hold'em
- Simulations reset the deck and never reuse stale results
"""

import pytest

from poker_eval.rules import Card, Category, Suit, make_card, make_cards_from_string
from poker_eval.engine import (
    Deck,
    Game,
    Round,
    SimulationStats,
    Variant,
    ParseError,
    InvalidCardCount,
    InvalidSuitToken,
    InvalidRankToken,
    CardUnavailable,
    parse_card,
    parse_cards,
    prompt_for_cards,
)


def answers(*lines):
    """Fake input source returning the given lines in order."""
    return iter(lines).__next__


class TestDeck:
    """Tests for the live deck."""

    def test_has_52_unique_cards(self):
        deck = Deck(seed=1)
        assert len(deck) == 52
        assert len(set(deck.cards)) == 52

    def test_deal_removes_cards(self):
        deck = Deck(seed=1)
        dealt = deck.deal(5)
        assert len(dealt) == 5
        assert len(deck) == 47
        for card in dealt:
            assert card not in deck
        assert deck.dealt == dealt

    def test_deal_too_many(self):
        deck = Deck(seed=1)
        deck.deal(50)
        with pytest.raises(ValueError):
            deck.deal(3)

    def test_deal_is_deterministic_with_seed(self):
        assert Deck(seed=7).deal(7) == Deck(seed=7).deal(7)

    def test_remove_cards(self):
        deck = Deck()
        card = make_card(14, Suit.SPADE)
        assert card in deck
        deck.remove_cards([card])
        assert card not in deck
        assert len(deck) == 51

    def test_remove_unavailable_card(self):
        deck = Deck()
        card = make_card(14, Suit.SPADE)
        deck.remove_cards([card])
        with pytest.raises(ValueError):
            deck.remove_cards([card])

    def test_find(self):
        deck = Deck()
        assert deck.find(10, Suit.HEART) == make_card(10, Suit.HEART)
        deck.remove_cards([make_card(10, Suit.HEART)])
        assert deck.find(10, Suit.HEART) is None

    def test_reset_returns_dealt_cards(self):
        deck = Deck(seed=3)
        deck.deal(7)
        deck.reset()
        assert len(deck) == 52
        assert deck.dealt == []


class TestParsing:
    """Tests for shorthand card parsing."""

    @pytest.mark.parametrize(
        "token,rank,suit",
        [
            ("AS", 14, Suit.SPADE),
            ("10D", 10, Suit.DIAMOND),
            ("3h", 3, Suit.HEART),
            ("jc", 11, Suit.CLUB),
            ("TC", 10, Suit.CLUB),
        ],
    )
    def test_parse_card(self, token, rank, suit):
        card = parse_card(token)
        assert card.rank == rank
        assert card.suit == suit

    def test_invalid_suit(self):
        with pytest.raises(InvalidSuitToken):
            parse_card("AX")

    def test_invalid_rank(self):
        with pytest.raises(InvalidRankToken):
            parse_card("1S")
        with pytest.raises(InvalidRankToken):
            parse_card("S")

    def test_errors_share_a_base(self):
        for exc in (InvalidCardCount, InvalidSuitToken, InvalidRankToken, CardUnavailable):
            assert issubclass(exc, ParseError)
        assert issubclass(ParseError, ValueError)

    def test_wrong_count(self):
        with pytest.raises(InvalidCardCount) as info:
            parse_cards("AS KS", count=5)
        assert info.value.expected == 5
        assert info.value.actual == 2

    def test_parse_from_deck_removes_cards(self):
        deck = Deck()
        cards = parse_cards("AS KS QS", deck=deck, count=3)
        assert [c.rank for c in cards] == [14, 13, 12]
        assert len(deck) == 49
        assert make_card(14, Suit.SPADE) not in deck

    def test_already_dealt_card_is_unavailable(self):
        deck = Deck()
        parse_cards("AS", deck=deck)
        with pytest.raises(CardUnavailable):
            parse_cards("AS KD", deck=deck)

    def test_repeated_card_leaves_deck_untouched(self):
        deck = Deck()
        with pytest.raises(CardUnavailable):
            parse_cards("AS KD AS", deck=deck)
        assert len(deck) == 52

    def test_make_cards_from_string(self):
        cards = make_cards_from_string("AS 10d 3h")
        assert [c.label for c in cards] == ["A", "10", "3"]


class TestPromptLoop:
    """Tests for the retry-on-error input loop."""

    def test_retries_until_valid(self):
        errors = []
        cards = prompt_for_cards(
            answers("AS KS", "AS KS QS JS XS", "AS KS QS JS 10X", "AS KS QS JS 10S"),
            count=5,
            on_error=errors.append,
        )
        assert len(cards) == 5
        assert [type(e) for e in errors] == [InvalidCardCount, InvalidRankToken, InvalidSuitToken]

    def test_first_answer_valid(self):
        errors = []
        cards = prompt_for_cards(answers("2S 2H 4H JC 7D"), count=5, on_error=errors.append)
        assert len(cards) == 5
        assert errors == []

    def test_max_attempts_reraises_last_error(self):
        with pytest.raises(InvalidRankToken):
            prompt_for_cards(answers("AS KS", "ZZS"), count=1, max_attempts=2)

    def test_failed_attempts_do_not_touch_deck(self):
        deck = Deck()
        prompt_for_cards(answers("AS AS", "AS KS"), deck=deck, count=2)
        assert len(deck) == 50


class TestGame:
    """Tests for dealing and evaluating rounds."""

    def test_draw_round_deals_five(self):
        game = Game(variant=Variant.FIVE_CARD_DRAW, seed=42)
        played = game.play_round()
        assert isinstance(played, Round)
        assert len(played.pocket) == 5
        assert played.community == ()
        assert len(game.deck) == 47

    def test_holdem_round_deals_seven(self):
        game = Game(variant=Variant.HOLDEM, seed=42)
        played = game.play_round()
        assert len(played.pocket) == 2
        assert len(played.community) == 5
        assert len(set(played.cards)) == 7
        assert len(played.result) == 7
        assert len(game.deck) == 45

    def test_deal_returns_pocket_and_community(self):
        game = Game(variant=Variant.HOLDEM, seed=5)
        pocket, community = game.deal()
        assert len(pocket) == 2
        assert len(community) == 5

    def test_given_cards_are_evaluated(self):
        game = Game(variant=Variant.HOLDEM, seed=1)
        pocket = parse_cards("AS AH", deck=game.deck)
        played = game.play_round(pocket=pocket)
        assert played.pocket == tuple(pocket)
        assert played.category >= Category.PAIR
        assert all(card not in played.community for card in pocket)

    def test_wrong_pocket_size(self):
        game = Game(variant=Variant.HOLDEM)
        with pytest.raises(ValueError):
            game.play_round(pocket=make_cards_from_string("AS KS QS"))

    def test_fixed_hand_category(self):
        game = Game(variant=Variant.FIVE_CARD_DRAW)
        played = game.play_round(pocket=make_cards_from_string("2S 2H 3D 3C 3H"), community=[])
        assert played.category == Category.FULL_HOUSE

    def test_verbose_round_prints_result(self, capsys):
        game = Game(variant=Variant.HOLDEM, verbose=True)
        game.play_round(
            pocket=make_cards_from_string("2S 2H"),
            community=make_cards_from_string("4H JC 7D 9S KH"),
        )
        out = capsys.readouterr().out
        assert "Community cards:" in out
        assert "You have a pair of 2s!" in out

    def test_variant_sizes(self):
        assert Variant.FIVE_CARD_DRAW.hand_size == 5
        assert Variant.HOLDEM.pocket_size == 2
        assert Variant.HOLDEM.community_size == 5
        assert Variant.HOLDEM.hand_size == 7


class TestSimulation:
    def test_simulate_counts_every_round(self):
        game = Game(variant=Variant.HOLDEM, seed=11)
        stats = game.simulate(200)
        assert stats.total_rounds == 200
        assert sum(stats.counts.values()) == 200
        assert len(game.deck) == 52

    def test_simulate_is_deterministic(self):
        first = Game(seed=99).simulate(100)
        second = Game(seed=99).simulate(100)
        assert first.counts == second.counts

    def test_rounds_use_fresh_results(self):
        game = Game(variant=Variant.FIVE_CARD_DRAW)
        first = game.play_round(pocket=make_cards_from_string("2S 2H 4H JC 7D"), community=[])
        second = game.play_round(pocket=make_cards_from_string("3S 8H 4D KC 7C"), community=[])
        assert first.category == Category.PAIR
        assert second.category == Category.HIGH_CARD

    def test_stats_frequency(self):
        stats = SimulationStats()
        assert stats.frequency(Category.PAIR) == 0.0
        stats.record(Category.PAIR)
        stats.record(Category.HIGH_CARD)
        stats.record_counts({Category.PAIR: 2, Category.FLUSH: 0})
        assert stats.total_rounds == 4
        assert stats.frequency(Category.PAIR) == pytest.approx(0.75)
