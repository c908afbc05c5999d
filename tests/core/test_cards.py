"""Tests for cards, deck construction and drawing."""

import pytest
from collections import Counter
from random import Random

from core.cards import Card, Rank, Suit, card_value, new_deck, shuffle, take_card
from core.exceptions import DeckExhaustedError


class TestCard:
    """Tests for the Card class."""

    def test_card_creation(self):
        """Test creating a card."""
        card = Card(Suit.SPADES, Rank.ACE)
        assert card.rank == Rank.ACE
        assert card.suit == Suit.SPADES

    def test_card_immutability(self):
        """Test that cards are immutable."""
        card = Card(Suit.SPADES, Rank.ACE)
        with pytest.raises(AttributeError):
            card.rank = Rank.KING

    def test_card_value(self):
        """Test card base values."""
        assert Card(Suit.HEARTS, Rank.TWO).value == 2
        assert Card(Suit.HEARTS, Rank.TEN).value == 10
        assert Card(Suit.HEARTS, Rank.JACK).value == 10
        assert Card(Suit.HEARTS, Rank.QUEEN).value == 10
        assert Card(Suit.HEARTS, Rank.KING).value == 10
        assert Card(Suit.HEARTS, Rank.ACE).value == 1

    def test_card_value_for_every_rank(self):
        """Test the rank to value mapping."""
        expected = {
            Rank.ACE: 1, Rank.TWO: 2, Rank.THREE: 3, Rank.FOUR: 4,
            Rank.FIVE: 5, Rank.SIX: 6, Rank.SEVEN: 7, Rank.EIGHT: 8,
            Rank.NINE: 9, Rank.TEN: 10, Rank.JACK: 10, Rank.QUEEN: 10,
            Rank.KING: 10,
        }
        assert {rank: card_value(rank) for rank in Rank} == expected

    def test_card_is_ace(self):
        """Test ace detection."""
        assert Card(Suit.SPADES, Rank.ACE).is_ace
        assert not Card(Suit.SPADES, Rank.KING).is_ace

    def test_card_from_string(self):
        """Test creating cards from strings."""
        assert Card.from_string("AS") == Card(Suit.SPADES, Rank.ACE)
        assert Card.from_string("2H") == Card(Suit.HEARTS, Rank.TWO)
        assert Card.from_string("10D") == Card(Suit.DIAMONDS, Rank.TEN)
        assert Card.from_string("TD") == Card(Suit.DIAMONDS, Rank.TEN)
        assert Card.from_string("kc") == Card(Suit.CLUBS, Rank.KING)

    def test_card_from_string_with_symbols(self):
        """Test creating cards from strings with suit symbols."""
        assert Card.from_string("A♠") == Card(Suit.SPADES, Rank.ACE)
        assert Card.from_string("K♥") == Card(Suit.HEARTS, Rank.KING)

    def test_card_from_string_invalid(self):
        """Test that malformed strings are rejected."""
        with pytest.raises(ValueError):
            Card.from_string("A")
        with pytest.raises(ValueError):
            Card.from_string("1S")
        with pytest.raises(ValueError):
            Card.from_string("AX")

    def test_card_str(self):
        """Test string representation."""
        assert str(Card(Suit.SPADES, Rank.ACE)) == "A♠"
        assert str(Card(Suit.HEARTS, Rank.TEN)) == "10♥"

    def test_card_hash(self):
        """Test that equal cards collapse in sets."""
        cards = {Card(Suit.SPADES, Rank.ACE), Card(Suit.SPADES, Rank.ACE)}
        assert len(cards) == 1


class TestNewDeck:
    """Tests for deck construction."""

    def test_deck_has_52_unique_cards(self):
        """Test that a new deck holds every (suit, rank) pair once."""
        deck = new_deck()
        assert len(deck) == 52
        assert set(deck) == {Card(suit, rank) for suit in Suit for rank in Rank}

    def test_deck_order_is_deterministic(self):
        """Test that suits are outer and ranks inner."""
        deck = new_deck()
        assert deck == new_deck()
        assert deck[0] == Card(Suit.CLUBS, Rank.ACE)
        assert deck[12] == Card(Suit.CLUBS, Rank.KING)
        assert deck[13] == Card(Suit.DIAMONDS, Rank.ACE)
        assert deck[-1] == Card(Suit.SPADES, Rank.KING)


class TestShuffle:
    """Tests for shuffling."""

    def test_shuffle_preserves_cards(self):
        """Test shuffling keeps the multiset of cards."""
        deck = new_deck()
        shuffled = shuffle(deck, Random(42))
        assert Counter(shuffled) == Counter(deck)
        assert shuffled != deck

    def test_shuffle_does_not_mutate_input(self):
        """Test that the input deck is left as it was."""
        deck = new_deck()
        shuffle(deck, Random(7))
        assert deck == new_deck()

    def test_shuffle_reproducible_with_seed(self):
        """Test that equal seeds give equal orderings."""
        assert shuffle(new_deck(), Random(1)) == shuffle(new_deck(), Random(1))

    def test_shuffle_without_rng_varies(self):
        """Test that unseeded shuffles are not all identical."""
        orders = {shuffle(new_deck()) for _ in range(5)}
        assert len(orders) > 1


class TestTakeCard:
    """Tests for drawing from a deck."""

    def test_take_card_from_top(self):
        """Test that the last card is drawn."""
        deck = new_deck()
        card, remaining = take_card(deck)
        assert card == deck[-1]
        assert remaining == deck[:-1]
        assert len(remaining) == 51

    def test_take_card_leaves_input(self):
        """Test that drawing does not shrink the passed deck."""
        deck = new_deck()
        take_card(deck)
        assert len(deck) == 52

    def test_draw_all(self):
        """Test drawing every card."""
        deck = new_deck()
        drawn = []
        while deck:
            card, deck = take_card(deck)
            drawn.append(card)
        assert len(drawn) == 52
        assert set(drawn) == set(new_deck())

    def test_take_card_empty_raises(self):
        """Test that drawing from an empty deck fails fast."""
        with pytest.raises(DeckExhaustedError):
            take_card(())

    def test_exhausted_is_index_error(self):
        """Test that callers catching IndexError still see the failure."""
        with pytest.raises(IndexError):
            take_card(())
