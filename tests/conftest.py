"""Pytest fixtures for blackjack rules engine tests."""

import pytest
from random import Random

from core.cards import Card, Rank, Suit, new_deck
from core.hand import Hand
from core.game import GameState, Table, Turn, setup_game


def make_hand(*ranks: Rank) -> Hand:
    """Build a hand from ranks, cycling suits so cards stay unique."""
    suits = list(Suit)
    return Hand(tuple(Card(suits[i % len(suits)], rank) for i, rank in enumerate(ranks)))


def hand_of(*codes: str) -> Hand:
    """Build a hand from card codes such as 'AS' or 'K♥'."""
    return Hand(tuple(Card.from_string(code) for code in codes))


def make_state(
    player: Hand,
    dealer: Hand,
    turn: Turn = Turn.PLAYER_TURN,
) -> GameState:
    """
    Build a state whose deck holds every card not in either hand.

    Dealer cards that clash with a player card move to a free suit of the
    same rank, so scores are unchanged.
    """
    held = set(player)
    dealer_cards = []
    for card in dealer:
        for suit in (card.suit, *Suit):
            candidate = Card(suit, card.rank)
            if candidate not in held:
                break
        held.add(candidate)
        dealer_cards.append(candidate)
    dealer = Hand(tuple(dealer_cards))

    deck = tuple(card for card in new_deck() if card not in held)
    return GameState(player_hand=player, dealer_hand=dealer, card_deck=deck, turn=turn)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def game_state(rng):
    """A freshly dealt game."""
    return setup_game(rng)


@pytest.fixture
def table(rng):
    """A table with a freshly dealt game."""
    return Table(rng=rng)


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    return hand_of("AS", "KH")


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return hand_of("AS", "6H")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return hand_of("10S", "6H")


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return hand_of("10S", "6H", "KC")


@pytest.fixture(name="make_hand")
def make_hand_fixture():
    """Factory for hands built from ranks."""
    return make_hand


@pytest.fixture(name="hand_of")
def hand_of_fixture():
    """Factory for hands built from card codes."""
    return hand_of


@pytest.fixture(name="make_state")
def make_state_fixture():
    """Factory for states built from two hands."""
    return make_state
