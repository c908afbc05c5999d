"""Card model and deck construction - immutable card representations."""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from random import Random

from core.exceptions import DeckExhaustedError

logger = logging.getLogger(__name__)

DECK_SIZE = 52


class Suit(Enum):
    """Card suits."""

    CLUBS = auto()
    DIAMONDS = auto()
    HEARTS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        symbols = {
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
        }
        return symbols[self]


class Rank(Enum):
    """Card ranks, valued by face."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        if 2 <= self.value <= 10:
            return str(self.value)
        return {
            Rank.ACE: "A",
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
        }[self]

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE


def card_value(rank: Rank) -> int:
    """
    Return the base scoring value of a rank.

    Aces count 1 here; promotion to 11 happens when a whole hand is scored.
    Face cards count 10.
    """
    if rank.is_ace:
        return 1
    if rank.value <= 10:
        return rank.value
    return 10


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    suit: Suit
    rank: Rank

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.suit.name}, {self.rank.name})"

    @property
    def value(self) -> int:
        """Return the base point value."""
        return card_value(self.rank)

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {str(rank): rank for rank in Rank}
        rank_map["T"] = Rank.TEN

        suit_map = {
            "C": Suit.CLUBS,
            "♣": Suit.CLUBS,
            "D": Suit.DIAMONDS,
            "♦": Suit.DIAMONDS,
            "H": Suit.HEARTS,
            "♥": Suit.HEARTS,
            "S": Suit.SPADES,
            "♠": Suit.SPADES,
        }

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(suit_map[suit_str], rank_map[rank_str])


Deck = tuple[Card, ...]


def new_deck() -> Deck:
    """Return all 52 cards in order, suits outer and ranks inner."""
    return tuple(Card(suit, rank) for suit in Suit for rank in Rank)


def shuffle(deck: Deck, rng: Random | None = None) -> Deck:
    """
    Return a shuffled copy of a deck.

    Args:
        deck: Cards to shuffle (left untouched)
        rng: Random number generator for reproducible orderings

    Returns:
        A new deck holding the same cards in random order
    """
    rng = rng or Random()
    cards = list(deck)
    rng.shuffle(cards)
    return tuple(cards)


def take_card(deck: Deck) -> tuple[Card, Deck]:
    """
    Draw the top card of a deck.

    The top of the deck is its last element.

    Returns:
        The drawn card and the remaining deck

    Raises:
        DeckExhaustedError: If the deck is empty
    """
    if not deck:
        raise DeckExhaustedError("Cannot draw from empty deck")
    card = deck[-1]
    logger.debug("Drew %s, %d cards remain", card, len(deck) - 1)
    return card, deck[:-1]
