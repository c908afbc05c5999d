"""Core blackjack rules engine - 100% UI-agnostic."""

from core.cards import Card, Deck, Rank, Suit, card_value, new_deck, shuffle, take_card
from core.exceptions import (
    BlackjackError,
    DeckExhaustedError,
    InvalidActionError,
    InvariantViolationError,
)
from core.hand import GameResult, Hand, calculate_hand_score

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "card_value",
    "new_deck",
    "shuffle",
    "take_card",
    "BlackjackError",
    "DeckExhaustedError",
    "InvalidActionError",
    "InvariantViolationError",
    "GameResult",
    "Hand",
    "calculate_hand_score",
]
