"""Hand scoring and comparison."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator

from core.cards import Card

BLACKJACK = 21
ACE_BONUS = 10


def calculate_hand_score(hand: Iterable[Card]) -> int:
    """
    Calculate the score of a hand.

    Every card is first counted at its base value (Ace = 1). Then each Ace
    is promoted to 11 while doing so keeps the total at or under 21. Bust
    totals are returned unclamped.
    """
    total = 0
    aces = 0

    for card in hand:
        if card.is_ace:
            aces += 1
        total += card.value

    while aces > 0 and total + ACE_BONUS <= BLACKJACK:
        total += ACE_BONUS
        aces -= 1

    return total


@dataclass(frozen=True)
class Hand:
    """An immutable hand of cards, in dealing order."""

    cards: tuple[Card, ...] = ()

    def add_card(self, card: Card) -> "Hand":
        """Return a new hand with the card appended."""
        return Hand(self.cards + (card,))

    @property
    def score(self) -> int:
        """Return the best score for the hand."""
        return calculate_hand_score(self.cards)

    @property
    def is_soft(self) -> bool:
        """
        Check if the hand is soft (has an ace counted as 11).
        """
        if not any(card.is_ace for card in self.cards):
            return False
        total_hard = sum(card.value for card in self.cards)
        return total_hard + ACE_BONUS <= BLACKJACK

    @property
    def is_blackjack(self) -> bool:
        """Check if the hand is a natural blackjack (21 with 2 cards)."""
        return len(self.cards) == 2 and self.score == BLACKJACK

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (score > 21)."""
        return self.score > BLACKJACK

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        if self.is_blackjack:
            return f"{cards_str} (BLACKJACK)"
        if self.is_busted:
            return f"{cards_str} (BUST)"
        if self.is_soft:
            return f"{cards_str} (soft {self.score})"
        return f"{cards_str} ({self.score})"

    def __repr__(self) -> str:
        return f"Hand({list(self.cards)!r}, score={self.score})"


class GameResult(Enum):
    """Terminal outcome of a game."""

    PLAYER_WIN = "player_win"
    DEALER_WIN = "dealer_win"
    DRAW = "draw"

    def __str__(self) -> str:
        return self.value


def compare_hands(player_hand: Hand, dealer_hand: Hand) -> GameResult:
    """
    Compare player and dealer hands.

    A natural blackjack beats any other hand, busting loses to a standing
    hand, two busted hands draw, and otherwise the higher score wins.
    """
    player_bj = player_hand.is_blackjack
    dealer_bj = dealer_hand.is_blackjack

    if player_bj and not dealer_bj:
        return GameResult.PLAYER_WIN
    if dealer_bj and not player_bj:
        return GameResult.DEALER_WIN

    player_busted = player_hand.is_busted
    dealer_busted = dealer_hand.is_busted

    if player_busted and dealer_busted:
        return GameResult.DRAW
    if player_busted:
        return GameResult.DEALER_WIN
    if dealer_busted:
        return GameResult.PLAYER_WIN

    player_score = player_hand.score
    dealer_score = dealer_hand.score
    if player_score > dealer_score:
        return GameResult.PLAYER_WIN
    if dealer_score > player_score:
        return GameResult.DEALER_WIN
    return GameResult.DRAW
