"""Game turn enumeration and the immutable game state."""

from collections import Counter
from dataclasses import dataclass
from enum import Enum

from core.cards import DECK_SIZE, Card, Deck, new_deck
from core.exceptions import InvariantViolationError
from core.hand import Hand


class Turn(Enum):
    """
    Game phase.

    Flow: PLAYER_TURN → DEALER_TURN
    """

    PLAYER_TURN = "player_turn"

    # Result is read off this phase, there is no separate resolved state
    DEALER_TURN = "dealer_turn"

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# Valid turn transitions
VALID_TRANSITIONS: dict[Turn, list[Turn]] = {
    Turn.PLAYER_TURN: [Turn.PLAYER_TURN, Turn.DEALER_TURN],
    Turn.DEALER_TURN: [],
}


def is_valid_transition(from_turn: Turn, to_turn: Turn) -> bool:
    """
    Check if a turn transition is valid.

    Args:
        from_turn: Current turn
        to_turn: Desired turn

    Returns:
        True if the transition is allowed
    """
    return to_turn in VALID_TRANSITIONS.get(from_turn, [])


@dataclass(frozen=True)
class GameState:
    """
    Snapshot of a game in progress.

    Actions never modify a snapshot; they return a successor.
    """

    player_hand: Hand
    dealer_hand: Hand
    card_deck: Deck
    turn: Turn = Turn.PLAYER_TURN

    @property
    def card_count(self) -> int:
        """Return the number of cards across both hands and the deck."""
        return len(self.player_hand) + len(self.dealer_hand) + len(self.card_deck)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards left to draw."""
        return len(self.card_deck)

    def all_cards(self) -> list[Card]:
        """Return every card held by the state."""
        return [*self.player_hand, *self.dealer_hand, *self.card_deck]

    def validate(self) -> None:
        """
        Check that the state holds exactly one full deck.

        Raises:
            InvariantViolationError: If a card is missing or duplicated
        """
        if self.card_count != DECK_SIZE:
            raise InvariantViolationError(
                f"Expected {DECK_SIZE} cards, found {self.card_count}"
            )
        counts = Counter(self.all_cards())
        duplicates = [card for card, n in counts.items() if n > 1]
        if duplicates:
            raise InvariantViolationError(f"Duplicated cards: {duplicates}")
        missing = set(new_deck()) - counts.keys()
        if missing:
            raise InvariantViolationError(f"Missing cards: {sorted(missing, key=repr)}")
