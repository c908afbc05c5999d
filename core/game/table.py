"""A blackjack table: the mutable cell that holds the current game."""

import logging
from random import Random
from typing import Callable

from transitions import Machine

from core.cards import Card
from core.exceptions import InvalidActionError
from core.hand import GameResult
from core.game.engine import (
    determine_game_result,
    player_hits,
    player_stands,
    setup_game,
)
from core.game.events import EventEmitter, EventType, GameEvent
from core.game.state import GameState, Turn

logger = logging.getLogger(__name__)

OUTCOME_EVENTS = {
    GameResult.PLAYER_WIN: EventType.PLAYER_WINS,
    GameResult.DEALER_WIN: EventType.DEALER_WINS,
    GameResult.DRAW: EventType.DRAW,
}


class Table:
    """
    Holds one game and applies player actions to it.

    The rules live in the pure functions of ``core.game.engine``; the table
    only swaps in each successor state, tracks the turn with a state machine
    and publishes events. Actions return False instead of raising when the
    turn does not allow them.
    """

    STATES = [t.value for t in Turn]

    TRANSITIONS = [
        {"trigger": "player_action", "source": "player_turn", "dest": "player_turn"},
        {"trigger": "player_done", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "new_game", "source": "*", "dest": "player_turn"},
    ]

    def __init__(
        self,
        rng: Random | None = None,
        events: EventEmitter | None = None,
    ) -> None:
        """
        Initialize a table and deal the first game.

        Args:
            rng: Random number generator for reproducible deals
            events: Emitter to publish on (a new one if not provided)
        """
        self._rng = rng
        self.events = events or EventEmitter()
        self.game_state = setup_game(self._rng)

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="player_turn",
            auto_transitions=False,
            model_attribute="_machine_state",
        )
        self._announce_deal()

    @property
    def state(self) -> Turn:
        """Get the current turn."""
        return Turn(self._machine_state)  # type: ignore

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> Callable[[], None]:
        """Subscribe to table events; call the result to unsubscribe."""
        return self.events.subscribe(handler, event_type)

    def _commit(self, new_state: GameState) -> None:
        new_state.validate()
        self.game_state = new_state

    def _reject(self, action: str, exc: InvalidActionError) -> None:
        logger.warning("Rejected %s: %s", action, exc)
        self.events.emit_new(
            EventType.INVALID_ACTION,
            message=str(exc),
            state=self.state.name,
        )

    def _announce_deal(self) -> None:
        self.events.emit_new(
            EventType.GAME_STARTED,
            cards_remaining=self.game_state.cards_remaining,
        )
        for card in self.game_state.player_hand:
            self.events.emit_new(EventType.CARD_DEALT, card=str(card), hand="player")
        for card, visible in zip(self.game_state.dealer_hand, self.dealer_visible_cards):
            self.events.emit_new(
                EventType.CARD_DEALT,
                card=str(card) if visible is not None else "??",
                hand="dealer",
            )

    def hit(self) -> bool:
        """Player hits (takes another card)."""
        try:
            new_state = player_hits(self.game_state)
        except InvalidActionError as exc:
            self._reject("hit", exc)
            return False

        self._commit(new_state)
        self.player_action()

        hand = new_state.player_hand
        self.events.emit_new(EventType.CARD_DEALT, card=str(hand.cards[-1]), hand="player")
        self.events.emit_new(EventType.PLAYER_HIT, hand_value=hand.score)
        if hand.is_busted:
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_value=hand.score)
        return True

    def stand(self) -> bool:
        """Player stands and the dealer plays."""
        previous = self.game_state
        try:
            new_state = player_stands(previous)
        except InvalidActionError as exc:
            self._reject("stand", exc)
            return False

        self._commit(new_state)
        self.player_done()

        self.events.emit_new(EventType.PLAYER_STAND, hand_value=new_state.player_hand.score)
        self.events.emit_new(
            EventType.DEALER_REVEALS,
            card=str(previous.dealer_hand.cards[0]),
            hand_value=previous.dealer_hand.score,
        )

        dealer_hand = new_state.dealer_hand
        if len(dealer_hand) > len(previous.dealer_hand):
            self.events.emit_new(EventType.CARD_DEALT, card=str(dealer_hand.cards[-1]), hand="dealer")
            self.events.emit_new(EventType.DEALER_HITS, hand_value=dealer_hand.score)
        else:
            self.events.emit_new(EventType.DEALER_STANDS, hand_value=dealer_hand.score)

        result = determine_game_result(new_state)
        logger.info(
            "Game over: player %d, dealer %d, %s",
            new_state.player_hand.score,
            dealer_hand.score,
            result,
        )
        self.events.emit_new(
            OUTCOME_EVENTS[result],
            player_score=new_state.player_hand.score,
            dealer_score=dealer_hand.score,
        )
        return True

    def reset(self) -> None:
        """Discard the current game and deal a new one."""
        self._commit(setup_game(self._rng))
        self.new_game()
        self.events.clear_history()
        self._announce_deal()

    @property
    def can_hit(self) -> bool:
        """Check if hitting is allowed."""
        return self.state == Turn.PLAYER_TURN

    @property
    def can_stand(self) -> bool:
        """Check if standing is allowed."""
        return self.state == Turn.PLAYER_TURN

    @property
    def result(self) -> GameResult | None:
        """Return the outcome, or None while the player is still playing."""
        if self.state == Turn.PLAYER_TURN:
            return None
        return determine_game_result(self.game_state)

    @property
    def player_score(self) -> int:
        """Return the player's score."""
        return self.game_state.player_hand.score

    @property
    def dealer_score(self) -> int:
        """Return the dealer's score, including the hole card."""
        return self.game_state.dealer_hand.score

    @property
    def dealer_visible_cards(self) -> list[Card | None]:
        """
        Return the dealer's cards as the player sees them.

        During the player's turn the first dealer card is face down and
        shows as None.
        """
        cards: list[Card | None] = list(self.game_state.dealer_hand)
        if self.state == Turn.PLAYER_TURN and cards:
            cards[0] = None
        return cards

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards left in the deck."""
        return self.game_state.cards_remaining
