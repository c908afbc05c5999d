"""Blackjack rules engine - pure functions over GameState."""

import logging
from dataclasses import replace
from random import Random

from core.cards import new_deck, shuffle, take_card
from core.exceptions import InvalidActionError
from core.hand import GameResult, Hand, calculate_hand_score, compare_hands
from core.game.state import GameState, Turn, is_valid_transition

logger = logging.getLogger(__name__)

DEALER_HITS_ON_OR_BELOW = 16


def setup_game(rng: Random | None = None) -> GameState:
    """
    Deal a new game.

    The player gets the top two cards of a freshly shuffled deck and the
    dealer the next two.

    Args:
        rng: Random number generator for reproducible deals

    Returns:
        A new state in the player's turn
    """
    deck = shuffle(new_deck(), rng)

    player_hand = Hand()
    dealer_hand = Hand()
    for _ in range(2):
        card, deck = take_card(deck)
        player_hand = player_hand.add_card(card)
    for _ in range(2):
        card, deck = take_card(deck)
        dealer_hand = dealer_hand.add_card(card)

    logger.debug("Dealt player %s, dealer %s", player_hand, dealer_hand)
    return GameState(
        player_hand=player_hand,
        dealer_hand=dealer_hand,
        card_deck=deck,
        turn=Turn.PLAYER_TURN,
    )


def _require_transition(state: GameState, to_turn: Turn, action: str) -> None:
    if not is_valid_transition(state.turn, to_turn):
        raise InvalidActionError(f"Cannot {action} during {state.turn}")


def player_hits(state: GameState) -> GameState:
    """
    Player takes another card.

    No bust check happens here; the turn stays with the player.

    Raises:
        InvalidActionError: If it is not the player's turn
        DeckExhaustedError: If the deck is empty
    """
    _require_transition(state, Turn.PLAYER_TURN, "hit")

    card, remaining = take_card(state.card_deck)
    player_hand = state.player_hand.add_card(card)
    logger.debug("Player hits %s, now %d", card, player_hand.score)
    return replace(state, player_hand=player_hand, card_deck=remaining)


def player_stands(state: GameState) -> GameState:
    """
    Player ends their turn and play passes to the dealer.

    A dealer on 16 or less draws exactly one card. The dealer does not keep
    drawing to 17 within a single stand.

    Raises:
        InvalidActionError: If it is not the player's turn
        DeckExhaustedError: If the dealer must draw from an empty deck
    """
    _require_transition(state, Turn.DEALER_TURN, "stand")

    if calculate_hand_score(state.dealer_hand) > DEALER_HITS_ON_OR_BELOW:
        logger.debug("Dealer stands on %d", state.dealer_hand.score)
        return replace(state, turn=Turn.DEALER_TURN)

    card, remaining = take_card(state.card_deck)
    dealer_hand = state.dealer_hand.add_card(card)
    logger.debug("Dealer hits %s, now %d", card, dealer_hand.score)
    return replace(
        state,
        dealer_hand=dealer_hand,
        card_deck=remaining,
        turn=Turn.DEALER_TURN,
    )


def determine_game_result(state: GameState) -> GameResult:
    """
    Decide the outcome of a game.

    Always returns a concrete result, whatever the turn; callers decide when
    the result is meaningful.
    """
    return compare_hands(state.player_hand, state.dealer_hand)
