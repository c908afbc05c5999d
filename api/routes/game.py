"""Game API endpoints."""

import logging
from random import Random
from typing import Annotated

from fastapi import APIRouter, HTTPException, Header

from api.schemas import (
    ActionRequest,
    CardResponse,
    HandResponse,
    SessionResponse,
    TableResponse,
)
from api.session import create_session, get_session
from config import config
from core.cards import Card
from core.exceptions import DeckExhaustedError
from core.game import Table

logger = logging.getLogger(__name__)

router = APIRouter()


def _new_table() -> Table:
    """Create a table, seeded when BLACKJACK_SEED is set."""
    seed = config.game.seed
    return Table(rng=Random(seed) if seed is not None else None)


def _card_to_response(card: Card | None) -> CardResponse:
    """Convert a card, or a face-down slot, to CardResponse."""
    if card is None:
        return CardResponse(rank=None, suit=None, face_up=False)
    return CardResponse(rank=str(card.rank), suit=str(card.suit))


def _table_response(table: Table) -> TableResponse:
    """Convert a table to the view its player sees."""
    dealer_cards = table.dealer_visible_cards
    dealer_hidden = any(card is None for card in dealer_cards)
    result = table.result

    return TableResponse(
        turn=table.state.value,
        player_hand=HandResponse(
            cards=[_card_to_response(c) for c in table.game_state.player_hand],
            score=table.player_score,
        ),
        dealer_hand=HandResponse(
            cards=[_card_to_response(c) for c in dealer_cards],
            score=None if dealer_hidden else table.dealer_score,
        ),
        cards_remaining=table.cards_remaining,
        can_hit=table.can_hit,
        can_stand=table.can_stand,
        result=result.value if result is not None else None,
    )


async def _get_table(session_id: str) -> Table:
    """Get the table for a session or fail with 404."""
    table = await get_session(session_id)
    if table is None:
        raise HTTPException(status_code=404, detail="Unknown or expired session")
    return table


@router.post("/new")
async def new_game() -> SessionResponse:
    """Create a new game session."""
    session_id = await create_session(_new_table())
    return SessionResponse(session_id=session_id)


@router.get("/state")
async def get_state(
    session_id: Annotated[str, Header(alias="X-Session-ID")],
) -> TableResponse:
    """Get current table state."""
    table = await _get_table(session_id)
    return _table_response(table)


@router.post("/action")
async def player_action(
    request: ActionRequest,
    session_id: Annotated[str, Header(alias="X-Session-ID")],
) -> TableResponse:
    """Execute a player action."""
    table = await _get_table(session_id)

    actions = {
        "hit": table.hit,
        "stand": table.stand,
    }

    try:
        accepted = actions[request.action]()
    except DeckExhaustedError:
        logger.warning("Deck exhausted on %s", request.action)
        raise HTTPException(status_code=409, detail="Out of cards")

    if not accepted:
        raise HTTPException(status_code=400, detail=f"Cannot {request.action} now")

    return _table_response(table)


@router.post("/reset")
async def reset_game(
    session_id: Annotated[str, Header(alias="X-Session-ID")],
) -> TableResponse:
    """Deal a fresh game at the session's table."""
    table = await _get_table(session_id)
    table.reset()
    return _table_response(table)
