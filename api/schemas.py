"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, ConfigDict
from typing import Literal


class ActionRequest(BaseModel):
    """Request for player action."""

    action: Literal["hit", "stand"]


class CardResponse(BaseModel):
    """Card representation; a face-down card has no rank or suit."""

    model_config = ConfigDict(from_attributes=True)

    rank: str | None
    suit: str | None
    face_up: bool = True


class HandResponse(BaseModel):
    """Hand representation; score is None while any card is face down."""

    cards: list[CardResponse]
    score: int | None


class TableResponse(BaseModel):
    """Current table state."""

    turn: Literal["player_turn", "dealer_turn"]
    player_hand: HandResponse
    dealer_hand: HandResponse
    cards_remaining: int
    can_hit: bool
    can_stand: bool
    result: Literal["player_win", "dealer_win", "draw"] | None


class SessionResponse(BaseModel):
    """A newly created session."""

    session_id: str
