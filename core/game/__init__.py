"""Game engine, state and table."""

from core.game.events import EventEmitter, EventType, GameEvent
from core.game.state import GameState, Turn
from core.game.engine import (
    calculate_hand_score,
    determine_game_result,
    player_hits,
    player_stands,
    setup_game,
)
from core.game.table import Table

__all__ = [
    "EventEmitter",
    "EventType",
    "GameEvent",
    "GameState",
    "Turn",
    "calculate_hand_score",
    "determine_game_result",
    "player_hits",
    "player_stands",
    "setup_game",
    "Table",
]
