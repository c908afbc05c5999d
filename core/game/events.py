"""Game events published by a table."""

import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Any, Callable

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Types of game events."""

    GAME_STARTED = auto()
    CARD_DEALT = auto()

    # Player actions
    PLAYER_HIT = auto()
    PLAYER_BUSTS = auto()
    PLAYER_STAND = auto()

    # Dealer
    DEALER_REVEALS = auto()
    DEALER_HITS = auto()
    DEALER_STANDS = auto()

    # Outcomes
    PLAYER_WINS = auto()
    DEALER_WINS = auto()
    DRAW = auto()

    INVALID_ACTION = auto()


@dataclass(frozen=True)
class GameEvent:
    """
    Immutable game event.

    Events carry what happened at a table to whoever renders it.
    """

    event_type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"{self.event_type.name}: {self.data}"


EventHandler = Callable[[GameEvent], None]

DEFAULT_HISTORY_SIZE = 256


class EventEmitter:
    """
    Delivers table events to subscribers and keeps a rolling log.

    Subscriptions are kept as ``(event_type, handler)`` pairs in the order
    they were made, and handlers run in that order. A ``None`` event type
    matches every event. The log holds only the latest ``history_size``
    events, so a long-lived table cannot grow it without bound.
    """

    def __init__(self, history_size: int = DEFAULT_HISTORY_SIZE) -> None:
        self._subscriptions: list[tuple[EventType | None, EventHandler]] = []
        self._recent: deque[GameEvent] = deque(maxlen=history_size)

    def subscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> Callable[[], None]:
        """
        Subscribe to events.

        Args:
            handler: Called with each matching event
            event_type: Event type to receive, or None for every event

        Returns:
            A callable that cancels this subscription
        """
        subscription = (event_type, handler)
        self._subscriptions.append(subscription)
        return lambda: self._drop(subscription)

    def unsubscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """Remove a handler; unknown handlers are ignored."""
        self._drop((event_type, handler))

    def _drop(self, subscription: tuple[EventType | None, EventHandler]) -> None:
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)

    def emit(self, event: GameEvent) -> None:
        """Log an event and deliver it to matching subscribers."""
        self._recent.append(event)
        logger.debug("Event %s", event)

        # Handlers may unsubscribe while the event is being delivered
        for event_type, handler in list(self._subscriptions):
            if event_type is None or event_type is event.event_type:
                handler(event)

    def emit_new(self, event_type: EventType, **data: Any) -> GameEvent:
        """Create, emit and return a new event."""
        event = GameEvent(event_type=event_type, data=data)
        self.emit(event)
        return event

    @property
    def history(self) -> list[GameEvent]:
        """The retained events, oldest first."""
        return list(self._recent)

    def clear_history(self) -> None:
        """Forget every retained event."""
        self._recent.clear()
