# -*- coding: utf-8 -*-
"""
Event bus
Structured, observer-style notifications of everything the engine does, so
callers can route them to any log sink or view without the engine knowing.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any, Callable, Hashable
from collections import defaultdict
import logging
import threading

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Engine event types"""
    # Run lifecycle
    PLAYER_INITIALIZED = auto()
    PLAYER_REMOVED = auto()

    # Deck cycle
    DECK_SHUFFLED = auto()
    CARDS_DRAWN = auto()
    DRAW_EXHAUSTED = auto()     # deck and discard both empty

    # Cards
    CARD_PLAYED = auto()
    COHESION_TRIGGERED = auto()
    CARD_ACQUIRED = auto()      # bought with Inspiration
    CARD_GAINED = auto()        # added by a card effect

    # Turn
    TURN_RESET = auto()

    # Failed operations (unknown player / card, bad index, unaffordable)
    ACTION_REJECTED = auto()


@dataclass
class GameEvent:
    """
    Event record
    Carries the event type plus free-form data
    """
    event_type: EventType
    data: Dict[str, Any] = field(default_factory=dict)

    # Shortcuts for common fields
    @property
    def player_id(self) -> Optional[Hashable]:
        return self.data.get('player_id')

    @property
    def card_id(self) -> Optional[str]:
        return self.data.get('card_id')

    @property
    def message(self) -> str:
        return self.data.get('message', '')

    @property
    def status(self) -> Optional[str]:
        return self.data.get('status')


# Handler signature
EventHandler = Callable[[GameEvent], None]


class EventBus:
    """
    Event bus
    Publishes events to subscribers
    """

    def __init__(self, max_history: int = 100):
        # event type -> [(priority, handler)]
        self._handlers: Dict[EventType, List[tuple[int, EventHandler]]] = defaultdict(list)
        # handlers listening to every event
        self._global_handlers: List[tuple[int, EventHandler]] = []
        self._event_history: List[GameEvent] = []
        self._max_history: int = max_history
        # engines publish from many player threads
        self._history_lock = threading.Lock()

    def subscribe(self, event_type: EventType, handler: EventHandler,
                  priority: int = 0) -> None:
        """
        Subscribe to one event type

        The engine publishes after releasing the player's lock, so a handler
        may call back into the engine.

        Args:
            event_type: event type
            handler: callback
            priority: higher runs first
        """
        self._handlers[event_type].append((priority, handler))
        self._handlers[event_type].sort(key=lambda x: x[0], reverse=True)

    def subscribe_all(self, handler: EventHandler, priority: int = 0) -> None:
        """Subscribe to every event"""
        self._global_handlers.append((priority, handler))
        self._global_handlers.sort(key=lambda x: x[0], reverse=True)

    def unsubscribe(self, event_type: EventType, handler: EventHandler) -> None:
        """Unsubscribe from one event type"""
        self._handlers[event_type] = [
            (p, h) for p, h in self._handlers[event_type] if h != handler
        ]

    def unsubscribe_all(self, handler: EventHandler) -> None:
        """Unsubscribe a handler from everything"""
        self._global_handlers = [
            (p, h) for p, h in self._global_handlers if h != handler
        ]
        for event_type in list(self._handlers):
            self.unsubscribe(event_type, handler)

    def publish(self, event: GameEvent) -> GameEvent:
        """
        Publish an event

        A failing handler is logged and does not stop the others.

        Args:
            event: the event

        Returns:
            the same event
        """
        with self._history_lock:
            self._event_history.append(event)
            if len(self._event_history) > self._max_history:
                self._event_history = self._event_history[-self._max_history:]

        handlers = self._global_handlers + self._handlers.get(event.event_type, [])
        for _, handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception("Event handler failed for %s", event.event_type.name)

        return event

    def emit(self, event_type: EventType, **kwargs) -> GameEvent:
        """
        Shortcut: build and publish an event

        Args:
            event_type: event type
            **kwargs: event data

        Returns:
            the published event
        """
        return self.publish(GameEvent(event_type=event_type, data=kwargs))

    def clear(self) -> None:
        """Drop every subscription"""
        self._handlers.clear()
        self._global_handlers.clear()

    def get_history(self, count: int = 10) -> List[GameEvent]:
        """Most recent events, oldest first"""
        if count <= 0:
            return []
        with self._history_lock:
            return self._event_history[-count:]

    def history_of(self, event_type: EventType) -> List[GameEvent]:
        """Recorded events of one type, oldest first"""
        with self._history_lock:
            return [e for e in self._event_history if e.event_type == event_type]
