"""
Event Bus — Decoupled notifications from the simulation to its observers.

The core never talks to the HUD, the renderer or the diagnostics tool
directly. It emits events; observers subscribe to the types they care
about. Events are queued during a tick and dispatched once the tick has
finished, so an observer always sees a consistent state.

Usage:
    from dollhouse.core.events import EventBus, Event, EventType

    bus = EventBus()
    bus.subscribe(EventType.MESSAGE.value, lambda event: print(event.data["text"]))
    bus.emit(Event(EventType.MESSAGE.value, data={"text": "HELLO!"}))

    # At the end of every tick:
    bus.process(tick)
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional
from enum import Enum

from dollhouse.config import EVENT_HISTORY_CAP
from dollhouse.core.logger import SimLogger


class EventType(Enum):
    """Categories of events in the simulation."""
    # Agent activity
    DECISION = "decision"
    ACTION_STARTED = "action_started"
    ACTION_COMPLETED = "action_completed"
    ARRIVED = "arrived"

    # Sleep cycle
    BEDTIME = "bedtime"
    WOKE_UP = "woke_up"

    # Player
    INTERACTION = "interaction"

    # Companion
    COMPANION_BEHAVIOR = "companion_behavior"

    # UI text
    MESSAGE = "message"


@dataclass
class Event:
    """A single thing that happened in the house."""
    event_type: str                     # EventType value
    data: Dict[str, Any] = field(default_factory=dict)
    tick: int = 0                       # Animation frame it was dispatched on


class EventBus:
    """Central event dispatcher for the simulation."""

    def __init__(self) -> None:
        self.pending: List[Event] = []
        self.history: List[Event] = []
        self._listeners: Dict[str, List[Callable]] = {}
        self._history_cap: int = EVENT_HISTORY_CAP

    def emit(self, event: Event) -> None:
        """Queue an event for dispatch at the end of the current tick."""
        self.pending.append(event)

    def subscribe(self, event_type: str, callback: Callable) -> None:
        """Register an observer for an event type."""
        if event_type not in self._listeners:
            self._listeners[event_type] = []
        self._listeners[event_type].append(callback)

    def process(self, tick: int) -> int:
        """Dispatch all pending events. Returns how many were delivered."""
        events = list(self.pending)
        self.pending = []

        for event in events:
            event.tick = tick
            for callback in self._listeners.get(event.event_type, []):
                try:
                    callback(event)
                except Exception as e:
                    SimLogger().warn(
                        "EVENT", f"Listener error for {event.event_type}: {e}"
                    )
            self.history.append(event)

        # Trim history
        if len(self.history) > self._history_cap:
            self.history = self.history[-self._history_cap:]
        return len(events)

    def get_recent_events(self, n: int = 10,
                          event_type: Optional[str] = None) -> List[Event]:
        """Get recent events, optionally filtered by type."""
        if event_type:
            filtered = [e for e in self.history if e.event_type == event_type]
            return filtered[-n:]
        return self.history[-n:]
