"""
Event bus for observing scenario construction.

Builders, directors and loaders publish events here instead of talking to
the log manager directly, following the publisher-subscriber pattern so
that construction code stays free of logging concerns.
"""

import threading
from collections import defaultdict, deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .events import ScenarioEvent, EventType


class EventPriority(Enum):
    """Event processing priorities (lower value is processed first)."""
    CRITICAL = 0
    HIGH = 1
    NORMAL = 2
    LOW = 3


@dataclass
class QueuedEvent:
    """An event waiting in the queue, with delivery metadata."""
    event: "ScenarioEvent"
    priority: EventPriority = EventPriority.NORMAL
    timestamp: datetime = field(default_factory=datetime.now)
    sequence: int = 0

    def __lt__(self, other: "QueuedEvent") -> bool:
        if self.priority.value != other.priority.value:
            return self.priority.value < other.priority.value
        # Same priority keeps publish order
        return self.sequence < other.sequence


EventSubscriber = Callable[["ScenarioEvent"], None]


class EventManager:
    """Central event bus for scenario construction events."""

    def __init__(self, enable_debug_logging: bool = False, history_size: int = 500):
        """Initialize the event manager.

        Args:
            enable_debug_logging: Whether to report bus activity to the debug callback
            history_size: Number of delivered events kept for inspection
        """
        self.enable_debug_logging = enable_debug_logging

        self._subscribers: dict["EventType", list[EventSubscriber]] = defaultdict(list)
        self._universal_subscribers: list[EventSubscriber] = []
        self._event_queue: deque[QueuedEvent] = deque()

        self._events_published = 0
        self._events_processed = 0
        self._event_history: deque[QueuedEvent] = deque(maxlen=history_size)

        self._lock = threading.RLock()
        self._debug_callback: Optional[Callable[[str], None]] = None

    def set_debug_callback(self, callback: Optional[Callable[[str], None]]) -> None:
        """Set a callback function for debug output."""
        self._debug_callback = callback

    def _debug_log(self, message: str) -> None:
        if self.enable_debug_logging and self._debug_callback:
            self._debug_callback(f"[EVENT] {message}")

    def subscribe(
        self,
        event_type: "EventType",
        subscriber: EventSubscriber,
        subscriber_name: Optional[str] = None
    ) -> None:
        """Subscribe to events of a specific type.

        Args:
            event_type: The type of events to subscribe to
            subscriber: Callback invoked with each matching event
            subscriber_name: Optional name used in debug output
        """
        with self._lock:
            self._subscribers[event_type].append(subscriber)

        display = subscriber_name or getattr(subscriber, '__name__', 'anonymous')
        self._debug_log(f"Subscribed {display} to {event_type.name}")

    def subscribe_all(
        self,
        subscriber: EventSubscriber,
        subscriber_name: Optional[str] = None
    ) -> None:
        """Subscribe to every event regardless of type."""
        with self._lock:
            self._universal_subscribers.append(subscriber)

        display = subscriber_name or getattr(subscriber, '__name__', 'anonymous')
        self._debug_log(f"Subscribed {display} to ALL events")

    def unsubscribe(self, event_type: "EventType", subscriber: EventSubscriber) -> bool:
        """Remove a typed subscription.

        Returns:
            True if the subscriber was found and removed
        """
        with self._lock:
            try:
                self._subscribers[event_type].remove(subscriber)
            except ValueError:
                return False
        self._debug_log(f"Unsubscribed from {event_type.name}")
        return True

    def unsubscribe_all(self, subscriber: EventSubscriber) -> bool:
        """Remove a universal subscription."""
        with self._lock:
            try:
                self._universal_subscribers.remove(subscriber)
            except ValueError:
                return False
        return True

    def publish(
        self,
        event: "ScenarioEvent",
        priority: EventPriority = EventPriority.NORMAL
    ) -> None:
        """Queue an event for the next call to process_events()."""
        with self._lock:
            self._events_published += 1
            self._event_queue.append(
                QueuedEvent(event=event, priority=priority, sequence=self._events_published)
            )
        self._debug_log(f"Queued {event.__class__.__name__} from {event.source}")

    def publish_immediate(self, event: "ScenarioEvent") -> None:
        """Deliver an event to subscribers right away."""
        with self._lock:
            self._events_published += 1
            queued = QueuedEvent(
                event=event,
                priority=EventPriority.CRITICAL,
                sequence=self._events_published
            )
        self._process_event(queued)

    def process_events(self, max_events: Optional[int] = None) -> int:
        """Deliver queued events in priority order.

        Args:
            max_events: Maximum number of events to deliver (None for all)

        Returns:
            Number of events delivered
        """
        with self._lock:
            pending = sorted(self._event_queue)
            self._event_queue.clear()

        if max_events is not None and max_events < len(pending):
            with self._lock:
                self._event_queue.extendleft(reversed(pending[max_events:]))
            pending = pending[:max_events]

        for queued in pending:
            self._process_event(queued)
        return len(pending)

    def _process_event(self, queued: QueuedEvent) -> None:
        event = queued.event

        with self._lock:
            self._event_history.append(queued)
            self._events_processed += 1
            subscribers = list(self._subscribers.get(event.event_type, []))
            universal = list(self._universal_subscribers)

        self._debug_log(f"Delivering {event.__class__.__name__} from {event.source}")

        # Subscriber errors propagate to the publisher
        for subscriber in subscribers + universal:
            subscriber(event)

    def clear_queue(self) -> int:
        """Drop all queued events.

        Returns:
            Number of events that were dropped
        """
        with self._lock:
            count = len(self._event_queue)
            self._event_queue.clear()
        return count

    def has_queued_events(self) -> bool:
        with self._lock:
            return len(self._event_queue) > 0

    def get_statistics(self) -> dict[str, Any]:
        """Get event processing statistics."""
        with self._lock:
            return {
                'events_published': self._events_published,
                'events_processed': self._events_processed,
                'events_queued': len(self._event_queue),
                'subscribers_count': sum(len(subs) for subs in self._subscribers.values()),
                'universal_subscribers_count': len(self._universal_subscribers),
            }

    def get_recent_events(self, count: int = 10) -> list[dict[str, Any]]:
        """Describe the most recently delivered events, oldest first."""
        with self._lock:
            recent = list(self._event_history)[-count:]

        return [
            {
                'event_type': queued.event.event_type.name,
                'source': queued.event.source,
                'priority': queued.priority.name,
                'timestamp': queued.timestamp.isoformat(),
            }
            for queued in recent
        ]

    def shutdown(self) -> None:
        """Drop all subscribers, queued events and history."""
        with self._lock:
            self._subscribers.clear()
            self._universal_subscribers.clear()
            self._event_queue.clear()
            self._event_history.clear()
