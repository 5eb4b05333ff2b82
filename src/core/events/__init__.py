"""Event system for publisher-subscriber communication.

This package contains the event-driven plumbing used to observe scenario
construction:
- event_manager.py: Publisher-subscriber event routing and coordination
- events.py: Event definitions emitted by builders and directors
"""

from .event_manager import EventManager, EventPriority, QueuedEvent
from .events import (
    ScenarioEvent,
    EventType,
    ScenarioReset,
    MapSelected,
    TroopsAdded,
    ResourcesAdded,
    ScenarioBuilt,
    DirectorSequenceStarted,
    ScenarioLoaded,
    LogMessage,
)

__all__ = [
    "EventManager",
    "EventPriority",
    "QueuedEvent",
    "ScenarioEvent",
    "EventType",
    "ScenarioReset",
    "MapSelected",
    "TroopsAdded",
    "ResourcesAdded",
    "ScenarioBuilt",
    "DirectorSequenceStarted",
    "ScenarioLoaded",
    "LogMessage",
]
