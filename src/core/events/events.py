"""Scenario construction events.

This module defines the events that builders, directors and loaders publish
while a scenario is being assembled.

Event Design Principles:
- Events are immutable dataclasses with rich object payloads
- Every event names the component that produced it in ``source``
- Events use rich objects (Troop, Map) instead of primitive fields
- Keep event types focused and avoid over-granular events
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING
from abc import ABC
from enum import Enum, auto

if TYPE_CHECKING:
    from ...game.entities import Map, Resource, Troop
    from ...game.scenarios.scenario import StrategyScenario


class EventType(Enum):
    """Types of events that subscribers can listen for."""
    # Builder lifecycle
    SCENARIO_RESET = auto()
    SCENARIO_BUILT = auto()

    # Builder mutations
    MAP_SELECTED = auto()
    TROOPS_ADDED = auto()
    RESOURCES_ADDED = auto()

    # Orchestration
    DIRECTOR_SEQUENCE_STARTED = auto()
    SCENARIO_LOADED = auto()

    # Logging
    LOG_MESSAGE = auto()


@dataclass(frozen=True)
class ScenarioEvent(ABC):
    """Base class for all scenario events."""
    source: str
    event_type: EventType = field(init=False)


@dataclass(frozen=True)
class ScenarioReset(ScenarioEvent):
    """Event emitted when a builder discards its in-progress scenario."""

    def __post_init__(self):
        # Set event_type since dataclass frozen=True prevents normal assignment
        object.__setattr__(self, 'event_type', EventType.SCENARIO_RESET)


@dataclass(frozen=True)
class ScenarioBuilt(ScenarioEvent):
    """Event emitted when a builder hands off a finished scenario."""
    scenario: "StrategyScenario"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.SCENARIO_BUILT)


@dataclass(frozen=True)
class MapSelected(ScenarioEvent):
    """Event emitted when the in-progress scenario receives a map."""
    map: "Map"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.MAP_SELECTED)


@dataclass(frozen=True)
class TroopsAdded(ScenarioEvent):
    """Event emitted when a troop is appended to the in-progress scenario."""
    troop: "Troop"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.TROOPS_ADDED)


@dataclass(frozen=True)
class ResourcesAdded(ScenarioEvent):
    """Event emitted when a resource is appended to the in-progress scenario."""
    resource: "Resource"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.RESOURCES_ADDED)


@dataclass(frozen=True)
class DirectorSequenceStarted(ScenarioEvent):
    """Event emitted when a director begins one of its scripted sequences."""
    sequence_name: str

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.DIRECTOR_SEQUENCE_STARTED)


@dataclass(frozen=True)
class ScenarioLoaded(ScenarioEvent):
    """Event emitted when a scenario definition has been read from disk."""
    scenario_name: str
    file_path: str

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.SCENARIO_LOADED)


@dataclass(frozen=True)
class LogMessage(ScenarioEvent):
    """Free-form log line routed through the event bus."""
    message: str
    category: str = "SYSTEM"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.LOG_MESSAGE)
