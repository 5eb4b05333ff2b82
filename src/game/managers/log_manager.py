"""
Log management for scenario construction.

This module records builder, director and loader activity as categorized
log messages. Messages arrive through the event bus and are kept in a
bounded buffer that can be filtered or saved to disk.
"""
import os
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Optional, TYPE_CHECKING

from ...core.events import (
    DirectorSequenceStarted,
    EventType,
    LogMessage as LogEvent,
    MapSelected,
    ResourcesAdded,
    ScenarioBuilt,
    ScenarioLoaded,
    TroopsAdded,
)

if TYPE_CHECKING:
    from ...core.events import EventManager, ScenarioEvent


class LogCategory(Enum):
    """Categories for log messages."""
    SYSTEM = auto()     # Startup and housekeeping
    BUILDER = auto()    # Individual builder steps
    DIRECTOR = auto()   # Scripted director sequences
    SCENARIO = auto()   # Finished or loaded scenarios
    DEBUG = auto()
    WARNING = auto()
    ERROR = auto()


CATEGORY_TAGS = {
    LogCategory.SYSTEM: "SYS",
    LogCategory.BUILDER: "BLD",
    LogCategory.DIRECTOR: "DIR",
    LogCategory.SCENARIO: "SCN",
    LogCategory.DEBUG: "DBG",
    LogCategory.WARNING: "WRN",
    LogCategory.ERROR: "ERR",
}


@dataclass
class LogMessage:
    """A single log message with metadata."""
    text: str
    category: LogCategory
    timestamp: datetime = field(default_factory=datetime.now)

    def format(self, include_timestamp: bool = False, include_category: bool = True) -> str:
        """Format the message for display."""
        parts = []

        if include_timestamp:
            parts.append(f"[{self.timestamp.strftime('%H:%M:%S')}]")

        if include_category:
            parts.append(f"[{CATEGORY_TAGS.get(self.category, '???')}]")

        parts.append(self.text)
        return " ".join(parts)


class LogLevel(Enum):
    """Log levels for filtering."""
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


class LogManager:
    """Collects scenario construction messages with categorization and filtering."""

    def __init__(
        self,
        event_manager: "EventManager",
        max_messages: int = 1000,
        default_level: LogLevel = LogLevel.INFO
    ):
        """Initialize the log manager.

        Args:
            event_manager: Event bus whose construction events are logged (required)
            max_messages: Maximum number of messages kept in the buffer
            default_level: Minimum level returned by get_messages()
        """
        self.messages: deque[LogMessage] = deque(maxlen=max_messages)
        self.log_level = default_level
        self.enabled_categories = set(LogCategory)
        self.event_manager = event_manager

        # Builder steps only show at DEBUG
        self.category_levels = {
            LogCategory.DEBUG: LogLevel.DEBUG,
            LogCategory.BUILDER: LogLevel.DEBUG,
            LogCategory.WARNING: LogLevel.WARNING,
            LogCategory.ERROR: LogLevel.ERROR,
        }

        self._setup_event_subscriptions()

    def _setup_event_subscriptions(self) -> None:
        handlers = {
            EventType.MAP_SELECTED: self._handle_map_selected,
            EventType.TROOPS_ADDED: self._handle_troops_added,
            EventType.RESOURCES_ADDED: self._handle_resources_added,
            EventType.SCENARIO_RESET: self._handle_scenario_reset,
            EventType.SCENARIO_BUILT: self._handle_scenario_built,
            EventType.DIRECTOR_SEQUENCE_STARTED: self._handle_director_sequence,
            EventType.SCENARIO_LOADED: self._handle_scenario_loaded,
            EventType.LOG_MESSAGE: self._handle_log_message,
        }
        for event_type, handler in handlers.items():
            self.event_manager.subscribe(
                event_type,
                handler,
                subscriber_name=f"LogManager.{event_type.name.lower()}"
            )

    def _handle_map_selected(self, event: "ScenarioEvent") -> None:
        if isinstance(event, MapSelected):
            self.builder(f"{event.source}: map set to {event.map}")

    def _handle_troops_added(self, event: "ScenarioEvent") -> None:
        if isinstance(event, TroopsAdded):
            self.builder(f"{event.source}: added troops {event.troop}")

    def _handle_resources_added(self, event: "ScenarioEvent") -> None:
        if isinstance(event, ResourcesAdded):
            self.builder(f"{event.source}: added resources {event.resource}")

    def _handle_scenario_reset(self, event: "ScenarioEvent") -> None:
        self.debug(f"{event.source}: started a new scenario")

    def _handle_scenario_built(self, event: "ScenarioEvent") -> None:
        if isinstance(event, ScenarioBuilt):
            scenario = event.scenario
            self.scenario(
                f"{event.source}: built scenario with {len(scenario.troops)} troop groups "
                f"and {len(scenario.resources)} resources"
            )

    def _handle_director_sequence(self, event: "ScenarioEvent") -> None:
        if isinstance(event, DirectorSequenceStarted):
            self.director(f"{event.source}: running '{event.sequence_name}' sequence")

    def _handle_scenario_loaded(self, event: "ScenarioEvent") -> None:
        if isinstance(event, ScenarioLoaded):
            self.scenario(f"Loaded scenario '{event.scenario_name}' from {event.file_path}")

    def _handle_log_message(self, event: "ScenarioEvent") -> None:
        if isinstance(event, LogEvent):
            try:
                category = LogCategory[event.category.upper()]
            except KeyError:
                category = LogCategory.SYSTEM
            self.log(event.message, category)

    def log(self, text: str, category: LogCategory = LogCategory.SYSTEM) -> None:
        """Add a message to the log.

        Args:
            text: The message text
            category: The category of the message
        """
        self.messages.append(LogMessage(text=text, category=category))

    def system(self, text: str) -> None:
        self.log(text, LogCategory.SYSTEM)

    def builder(self, text: str) -> None:
        self.log(text, LogCategory.BUILDER)

    def director(self, text: str) -> None:
        self.log(text, LogCategory.DIRECTOR)

    def scenario(self, text: str) -> None:
        self.log(text, LogCategory.SCENARIO)

    def debug(self, text: str) -> None:
        self.log(text, LogCategory.DEBUG)

    def warning(self, text: str) -> None:
        self.log(text, LogCategory.WARNING)

    def error(self, text: str) -> None:
        self.log(text, LogCategory.ERROR)

    def get_messages(self, count: Optional[int] = None,
                     categories: Optional[set[LogCategory]] = None) -> list[LogMessage]:
        """Get recent messages, optionally filtered by category.

        Args:
            count: Maximum number of messages to return (None for all)
            categories: Set of categories to include (None applies the log level)

        Returns:
            List of recent messages, oldest first
        """
        if categories:
            filtered = [msg for msg in self.messages
                        if msg.category in categories and msg.category in self.enabled_categories]
        else:
            filtered = [
                msg for msg in self.messages
                if msg.category in self.enabled_categories
                and self.category_levels.get(msg.category, LogLevel.INFO).value >= self.log_level.value
            ]

        if count is not None and count < len(filtered):
            return filtered[-count:]
        return filtered

    def clear(self) -> None:
        """Clear all messages from the log."""
        self.messages.clear()

    def enable_category(self, category: LogCategory) -> None:
        self.enabled_categories.add(category)

    def disable_category(self, category: LogCategory) -> None:
        self.enabled_categories.discard(category)

    def set_log_level(self, level: LogLevel) -> None:
        """Set the minimum log level."""
        self.log_level = level

    def is_debug_enabled(self) -> bool:
        """Check if debug messages are currently visible."""
        return (LogCategory.DEBUG in self.enabled_categories and
                self.log_level == LogLevel.DEBUG)

    def toggle_debug(self) -> None:
        """Toggle debug message visibility."""
        if self.is_debug_enabled():
            self.disable_category(LogCategory.DEBUG)
            self.set_log_level(LogLevel.INFO)
        else:
            self.enable_category(LogCategory.DEBUG)
            self.set_log_level(LogLevel.DEBUG)

    def save_log_to_file(self, log_dir: str = "logs") -> bool:
        """Save all buffered messages to a timestamped log file.

        Every message is written regardless of the current filters.

        Returns:
            True if save was successful, False otherwise
        """
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = os.path.join(log_dir, f"log_{timestamp}.log")

        try:
            os.makedirs(log_dir, exist_ok=True)

            with open(filepath, 'w', encoding='utf-8') as f:
                f.write("Military Scenario Builder - Construction Log\n")
                f.write(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
                f.write("=" * 60 + "\n\n")

                if not self.messages:
                    f.write("No messages to save.\n")
                for msg in self.messages:
                    timestamp_str = msg.timestamp.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
                    f.write(f"[{timestamp_str}] [{msg.category.name}] {msg.text}\n")
        except OSError as e:
            self.error(f"Failed to save log file: {e}")
            return False

        self.system(f"Construction log saved to {filepath}")
        return True
