"""
Basic test fixtures for the scenario builder test suite.

Provides builders, directors and the event/log plumbing used across tests.
"""

import sys
import os
import pytest

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from src.core.events import EventManager
from src.game.managers import LogManager
from src.game.scenarios import MilitaryScenarioBuilder, ScenarioBuilder, ScenarioDirector


@pytest.fixture
def event_manager():
    """Create an event manager for testing."""
    return EventManager(enable_debug_logging=False)


@pytest.fixture
def log_manager(event_manager):
    """Create a log manager subscribed to the test event manager."""
    return LogManager(event_manager)


@pytest.fixture
def builder():
    """Create a silent builder with no event manager."""
    return MilitaryScenarioBuilder()


@pytest.fixture
def observed_builder(event_manager):
    """Create a builder that reports to the test event manager."""
    return MilitaryScenarioBuilder(event_manager)


@pytest.fixture
def director(builder):
    """Create a director driving the silent builder."""
    return ScenarioDirector(builder)


class RecordingBuilder(ScenarioBuilder):
    """Builder double that records every call it receives."""

    def __init__(self):
        self.calls: list[tuple] = []

    def set_map(self, terrain, weather):
        self.calls.append(("set_map", terrain, weather))
        return self

    def add_troops(self, name, count):
        self.calls.append(("add_troops", name, count))
        return self

    def add_resources(self, resource_type, amount):
        self.calls.append(("add_resources", resource_type, amount))
        return self

    def build(self):
        self.calls.append(("build",))
        raise AssertionError("directors must not call build()")

    def reset(self):
        self.calls.append(("reset",))


@pytest.fixture
def recording_builder():
    """Create a builder double that records calls."""
    return RecordingBuilder()
