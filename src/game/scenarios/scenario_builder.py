"""Scenario builders.

This module implements the Builder design pattern for scenarios. The
ScenarioBuilder base class is the capability a director depends on;
MilitaryScenarioBuilder is the concrete builder used by the demo.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from ..entities import Map, Resource, Troop
from .scenario import StrategyScenario
from ...core.events import (
    MapSelected,
    ResourcesAdded,
    ScenarioBuilt,
    ScenarioReset,
    TroopsAdded,
)

if TYPE_CHECKING:
    from ...core.events import EventManager, ScenarioEvent


class ScenarioBuilder(ABC):
    """Abstract base class for fluent scenario builders."""

    @abstractmethod
    def set_map(self, terrain: str, weather: str) -> "ScenarioBuilder":
        """Select the map of the scenario under construction.

        Returns:
            The same builder, for chaining
        """
        pass

    @abstractmethod
    def add_troops(self, name: str, count: int) -> "ScenarioBuilder":
        """Append a troop group to the scenario under construction.

        Raises:
            ValidationError: If the troop name or count is invalid
        """
        pass

    @abstractmethod
    def add_resources(self, resource_type: str, amount: float) -> "ScenarioBuilder":
        """Append a resource stock to the scenario under construction."""
        pass

    @abstractmethod
    def build(self) -> StrategyScenario:
        """Hand off the finished scenario and start a fresh one."""
        pass

    @abstractmethod
    def reset(self) -> None:
        """Discard the scenario under construction."""
        pass


class MilitaryScenarioBuilder(ScenarioBuilder):
    """Builds StrategyScenario instances one at a time."""

    def __init__(self, event_manager: Optional["EventManager"] = None):
        """Create a builder with an empty scenario in progress.

        Args:
            event_manager: Event bus to report construction steps to (optional)
        """
        self.event_manager = event_manager
        self._scenario: StrategyScenario
        self.reset()

    def _emit(self, event: "ScenarioEvent") -> None:
        if self.event_manager:
            self.event_manager.publish_immediate(event)

    @property
    def source_name(self) -> str:
        return self.__class__.__name__

    def reset(self) -> None:
        self._scenario = StrategyScenario()
        self._emit(ScenarioReset(source=self.source_name))

    def set_map(self, terrain: str, weather: str) -> "MilitaryScenarioBuilder":
        scenario_map = Map(terrain, weather)
        self._scenario.set_map(scenario_map)
        self._emit(MapSelected(source=self.source_name, map=scenario_map))
        return self

    def add_troops(self, name: str, count: int) -> "MilitaryScenarioBuilder":
        # Troop validates before anything is appended
        troop = Troop(name, count)
        self._scenario.add_troop(troop)
        self._emit(TroopsAdded(source=self.source_name, troop=troop))
        return self

    def add_resources(self, resource_type: str, amount: float) -> "MilitaryScenarioBuilder":
        resource = Resource(resource_type, amount)
        self._scenario.add_resource(resource)
        self._emit(ResourcesAdded(source=self.source_name, resource=resource))
        return self

    def preview(self) -> str:
        """Describe the in-progress scenario without handing it off."""
        return self._scenario.describe()

    def build(self) -> StrategyScenario:
        """Return the scenario built so far and reset to a fresh one.

        Callers must not rely on the builder retaining anything after this
        call; every build() hands off exactly one scenario.
        """
        result = self._scenario
        self._emit(ScenarioBuilt(source=self.source_name, scenario=result))
        self.reset()
        return result
