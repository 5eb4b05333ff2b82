"""Scenario director with the standard build sequences."""

from typing import TYPE_CHECKING, Optional

from ...core.events import DirectorSequenceStarted

if TYPE_CHECKING:
    from ...core.events import EventManager
    from .scenario_builder import ScenarioBuilder


class ScenarioDirector:
    """Drives a scenario builder through fixed call sequences.

    The director never calls build(); the caller retrieves the scenario
    from the builder afterwards. Running two sequences without an
    intervening build() accumulates both into the same scenario.
    """

    def __init__(self, builder: "ScenarioBuilder", event_manager: Optional["EventManager"] = None):
        self._builder = builder
        self.event_manager = event_manager

    @property
    def builder(self) -> "ScenarioBuilder":
        return self._builder

    def _announce(self, sequence_name: str) -> None:
        if self.event_manager:
            self.event_manager.publish_immediate(
                DirectorSequenceStarted(source=self.__class__.__name__, sequence_name=sequence_name)
            )

    def build_quick_attack_scenario(self) -> None:
        """Open terrain, clear skies and a fast mechanised assault."""
        self._announce("quick_attack")
        (self._builder
            .set_map("Plains", "Clear")
            .add_troops("Light infantry", 100)
            .add_troops("Armor", 10)
            .add_resources("Fuel", 500)
            .add_resources("Ammunition", 1000))

    def build_defense_scenario(self) -> None:
        """Mountain positions held in fog by a small, well-supplied force."""
        self._announce("defense")
        (self._builder
            .set_map("Mountains", "Fog")
            .add_troops("Snipers", 20)
            .add_troops("Artillery", 5)
            .add_resources("Medical supplies", 200)
            .add_resources("Rations", 3000))
