"""
Unit tests for the military scenario builder.

Tests fluent chaining, the take-and-reset build() contract and
error propagation from entity validation.
"""
import pytest

from src.core.errors import ValidationError
from src.core.events import EventType
from src.game.scenarios import MilitaryScenarioBuilder, ScenarioBuilder, StrategyScenario


class TestBuilderChaining:
    """Test the fluent interface."""

    def test_mutators_return_same_builder(self, builder: MilitaryScenarioBuilder):
        assert builder.set_map("Plains", "Clear") is builder
        assert builder.add_troops("Armor", 10) is builder
        assert builder.add_resources("Fuel", 500) is builder

    def test_chained_calls_populate_scenario(self, builder: MilitaryScenarioBuilder):
        scenario = (builder
                    .set_map("Ocean", "Storm")
                    .add_troops("Fighters", 15)
                    .add_resources("Nuclear fuel", 100)
                    .build())

        assert str(scenario.map) == "Terrain: Ocean, Weather: Storm"
        assert [str(t) for t in scenario.troops] == ["Fighters: 15 units"]
        assert [str(r) for r in scenario.resources] == ["Nuclear fuel: 100"]

    def test_troop_order_in_report(self, builder: MilitaryScenarioBuilder):
        """Troops added first are listed first."""
        report = builder.add_troops("A", 1).add_troops("B", 2).build().describe()

        assert report.index(" - A: 1 units") < report.index(" - B: 2 units")

    def test_builder_is_a_scenario_builder(self, builder: MilitaryScenarioBuilder):
        assert isinstance(builder, ScenarioBuilder)

    def test_abstract_builder_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            ScenarioBuilder()  # type: ignore[abstract]


class TestBuildAndReset:
    """Test the take-and-reset lifecycle."""

    def test_build_hands_off_and_resets(self, builder: MilitaryScenarioBuilder):
        builder.add_troops("Armor", 10)
        first = builder.build()
        second = builder.build()

        assert len(first.troops) == 1
        assert second.is_empty()
        assert first is not second

    def test_consecutive_builds_are_distinct_and_empty(self, builder: MilitaryScenarioBuilder):
        first = builder.build()
        second = builder.build()

        assert isinstance(first, StrategyScenario)
        assert first is not second
        assert first.is_empty() and second.is_empty()

    def test_built_scenario_unaffected_by_later_calls(self, builder: MilitaryScenarioBuilder):
        scenario = builder.add_troops("Armor", 10).build()
        builder.add_troops("Snipers", 20)

        assert [t.name for t in scenario.troops] == ["Armor"]

    def test_reset_discards_progress(self, builder: MilitaryScenarioBuilder):
        builder.set_map("Plains", "Clear").add_troops("Armor", 10)
        builder.reset()

        assert builder.build().is_empty()

    def test_preview_shows_progress_without_handing_off(self, builder: MilitaryScenarioBuilder):
        builder.add_troops("Armor", 10)

        assert " - Armor: 10 units" in builder.preview()
        assert len(builder.build().troops) == 1


class TestBuilderErrors:
    """Test validation failures raised through the builder."""

    @pytest.mark.parametrize("name, count", [("", 1), ("   ", 1), ("Armor", -1)])
    def test_invalid_troop_propagates(self, builder: MilitaryScenarioBuilder, name, count):
        with pytest.raises(ValidationError):
            builder.add_troops(name, count)

    def test_failed_call_leaves_scenario_unchanged(self, builder: MilitaryScenarioBuilder):
        builder.add_troops("Armor", 10)

        with pytest.raises(ValidationError):
            builder.add_troops("Ghosts", -5)

        assert [t.name for t in builder.build().troops] == ["Armor"]


class TestBuilderEvents:
    """Test events published by an observed builder."""

    def test_events_in_call_order(self, event_manager, observed_builder):
        received = []
        event_manager.subscribe_all(lambda event: received.append(event.event_type))

        observed_builder.set_map("Plains", "Clear").add_troops("Armor", 10).add_resources("Fuel", 5)
        observed_builder.build()

        assert received == [
            EventType.MAP_SELECTED,
            EventType.TROOPS_ADDED,
            EventType.RESOURCES_ADDED,
            EventType.SCENARIO_BUILT,
            EventType.SCENARIO_RESET,
        ]

    def test_built_event_carries_scenario(self, event_manager, observed_builder):
        built = []
        event_manager.subscribe(EventType.SCENARIO_BUILT, lambda event: built.append(event.scenario))

        scenario = observed_builder.add_troops("Armor", 10).build()

        assert built == [scenario]

    def test_invalid_troop_publishes_nothing(self, event_manager, observed_builder):
        received = []
        event_manager.subscribe(EventType.TROOPS_ADDED, received.append)

        with pytest.raises(ValidationError):
            observed_builder.add_troops("", 1)

        assert received == []
