"""
Unit tests for the StrategyScenario aggregate.

Tests mutation, ordering and the text report.
"""
from src.game.entities import Map, Resource, Troop
from src.game.scenarios import StrategyScenario


EMPTY_REPORT = (
    "=== MILITARY SCENARIO ===\n"
    "[Map]\n"
    "No map selected\n"
    "[Troops]\n"
    " - No troops\n"
    "[Resources]\n"
    " - No resources\n"
)


class TestScenarioMutation:
    """Test adding entities and replacing the map."""

    def test_new_scenario_is_empty(self):
        scenario = StrategyScenario()

        assert scenario.map is None
        assert scenario.troops == ()
        assert scenario.resources == ()
        assert scenario.is_empty()

    def test_set_map_replaces_previous(self):
        scenario = StrategyScenario()
        scenario.set_map(Map("Plains", "Clear"))
        scenario.map = Map("Mountains", "Fog")

        assert scenario.map == Map("Mountains", "Fog")
        assert not scenario.is_empty()

    def test_insertion_order_preserved(self):
        scenario = StrategyScenario()
        scenario.add_troop(Troop("A", 1))
        scenario.add_troop(Troop("B", 2))
        scenario.add_resource(Resource("Fuel", 1))
        scenario.add_resource(Resource("Ammo", 2))

        assert [t.name for t in scenario.troops] == ["A", "B"]
        assert [r.type for r in scenario.resources] == ["Fuel", "Ammo"]

    def test_troop_view_is_read_only(self):
        """The exposed sequences are snapshots, not the internal lists."""
        scenario = StrategyScenario()
        scenario.add_troop(Troop("A", 1))

        troops = scenario.troops
        assert isinstance(troops, tuple)
        scenario.add_troop(Troop("B", 2))
        assert len(troops) == 1
        assert len(scenario.troops) == 2


class TestScenarioDescription:
    """Test the multi-section report."""

    def test_empty_scenario_placeholders(self):
        assert StrategyScenario().describe() == EMPTY_REPORT

    def test_full_report(self):
        scenario = StrategyScenario()
        scenario.set_map(Map("Plains", "Clear"))
        scenario.add_troop(Troop("Light infantry", 100))
        scenario.add_resource(Resource("Fuel", 500))

        assert scenario.describe() == (
            "=== MILITARY SCENARIO ===\n"
            "[Map]\n"
            "Terrain: Plains, Weather: Clear\n"
            "[Troops]\n"
            " - Light infantry: 100 units\n"
            "[Resources]\n"
            " - Fuel: 500\n"
        )

    def test_partial_sections_use_placeholders(self):
        """Only empty sections fall back to placeholders."""
        scenario = StrategyScenario()
        scenario.add_resource(Resource("Rations", 3000))

        report = scenario.describe()

        assert "No map selected" in report
        assert " - No troops" in report
        assert " - Rations: 3000" in report
        assert "No resources" not in report

    def test_section_order(self):
        scenario = StrategyScenario()
        scenario.add_troop(Troop("Snipers", 20))
        scenario.set_map(Map("Mountains", "Fog"))

        report = scenario.describe()

        assert (report.index("=== MILITARY SCENARIO ===")
                < report.index("[Map]")
                < report.index("[Troops]")
                < report.index("[Resources]"))

    def test_describe_is_idempotent(self):
        scenario = StrategyScenario()
        scenario.add_troop(Troop("Armor", 10))

        first = scenario.describe()
        assert scenario.describe() == first
        assert str(scenario) == first
        assert len(scenario.troops) == 1
