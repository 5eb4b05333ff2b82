"""StrategyScenario: the composite product assembled by scenario builders.

A scenario owns an optional map plus ordered troop and resource lists.
Troops and resources can only be appended; insertion order is the order
in which they are rendered.
"""

from typing import Optional

from ..entities import Map, Resource, Troop


HEADER = "=== MILITARY SCENARIO ==="
NO_MAP = "No map selected"
NO_TROOPS = "No troops"
NO_RESOURCES = "No resources"


class StrategyScenario:
    """Container for a map, its troops and its resources."""

    def __init__(self):
        self._map: Optional[Map] = None
        self._troops: list[Troop] = []
        self._resources: list[Resource] = []

    @property
    def map(self) -> Optional[Map]:
        """The selected map, or None if no map has been chosen."""
        return self._map

    @map.setter
    def map(self, value: Optional[Map]) -> None:
        self._map = value

    def set_map(self, scenario_map: Map) -> None:
        """Replace the scenario's map."""
        self._map = scenario_map

    @property
    def troops(self) -> tuple[Troop, ...]:
        return tuple(self._troops)

    @property
    def resources(self) -> tuple[Resource, ...]:
        return tuple(self._resources)

    def add_troop(self, troop: Troop) -> None:
        self._troops.append(troop)

    def add_resource(self, resource: Resource) -> None:
        self._resources.append(resource)

    def is_empty(self) -> bool:
        """Check whether nothing has been added to the scenario yet."""
        return self._map is None and not self._troops and not self._resources

    def describe(self) -> str:
        """Render the scenario as a multi-section text report.

        Sections always appear in the order header, map, troops, resources.
        Empty sections are rendered with a placeholder line.

        Returns:
            The report, one line per entry, each terminated by a newline
        """
        lines = [HEADER, "[Map]"]
        lines.append(str(self._map) if self._map is not None else NO_MAP)

        lines.append("[Troops]")
        if self._troops:
            lines.extend(f" - {troop}" for troop in self._troops)
        else:
            lines.append(f" - {NO_TROOPS}")

        lines.append("[Resources]")
        if self._resources:
            lines.extend(f" - {resource}" for resource in self._resources)
        else:
            lines.append(f" - {NO_RESOURCES}")

        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return (
            f"StrategyScenario(map={self._map!r}, "
            f"troops={len(self._troops)}, resources={len(self._resources)})"
        )
