"""Map entity: the terrain and weather a scenario is fought in."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Map:
    """Battlefield terrain together with the prevailing weather."""

    terrain_name: str
    weather_condition: str

    def __str__(self) -> str:
        return f"Terrain: {self.terrain_name}, Weather: {self.weather_condition}"
