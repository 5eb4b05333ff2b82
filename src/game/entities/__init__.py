"""Scenario entity definitions.

This package contains the immutable value objects a scenario is made of:
- troop.py: Named troop groups with validated head counts
- resource.py: Supply stocks
- map.py: Terrain and weather
"""

from .troop import Troop
from .resource import Resource, format_amount
from .map import Map

__all__ = [
    "Troop",
    "Resource",
    "format_amount",
    "Map",
]
