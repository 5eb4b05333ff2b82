"""Scenario system components.

This package contains the scenario product and everything that assembles it:
- scenario.py: StrategyScenario aggregate and its text report
- scenario_builder.py: Builder capability and the military scenario builder
- scenario_director.py: Scripted build sequences
- scenario_loader.py: YAML scenario definitions driven through a builder
"""

from .scenario import StrategyScenario
from .scenario_builder import ScenarioBuilder, MilitaryScenarioBuilder
from .scenario_director import ScenarioDirector
from .scenario_loader import ScenarioLoader

__all__ = [
    "StrategyScenario",
    "ScenarioBuilder",
    "MilitaryScenarioBuilder",
    "ScenarioDirector",
    "ScenarioLoader",
]
