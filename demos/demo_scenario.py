#!/usr/bin/env python3
"""Demo script for loading scenario definitions."""

import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from src.core.config import ConfigLoader
from src.core.errors import ScenarioLoadError, ValidationError
from src.core.events import EventManager
from src.game.managers import LogManager
from src.game.scenarios import ScenarioLoader


def list_scenarios(scenarios_dir) -> None:
    """Print the YAML scenario files available in the configured directory."""
    print(f"\nAvailable scenarios in {scenarios_dir}:")
    for yaml_file in sorted(scenarios_dir.glob("*.yaml")):
        print(f"  - {yaml_file}")


def main():
    config = ConfigLoader().load()

    if len(sys.argv) != 2:
        print("Usage: python demo_scenario.py <scenario_file.yaml>")
        list_scenarios(config.scenarios_path())
        return

    scenario_file = sys.argv[1]
    event_manager = EventManager()
    log_manager = LogManager(event_manager)

    try:
        print(f"Loading scenario: {scenario_file}")
        scenario = ScenarioLoader.load_from_file(scenario_file, event_manager=event_manager)
    except FileNotFoundError:
        print(f"Error: Scenario file '{scenario_file}' not found")
        sys.exit(1)
    except (ScenarioLoadError, ValidationError) as e:
        print(f"Error loading scenario: {e}")
        sys.exit(1)

    print()
    print(scenario.describe())

    for message in log_manager.get_messages():
        print(message.format())


if __name__ == "__main__":
    main()
