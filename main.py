#!/usr/bin/env python3

import sys
from typing import Optional

from src.core.config import ConfigLoader, ScenarioConfig
from src.core.errors import ValidationError
from src.core.events import EventManager
from src.game.managers import LogLevel, LogManager
from src.game.scenarios import MilitaryScenarioBuilder, ScenarioDirector


def run_demo(config: ScenarioConfig) -> LogManager:
    """Build and print the quick attack, defense and maritime scenarios."""
    event_manager = EventManager(enable_debug_logging=config.debug_logging)
    log_manager = LogManager(
        event_manager,
        max_messages=config.max_log_messages,
        default_level=LogLevel[config.log_level.upper()]
    )
    event_manager.set_debug_callback(log_manager.debug)
    log_manager.system("Scenario demo started")

    builder = MilitaryScenarioBuilder(event_manager)
    director = ScenarioDirector(builder, event_manager)

    print("1. Building the quick attack scenario (via director):")
    director.build_quick_attack_scenario()
    attack_scenario = builder.build()
    print(attack_scenario.describe())

    print(f"\n{config.divider}\n")

    print("2. Building the defense scenario (via director):")
    director.build_defense_scenario()
    defense_scenario = builder.build()
    print(defense_scenario.describe())

    print(f"\n{config.divider}\n")

    print("3. Building a custom maritime scenario (without director):")
    (builder
        .set_map("Ocean", "Storm")
        .add_troops("Aircraft carrier", 1)
        .add_troops("Fighters", 15)
        .add_troops("Marines", 200)
        .add_resources("Nuclear fuel", 100))
    custom_scenario = builder.build()
    print(custom_scenario.describe())

    return log_manager


def main(config: Optional[ScenarioConfig] = None):
    if config is None:
        config = ConfigLoader().load()

    try:
        log_manager = run_demo(config)
    except ValidationError as e:
        print(f"\n\nInvalid scenario ({e.field}={e.value!r}): {e}")
        raise

    # stdout carries only the scenario reports
    if config.debug_logging:
        for message in log_manager.get_messages():
            print(message.format(), file=sys.stderr)


if __name__ == "__main__":
    main()
