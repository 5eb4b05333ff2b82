import os
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

import yaml

from ...core.errors import ScenarioLoadError
from ...core.events import ScenarioLoaded
from .scenario import StrategyScenario
from .scenario_builder import MilitaryScenarioBuilder, ScenarioBuilder

if TYPE_CHECKING:
    from ...core.events import EventManager


class ScenarioLoader:
    """Drives a scenario builder from YAML scenario definitions."""

    @staticmethod
    def load_from_file(
        file_path: str,
        builder: Optional[ScenarioBuilder] = None,
        event_manager: Optional["EventManager"] = None,
    ) -> StrategyScenario:
        """Load a scenario from a YAML file.

        Args:
            file_path: Path to the scenario definition
            builder: Builder to drive (a fresh MilitaryScenarioBuilder if omitted)
            event_manager: Event bus notified once the file has been read (optional)

        Raises:
            FileNotFoundError: If the file does not exist
            ScenarioLoadError: If the file is not a valid scenario definition
            ValidationError: If a troop in the definition is invalid
        """
        path_obj = Path(file_path)
        data = ScenarioLoader._read_yaml(path_obj)

        if event_manager:
            name = data.get("name", path_obj.stem) if isinstance(data, dict) else path_obj.stem
            event_manager.publish_immediate(
                ScenarioLoaded(source="ScenarioLoader", scenario_name=str(name), file_path=str(path_obj))
            )

        return ScenarioLoader.load_from_dict(data, builder)

    @staticmethod
    def _read_yaml(path_obj: Path) -> Any:
        try:
            with open(path_obj, "r", encoding="utf-8") as f:
                return yaml.safe_load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Scenario file not found: {path_obj}")
        except UnicodeDecodeError as e:
            raise ScenarioLoadError(f"Scenario file {path_obj.name} is not valid UTF-8: {e}") from e
        except yaml.YAMLError as e:
            raise ScenarioLoadError(f"Failed to parse YAML scenario {path_obj.name}: {e}") from e

    @staticmethod
    def load_from_dict(data: Any, builder: Optional[ScenarioBuilder] = None) -> StrategyScenario:
        """Build a scenario from an already parsed definition."""
        errors = ScenarioLoader.validate_definition(data)
        if errors:
            raise ScenarioLoadError("Invalid scenario definition: " + "; ".join(errors))

        if builder is None:
            builder = MilitaryScenarioBuilder()

        if "map" in data:
            map_data = data["map"]
            builder.set_map(map_data["terrain"], map_data["weather"])

        for troop_data in data.get("troops") or []:
            builder.add_troops(troop_data["name"], troop_data["count"])

        for resource_data in data.get("resources") or []:
            builder.add_resources(resource_data["type"], float(resource_data["amount"]))

        return builder.build()

    @staticmethod
    def load_directory(
        directory: str,
        event_manager: Optional["EventManager"] = None,
    ) -> dict[str, StrategyScenario]:
        """Load every ``*.yaml`` scenario in a directory.

        Files are read in name order. Each scenario is keyed by its ``name``
        field, or by the file stem when the definition has no name.
        """
        if not os.path.isdir(directory):
            raise FileNotFoundError(f"Scenario directory not found: {directory}")

        scenarios: dict[str, StrategyScenario] = {}
        for yaml_file in sorted(Path(directory).glob("*.yaml")):
            data = ScenarioLoader._read_yaml(yaml_file)

            key = yaml_file.stem
            if isinstance(data, dict) and data.get("name"):
                key = str(data["name"])

            if event_manager:
                event_manager.publish_immediate(
                    ScenarioLoaded(source="ScenarioLoader", scenario_name=key, file_path=str(yaml_file))
                )
            scenarios[key] = ScenarioLoader.load_from_dict(data)

        return scenarios

    @staticmethod
    def validate_definition(data: Any) -> list[str]:
        """Check a parsed definition for structural errors.

        Returns a list of error messages. Empty list means valid. Troop
        names and counts are not checked here; Troop itself enforces them.
        """
        if not isinstance(data, dict):
            return ["Scenario definition must be a mapping"]

        errors = []

        if "map" in data:
            map_data = data["map"]
            if not isinstance(map_data, dict):
                errors.append("Map must be a mapping with 'terrain' and 'weather'")
            else:
                for key in ("terrain", "weather"):
                    if key not in map_data:
                        errors.append(f"Map is missing '{key}'")
                    elif not isinstance(map_data[key], str):
                        errors.append(f"Map '{key}' must be text")

        for section, required in (("troops", ("name", "count")), ("resources", ("type", "amount"))):
            entries = data.get(section)
            if entries is None:
                continue
            if not isinstance(entries, list):
                errors.append(f"'{section}' must be a list")
                continue
            for index, entry in enumerate(entries):
                if not isinstance(entry, dict):
                    errors.append(f"{section}[{index}] must be a mapping")
                    continue
                for key in required:
                    if key not in entry:
                        errors.append(f"{section}[{index}] is missing '{key}'")
                if section != "resources":
                    continue
                if "type" in entry and not isinstance(entry["type"], str):
                    errors.append(f"resources[{index}] type must be text")
                if "amount" in entry:
                    amount = entry["amount"]
                    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
                        errors.append(f"resources[{index}] amount must be a number")

        return errors
