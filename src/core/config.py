"""
Configuration for the scenario demo.

Settings live in a small dataclass; ConfigLoader fills it from an optional
YAML file and falls back to the defaults when the file is missing.
"""
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml


DEFAULT_CONFIG_PATH = "assets/config/settings.yaml"


def resolve_project_path(path: str) -> Path:
    """Anchor a relative path at the project root."""
    if os.path.isabs(path):
        return Path(path)
    project_root = Path(__file__).parent.parent.parent
    return project_root / path


@dataclass
class ScenarioConfig:
    """Settings for the scenario demo and its logging."""
    divider: str = "------------------------------------------------"
    debug_logging: bool = False
    log_level: str = "INFO"
    scenarios_dir: str = "assets/scenarios"
    max_log_messages: int = 1000

    def scenarios_path(self) -> Path:
        """Directory holding the bundled scenario definitions."""
        return resolve_project_path(self.scenarios_dir)


class ConfigLoader:
    """Loads ScenarioConfig values from a YAML file."""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path or DEFAULT_CONFIG_PATH

    def load(self) -> ScenarioConfig:
        """Read the config file, returning defaults if it does not exist.

        Raises:
            ValueError: If the file, or its ``config`` section, is not a YAML mapping
        """
        config_file = resolve_project_path(self.config_path)
        if not config_file.exists():
            return ScenarioConfig()

        with open(config_file, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {config_file}")

        if 'config' in data:
            # An empty ``config:`` block parses as None
            data = data['config'] or {}
            if not isinstance(data, dict):
                raise ValueError(f"'config' section must be a mapping: {config_file}")

        return self.from_dict(data)

    @staticmethod
    def from_dict(data: dict[str, Any]) -> ScenarioConfig:
        """Build a config from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(ScenarioConfig)}
        unknown = sorted(set(data) - known)
        if unknown:
            print(f"Warning: Unknown config keys ignored: {', '.join(unknown)}")
        return ScenarioConfig(**{k: v for k, v in data.items() if k in known})
