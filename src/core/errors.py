"""Error types raised by scenario construction and loading."""

from typing import Any


class ValidationError(ValueError):
    """Raised when an entity is constructed with a value that violates its constraints."""

    def __init__(self, field: str, value: Any, message: str):
        super().__init__(message)
        self.field = field
        self.value = value


class ScenarioLoadError(ValueError):
    """Raised when a scenario definition cannot be read or is malformed."""
