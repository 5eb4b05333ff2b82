"""Troop entity: a named military unit type with a head count."""

from dataclasses import dataclass

from ...core.errors import ValidationError


@dataclass(frozen=True)
class Troop:
    """A named group of units committed to a scenario.

    Construction fails with ValidationError when the name is empty or
    whitespace, or when the count is not a non-negative integer.
    """

    name: str
    count: int

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("name", self.name, "Troop name cannot be empty.")
        # bool is an int subclass but never a meaningful head count
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise ValidationError("count", self.count, "Troop count must be an integer.")
        if self.count < 0:
            raise ValidationError("count", self.count, "Troop count cannot be negative.")

    def __str__(self) -> str:
        return f"{self.name}: {self.count} units"
