"""Resource entity: a supply type and the amount available."""

from dataclasses import dataclass


EXPONENT_THRESHOLD = 1e16


def format_amount(amount: float) -> str:
    """Render an amount without a trailing ``.0`` for whole values.

    Values at or beyond EXPONENT_THRESHOLD keep Python's exponent form
    (``1e+300``) instead of being expanded digit by digit.
    """
    value = float(amount)
    if value.is_integer() and abs(value) < EXPONENT_THRESHOLD:
        return str(int(value))
    return repr(value)


@dataclass(frozen=True)
class Resource:
    """A stock of supplies available to a scenario."""

    type: str
    amount: float

    def __str__(self) -> str:
        return f"{self.type}: {format_amount(self.amount)}"
