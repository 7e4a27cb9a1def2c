"""QuantityValue value object.

A numeric magnitude paired with its unit of measurement, used both for
temperatures pushed to the UI and for unit-bearing commands coming back.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class QuantityValue:
    """Immutable number with unit.

    Attributes:
        value: Numeric magnitude
        unit: Unit symbol (e.g. "°C", "°F", "K")

    Example:
        >>> str(QuantityValue(21.5, "°C"))
        '21.5 °C'
    """

    value: float
    unit: str

    def __post_init__(self) -> None:
        """Validate quantity.

        Raises:
            TypeError: If value is not a number
        """
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise TypeError(
                f"Quantity value must be a number, got {type(self.value).__name__}"
            )

    def __float__(self) -> float:
        """Return the magnitude."""
        return float(self.value)

    def __str__(self) -> str:
        """String representation for logging and text commands."""
        return f"{self.value} {self.unit}"
