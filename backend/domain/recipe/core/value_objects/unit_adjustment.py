"""UnitAdjustment value object - quantity expressed in a display unit."""

from dataclasses import dataclass

from .number import Number


@dataclass(frozen=True)
class UnitAdjustment:
    """Result of moving a quantity to a coarser unit.

    When no conversion applies, quantity and unit are the inputs unchanged.
    """

    quantity: Number
    unit: str
