"""ScaledIngredient value object - ingredient recomputed for new servings."""

from dataclasses import dataclass
from typing import Any

from .number import Number


@dataclass(frozen=True)
class ScaledIngredient:
    """Ingredient scaled to a new number of servings.

    Built fresh by every scaling call and never persisted. Carries both the
    display values (unit-adjusted and formatted) and the values originally
    written in the recipe, so callers can show "was 2 cup".

    Attributes:
        name: Ingredient name
        quantity: Scaled quantity, after unit adjustment
        unit: Unit of ``quantity``
        formatted_quantity: Human-readable rendering of ``quantity``
        original_quantity: Quantity written in the recipe
        original_unit: Unit written in the recipe
    """

    name: str
    quantity: Number
    unit: str
    formatted_quantity: str
    original_quantity: Number
    original_unit: str

    def describe_original(self) -> str:
        """Render the recipe's own amount.

        Example:
            >>> ScaledIngredient("flour", 4, "cup", "4", 2, "cup").describe_original()
            'was 2 cup'
        """
        return " ".join(
            part for part in ("was", str(self.original_quantity), self.original_unit) if part
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
            "formattedQuantity": self.formatted_quantity,
            "originalQuantity": self.original_quantity,
            "originalUnit": self.original_unit,
        }

    def __str__(self) -> str:
        parts = [self.formatted_quantity, self.unit, self.name]
        return " ".join(part for part in parts if part)
