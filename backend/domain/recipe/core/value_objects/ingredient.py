"""Ingredient value object - one line of a recipe's ingredient list."""

from dataclasses import dataclass
from typing import Any, Mapping

from ..exceptions.domain_errors import InvalidInputError
from .number import Number, is_number


@dataclass(frozen=True)
class Ingredient:
    """Ingredient amount as written in the recipe.

    Quantities are expressed for the recipe's own number of servings.
    The unit may be empty for countable items ("0.5 lemon").

    Attributes:
        name: Ingredient name
        quantity: Amount for the recipe's servings
        unit: Measuring unit, free text
    """

    name: str
    quantity: Number
    unit: str = ""

    def __post_init__(self) -> None:
        """Validate field types.

        Raises:
            InvalidInputError: If quantity is not a number or name/unit
                are not strings
        """
        if not isinstance(self.name, str):
            raise InvalidInputError(
                f"Ingredient name must be a string, got {self.name!r}"
            )
        if not is_number(self.quantity):
            raise InvalidInputError(
                f"Ingredient quantity must be a number, got {self.quantity!r}"
            )
        if not isinstance(self.unit, str):
            raise InvalidInputError(
                f"Ingredient unit must be a string, got {self.unit!r}"
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Ingredient":
        """Build an ingredient from a JSON document.

        Numeric strings such as ``"1.5"`` are accepted for the quantity,
        a missing unit becomes the empty string.

        Raises:
            InvalidInputError: If the document is not a mapping or the
                quantity cannot be read as a number
        """
        if not isinstance(data, Mapping):
            raise InvalidInputError(f"Ingredient must be an object, got {data!r}")

        quantity = data.get("quantity", 0)
        if isinstance(quantity, str):
            try:
                quantity = float(quantity)
            except ValueError as e:
                raise InvalidInputError(
                    f"Ingredient quantity must be a number, got {quantity!r}"
                ) from e

        return cls(
            name=str(data.get("name", "")),
            quantity=quantity,
            unit=data.get("unit") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "quantity": self.quantity, "unit": self.unit}

    def __str__(self) -> str:
        parts = [str(self.quantity), self.unit, self.name]
        return " ".join(part for part in parts if part)
