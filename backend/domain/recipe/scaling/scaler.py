"""Ingredient scaler - proportional scaling, unit adjustment, display formatting.

Pure functions used to recompute a recipe's ingredient list for a different
number of servings:

    scale_quantity -> adjust_units -> format_quantity

``scale_ingredient`` chains the three steps for one ingredient and
``scale_ingredients`` maps it over a list. ``get_serving_suggestions``
produces the quick-select serving sizes shown next to a recipe.

Example:
    >>> scale_ingredient(Ingredient("flour", 2, "cup"), 4, 6).formatted_quantity
    '3'
    >>> format_quantity(1.333)
    '1 1/3'
    >>> adjust_units(1500, "ml")
    UnitAdjustment(quantity=1.5, unit='liter')
"""

import math
import re
from dataclasses import dataclass
from typing import Any, Mapping, Sequence, Union

from ..core.exceptions.domain_errors import (
    InvalidInputError,
    InvalidQuantityError,
    InvalidServingsError,
)
from ..core.value_objects.ingredient import Ingredient
from ..core.value_objects.number import Number, is_number
from ..core.value_objects.scaled_ingredient import ScaledIngredient
from ..core.value_objects.unit_adjustment import UnitAdjustment


@dataclass(frozen=True)
class UnitConversion:
    """Move ``unit`` to ``target_unit`` once a quantity reaches ``threshold``."""

    unit: str
    threshold: float
    target_unit: str
    factor: float


@dataclass(frozen=True)
class FractionDisplay:
    """Decimal part rendered as a kitchen fraction."""

    decimal: float
    display: str


# Single-step conversions, looked up by lower-cased unit.
# The liter row is an identity kept so large liter amounts stay liters.
UNIT_CONVERSIONS: tuple[UnitConversion, ...] = (
    # US volume
    UnitConversion("tsp", 3, "tbsp", 1 / 3),
    UnitConversion("tbsp", 16, "cup", 1 / 16),
    UnitConversion("cup", 4, "quart", 1 / 4),
    UnitConversion("quart", 4, "gallon", 1 / 4),
    # Metric volume
    UnitConversion("ml", 1000, "liter", 1 / 1000),
    UnitConversion("liter", 10, "liter", 1),
    # Weight
    UnitConversion("oz", 16, "lb", 1 / 16),
    UnitConversion("g", 1000, "kg", 1 / 1000),
)

_CONVERSIONS_BY_UNIT = {conversion.unit: conversion for conversion in UNIT_CONVERSIONS}

# Matched in order; the first entry within tolerance wins, not the nearest.
FRACTIONS: tuple[FractionDisplay, ...] = (
    FractionDisplay(0.125, "1/8"),
    FractionDisplay(0.25, "1/4"),
    FractionDisplay(0.333, "1/3"),
    FractionDisplay(0.5, "1/2"),
    FractionDisplay(0.667, "2/3"),
    FractionDisplay(0.75, "3/4"),
)

FRACTION_TOLERANCE = 0.05
PINCH_THRESHOLD = 0.0625
PINCH = "pinch"

COMMON_SERVING_SIZES: tuple[int, ...] = (1, 2, 4, 6, 8, 10, 12)

_TRAILING_ZEROS = re.compile(r"\.?0+$")


def scale_quantity(
    original_quantity: Number, original_servings: Number, new_servings: Number
) -> float:
    """Scale a quantity proportionally to a new number of servings.

    No rounding happens here; see ``format_quantity`` for display.

    Args:
        original_quantity: Amount written for ``original_servings``
        original_servings: Servings the recipe is written for
        new_servings: Servings wanted

    Returns:
        float: original_quantity × new_servings / original_servings

    Raises:
        InvalidServingsError: If either servings value is not positive
        InvalidQuantityError: If the quantity is negative

    Example:
        >>> scale_quantity(2, 4, 8)
        4.0
    """
    if not (is_number(original_servings) and is_number(new_servings)):
        raise InvalidInputError(
            f"Servings must be numbers, got {original_servings!r} and {new_servings!r}"
        )
    if original_servings <= 0 or new_servings <= 0:
        raise InvalidServingsError(original_servings, new_servings)

    if not is_number(original_quantity):
        raise InvalidInputError(f"Quantity must be a number, got {original_quantity!r}")
    if original_quantity < 0:
        raise InvalidQuantityError(original_quantity)

    scaling_factor = new_servings / original_servings
    return original_quantity * scaling_factor


def adjust_units(quantity: Number, unit: str) -> UnitAdjustment:
    """Convert a quantity to a coarser unit when it crosses the unit's threshold.

    Lookup is case-insensitive. Unknown units, and quantities below the
    threshold, come back unchanged. Only one step is applied: 5000 ml
    becomes 5 liter and stops there.

    Example:
        >>> adjust_units(20, "tbsp")
        UnitAdjustment(quantity=1.25, unit='cup')
        >>> adjust_units(2, "tsp")
        UnitAdjustment(quantity=2, unit='tsp')
    """
    conversion = _CONVERSIONS_BY_UNIT.get(unit.lower())

    if conversion is not None and quantity >= conversion.threshold:
        return UnitAdjustment(
            quantity=quantity * conversion.factor,
            unit=conversion.target_unit,
        )

    return UnitAdjustment(quantity=quantity, unit=unit)


def _trim_zeros(rendered: str) -> str:
    return _TRAILING_ZEROS.sub("", rendered)


def format_quantity(quantity: Number) -> str:
    """Render a quantity for display.

    Rules, first match wins:
        0                           -> "0"
        below 1/16                  -> "pinch"
        decimal part near a common
        fraction (±0.05)            -> "1/2", "2 3/4", ...
        whole number                -> "3"
        below 10                    -> 2 decimals, zeros trimmed
        below 100                   -> 1 decimal, zeros trimmed
        otherwise                   -> nearest integer

    Raises:
        InvalidQuantityError: If the quantity is negative
        InvalidInputError: If the quantity is not a finite number

    Example:
        >>> format_quantity(0.5)
        '1/2'
        >>> format_quantity(2.9)
        '2.9'
        >>> format_quantity(127.6)
        '128'
    """
    if not is_number(quantity) or not math.isfinite(quantity):
        raise InvalidInputError(f"Quantity must be a finite number, got {quantity!r}")
    if quantity < 0:
        raise InvalidQuantityError(quantity)

    if quantity == 0:
        return "0"

    if quantity < PINCH_THRESHOLD:
        return PINCH

    whole = math.floor(quantity)
    decimal = quantity - whole

    for fraction in FRACTIONS:
        if abs(decimal - fraction.decimal) < FRACTION_TOLERANCE:
            if whole == 0:
                return fraction.display
            return f"{whole} {fraction.display}"

    if decimal == 0:
        return str(whole)

    if quantity < 10:
        return _trim_zeros(f"{quantity:.2f}")

    if quantity < 100:
        return _trim_zeros(f"{quantity:.1f}")

    # Half rounds up, not to even
    return str(math.floor(quantity + 0.5))


def _as_ingredient(ingredient: Union[Ingredient, Mapping[str, Any]]) -> Ingredient:
    if isinstance(ingredient, Ingredient):
        return ingredient
    if isinstance(ingredient, Mapping):
        return Ingredient.from_dict(ingredient)
    raise InvalidInputError(f"Expected an ingredient, got {ingredient!r}")


def scale_ingredient(
    ingredient: Union[Ingredient, Mapping[str, Any]],
    original_servings: Number,
    new_servings: Number,
) -> ScaledIngredient:
    """Scale one ingredient, adjust its unit and format the result.

    Accepts an ``Ingredient`` or its JSON form ``{"name", "quantity", "unit"}``.
    The input is never modified; the original quantity and unit are kept on
    the result.

    Raises:
        InvalidServingsError: From ``scale_quantity``
        InvalidQuantityError: From ``scale_quantity``
    """
    ingredient = _as_ingredient(ingredient)

    scaled_quantity = scale_quantity(ingredient.quantity, original_servings, new_servings)
    adjusted = adjust_units(scaled_quantity, ingredient.unit)

    return ScaledIngredient(
        name=ingredient.name,
        quantity=adjusted.quantity,
        unit=adjusted.unit,
        formatted_quantity=format_quantity(adjusted.quantity),
        original_quantity=ingredient.quantity,
        original_unit=ingredient.unit,
    )


def scale_ingredients(
    ingredients: Sequence[Union[Ingredient, Mapping[str, Any]]],
    original_servings: Number,
    new_servings: Number,
) -> list[ScaledIngredient]:
    """Scale every ingredient of a list, keeping order and duplicates.

    Raises:
        InvalidInputError: If ``ingredients`` is not a list or tuple
            (a string is rejected, not iterated)
    """
    if not isinstance(ingredients, (list, tuple)):
        raise InvalidInputError(
            f"Ingredients must be a list, got {type(ingredients).__name__}"
        )

    return [
        scale_ingredient(ingredient, original_servings, new_servings)
        for ingredient in ingredients
    ]


def get_serving_suggestions(original_servings: Number) -> list[Number]:
    """Suggest serving sizes for quick selection.

    Always contains the original servings, half of it (at least 1), double
    of it and the common sizes 1, 2, 4, 6, 8, 10, 12. Sorted ascending,
    without duplicates.

    Raises:
        InvalidServingsError: If ``original_servings`` is not positive

    Example:
        >>> get_serving_suggestions(4)
        [1, 2, 4, 6, 8, 10, 12]
        >>> get_serving_suggestions(3)
        [1, 2, 3, 4, 6, 8, 10, 12]
    """
    if not is_number(original_servings):
        raise InvalidInputError(f"Servings must be a number, got {original_servings!r}")
    if original_servings <= 0:
        raise InvalidServingsError(original_servings)

    suggestions = {
        original_servings,
        max(1, math.floor(original_servings / 2)),
        original_servings * 2,
    }
    suggestions.update(COMMON_SERVING_SIZES)

    return sorted(suggestions)
