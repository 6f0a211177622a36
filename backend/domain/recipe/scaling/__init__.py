"""Ingredient scaling for recipes."""

from .recipe_scaling_service import RecipeScalingService
from .scaler import (
    adjust_units,
    format_quantity,
    get_serving_suggestions,
    scale_ingredient,
    scale_ingredients,
    scale_quantity,
)

__all__ = [
    "RecipeScalingService",
    "scale_quantity",
    "adjust_units",
    "format_quantity",
    "scale_ingredient",
    "scale_ingredients",
    "get_serving_suggestions",
]
