"""Value objects for recipe domain."""

from .ingredient import Ingredient
from .recipe_id import RecipeId
from .scaled_ingredient import ScaledIngredient
from .scaled_recipe import ScaledRecipe
from .unit_adjustment import UnitAdjustment

__all__ = [
    "RecipeId",
    "Ingredient",
    "ScaledIngredient",
    "ScaledRecipe",
    "UnitAdjustment",
]
