"""RecipeScalingService - scale a whole recipe to a number of servings."""

from typing import Optional

from ..core.entities.recipe import Recipe
from ..core.value_objects.number import Number
from ..core.value_objects.scaled_recipe import ScaledRecipe
from .scaler import get_serving_suggestions, scale_ingredients


class RecipeScalingService:
    """Apply the ingredient scaler to a Recipe aggregate.

    The recipe itself is never modified.
    """

    def scale(
        self, recipe: Recipe, new_servings: Optional[Number] = None
    ) -> ScaledRecipe:
        """Scale a recipe's ingredients.

        Args:
            recipe: Recipe to scale
            new_servings: Wanted servings, defaults to the recipe's own

        Returns:
            ScaledRecipe: Scaled ingredients plus serving suggestions

        Raises:
            InvalidServingsError: If ``new_servings`` is not positive

        Example:
            >>> scaled = RecipeScalingService().scale(recipe, 8)  # recipe for 4
            >>> scaled.scaling_factor
            2.0
        """
        servings = recipe.servings if new_servings is None else new_servings

        return ScaledRecipe(
            recipe_id=str(recipe.recipe_id),
            title=recipe.title,
            original_servings=recipe.servings,
            servings=servings,
            ingredients=scale_ingredients(recipe.ingredients, recipe.servings, servings),
            suggestions=get_serving_suggestions(recipe.servings),
        )
