"""RecipeFactory - factory for creating recipes."""

from typing import Optional

from ..entities.recipe import Recipe
from ..value_objects.ingredient import Ingredient
from ..value_objects.recipe_id import RecipeId


class RecipeFactory:
    """Factory for creating Recipe entities.

    Assigns a fresh identifier and applies the defaults used when a user
    submits a new recipe.
    """

    @staticmethod
    def create(
        owner_id: str,
        title: str,
        description: str,
        ingredients: list[Ingredient],
        instructions: list[str],
        servings: Optional[float] = None,
        image_url: Optional[str] = None,
        cook_time: Optional[int] = None,
        prep_time: Optional[int] = None,
    ) -> Recipe:
        """Create a new recipe owned by ``owner_id``.

        Servings default to 1, times to 0 and the image to no image.

        Raises:
            InvalidRecipeError: If the recipe is not valid
        """
        return Recipe(
            recipe_id=RecipeId.generate(),
            title=title,
            description=description,
            servings=servings or 1,
            ingredients=list(ingredients),
            instructions=list(instructions),
            image_url=image_url or "",
            cook_time=cook_time or 0,
            prep_time=prep_time or 0,
            owner_id=owner_id,
        )
