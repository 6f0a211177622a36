"""ScaleRecipeQuery - a stored recipe's ingredients for chosen servings."""

from dataclasses import dataclass
from typing import Optional

from domain.recipe.core.exceptions.domain_errors import RecipeNotFoundError
from domain.recipe.core.ports.repository import IRecipeRepository
from domain.recipe.core.value_objects.number import Number
from domain.recipe.core.value_objects.recipe_id import RecipeId
from domain.recipe.core.value_objects.scaled_recipe import ScaledRecipe
from domain.recipe.scaling.recipe_scaling_service import RecipeScalingService


@dataclass(frozen=True)
class ScaleRecipeQuery:
    """Query to scale a recipe.

    Attributes:
        recipe_id: Recipe to scale
        servings: Wanted servings, None for the recipe's own
    """

    recipe_id: RecipeId
    servings: Optional[Number] = None


class ScaleRecipeHandler:
    """Handler for ScaleRecipeQuery."""

    def __init__(
        self,
        repository: IRecipeRepository,
        scaling_service: Optional[RecipeScalingService] = None,
    ):
        self._repository = repository
        self._scaling_service = scaling_service or RecipeScalingService()

    async def handle(self, query: ScaleRecipeQuery) -> ScaledRecipe:
        """
        Handle scale recipe query.

        Raises:
            RecipeNotFoundError: If recipe doesn't exist
            InvalidServingsError: If servings is not positive
        """
        recipe = await self._repository.find_by_id(query.recipe_id)
        if recipe is None:
            raise RecipeNotFoundError(str(query.recipe_id))

        return self._scaling_service.scale(recipe, query.servings)
