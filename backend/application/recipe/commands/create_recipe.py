"""CreateRecipeCommand - create a new recipe."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from domain.recipe.core.entities.recipe import Recipe
from domain.recipe.core.factories.recipe_factory import RecipeFactory
from domain.recipe.core.ports.repository import IRecipeRepository
from domain.recipe.core.value_objects.ingredient import Ingredient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateRecipeCommand:
    """Command to create a recipe.

    Attributes:
        owner_id: User creating the recipe
        title: Recipe title
        description: Short description
        ingredients: Ingredient list
        instructions: Preparation steps
        servings: Servings the quantities are written for (default 1)
        image_url: Optional picture URL
        cook_time: Cooking time in minutes
        prep_time: Preparation time in minutes
    """

    owner_id: str
    title: str
    description: str
    ingredients: list[Ingredient] = field(default_factory=list)
    instructions: list[str] = field(default_factory=list)
    servings: Optional[float] = None
    image_url: Optional[str] = None
    cook_time: Optional[int] = None
    prep_time: Optional[int] = None


class CreateRecipeHandler:
    """Handler for CreateRecipeCommand.

    Builds the recipe through the factory, then persists it.
    """

    def __init__(self, repository: IRecipeRepository, factory: Optional[RecipeFactory] = None):
        self._repository = repository
        self._factory = factory or RecipeFactory()

    async def handle(self, command: CreateRecipeCommand) -> Recipe:
        """
        Handle recipe creation command.

        Returns:
            Recipe: Created recipe

        Raises:
            InvalidRecipeError: If the recipe is not valid
        """
        recipe = self._factory.create(
            owner_id=command.owner_id,
            title=command.title,
            description=command.description,
            ingredients=command.ingredients,
            instructions=command.instructions,
            servings=command.servings,
            image_url=command.image_url,
            cook_time=command.cook_time,
            prep_time=command.prep_time,
        )

        await self._repository.save(recipe)
        logger.info("Recipe %s created by %s", recipe.recipe_id, recipe.owner_id)

        return recipe
