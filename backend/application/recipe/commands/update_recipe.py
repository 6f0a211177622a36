"""UpdateRecipeCommand - update an existing recipe."""

import logging
from dataclasses import dataclass, fields
from typing import Optional

from domain.recipe.core.entities.recipe import Recipe
from domain.recipe.core.exceptions.domain_errors import (
    RecipeNotFoundError,
    RecipePermissionError,
)
from domain.recipe.core.ports.repository import IRecipeRepository
from domain.recipe.core.value_objects.ingredient import Ingredient
from domain.recipe.core.value_objects.recipe_id import RecipeId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdateRecipeCommand:
    """Command to update a recipe.

    Fields left as None are not changed.

    Note: At least one field besides recipe_id and user_id must be provided.
    """

    recipe_id: RecipeId
    user_id: str
    title: Optional[str] = None
    description: Optional[str] = None
    servings: Optional[float] = None
    ingredients: Optional[list[Ingredient]] = None
    instructions: Optional[list[str]] = None
    image_url: Optional[str] = None
    cook_time: Optional[int] = None
    prep_time: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate command has at least one update."""
        if not self.changes():
            raise ValueError("At least one field must be provided for update")

    def changes(self) -> dict:
        """Fields to update, by name."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name not in ("recipe_id", "user_id") and getattr(self, f.name) is not None
        }


class UpdateRecipeHandler:
    """Handler for UpdateRecipeCommand.

    Only the recipe owner can update it.
    """

    def __init__(self, repository: IRecipeRepository):
        self._repository = repository

    async def handle(self, command: UpdateRecipeCommand) -> Recipe:
        """
        Handle recipe update command.

        Returns:
            Recipe: Updated recipe

        Raises:
            RecipeNotFoundError: If recipe doesn't exist
            RecipePermissionError: If user is not the owner
            InvalidRecipeError: If the updated recipe is not valid
        """
        recipe = await self._repository.find_by_id(command.recipe_id)
        if recipe is None:
            raise RecipeNotFoundError(str(command.recipe_id))

        if not recipe.is_owned_by(command.user_id):
            logger.warning(
                "User %s refused update of recipe %s", command.user_id, command.recipe_id
            )
            raise RecipePermissionError(str(command.recipe_id), command.user_id, "update")

        recipe.update(**command.changes())
        await self._repository.save(recipe)
        logger.info("Recipe %s updated", recipe.recipe_id)

        return recipe
