"""DeleteRecipeCommand - delete a recipe."""

import logging
from dataclasses import dataclass

from domain.recipe.core.exceptions.domain_errors import (
    RecipeNotFoundError,
    RecipePermissionError,
)
from domain.recipe.core.ports.repository import IRecipeRepository
from domain.recipe.core.value_objects.recipe_id import RecipeId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteRecipeCommand:
    """Command to delete a recipe.

    Attributes:
        recipe_id: Recipe to delete
        user_id: User requesting deletion (must be the owner)
    """

    recipe_id: RecipeId
    user_id: str


class DeleteRecipeHandler:
    """Handler for DeleteRecipeCommand."""

    def __init__(self, repository: IRecipeRepository):
        self._repository = repository

    async def handle(self, command: DeleteRecipeCommand) -> RecipeId:
        """
        Handle recipe deletion command.

        Returns:
            RecipeId: ID of the deleted recipe

        Raises:
            RecipeNotFoundError: If recipe doesn't exist
            RecipePermissionError: If user is not the owner
        """
        recipe = await self._repository.find_by_id(command.recipe_id)
        if recipe is None:
            raise RecipeNotFoundError(str(command.recipe_id))

        if not recipe.is_owned_by(command.user_id):
            logger.warning(
                "User %s refused deletion of recipe %s", command.user_id, command.recipe_id
            )
            raise RecipePermissionError(str(command.recipe_id), command.user_id, "delete")

        await self._repository.delete(command.recipe_id)
        logger.info("Recipe %s deleted", command.recipe_id)

        return command.recipe_id
