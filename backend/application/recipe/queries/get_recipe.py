"""Recipe read queries."""

from dataclasses import dataclass
from typing import Optional

from domain.recipe.core.entities.recipe import Recipe
from domain.recipe.core.ports.repository import IRecipeRepository
from domain.recipe.core.value_objects.recipe_id import RecipeId


@dataclass(frozen=True)
class GetRecipeQuery:
    """Query to retrieve a recipe by ID."""

    recipe_id: RecipeId


@dataclass(frozen=True)
class ListRecipesQuery:
    """Query to list recipes.

    Attributes:
        owner_id: When set, only recipes created by this user
    """

    owner_id: Optional[str] = None


class RecipeQueryHandler:
    """Read-only access to recipes via repository."""

    def __init__(self, repository: IRecipeRepository):
        self._repository = repository

    async def handle_get(self, query: GetRecipeQuery) -> Optional[Recipe]:
        return await self._repository.find_by_id(query.recipe_id)

    async def handle_list(self, query: ListRecipesQuery) -> list[Recipe]:
        if query.owner_id is not None:
            return await self._repository.find_by_owner(query.owner_id)
        return await self._repository.find_all()
