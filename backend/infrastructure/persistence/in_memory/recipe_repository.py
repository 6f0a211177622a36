"""In-memory implementation of IRecipeRepository."""

from copy import deepcopy
from typing import Iterable, Optional

from domain.recipe.core.entities.recipe import Recipe
from domain.recipe.core.ports.repository import IRecipeRepository
from domain.recipe.core.value_objects.recipe_id import RecipeId


class InMemoryRecipeRepository(IRecipeRepository):
    """
    In-memory implementation of recipe repository.

    Uses a dictionary to store recipes in memory. Suitable for testing
    and development. Data is lost when the application stops.
    """

    def __init__(self, recipes: Optional[Iterable[Recipe]] = None) -> None:
        """Initialize repository, optionally with starting recipes."""
        self._recipes: dict[str, Recipe] = {}
        for recipe in recipes or ():
            self._recipes[str(recipe.recipe_id)] = deepcopy(recipe)

    async def save(self, recipe: Recipe) -> None:
        """
        Save or update recipe in memory.

        Args:
            recipe: Recipe to save
        """
        # Deep copy to prevent external mutations
        self._recipes[str(recipe.recipe_id)] = deepcopy(recipe)

    async def find_by_id(self, recipe_id: RecipeId) -> Optional[Recipe]:
        """
        Find recipe by ID.

        Returns:
            Deep copy of recipe if found, None otherwise
        """
        recipe = self._recipes.get(str(recipe_id))
        return deepcopy(recipe) if recipe else None

    async def find_all(self) -> list[Recipe]:
        return [deepcopy(recipe) for recipe in self._sorted()]

    async def find_by_owner(self, owner_id: str) -> list[Recipe]:
        return [deepcopy(recipe) for recipe in self._sorted() if recipe.owner_id == owner_id]

    async def delete(self, recipe_id: RecipeId) -> bool:
        """
        Delete recipe by ID.

        Returns:
            True if the recipe existed
        """
        return self._recipes.pop(str(recipe_id), None) is not None

    async def exists(self, recipe_id: RecipeId) -> bool:
        return str(recipe_id) in self._recipes

    def _sorted(self) -> list[Recipe]:
        return sorted(self._recipes.values(), key=lambda recipe: recipe.created_at)

    def clear(self) -> None:
        """
        Clear all recipes from memory.

        Useful for test cleanup.
        """
        self._recipes.clear()

    def count(self) -> int:
        """
        Get total number of recipes in memory.

        Returns:
            Number of recipes
        """
        return len(self._recipes)
