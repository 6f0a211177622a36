"""IRecipeRepository port - repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.recipe import Recipe
from ..value_objects.recipe_id import RecipeId


class IRecipeRepository(ABC):
    """Port for recipe persistence.

    Infrastructure adapters implement this interface; the application
    layer only depends on it.
    """

    @abstractmethod
    async def save(self, recipe: Recipe) -> None:
        """Save recipe (create or update).

        Args:
            recipe: Recipe to save
        """
        pass

    @abstractmethod
    async def find_by_id(self, recipe_id: RecipeId) -> Optional[Recipe]:
        """Find recipe by ID.

        Returns:
            Optional[Recipe]: Recipe if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Recipe]:
        """List every recipe, oldest first."""
        pass

    @abstractmethod
    async def find_by_owner(self, owner_id: str) -> list[Recipe]:
        """List recipes created by a user, oldest first."""
        pass

    @abstractmethod
    async def delete(self, recipe_id: RecipeId) -> bool:
        """Delete recipe.

        Returns:
            bool: True if a recipe was removed
        """
        pass

    @abstractmethod
    async def exists(self, recipe_id: RecipeId) -> bool:
        """Check if a recipe exists."""
        pass
