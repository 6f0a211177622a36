"""JSON file persistence implementations."""

from infrastructure.persistence.json_file.recipe_repository import (
    JsonFileRecipeRepository,
    RecipeStorageError,
)

__all__ = [
    "JsonFileRecipeRepository",
    "RecipeStorageError",
]
