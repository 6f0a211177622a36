"""Factory for creating recipe repository instances."""

import logging
from typing import Optional

from domain.recipe.core.ports.repository import IRecipeRepository
from infrastructure.config import (
    get_recipes_file,
    get_repository_backend,
    seed_demo_recipes_enabled,
)
from infrastructure.persistence.in_memory.recipe_repository import (
    InMemoryRecipeRepository,
)
from infrastructure.persistence.in_memory.seed_recipes import build_demo_recipes
from infrastructure.persistence.json_file.recipe_repository import (
    JsonFileRecipeRepository,
)

logger = logging.getLogger(__name__)

# Singleton instance
_recipe_repository: Optional[IRecipeRepository] = None


def create_recipe_repository() -> IRecipeRepository:
    """
    Create recipe repository based on REPOSITORY_BACKEND configuration.

    Environment Variables:
        REPOSITORY_BACKEND: 'inmemory' (default) or 'jsonfile'
        RECIPES_FILE: JSON store path (used when type='jsonfile')
        SEED_DEMO_RECIPES: Seed the in-memory store with demo recipes

    Returns:
        IRecipeRepository implementation

    Default:
        Returns InMemoryRecipeRepository if REPOSITORY_BACKEND not set or
        unknown
    """
    repo_type = get_repository_backend()

    if repo_type == "jsonfile":
        path = get_recipes_file()
        logger.info("Using JSON file recipe repository at %s", path)
        return JsonFileRecipeRepository(path)

    if repo_type != "inmemory":
        logger.warning(
            "Unknown REPOSITORY_BACKEND %r, falling back to inmemory", repo_type
        )

    recipes = build_demo_recipes() if seed_demo_recipes_enabled() else []
    logger.info("Using in-memory recipe repository (%d seeded recipes)", len(recipes))
    return InMemoryRecipeRepository(recipes)


def get_recipe_repository() -> IRecipeRepository:
    """
    Get singleton recipe repository instance.

    Lazy initialization on first call.
    """
    global _recipe_repository
    if _recipe_repository is None:
        _recipe_repository = create_recipe_repository()
    return _recipe_repository


def reset_recipe_repository() -> None:
    """
    Reset singleton instance.

    Useful for testing to ensure clean state.
    """
    global _recipe_repository
    _recipe_repository = None
