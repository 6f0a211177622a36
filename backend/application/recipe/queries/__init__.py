"""Recipe queries."""

from .get_recipe import GetRecipeQuery, ListRecipesQuery, RecipeQueryHandler
from .scale_recipe import ScaleRecipeHandler, ScaleRecipeQuery

__all__ = [
    "GetRecipeQuery",
    "ListRecipesQuery",
    "RecipeQueryHandler",
    "ScaleRecipeQuery",
    "ScaleRecipeHandler",
]
