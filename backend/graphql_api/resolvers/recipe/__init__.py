"""GraphQL resolvers for recipe domain."""

from .mutations import RecipeMutations
from .queries import RecipeQueries

__all__ = [
    "RecipeQueries",
    "RecipeMutations",
]
