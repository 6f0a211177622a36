"""Domain exceptions for recipes."""

from .domain_errors import (
    InvalidInputError,
    InvalidQuantityError,
    InvalidRecipeError,
    InvalidServingsError,
    RecipeDomainError,
    RecipeNotFoundError,
    RecipePermissionError,
    ScalingError,
)

__all__ = [
    "RecipeDomainError",
    "InvalidRecipeError",
    "RecipeNotFoundError",
    "RecipePermissionError",
    "ScalingError",
    "InvalidServingsError",
    "InvalidQuantityError",
    "InvalidInputError",
]
