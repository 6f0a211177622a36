"""Factories for recipe domain."""

from .recipe_factory import RecipeFactory

__all__ = ["RecipeFactory"]
