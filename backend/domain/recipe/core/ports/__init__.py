"""Ports for recipe domain."""

from .repository import IRecipeRepository

__all__ = ["IRecipeRepository"]
