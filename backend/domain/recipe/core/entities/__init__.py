"""Entities for recipe domain."""

from .recipe import Recipe

__all__ = ["Recipe"]
