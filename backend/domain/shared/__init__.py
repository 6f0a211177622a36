"""Helpers shared by the recipe and user domains."""
