"""Recipe commands."""

from .create_recipe import CreateRecipeCommand, CreateRecipeHandler
from .delete_recipe import DeleteRecipeCommand, DeleteRecipeHandler
from .update_recipe import UpdateRecipeCommand, UpdateRecipeHandler

__all__ = [
    "CreateRecipeCommand",
    "CreateRecipeHandler",
    "UpdateRecipeCommand",
    "UpdateRecipeHandler",
    "DeleteRecipeCommand",
    "DeleteRecipeHandler",
]
