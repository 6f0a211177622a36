"""JSON-file implementation of IRecipeRepository.

Recipes live in a single document::

    {"recipes": [{"id": "...", "title": "...", ...}, ...]}

The whole file is read on every call and rewritten on every change.
A missing file reads as an empty store. There is no locking: concurrent
writers can lose updates.
"""

import asyncio
import logging
from pathlib import Path
from typing import Any, Optional, Union

from domain.recipe.core.entities.recipe import Recipe
from domain.recipe.core.exceptions.domain_errors import InvalidRecipeError
from domain.recipe.core.ports.repository import IRecipeRepository
from domain.recipe.core.value_objects.recipe_id import RecipeId
from infrastructure.persistence.json_file.document_store import (
    JsonDocumentStore,
    JsonStorageError,
)

logger = logging.getLogger(__name__)


class RecipeStorageError(JsonStorageError):
    """Raised when the recipe file cannot be read or written."""

    label = "Recipe store"


class JsonFileRecipeRepository(IRecipeRepository):
    """Recipe repository backed by a JSON file on disk."""

    def __init__(self, path: Union[str, Path]) -> None:
        self._store = JsonDocumentStore(path, ("recipes",), RecipeStorageError)

    @property
    def path(self) -> Path:
        return self._store.path

    def _read_documents(self) -> list[Any]:
        return self._store.read()["recipes"]

    def _write_documents(self, documents: list[dict[str, Any]]) -> None:
        self._store.write({"recipes": documents})

    def _load(self) -> list[Recipe]:
        recipes = []
        for document in self._read_documents():
            try:
                recipes.append(Recipe.from_dict(document))
            except InvalidRecipeError as e:
                recipe_id = document.get("id") if isinstance(document, dict) else None
                raise RecipeStorageError(
                    self.path, f"invalid recipe {recipe_id!r}: {e}", e
                ) from e
        return recipes

    def _save_sync(self, recipe: Recipe) -> None:
        documents = self._read_documents()
        document = recipe.to_dict()

        for index, existing in enumerate(documents):
            if isinstance(existing, dict) and existing.get("id") == document["id"]:
                documents[index] = document
                break
        else:
            documents.append(document)

        self._write_documents(documents)
        logger.debug("Saved recipe %s to %s", document["id"], self.path)

    def _delete_sync(self, recipe_id: str) -> bool:
        documents = self._read_documents()
        remaining = [
            document
            for document in documents
            if not (isinstance(document, dict) and document.get("id") == recipe_id)
        ]
        if len(remaining) == len(documents):
            return False

        self._write_documents(remaining)
        logger.debug("Deleted recipe %s from %s", recipe_id, self.path)
        return True

    async def save(self, recipe: Recipe) -> None:
        await asyncio.to_thread(self._save_sync, recipe)

    async def find_by_id(self, recipe_id: RecipeId) -> Optional[Recipe]:
        for recipe in await asyncio.to_thread(self._load):
            if recipe.recipe_id == recipe_id:
                return recipe
        return None

    async def find_all(self) -> list[Recipe]:
        recipes = await asyncio.to_thread(self._load)
        return sorted(recipes, key=lambda recipe: recipe.created_at)

    async def find_by_owner(self, owner_id: str) -> list[Recipe]:
        return [recipe for recipe in await self.find_all() if recipe.owner_id == owner_id]

    async def delete(self, recipe_id: RecipeId) -> bool:
        return await asyncio.to_thread(self._delete_sync, str(recipe_id))

    async def exists(self, recipe_id: RecipeId) -> bool:
        return await self.find_by_id(recipe_id) is not None
