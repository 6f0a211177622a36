"""Unit tests for recipe commands and handlers."""

from unittest.mock import AsyncMock

import pytest

from application.recipe.commands.create_recipe import (
    CreateRecipeCommand,
    CreateRecipeHandler,
)
from application.recipe.commands.delete_recipe import (
    DeleteRecipeCommand,
    DeleteRecipeHandler,
)
from application.recipe.commands.update_recipe import (
    UpdateRecipeCommand,
    UpdateRecipeHandler,
)
from domain.recipe.core.entities.recipe import Recipe
from domain.recipe.core.exceptions.domain_errors import (
    InvalidRecipeError,
    RecipeNotFoundError,
    RecipePermissionError,
)
from domain.recipe.core.value_objects.ingredient import Ingredient
from domain.recipe.core.value_objects.recipe_id import RecipeId
from infrastructure.persistence.in_memory.recipe_repository import (
    InMemoryRecipeRepository,
)


@pytest.fixture
def sample_recipe() -> Recipe:
    """Recipe owned by user123."""
    return Recipe(
        recipe_id=RecipeId("r1"),
        title="Pancakes",
        description="Fluffy breakfast pancakes",
        ingredients=[Ingredient("flour", 2, "cup")],
        instructions=["Mix", "Cook"],
        owner_id="user123",
        servings=4,
    )


@pytest.fixture
def repository(sample_recipe: Recipe) -> InMemoryRecipeRepository:
    return InMemoryRecipeRepository([sample_recipe])


class TestCreateRecipe:
    """Test CreateRecipeHandler."""

    @pytest.mark.asyncio
    async def test_creates_and_saves(self):
        """Test recipe is built by the factory and persisted."""
        repository = AsyncMock()
        handler = CreateRecipeHandler(repository)
        command = CreateRecipeCommand(
            owner_id="user123",
            title="Toast",
            description="Bread, toasted",
            ingredients=[Ingredient("bread", 2, "slice")],
            instructions=["Toast"],
            servings=2,
        )

        recipe = await handler.handle(command)

        assert recipe.owner_id == "user123"
        assert recipe.servings == 2
        repository.save.assert_called_once_with(recipe)

    @pytest.mark.asyncio
    async def test_invalid_recipe_not_saved(self):
        """Test validation errors stop before persistence."""
        repository = AsyncMock()
        handler = CreateRecipeHandler(repository)
        command = CreateRecipeCommand(
            owner_id="user123",
            title="Toast",
            description="Bread, toasted",
            instructions=["Toast"],
        )

        with pytest.raises(InvalidRecipeError):
            await handler.handle(command)

        repository.save.assert_not_called()


class TestUpdateRecipe:
    """Test UpdateRecipeHandler."""

    def test_command_requires_a_change(self):
        """Test empty updates are rejected."""
        with pytest.raises(ValueError, match="At least one field"):
            UpdateRecipeCommand(recipe_id=RecipeId("r1"), user_id="user123")

    def test_command_changes(self):
        """Test only provided fields are changes."""
        command = UpdateRecipeCommand(
            recipe_id=RecipeId("r1"), user_id="user123", servings=6, cook_time=0
        )

        assert command.changes() == {"servings": 6, "cook_time": 0}

    @pytest.mark.asyncio
    async def test_owner_updates(self, repository):
        """Test owner can update and the change is persisted."""
        handler = UpdateRecipeHandler(repository)

        updated = await handler.handle(
            UpdateRecipeCommand(recipe_id=RecipeId("r1"), user_id="user123", servings=6)
        )

        assert updated.servings == 6
        stored = await repository.find_by_id(RecipeId("r1"))
        assert stored is not None
        assert stored.servings == 6

    @pytest.mark.asyncio
    async def test_other_user_refused(self, repository):
        """Test non-owner gets a permission error."""
        handler = UpdateRecipeHandler(repository)

        with pytest.raises(RecipePermissionError, match="update"):
            await handler.handle(
                UpdateRecipeCommand(recipe_id=RecipeId("r1"), user_id="intruder", title="Mine")
            )

        stored = await repository.find_by_id(RecipeId("r1"))
        assert stored is not None
        assert stored.title == "Pancakes"

    @pytest.mark.asyncio
    async def test_missing_recipe(self, repository):
        """Test unknown recipe."""
        handler = UpdateRecipeHandler(repository)

        with pytest.raises(RecipeNotFoundError):
            await handler.handle(
                UpdateRecipeCommand(recipe_id=RecipeId("nope"), user_id="user123", title="X")
            )

    @pytest.mark.asyncio
    async def test_invalid_update_not_saved(self, repository):
        """Test invalid values leave the stored recipe unchanged."""
        handler = UpdateRecipeHandler(repository)

        with pytest.raises(InvalidRecipeError):
            await handler.handle(
                UpdateRecipeCommand(recipe_id=RecipeId("r1"), user_id="user123", servings=-1)
            )

        stored = await repository.find_by_id(RecipeId("r1"))
        assert stored is not None
        assert stored.servings == 4


class TestDeleteRecipe:
    """Test DeleteRecipeHandler."""

    @pytest.mark.asyncio
    async def test_owner_deletes(self, repository):
        """Test owner can delete."""
        handler = DeleteRecipeHandler(repository)

        deleted_id = await handler.handle(
            DeleteRecipeCommand(recipe_id=RecipeId("r1"), user_id="user123")
        )

        assert deleted_id == RecipeId("r1")
        assert await repository.exists(RecipeId("r1")) is False

    @pytest.mark.asyncio
    async def test_other_user_refused(self, repository):
        """Test non-owner cannot delete."""
        handler = DeleteRecipeHandler(repository)

        with pytest.raises(RecipePermissionError, match="delete"):
            await handler.handle(DeleteRecipeCommand(recipe_id=RecipeId("r1"), user_id="intruder"))

        assert await repository.exists(RecipeId("r1")) is True

    @pytest.mark.asyncio
    async def test_missing_recipe(self, repository):
        """Test unknown recipe."""
        handler = DeleteRecipeHandler(repository)

        with pytest.raises(RecipeNotFoundError, match="nope"):
            await handler.handle(DeleteRecipeCommand(recipe_id=RecipeId("nope"), user_id="user123"))
