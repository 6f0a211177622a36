"""Unit tests for InMemoryRecipeRepository."""

from datetime import datetime, timedelta, timezone

import pytest

from domain.recipe.core.entities.recipe import Recipe
from domain.recipe.core.value_objects.ingredient import Ingredient
from domain.recipe.core.value_objects.recipe_id import RecipeId
from infrastructure.persistence.in_memory.recipe_repository import (
    InMemoryRecipeRepository,
)
from infrastructure.persistence.in_memory.seed_recipes import (
    DEMO_OWNER_ID,
    build_demo_recipes,
)


def make_recipe(recipe_id: str = "r1", owner_id: str = "user123", minutes: int = 0) -> Recipe:
    created = datetime(2024, 1, 1, tzinfo=timezone.utc) + timedelta(minutes=minutes)
    return Recipe(
        recipe_id=RecipeId(recipe_id),
        title="Pancakes",
        description="Fluffy breakfast pancakes",
        ingredients=[Ingredient("flour", 2, "cup")],
        instructions=["Mix", "Cook"],
        owner_id=owner_id,
        servings=4,
        created_at=created,
        updated_at=created,
    )


@pytest.fixture
def repository() -> InMemoryRecipeRepository:
    """Fixture providing clean InMemoryRecipeRepository."""
    return InMemoryRecipeRepository()


class TestInMemoryRecipeRepository:
    """Test in-memory persistence."""

    @pytest.mark.asyncio
    async def test_save_and_find(self, repository):
        recipe = make_recipe()

        await repository.save(recipe)
        found = await repository.find_by_id(RecipeId("r1"))

        assert found == recipe
        assert repository.count() == 1

    @pytest.mark.asyncio
    async def test_find_missing(self, repository):
        assert await repository.find_by_id(RecipeId("missing")) is None

    @pytest.mark.asyncio
    async def test_returns_copies(self, repository):
        """Mutating a returned recipe must not change the stored one."""
        await repository.save(make_recipe())

        found = await repository.find_by_id(RecipeId("r1"))
        assert found is not None
        found.ingredients.append(Ingredient("sugar", 1, "tbsp"))

        again = await repository.find_by_id(RecipeId("r1"))
        assert again is not None
        assert len(again.ingredients) == 1

    @pytest.mark.asyncio
    async def test_save_overwrites(self, repository):
        recipe = make_recipe()
        await repository.save(recipe)

        recipe.update(title="Crepes")
        await repository.save(recipe)

        found = await repository.find_by_id(RecipeId("r1"))
        assert found is not None
        assert found.title == "Crepes"
        assert repository.count() == 1

    @pytest.mark.asyncio
    async def test_find_all_and_by_owner(self, repository):
        await repository.save(make_recipe("b", "bob", minutes=2))
        await repository.save(make_recipe("a", "alice", minutes=1))
        await repository.save(make_recipe("c", "alice", minutes=3))

        all_ids = [str(r.recipe_id) for r in await repository.find_all()]
        alice_ids = [str(r.recipe_id) for r in await repository.find_by_owner("alice")]

        assert all_ids == ["a", "b", "c"]
        assert alice_ids == ["a", "c"]
        assert await repository.find_by_owner("nobody") == []

    @pytest.mark.asyncio
    async def test_delete(self, repository):
        await repository.save(make_recipe())

        assert await repository.delete(RecipeId("r1")) is True
        assert await repository.exists(RecipeId("r1")) is False
        assert await repository.delete(RecipeId("r1")) is False

    def test_clear(self):
        repository = InMemoryRecipeRepository([make_recipe("a"), make_recipe("b")])

        repository.clear()

        assert repository.count() == 0


class TestDemoRecipes:
    """Test seeded demo content."""

    def test_demo_recipes_are_valid(self):
        recipes = build_demo_recipes()

        assert [str(r.recipe_id) for r in recipes] == ["r1", "r2"]
        assert all(r.owner_id == DEMO_OWNER_ID for r in recipes)

    def test_fresh_copies(self):
        """Each call builds new objects."""
        first, second = build_demo_recipes(), build_demo_recipes()

        first[0].update(title="Changed")

        assert second[0].title == "Beginner Pasta Primavera"
