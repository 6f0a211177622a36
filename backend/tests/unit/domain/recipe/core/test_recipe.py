"""Unit tests for Recipe entity and RecipeFactory."""

from datetime import datetime, timezone

import pytest

from domain.recipe.core.entities.recipe import Recipe
from domain.recipe.core.exceptions.domain_errors import InvalidRecipeError
from domain.recipe.core.factories.recipe_factory import RecipeFactory
from domain.recipe.core.value_objects.ingredient import Ingredient
from domain.recipe.core.value_objects.recipe_id import RecipeId


def make_recipe(**overrides):
    """Build a valid recipe, overriding any field."""
    values = dict(
        recipe_id=RecipeId("r1"),
        title="Pancakes",
        description="Fluffy breakfast pancakes",
        ingredients=[Ingredient("flour", 2, "cup"), Ingredient("eggs", 2)],
        instructions=["Mix", "Cook"],
        owner_id="user123",
        servings=4,
    )
    values.update(overrides)
    return Recipe(**values)


class TestRecipeInvariants:
    """Test recipe validation."""

    def test_valid_recipe(self):
        """Test defaults on a valid recipe."""
        recipe = make_recipe()

        assert recipe.image_url == ""
        assert recipe.cook_time == 0
        assert recipe.created_at.tzinfo is not None

    @pytest.mark.parametrize(
        "overrides,message",
        [
            ({"title": "  "}, "Title"),
            ({"description": ""}, "Description"),
            ({"owner_id": ""}, "Owner"),
            ({"servings": 0}, "positive"),
            ({"servings": -2}, "positive"),
            ({"servings": "4"}, "number"),
            ({"ingredients": []}, "Ingredients"),
            ({"ingredients": [Ingredient("flour", -1, "cup")]}, "negative"),
            ({"ingredients": [{"name": "flour"}]}, "Invalid ingredient"),
            ({"instructions": []}, "Instructions"),
            ({"cook_time": -5}, "times"),
            ({"title": 5}, "Title"),
            ({"description": ["soup"]}, "Description"),
            ({"owner_id": 42}, "Owner"),
            ({"instructions": "Mix"}, "Instructions"),
            ({"instructions": ["Mix", 2]}, "Instructions"),
            ({"image_url": None}, "Image URL"),
            ({"cook_time": "10"}, "times"),
            ({"prep_time": True}, "times"),
        ],
    )
    def test_invalid_recipe(self, overrides, message):
        """Test each invariant is enforced."""
        with pytest.raises(InvalidRecipeError, match=message):
            make_recipe(**overrides)

    def test_fractional_servings_allowed(self):
        """Test servings need not be whole."""
        assert make_recipe(servings=1.5).servings == 1.5


class TestRecipeBehavior:
    """Test recipe methods."""

    def test_is_owned_by(self):
        """Test ownership check."""
        recipe = make_recipe()

        assert recipe.is_owned_by("user123")
        assert not recipe.is_owned_by("someone-else")

    def test_total_time(self):
        """Test prep plus cook time."""
        assert make_recipe(prep_time=10, cook_time=25).total_time == 35

    def test_update_changes_fields_and_timestamp(self):
        """Test partial update."""
        recipe = make_recipe()
        before = recipe.updated_at

        recipe.update(title="Crepes", servings=6, description=None)

        assert recipe.title == "Crepes"
        assert recipe.servings == 6
        assert recipe.description == "Fluffy breakfast pancakes"
        assert recipe.updated_at >= before

    def test_update_rolls_back_on_invalid(self):
        """Test invalid update leaves the recipe unchanged."""
        recipe = make_recipe()

        with pytest.raises(InvalidRecipeError):
            recipe.update(title="Crepes", servings=0)

        assert recipe.title == "Pancakes"
        assert recipe.servings == 4

    def test_update_unknown_field(self):
        """Test only updatable fields are accepted."""
        recipe = make_recipe()

        with pytest.raises(InvalidRecipeError, match="Cannot update"):
            recipe.update(owner_id="thief")


class TestRecipeSerialization:
    """Test JSON document mapping."""

    def test_to_dict(self):
        """Test camelCase document."""
        created = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)
        recipe = make_recipe(created_at=created, updated_at=created, cook_time=15)

        document = recipe.to_dict()

        assert document["id"] == "r1"
        assert document["cookTime"] == 15
        assert document["ownerId"] == "user123"
        assert document["createdAt"] == "2024-03-01T12:00:00Z"
        assert document["ingredients"][1] == {"name": "eggs", "quantity": 2, "unit": ""}

    def test_round_trip(self):
        """Test to_dict then from_dict gives an equal recipe."""
        recipe = make_recipe(image_url="https://img/p.jpg", prep_time=5)

        assert Recipe.from_dict(recipe.to_dict()) == recipe

    def test_from_dict_legacy_image_key(self):
        """Test documents using "image" instead of "imageUrl"."""
        document = make_recipe().to_dict()
        document.pop("imageUrl")
        document["image"] = "https://img/legacy.jpg"

        assert Recipe.from_dict(document).image_url == "https://img/legacy.jpg"

    def test_from_dict_missing_servings_defaults_to_one(self):
        """Test servings default."""
        document = make_recipe().to_dict()
        del document["servings"]

        assert Recipe.from_dict(document).servings == 1

    def test_from_dict_stored_zero_servings_rejected(self):
        """Test a stored 0 is not replaced by the default."""
        document = make_recipe().to_dict()
        document["servings"] = 0

        with pytest.raises(InvalidRecipeError, match="positive"):
            Recipe.from_dict(document)

    def test_from_dict_null_times_default_to_zero(self):
        document = make_recipe().to_dict()
        document["cookTime"] = None
        document["prepTime"] = None

        recipe = Recipe.from_dict(document)

        assert recipe.cook_time == 0
        assert recipe.prep_time == 0

    @pytest.mark.parametrize(
        "key,value",
        [
            ("title", 5),
            ("cookTime", "10"),
            ("ownerId", 7),
            ("ingredients", 3),
            ("createdAt", 1700000000),
        ],
    )
    def test_from_dict_wrong_types(self, key, value):
        """Test badly typed documents raise InvalidRecipeError, never TypeError."""
        document = make_recipe().to_dict()
        document[key] = value

        with pytest.raises(InvalidRecipeError):
            Recipe.from_dict(document)

    def test_from_dict_missing_id(self):
        """Test id is required."""
        document = make_recipe().to_dict()
        del document["id"]

        with pytest.raises(InvalidRecipeError):
            Recipe.from_dict(document)

    def test_from_dict_bad_ingredient(self):
        """Test ingredient errors surface as recipe errors."""
        document = make_recipe().to_dict()
        document["ingredients"] = [{"name": "flour", "quantity": "lots"}]

        with pytest.raises(InvalidRecipeError):
            Recipe.from_dict(document)


class TestRecipeFactory:
    """Test RecipeFactory."""

    def test_create_applies_defaults(self):
        """Test new recipes get an id and defaults."""
        recipe = RecipeFactory.create(
            owner_id="user123",
            title="Toast",
            description="Bread, toasted",
            ingredients=[Ingredient("bread", 2, "slice")],
            instructions=["Toast"],
        )

        assert recipe.servings == 1
        assert recipe.image_url == ""
        assert recipe.prep_time == 0
        assert str(recipe.recipe_id)

    def test_create_generates_unique_ids(self):
        """Test two recipes never share an id."""
        kwargs = dict(
            owner_id="user123",
            title="Toast",
            description="Bread, toasted",
            ingredients=[Ingredient("bread", 2, "slice")],
            instructions=["Toast"],
            servings=2,
        )

        assert RecipeFactory.create(**kwargs).recipe_id != RecipeFactory.create(**kwargs).recipe_id

    def test_create_invalid(self):
        """Test invalid input is rejected."""
        with pytest.raises(InvalidRecipeError):
            RecipeFactory.create(
                owner_id="user123",
                title="",
                description="x",
                ingredients=[Ingredient("bread", 2)],
                instructions=["Toast"],
            )
