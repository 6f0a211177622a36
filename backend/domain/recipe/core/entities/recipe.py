"""Recipe entity - aggregate root for shared recipes."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping

from domain.shared.timestamps import format_timestamp, parse_timestamp, utcnow

from ..exceptions.domain_errors import InvalidInputError, InvalidRecipeError
from ..value_objects.ingredient import Ingredient
from ..value_objects.number import is_number
from ..value_objects.recipe_id import RecipeId

UPDATABLE_FIELDS = (
    "title",
    "description",
    "servings",
    "ingredients",
    "instructions",
    "image_url",
    "cook_time",
    "prep_time",
)


def _field(data: Mapping[str, Any], key: str, default: Any) -> Any:
    value = data.get(key)
    return default if value is None else value


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def _is_minutes(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


@dataclass
class Recipe:
    """Recipe aggregate root.

    Ingredient quantities are written for ``servings`` people; scaling to a
    different number of servings never changes the stored recipe.

    Attributes:
        recipe_id: Unique recipe identifier
        title: Recipe title
        description: Short description
        ingredients: Ingredient list, in display order
        instructions: Preparation steps, in order
        owner_id: User who created the recipe
        servings: Servings the quantities are written for
        image_url: Optional picture URL
        cook_time: Cooking time in minutes
        prep_time: Preparation time in minutes
        created_at: Creation timestamp (UTC)
        updated_at: Last update timestamp (UTC)
    """

    recipe_id: RecipeId
    title: str
    description: str
    ingredients: list[Ingredient]
    instructions: list[str]
    owner_id: str
    servings: float = 1
    image_url: str = ""
    cook_time: int = 0
    prep_time: int = 0
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def __post_init__(self) -> None:
        """Validate recipe invariants.

        Raises:
            InvalidRecipeError: If validation fails
        """
        self.validate_invariants()

    def validate_invariants(self) -> None:
        """Validate domain invariants.

        Raises:
            InvalidRecipeError: If any invariant is violated
        """
        if _is_blank(self.title):
            raise InvalidRecipeError("Title is required")

        if _is_blank(self.description):
            raise InvalidRecipeError("Description is required")

        if _is_blank(self.owner_id):
            raise InvalidRecipeError("Owner ID cannot be empty")

        if not is_number(self.servings):
            raise InvalidRecipeError(f"Servings must be a number, got {self.servings!r}")
        if self.servings <= 0:
            raise InvalidRecipeError(f"Servings must be positive, got {self.servings}")

        if not isinstance(self.ingredients, list) or not self.ingredients:
            raise InvalidRecipeError("Ingredients must be a non-empty list")
        for ingredient in self.ingredients:
            if not isinstance(ingredient, Ingredient):
                raise InvalidRecipeError(f"Invalid ingredient: {ingredient!r}")
            if ingredient.quantity < 0:
                raise InvalidRecipeError(
                    f"Quantity of {ingredient.name!r} cannot be negative, "
                    f"got {ingredient.quantity}"
                )

        if not isinstance(self.instructions, list) or not self.instructions:
            raise InvalidRecipeError("Instructions must be a non-empty list")
        if not all(isinstance(step, str) for step in self.instructions):
            raise InvalidRecipeError("Instructions must be strings")

        if not isinstance(self.image_url, str):
            raise InvalidRecipeError(f"Image URL must be a string, got {self.image_url!r}")

        if not (_is_minutes(self.cook_time) and _is_minutes(self.prep_time)):
            raise InvalidRecipeError(
                "Cook and prep times must be non-negative whole minutes, "
                f"got {self.cook_time!r} and {self.prep_time!r}"
            )

    def is_owned_by(self, user_id: str) -> bool:
        return self.owner_id == user_id

    def update(self, **changes: Any) -> None:
        """Apply a partial update and re-validate.

        Only fields passed with a value other than ``None`` change. The
        recipe is left untouched when the result would be invalid.

        Args:
            **changes: Any of title, description, servings, ingredients,
                instructions, image_url, cook_time, prep_time

        Raises:
            InvalidRecipeError: If a field is unknown or the updated recipe
                violates an invariant
        """
        unknown = set(changes) - set(UPDATABLE_FIELDS)
        if unknown:
            raise InvalidRecipeError(f"Cannot update fields: {sorted(unknown)}")

        previous = {name: getattr(self, name) for name in UPDATABLE_FIELDS}
        for name, value in changes.items():
            if value is not None:
                setattr(self, name, value)

        try:
            self.validate_invariants()
        except InvalidRecipeError:
            for name, value in previous.items():
                setattr(self, name, value)
            raise

        self.updated_at = utcnow()

    @property
    def total_time(self) -> int:
        """Preparation plus cooking time in minutes."""
        return self.prep_time + self.cook_time

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the stored JSON document (camelCase keys)."""
        return {
            "id": str(self.recipe_id),
            "title": self.title,
            "description": self.description,
            "servings": self.servings,
            "ingredients": [ingredient.to_dict() for ingredient in self.ingredients],
            "instructions": list(self.instructions),
            "imageUrl": self.image_url,
            "cookTime": self.cook_time,
            "prepTime": self.prep_time,
            "ownerId": self.owner_id,
            "createdAt": format_timestamp(self.created_at),
            "updatedAt": format_timestamp(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Recipe":
        """Build a recipe from a stored JSON document.

        Raises:
            InvalidRecipeError: If the document is not a valid recipe
        """
        if not isinstance(data, Mapping):
            raise InvalidRecipeError(f"Recipe must be an object, got {data!r}")

        try:
            ingredients = [Ingredient.from_dict(item) for item in data.get("ingredients") or []]
        except (InvalidInputError, TypeError) as e:
            raise InvalidRecipeError(str(e)) from e

        try:
            return cls(
                recipe_id=RecipeId(value=str(data["id"])),
                title=_field(data, "title", ""),
                description=_field(data, "description", ""),
                servings=_field(data, "servings", 1),
                ingredients=ingredients,
                instructions=_field(data, "instructions", []),
                image_url=data.get("imageUrl") or data.get("image") or "",
                cook_time=_field(data, "cookTime", 0),
                prep_time=_field(data, "prepTime", 0),
                owner_id=_field(data, "ownerId", ""),
                created_at=parse_timestamp(data.get("createdAt")),
                updated_at=parse_timestamp(data.get("updatedAt") or data.get("createdAt")),
            )
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            raise InvalidRecipeError(f"Invalid recipe document: {e}") from e
