"""GraphQL types for recipe domain.

These types support recipe browsing and editing, and the ingredient scaler
that recomputes a recipe for a different number of servings.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

import strawberry

__all__ = [
    # Output types
    "IngredientType",
    "RecipeType",
    "ScaledIngredientType",
    "ScaledRecipeType",
    "DeleteRecipeResult",
    # Input types
    "IngredientInput",
    "CreateRecipeInput",
    "UpdateRecipeInput",
]


# ============================================
# OUTPUT TYPES
# ============================================


@strawberry.type
class IngredientType:
    """Ingredient amount as written in the recipe."""

    name: str
    quantity: float
    unit: str


@strawberry.type
class ScaledIngredientType:
    """Ingredient recomputed for the requested servings."""

    name: str
    quantity: float  # After unit adjustment
    unit: str
    formatted_quantity: str  # e.g. "1 1/2", "pinch"
    original_quantity: float
    original_unit: str

    @strawberry.field
    def display(self) -> str:
        """Display line, e.g. "1 1/2 cup flour"."""
        return " ".join(part for part in (self.formatted_quantity, self.unit, self.name) if part)


@strawberry.type
class RecipeType:
    """Shared recipe."""

    id: str
    title: str
    description: str
    servings: float
    ingredients: List[IngredientType]
    instructions: List[str]
    image_url: str
    cook_time: int  # minutes
    prep_time: int  # minutes
    owner_id: str
    created_at: datetime
    updated_at: datetime


@strawberry.type
class ScaledRecipeType:
    """Recipe ingredients for the requested servings."""

    recipe_id: str
    title: str
    original_servings: float
    servings: float
    is_scaled: bool
    scaling_factor: float
    ingredients: List[ScaledIngredientType]
    suggestions: List[float]


@strawberry.type
class DeleteRecipeResult:
    """Result of recipe deletion."""

    recipe_id: str
    message: str


# ============================================
# INPUT TYPES
# ============================================


@strawberry.input
class IngredientInput:
    """Ingredient amount for recipe input and ad-hoc scaling."""

    name: str
    quantity: float
    unit: str = ""


@strawberry.input
class CreateRecipeInput:
    """Input for creating a recipe. The owner is the logged-in caller."""

    title: str
    description: str
    ingredients: List[IngredientInput]
    instructions: List[str]
    servings: Optional[float] = None
    image_url: Optional[str] = None
    cook_time: Optional[int] = None
    prep_time: Optional[int] = None


@strawberry.input
class UpdateRecipeInput:
    """Input for updating a recipe. Omitted fields are unchanged."""

    recipe_id: str
    title: Optional[str] = None
    description: Optional[str] = None
    servings: Optional[float] = None
    ingredients: Optional[List[IngredientInput]] = None
    instructions: Optional[List[str]] = None
    image_url: Optional[str] = None
    cook_time: Optional[int] = None
    prep_time: Optional[int] = None
