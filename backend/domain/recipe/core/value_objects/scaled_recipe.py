"""ScaledRecipe value object - a recipe's ingredients for chosen servings."""

from dataclasses import dataclass, field

from .number import Number
from .scaled_ingredient import ScaledIngredient


@dataclass(frozen=True)
class ScaledRecipe:
    """Ingredient list of a recipe recomputed for ``servings``.

    Attributes:
        recipe_id: Scaled recipe identifier
        title: Recipe title
        original_servings: Servings the recipe is written for
        servings: Servings the ingredients were scaled to
        ingredients: Scaled ingredients, in recipe order
        suggestions: Quick-select serving sizes for the recipe
    """

    recipe_id: str
    title: str
    original_servings: Number
    servings: Number
    ingredients: list[ScaledIngredient] = field(default_factory=list)
    suggestions: list[Number] = field(default_factory=list)

    @property
    def is_scaled(self) -> bool:
        """True when servings differ from the recipe's own servings."""
        return self.servings != self.original_servings

    @property
    def scaling_factor(self) -> float:
        return self.servings / self.original_servings
