"""Domain exceptions for recipes and ingredient scaling."""

from typing import Optional


class RecipeDomainError(Exception):
    """Base exception for recipe domain errors."""

    pass


class InvalidRecipeError(RecipeDomainError):
    """Raised when recipe validation fails."""

    pass


class RecipeNotFoundError(RecipeDomainError):
    """Raised when recipe cannot be found."""

    def __init__(self, recipe_id: str):
        super().__init__(f"Recipe not found: {recipe_id}")
        self.recipe_id = recipe_id


class RecipePermissionError(RecipeDomainError):
    """Raised when a user modifies a recipe they do not own."""

    def __init__(self, recipe_id: str, user_id: str, action: str = "modify"):
        super().__init__(
            f"User {user_id} does not have permission to {action} recipe {recipe_id}"
        )
        self.recipe_id = recipe_id
        self.user_id = user_id
        self.action = action


class ScalingError(RecipeDomainError):
    """Base exception for ingredient scaling errors."""

    pass


class InvalidServingsError(ScalingError):
    """Raised when original or new servings are not positive."""

    def __init__(self, original_servings: float, new_servings: Optional[float] = None):
        if new_servings is None:
            message = f"Servings must be a positive number, got {original_servings}"
        else:
            message = (
                "Servings must be positive numbers, got "
                f"original={original_servings}, new={new_servings}"
            )
        super().__init__(message)
        self.original_servings = original_servings
        self.new_servings = new_servings


class InvalidQuantityError(ScalingError):
    """Raised when an ingredient quantity is negative."""

    def __init__(self, quantity: float):
        super().__init__(f"Quantity cannot be negative, got {quantity}")
        self.quantity = quantity


class InvalidInputError(ScalingError):
    """Raised when scaling input has the wrong shape."""

    pass
