"""Servings utility functions for GraphQL resolvers."""

from domain.recipe.core.value_objects.number import Number


def clamp_servings(servings: Number, bounds: tuple[int, int]) -> Number:
    """Clamp user-chosen servings into the accepted range.

    The scaler itself only rejects non-positive servings; the API narrows
    what users can ask for, as the servings selector does.

    Examples:
        >>> clamp_servings(0, (1, 100))
        1
        >>> clamp_servings(250, (1, 100))
        100
        >>> clamp_servings(6, (1, 100))
        6
    """
    low, high = bounds
    return max(low, min(high, servings))
