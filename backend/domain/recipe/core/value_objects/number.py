"""Numeric type shared by quantities and servings."""

from typing import Any, Union

Number = Union[int, float]


def is_number(value: Any) -> bool:
    """Return True for int and float values, rejecting bools."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)
