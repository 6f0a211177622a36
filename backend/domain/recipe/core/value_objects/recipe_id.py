"""RecipeId value object - unique identifier for recipes."""

from dataclasses import dataclass
from uuid import uuid4


@dataclass(frozen=True)
class RecipeId:
    """Unique identifier for a recipe.

    Recipes created through the API get a UUID4 string. Identifiers loaded
    from storage are kept verbatim, so seeded ids such as ``"r1"`` survive.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError(f"Invalid recipe ID: {self.value!r}")

    @staticmethod
    def generate() -> "RecipeId":
        """Generate a new unique recipe ID.

        Returns:
            RecipeId: New recipe ID with a UUID4 value
        """
        return RecipeId(value=str(uuid4()))

    @staticmethod
    def from_string(id_str: str) -> "RecipeId":
        """Create RecipeId from its string representation.

        Raises:
            ValueError: If the string is empty
        """
        return RecipeId(value=id_str.strip() if isinstance(id_str, str) else id_str)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"RecipeId(value={self.value!r})"
