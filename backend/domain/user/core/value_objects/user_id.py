"""UserId value object."""

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class UserId:
    """User identifier value object.

    UUID string, used as the ``ownerId`` of the user's recipes.

    Examples:
        >>> user_id = UserId("e4b8c9d0-1234-5678-9abc-def012345678")
        >>> user_id.value
        'e4b8c9d0-1234-5678-9abc-def012345678'
    """

    value: str

    def __post_init__(self) -> None:
        """Validate UUID format."""
        try:
            uuid.UUID(self.value)
        except (ValueError, AttributeError, TypeError) as e:
            raise ValueError(f"Invalid UUID format: {self.value}") from e

    @staticmethod
    def generate() -> "UserId":
        """Generate a new random UserId (UUID v4)."""
        return UserId(str(uuid.uuid4()))

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"UserId('{self.value}')"
