"""User entity - a registered account."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping

from domain.shared.timestamps import format_timestamp, parse_timestamp, utcnow

from ..exceptions.user_errors import InvalidUserError
from ..value_objects.email import Email
from ..value_objects.user_id import UserId


@dataclass
class User:
    """User aggregate root.

    Only the password hash is kept; the clear-text password never reaches
    the entity.

    Attributes:
        user_id: Internal UUID, owner id of the user's recipes
        email: Login email, unique across users
        username: Display name
        password_hash: Hash produced by the password hasher
        created_at: Registration timestamp (UTC)

    Examples:
        >>> user = User.create(Email("cook@example.com"), "cook", "$2b$12$...")
        >>> user.public_dict()["email"]
        'cook@example.com'
    """

    user_id: UserId
    email: Email
    username: str
    password_hash: str
    created_at: datetime = field(default_factory=utcnow)

    def __post_init__(self) -> None:
        if not isinstance(self.username, str) or not self.username.strip():
            raise InvalidUserError("Username is required")
        if not isinstance(self.password_hash, str) or not self.password_hash:
            raise InvalidUserError("Password hash is required")

    @staticmethod
    def create(email: Email, username: str, password_hash: str) -> "User":
        """Create a new user with a generated id."""
        return User(
            user_id=UserId.generate(),
            email=email,
            username=username.strip() if isinstance(username, str) else username,
            password_hash=password_hash,
        )

    def public_dict(self) -> dict[str, Any]:
        """Profile fields safe to return to clients (no password hash)."""
        return {
            "userId": str(self.user_id),
            "email": str(self.email),
            "username": self.username,
            "createdAt": format_timestamp(self.created_at),
        }

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the stored JSON document."""
        return {
            "id": str(self.user_id),
            "email": str(self.email),
            "username": self.username,
            "passwordHash": self.password_hash,
            "createdAt": format_timestamp(self.created_at),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "User":
        """Build a user from a stored JSON document.

        Raises:
            InvalidUserError: If the document is not a valid user
        """
        if not isinstance(data, Mapping):
            raise InvalidUserError(f"User must be an object, got {data!r}")
        try:
            return cls(
                user_id=UserId(data["id"]),
                email=Email(data["email"]),
                username=data.get("username"),
                password_hash=data.get("passwordHash"),
                created_at=parse_timestamp(data.get("createdAt")),
            )
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            raise InvalidUserError(f"Invalid user document: {e}") from e
