"""Session entity - one login of a user."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping

from domain.shared.timestamps import format_timestamp, parse_timestamp, utcnow

from ..exceptions.user_errors import InvalidUserError
from ..value_objects.session_token import SessionToken
from ..value_objects.user_id import UserId


@dataclass(frozen=True)
class Session:
    """Open login session.

    Sessions have no expiry; they end only on logout.
    """

    token: SessionToken
    user_id: UserId
    created_at: datetime = field(default_factory=utcnow)

    @staticmethod
    def open(user_id: UserId) -> "Session":
        return Session(token=SessionToken.generate(), user_id=user_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "token": str(self.token),
            "userId": str(self.user_id),
            "createdAt": format_timestamp(self.created_at),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Session":
        if not isinstance(data, Mapping):
            raise InvalidUserError(f"Session must be an object, got {data!r}")
        try:
            return cls(
                token=SessionToken(data["token"]),
                user_id=UserId(data["userId"]),
                created_at=parse_timestamp(data.get("createdAt")),
            )
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            raise InvalidUserError(f"Invalid session document: {e}") from e
