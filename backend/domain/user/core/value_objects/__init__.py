"""Value objects for user domain."""

from .email import Email
from .session_token import SessionToken
from .user_id import UserId

__all__ = [
    "UserId",
    "Email",
    "SessionToken",
]
