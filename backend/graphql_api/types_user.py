"""GraphQL types for user domain.

Account registration, login sessions and the caller's profile. The
password hash is never exposed.
"""

from __future__ import annotations

from datetime import datetime

import strawberry

__all__ = [
    "UserType",
    "AuthPayload",
    "LogoutResult",
    "RegisterInput",
    "LoginInput",
]


@strawberry.type
class UserType:
    """Public user profile."""

    user_id: str
    email: str
    username: str
    created_at: datetime


@strawberry.type
class AuthPayload:
    """Session opened by login.

    Send ``token`` back in the ``X-Authorization`` header.
    """

    token: str
    user_id: str
    username: str
    email: str


@strawberry.type
class LogoutResult:
    message: str


@strawberry.input
class RegisterInput:
    email: str
    username: str
    password: str


@strawberry.input
class LoginInput:
    email: str
    password: str
