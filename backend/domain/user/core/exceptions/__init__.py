"""Domain exceptions for users."""

from .user_errors import (
    AuthenticationRequiredError,
    InvalidCredentialsError,
    InvalidSessionError,
    InvalidUserError,
    UserAlreadyExistsError,
    UserDomainError,
    UserNotFoundError,
)

__all__ = [
    "UserDomainError",
    "InvalidUserError",
    "UserNotFoundError",
    "UserAlreadyExistsError",
    "InvalidCredentialsError",
    "InvalidSessionError",
    "AuthenticationRequiredError",
]
