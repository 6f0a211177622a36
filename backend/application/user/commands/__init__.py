"""User commands."""

from .login_user import LoginResult, LoginUserCommand
from .logout_user import LogoutUserCommand
from .register_user import RegisterUserCommand

__all__ = [
    "RegisterUserCommand",
    "LoginUserCommand",
    "LoginResult",
    "LogoutUserCommand",
]
