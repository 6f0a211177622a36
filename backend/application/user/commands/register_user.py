"""Register user command."""

import logging
from dataclasses import dataclass

from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import (
    InvalidUserError,
    UserAlreadyExistsError,
)
from domain.user.core.ports.password_hasher import IPasswordHasher
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.email import Email

logger = logging.getLogger(__name__)


@dataclass
class RegisterUserCommand:
    """Command to create an account.

    Examples:
        >>> command = RegisterUserCommand(repository, password_hasher)
        >>> user = await command.execute("cook@example.com", "cook", "secret")
    """

    repository: IUserRepository
    password_hasher: IPasswordHasher

    async def execute(self, email: str, username: str, password: str) -> User:
        """Execute registration.

        Args:
            email: Login email, must not be registered yet
            username: Display name
            password: Clear-text password, stored hashed

        Returns:
            The new user

        Raises:
            InvalidUserError: If a field is missing or the email is malformed
            UserAlreadyExistsError: If the email is already registered
        """
        if not email or not username or not password:
            raise InvalidUserError("Email, username, and password are required")

        address = Email(email)
        if await self.repository.find_by_email(address) is not None:
            logger.info("Registration refused, email already registered")
            raise UserAlreadyExistsError(str(address))

        user = User.create(address, username, self.password_hasher.hash(password))
        await self.repository.save(user)
        logger.info("User %s registered", user.user_id)

        return user
