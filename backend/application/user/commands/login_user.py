"""Login user command."""

import logging
from dataclasses import dataclass

from domain.user.core.entities.session import Session
from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import (
    InvalidCredentialsError,
    InvalidUserError,
)
from domain.user.core.ports.password_hasher import IPasswordHasher
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.email import Email

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    """Opened session and the user it belongs to."""

    session: Session
    user: User


@dataclass
class LoginUserCommand:
    """Command to check credentials and open a session.

    Every successful login opens a new session; earlier sessions of the
    same user stay valid.
    """

    repository: IUserRepository
    password_hasher: IPasswordHasher

    async def execute(self, email: str, password: str) -> LoginResult:
        """Execute login.

        Raises:
            InvalidUserError: If email or password is missing
            InvalidCredentialsError: If the email is unknown or the
                password does not match
        """
        if not email or not password:
            raise InvalidUserError("Email and password are required")

        try:
            address = Email(email)
        except InvalidUserError:
            raise InvalidCredentialsError() from None

        user = await self.repository.find_by_email(address)
        if user is None or not self.password_hasher.verify(password, user.password_hash):
            logger.warning("Failed login attempt")
            raise InvalidCredentialsError()

        session = Session.open(user.user_id)
        await self.repository.save_session(session)
        logger.info("User %s logged in", user.user_id)

        return LoginResult(session=session, user=user)
