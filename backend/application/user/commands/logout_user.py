"""Logout user command."""

import logging
from dataclasses import dataclass

from domain.user.core.exceptions.user_errors import InvalidSessionError
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.session_token import SessionToken

logger = logging.getLogger(__name__)


@dataclass
class LogoutUserCommand:
    """Command to close the caller's session."""

    repository: IUserRepository

    async def execute(self, token: SessionToken) -> None:
        """Remove the session.

        Raises:
            InvalidSessionError: If the token has no open session
        """
        if not await self.repository.delete_session(token):
            raise InvalidSessionError()
        logger.info("Session closed")
