"""Get user queries."""

from dataclasses import dataclass
from typing import Optional

from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import InvalidSessionError
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.session_token import SessionToken
from domain.user.core.value_objects.user_id import UserId


@dataclass
class GetUserQuery:
    """Query to get a user by id or by session token.

    Examples:
        >>> query = GetUserQuery(repository)
        >>> user = await query.by_id(UserId("uuid-here"))
        >>> user_id = await query.user_id_for_token(SessionToken("token"))
    """

    repository: IUserRepository

    async def by_id(self, user_id: UserId) -> Optional[User]:
        return await self.repository.find_by_id(user_id)

    async def user_id_for_token(self, token: SessionToken) -> UserId:
        """Resolve the user owning a session.

        Raises:
            InvalidSessionError: If the token has no open session
        """
        session = await self.repository.find_session(token)
        if session is None:
            raise InvalidSessionError()
        return session.user_id
