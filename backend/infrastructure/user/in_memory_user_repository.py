"""In-memory User Repository for testing."""

from copy import deepcopy
from typing import Dict, Optional

from domain.user.core.entities.session import Session
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.email import Email
from domain.user.core.value_objects.session_token import SessionToken
from domain.user.core.value_objects.user_id import UserId


class InMemoryUserRepository(IUserRepository):
    """In-memory implementation of User repository.

    Stores users by id and sessions by token. Data is lost when the
    application stops.

    Examples:
        >>> repo = InMemoryUserRepository()
        >>> await repo.save(user)
        >>> found = await repo.find_by_email(Email("cook@example.com"))
    """

    def __init__(self) -> None:
        """Initialize empty in-memory storage."""
        self._users: Dict[str, User] = {}
        self._sessions: Dict[str, Session] = {}

    async def save(self, user: User) -> None:
        self._users[str(user.user_id)] = deepcopy(user)

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        user = self._users.get(str(user_id))
        return deepcopy(user) if user else None

    async def find_by_email(self, email: Email) -> Optional[User]:
        for user in self._users.values():
            if user.email == email:
                return deepcopy(user)
        return None

    async def save_session(self, session: Session) -> None:
        self._sessions[str(session.token)] = session

    async def find_session(self, token: SessionToken) -> Optional[Session]:
        return self._sessions.get(str(token))

    async def delete_session(self, token: SessionToken) -> bool:
        return self._sessions.pop(str(token), None) is not None

    def clear(self) -> None:
        """Clear all users and sessions from memory.

        Useful for test cleanup.
        """
        self._users.clear()
        self._sessions.clear()

    def count(self) -> int:
        """Get total number of users in memory."""
        return len(self._users)

    def session_count(self) -> int:
        return len(self._sessions)
