"""IUserRepository port - user and session persistence."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.session import Session
from ..entities.user import User
from ..value_objects.email import Email
from ..value_objects.session_token import SessionToken
from ..value_objects.user_id import UserId


class IUserRepository(ABC):
    """Port for users and their login sessions.

    Users and sessions live side by side, as in the ``users.json`` store.
    """

    @abstractmethod
    async def save(self, user: User) -> None:
        """Save user (create or update by id)."""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find user by exact email.

        Returns:
            Optional[User]: User if registered, None otherwise
        """
        pass

    @abstractmethod
    async def save_session(self, session: Session) -> None:
        pass

    @abstractmethod
    async def find_session(self, token: SessionToken) -> Optional[Session]:
        pass

    @abstractmethod
    async def delete_session(self, token: SessionToken) -> bool:
        """Close a session.

        Returns:
            bool: True if a session was removed
        """
        pass
