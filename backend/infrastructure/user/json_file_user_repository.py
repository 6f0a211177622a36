"""JSON-file implementation of IUserRepository.

Users and sessions share one document::

    {"users": [{"id": "...", "email": "...", ...}], "sessions": [{"token": "...", ...}]}

The file is read on every call and rewritten on every change. A missing
file reads as no users and no sessions.
"""

import asyncio
import logging
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar, Union

from domain.user.core.entities.session import Session
from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import InvalidUserError
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.email import Email
from domain.user.core.value_objects.session_token import SessionToken
from domain.user.core.value_objects.user_id import UserId
from infrastructure.persistence.json_file.document_store import (
    JsonDocumentStore,
    JsonStorageError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class UserStorageError(JsonStorageError):
    """Raised when the user file cannot be read or written."""

    label = "User store"


class JsonFileUserRepository(IUserRepository):
    """User repository backed by a JSON file on disk."""

    def __init__(self, path: Union[str, Path]) -> None:
        self._store = JsonDocumentStore(path, ("users", "sessions"), UserStorageError)

    @property
    def path(self) -> Path:
        return self._store.path

    def _load(self, collection: str, from_dict: Callable[[Any], T]) -> list[T]:
        items = []
        for document in self._store.read()[collection]:
            try:
                items.append(from_dict(document))
            except InvalidUserError as e:
                raise UserStorageError(self.path, f"invalid {collection} entry: {e}", e) from e
        return items

    def _upsert(self, collection: str, key: str, document: dict[str, Any]) -> None:
        data = self._store.read()
        documents = data[collection]
        for index, existing in enumerate(documents):
            if isinstance(existing, dict) and existing.get(key) == document[key]:
                documents[index] = document
                break
        else:
            documents.append(document)
        self._store.write(data)

    def _delete_session_sync(self, token: str) -> bool:
        data = self._store.read()
        sessions = data["sessions"]
        remaining = [
            session
            for session in sessions
            if not (isinstance(session, dict) and session.get("token") == token)
        ]
        if len(remaining) == len(sessions):
            return False

        data["sessions"] = remaining
        self._store.write(data)
        return True

    async def save(self, user: User) -> None:
        await asyncio.to_thread(self._upsert, "users", "id", user.to_dict())
        logger.debug("Saved user %s to %s", user.user_id, self.path)

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        for user in await asyncio.to_thread(self._load, "users", User.from_dict):
            if user.user_id == user_id:
                return user
        return None

    async def find_by_email(self, email: Email) -> Optional[User]:
        for user in await asyncio.to_thread(self._load, "users", User.from_dict):
            if user.email == email:
                return user
        return None

    async def save_session(self, session: Session) -> None:
        await asyncio.to_thread(self._upsert, "sessions", "token", session.to_dict())

    async def find_session(self, token: SessionToken) -> Optional[Session]:
        for session in await asyncio.to_thread(self._load, "sessions", Session.from_dict):
            if session.token == token:
                return session
        return None

    async def delete_session(self, token: SessionToken) -> bool:
        return await asyncio.to_thread(self._delete_session_sync, str(token))
