"""User repository factory for environment-based selection.

Follows the same REPOSITORY_BACKEND switch as the recipe repository:
- "inmemory": InMemoryUserRepository (default)
- "jsonfile": JsonFileUserRepository at USERS_FILE
"""

import logging
from typing import Optional

from domain.user.core.ports.user_repository import IUserRepository
from infrastructure.config import get_repository_backend, get_users_file
from infrastructure.user.in_memory_user_repository import InMemoryUserRepository
from infrastructure.user.json_file_user_repository import JsonFileUserRepository

logger = logging.getLogger(__name__)


def create_user_repository() -> IUserRepository:
    """Create user repository based on environment configuration.

    Unknown backends fall back to in-memory with a warning.
    """
    repo_type = get_repository_backend()

    if repo_type == "jsonfile":
        path = get_users_file()
        logger.info("Using JSON file user repository at %s", path)
        return JsonFileUserRepository(path)

    if repo_type != "inmemory":
        logger.warning("Unknown REPOSITORY_BACKEND %r, falling back to inmemory", repo_type)

    return InMemoryUserRepository()


# Singleton instance
_user_repository: Optional[IUserRepository] = None


def get_user_repository() -> IUserRepository:
    """Get singleton user repository instance."""
    global _user_repository

    if _user_repository is None:
        _user_repository = create_user_repository()

    return _user_repository


def reset_user_repository() -> None:
    """Reset the singleton (for testing purposes)."""
    global _user_repository
    _user_repository = None
