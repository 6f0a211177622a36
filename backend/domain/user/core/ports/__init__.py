"""Ports for user domain."""

from .password_hasher import IPasswordHasher
from .user_repository import IUserRepository

__all__ = ["IUserRepository", "IPasswordHasher"]
