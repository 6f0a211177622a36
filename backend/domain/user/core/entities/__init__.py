"""Entities for user domain."""

from .session import Session
from .user import User

__all__ = ["User", "Session"]
