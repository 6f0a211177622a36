"""User queries."""

from .get_user import GetUserQuery

__all__ = ["GetUserQuery"]
