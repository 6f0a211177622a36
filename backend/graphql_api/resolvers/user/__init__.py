"""GraphQL resolvers for user domain."""

from .mutations import UserMutations
from .queries import UserQueries

__all__ = [
    "UserQueries",
    "UserMutations",
]
