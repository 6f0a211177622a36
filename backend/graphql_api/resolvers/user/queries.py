"""User domain GraphQL queries."""

from typing import Optional

import strawberry
from strawberry.types import Info

from application.user.queries.get_user import GetUserQuery
from domain.user.core.entities.user import User
from domain.user.core.value_objects.user_id import UserId
from graphql_api.types_user import UserType


def map_domain_user_to_graphql(user: User) -> UserType:
    """Map domain User to GraphQL UserType (no password hash)."""
    return UserType(
        user_id=str(user.user_id),
        email=str(user.email),
        username=user.username,
        created_at=user.created_at,
    )


@strawberry.type
class UserQueries:
    """User domain queries.

    Examples:
        query {
          user {
            me { userId email username createdAt }
          }
        }
    """

    @strawberry.field
    async def me(self, info: Info) -> Optional[UserType]:
        """Get the logged-in user's profile.

        Returns:
            Current user or None if not authenticated
        """
        user_id = info.context.get("current_user_id")
        if not user_id:
            return None

        user_repository = info.context.get("user_repository")
        if not user_repository:
            raise Exception("Missing user_repository in GraphQL context")

        user = await GetUserQuery(repository=user_repository).by_id(UserId(user_id))
        return map_domain_user_to_graphql(user) if user else None
