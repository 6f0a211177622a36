"""User domain GraphQL mutations.

- register: Create an account
- login: Open a session, returns the token
- logout: Close the caller's session
"""

import strawberry
from strawberry.types import Info

from application.user.commands.login_user import LoginUserCommand
from application.user.commands.logout_user import LogoutUserCommand
from application.user.commands.register_user import RegisterUserCommand
from domain.user.core.value_objects.session_token import SessionToken
from graphql_api.resolvers.user.queries import map_domain_user_to_graphql
from graphql_api.types_user import (
    AuthPayload,
    LoginInput,
    LogoutResult,
    RegisterInput,
    UserType,
)
from infrastructure.user.auth_permission import IsAuthenticated


def _dependencies(info: Info):  # type: ignore[no-untyped-def]
    user_repository = info.context.get("user_repository")
    if not user_repository:
        raise Exception("Missing user_repository in GraphQL context")
    password_hasher = info.context.get("password_hasher")
    if not password_hasher:
        raise Exception("Missing password_hasher in GraphQL context")
    return user_repository, password_hasher


@strawberry.type
class UserMutations:
    """User domain mutations."""

    @strawberry.mutation
    async def register(self, info: Info, input: RegisterInput) -> UserType:
        """Register a new account.

        Example:
            mutation {
              user {
                register(input: {
                  email: "cook@example.com"
                  username: "cook"
                  password: "secret"
                }) { userId email username }
              }
            }
        """
        user_repository, password_hasher = _dependencies(info)
        command = RegisterUserCommand(repository=user_repository, password_hasher=password_hasher)
        user = await command.execute(input.email, input.username, input.password)

        return map_domain_user_to_graphql(user)

    @strawberry.mutation
    async def login(self, info: Info, input: LoginInput) -> AuthPayload:
        """Log in and get a session token.

        Example:
            mutation {
              user {
                login(input: {email: "cook@example.com", password: "secret"}) {
                  token
                  userId
                }
              }
            }
        """
        user_repository, password_hasher = _dependencies(info)
        command = LoginUserCommand(repository=user_repository, password_hasher=password_hasher)
        result = await command.execute(input.email, input.password)

        return AuthPayload(
            token=str(result.session.token),
            user_id=str(result.user.user_id),
            username=result.user.username,
            email=str(result.user.email),
        )

    @strawberry.mutation(permission_classes=[IsAuthenticated])
    async def logout(self, info: Info) -> LogoutResult:
        """Close the session whose token authenticated this request."""
        user_repository = info.context.get("user_repository")
        if not user_repository:
            raise Exception("Missing user_repository in GraphQL context")

        token = info.context.get("session_token")
        if not token:
            raise Exception("Not authenticated")

        await LogoutUserCommand(repository=user_repository).execute(SessionToken(token))

        return LogoutResult(message="Logged out successfully")
