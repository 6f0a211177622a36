"""GraphQL context factory for dependency injection.

Provides the dependencies used by resolvers:
- Recipe repository
- Recipe scaling service
- Servings bounds applied to user-chosen servings
- User repository and password hasher
- Auth claims of the calling user, set by AuthMiddleware
"""

from typing import Any, Dict, Optional

from fastapi import Request
from strawberry.fastapi import BaseContext

from domain.recipe.core.ports.repository import IRecipeRepository
from domain.recipe.scaling.recipe_scaling_service import RecipeScalingService
from domain.user.core.ports.password_hasher import IPasswordHasher
from domain.user.core.ports.user_repository import IUserRepository


class GraphQLContext(BaseContext):
    """GraphQL context with all dependencies.

    Injected into resolvers via the `info` parameter. Resolvers access
    dependencies using `info.context.get("service_name")`.

    Attributes:
        recipe_repository: Repository for recipe persistence
        scaling_service: Service scaling recipes to chosen servings
        servings_bounds: (min, max) accepted servings, requests are clamped
        user_repository: Repository for users and sessions
        password_hasher: Hasher for registration and login
        request: FastAPI request object (for accessing auth_claims from middleware)
        auth_claims: ``{"sub": user id, "token": session token}``, None if
            the caller is anonymous
    """

    def __init__(
        self,
        recipe_repository: IRecipeRepository,
        scaling_service: RecipeScalingService,
        servings_bounds: tuple[int, int] = (1, 100),
        user_repository: Optional[IUserRepository] = None,
        password_hasher: Optional[IPasswordHasher] = None,
        request: Optional[Request] = None,
        auth_claims: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize GraphQL context with all dependencies."""
        super().__init__()
        self.recipe_repository = recipe_repository
        self.scaling_service = scaling_service
        self.servings_bounds = servings_bounds
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.request = request
        # Extract auth_claims from request.state if not given explicitly
        if auth_claims is None and request is not None:
            auth_claims = getattr(request.state, "auth_claims", None)
        self.auth_claims: Optional[Dict[str, Any]] = auth_claims

    @property
    def current_user_id(self) -> Optional[str]:
        """Id of the logged-in caller, None if anonymous."""
        return self.auth_claims.get("sub") if self.auth_claims else None

    @property
    def session_token(self) -> Optional[str]:
        return self.auth_claims.get("token") if self.auth_claims else None

    def get(self, key: str) -> Any:
        """Get dependency by name (for resolver compatibility).

        Example:
            >>> context = info.context
            >>> repository = context.get("recipe_repository")
        """
        return getattr(self, key, None)


def create_context(
    recipe_repository: IRecipeRepository,
    scaling_service: Optional[RecipeScalingService] = None,
    servings_bounds: tuple[int, int] = (1, 100),
    user_repository: Optional[IUserRepository] = None,
    password_hasher: Optional[IPasswordHasher] = None,
    request: Optional[Request] = None,
    auth_claims: Optional[Dict[str, Any]] = None,
) -> GraphQLContext:
    """Create GraphQL context with all dependencies.

    Example:
        >>> from graphql_api.context import create_context
        >>> context = create_context(recipe_repository=InMemoryRecipeRepository())
    """
    return GraphQLContext(
        recipe_repository=recipe_repository,
        scaling_service=scaling_service or RecipeScalingService(),
        servings_bounds=servings_bounds,
        user_repository=user_repository,
        password_hasher=password_hasher,
        request=request,
        auth_claims=auth_claims,
    )
