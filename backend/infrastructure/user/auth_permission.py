"""Strawberry GraphQL permission for session authentication."""

import logging
from typing import Any

from strawberry.permission import BasePermission
from strawberry.types import Info

logger = logging.getLogger(__name__)


class IsAuthenticated(BasePermission):
    """Permission checker for logged-in users.

    Verifies that the context carries auth claims set by AuthMiddleware.

    Examples:
        @strawberry.mutation(permission_classes=[IsAuthenticated])
        async def create_recipe(self, info: Info, input: CreateRecipeInput) -> RecipeType:
            owner_id = info.context.auth_claims["sub"]
    """

    message = "Not authenticated"

    async def has_permission(self, source: Any, info: Info, **kwargs: Any) -> bool:
        auth_claims = getattr(info.context, "auth_claims", None)

        if not auth_claims:
            logger.warning("Permission denied: No auth_claims in context")
            return False

        logger.debug("Permission granted for sub: %s", auth_claims.get("sub", "unknown"))
        return True
