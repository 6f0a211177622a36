"""FastAPI session authentication middleware."""

import logging
from typing import Any, Callable, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from application.user.queries.get_user import GetUserQuery
from domain.user.core.exceptions.user_errors import InvalidSessionError
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.session_token import SessionToken
from infrastructure.persistence.json_file.document_store import JsonStorageError
from infrastructure.user.user_repository_factory import get_user_repository

logger = logging.getLogger(__name__)

TOKEN_HEADER = "X-Authorization"


class AuthMiddleware(BaseHTTPMiddleware):
    """Resolve the session token of each request to its user.

    The token is read from the ``X-Authorization`` header, or from
    ``Authorization: Bearer <token>``. Requests without a token proceed
    anonymously; protected GraphQL fields reject them through the
    IsAuthenticated permission.

    Sets ``request.state.auth_claims`` to ``{"sub": <user id>, "token":
    <token>}``, or None for anonymous requests.

    Examples:
        >>> app.add_middleware(AuthMiddleware)
        >>> # In route handler:
        >>> user_id = request.state.auth_claims["sub"]
    """

    def __init__(
        self,
        app: Any,
        repository_getter: Callable[[], IUserRepository] = get_user_repository,
    ) -> None:
        """Initialize middleware.

        Args:
            app: FastAPI application
            repository_getter: Returns the user repository, called per
                request so a reset singleton is picked up
        """
        super().__init__(app)
        self.repository_getter = repository_getter

    async def dispatch(self, request: Request, call_next: Any) -> Any:
        """Process request and resolve its session token.

        Returns:
            Response from handler, 401 for an unknown token or 500 when
            the user store cannot be read
        """
        token = self._extract_token(request)

        if not token:
            request.state.auth_claims = None
            return await call_next(request)

        try:
            query = GetUserQuery(repository=self.repository_getter())
            user_id = await query.user_id_for_token(SessionToken(token))
        except InvalidSessionError as e:
            logger.warning("Rejected request with unknown session token")
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"error": "invalid_token", "message": str(e)},
            )
        except JsonStorageError:
            logger.exception("User store unavailable during authentication")
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "error": "authentication_error",
                    "message": "Authentication error",
                },
            )

        request.state.auth_claims = {"sub": str(user_id), "token": token}
        return await call_next(request)

    def _extract_token(self, request: Request) -> Optional[str]:
        """Extract the session token from the request headers.

        Examples:
            >>> # X-Authorization: 3f0c...
            >>> self._extract_token(request)
            '3f0c...'
            >>> # Authorization: Bearer 3f0c...
            >>> self._extract_token(request)
            '3f0c...'
        """
        token = request.headers.get(TOKEN_HEADER)
        if token and token.strip():
            return token.strip()

        auth_header = request.headers.get("Authorization")
        if not auth_header:
            return None

        parts = auth_header.split()
        if len(parts) != 2:
            return None

        scheme, token = parts
        if scheme.lower() != "bearer":
            return None

        return token
