from __future__ import annotations

# Standard library
import logging as _logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, Final

# Third-party
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from strawberry.fastapi import GraphQLRouter

# Load .env before reading any configuration
_env_path = Path(__file__).parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path)

# Local application imports
from graphql_api.context import GraphQLContext, create_context  # noqa: E402
from graphql_api.schema import create_schema  # noqa: E402
from domain.recipe.scaling.recipe_scaling_service import RecipeScalingService  # noqa: E402
from infrastructure.config import (  # noqa: E402
    get_app_version,
    get_log_level,
    get_repository_backend,
    get_servings_bounds,
)
from infrastructure.persistence.recipe_repository_factory import (  # noqa: E402
    get_recipe_repository,
)
from infrastructure.user.auth_middleware import AuthMiddleware  # noqa: E402
from infrastructure.user.bcrypt_password_hasher import BcryptPasswordHasher  # noqa: E402
from infrastructure.user.user_repository_factory import get_user_repository  # noqa: E402

# --- Basic logging configuration (minimal) ---
_LOG_LEVEL = get_log_level()
_logging.basicConfig(
    level=getattr(_logging, _LOG_LEVEL, _logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

logger = _logging.getLogger("startup")

APP_VERSION = get_app_version()

schema = create_schema()

# Explicit export per mypy/tests
__all__: list[str] = ["app", "schema"]


@asynccontextmanager
async def lifespan(_: FastAPI) -> Any:  # pragma: no cover
    """Log configuration at startup and shutdown."""
    low, high = get_servings_bounds()
    logger.info(
        "lifespan.startup version=%s repository=%s servings=%d..%d",
        APP_VERSION,
        get_repository_backend(),
        low,
        high,
    )
    yield
    logger.info("lifespan.shutdown")


app = FastAPI(
    title="Recipe Share Backend",
    version=APP_VERSION,
    lifespan=lifespan,
)

# Resolves X-Authorization session tokens into request.state.auth_claims
app.add_middleware(AuthMiddleware)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "version": APP_VERSION}


@app.get("/version")
async def version() -> dict[str, str]:
    return {"version": APP_VERSION}


# Stateless, shared across requests
_scaling_service = RecipeScalingService()


def get_graphql_context(request: Request) -> GraphQLContext:
    """Create GraphQL context with all dependencies.

    Repositories are the process-wide singletons chosen by
    REPOSITORY_BACKEND; servings bounds and the bcrypt cost are read per
    request. Auth claims come from AuthMiddleware via the request.
    """
    return create_context(
        recipe_repository=get_recipe_repository(),
        scaling_service=_scaling_service,
        servings_bounds=get_servings_bounds(),
        user_repository=get_user_repository(),
        password_hasher=BcryptPasswordHasher(),
        request=request,
    )


graphql_app: Final[GraphQLRouter[Any, Any]] = GraphQLRouter(
    schema, context_getter=get_graphql_context
)
app.include_router(graphql_app, prefix="/graphql")
