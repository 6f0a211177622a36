"""Main GraphQL schema factory for the recipe backend.

Usage:
    from graphql_api.schema import create_schema
    schema = create_schema()
"""

import strawberry

from graphql_api.resolvers.recipe import RecipeMutations, RecipeQueries
from graphql_api.resolvers.user import UserMutations, UserQueries
from infrastructure.config import get_app_version


@strawberry.type
class Query:
    @strawberry.field
    def health(self) -> str:
        return "ok"

    @strawberry.field
    def version(self) -> str:
        return get_app_version()

    @strawberry.field(description="Recipe and ingredient scaling queries")  # type: ignore[misc]
    def recipes(self) -> RecipeQueries:
        """Recipe queries (CQRS).

        Example:
            query {
              recipes {
                recipe(id: "r1") { title servings }
                scaledRecipe(id: "r1", servings: 6) {
                  ingredients { formattedQuantity unit name }
                }
              }
            }
        """
        return RecipeQueries()

    @strawberry.field(description="Current user queries")  # type: ignore[misc]
    def user(self) -> UserQueries:
        return UserQueries()


@strawberry.type
class Mutation:
    @strawberry.field(description="Recipe mutations")  # type: ignore[misc]
    def recipes(self) -> RecipeMutations:
        """Recipe mutations (CQRS).

        Example:
            mutation {
              recipes {
                deleteRecipe(recipeId: "...") { message }
              }
            }
        """
        return RecipeMutations()

    @strawberry.field(description="Account and session mutations")  # type: ignore[misc]
    def user(self) -> UserMutations:
        """User mutations.

        Example:
            mutation {
              user {
                login(input: {email: "cook@example.com", password: "secret"}) { token }
              }
            }
        """
        return UserMutations()


def create_schema() -> strawberry.Schema:
    """Create Strawberry schema with all recipe and user resolvers.

    Returns:
        Configured Strawberry Schema instance
    """
    return strawberry.Schema(
        query=Query,
        mutation=Mutation,
    )
