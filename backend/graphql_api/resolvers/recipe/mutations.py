"""Mutation resolvers for recipe domain.

These resolvers execute CQRS commands using Command Handlers:
- createRecipe: Create a recipe owned by the calling user
- updateRecipe: Partial update, owner only
- deleteRecipe: Delete, owner only
"""

import strawberry
from strawberry.types import Info

from application.recipe.commands.create_recipe import (
    CreateRecipeCommand,
    CreateRecipeHandler,
)
from application.recipe.commands.delete_recipe import (
    DeleteRecipeCommand,
    DeleteRecipeHandler,
)
from application.recipe.commands.update_recipe import (
    UpdateRecipeCommand,
    UpdateRecipeHandler,
)
from domain.recipe.core.value_objects.recipe_id import RecipeId
from domain.user.core.exceptions.user_errors import AuthenticationRequiredError
from graphql_api.resolvers.recipe.queries import (
    map_domain_recipe_to_graphql,
    map_ingredient_input_to_domain,
)
from graphql_api.types_recipe import (
    CreateRecipeInput,
    DeleteRecipeResult,
    RecipeType,
    UpdateRecipeInput,
)
from infrastructure.user.auth_permission import IsAuthenticated


def _current_user_id(info: Info, action: str) -> str:
    user_id = info.context.get("current_user_id")
    if not user_id:
        raise AuthenticationRequiredError(action)
    return user_id


@strawberry.type
class RecipeMutations:
    """Mutations for recipe operations."""

    @strawberry.mutation(permission_classes=[IsAuthenticated])
    async def create_recipe(self, info: Info, input: CreateRecipeInput) -> RecipeType:
        """Create a recipe owned by the logged-in caller.

        Example:
            mutation {
              recipes {
                createRecipe(input: {
                  title: "Pancakes"
                  description: "Fluffy breakfast pancakes"
                  servings: 4
                  ingredients: [{name: "flour", quantity: 2, unit: "cup"}]
                  instructions: ["Mix", "Cook"]
                }) {
                  id
                  servings
                }
              }
            }
        """
        owner_id = _current_user_id(info, "create a recipe")
        repository = info.context.get("recipe_repository")
        if not repository:
            raise Exception("Missing recipe_repository in GraphQL context")

        command = CreateRecipeCommand(
            owner_id=owner_id,
            title=input.title,
            description=input.description,
            ingredients=[map_ingredient_input_to_domain(i) for i in input.ingredients],
            instructions=list(input.instructions),
            servings=input.servings,
            image_url=input.image_url,
            cook_time=input.cook_time,
            prep_time=input.prep_time,
        )
        recipe = await CreateRecipeHandler(repository).handle(command)

        return map_domain_recipe_to_graphql(recipe)

    @strawberry.mutation(permission_classes=[IsAuthenticated])
    async def update_recipe(self, info: Info, input: UpdateRecipeInput) -> RecipeType:
        """Update a recipe. Only the owner can update it."""
        user_id = _current_user_id(info, "update a recipe")
        repository = info.context.get("recipe_repository")
        if not repository:
            raise Exception("Missing recipe_repository in GraphQL context")

        ingredients = (
            [map_ingredient_input_to_domain(i) for i in input.ingredients]
            if input.ingredients is not None
            else None
        )
        command = UpdateRecipeCommand(
            recipe_id=RecipeId.from_string(input.recipe_id),
            user_id=user_id,
            title=input.title,
            description=input.description,
            servings=input.servings,
            ingredients=ingredients,
            instructions=list(input.instructions) if input.instructions is not None else None,
            image_url=input.image_url,
            cook_time=input.cook_time,
            prep_time=input.prep_time,
        )
        recipe = await UpdateRecipeHandler(repository).handle(command)

        return map_domain_recipe_to_graphql(recipe)

    @strawberry.mutation(permission_classes=[IsAuthenticated])
    async def delete_recipe(self, info: Info, recipe_id: str) -> DeleteRecipeResult:
        """Delete a recipe. Only the owner can delete it."""
        user_id = _current_user_id(info, "delete a recipe")
        repository = info.context.get("recipe_repository")
        if not repository:
            raise Exception("Missing recipe_repository in GraphQL context")

        deleted_id = await DeleteRecipeHandler(repository).handle(
            DeleteRecipeCommand(recipe_id=RecipeId.from_string(recipe_id), user_id=user_id)
        )

        return DeleteRecipeResult(
            recipe_id=str(deleted_id),
            message="Recipe deleted successfully",
        )
