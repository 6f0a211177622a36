"""Query resolvers for recipe domain.

These resolvers read recipes and run the ingredient scaler:
- recipes / recipe: Browse recipes
- myRecipes: Recipes of the logged-in user
- scaledRecipe: A stored recipe's ingredients for chosen servings
- scaleIngredients: Scale an ad-hoc ingredient list
- servingSuggestions: Quick-select serving sizes
"""

from typing import List, Optional

import strawberry
from strawberry.types import Info

from application.recipe.queries.get_recipe import (
    GetRecipeQuery,
    ListRecipesQuery,
    RecipeQueryHandler,
)
from application.recipe.queries.scale_recipe import (
    ScaleRecipeHandler,
    ScaleRecipeQuery,
)
from domain.recipe.core.entities.recipe import Recipe
from domain.recipe.core.exceptions.domain_errors import RecipeNotFoundError
from domain.recipe.core.value_objects.ingredient import Ingredient
from domain.recipe.core.value_objects.recipe_id import RecipeId
from domain.recipe.core.value_objects.scaled_ingredient import ScaledIngredient
from domain.recipe.core.value_objects.scaled_recipe import ScaledRecipe
from domain.recipe.scaling.scaler import get_serving_suggestions, scale_ingredients
from graphql_api.types_recipe import (
    IngredientInput,
    IngredientType,
    RecipeType,
    ScaledIngredientType,
    ScaledRecipeType,
)
from graphql_api.utils.servings import clamp_servings


# ============================================
# HELPER FUNCTIONS
# ============================================


def map_ingredient_input_to_domain(ingredient: IngredientInput) -> Ingredient:
    """Map GraphQL IngredientInput to domain Ingredient."""
    return Ingredient(name=ingredient.name, quantity=ingredient.quantity, unit=ingredient.unit)


def map_domain_recipe_to_graphql(recipe: Recipe) -> RecipeType:
    """Map domain Recipe to GraphQL RecipeType."""
    return RecipeType(
        id=str(recipe.recipe_id),
        title=recipe.title,
        description=recipe.description,
        servings=recipe.servings,
        ingredients=[
            IngredientType(name=i.name, quantity=i.quantity, unit=i.unit)
            for i in recipe.ingredients
        ],
        instructions=list(recipe.instructions),
        image_url=recipe.image_url,
        cook_time=recipe.cook_time,
        prep_time=recipe.prep_time,
        owner_id=recipe.owner_id,
        created_at=recipe.created_at,
        updated_at=recipe.updated_at,
    )


def map_scaled_ingredient_to_graphql(ingredient: ScaledIngredient) -> ScaledIngredientType:
    """Map domain ScaledIngredient to GraphQL ScaledIngredientType."""
    return ScaledIngredientType(
        name=ingredient.name,
        quantity=ingredient.quantity,
        unit=ingredient.unit,
        formatted_quantity=ingredient.formatted_quantity,
        original_quantity=ingredient.original_quantity,
        original_unit=ingredient.original_unit,
    )


def map_scaled_recipe_to_graphql(scaled: ScaledRecipe) -> ScaledRecipeType:
    """Map domain ScaledRecipe to GraphQL ScaledRecipeType."""
    return ScaledRecipeType(
        recipe_id=scaled.recipe_id,
        title=scaled.title,
        original_servings=scaled.original_servings,
        servings=scaled.servings,
        is_scaled=scaled.is_scaled,
        scaling_factor=scaled.scaling_factor,
        ingredients=[map_scaled_ingredient_to_graphql(i) for i in scaled.ingredients],
        suggestions=list(scaled.suggestions),
    )


def _repository(info: Info):  # type: ignore[no-untyped-def]
    repository = info.context.get("recipe_repository")
    if not repository:
        raise Exception("Missing recipe_repository in GraphQL context")
    return repository


def _servings_bounds(info: Info) -> tuple[int, int]:
    return info.context.get("servings_bounds") or (1, 100)


# ============================================
# QUERY RESOLVERS
# ============================================


@strawberry.type
class RecipeQueries:
    """GraphQL queries for recipe domain."""

    @strawberry.field
    async def recipes(self, info: Info, owner_id: Optional[str] = None) -> List[RecipeType]:
        """List recipes, optionally only those of one user.

        Example:
            query {
              recipes {
                recipes(ownerId: "demo") { id title servings }
              }
            }
        """
        handler = RecipeQueryHandler(_repository(info))
        recipes = await handler.handle_list(ListRecipesQuery(owner_id=owner_id))
        return [map_domain_recipe_to_graphql(recipe) for recipe in recipes]

    @strawberry.field
    async def my_recipes(self, info: Info) -> List[RecipeType]:
        """List the logged-in user's recipes, empty when anonymous."""
        owner_id = info.context.get("current_user_id")
        if not owner_id:
            return []

        handler = RecipeQueryHandler(_repository(info))
        recipes = await handler.handle_list(ListRecipesQuery(owner_id=owner_id))
        return [map_domain_recipe_to_graphql(recipe) for recipe in recipes]

    @strawberry.field
    async def recipe(self, info: Info, id: str) -> Optional[RecipeType]:
        """Get recipe by ID, None if not found."""
        if not id.strip():
            return None

        handler = RecipeQueryHandler(_repository(info))
        recipe = await handler.handle_get(GetRecipeQuery(recipe_id=RecipeId.from_string(id)))
        return map_domain_recipe_to_graphql(recipe) if recipe else None

    @strawberry.field
    async def scaled_recipe(
        self,
        info: Info,
        id: str,
        servings: Optional[float] = None,
    ) -> Optional[ScaledRecipeType]:
        """Get a recipe's ingredients scaled to ``servings``.

        Servings are clamped into the configured range before scaling;
        omitted servings mean the recipe's own.

        Example:
            query {
              recipes {
                scaledRecipe(id: "r1", servings: 4) {
                  isScaled
                  ingredients { formattedQuantity unit name originalQuantity }
                  suggestions
                }
              }
            }
        """
        if not id.strip():
            return None

        if servings is not None:
            servings = clamp_servings(servings, _servings_bounds(info))

        handler = ScaleRecipeHandler(
            _repository(info),
            scaling_service=info.context.get("scaling_service"),
        )
        query = ScaleRecipeQuery(recipe_id=RecipeId.from_string(id), servings=servings)

        try:
            scaled = await handler.handle(query)
        except RecipeNotFoundError:
            return None

        return map_scaled_recipe_to_graphql(scaled)

    @strawberry.field
    def scale_ingredients(
        self,
        info: Info,
        ingredients: List[IngredientInput],
        original_servings: float,
        new_servings: float,
    ) -> List[ScaledIngredientType]:
        """Scale an ingredient list that is not stored as a recipe.

        ``newServings`` is clamped like in ``scaledRecipe``; a non-positive
        ``originalServings`` is reported as an error.
        """
        new_servings = clamp_servings(new_servings, _servings_bounds(info))
        scaled = scale_ingredients(
            [map_ingredient_input_to_domain(i) for i in ingredients],
            original_servings,
            new_servings,
        )
        return [map_scaled_ingredient_to_graphql(i) for i in scaled]

    @strawberry.field
    def serving_suggestions(self, servings: float) -> List[float]:
        """Quick-select serving sizes for a recipe written for ``servings``."""
        return get_serving_suggestions(servings)
