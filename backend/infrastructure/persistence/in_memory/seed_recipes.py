"""Demo recipes loaded into the in-memory store at startup."""

from domain.recipe.core.entities.recipe import Recipe
from domain.recipe.core.value_objects.ingredient import Ingredient
from domain.recipe.core.value_objects.recipe_id import RecipeId

DEMO_OWNER_ID = "demo"


def build_demo_recipes() -> list[Recipe]:
    """Create fresh copies of the demo recipes."""
    return [
        Recipe(
            recipe_id=RecipeId("r1"),
            title="Beginner Pasta Primavera",
            description="A quick veggie pasta with a simple garlic-lemon sauce.",
            servings=2,
            ingredients=[
                Ingredient("Pasta", 200, "g"),
                Ingredient("Olive oil", 2, "tbsp"),
                Ingredient("Garlic", 2, "cloves"),
                Ingredient("Frozen mixed vegetables", 250, "g"),
                Ingredient("Lemon", 0.5, ""),
                Ingredient("Salt", 1, "pinch"),
            ],
            instructions=[
                "Boil pasta in salted water until al dente.",
                "Sauté garlic in olive oil for 30 seconds.",
                "Add vegetables and cook until hot.",
                "Toss pasta with sauce and lemon juice.",
                "Taste and adjust salt, then serve.",
            ],
            image_url=(
                "https://images.unsplash.com/photo-1523986371872-9d3ba2e2f642"
                "?auto=format&fit=crop&w=1400&q=60"
            ),
            cook_time=12,
            prep_time=10,
            owner_id=DEMO_OWNER_ID,
        ),
        Recipe(
            recipe_id=RecipeId("r2"),
            title="Simple Overnight Oats",
            description="Mix, chill, and breakfast is done.",
            servings=1,
            ingredients=[
                Ingredient("Rolled oats", 60, "g"),
                Ingredient("Milk", 180, "ml"),
                Ingredient("Yogurt", 2, "tbsp"),
                Ingredient("Honey", 1, "tsp"),
                Ingredient("Berries", 80, "g"),
            ],
            instructions=[
                "Stir oats, milk, and yogurt in a jar.",
                "Refrigerate overnight.",
                "Top with honey and berries before eating.",
            ],
            image_url=(
                "https://images.unsplash.com/photo-1512621776951-a57141f2eefd"
                "?auto=format&fit=crop&w=1400&q=60"
            ),
            prep_time=5,
            owner_id=DEMO_OWNER_ID,
        ),
    ]
