"""
API dependencies for dependency injection
"""

from repositories import ShoppingListRepository, RecipeRepository
from services import ShoppingListService, RecipeService

# Process-wide collections; the application lifespan resets and seeds them.
shopping_list_repository = ShoppingListRepository()
recipe_repository = RecipeRepository()


def get_shopping_list_service() -> ShoppingListService:
    """
    Shopping list service dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(service: ShoppingListService = Depends(get_shopping_list_service)):
            ...
    """
    return ShoppingListService(shopping_list_repository)


def get_recipe_service() -> RecipeService:
    """Recipe service dependency for FastAPI routes."""
    return RecipeService(recipe_repository)
