"""
Services package - Business logic layer.
"""

from services.base import BaseService
from services.shopping_list_service import ShoppingListService
from services.recipe_service import RecipeService

__all__ = [
    "BaseService",
    "ShoppingListService",
    "RecipeService",
]
