"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.shopping_list_repository import ShoppingListRepository
from repositories.recipe_repository import RecipeRepository

__all__ = [
    "BaseRepository",
    "ShoppingListRepository",
    "RecipeRepository",
]
