"""
Domain schemas package - Pydantic models for request validation.
"""

from domain.schemas.shopping_list_schemas import ShoppingItemCreate, ShoppingItemUpdate
from domain.schemas.recipe_schemas import RecipeCreate, RecipeUpdate

__all__ = [
    # Shopping list schemas
    "ShoppingItemCreate",
    "ShoppingItemUpdate",
    # Recipe schemas
    "RecipeCreate",
    "RecipeUpdate",
]
