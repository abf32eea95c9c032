"""
Domain models - records held by the in-memory stores.
"""

from domain.models.shopping_item import ShoppingItem
from domain.models.recipe import Recipe

__all__ = ["ShoppingItem", "Recipe"]
