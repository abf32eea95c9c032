"""API routes package"""

from . import shopping_list, recipes, health

__all__ = ["shopping_list", "recipes", "health"]
