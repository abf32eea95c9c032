"""
Recipe Repository - Data access layer for recipes
"""

from typing import Iterable

from repositories.base import BaseRepository
from domain.models import Recipe


class RecipeRepository(BaseRepository[Recipe]):
    """In-memory store of recipes"""

    def __init__(self):
        super().__init__(Recipe)

    def create(self, name: str, ingredients: Iterable[str], **_ignored) -> Recipe:
        """Add a recipe; ingredient order is preserved"""
        return super().create(name=name, ingredients=list(ingredients))

    def update(self, entity_id: str, name: str, ingredients: Iterable[str], **_ignored) -> Recipe:
        """Replace a recipe's name and ingredient list"""
        return super().update(entity_id, name=name, ingredients=list(ingredients))
