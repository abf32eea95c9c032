"""
Shopping List Repository - Data access layer for shopping list items
"""

from repositories.base import BaseRepository
from domain.models import ShoppingItem


class ShoppingListRepository(BaseRepository[ShoppingItem]):
    """In-memory store of shopping list items"""

    def __init__(self):
        super().__init__(ShoppingItem)

    def create(self, name: str, checked: bool = False, **_ignored) -> ShoppingItem:
        """Add an item to the list"""
        return super().create(name=name, checked=checked)

    def update(self, entity_id: str, name: str, checked: bool, **_ignored) -> ShoppingItem:
        """Replace an item's name and checked flag"""
        return super().update(entity_id, name=name, checked=checked)
