"""Shopping list service"""

from typing import List

from domain.models import ShoppingItem
from domain.schemas import ShoppingItemCreate, ShoppingItemUpdate
from repositories import ShoppingListRepository
from services.base import BaseService


class ShoppingListService(BaseService[ShoppingListRepository]):
    """Business logic for the shopping list collection."""

    def __init__(self, repository: ShoppingListRepository):
        super().__init__(repository, "shoplist.shopping_list")

    def list_items(self) -> List[ShoppingItem]:
        return self.repository.list()

    def create_item(self, payload: ShoppingItemCreate) -> ShoppingItem:
        item = self.repository.create(name=payload.name, checked=payload.checked)
        self.log_info("Created shopping list item", id=item.id, name=item.name)
        return item

    def update_item(self, item_id: str, payload: ShoppingItemUpdate) -> ShoppingItem:
        """
        Replace an item with the submitted fields.

        Raises:
            ServiceValidationError: If the body id differs from item_id
            NotFoundError: If item_id is not in the list
        """
        self.ensure_ids_match(item_id, payload.id)
        item = self.repository.update(
            item_id, name=payload.name, checked=payload.checked
        )
        self.log_info("Updated shopping list item", id=item.id, checked=item.checked)
        return item

    def delete_item(self, item_id: str) -> bool:
        """Remove an item; unknown ids are not an error."""
        removed = self.repository.delete(item_id)
        if removed:
            self.log_info("Deleted shopping list item", id=item_id)
        else:
            self.log_warning("Delete requested for unknown shopping list item", id=item_id)
        return removed
