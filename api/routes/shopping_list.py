"""Shopping list routes"""

from fastapi import APIRouter, Depends, Response, status
from typing import List
import logging

from api.dependencies import get_shopping_list_service
from domain.models import ShoppingItem
from domain.schemas import ShoppingItemCreate, ShoppingItemUpdate
from services import ShoppingListService

router = APIRouter(prefix="/shopping-list", tags=["Shopping List"])
logger = logging.getLogger("shoplist.api.shopping_list")


@router.get("", response_model=List[ShoppingItem])
def list_items(service: ShoppingListService = Depends(get_shopping_list_service)):
    """Get every item on the shopping list"""
    return service.list_items()


@router.post("", response_model=ShoppingItem, status_code=status.HTTP_201_CREATED)
def create_item(
    payload: ShoppingItemCreate,
    service: ShoppingListService = Depends(get_shopping_list_service),
):
    """
    Add an item to the shopping list.

    The server assigns the id. Example request:
    ```json
    {"name": "coffee", "checked": false}
    ```
    """
    return service.create_item(payload)


@router.put("/{item_id}", response_model=ShoppingItem)
def update_item(
    item_id: str,
    payload: ShoppingItemUpdate,
    service: ShoppingListService = Depends(get_shopping_list_service),
):
    """
    Replace an item. If the body carries an ``id`` it must equal the path id.

    Returns the updated item.
    """
    return service.update_item(item_id, payload)


@router.delete(
    "/{item_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
def delete_item(
    item_id: str,
    service: ShoppingListService = Depends(get_shopping_list_service),
):
    """Delete an item. Unknown ids are acknowledged the same way."""
    service.delete_item(item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
