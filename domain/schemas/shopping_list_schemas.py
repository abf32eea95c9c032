"""Pydantic schemas for shopping list requests."""

from pydantic import BaseModel, Field
from typing import Optional


class ShoppingItemCreate(BaseModel):
    """Request to add an item to the shopping list."""

    name: str = Field(..., description="Item name")
    checked: bool = Field(..., description="Whether the item is already in the cart")


class ShoppingItemUpdate(ShoppingItemCreate):
    """
    Full replacement of a shopping list item.

    ``id`` is optional; when present it must match the id in the request path.
    """

    id: Optional[str] = None
