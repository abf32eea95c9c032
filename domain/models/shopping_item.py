"""Shopping list item record."""

from pydantic import BaseModel, ConfigDict, Field


class ShoppingItem(BaseModel):
    """A single entry in the shopping list collection."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="Store-assigned identifier")
    name: str
    checked: bool = False
