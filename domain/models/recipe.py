"""Recipe record."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Recipe(BaseModel):
    """A named recipe with its ordered ingredient lines."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="Store-assigned identifier")
    name: str
    ingredients: List[str] = Field(default_factory=list)
