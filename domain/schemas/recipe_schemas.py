"""Pydantic schemas for recipe requests."""

from pydantic import BaseModel, Field
from typing import List, Optional


class RecipeCreate(BaseModel):
    """Request to add a recipe."""

    name: str = Field(..., description="Recipe name")
    ingredients: List[str] = Field(..., description="Ingredient lines, in order")


class RecipeUpdate(RecipeCreate):
    """Full replacement of a recipe. ``id`` must match the path id when given."""

    id: Optional[str] = None
