"""
Recipe routes - list, create, replace and delete recipes.
"""

from fastapi import APIRouter, Depends, Response, status
from typing import List
import logging

from api.dependencies import get_recipe_service
from domain.models import Recipe
from domain.schemas import RecipeCreate, RecipeUpdate
from services import RecipeService

router = APIRouter(prefix="/recipes", tags=["Recipes"])
logger = logging.getLogger("shoplist.api.recipes")


@router.get("", response_model=List[Recipe])
def list_recipes(service: RecipeService = Depends(get_recipe_service)):
    """Get all recipes"""
    return service.list_recipes()


@router.post("", response_model=Recipe, status_code=status.HTTP_201_CREATED)
def create_recipe(
    payload: RecipeCreate, service: RecipeService = Depends(get_recipe_service)
):
    """
    Add a recipe.

    Example request:
    ```json
    {"name": "macaroni salad", "ingredients": ["macaroni", "mayo"]}
    ```
    """
    return service.create_recipe(payload)


@router.put("/{recipe_id}", response_model=Recipe)
def update_recipe(
    recipe_id: str,
    payload: RecipeUpdate,
    service: RecipeService = Depends(get_recipe_service),
):
    """Replace a recipe and return it."""
    return service.update_recipe(recipe_id, payload)


@router.delete(
    "/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
def delete_recipe(recipe_id: str, service: RecipeService = Depends(get_recipe_service)):
    service.delete_recipe(recipe_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
