"""Recipe service"""

from typing import List

from domain.models import Recipe
from domain.schemas import RecipeCreate, RecipeUpdate
from repositories import RecipeRepository
from services.base import BaseService


class RecipeService(BaseService[RecipeRepository]):
    """Business logic for the recipe collection."""

    def __init__(self, repository: RecipeRepository):
        super().__init__(repository, "shoplist.recipes")

    def list_recipes(self) -> List[Recipe]:
        return self.repository.list()

    def create_recipe(self, payload: RecipeCreate) -> Recipe:
        recipe = self.repository.create(
            name=payload.name, ingredients=payload.ingredients
        )
        self.log_info(
            "Created recipe", id=recipe.id, ingredients=len(recipe.ingredients)
        )
        return recipe

    def update_recipe(self, recipe_id: str, payload: RecipeUpdate) -> Recipe:
        """
        Replace a recipe with the submitted fields.

        Raises:
            ServiceValidationError: If the body id differs from recipe_id
            NotFoundError: If recipe_id is not stored
        """
        self.ensure_ids_match(recipe_id, payload.id)
        recipe = self.repository.update(
            recipe_id, name=payload.name, ingredients=payload.ingredients
        )
        self.log_info("Updated recipe", id=recipe.id)
        return recipe

    def delete_recipe(self, recipe_id: str) -> bool:
        removed = self.repository.delete(recipe_id)
        if removed:
            self.log_info("Deleted recipe", id=recipe_id)
        else:
            self.log_warning("Delete requested for unknown recipe", id=recipe_id)
        return removed
