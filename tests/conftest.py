"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports.
"""

import sys
from pathlib import Path

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import pytest
from fastapi.testclient import TestClient

from main import app
from repositories import ShoppingListRepository, RecipeRepository
from services import ShoppingListService, RecipeService


@pytest.fixture
def client():
    """
    Test client with the application lifespan running.

    Entering the client starts the app, which resets both collections and
    loads the sample records, so each test sees a fresh seeded server.
    """
    with TestClient(app) as c:
        yield c


@pytest.fixture
def shopping_list_repo() -> ShoppingListRepository:
    return ShoppingListRepository()


@pytest.fixture
def recipe_repo() -> RecipeRepository:
    return RecipeRepository()


@pytest.fixture
def shopping_list_service(shopping_list_repo) -> ShoppingListService:
    return ShoppingListService(shopping_list_repo)


@pytest.fixture
def recipe_service(recipe_repo) -> RecipeService:
    return RecipeService(recipe_repo)
