"""Pytest configuration and shared fixtures."""

import pytest

from shopping_aggregator.config import get_settings
from shopping_aggregator.logging_config import clear_context

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow running")
    config.addinivalue_line(
        "markers", "fuzzy: marks tests that depend on spelling correction being enabled"
    )


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings and logging context around every test."""
    get_settings.cache_clear()
    clear_context()
    yield
    get_settings.cache_clear()
    clear_context()


@pytest.fixture
def fuzzy_disabled(monkeypatch):
    """Turn spelling correction off through the environment."""
    monkeypatch.setenv("FUZZY_MATCHING_ENABLED", "false")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Ingredient Line Fixtures
# =============================================================================


@pytest.fixture
def bell_pepper_lines():
    """Two bell pepper lines given only as raw text."""
    return [
        {"recipeId": "r1", "originalText": "1 red bell pepper"},
        {"recipeId": "r2", "originalText": "2 green bell peppers"},
    ]


@pytest.fixture
def butter_lines():
    """Butter in tablespoons and teaspoons."""
    return [
        {"recipeId": "r1", "name": "butter", "quantity": 1, "unit": "tbsp"},
        {"recipeId": "r2", "name": "butter", "quantity": 1, "unit": "tsp"},
    ]


@pytest.fixture
def flour_lines():
    """Flour in a volume unit and a weight unit."""
    return [
        {"recipeId": "r1", "name": "flour", "quantity": 2, "unit": "cup"},
        {"recipeId": "r2", "name": "flour", "quantity": 200, "unit": "g"},
    ]


@pytest.fixture
def sample_recipes():
    """Two recipes sharing some ingredients."""
    return [
        (
            "pasta-night",
            [
                "2 cups shredded sharp cheddar cheese",
                "1 red bell pepper",
                "2 tbsp olive oil",
                "salt and pepper to taste",
                {"name": "Spaghetti", "measure": "1 lb"},
            ],
        ),
        (
            "breakfast",
            [
                "1 cup mild cheddar",
                "2 green bell peppers",
                {"name": "olive oil", "quantity": 1, "unit": "tsp"},
                {"name": "eggs", "quantity": 3},
                "salt & pepper",
            ],
        ),
    ]
