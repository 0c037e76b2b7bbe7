"""Shopping list construction and grocery categorization."""

from shopping_aggregator.plan.categories import (
    GroceryCategory,
    categorize_ingredient,
)
from shopping_aggregator.plan.shopping_list import (
    ShoppingItem,
    ShoppingList,
    ShoppingListBuilder,
)

__all__ = [
    "GroceryCategory",
    "ShoppingItem",
    "ShoppingList",
    "ShoppingListBuilder",
    "categorize_ingredient",
]
