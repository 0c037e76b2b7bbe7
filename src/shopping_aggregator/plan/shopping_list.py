"""Shopping list construction from recipe ingredients."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from shopping_aggregator.aggregation import IngredientParser, aggregate_ingredients
from shopping_aggregator.logging_config import get_logger
from shopping_aggregator.normalize.parser import parse_ingredient_string
from shopping_aggregator.plan.categories import GroceryCategory, categorize_ingredient
from shopping_aggregator.schemas import AggregatedItem, AggregateOptions, Component

logger = get_logger(__name__)


@dataclass
class ShoppingItem:
    """A single item in the shopping list."""

    name: str
    canonical_key: str
    quantity: float | None
    unit: str | None
    display_quantity: str
    category: GroceryCategory = GroceryCategory.OTHER
    recipe_sources: list[str] = field(default_factory=list)
    components: list[Component] | None = None
    notes: str | None = None
    recipe_id: str | None = None

    @property
    def has_total(self) -> bool:
        """Check if the quantities could be summed."""
        return self.quantity is not None

    @classmethod
    def from_aggregated(cls, item: AggregatedItem) -> "ShoppingItem":
        """Build a shopping item from an aggregated engine result."""
        sources = list(dict.fromkeys(line.recipe_id for line in item.source_lines))
        return cls(
            name=item.display_name,
            canonical_key=item.canonical_key,
            quantity=item.total_quantity,
            unit=item.unit,
            display_quantity=item.display_quantity(),
            category=categorize_ingredient(item.canonical_key),
            recipe_sources=sources,
            components=item.components,
            notes=item.notes,
            recipe_id=item.recipe_id,
        )


@dataclass
class ShoppingList:
    """Consolidated shopping list for a set of recipes."""

    items: list[ShoppingItem] = field(default_factory=list)

    # Grouped view
    items_by_category: dict[str, list[ShoppingItem]] = field(default_factory=dict)

    def add_item(self, item: ShoppingItem) -> None:
        """Add an item and file it under its category."""
        self.items.append(item)
        self.items_by_category.setdefault(item.category.value, []).append(item)

    @property
    def unsummed_items(self) -> list[ShoppingItem]:
        """Items whose quantities are listed in notes instead of a total."""
        return [item for item in self.items if not item.has_total]


class ShoppingListBuilder:
    """
    Builds shopping lists from recipe ingredients with:
    - Name normalization and family matching
    - Quantity aggregation across recipes with unit conversion
    - Grocery category assignment
    """

    def __init__(self, parser: IngredientParser | None = None):
        self.parser = parser

    def build(
        self,
        recipes_ingredients: Iterable[tuple[str, Iterable[Any]]],
        keep_recipe_separate: bool = False,
    ) -> ShoppingList:
        """
        Build a shopping list from recipe ingredients.

        Args:
            recipes_ingredients: (recipe_id, ingredients) pairs. Each
                ingredient is a raw line ("2 cups flour") or a mapping with
                name, quantity, unit, measure or original_text keys.
            keep_recipe_separate: Aggregate each recipe on its own instead
                of merging the same ingredient across recipes.

        Returns:
            ShoppingList with items sorted by name and grouped by category.
        """
        lines: list[dict[str, Any]] = []
        recipe_count = 0
        for recipe_id, ingredients in recipes_ingredients:
            recipe_count += 1
            lines.extend(self._to_lines(recipe_id, ingredients))

        aggregated = aggregate_ingredients(
            lines,
            AggregateOptions(group_by_recipe=keep_recipe_separate),
            parser=self.parser,
        )

        shopping_list = ShoppingList()
        for agg_item in aggregated:
            shopping_list.add_item(ShoppingItem.from_aggregated(agg_item))

        logger.info(
            f"Built shopping list: {len(shopping_list.items)} items from "
            f"{recipe_count} recipes, {len(shopping_list.unsummed_items)} unsummed"
        )

        return shopping_list

    def _to_lines(self, recipe_id: str, ingredients: Iterable[Any]) -> list[dict[str, Any]]:
        """Convert one recipe's ingredients into engine input lines."""
        lines: list[dict[str, Any]] = []

        for ing in ingredients:
            if isinstance(ing, str):
                lines.append({"recipe_id": recipe_id, "original_text": ing})
            elif isinstance(ing, Mapping):
                lines.append(self._mapping_to_line(recipe_id, ing))
            else:
                logger.warning(f"Skipping ingredient of type {type(ing).__name__} in {recipe_id}")

        return lines

    def _mapping_to_line(self, recipe_id: str, ing: Mapping[str, Any]) -> dict[str, Any]:
        name = ing.get("name") or ing.get("ingredient_name") or ing.get("ingredientName")
        quantity = ing.get("quantity")
        unit = ing.get("unit")
        measure = ing.get("measure")
        original_text = ing.get("original_text") or ing.get("originalText")

        # A combined measure such as "2 cups" carries both quantity and unit
        if measure and quantity is None:
            parsed = parse_ingredient_string(str(measure))
            quantity = parsed.quantity
            unit = unit or parsed.unit

        if not original_text:
            original_text = " ".join(str(part) for part in (measure, name) if part) or None

        return {
            "recipe_id": recipe_id,
            "original_text": original_text,
            "quantity": quantity,
            "unit": unit,
            "name": name,
        }
