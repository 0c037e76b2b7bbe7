"""Ingredient normalization and shopping-list aggregation."""

from shopping_aggregator.aggregation import aggregate_ingredients
from shopping_aggregator.normalize import normalize_ingredient_name
from shopping_aggregator.schemas import (
    AggregatedItem,
    AggregateOptions,
    Component,
    IngredientLine,
    ParsedLine,
    SourceLine,
)

aggregate = aggregate_ingredients

__all__ = [
    "AggregatedItem",
    "AggregateOptions",
    "Component",
    "IngredientLine",
    "ParsedLine",
    "SourceLine",
    "aggregate",
    "aggregate_ingredients",
    "normalize_ingredient_name",
]
