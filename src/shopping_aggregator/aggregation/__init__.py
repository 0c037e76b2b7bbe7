"""Aggregate ingredient lines into shopping-list items."""

from shopping_aggregator.aggregation.engine import (
    AggregationGroup,
    GroupedLine,
    IngredientParser,
    aggregate_ingredients,
)

__all__ = [
    "AggregationGroup",
    "GroupedLine",
    "IngredientParser",
    "aggregate_ingredients",
]
