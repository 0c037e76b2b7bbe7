"""Tests for the ingredient aggregation engine."""

import importlib
import logging

import pytest

from shopping_aggregator import aggregate
from shopping_aggregator.aggregation import aggregate_ingredients
from shopping_aggregator.schemas import AggregateOptions, IngredientLine

# =============================================================================
# Bell Peppers
# =============================================================================


class TestBellPepperReducer:
    """Tests for the bell pepper color breakdown."""

    def test_colors_merge_with_breakdown(self, bell_pepper_lines):
        """Test red and green bell peppers from raw text."""
        result = aggregate(bell_pepper_lines)

        assert len(result) == 1
        item = result[0]
        assert item.canonical_key == "bell pepper"
        assert item.display_name == "Bell peppers"
        assert item.total_quantity == 3
        assert item.unit is None
        assert [(c.label, c.quantity) for c in item.components] == [("red", 1), ("green", 2)]
        assert all(c.unit is None for c in item.components)
        assert item.notes == "Breakdown: 1 red, 2 green"

    def test_unspecified_only(self):
        """Test that an all-uncolored group gets a single unspecified component."""
        result = aggregate(
            [
                {"name": "bell pepper", "quantity": 2},
                {"name": "bell peppers", "quantity": 1},
            ]
        )

        item = result[0]
        assert item.total_quantity == 3
        assert [(c.label, c.quantity) for c in item.components] == [("unspecified", 3)]
        assert item.notes is None

    def test_unspecified_is_left_out_of_components(self):
        """Test that uncolored lines count toward the total only."""
        result = aggregate(
            [
                {"name": "bell pepper", "quantity": 1},
                {"name": "yellow bell pepper", "quantity": 2},
            ]
        )

        item = result[0]
        assert item.total_quantity == 3
        assert [c.label for c in item.components] == ["yellow"]
        assert item.notes == "Breakdown: 2 yellow"

    def test_lines_without_quantity_count_once(self):
        """Test that a color with no numeric quantity falls back to its line count."""
        result = aggregate(
            [
                {"name": "red bell pepper"},
                {"name": "red pepper"},
                {"name": "orange bell pepper", "quantity": 1},
            ]
        )

        item = result[0]
        assert item.total_quantity == 1
        assert [(c.label, c.quantity) for c in item.components] == [("red", 2), ("orange", 1)]
        assert item.notes == "Breakdown: 2 red, 1 orange"

    def test_no_quantities_at_all(self):
        """Test that the total is None when no line had a quantity."""
        result = aggregate([{"name": "green pepper"}])
        assert result[0].total_quantity is None


# =============================================================================
# Standard Reducer
# =============================================================================


class TestStandardReducer:
    """Tests for unit-aware summation."""

    def test_compatible_units_convert_to_first_unit(self, butter_lines):
        """Test 1 tbsp + 1 tsp of butter."""
        result = aggregate(butter_lines)

        assert len(result) == 1
        item = result[0]
        assert item.unit == "tbsp"
        assert item.total_quantity == pytest.approx(4 / 3)
        assert item.notes is None
        assert item.display_quantity() == "1 ⅓ tbsp"

    def test_incompatible_units_fall_back_to_notes(self, flour_lines):
        """Test 2 cups + 200 g of flour."""
        result = aggregate(flour_lines)

        item = result[0]
        assert item.canonical_key == "all-purpose flour"
        assert item.total_quantity is None
        assert item.unit is None
        assert item.notes == "Mixed: 2 cup + 200 g"

    def test_unit_aliases_sum(self):
        """Test that alias spellings are normalized before summing."""
        result = aggregate(
            [
                {"name": "milk", "quantity": 1, "unit": "Cups"},
                {"name": "whole milk", "quantity": "0.5", "unit": "cup"},
            ]
        )

        item = result[0]
        assert item.unit == "cup"
        assert item.total_quantity == 1.5

    def test_unitless_never_sums_with_unit(self):
        """Test that "2" of something never merges into "1 cup"."""
        result = aggregate(
            [
                {"name": "rice", "quantity": 1, "unit": "cup"},
                {"name": "rice", "quantity": 2, "originalText": "2 rice"},
            ]
        )

        item = result[0]
        assert item.total_quantity is None
        assert item.notes == "Mixed: 1 cup + 2"

    def test_unitless_lines_sum(self):
        """Test that lines with no unit and no text to parse sum unitless."""
        result = aggregate(
            [
                {"name": "eggs", "quantity": 2},
                {"name": "egg", "quantity": 1},
            ]
        )

        item = result[0]
        assert item.canonical_key == "egg"
        assert item.unit is None
        assert item.total_quantity == 3

    def test_missing_unit_is_filled_by_parser(self):
        """Test that a line with a quantity but no unit takes the parsed unit."""
        result = aggregate(
            [
                {"name": "eggs", "quantity": 2, "originalText": "2 eggs"},
                {"originalText": "3 eggs"},
            ]
        )

        item = result[0]
        assert item.canonical_key == "egg"
        assert item.unit == "piece"
        assert item.total_quantity == 5

    def test_parser_only_fills_missing_fields(self):
        """Test that the line's own quantity and unit win over parsed ones."""
        result = aggregate(
            [
                {"name": "milk", "quantity": 1, "originalText": "2 cups milk"},
                {"name": "milk", "unit": "cup", "originalText": "3 tbsp milk"},
                {"name": "milk", "quantity": 0.5, "unit": "cup", "originalText": "9 cups milk"},
            ]
        )

        item = result[0]
        assert item.unit == "cup"
        assert item.total_quantity == 4.5
        assert [line.parsed.quantity for line in item.source_lines] == [1, 3, 0.5]

    def test_count_nouns_do_not_merge(self):
        """Test that a can and a jar stay apart."""
        result = aggregate(
            [
                {"name": "tomato sauce", "quantity": 1, "unit": "can"},
                {"name": "tomato sauce", "quantity": 1, "unit": "jar"},
            ]
        )
        assert result[0].total_quantity is None
        assert result[0].notes == "Mixed: 1 can + 1 jar"

    def test_notes_use_original_text_without_quantity(self):
        """Test that lines with no quantity are quoted verbatim in notes."""
        result = aggregate(
            [
                {"name": "salt", "quantity": 1, "unit": "tsp"},
                {"name": "salt", "originalText": "salt to taste"},
            ]
        )

        item = result[0]
        assert item.total_quantity is None
        assert item.notes == "Mixed: 1 tsp + salt to taste"

    def test_non_numeric_quantities_are_skipped(self):
        """Test that NaN and words are not summed as zero."""
        result = aggregate(
            [
                {"name": "sugar", "quantity": "a lot", "unit": "cup"},
                {"name": "sugar", "quantity": float("nan"), "unit": "cup"},
                {"name": "sugar", "quantity": "1/2", "unit": "cup"},
            ]
        )

        item = result[0]
        assert item.unit == "cup"
        assert item.total_quantity == 0.5

    def test_no_numeric_quantity(self):
        """Test that a group with no numeric quantity has no total."""
        result = aggregate([{"name": "parsley", "originalText": "parsley, for garnish"}])
        assert result[0].total_quantity is None
        assert result[0].notes is None

    def test_merge_safety(self):
        """Test that no pair of incompatible units yields a numeric total."""
        units = ["cup", "g", "tbsp", "oz", "ml", "can", None]
        for first in units:
            for second in units:
                if first == second:
                    continue
                result = aggregate(
                    [
                        {"name": "stock", "quantity": 1, "unit": first},
                        {"name": "stock", "quantity": 2, "unit": second},
                    ]
                )
                assert result[0].total_quantity is None, (first, second)


# =============================================================================
# Grouping and Names
# =============================================================================


class TestGrouping:
    """Tests for bucketing lines by canonical key."""

    def test_cheddar_variants_merge(self):
        """Test family collapsing across recipes."""
        result = aggregate(
            [
                {"recipeId": 1, "name": "sharp cheddar cheese", "quantity": 1, "unit": "cup"},
                {"recipeId": 2, "name": "mild cheddar", "quantity": 0.5, "unit": "cup"},
                {"recipeId": 3, "name": "cheddar", "quantity": 4, "unit": "tbsp"},
            ]
        )

        assert len(result) == 1
        item = result[0]
        assert item.canonical_key == "cheddar cheese"
        assert item.total_quantity is None
        assert [line.recipe_id for line in item.source_lines] == ["1", "2", "3"]

    def test_salt_and_pepper_merge(self):
        """Test that compound spellings merge."""
        result = aggregate(
            [
                {"originalText": "salt and pepper to taste"},
                {"name": "salt & pepper"},
            ]
        )

        assert len(result) == 1
        assert result[0].canonical_key == "salt & pepper"
        assert len(result[0].source_lines) == 2

    def test_black_pepper_is_not_bell_pepper(self):
        """Test that black pepper and bell peppers stay separate."""
        result = aggregate(
            [
                {"name": "ground black pepper", "quantity": 1, "unit": "tsp"},
                {"name": "red bell pepper", "quantity": 1},
            ]
        )

        assert [item.canonical_key for item in result] == ["bell pepper", "black pepper"]

    def test_roasted_peppers_stay_apart_from_bell_peppers(self):
        """Test that jarred roasted peppers are not counted as fresh ones."""
        result = aggregate(
            [
                {"name": "roasted red peppers", "quantity": 1, "unit": "jar"},
                {"name": "red bell pepper", "quantity": 2},
            ]
        )

        assert [item.canonical_key for item in result] == ["bell pepper", "roasted red pepper"]
        assert result[0].total_quantity == 2
        assert result[0].notes == "Breakdown: 2 red"
        assert result[1].unit == "jar"

    def test_name_extracted_from_text(self):
        """Test lines that only carry original text."""
        result = aggregate(
            [
                {"originalText": "2 cups of shredded mozzarella"},
                {"originalText": "1 cup mozzarella cheese"},
            ]
        )

        item = result[0]
        assert item.canonical_key == "mozzarella cheese"
        assert item.unit == "cup"
        assert item.total_quantity == 3

    def test_source_lines(self):
        """Test provenance of an aggregated item."""
        result = aggregate(
            [{"recipeId": "r9", "originalText": "2 tbsp olive oil"}],
        )

        line = result[0].source_lines[0]
        assert line.recipe_id == "r9"
        assert line.original_text == "2 tbsp olive oil"
        assert line.parsed.quantity == 2
        assert line.parsed.unit == "tbsp"
        assert line.parsed.name == "Olive oil"

    def test_missing_recipe_id(self):
        """Test that lines without a recipe id get the unknown sentinel."""
        result = aggregate([{"name": "honey", "quantity": 1, "unit": "tbsp"}])
        assert result[0].source_lines[0].recipe_id == "unknown"

    def test_group_by_recipe(self):
        """Test that the same ingredient stays apart per recipe when asked."""
        lines = [
            {"recipeId": "a", "name": "butter", "quantity": 1, "unit": "tbsp"},
            {"recipeId": "b", "name": "butter", "quantity": 2, "unit": "tbsp"},
            {"recipeId": "a", "name": "unsalted butter", "quantity": 1, "unit": "tbsp"},
        ]

        merged = aggregate(lines)
        assert len(merged) == 1
        assert merged[0].total_quantity == 4
        assert merged[0].recipe_id is None

        separate = aggregate(lines, {"groupByRecipe": True})
        assert len(separate) == 2
        totals = {item.recipe_id: item.total_quantity for item in separate}
        assert totals == {"a": 2, "b": 2}

    def test_options_model(self):
        """Test passing an AggregateOptions instance."""
        lines = [
            {"recipeId": "a", "name": "egg", "quantity": 1},
            {"recipeId": "b", "name": "egg", "quantity": 1},
        ]
        result = aggregate(lines, AggregateOptions(group_by_recipe=True))
        assert len(result) == 2


class TestSorting:
    """Tests for output order."""

    def test_case_insensitive_sort(self):
        """Test that items are sorted by display name ignoring case."""
        result = aggregate(
            [
                {"name": "zucchini"},
                {"name": "Apples and oranges"},
                {"name": "basil"},
                {"name": "avocado"},
            ]
        )

        names = [item.display_name for item in result]
        assert names == sorted(names, key=str.casefold)
        assert names[0] == "Apples & oranges"


# =============================================================================
# Malformed Input
# =============================================================================


class TestMalformedInput:
    """Tests that bad input degrades instead of raising."""

    def test_empty_list(self):
        """Test aggregate([])."""
        assert aggregate([]) == []

    @pytest.mark.parametrize("value", [None, "salt", 42, {"name": "salt"}])
    def test_non_list_input(self, value, caplog):
        """Test that non-list input returns an empty result."""
        with caplog.at_level(logging.WARNING):
            assert aggregate(value) == []
        assert "Expected a list" in caplog.text

    def test_blank_names_are_dropped(self):
        """Test that whitespace-only names produce no item."""
        result = aggregate(
            [
                {"name": "   "},
                {"name": ""},
                {"originalText": "   "},
                {"name": "garlic", "quantity": 2, "unit": "cloves"},
            ]
        )

        assert [item.canonical_key for item in result] == ["garlic"]
        assert result[0].unit == "clove"

    def test_invalid_lines_are_skipped(self, caplog):
        """Test that lines failing validation are skipped with a warning."""
        with caplog.at_level(logging.WARNING):
            result = aggregate(
                [
                    "not a mapping",
                    {"name": "onion", "quantity": [1, 2]},
                    {"name": "onion", "quantity": 1},
                ]
            )

        assert len(result) == 1
        assert result[0].total_quantity == 1
        assert "Skipping" in caplog.text

    def test_ingredient_line_objects(self):
        """Test passing validated IngredientLine objects."""
        lines = [
            IngredientLine(recipe_id="r1", name="lemon", quantity=1),
            IngredientLine(recipeId="r2", originalText="2 lemons"),
        ]
        result = aggregate_ingredients(lines)

        assert result[0].canonical_key == "lemon"
        assert result[0].total_quantity is None
        assert result[0].notes == "Mixed: 1 + 2 piece"

    def test_custom_parser(self):
        """Test injecting a parser returning a mapping."""
        calls = []

        def parser(text):
            calls.append(text)
            return {"quantity": 5, "unit": "Grams"}

        result = aggregate([{"originalText": "five grams of yeast"}], parser=parser)

        assert calls == ["five grams of yeast"]
        assert result[0].total_quantity == 5
        assert result[0].unit == "g"

    def test_failing_parser(self, caplog):
        """Test that a parser exception only loses that line's quantity."""

        def parser(text):
            raise ValueError("boom")

        with caplog.at_level(logging.WARNING):
            result = aggregate([{"originalText": "2 cups flour"}], parser=parser)

        assert result[0].canonical_key == "all-purpose flour"
        assert result[0].total_quantity is None
        assert "Parser failed" in caplog.text


# =============================================================================
# Public API
# =============================================================================


class TestPublicApi:
    """Tests for the package-level entry points."""

    def test_aggregate_alias(self):
        """Test that the top-level alias is the engine function."""
        assert aggregate is aggregate_ingredients

    def test_engine_package_stays_importable(self):
        """Test that the alias does not shadow the engine subpackage."""
        module = importlib.import_module("shopping_aggregator.aggregation")
        assert module.aggregate_ingredients is aggregate_ingredients
        assert hasattr(module, "AggregationGroup")
