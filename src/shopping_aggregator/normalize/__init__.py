"""Normalize ingredient names, units and raw ingredient text."""

from shopping_aggregator.normalize.names import (
    EMPTY_NAME,
    BellPepperName,
    CompoundName,
    FamilyName,
    NormalizedName,
    PlainName,
    normalize_ingredient_name,
    strip_modifiers,
)
from shopping_aggregator.normalize.parser import (
    ParsedIngredient,
    extract_name_from_text,
    format_quantity,
    parse_ingredient_string,
    parse_quantity,
    to_number,
)
from shopping_aggregator.normalize.spelling import (
    correct_misspelling,
    fuzzy_match_ingredient_family,
)
from shopping_aggregator.normalize.units import (
    are_units_compatible,
    convert_quantity,
    normalize_unit,
)

__all__ = [
    "EMPTY_NAME",
    "BellPepperName",
    "CompoundName",
    "FamilyName",
    "NormalizedName",
    "ParsedIngredient",
    "PlainName",
    "are_units_compatible",
    "convert_quantity",
    "correct_misspelling",
    "extract_name_from_text",
    "format_quantity",
    "fuzzy_match_ingredient_family",
    "normalize_ingredient_name",
    "normalize_unit",
    "parse_ingredient_string",
    "parse_quantity",
    "strip_modifiers",
    "to_number",
]
