"""Unit normalization, compatibility checks and conversion."""

from dataclasses import dataclass

from shopping_aggregator.logging_config import get_logger

logger = get_logger(__name__)


# =============================================================================
# Unit Alias Tables
# =============================================================================

# Spelling variants -> canonical unit spelling (keys are lowercase)
UNIT_ALIASES: dict[str, str] = {
    # Volume - teaspoon
    "teaspoon": "tsp",
    "teaspoons": "tsp",
    "tsp": "tsp",
    "tsps": "tsp",
    "t": "tsp",
    # Volume - tablespoon
    "tablespoon": "tbsp",
    "tablespoons": "tbsp",
    "tbsp": "tbsp",
    "tbsps": "tbsp",
    "tbs": "tbsp",
    "tbl": "tbsp",
    # Volume - cup
    "cup": "cup",
    "cups": "cup",
    "c": "cup",
    # Volume - fluid ounce
    "fluid ounce": "fl oz",
    "fluid ounces": "fl oz",
    "fl oz": "fl oz",
    "fl. oz": "fl oz",
    "floz": "fl oz",
    # Volume - pint/quart/gallon
    "pint": "pint",
    "pints": "pint",
    "pt": "pint",
    "quart": "quart",
    "quarts": "quart",
    "qt": "quart",
    "gallon": "gallon",
    "gallons": "gallon",
    "gal": "gallon",
    # Volume - metric
    "milliliter": "ml",
    "milliliters": "ml",
    "millilitre": "ml",
    "millilitres": "ml",
    "ml": "ml",
    "liter": "l",
    "liters": "l",
    "litre": "l",
    "litres": "l",
    "l": "l",
    # Weight - imperial
    "pound": "lb",
    "pounds": "lb",
    "lb": "lb",
    "lbs": "lb",
    "ounce": "oz",
    "ounces": "oz",
    "oz": "oz",
    # Weight - metric
    "gram": "g",
    "grams": "g",
    "g": "g",
    "kilogram": "kg",
    "kilograms": "kg",
    "kg": "kg",
    # Count/container units
    "piece": "piece",
    "pieces": "piece",
    "whole": "whole",
    "large": "large",
    "medium": "medium",
    "small": "small",
    "can": "can",
    "cans": "can",
    "package": "package",
    "packages": "package",
    "pkg": "package",
    "jar": "jar",
    "jars": "jar",
    "bottle": "bottle",
    "bottles": "bottle",
    "box": "box",
    "boxes": "box",
    "bag": "bag",
    "bags": "bag",
    "bunch": "bunch",
    "bunches": "bunch",
    "head": "head",
    "heads": "head",
    "clove": "clove",
    "cloves": "clove",
    "slice": "slice",
    "slices": "slice",
    "stalk": "stalk",
    "stalks": "stalk",
    "stick": "stick",
    "sticks": "stick",
    "sprig": "sprig",
    "sprigs": "sprig",
    "pinch": "pinch",
    "pinches": "pinch",
    "dash": "dash",
    "dashes": "dash",
    "handful": "handful",
    "handfuls": "handful",
}

# Recipe shorthand where capitalization carries meaning ("1 T" is a tablespoon)
CASE_SENSITIVE_ALIASES: dict[str, str] = {
    "T": "tbsp",
    "Tb": "tbsp",
    "C": "cup",
}

# Words that look like units in free text but describe the ingredient
NON_UNIT_WORDS: frozenset[str] = frozenset(
    {
        "and",
        "or",
        "of",
        "to",
        "for",
        "with",
        "fresh",
        "dried",
        "ground",
        "chopped",
        "minced",
        "diced",
        "sliced",
        "grated",
        "shredded",
        "crushed",
        "melted",
        "softened",
        "room",
        "temperature",
        "cold",
        "warm",
        "hot",
        "cooked",
        "raw",
        "ripe",
        "peeled",
        "seeded",
        "pitted",
        "boneless",
        "skinless",
        "lean",
        "extra",
        "virgin",
        "light",
        "dark",
        "sweet",
        "unsweetened",
        "salted",
        "unsalted",
        "plain",
        "taste",
    }
)


# =============================================================================
# Conversion Table
# =============================================================================


@dataclass(frozen=True)
class UnitConversion:
    """Conversion group membership and scalar factor to the group's base unit."""

    group: str
    to_base: float


def _count_unit(unit: str) -> UnitConversion:
    return UnitConversion(group=f"count-{unit}", to_base=1.0)


# Units sharing a group are mutually convertible; every count noun is its own group
UNIT_CONVERSION: dict[str, UnitConversion] = {
    # Small volume (base: tsp)
    "tsp": UnitConversion("volume-small", 1.0),
    "tbsp": UnitConversion("volume-small", 3.0),
    # Large volume (base: cup)
    "cup": UnitConversion("volume-large", 1.0),
    "fl oz": UnitConversion("volume-large", 0.125),
    "pint": UnitConversion("volume-large", 2.0),
    "quart": UnitConversion("volume-large", 4.0),
    "gallon": UnitConversion("volume-large", 16.0),
    # Metric volume (base: ml)
    "ml": UnitConversion("volume-metric", 1.0),
    "l": UnitConversion("volume-metric", 1000.0),
    # Metric weight (base: g)
    "g": UnitConversion("weight-metric", 1.0),
    "kg": UnitConversion("weight-metric", 1000.0),
    # Imperial weight (base: oz)
    "oz": UnitConversion("weight-imperial", 1.0),
    "lb": UnitConversion("weight-imperial", 16.0),
    # Size descriptors used as units ("2 large eggs")
    "large": UnitConversion("count-size", 1.0),
    "medium": UnitConversion("count-size", 1.0),
    "small": UnitConversion("count-size", 1.0),
    **{
        unit: _count_unit(unit)
        for unit in (
            "piece",
            "whole",
            "can",
            "package",
            "jar",
            "bottle",
            "box",
            "bag",
            "bunch",
            "head",
            "clove",
            "slice",
            "stalk",
            "stick",
            "sprig",
            "pinch",
            "dash",
            "handful",
        )
    },
}


# =============================================================================
# Normalization and Compatibility
# =============================================================================


def normalize_unit(unit: str | None) -> str | None:
    """
    Map a unit spelling to its canonical form.

    Examples:
        "tablespoons" -> "tbsp"
        "Tbsp." -> "tbsp"
        "T" -> "tbsp"
        "chopped" -> None

    Returns:
        The canonical unit, or None if the spelling is not a known unit.
    """
    if not unit or not isinstance(unit, str):
        return None

    raw = " ".join(unit.split())
    if raw.endswith("."):
        raw = raw[:-1]

    if raw in CASE_SENSITIVE_ALIASES:
        return CASE_SENSITIVE_ALIASES[raw]

    lower = raw.lower()
    if lower in NON_UNIT_WORDS:
        return None

    return UNIT_ALIASES.get(lower)


def _unit_key(unit: str) -> str:
    """Canonical spelling used for comparisons, falling back to lowercase."""
    return normalize_unit(unit) or unit.strip().lower()


def get_conversion(unit: str | None) -> UnitConversion | None:
    """Look up the conversion entry for a unit, if it has one."""
    if not unit:
        return None
    return UNIT_CONVERSION.get(_unit_key(unit))


def unit_group(unit: str | None) -> str | None:
    """
    Get the conversion group of a unit.

    Units absent from the table form a singleton group named after their own
    lowercase spelling. Unitless values have no group.
    """
    if not unit:
        return None
    conversion = get_conversion(unit)
    if conversion:
        return conversion.group
    return _unit_key(unit)


def are_units_compatible(unit_a: str | None, unit_b: str | None) -> bool:
    """
    Check if quantities in two units can be summed.

    Empty strings and None both mean "unitless". Two unitless values are
    compatible; a unitless value never combines with a unit-bearing one.
    """
    if not unit_a and not unit_b:
        return True

    if not unit_a or not unit_b:
        return False

    if _unit_key(unit_a) == _unit_key(unit_b):
        return True

    conv_a = get_conversion(unit_a)
    conv_b = get_conversion(unit_b)
    return bool(conv_a and conv_b and conv_a.group == conv_b.group)


def convert_quantity(quantity: float, from_unit: str | None, to_unit: str | None) -> float:
    """
    Convert a quantity between two units of the same conversion group.

    Units that are identical, absent from the table or in different groups
    leave the quantity unchanged; callers check are_units_compatible first.
    """
    if not from_unit or not to_unit or _unit_key(from_unit) == _unit_key(to_unit):
        return quantity

    conv_from = get_conversion(from_unit)
    conv_to = get_conversion(to_unit)

    if not conv_from or not conv_to or conv_from.group != conv_to.group:
        logger.debug(f"No conversion from {from_unit!r} to {to_unit!r}, keeping {quantity}")
        return quantity

    return quantity * conv_from.to_base / conv_to.to_base
