"""Raw ingredient-line parsing and quantity formatting."""

import math
import re
from dataclasses import dataclass
from typing import Any

from shopping_aggregator.normalize.units import UNIT_ALIASES, normalize_unit

# =============================================================================
# Parsing Tables
# =============================================================================

UNICODE_FRACTIONS: dict[str, float] = {
    "½": 1 / 2,
    "⅓": 1 / 3,
    "⅔": 2 / 3,
    "¼": 1 / 4,
    "¾": 3 / 4,
    "⅕": 1 / 5,
    "⅖": 2 / 5,
    "⅗": 3 / 5,
    "⅘": 4 / 5,
    "⅙": 1 / 6,
    "⅚": 5 / 6,
    "⅛": 1 / 8,
    "⅜": 3 / 8,
    "⅝": 5 / 8,
    "⅞": 7 / 8,
}

_FRACTION_CHARS = "".join(UNICODE_FRACTIONS)

# Phrases meaning "no fixed amount"; the first match is reported in notes
SERVING_PHRASES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\bto\s+taste\b", re.IGNORECASE), "to taste"),
    (re.compile(r"\bas\s+needed\b", re.IGNORECASE), "as needed"),
    (re.compile(r"\bto\s+your\s+(?:liking|preference)\b", re.IGNORECASE), "to taste"),
    (re.compile(r"\boptional\b", re.IGNORECASE), "optional"),
    (re.compile(r"\bfor\s+garnish\b", re.IGNORECASE), "for garnish"),
    (re.compile(r"\bfor\s+serving\b", re.IGNORECASE), "for serving"),
)

SERVING_PHRASE_PATTERN = re.compile(
    r",?\s*\(?\b(?:to\s+taste|as\s+needed|to\s+your\s+(?:liking|preference)|optional"
    r"|for\s+garnish|for\s+serving)\b\)?",
    re.IGNORECASE,
)

# Ingredients that are bought by the piece when a line gives only a count
COUNTABLE_INGREDIENTS: frozenset[str] = frozenset(
    {
        "egg",
        "eggs",
        "banana",
        "bananas",
        "apple",
        "apples",
        "orange",
        "oranges",
        "lemon",
        "lemons",
        "lime",
        "limes",
        "onion",
        "onions",
        "potato",
        "potatoes",
        "tomato",
        "tomatoes",
        "carrot",
        "carrots",
        "avocado",
        "avocados",
        "cucumber",
        "cucumbers",
        "zucchini",
        "bell pepper",
        "bell peppers",
        "jalapeño",
        "jalapeños",
        "jalapeno",
        "jalapenos",
        "shallot",
        "shallots",
    }
)

_NUMBER = r"\d+(?:\.\d+)?"

QUANTITY_PATTERN = re.compile(
    rf"^(\d+\s+\d+/\d+"
    rf"|\d+/\d+"
    rf"|{_NUMBER}\s*[{_FRACTION_CHARS}]"
    rf"|[{_FRACTION_CHARS}]"
    rf"|{_NUMBER}(?:\s*(?:-|–|to|or)\s*{_NUMBER})?)\s*",
    re.IGNORECASE,
)

# Leading quantity characters stripped when only a name is wanted
_LEADING_QUANTITY = re.compile(rf"^[\d\s{_FRACTION_CHARS}/.\-]+")

_LEADING_UNIT = re.compile(
    r"^(?:"
    + "|".join(re.escape(unit) for unit in sorted(UNIT_ALIASES, key=len, reverse=True))
    + r")\.?\s+",
    re.IGNORECASE,
)

_LEADING_OF = re.compile(r"^of\s+", re.IGNORECASE)


@dataclass(frozen=True)
class ParsedIngredient:
    """Structured view of a raw ingredient line."""

    raw_text: str
    quantity: float | None = None
    unit: str | None = None
    ingredient: str = ""
    preparation: str | None = None
    notes: str | None = None


# =============================================================================
# Parsing Functions
# =============================================================================


def parse_quantity(quantity_str: str | None) -> float | None:
    """
    Parse a quantity string into a float.

    Handles formats like:
    - "2", "1.5"
    - "1/2", "1 1/2"
    - "½", "1½", "1 ½"
    - "2-3", "2 to 3", "2 or 3" (range, returns average)

    Returns None when the string is not a quantity.
    """
    if not quantity_str:
        return None

    text = str(quantity_str).strip()

    # Unicode fractions, alone or after a whole number
    fraction_match = re.fullmatch(rf"(?:(\d+)\s*)?([{_FRACTION_CHARS}])", text)
    if fraction_match:
        whole = int(fraction_match.group(1) or 0)
        return whole + UNICODE_FRACTIONS[fraction_match.group(2)]

    mixed_match = re.fullmatch(r"(\d+)\s+(\d+)/(\d+)", text)
    if mixed_match:
        denominator = int(mixed_match.group(3))
        if denominator == 0:
            return None
        return int(mixed_match.group(1)) + int(mixed_match.group(2)) / denominator

    frac_match = re.fullmatch(r"(\d+)/(\d+)", text)
    if frac_match:
        denominator = int(frac_match.group(2))
        if denominator == 0:
            return None
        return int(frac_match.group(1)) / denominator

    range_match = re.fullmatch(rf"({_NUMBER})\s*(?:-|–|to|or)\s*({_NUMBER})", text, re.IGNORECASE)
    if range_match:
        low = float(range_match.group(1))
        high = float(range_match.group(2))
        return (low + high) / 2

    if re.fullmatch(_NUMBER, text):
        return float(text)

    return None


def _serving_phrase(text: str) -> str | None:
    for pattern, phrase in SERVING_PHRASES:
        if pattern.search(text):
            return phrase
    return None


def strip_serving_phrase(text: str) -> str:
    """Remove "to taste" style phrases and any comma left dangling."""
    stripped = SERVING_PHRASE_PATTERN.sub("", text).strip()
    return re.sub(r"[,\s]+$", "", stripped)


def parse_ingredient_string(raw_text: str | None) -> ParsedIngredient:
    """
    Parse a raw ingredient line into quantity, unit and name.

    Examples:
        "2 cups flour, sifted" -> (2.0, "cup", "flour", preparation "sifted")
        "1 ½ tbsp olive oil" -> (1.5, "tbsp", "olive oil")
        "3 eggs" -> (3.0, "piece", "eggs")
        "salt to taste" -> (None, None, "salt", notes "to taste")

    Never raises; unparseable text comes back with quantity and unit None.
    """
    if not raw_text or not isinstance(raw_text, str):
        text = raw_text if isinstance(raw_text, str) else ""
        return ParsedIngredient(raw_text=text, ingredient=text)

    original = " ".join(raw_text.split())

    phrase = _serving_phrase(original)
    if phrase:
        ingredient = strip_serving_phrase(original)
        return ParsedIngredient(
            raw_text=original,
            ingredient=ingredient or original,
            notes=phrase,
        )

    main_part = original
    preparation: str | None = None

    comma_index = original.find(",")
    if comma_index > 0:
        main_part = original[:comma_index].strip()
        preparation = original[comma_index + 1 :].strip() or None

    paren_match = re.match(r"^(.+?)\s*\(([^)]+)\)\s*$", main_part)
    if paren_match:
        main_part = paren_match.group(1).strip()
        note = paren_match.group(2).strip()
        preparation = f"{note}, {preparation}" if preparation else note

    quantity: float | None = None
    remaining = main_part

    quantity_match = QUANTITY_PATTERN.match(main_part)
    if quantity_match:
        quantity = parse_quantity(quantity_match.group(1))
        remaining = main_part[quantity_match.end() :].strip()

    unit: str | None = None
    ingredient = remaining
    words = remaining.split()

    if words:
        if len(words) > 1 and words[0].lower() == "fluid" and words[1].lower().startswith("o"):
            unit = "fl oz"
            ingredient = " ".join(words[2:])
        elif (normalized := normalize_unit(words[0])) is not None:
            unit = normalized
            ingredient = " ".join(words[1:])

    ingredient = _LEADING_OF.sub("", ingredient).strip()
    if not ingredient:
        ingredient = original

    if quantity is not None and unit is None and ingredient.lower() in COUNTABLE_INGREDIENTS:
        unit = "piece"

    return ParsedIngredient(
        raw_text=original,
        quantity=quantity,
        unit=unit,
        ingredient=ingredient,
        preparation=preparation,
    )


def extract_name_from_text(text: str | None) -> str:
    """
    Pull an ingredient name out of a raw line.

    Strips a leading quantity, a leading unit word, a leading "of" and a
    trailing serving phrase: "2 cups of flour" -> "flour".
    """
    if not text or not isinstance(text, str):
        return ""

    name = _LEADING_QUANTITY.sub("", text).strip()
    name = _LEADING_UNIT.sub("", name).strip()
    name = _LEADING_OF.sub("", name).strip()
    name = strip_serving_phrase(name)

    return name or text.strip()


# =============================================================================
# Numeric Helpers
# =============================================================================


def to_number(value: Any) -> float | None:
    """
    Coerce a stored quantity to a float.

    Strings are parsed with float(), falling back to parse_quantity for
    fractions such as "1/2"; booleans, NaN, infinities and anything
    non-numeric give None.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            parsed = parse_quantity(value)
            if parsed is None:
                return None
            number = parsed
    else:
        return None

    if math.isnan(number) or math.isinf(number):
        return None
    return number


def format_number(value: float) -> str:
    """Render a number without a trailing ".0" ("2", "0.5", "1.3333333333333333")."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


_DISPLAY_FRACTIONS: tuple[tuple[float, str], ...] = (
    (1 / 8, "⅛"),
    (1 / 4, "¼"),
    (1 / 3, "⅓"),
    (3 / 8, "⅜"),
    (1 / 2, "½"),
    (5 / 8, "⅝"),
    (2 / 3, "⅔"),
    (3 / 4, "¾"),
    (7 / 8, "⅞"),
)


def format_quantity(quantity: float | None) -> str:
    """
    Format a quantity for display, using fraction glyphs where close.

    Examples:
        0.5 -> "½"
        1.25 -> "1 ¼"
        1.3333 -> "1 ⅓"
        2.0 -> "2"
        2.19 -> "2.19"
    """
    if quantity is None:
        return ""

    whole = math.floor(quantity)
    remainder = quantity - whole

    closest: str | None = None
    min_diff = math.inf
    for value, symbol in _DISPLAY_FRACTIONS:
        diff = abs(remainder - value)
        if diff < min_diff and diff < 0.05:
            min_diff = diff
            closest = symbol

    if closest:
        return closest if whole == 0 else f"{whole} {closest}"

    if remainder > 0.01:
        return f"{quantity:.2f}".rstrip("0").rstrip(".")

    return str(whole)
