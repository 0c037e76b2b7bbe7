"""
Spelling correction for ingredient names.

Two layers: a dictionary of common misspellings applied word by word, and an
edit-distance search over the family canonical keys using rapidfuzz.
"""

import re
from dataclasses import dataclass

from rapidfuzz import process
from rapidfuzz.distance import Levenshtein

from shopping_aggregator.config import get_settings
from shopping_aggregator.logging_config import get_logger
from shopping_aggregator.normalize.patterns import (
    FAMILY_CANONICAL_KEYS,
    INGREDIENT_FAMILIES,
    capitalize_first,
    match_ingredient_family,
    singularize,
)

logger = get_logger(__name__)

# Misspelling -> correct word
COMMON_MISSPELLINGS: dict[str, str] = {
    # Proteins
    "chiken": "chicken",
    "chicen": "chicken",
    "chikken": "chicken",
    "beaf": "beef",
    "salman": "salmon",
    "samon": "salmon",
    "shripm": "shrimp",
    "shrimps": "shrimp",
    "bacn": "bacon",
    "sausge": "sausage",
    "turky": "turkey",
    # Produce
    "oinon": "onion",
    "onoin": "onion",
    "garlik": "garlic",
    "garlick": "garlic",
    "tomatoe": "tomato",
    "tomatos": "tomatoes",
    "potatoe": "potato",
    "potatos": "potatoes",
    "brocoli": "broccoli",
    "brocolli": "broccoli",
    "avacado": "avocado",
    "avocadoe": "avocado",
    "carot": "carrot",
    "carrott": "carrot",
    "letuce": "lettuce",
    "spinnach": "spinach",
    "cucmber": "cucumber",
    "zuchini": "zucchini",
    "zucchinni": "zucchini",
    "mushrom": "mushroom",
    "mushroon": "mushroom",
    "jalepeno": "jalapeño",
    "cilantero": "cilantro",
    "asparagas": "asparagus",
    # Herbs and spices
    "parsely": "parsley",
    "parsly": "parsley",
    "basle": "basil",
    "bazil": "basil",
    "oregeno": "oregano",
    "oregono": "oregano",
    "rosemery": "rosemary",
    "rosmary": "rosemary",
    "tyme": "thyme",
    "cinamon": "cinnamon",
    "cinnimon": "cinnamon",
    "peper": "pepper",
    "pepppr": "pepper",
    "tumeric": "turmeric",
    "cummin": "cumin",
    "papricka": "paprika",
    # Dairy
    "chese": "cheese",
    "cheeze": "cheese",
    "parmesean": "parmesan",
    "parmasan": "parmesan",
    "mozarella": "mozzarella",
    "mozzarela": "mozzarella",
    "mozzerella": "mozzarella",
    "ricota": "ricotta",
    "buuter": "butter",
    "buter": "butter",
    "yougurt": "yogurt",
    # Pantry
    "suger": "sugar",
    "vinager": "vinegar",
    "vineger": "vinegar",
    "worchestershire": "worcestershire",
    "worcestshire": "worcestershire",
    "mayonaise": "mayonnaise",
    "mayonase": "mayonnaise",
    "spagetti": "spaghetti",
    "spaghettti": "spaghetti",
    "fettucine": "fettuccine",
    "lazagna": "lasagna",
    "vanila": "vanilla",
}

_WORD = re.compile(r"[a-zñ']+")

_FAMILY_DISPLAYS: dict[str, str] = {}
for _rule in INGREDIENT_FAMILIES:
    _FAMILY_DISPLAYS.setdefault(_rule.canonical, _rule.display)


@dataclass(frozen=True)
class SpellingCorrection:
    """Result of dictionary-based correction."""

    corrected: str
    was_corrected: bool
    original: str | None = None


@dataclass(frozen=True)
class FuzzyMatch:
    """A family reached through spelling correction."""

    canonical: str
    display: str
    distance: int
    corrected_from: str


def correct_misspelling(text: str | None) -> SpellingCorrection:
    """
    Replace known misspelled words in a lowercase phrase.

    Examples:
        "chiken breast" -> SpellingCorrection("chicken breast", True, "chiken breast")
        "chicken breast" -> SpellingCorrection("chicken breast", False, None)
    """
    if not text or not isinstance(text, str):
        return SpellingCorrection(corrected=text or "", was_corrected=False)

    lowered = text.lower()
    corrected = _WORD.sub(lambda m: COMMON_MISSPELLINGS.get(m.group(0), m.group(0)), lowered)

    if corrected == lowered:
        return SpellingCorrection(corrected=text, was_corrected=False)
    return SpellingCorrection(corrected=corrected, was_corrected=True, original=text)


def fuzzy_match_ingredient_family(text: str | None) -> FuzzyMatch | None:
    """
    Find the ingredient family a misspelled name most likely belongs to.

    Dictionary corrections are tried first and reported with distance 0.
    Otherwise, sufficiently long names are compared against every family
    canonical key by Levenshtein distance.

    Returns:
        FuzzyMatch, or None when the text is too short or nothing is close.
    """
    settings = get_settings()
    if not settings.fuzzy_matching_enabled or not text or not isinstance(text, str):
        return None

    lowered = text.strip().lower()
    if len(lowered) < settings.fuzzy_min_length:
        return None

    correction = correct_misspelling(lowered)
    if correction.was_corrected:
        rule = match_ingredient_family(correction.corrected)
        if rule:
            canonical, display = rule.canonical, rule.display
        else:
            canonical = singularize(correction.corrected)
            display = capitalize_first(canonical)
        logger.debug(f"Corrected {lowered!r} -> {canonical!r}")
        return FuzzyMatch(
            canonical=canonical,
            display=display,
            distance=0,
            corrected_from=lowered,
        )

    candidate = singularize(lowered)
    if len(candidate) < settings.fuzzy_edit_min_length:
        return None

    result = process.extractOne(
        candidate,
        FAMILY_CANONICAL_KEYS,
        scorer=Levenshtein.distance,
        score_cutoff=settings.fuzzy_max_distance,
    )
    if result is None:
        return None

    canonical, distance, _ = result
    if distance <= 0:
        return None

    display = _FAMILY_DISPLAYS[canonical]
    logger.debug(f"Fuzzy matched {lowered!r} -> {canonical!r} (distance {distance})")
    return FuzzyMatch(
        canonical=canonical,
        display=display,
        distance=int(distance),
        corrected_from=lowered,
    )
