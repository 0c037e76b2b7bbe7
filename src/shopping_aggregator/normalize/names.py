"""
Ingredient name normalization.

Reduces a free-text ingredient name to a canonical key (the grouping identity)
and a display name. The outcome is one of four variants so that reducers can
dispatch on the kind of match instead of inspecting a flag dictionary.
"""

import re
from dataclasses import dataclass
from typing import Any

from shopping_aggregator.config import get_settings
from shopping_aggregator.logging_config import get_logger
from shopping_aggregator.normalize.parser import strip_serving_phrase
from shopping_aggregator.normalize.patterns import (
    BELL_PEPPER_DISPLAY,
    BELL_PEPPER_KEY,
    BELL_PEPPER_PATTERN,
    COLOR_PEPPER_PATTERN,
    COMPOUND_NORMALIZATIONS,
    FAMILY_CANONICAL_KEYS,
    MODIFIER_PATTERNS,
    capitalize_first,
    match_ingredient_family,
    singularize,
)
from shopping_aggregator.normalize.spelling import (
    correct_misspelling,
    fuzzy_match_ingredient_family,
)

logger = get_logger(__name__)

_CONJUNCTION = re.compile(r"^(\w{2,12})\s+(?:and|&)\s+(\w{2,12})$")
_TRAILING_PUNCTUATION = ".,;:!?"


# =============================================================================
# Normalized Name Variants
# =============================================================================


@dataclass(frozen=True)
class CompoundName:
    """A fixed multi-word idiom ("salt & pepper") or rewritten "a and b" pair."""

    canonical_key: str
    display_name: str

    @property
    def attributes(self) -> dict[str, Any]:
        return {"compound": True}


@dataclass(frozen=True)
class BellPepperName:
    """Any bell pepper; the color is tracked here, never in the key."""

    color: str | None = None
    modifiers_stripped: bool = False
    fuzzy_matched: bool = False
    canonical_key: str = BELL_PEPPER_KEY
    display_name: str = BELL_PEPPER_DISPLAY

    @property
    def attributes(self) -> dict[str, Any]:
        attrs: dict[str, Any] = {"is_bell_pepper": True, "color": self.color}
        if self.modifiers_stripped:
            attrs["modifiers_stripped"] = True
        if self.fuzzy_matched:
            attrs["fuzzy_matched"] = True
        return attrs


@dataclass(frozen=True)
class FamilyName:
    """A name collapsed onto an ingredient family."""

    canonical_key: str
    display_name: str
    modifiers_stripped: bool = False
    fuzzy_matched: bool = False
    corrected_from: str | None = None

    @property
    def attributes(self) -> dict[str, Any]:
        attrs: dict[str, Any] = {"family_matched": True}
        if self.modifiers_stripped:
            attrs["modifiers_stripped"] = True
        if self.fuzzy_matched:
            attrs["fuzzy_matched"] = True
        return attrs


@dataclass(frozen=True)
class PlainName:
    """Fallback: the cleaned, singularized text itself."""

    canonical_key: str
    display_name: str
    modifiers_stripped: bool = False
    fuzzy_matched: bool = False
    corrected_from: str | None = None

    @property
    def attributes(self) -> dict[str, Any]:
        attrs: dict[str, Any] = {}
        if self.modifiers_stripped:
            attrs["modifiers_stripped"] = True
        if self.fuzzy_matched:
            attrs["fuzzy_matched"] = True
        return attrs


NormalizedName = CompoundName | BellPepperName | FamilyName | PlainName

EMPTY_NAME = PlainName("", "")


# =============================================================================
# Pipeline Steps
# =============================================================================


def clean_name(text: str) -> str:
    """Collapse whitespace, drop serving phrases and trailing punctuation, lowercase."""
    cleaned = " ".join(text.split())
    cleaned = strip_serving_phrase(cleaned)
    return cleaned.rstrip(_TRAILING_PUNCTUATION).strip().lower()


def strip_modifiers(text: str) -> str:
    """
    Remove preparation, quality and size descriptors.

    Example:
        "finely chopped fresh parsley" -> "parsley"
    """
    stripped = text
    for pattern in MODIFIER_PATTERNS:
        stripped = pattern.sub(" ", stripped)
    stripped = " ".join(stripped.split())
    return stripped.strip(" ,-")


def detect_bell_pepper(
    text: str,
    *,
    require_bell: bool = False,
    **flags: bool,
) -> BellPepperName | None:
    """
    Check a cleaned name for a bell pepper.

    "red pepper" counts, bare "pepper" does not (it is usually black pepper).
    With require_bell, only names containing "bell" count; text that had
    descriptors removed ("roasted red peppers") must say "bell" to qualify.
    """
    match = BELL_PEPPER_PATTERN.match(text)
    if not match and not require_bell:
        match = COLOR_PEPPER_PATTERN.match(text)
    if not match:
        return None
    color = match.group(1)
    return BellPepperName(color=color.lower() if color else None, **flags)


def _family_or_bell(
    text: str,
    *,
    require_bell: bool = False,
    **flags: bool,
) -> NormalizedName | None:
    bell = detect_bell_pepper(text, require_bell=require_bell, **flags)
    if bell:
        return bell
    rule = match_ingredient_family(text)
    if rule:
        return FamilyName(rule.canonical, rule.display, **flags)
    return None


def _spelling_corrected(text: str, require_bell: bool) -> NormalizedName | None:
    settings = get_settings()
    if not settings.fuzzy_matching_enabled or len(text) < settings.fuzzy_min_length:
        return None

    correction = correct_misspelling(text)
    if correction.was_corrected:
        bell = detect_bell_pepper(
            correction.corrected, require_bell=require_bell, fuzzy_matched=True
        )
        if bell:
            return bell

    match = fuzzy_match_ingredient_family(text)
    if match is None:
        return None

    if match.canonical in FAMILY_CANONICAL_KEYS:
        return FamilyName(
            match.canonical,
            match.display,
            fuzzy_matched=True,
            corrected_from=match.corrected_from,
        )
    return PlainName(
        match.canonical,
        match.display,
        fuzzy_matched=True,
        corrected_from=match.corrected_from,
    )


# =============================================================================
# Normalizer
# =============================================================================


def normalize_ingredient_name(name_or_text: Any) -> NormalizedName:
    """
    Normalize an ingredient name to a canonical key and display name.

    Rules are tried in order and the first hit wins: compound idioms, bell
    peppers, family match, family match after stripping descriptors, spelling
    correction, "a and b" rewriting, and finally a singularized passthrough.

    Examples:
        "shredded sharp cheddar cheese" -> FamilyName("cheddar cheese", "Cheddar cheese")
        "green bell peppers" -> BellPepperName(color="green")
        "salt and pepper to taste" -> CompoundName("salt & pepper", "Salt & pepper")
        "Granny Smith apples" -> PlainName("granny smith apple", "Granny smith apple")

    Never raises; empty or non-string input gives EMPTY_NAME.
    """
    if not name_or_text or not isinstance(name_or_text, str):
        return EMPTY_NAME

    cleaned = clean_name(name_or_text)
    if not cleaned:
        return EMPTY_NAME

    compound = COMPOUND_NORMALIZATIONS.get(cleaned)
    if compound:
        return CompoundName(compound, capitalize_first(compound))

    matched = _family_or_bell(cleaned)
    if matched:
        return matched

    stripped = strip_modifiers(cleaned)
    was_stripped = bool(stripped) and stripped != cleaned
    if was_stripped:
        matched = _family_or_bell(stripped, require_bell=True, modifiers_stripped=True)
        if matched:
            return matched

    base = stripped or cleaned

    corrected = _spelling_corrected(base, require_bell=was_stripped)
    if corrected:
        return corrected

    conjunction = _CONJUNCTION.match(cleaned)
    if conjunction:
        key = f"{conjunction.group(1)} & {conjunction.group(2)}"
        return CompoundName(key, capitalize_first(key))

    singular = singularize(base)
    logger.debug(f"No rule matched {cleaned!r}, using {singular!r}")
    return PlainName(
        singular,
        capitalize_first(singular),
        modifiers_stripped=was_stripped,
    )
