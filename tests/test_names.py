"""Tests for ingredient name normalization."""

import pytest

from shopping_aggregator.normalize.names import (
    EMPTY_NAME,
    BellPepperName,
    CompoundName,
    FamilyName,
    PlainName,
    detect_bell_pepper,
    normalize_ingredient_name,
    strip_modifiers,
)
from shopping_aggregator.normalize.patterns import (
    COMPOUND_NORMALIZATIONS,
    INGREDIENT_FAMILIES,
    singularize,
)


class TestCompoundPhrases:
    """Tests for the compound phrase table."""

    @pytest.mark.parametrize(
        "text",
        ["salt and pepper", "salt & pepper", "Salt n Pepper", "salt and black pepper"],
    )
    def test_salt_and_pepper(self, text):
        """Test that every salt-and-pepper idiom collapses to one key."""
        result = normalize_ingredient_name(text)
        assert isinstance(result, CompoundName)
        assert result.canonical_key == "salt & pepper"
        assert result.display_name == "Salt & pepper"
        assert result.attributes == {"compound": True}

    def test_serving_phrase_is_ignored(self):
        """Test "salt and pepper to taste"."""
        assert normalize_ingredient_name("salt and pepper to taste").canonical_key == "salt & pepper"

    def test_mac_and_cheese(self):
        """Test a compound that would otherwise hit a family rule."""
        assert normalize_ingredient_name("mac and cheese").canonical_key == "macaroni & cheese"


class TestBellPeppers:
    """Tests for bell pepper detection."""

    def test_colored_bell_pepper(self):
        """Test that the color is carried outside the key."""
        result = normalize_ingredient_name("red bell pepper")
        assert isinstance(result, BellPepperName)
        assert result.canonical_key == "bell pepper"
        assert result.display_name == "Bell peppers"
        assert result.color == "red"
        assert result.attributes == {"is_bell_pepper": True, "color": "red"}

    def test_plural_and_uncolored(self):
        """Test plural forms and a bell pepper without a color."""
        assert normalize_ingredient_name("Green Bell Peppers").color == "green"
        result = normalize_ingredient_name("bell peppers")
        assert isinstance(result, BellPepperName)
        assert result.color is None

    def test_color_pepper_without_bell(self):
        """Test "yellow pepper" and "orange peppers"."""
        assert normalize_ingredient_name("yellow pepper").color == "yellow"
        assert normalize_ingredient_name("orange peppers").color == "orange"

    def test_descriptors_before_bell_pepper(self):
        """Test that descriptors are stripped before a "bell" name is retried."""
        result = normalize_ingredient_name("large red bell pepper")
        assert isinstance(result, BellPepperName)
        assert result.color == "red"
        assert result.modifiers_stripped

        assert isinstance(normalize_ingredient_name("diced green bell peppers"), BellPepperName)

    @pytest.mark.parametrize(
        "text",
        ["roasted red peppers", "dried red peppers", "frozen red pepper", "large red pepper"],
    )
    def test_processed_color_peppers_are_not_bell_peppers(self, text):
        """Test that a color pepper behind a descriptor needs "bell" to qualify."""
        result = normalize_ingredient_name(text)
        assert not isinstance(result, BellPepperName)
        assert result.canonical_key != "bell pepper"

    def test_roasted_red_pepper_family(self):
        """Test that jarred roasted peppers have their own key."""
        assert normalize_ingredient_name("roasted red peppers").canonical_key == "roasted red pepper"
        assert (
            normalize_ingredient_name("fire-roasted red peppers").canonical_key
            == "roasted red pepper"
        )

    @pytest.mark.parametrize(
        "text",
        [
            "pepper",
            "black pepper",
            "ground black pepper",
            "cayenne pepper",
            "jalapeño pepper",
            "red pepper flakes",
            "white pepper",
        ],
    )
    def test_other_peppers_are_not_bell_peppers(self, text):
        """Test that ambiguous or hot peppers never become bell peppers."""
        result = normalize_ingredient_name(text)
        assert not isinstance(result, BellPepperName)
        assert result.canonical_key != "bell pepper"

    def test_detect_bell_pepper_directly(self):
        """Test the detector on cleaned text, with flags passed through."""
        result = detect_bell_pepper("orange bell peppers", modifiers_stripped=True)
        assert result == BellPepperName(color="orange", modifiers_stripped=True)
        assert detect_bell_pepper("pepper") is None
        assert detect_bell_pepper("hot pepper") is None

    def test_black_pepper_family(self):
        """Test that ground black pepper joins the black pepper family."""
        assert normalize_ingredient_name("ground black pepper").canonical_key == "black pepper"


class TestFamilyMatching:
    """Tests for ingredient family collapsing."""

    @pytest.mark.parametrize("text", ["sharp cheddar cheese", "mild cheddar", "cheddar"])
    def test_cheddar_family(self, text):
        """Test that cheddar variants share one key."""
        result = normalize_ingredient_name(text)
        assert isinstance(result, FamilyName)
        assert result.canonical_key == "cheddar cheese"
        assert result.display_name == "Cheddar cheese"
        assert result.attributes == {"family_matched": True}

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("red onion", "red onion"),
            ("onion powder", "onion powder"),
            ("green onions", "green onion"),
            ("yellow onions", "onion"),
            ("egg whites", "egg white"),
            ("large eggs", "egg"),
            ("tomato paste", "tomato paste"),
            ("roma tomatoes", "tomato"),
            ("dried basil", "dried basil"),
            ("fresh basil", "basil"),
            ("peanut butter", "peanut butter"),
            ("unsalted butter", "butter"),
            ("garlic powder", "garlic powder"),
            ("cloves of garlic", "garlic"),
            ("lemon juice", "lemon juice"),
            ("lemons", "lemon"),
            ("coconut milk", "coconut milk"),
            ("whole milk", "milk"),
            ("sweet potatoes", "sweet potato"),
            ("russet potatoes", "potato"),
        ],
    )
    def test_specific_before_generic(self, text, expected):
        """Test that specific variants are not absorbed by generic siblings."""
        assert normalize_ingredient_name(text).canonical_key == expected

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("butter lettuce", "lettuce"),
            ("butternut squash", "butternut squash"),
            ("swiss chard", "swiss chard"),
            ("spaghetti squash", "spaghetti squash"),
            ("cornstarch", "cornstarch"),
            ("eggplant", "eggplant"),
            ("chickpeas", "chickpeas"),
            ("milk chocolate chips", "chocolate chips"),
        ],
    )
    def test_look_alike_words(self, text, expected):
        """Test names that contain another family's word."""
        assert normalize_ingredient_name(text).canonical_key == expected

    def test_whole_string_rules(self):
        """Test rules that only fire when the rule word is the whole name."""
        assert normalize_ingredient_name("salt").canonical_key == "salt"
        assert normalize_ingredient_name("flour").canonical_key == "all-purpose flour"
        assert normalize_ingredient_name("sugar").canonical_key == "sugar"
        assert normalize_ingredient_name("rice").canonical_key == "white rice"
        assert normalize_ingredient_name("kosher salt").canonical_key == "salt"

    def test_modifiers_stripped_flag(self):
        """Test that a family reached after stripping is flagged."""
        result = normalize_ingredient_name("finely chopped fresh cilantro")
        assert result.canonical_key == "cilantro"
        assert not result.modifiers_stripped

        result = normalize_ingredient_name("thinly sliced leeks")
        assert isinstance(result, PlainName)
        assert result.canonical_key == "leek"
        assert result.modifiers_stripped


class TestFixedPoint:
    """The canonical key survives a round trip through its display name."""

    @pytest.mark.parametrize(
        "rule", INGREDIENT_FAMILIES, ids=lambda rule: rule.canonical
    )
    def test_family_display_names(self, rule):
        """Test every family display name re-derives its own key."""
        assert normalize_ingredient_name(rule.display).canonical_key == rule.canonical

    @pytest.mark.parametrize("canonical", sorted(set(COMPOUND_NORMALIZATIONS.values())))
    def test_compound_display_names(self, canonical):
        """Test every compound display name re-derives its own key."""
        first = normalize_ingredient_name(canonical)
        assert normalize_ingredient_name(first.display_name).canonical_key == canonical

    @pytest.mark.parametrize(
        "text",
        [
            "Granny Smith apples",
            "berries",
            "radishes",
            "red bell peppers",
            "apples and oranges",
            "2% milk",
            "boneless skinless chicken thighs",
            "chiken breast",
        ],
    )
    def test_arbitrary_names(self, text):
        """Test the round trip for fallback, conjunction and corrected names."""
        first = normalize_ingredient_name(text)
        assert normalize_ingredient_name(first.display_name).canonical_key == first.canonical_key


class TestConjunctionAndFallback:
    """Tests for "a and b" rewriting and the singularized passthrough."""

    def test_conjunction_rewrite(self):
        """Test that two short words joined by "and" become "a & b"."""
        result = normalize_ingredient_name("apples and oranges")
        assert isinstance(result, CompoundName)
        assert result.canonical_key == "apples & oranges"

    def test_family_wins_over_conjunction(self):
        """Test that the conjunction rule only fires when nothing else matched."""
        assert normalize_ingredient_name("apples and honey").canonical_key == "honey"

    def test_fallback_singularizes(self):
        """Test the fallback passthrough."""
        result = normalize_ingredient_name("Granny Smith apples")
        assert isinstance(result, PlainName)
        assert result.canonical_key == "granny smith apple"
        assert result.display_name == "Granny smith apple"
        assert result.attributes == {}

    def test_trailing_punctuation(self):
        """Test that trailing punctuation and extra spaces are cleaned."""
        assert normalize_ingredient_name("  dragon   fruits. ").canonical_key == "dragon fruit"

    @pytest.mark.parametrize("value", ["", "   ", None, 42, ["salt"]])
    def test_empty_or_non_string(self, value):
        """Test that unusable input gives the empty name."""
        assert normalize_ingredient_name(value) == EMPTY_NAME


class TestSingularize:
    """Tests for the plural fallback rules."""

    @pytest.mark.parametrize(
        ("plural", "singular"),
        [
            ("tomatoes", "tomato"),
            ("leaves", "leaf"),
            ("berries", "berry"),
            ("radishes", "radish"),
            ("peaches", "peach"),
            ("boxes", "box"),
            ("glasses", "glass"),
            ("apples", "apple"),
            ("pies", "pie"),
            ("grass", "grass"),
            ("asparagus", "asparagus"),
            ("hummus", "hummus"),
            ("bus", "bus"),
            ("fresh figs", "fresh fig"),
        ],
    )
    def test_rules(self, plural, singular):
        """Test irregular, suffix and invariant cases."""
        assert singularize(plural) == singular


class TestStripModifiers:
    """Tests for strip_modifiers function."""

    def test_strips_descriptors(self):
        """Test preparation, size and quality words."""
        assert strip_modifiers("finely chopped fresh parsley") == "parsley"
        assert strip_modifiers("large organic carrots") == "carrots"
        assert strip_modifiers("boneless, skinless thighs") == "thighs"

    def test_only_descriptors(self):
        """Test that a name made only of descriptors strips to nothing."""
        assert strip_modifiers("fresh") == ""
