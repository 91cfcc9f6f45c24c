"""Tests for the quantity word and unit synonym lexicons."""
import pytest
from fractions import Fraction

from src.parsing.lexicons import (
    CANONICAL_UNITS,
    QUANTITY_WORDS,
    UNIT_SYNONYMS,
    extend_lexicon,
    lookup_quantity_word,
    normalize_unit,
    synonyms_by_unit,
)


class TestUnitSynonyms:
    """Tests for the unit synonym table."""

    @pytest.mark.parametrize("canonical,spellings", [
        ("cup", ["cup", "cups", "c"]),
        ("tbsp", ["tablespoon", "tablespoons", "tbsp", "tbsps", "tb"]),
        ("tsp", ["teaspoon", "teaspoons", "tsp", "tsps", "t"]),
        ("oz", ["ounce", "ounces", "oz"]),
        ("g", ["gram", "grams", "g"]),
        ("kg", ["kilogram", "kilograms", "kg", "kgs"]),
        ("lb", ["pound", "pounds", "lb", "lbs"]),
        ("mg", ["milligram", "mg"]),
        ("ml", ["milliliter", "milliliters", "millilitre", "ml", "cc"]),
        ("l", ["liter", "liters", "litre", "l"]),
        ("fl oz", ["fluid ounce", "fl oz"]),
        ("pt", ["pint", "pints", "pt"]),
        ("qt", ["quart", "quarts", "qt"]),
        ("gal", ["gallon", "gallons", "gal"]),
        ("slice", ["slice", "slices"]),
        ("piece", ["piece", "pieces", "pc"]),
        ("clove", ["clove", "cloves"]),
        ("pinch", ["pinch", "pinches"]),
        ("dash", ["dash", "dashes"]),
    ])
    def test_required_spellings_present(self, canonical, spellings):
        """Test every documented spelling maps to its canonical unit."""
        for spelling in spellings:
            assert UNIT_SYNONYMS[spelling] == canonical

    def test_all_targets_are_canonical(self):
        """Test the table only produces canonical tokens."""
        assert set(UNIT_SYNONYMS.values()) == set(CANONICAL_UNITS)

    def test_table_is_read_only(self):
        """Test the table cannot be mutated at runtime."""
        with pytest.raises(TypeError):
            UNIT_SYNONYMS["mug"] = "cup"


class TestQuantityWords:
    """Tests for the quantity word table."""

    def test_fraction_words(self):
        """Test single fraction words."""
        assert QUANTITY_WORDS["half"] == Fraction(1, 2)
        assert QUANTITY_WORDS["third"] == Fraction(1, 3)
        assert QUANTITY_WORDS["fourth"] == QUANTITY_WORDS["quarter"] == Fraction(1, 4)
        assert QUANTITY_WORDS["seventh"] == Fraction(1, 7)
        assert QUANTITY_WORDS["eleventh"] == Fraction(1, 11)

    def test_plurals_match_singulars(self):
        """Test plural fraction words have the singular value."""
        assert QUANTITY_WORDS["halves"] == QUANTITY_WORDS["half"]
        assert QUANTITY_WORDS["thirds"] == QUANTITY_WORDS["third"]
        assert QUANTITY_WORDS["twelfths"] == QUANTITY_WORDS["twelfth"]

    def test_cardinals_and_articles(self):
        """Test number words and articles."""
        assert QUANTITY_WORDS["one"] == 1
        assert QUANTITY_WORDS["ten"] == 10
        assert QUANTITY_WORDS["a"] == QUANTITY_WORDS["an"] == 1

    def test_compound_words(self):
        """Test hyphenated compound fractions."""
        assert QUANTITY_WORDS["three-quarters"] == Fraction(3, 4)
        assert QUANTITY_WORDS["two-thirds"] == Fraction(2, 3)
        assert QUANTITY_WORDS["seven-eighths"] == Fraction(7, 8)

    def test_table_is_read_only(self):
        """Test the table cannot be mutated at runtime."""
        with pytest.raises(TypeError):
            QUANTITY_WORDS["dozen"] = Fraction(12)


class TestLookups:
    """Tests for lookup helpers."""

    def test_normalize_unit_known(self):
        """Test known spellings, case and spacing are normalized."""
        assert normalize_unit("Tablespoons") == "tbsp"
        assert normalize_unit("  Fl   Oz ") == "fl oz"

    def test_normalize_unit_passes_unknown_through(self):
        """Test unknown units are returned lowercased instead of failing."""
        assert normalize_unit("Handful") == "handful"

    def test_lookup_quantity_word(self):
        """Test case-insensitive word lookup."""
        assert lookup_quantity_word("HALF") == Fraction(1, 2)
        assert lookup_quantity_word("several") is None

    def test_extend_lexicon_does_not_mutate_base(self):
        """Test extending returns a new table."""
        extended = extend_lexicon(UNIT_SYNONYMS, {"Mug": "cup"})
        assert extended["mug"] == "cup"
        assert "mug" not in UNIT_SYNONYMS
        with pytest.raises(TypeError):
            extended["bowl"] = "cup"

    def test_synonyms_by_unit(self):
        """Test spellings are grouped by canonical unit."""
        grouped = synonyms_by_unit()
        assert set(grouped) == set(CANONICAL_UNITS)
        assert sorted(grouped["cup"]) == ["c", "cup", "cups"]
