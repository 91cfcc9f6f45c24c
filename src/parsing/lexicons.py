"""Static lexicons for quantity words and unit synonyms.

Both tables are built once at import and exposed read-only. Parser instances
that need extra entries (see ``ParserConfig``) layer them over these tables
with ``extend_lexicon`` instead of mutating them.

DESIGN DECISIONS:
- Quantity values are stored as ``Fraction`` so 1/3 stays exact until the
  parser rounds the final value
- Unknown units pass through lowercased (``normalize_unit`` never fails)
- Multi-word synonyms ("fl oz", "fluid ounce") use a single space; callers
  collapse whitespace before lookup
"""

import re
from fractions import Fraction
from types import MappingProxyType
from typing import Dict, Mapping, Optional


# Canonical unit tokens. Unit resolution always lands in this set unless the
# token is unknown and passed through.
CANONICAL_UNITS = (
    "cup", "tbsp", "tsp", "oz", "g", "kg", "mg", "lb",
    "ml", "l", "fl oz", "pt", "qt", "gal",
    "slice", "piece", "clove", "pinch", "dash",
)

_UNIT_SPELLINGS: Dict[str, tuple] = {
    "cup": ("cup", "cups", "c"),
    "tbsp": ("tablespoon", "tablespoons", "tbsp", "tbsps", "tb"),
    "tsp": ("teaspoon", "teaspoons", "tsp", "tsps", "t"),
    "oz": ("ounce", "ounces", "oz"),
    "g": ("gram", "grams", "g"),
    "kg": ("kilogram", "kilograms", "kg", "kgs"),
    "mg": ("milligram", "milligrams", "mg"),
    "lb": ("pound", "pounds", "lb", "lbs"),
    "ml": ("milliliter", "milliliters", "millilitre", "millilitres", "ml", "cc"),
    "l": ("liter", "liters", "litre", "litres", "l"),
    "fl oz": ("fluid ounce", "fluid ounces", "fl oz"),
    "pt": ("pint", "pints", "pt"),
    "qt": ("quart", "quarts", "qt"),
    "gal": ("gallon", "gallons", "gal"),
    "slice": ("slice", "slices"),
    "piece": ("piece", "pieces", "pc"),
    "clove": ("clove", "cloves"),
    "pinch": ("pinch", "pinches"),
    "dash": ("dash", "dashes"),
}

UNIT_SYNONYMS: Mapping[str, str] = MappingProxyType({
    spelling: canonical
    for canonical, spellings in _UNIT_SPELLINGS.items()
    for spelling in spellings
})


_FRACTION_WORDS = {
    "half": Fraction(1, 2),
    "third": Fraction(1, 3),
    "fourth": Fraction(1, 4),
    "quarter": Fraction(1, 4),
    "fifth": Fraction(1, 5),
    "sixth": Fraction(1, 6),
    "seventh": Fraction(1, 7),
    "eighth": Fraction(1, 8),
    "ninth": Fraction(1, 9),
    "tenth": Fraction(1, 10),
    "eleventh": Fraction(1, 11),
    "twelfth": Fraction(1, 12),
}

# Plural forms map to the same value as the singular ("halves" = 1/2)
_FRACTION_PLURALS = {
    "halves": "half",
    "thirds": "third",
    "fourths": "fourth",
    "quarters": "quarter",
    "fifths": "fifth",
    "sixths": "sixth",
    "sevenths": "seventh",
    "eighths": "eighth",
    "ninths": "ninth",
    "tenths": "tenth",
    "elevenths": "eleventh",
    "twelfths": "twelfth",
}

_CARDINAL_WORDS = {
    "one": 1, "two": 2, "three": 3, "four": 4, "five": 5,
    "six": 6, "seven": 7, "eight": 8, "nine": 9, "ten": 10,
    "a": 1, "an": 1,
}

_COMPOUND_WORDS = {
    "three-quarters": Fraction(3, 4),
    "three-fourths": Fraction(3, 4),
    "two-thirds": Fraction(2, 3),
    "three-fifths": Fraction(3, 5),
    "three-eighths": Fraction(3, 8),
    "two-fifths": Fraction(2, 5),
    "five-eighths": Fraction(5, 8),
    "seven-eighths": Fraction(7, 8),
}


def _build_quantity_words() -> Dict[str, Fraction]:
    words: Dict[str, Fraction] = dict(_FRACTION_WORDS)
    for plural, singular in _FRACTION_PLURALS.items():
        words[plural] = _FRACTION_WORDS[singular]
    words.update({word: Fraction(value) for word, value in _CARDINAL_WORDS.items()})
    words.update(_COMPOUND_WORDS)
    return words


QUANTITY_WORDS: Mapping[str, Fraction] = MappingProxyType(_build_quantity_words())


def _clean_token(token: str) -> str:
    return re.sub(r"\s+", " ", token).strip().lower()


def normalize_unit(token: str, synonyms: Mapping[str, str] = UNIT_SYNONYMS) -> str:
    """Map a unit spelling to its canonical token.

    Args:
        token: Raw unit text (e.g., "Tablespoons", "fl  oz")
        synonyms: Synonym table to resolve against

    Returns:
        Canonical token (e.g., "tbsp"), or the lowercased token itself
        when the spelling is unknown
    """
    cleaned = _clean_token(token)
    return synonyms.get(cleaned, cleaned)


def lookup_quantity_word(
    word: str, words: Mapping[str, Fraction] = QUANTITY_WORDS
) -> Optional[Fraction]:
    """Return the value of a spelled-out quantity, or None if unknown."""
    return words.get(_clean_token(word))


def extend_lexicon(base: Mapping, extra: Optional[Mapping] = None) -> Mapping:
    """Return a new read-only table with ``extra`` entries layered over ``base``.

    Keys of ``extra`` are normalized the same way lookups are, so a
    configured "Fl  Oz" matches input "fl oz".
    """
    merged = dict(base)
    for key, value in (extra or {}).items():
        merged[_clean_token(key)] = value
    return MappingProxyType(merged)


def synonyms_by_unit(synonyms: Mapping[str, str] = UNIT_SYNONYMS) -> Dict[str, list]:
    """Group synonym spellings under their canonical unit token."""
    grouped: Dict[str, list] = {unit: [] for unit in CANONICAL_UNITS}
    for spelling, canonical in synonyms.items():
        grouped.setdefault(canonical, []).append(spelling)
    return grouped
