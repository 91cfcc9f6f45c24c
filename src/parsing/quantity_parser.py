"""Parser for free-text food entries such as "1/2 cup blueberries".

Extracts a quantity, a canonical unit and a food name from one string.

PIPELINE:
1. Normalize: lowercase, trim, collapse whitespace
2. Tokenize: locate <quantity> <unit> [of] <food> with two structural
   patterns, tried in order; the first one that matches is used and the
   other is never consulted
   - primary: numeric quantity ("1 1/2", "3/4", "2.5", "100g")
   - fallback: any single word as quantity ("half", "two-thirds", "a")
3. Resolve each token independently:
   - quantity: mixed number -> fraction -> decimal -> quantity word -> 1
   - unit: synonym table, unknown spellings pass through
   - food: lowercased remainder, may be empty

A unit is mandatory. "a banana" has none and produces no match.

DESIGN DECISIONS:
- Quantities are computed as exact Fractions and rounded half-up to
  3 decimals only once, so 1/3 becomes 0.333 and 2/3 becomes 0.667
- A zero denominator ("1/0 cup rice") is a no-match, never inf/nan
- Unrecognised quantity words default to 1 unless ``strict`` is set
- Units are matched as whole words, longest spelling first, so "gallons"
  is never read as "g" and "grapes" never yields a unit
- A period closing an abbreviated unit ("tbsp.", "c.") belongs to the unit,
  not the food
- The numeric pattern is searched across the whole input before any word
  quantity is considered, so "one cup milk and 2 tbsp honey" reads as
  2 tbsp honey. Only one entry is extracted per string
"""

import logging
import math
import re
from dataclasses import dataclass
from fractions import Fraction
from typing import Mapping, Optional

from src.data_layer.models import ParseResult
from src.parsing.lexicons import (
    QUANTITY_WORDS,
    UNIT_SYNONYMS,
    extend_lexicon,
    lookup_quantity_word,
    normalize_unit,
)
from src.parsing.parse_errors import NoMatchError, ParseErrorCode

logger = logging.getLogger(__name__)


# Quantity token shapes, in order of interpretation
_MIXED_RE = re.compile(r"^(\d+)\s+(\d+)/(\d+)$")
_FRACTION_RE = re.compile(r"^(\d+)/(\d+)$")
_DECIMAL_RE = re.compile(r"^\d*\.?\d+$")

_NUMERIC_QUANTITY = r"\d+\s+\d+/\d+|\d+/\d+|\d*\.?\d+"
_WORD_QUANTITY = r"\w+(?:-\w+)*"
_WORD_QUANTITY_RE = re.compile(_WORD_QUANTITY)


@dataclass(frozen=True)
class QuantityTokens:
    """Raw tokens located in the input, before resolution."""

    quantity: str
    unit: str
    food: str
    pattern: str  # "primary" or "fallback"


def round_quantity(value: Fraction) -> float:
    """Round a non-negative quantity half-up to 3 decimal places."""
    thousandths = math.floor(value * 1000 + Fraction(1, 2))
    return float(Fraction(thousandths, 1000))


def is_quantity_word(word: str) -> bool:
    """Return True if ``word`` has the shape the fallback pattern can match."""
    return _WORD_QUANTITY_RE.fullmatch(word.strip().lower()) is not None


def _unit_alternation(spellings) -> str:
    # Longest first so "fl oz" wins over "oz" and "gallons" over "g"
    ordered = sorted((s for s in spellings if s), key=lambda s: (-len(s), s))
    return "|".join(re.escape(spelling) for spelling in ordered)


def _build_pattern(quantity: str, gap: str, units: str) -> "re.Pattern":
    return re.compile(
        r"(?<![\w./-])(?P<quantity>" + quantity + r")" + gap
        + r"(?P<unit>" + units + r")(?!\w)\.?"
        + r"(?:\s+of(?!\w))?"
        + r"\s*(?P<food>.*)$"
    )


class QuantityParser:
    """Parser for food entry strings into ParseResult objects.

    Usage:
        parser = QuantityParser()
        parser.parse("1 1/2 cups flour")   # ParseResult(1.5, "cup", "flour")
        parser.parse("a banana")           # None

    Instances are immutable after construction and safe to share between
    threads.
    """

    def __init__(
        self,
        strict: bool = False,
        unit_synonyms: Optional[Mapping[str, str]] = None,
        quantity_words: Optional[Mapping[str, Fraction]] = None,
    ):
        """Initialize parser with optional lexicon extensions.

        Args:
            strict: Treat unrecognised quantity words as no match instead of 1
            unit_synonyms: Extra unit spellings, synonym -> canonical token
            quantity_words: Extra quantity words, word -> value
        """
        self.strict = strict
        self.unit_synonyms = extend_lexicon(UNIT_SYNONYMS, unit_synonyms)
        self.quantity_words = extend_lexicon(QUANTITY_WORDS, quantity_words)

        units = _unit_alternation(self.unit_synonyms)
        # Whitespace is optional after a number ("100g") but required after a word
        self._patterns = (
            ("primary", _build_pattern(_NUMERIC_QUANTITY, r"\s*", units)),
            ("fallback", _build_pattern(_WORD_QUANTITY, r"\s+", units)),
        )

    def parse(self, text: str) -> Optional[ParseResult]:
        """Parse a food entry, returning None when nothing matches.

        Args:
            text: Raw user input (e.g., "half cup of blueberries")

        Returns:
            ParseResult, or None if no quantity + unit could be located
        """
        try:
            return self.parse_or_raise(text)
        except NoMatchError as e:
            logger.debug("No match for %r: %s", text, e.code.value)
            return None

    def parse_or_raise(self, text: str) -> ParseResult:
        """Parse a food entry, raising NoMatchError when nothing matches.

        Raises:
            NoMatchError: With code EMPTY_INPUT, NO_UNIT_FOUND,
                ZERO_DENOMINATOR or (strict mode) UNKNOWN_QUANTITY_WORD
        """
        if not text or not text.strip():
            raise NoMatchError(text or "", ParseErrorCode.EMPTY_INPUT)

        tokens = self.tokenize(text)
        if tokens is None:
            raise NoMatchError(text, ParseErrorCode.NO_UNIT_FOUND)

        quantity = self.resolve_quantity(tokens.quantity, text)
        result = ParseResult(
            quantity=round_quantity(quantity),
            unit=normalize_unit(tokens.unit, self.unit_synonyms),
            food=self.clean_food(tokens.food),
        )
        logger.debug("Parsed %r via %s pattern: %s", text, tokens.pattern, result)
        return result

    def tokenize(self, text: str) -> Optional[QuantityTokens]:
        """Locate quantity, unit and food tokens without resolving them.

        Returns:
            QuantityTokens from the first pattern that matches, or None
        """
        normalized = re.sub(r"\s+", " ", text).strip().lower()

        for name, pattern in self._patterns:
            match = pattern.search(normalized)
            if match:
                return QuantityTokens(
                    quantity=match.group("quantity"),
                    unit=match.group("unit"),
                    food=match.group("food") or "",
                    pattern=name,
                )
        return None

    def resolve_quantity(self, token: str, text: str = "") -> Fraction:
        """Resolve a quantity token to an exact value.

        Precedence: mixed number, fraction, decimal literal, quantity word,
        then the lenient default of 1.

        Args:
            token: Quantity token (e.g., "1 1/2", "3/4", ".5", "half")
            text: Full input, used for error context

        Raises:
            NoMatchError: On a zero denominator, or an unknown word in
                strict mode
        """
        token = token.strip()

        mixed = _MIXED_RE.match(token)
        if mixed:
            whole, numerator, denominator = (int(g) for g in mixed.groups())
            return whole + self._fraction(numerator, denominator, token, text)

        fraction = _FRACTION_RE.match(token)
        if fraction:
            numerator, denominator = (int(g) for g in fraction.groups())
            return self._fraction(numerator, denominator, token, text)

        if _DECIMAL_RE.match(token):
            return Fraction(token)

        value = lookup_quantity_word(token, self.quantity_words)
        if value is not None:
            return value

        if self.strict:
            raise NoMatchError(text, ParseErrorCode.UNKNOWN_QUANTITY_WORD, token=token)
        return Fraction(1)

    @staticmethod
    def clean_food(food: str) -> str:
        """Lowercase and trim the food text, collapsing inner whitespace."""
        return re.sub(r"\s+", " ", food).strip().lower()

    @staticmethod
    def _fraction(numerator: int, denominator: int, token: str, text: str) -> Fraction:
        if denominator == 0:
            raise NoMatchError(text, ParseErrorCode.ZERO_DENOMINATOR, token=token)
        return Fraction(numerator, denominator)


_default_parser = QuantityParser()
_strict_parser = QuantityParser(strict=True)


def parse(text: str, strict: bool = False) -> Optional[ParseResult]:
    """Parse with the built-in lexicons. Returns None on no match."""
    return (_strict_parser if strict else _default_parser).parse(text)


def parse_or_raise(text: str, strict: bool = False) -> ParseResult:
    """Parse with the built-in lexicons. Raises NoMatchError on no match."""
    return (_strict_parser if strict else _default_parser).parse_or_raise(text)
