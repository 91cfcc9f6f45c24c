"""Parsing layer for free-text food entries."""

from src.parsing.lexicons import (
    CANONICAL_UNITS,
    QUANTITY_WORDS,
    UNIT_SYNONYMS,
    extend_lexicon,
    lookup_quantity_word,
    normalize_unit,
    synonyms_by_unit,
)

from src.parsing.parse_errors import (
    NoMatchError,
    ParseErrorCode,
    QuantityParseError,
)

from src.parsing.quantity_parser import (
    QuantityParser,
    QuantityTokens,
    is_quantity_word,
    parse,
    parse_or_raise,
    round_quantity,
)

__all__ = [
    # Lexicons
    "CANONICAL_UNITS",
    "QUANTITY_WORDS",
    "UNIT_SYNONYMS",
    "extend_lexicon",
    "lookup_quantity_word",
    "normalize_unit",
    "synonyms_by_unit",
    # Error types
    "NoMatchError",
    "ParseErrorCode",
    "QuantityParseError",
    # Parser
    "QuantityParser",
    "QuantityTokens",
    "is_quantity_word",
    "parse",
    "parse_or_raise",
    "round_quantity",
]
