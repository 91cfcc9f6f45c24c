"""Structured error types for the quantity parser.

The parser has a single failure outcome, NoMatch. ``parse()`` reports it as
``None``; ``parse_or_raise()`` raises ``NoMatchError`` so callers that need
to know *why* the text was rejected can inspect ``code`` and ``context``.

Malformed quantities and unknown units never raise: the parser degrades to
quantity 1 and unit pass-through instead. The only exceptions are a zero
denominator and, in strict mode, an unrecognised quantity word.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ParseErrorCode(Enum):
    """Reasons a string produced no match.

    Codes are string values for easy serialization in API responses.
    """

    EMPTY_INPUT = "EMPTY_INPUT"
    NO_UNIT_FOUND = "NO_UNIT_FOUND"
    ZERO_DENOMINATOR = "ZERO_DENOMINATOR"
    UNKNOWN_QUANTITY_WORD = "UNKNOWN_QUANTITY_WORD"


class QuantityParseError(Exception):
    """Base exception for parser errors.

    Attributes:
        code: ParseErrorCode identifying the failure
        message: Human-readable error description
        context: Dictionary of relevant error context (input text, token)
    """

    def __init__(
        self,
        code: ParseErrorCode,
        message: str,
        context: Optional[Dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.context = context or {}
        super().__init__(f"[{code.value}] {message}")

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"code={self.code!r}, "
            f"message={self.message!r}, "
            f"context={self.context!r})"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for API responses."""
        return {
            "error_code": self.code.value,
            "message": self.message,
            "context": self.context,
        }


class NoMatchError(QuantityParseError):
    """Raised when a string cannot be read as quantity + unit + food.

    Context includes:
        - text: The input as given
        - token: The offending quantity token (zero denominator, unknown word)
    """

    _MESSAGES = {
        ParseErrorCode.EMPTY_INPUT: "Input is empty",
        ParseErrorCode.NO_UNIT_FOUND: "No recognised unit found in '{text}'",
        ParseErrorCode.ZERO_DENOMINATOR: "Quantity '{token}' has a zero denominator",
        ParseErrorCode.UNKNOWN_QUANTITY_WORD: "Quantity word '{token}' is not recognised",
    }

    def __init__(
        self,
        text: str,
        code: ParseErrorCode = ParseErrorCode.NO_UNIT_FOUND,
        token: Optional[str] = None
    ):
        context: Dict[str, Any] = {"text": text}
        if token is not None:
            context["token"] = token

        message = self._MESSAGES[code].format(text=text, token=token)
        super().__init__(code=code, message=message, context=context)

        self.text = text
        self.token = token
