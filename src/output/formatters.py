"""Formatters for parse output (display strings, queries and JSON)."""

import json
import re
from typing import Any, Dict, List, Optional

from src.data_layer.models import ParseResult
from src.parsing.parse_errors import QuantityParseError


def format_quantity(quantity: float) -> str:
    """Format a quantity with at most 3 decimals and no trailing zeros.

    Args:
        quantity: Parsed quantity (e.g., 0.5, 2.0, 0.3333)

    Returns:
        Display string like "0.5", "2" or "0.333"
    """
    text = f"{quantity:.3f}".rstrip("0").rstrip(".")
    return text or "0"


def format_portion(portion: str) -> str:
    """Reformat the leading number of a portion string.

    Args:
        portion: Portion text (e.g., "0.33333 cup")

    Returns:
        Portion with its leading number shortened (e.g., "0.333 cup");
        strings without a leading number are returned unchanged
    """
    match = re.match(r"^([0-9.]+)", portion)
    if not match:
        return portion
    try:
        number = float(match.group(1))
    except ValueError:
        return portion
    return format_quantity(number) + portion[match.end():]


def format_query(result: ParseResult) -> str:
    """Rebuild an entry string (e.g., "0.5 cup blueberries") from a result.

    Parsing the returned string yields the same quantity and unit.
    """
    parts = [format_quantity(result.quantity), result.unit]
    if result.food:
        parts.append(result.food)
    return " ".join(parts)


def format_parse_entry(
    text: str,
    result: Optional[ParseResult] = None,
    error: Optional[QuantityParseError] = None
) -> Dict[str, Any]:
    """Format one input and its outcome as a dictionary.

    Args:
        text: The input as given
        result: ParseResult on success
        error: The NoMatch error on failure

    Returns:
        Dictionary with text, result (or None) and error (or None)
    """
    return {
        "text": text,
        "result": result.to_dict() if result else None,
        "error": error.to_dict() if error else None,
    }


def format_parse_line(text: str, result: Optional[ParseResult]) -> str:
    """Format one input and its outcome as a single text line."""
    if result is None:
        return f"{text} -> no match"
    food = result.food or "(no food)"
    return f"{text} -> {format_quantity(result.quantity)} {result.unit} | {food}"


def format_result_json(entries: List[Dict[str, Any]], indent: int = 2) -> str:
    """Serialize formatted entries to a JSON string."""
    return json.dumps(entries, indent=indent)
