"""Output formatting for parse results."""

from src.output.formatters import (
    format_quantity,
    format_portion,
    format_query,
    format_parse_entry,
    format_parse_line,
    format_result_json
)

__all__ = [
    "format_quantity",
    "format_portion",
    "format_query",
    "format_parse_entry",
    "format_parse_line",
    "format_result_json"
]
