#!/usr/bin/env python3
"""Command-line interface for the food entry parser."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from src.data_layer.exceptions import ParserConfigError
from src.data_layer.parser_config import load_parser
from src.output.formatters import (
    format_parse_entry,
    format_parse_line,
    format_result_json,
)
from src.parsing.parse_errors import NoMatchError


EXIT_CONFIG_ERROR = 1
EXIT_NO_MATCH = 2

HINT = 'Try a format like "half cup of blueberries" or "1 tbsp peanut butter"'


def read_inputs(texts: List[str]) -> List[str]:
    """Return the positional texts, or non-blank stdin lines when none are given."""
    if texts:
        return texts
    return [line.strip() for line in sys.stdin if line.strip()]


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Parse food entries like '1/2 cup blueberries' into quantity, unit and food"
    )
    parser.add_argument(
        "texts",
        nargs="*",
        help="Entries to parse (default: read one entry per line from stdin)"
    )
    parser.add_argument(
        "--config",
        type=str,
        default="config/parser_config.yaml",
        help="Path to parser config YAML file (default: config/parser_config.yaml, optional)"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject unrecognised quantity words instead of reading them as 1"
    )
    parser.add_argument(
        "--output",
        type=str,
        choices=["text", "json"],
        default="text",
        help="Output format: text (default) or json"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log parser decisions to stderr"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )

    config_path = Path(args.config)
    try:
        if config_path.exists():
            print(f"Loading parser config from {config_path}...", file=sys.stderr)
        quantity_parser = load_parser(str(config_path), strict=True if args.strict else None)
    except ParserConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_CONFIG_ERROR)

    texts = read_inputs(args.texts)
    if not texts:
        print("Error: nothing to parse", file=sys.stderr)
        sys.exit(EXIT_NO_MATCH)

    outcomes = []
    failures = 0
    for text in texts:
        try:
            outcomes.append((text, quantity_parser.parse_or_raise(text), None))
        except NoMatchError as e:
            failures += 1
            outcomes.append((text, None, e))

    if args.output == "json":
        entries = [format_parse_entry(text, result, error) for text, result, error in outcomes]
        print(format_result_json(entries))
    else:
        for text, result, _ in outcomes:
            print(format_parse_line(text, result))

    if failures:
        print(f"\n⚠️  {failures} of {len(texts)} entries could not be parsed.", file=sys.stderr)
        print(f"   {HINT}", file=sys.stderr)
        sys.exit(EXIT_NO_MATCH)


if __name__ == "__main__":
    main()
