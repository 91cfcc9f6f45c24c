"""Parser config loader for loading parser settings from YAML."""
import yaml
from fractions import Fraction
from pathlib import Path
from typing import Any, Dict, Optional

from src.data_layer.exceptions import ParserConfigError
from src.data_layer.models import ParserConfig
from src.parsing.lexicons import CANONICAL_UNITS
from src.parsing.quantity_parser import QuantityParser, is_quantity_word


class ParserConfigLoader:
    """Loader for parser configuration from YAML."""

    def __init__(self, yaml_path: str):
        """Initialize parser config loader from YAML file.

        Args:
            yaml_path: Path to YAML file containing a ``parser`` section
        """
        self.yaml_path = Path(yaml_path)

    def load(self) -> ParserConfig:
        """Load parser config from YAML file.

        A file without a ``parser`` section yields the defaults.

        Returns:
            ParserConfig object

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            ParserConfigError: If any value is invalid
        """
        with open(self.yaml_path, "r") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ParserConfigError(str(self.yaml_path), f"not valid YAML ({e})") from e

        if not isinstance(data, dict):
            raise self._error("top level must be a mapping")

        section = data.get("parser") or {}
        if not isinstance(section, dict):
            raise self._error("'parser' must be a mapping")

        strict = section.get("strict", False)
        if not isinstance(strict, bool):
            raise self._error(f"'strict' must be true or false, got {strict!r}")

        return ParserConfig(
            strict=strict,
            unit_synonyms=self._load_unit_synonyms(section.get("unit_synonyms")),
            quantity_words=self._load_quantity_words(section.get("quantity_words")),
        )

    def _load_unit_synonyms(self, raw: Any) -> Dict[str, str]:
        synonyms: Dict[str, str] = {}
        for synonym, canonical in self._mapping(raw, "unit_synonyms").items():
            if not " ".join(str(synonym).split()):
                raise self._error("unit synonym keys must not be empty")
            canonical = str(canonical).strip().lower()
            # Extra spellings may only point at existing canonical units
            if canonical not in CANONICAL_UNITS:
                raise self._error(
                    f"unit synonym '{synonym}' maps to unknown unit '{canonical}' "
                    f"(expected one of: {', '.join(CANONICAL_UNITS)})"
                )
            synonyms[str(synonym)] = canonical
        return synonyms

    def _load_quantity_words(self, raw: Any) -> Dict[str, Fraction]:
        words: Dict[str, Fraction] = {}
        for word, value in self._mapping(raw, "quantity_words").items():
            # Keys must be a single (optionally hyphenated) word to be matchable
            if not is_quantity_word(str(word)):
                raise self._error(
                    f"quantity word '{word}' must be a single word, e.g. 'two-and-a-half'"
                )
            if isinstance(value, bool):
                raise self._error(f"quantity word '{word}' has non-numeric value {value!r}")
            try:
                # str() keeps 0.1 as 1/10 rather than its binary float expansion
                number = Fraction(str(value).strip())
            except (ValueError, ZeroDivisionError):
                raise self._error(f"quantity word '{word}' has non-numeric value {value!r}")
            if number < 0:
                raise self._error(f"quantity word '{word}' must not be negative")
            words[str(word)] = number
        return words

    def _mapping(self, raw: Any, key: str) -> Dict[Any, Any]:
        if raw is None:
            return {}
        if not isinstance(raw, dict):
            raise self._error(f"'{key}' must be a mapping")
        return raw

    def _error(self, detail: str) -> ParserConfigError:
        return ParserConfigError(str(self.yaml_path), detail)


def build_parser(config: Optional[ParserConfig] = None, strict: Optional[bool] = None) -> QuantityParser:
    """Create a QuantityParser from config.

    Args:
        config: Loaded ParserConfig (defaults when None)
        strict: Overrides ``config.strict`` when given

    Returns:
        QuantityParser with the configured lexicon extensions
    """
    config = config or ParserConfig()
    return QuantityParser(
        strict=config.strict if strict is None else strict,
        unit_synonyms=config.unit_synonyms,
        quantity_words=config.quantity_words,
    )


def load_parser(yaml_path: Optional[str] = None, strict: Optional[bool] = None) -> QuantityParser:
    """Build a parser from a YAML file, falling back to defaults if it is absent."""
    config = None
    if yaml_path and Path(yaml_path).exists():
        config = ParserConfigLoader(yaml_path).load()
    return build_parser(config, strict=strict)
