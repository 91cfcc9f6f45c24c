"""Data models for the food entry parser."""
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any, Dict


@dataclass(frozen=True)
class ParseResult:
    """Represents one parsed food entry (e.g., "1/2 cup blueberries")."""

    quantity: float  # Amount, rounded to 3 decimals (e.g., 0.5, 0.333)
    unit: str  # Canonical unit (e.g., "cup", "tbsp", "fl oz")
    food: str  # Lowercased food name, may be empty ("2 cups" -> "")

    def to_dict(self) -> Dict[str, Any]:
        return {"quantity": self.quantity, "unit": self.unit, "food": self.food}


@dataclass
class ParserConfig:
    """Represents parser settings loaded from YAML."""

    # Reject unrecognised quantity words instead of defaulting them to 1
    strict: bool = False

    # Extra spellings layered over the built-in lexicons
    unit_synonyms: Dict[str, str] = field(default_factory=dict)  # {"mug": "cup"}
    quantity_words: Dict[str, Fraction] = field(default_factory=dict)  # {"dozen": Fraction(12)}
