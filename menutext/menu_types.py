# menutext/menu_types.py
"""
Menu Types: shared value types for the cleaning and extraction stages.

- Document: immutable snapshot of raw lines passed between cleaning passes.
- MealPeriod: lunch / dinner (+ breakfast when breakfast tracking is on).
- MenuItem: one structured menu record produced by the item parser.
- ParseResult / MenuResult: per-document outputs of the parser and pipeline.
- MalformedItemError: a buffered item block that could not yield a price.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Sequence, Tuple


Document = Tuple[str, ...]


class MealPeriod(str, Enum):
    LUNCH = "lunch"
    DINNER = "dinner"
    BREAKFAST = "breakfast"

    @property
    def heading(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class MenuItem:
    name: str
    description: str
    price: Decimal
    meal: MealPeriod = MealPeriod.LUNCH

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "price": str(self.price),
            "meal": self.meal.value,
        }


class MalformedItemError(Exception):
    """A buffered item block whose first line carries no readable price."""

    def __init__(self, reason: str, lines: Sequence[str] = ()):
        self.reason = reason
        self.lines: Tuple[str, ...] = tuple(lines)
        first = self.lines[0].strip() if self.lines else ""
        super().__init__(f"{reason}: {first!r}")

    def to_dict(self) -> Dict[str, Any]:
        return {"reason": self.reason, "lines": list(self.lines)}


@dataclass
class ParseResult:
    items: List[MenuItem] = field(default_factory=list)
    defects: List[MalformedItemError] = field(default_factory=list)


@dataclass
class MenuResult:
    """Everything the pipeline produces for one source document."""
    doc_id: str
    clean_text: str
    items: List[MenuItem]
    defects: List[MalformedItemError]
    formatted: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "doc_id": self.doc_id,
            "clean_text": self.clean_text,
            "items": [it.to_dict() for it in self.items],
            "defects": [d.to_dict() for d in self.defects],
            "formatted": self.formatted,
        }
