"""Cyclomatic complexity records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping

# Constructs tracked per routine. All but "else" and "default" are decision points.
CONSTRUCTS: tuple[str, ...] = (
    "if",
    "elseif",
    "else",
    "switch",
    "case",
    "default",
    "while",
    "do_while",
    "for",
    "foreach",
    "catch",
    "logical_and",
    "logical_or",
    "logical_xor",
    "ternary",
)
NON_DECISION_CONSTRUCTS = frozenset({"else", "default"})


def risk_level(complexity: int) -> str:
    """Bucket a complexity value: low, medium, high or very_high."""
    if complexity <= 5:
        return "low"
    if complexity <= 10:
        return "medium"
    if complexity <= 15:
        return "high"
    return "very_high"


@dataclass(frozen=True)
class CyclomaticMetrics:
    """Decision-point complexity of a routine or a class.

    Attributes:
        complexity: 1 plus the number of decision points for a routine; 1 plus
            the sum of its routines' complexity for a class.
        breakdown: Occurrences of each construct in CONSTRUCTS.
    """

    complexity: int = 1
    breakdown: Mapping[str, int] = field(default_factory=dict)

    @classmethod
    def from_counts(cls, counts: Mapping[str, int]) -> CyclomaticMetrics:
        breakdown = {name: int(counts.get(name, 0)) for name in CONSTRUCTS}
        decisions = sum(
            count for name, count in breakdown.items() if name not in NON_DECISION_CONSTRUCTS
        )
        return cls(complexity=1 + decisions, breakdown=breakdown)

    @classmethod
    def for_class(cls, methods: Iterable[CyclomaticMetrics]) -> CyclomaticMetrics:
        breakdown = {name: 0 for name in CONSTRUCTS}
        total = 0
        for method in methods:
            total += method.complexity
            for name, count in method.breakdown.items():
                breakdown[name] = breakdown.get(name, 0) + count
        return cls(complexity=1 + total, breakdown=breakdown)

    @property
    def risk_level(self) -> str:
        return risk_level(self.complexity)

    def to_dict(self) -> dict:
        return {
            "complexity": self.complexity,
            "riskLevel": self.risk_level,
            "breakdown": dict(self.breakdown),
        }
