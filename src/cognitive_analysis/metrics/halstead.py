"""Halstead operator/operand metrics."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class HalsteadMetrics:
    """Halstead counts and the measures derived from them.

    ``n1``/``n2`` are the distinct operators/operands, ``N1``/``N2`` their
    total occurrences.
    """

    n1: int = 0
    n2: int = 0
    N1: int = 0
    N2: int = 0

    @classmethod
    def from_tokens(cls, operators: Iterable[str], operands: Iterable[str]) -> HalsteadMetrics:
        operators = list(operators)
        operands = list(operands)
        return cls(
            n1=len(set(operators)),
            n2=len(set(operands)),
            N1=len(operators),
            N2=len(operands),
        )

    @property
    def program_length(self) -> int:
        return self.N1 + self.N2

    @property
    def program_vocabulary(self) -> int:
        return self.n1 + self.n2

    @property
    def volume(self) -> float:
        if self.program_vocabulary == 0:
            return 0.0
        return self.program_length * math.log2(self.program_vocabulary)

    @property
    def difficulty(self) -> float:
        if self.n2 == 0:
            return 0.0
        return (self.n1 / 2) * (self.N2 / self.n2)

    @property
    def effort(self) -> float:
        return self.difficulty * self.volume

    @property
    def possible_bugs(self) -> float:
        """Delivered bugs estimate (volume / 3000)."""
        return self.volume / 3000

    def to_dict(self) -> dict:
        return {
            "n1": self.n1,
            "n2": self.n2,
            "N1": self.N1,
            "N2": self.N2,
            "programLength": self.program_length,
            "programVocabulary": self.program_vocabulary,
            "volume": round(self.volume, 3),
            "difficulty": round(self.difficulty, 3),
            "effort": round(self.effort, 3),
            "possibleBugs": round(self.possible_bugs, 3),
        }
