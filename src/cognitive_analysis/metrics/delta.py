"""Change of a single metric weight between a baseline and the current run."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Delta:
    """Signed change from ``before`` (baseline) to ``after`` (current)."""

    before: float
    after: float

    @property
    def difference(self) -> float:
        return self.after - self.before

    def has_increased(self) -> bool:
        return self.before < self.after

    def has_decreased(self) -> bool:
        return self.after < self.before

    def has_not_changed(self) -> bool:
        return self.difference == 0.0

    def __str__(self) -> str:
        return f"{self.difference:+.3f}"
