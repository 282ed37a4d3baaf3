"""Per-routine metrics record."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..exceptions import IdentityMismatchError
from .cyclomatic import CyclomaticMetrics
from .delta import Delta
from .halstead import HalsteadMetrics
from .names import MetricName

_IDENTITY_FIELDS = ("class_name", "method_name")


@dataclass
class MethodMetrics:
    """Raw counts, weights and score of one routine.

    Identity is the pair (``class_name``, ``method_name``); both are fixed
    once set. Weights stay 0 and ``score`` stays 0.0 until the record is
    scored.
    """

    class_name: str
    method_name: str
    counts: dict[MetricName, int] = field(default_factory=dict)
    file: Optional[str] = None
    line: Optional[int] = None
    weights: dict[MetricName, float] = field(default_factory=dict)
    score: float = 0.0
    deltas: dict[MetricName, Delta] = field(default_factory=dict)
    cyclomatic: Optional[CyclomaticMetrics] = None
    halstead: Optional[HalsteadMetrics] = None

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _IDENTITY_FIELDS and name in self.__dict__:
            raise AttributeError(f"{name} of {self.class_name}::{self.method_name} cannot change")
        super().__setattr__(name, value)

    def __post_init__(self) -> None:
        for name in _IDENTITY_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ValueError(f"{name} must be a non-empty string, got {value!r}")

        counts = {metric: 0 for metric in MetricName}
        for metric, value in self.counts.items():
            metric = MetricName(metric)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"{metric.value} must be a non-negative integer, got {value!r}")
            counts[metric] = value
        self.counts = counts

        weights = {metric: 0.0 for metric in MetricName}
        for metric, value in self.weights.items():
            weights[MetricName(metric)] = float(value)
        self.weights = weights

        if self.line is not None and self.line < 1:
            raise ValueError(f"line must be at least 1, got {self.line}")

    @property
    def identity(self) -> tuple[str, str]:
        return (self.class_name, self.method_name)

    def same_identity(self, other: MethodMetrics) -> bool:
        return self.identity == other.identity

    def count(self, metric: MetricName) -> int:
        return self.counts[metric]

    def weight(self, metric: MetricName) -> float:
        return self.weights[metric]

    def delta(self, metric: MetricName) -> Optional[Delta]:
        return self.deltas.get(metric)

    def has_deltas(self) -> bool:
        return bool(self.deltas)

    def apply_score(self, weights: Mapping[MetricName, float], score: float) -> None:
        """Store computed weights and the aggregate score."""
        for metric, value in weights.items():
            self.weights[metric] = float(value)
        self.score = score

    def calculate_deltas(self, previous: MethodMetrics) -> None:
        """Attach one Delta per weight, from ``previous`` to this record.

        Raises:
            IdentityMismatchError: If ``previous`` is a different routine.
        """
        if not self.same_identity(previous):
            raise IdentityMismatchError(
                expected=f"{self.class_name}::{self.method_name}",
                actual=f"{previous.class_name}::{previous.method_name}",
            )
        self.deltas = {
            metric: Delta(before=previous.weight(metric), after=self.weight(metric))
            for metric in MetricName
        }

    def to_dict(self) -> dict[str, Any]:
        """Baseline form: camelCase keys, counts then weights then score."""
        data: dict[str, Any] = {
            "class": self.class_name,
            "method": self.method_name,
            "file": self.file,
            "line": self.line,
        }
        for metric in MetricName:
            data[metric.value] = self.counts[metric]
        for metric in MetricName:
            data[metric.weight_key] = self.weights[metric]
        data["score"] = self.score
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MethodMetrics:
        """Rebuild a record from its baseline form; missing values default to 0."""
        return cls(
            class_name=data["class"],
            method_name=data["method"],
            counts={metric: int(data.get(metric.value) or 0) for metric in MetricName},
            file=data.get("file"),
            line=data.get("line"),
            weights={metric: float(data.get(metric.weight_key) or 0.0) for metric in MetricName},
            score=float(data.get("score") or 0.0),
        )

    def __str__(self) -> str:
        return f"{self.class_name}::{self.method_name} (score {self.score:.3f})"
