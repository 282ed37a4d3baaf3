"""Per-class and overall summaries of a scored collection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from .collection import MetricsCollection
from .models import MethodMetrics


@dataclass(frozen=True)
class ScoreSummary:
    """Score distribution of a group of methods."""

    name: str
    method_count: int
    average_score: float
    median_score: float
    max_score: float
    std_score: float
    methods_above_threshold: int
    percentage_above_threshold: float


def summarize(name: str, metrics: Iterable[MethodMetrics], threshold: float) -> ScoreSummary:
    scores = np.array([m.score for m in metrics], dtype=float)
    if scores.size == 0:
        return ScoreSummary(name, 0, 0.0, 0.0, 0.0, 0.0, 0, 0.0)

    above = int(np.count_nonzero(scores > threshold))
    return ScoreSummary(
        name=name,
        method_count=int(scores.size),
        average_score=round(float(np.mean(scores)), 3),
        median_score=round(float(np.median(scores)), 3),
        max_score=round(float(np.max(scores)), 3),
        std_score=round(float(np.std(scores)), 3),
        methods_above_threshold=above,
        percentage_above_threshold=round(100.0 * above / scores.size, 1),
    )


class ClassMetricsStatistics:
    """Score statistics of a collection, per class and overall.

    Args:
        collection: Scored metrics
        score_threshold: Methods scoring strictly above this count as complex
    """

    def __init__(self, collection: MetricsCollection, score_threshold: float = 0.5):
        self.collection = collection
        self.score_threshold = score_threshold

    def for_class(self, class_name: str) -> ScoreSummary:
        return summarize(
            class_name, self.collection.filter_by_class(class_name), self.score_threshold
        )

    def per_class(self) -> list[ScoreSummary]:
        groups = self.collection.group_by("class")
        return [summarize(name, group, self.score_threshold) for name, group in groups.items()]

    def overall(self) -> ScoreSummary:
        return summarize("overall", self.collection, self.score_threshold)

    def most_complex_classes(self, limit: int = 10) -> list[ScoreSummary]:
        """Classes ordered by average score, highest first."""
        return sorted(self.per_class(), key=lambda s: s.average_score, reverse=True)[:limit]
