"""Turns raw counts into weights and a single complexity score."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Mapping, Union

from .models import MethodMetrics
from .names import MetricName

if TYPE_CHECKING:
    from ..config import CognitiveConfig, MetricConfig

    ScoringConfig = Union[CognitiveConfig, Mapping[MetricName, MetricConfig]]


def log_weight(value: float, threshold: float, scale: float) -> float:
    """Weight of a raw value: 0 up to ``threshold``, then ln(1 + excess / scale)."""
    if value <= threshold:
        return 0.0
    return math.log(1 + (value - threshold) / scale)


class ScoreCalculator:
    """Scores MethodMetrics records in place.

    Disabled metrics get weight 0. The score is the sum of the weights
    rounded to 3 decimal places. Scoring the same record twice with the same
    configuration gives the same result.
    """

    def weights(
        self, metrics: MethodMetrics, config: ScoringConfig
    ) -> dict[MetricName, float]:
        metric_configs = getattr(config, "metrics", config)
        weights: dict[MetricName, float] = {}
        for metric in MetricName:
            metric_config = metric_configs[metric]
            if not metric_config.enabled:
                weights[metric] = 0.0
                continue
            weights[metric] = log_weight(
                metrics.count(metric), metric_config.threshold, metric_config.scale
            )
        return weights

    def calculate(self, metrics: MethodMetrics, config: ScoringConfig) -> float:
        weights = self.weights(metrics, config)
        score = round(sum(weights.values()), 3)
        metrics.apply_score(weights, score)
        return score
