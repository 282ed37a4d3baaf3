"""Metric records, scoring and collections."""

from .collection import MetricsCollection
from .cyclomatic import CyclomaticMetrics
from .delta import Delta
from .halstead import HalsteadMetrics
from .models import MethodMetrics
from .names import MetricName
from .score import ScoreCalculator, log_weight
from .sorter import MetricsSorter
from .statistics import ClassMetricsStatistics, ScoreSummary

__all__ = [
    "ClassMetricsStatistics",
    "CyclomaticMetrics",
    "Delta",
    "HalsteadMetrics",
    "MethodMetrics",
    "MetricName",
    "MetricsCollection",
    "MetricsSorter",
    "ScoreCalculator",
    "ScoreSummary",
    "log_weight",
]
