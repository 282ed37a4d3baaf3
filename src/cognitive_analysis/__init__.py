"""
cognitive-analysis: cognitive complexity metrics for source code.

Walks parsed source files once per file, counts the structural features that
make a routine hard to read, turns them into a logarithmically weighted
score and compares each routine against a stored baseline.
"""

__version__ = "0.1.0"

from .baseline import Baseline, BaselineSchemaValidator, BaselineSnapshot, LegacyBaseline
from .collector import AnalysisResult, MetricsCollector
from .config import CognitiveConfig, MetricConfig, load_config
from .metrics import (
    ClassMetricsStatistics,
    Delta,
    MethodMetrics,
    MetricName,
    MetricsCollection,
    ScoreCalculator,
)
from .traversal import CombinedMetricsVisitor, SyntaxNode, traverse

__all__ = [
    "AnalysisResult",
    "Baseline",
    "BaselineSchemaValidator",
    "BaselineSnapshot",
    "ClassMetricsStatistics",
    "CognitiveConfig",
    "CombinedMetricsVisitor",
    "Delta",
    "LegacyBaseline",
    "MethodMetrics",
    "MetricConfig",
    "MetricName",
    "MetricsCollection",
    "MetricsCollector",
    "ScoreCalculator",
    "SyntaxNode",
    "load_config",
    "traverse",
]
