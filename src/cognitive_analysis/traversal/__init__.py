"""Syntax-tree traversal and the metric visitors."""

from .annotations import IGNORE_MARKER, is_ignored
from .base import MetricsVisitor, walk
from .cognitive import CognitiveMetricsVisitor
from .combined import CombinedMetricsVisitor, TraversalResult, traverse
from .context import RoutineScope, TraversalContext, TypeScope
from .cyclomatic import CyclomaticComplexityVisitor
from .halstead import HalsteadMetricsVisitor
from .nodes import Event, NodeKind, SyntaxNode, iter_events

__all__ = [
    "CognitiveMetricsVisitor",
    "CombinedMetricsVisitor",
    "CyclomaticComplexityVisitor",
    "Event",
    "HalsteadMetricsVisitor",
    "IGNORE_MARKER",
    "MetricsVisitor",
    "NodeKind",
    "RoutineScope",
    "SyntaxNode",
    "TraversalContext",
    "TraversalResult",
    "TypeScope",
    "is_ignored",
    "iter_events",
    "traverse",
    "walk",
]
