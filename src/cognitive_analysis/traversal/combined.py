"""Single-pass traversal producing all metric families at once."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..metrics.cyclomatic import CyclomaticMetrics
from ..metrics.halstead import HalsteadMetrics
from ..metrics.models import MethodMetrics
from .base import MetricsVisitor, walk
from .cognitive import CognitiveMetricsVisitor
from .cyclomatic import CyclomaticComplexityVisitor
from .halstead import HalsteadMetricsVisitor
from .nodes import SyntaxNode


@dataclass
class TraversalResult:
    """Everything measured in one syntax tree.

    ``methods`` is in source order and may repeat an identity when a routine
    is redefined; collections keep the first occurrence.
    """

    methods: list[MethodMetrics] = field(default_factory=list)
    class_cyclomatic: dict[str, CyclomaticMetrics] = field(default_factory=dict)
    class_halstead: dict[str, HalsteadMetrics] = field(default_factory=dict)
    ignored: list[str] = field(default_factory=list)


class CombinedMetricsVisitor:
    """Runs the cognitive, cyclomatic and Halstead visitors together.

    Each emitted MethodMetrics carries its cyclomatic and Halstead records.
    """

    def __init__(self) -> None:
        self.visitors: list[MetricsVisitor] = [
            CyclomaticComplexityVisitor(),
            HalsteadMetricsVisitor(),
            CognitiveMetricsVisitor(),
        ]

    def traverse(self, root: SyntaxNode, file: Optional[str] = None) -> TraversalResult:
        context = walk(root, self.visitors, file=file)
        result = TraversalResult(ignored=list(context.ignored))

        for scope in sorted(context.emitted_routines, key=lambda s: s.start_line):
            metrics = scope.records["cognitive"]
            metrics.cyclomatic = scope.records.get("cyclomatic")
            metrics.halstead = scope.records.get("halstead")
            result.methods.append(metrics)

        for type_scope in context.emitted_types:
            if "cyclomatic" in type_scope.records:
                result.class_cyclomatic.setdefault(type_scope.identity, type_scope.records["cyclomatic"])
            if "halstead" in type_scope.records:
                result.class_halstead.setdefault(type_scope.identity, type_scope.records["halstead"])

        return result


def traverse(root: SyntaxNode, file: Optional[str] = None) -> TraversalResult:
    """Measure every reportable routine under ``root``."""
    return CombinedMetricsVisitor().traverse(root, file=file)
