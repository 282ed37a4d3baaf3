"""Cognitive counts: arguments, variables, properties, branches, returns."""

from __future__ import annotations

from ..metrics.models import MethodMetrics
from ..metrics.names import MetricName
from .base import MetricsVisitor
from .context import TraversalContext
from .nodes import ROUTINE_KINDS, NodeKind, SyntaxNode


class CognitiveMetricsVisitor(MetricsVisitor):
    """Counts the eight cognitive metrics of the innermost routine.

    Names that cannot be resolved statically are skipped: an unresolvable
    variable or property does not count.
    """

    def enter(self, node: SyntaxNode, context: TraversalContext) -> None:
        scope = context.routine
        if scope is None:
            return

        kind = node.kind
        if kind is NodeKind.PARAMETER:
            scope.parameter_count += 1
            if node.name is not None:
                scope.arguments.add(node.name)
        elif kind is NodeKind.VARIABLE:
            if node.name is not None and node.name not in scope.arguments:
                scope.variables.add(node.name)
        elif kind is NodeKind.PROPERTY_FETCH:
            if node.name is not None:
                scope.properties.add(node.name)
        elif kind is NodeKind.IF:
            scope.if_count += 1
            scope.if_depth += 1
            scope.max_if_depth = max(scope.max_if_depth, scope.if_depth)
        elif kind in (NodeKind.ELSE, NodeKind.ELSE_IF):
            scope.else_count += 1
        elif kind is NodeKind.RETURN:
            scope.return_count += 1

    def leave(self, node: SyntaxNode, context: TraversalContext) -> None:
        scope = context.routine
        if scope is None:
            return

        if node.kind is NodeKind.IF:
            scope.if_depth -= 1
        elif node.kind in ROUTINE_KINDS and scope.emitted:
            scope.records["cognitive"] = MethodMetrics(
                class_name=scope.owner,
                method_name=scope.name,
                file=context.file,
                line=scope.start_line if scope.start_line >= 1 else None,
                counts={
                    MetricName.LINE_COUNT: max(scope.line_count, 0),
                    MetricName.ARG_COUNT: scope.parameter_count,
                    MetricName.RETURN_COUNT: scope.return_count,
                    MetricName.VARIABLE_COUNT: len(scope.variables),
                    MetricName.PROPERTY_CALL_COUNT: len(scope.properties),
                    MetricName.IF_COUNT: scope.if_count,
                    MetricName.IF_NESTING_LEVEL: scope.max_if_depth,
                    MetricName.ELSE_COUNT: scope.else_count,
                },
            )
