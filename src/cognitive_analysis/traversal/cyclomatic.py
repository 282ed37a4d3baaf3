"""Decision-point counting per routine and per class."""

from __future__ import annotations

from ..metrics.cyclomatic import CyclomaticMetrics
from .base import MetricsVisitor
from .context import TraversalContext
from .nodes import ROUTINE_KINDS, NodeKind, SyntaxNode

CONSTRUCT_KINDS: dict[NodeKind, str] = {
    NodeKind.IF: "if",
    NodeKind.ELSE_IF: "elseif",
    NodeKind.ELSE: "else",
    NodeKind.SWITCH: "switch",
    NodeKind.CASE: "case",
    NodeKind.DEFAULT: "default",
    NodeKind.WHILE: "while",
    NodeKind.DO_WHILE: "do_while",
    NodeKind.FOR: "for",
    NodeKind.FOREACH: "foreach",
    NodeKind.CATCH: "catch",
    NodeKind.LOGICAL_AND: "logical_and",
    NodeKind.LOGICAL_OR: "logical_or",
    NodeKind.LOGICAL_XOR: "logical_xor",
    NodeKind.TERNARY: "ternary",
}


class CyclomaticComplexityVisitor(MetricsVisitor):
    def enter(self, node: SyntaxNode, context: TraversalContext) -> None:
        construct = CONSTRUCT_KINDS.get(node.kind)
        if construct is None:
            return
        scope = context.routine
        if scope is not None:
            scope.constructs[construct] += 1

    def leave(self, node: SyntaxNode, context: TraversalContext) -> None:
        if node.kind in ROUTINE_KINDS:
            scope = context.routine
            if scope is None or not scope.emitted:
                return
            record = CyclomaticMetrics.from_counts(scope.constructs)
            scope.records["cyclomatic"] = record
            if scope.owner_type is not None:
                scope.owner_type.method_records.setdefault("cyclomatic", []).append(record)
        elif node.kind is NodeKind.TYPE:
            type_scope = context.scopes[-1]
            if type_scope.emitted:
                type_scope.records["cyclomatic"] = CyclomaticMetrics.for_class(
                    type_scope.method_records.get("cyclomatic", [])
                )
