"""Operator and operand collection for Halstead metrics."""

from __future__ import annotations

from ..metrics.halstead import HalsteadMetrics
from .base import MetricsVisitor
from .context import TraversalContext
from .nodes import ROUTINE_KINDS, NodeKind, SyntaxNode

OPERATOR_KINDS = frozenset(
    {
        NodeKind.BINARY_OP,
        NodeKind.ASSIGN,
        NodeKind.CALL,
        NodeKind.METHOD_CALL,
        NodeKind.LOGICAL_AND,
        NodeKind.LOGICAL_OR,
        NodeKind.LOGICAL_XOR,
    }
)
OPERAND_KINDS = frozenset({NodeKind.IDENTIFIER, NodeKind.VARIABLE, NodeKind.LITERAL})


class HalsteadMetricsVisitor(MetricsVisitor):
    """Records operators by token and operands by text.

    Tokens count toward the innermost routine and toward every enclosing
    type, so a class total covers everything written inside the class.
    """

    def enter(self, node: SyntaxNode, context: TraversalContext) -> None:
        if node.kind in OPERATOR_KINDS:
            token = node.token or node.kind.value
            target = "operators"
        elif node.kind in OPERAND_KINDS:
            token = node.value if node.value is not None else node.name
            if token is None:
                return
            target = "operands"
        else:
            return

        scope = context.routine
        if scope is not None:
            getattr(scope, target).append(token)
        for type_scope in context.types:
            getattr(type_scope, target).append(token)

    def leave(self, node: SyntaxNode, context: TraversalContext) -> None:
        if node.kind in ROUTINE_KINDS:
            scope = context.routine
            if scope is not None and scope.emitted:
                scope.records["halstead"] = HalsteadMetrics.from_tokens(
                    scope.operators, scope.operands
                )
        elif node.kind is NodeKind.TYPE:
            type_scope = context.scopes[-1]
            if type_scope.emitted:
                type_scope.records["halstead"] = HalsteadMetrics.from_tokens(
                    type_scope.operators, type_scope.operands
                )
