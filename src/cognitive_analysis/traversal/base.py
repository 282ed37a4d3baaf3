"""Visitor protocol and the event loop driving it."""

from __future__ import annotations

from typing import Iterable, Optional

from .context import TraversalContext
from .nodes import Event, SyntaxNode, iter_events


class MetricsVisitor:
    """Receives enter/leave events with the shared context.

    On entry the context has already opened the node's scope; on exit the
    scope is still open and is closed after every visitor has seen it.
    """

    def enter(self, node: SyntaxNode, context: TraversalContext) -> None:
        pass

    def leave(self, node: SyntaxNode, context: TraversalContext) -> None:
        pass


def walk(
    root: SyntaxNode,
    visitors: Iterable[MetricsVisitor],
    file: Optional[str] = None,
) -> TraversalContext:
    """Run ``visitors`` over ``root`` in a single pass and return the context."""
    visitors = list(visitors)
    context = TraversalContext(file=file)
    for event, node in iter_events(root):
        if event is Event.ENTER:
            context.enter(node)
            for visitor in visitors:
                visitor.enter(node, context)
        else:
            for visitor in visitors:
                visitor.leave(node, context)
            context.leave(node)
    return context
