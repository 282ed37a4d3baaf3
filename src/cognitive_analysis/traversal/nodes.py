"""Language-neutral syntax tree consumed by the metric visitors."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional


class NodeKind(Enum):
    """Constructs the visitors react to. Everything else is OTHER."""

    NAMESPACE = "namespace"
    TYPE = "type"
    ROUTINE = "routine"
    ANONYMOUS_ROUTINE = "anonymous_routine"
    PARAMETER = "parameter"

    IF = "if"
    ELSE_IF = "elseif"
    ELSE = "else"
    SWITCH = "switch"
    CASE = "case"
    DEFAULT = "default"
    WHILE = "while"
    DO_WHILE = "do_while"
    FOR = "for"
    FOREACH = "foreach"
    CATCH = "catch"
    LOGICAL_AND = "logical_and"
    LOGICAL_OR = "logical_or"
    LOGICAL_XOR = "logical_xor"
    TERNARY = "ternary"
    RETURN = "return"

    VARIABLE = "variable"
    IDENTIFIER = "identifier"
    PROPERTY_FETCH = "property_fetch"
    METHOD_CALL = "method_call"
    CALL = "call"
    BINARY_OP = "binary_op"
    ASSIGN = "assign"
    LITERAL = "literal"

    OTHER = "other"


ROUTINE_KINDS = frozenset({NodeKind.ROUTINE, NodeKind.ANONYMOUS_ROUTINE})


@dataclass
class SyntaxNode:
    """One node of the neutral tree.

    Attributes:
        kind: Construct represented by the node
        name: Declared or referenced name; None when it cannot be resolved
            statically (dynamic property names, destructuring targets, ...)
        start_line: 1-based first line
        end_line: 1-based last line
        token: Operator text for operator nodes
        value: Operand text for literals
        comments: Doc comments attached to a declaration
        children: Child nodes in source order
    """

    kind: NodeKind
    name: Optional[str] = None
    start_line: int = 0
    end_line: int = 0
    token: Optional[str] = None
    value: Optional[str] = None
    comments: list[str] = field(default_factory=list)
    children: list[SyntaxNode] = field(default_factory=list)

    def walk(self) -> Iterator[SyntaxNode]:
        """Yield this node and its descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


class Event(Enum):
    ENTER = "enter"
    LEAVE = "leave"


def iter_events(root: SyntaxNode) -> Iterator[tuple[Event, SyntaxNode]]:
    """Depth-first enter/leave events; iterative so deep trees cannot overflow."""
    stack: list[tuple[SyntaxNode, bool]] = [(root, False)]
    while stack:
        node, entered = stack.pop()
        if entered:
            yield Event.LEAVE, node
            continue
        yield Event.ENTER, node
        stack.append((node, True))
        for child in reversed(node.children):
            stack.append((child, False))
