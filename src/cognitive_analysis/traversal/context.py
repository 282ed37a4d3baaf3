"""Per-file traversal state.

A TraversalContext owns a stack of scopes. Types and routines push a scope
on entry and pop it on exit; visitors read and update the innermost scope
through the context instead of keeping state of their own.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from .annotations import is_ignored
from .nodes import NodeKind, SyntaxNode


@dataclass
class TypeScope:
    """A class-like declaration.

    ``identity`` is the dotted name used as the class of its routines; it is
    None for anonymous types and for types declared inside a routine.
    """

    name: Optional[str]
    identity: Optional[str]
    ignored: bool = False
    operators: list[str] = field(default_factory=list)
    operands: list[str] = field(default_factory=list)
    method_records: dict[str, list[Any]] = field(default_factory=dict)
    records: dict[str, Any] = field(default_factory=dict)

    @property
    def emitted(self) -> bool:
        return self.identity is not None and not self.ignored


@dataclass
class RoutineScope:
    """One routine being measured.

    ``owner`` is the class identity the routine reports under. It is None for
    anonymous and nested routines, which are measured in isolation and never
    reported.
    """

    name: Optional[str]
    owner: Optional[str]
    start_line: int
    end_line: int
    owner_type: Optional[TypeScope] = None
    ignored: bool = False

    parameter_count: int = 0
    arguments: set[str] = field(default_factory=set)
    variables: set[str] = field(default_factory=set)
    properties: set[str] = field(default_factory=set)
    if_count: int = 0
    if_depth: int = 0
    max_if_depth: int = 0
    else_count: int = 0
    return_count: int = 0

    constructs: Counter = field(default_factory=Counter)
    operators: list[str] = field(default_factory=list)
    operands: list[str] = field(default_factory=list)

    records: dict[str, Any] = field(default_factory=dict)

    @property
    def emitted(self) -> bool:
        return self.owner is not None and self.name is not None and not self.ignored

    @property
    def line_count(self) -> int:
        return self.end_line - self.start_line + 1


Scope = Union[TypeScope, RoutineScope]


class TraversalContext:
    """Scope stack and results of one traversal (one file)."""

    def __init__(self, file: Optional[str] = None) -> None:
        self.file = file
        self.namespaces: list[Optional[str]] = []
        self.scopes: list[Scope] = []
        self.emitted_routines: list[RoutineScope] = []
        self.emitted_types: list[TypeScope] = []
        self.ignored: list[str] = []

    @property
    def namespace(self) -> Optional[str]:
        for name in reversed(self.namespaces):
            if name:
                return name
        return None

    @property
    def routine(self) -> Optional[RoutineScope]:
        """Innermost scope when it is a routine; None inside a type body."""
        if self.scopes and isinstance(self.scopes[-1], RoutineScope):
            return self.scopes[-1]
        return None

    @property
    def types(self) -> list[TypeScope]:
        return [scope for scope in self.scopes if isinstance(scope, TypeScope)]

    def enter(self, node: SyntaxNode) -> None:
        if node.kind is NodeKind.NAMESPACE:
            self.namespaces.append(node.name)
        elif node.kind is NodeKind.TYPE:
            self.scopes.append(self._open_type(node))
        elif node.kind in (NodeKind.ROUTINE, NodeKind.ANONYMOUS_ROUTINE):
            self.scopes.append(self._open_routine(node))

    def leave(self, node: SyntaxNode) -> None:
        if node.kind is NodeKind.NAMESPACE:
            self.namespaces.pop()
        elif node.kind is NodeKind.TYPE:
            scope = self.scopes.pop()
            if isinstance(scope, TypeScope) and scope.emitted:
                self.emitted_types.append(scope)
        elif node.kind in (NodeKind.ROUTINE, NodeKind.ANONYMOUS_ROUTINE):
            scope = self.scopes.pop()
            if isinstance(scope, RoutineScope) and scope.emitted:
                self.emitted_routines.append(scope)

    def _open_type(self, node: SyntaxNode) -> TypeScope:
        parent = self.scopes[-1] if self.scopes else None
        identity: Optional[str] = None
        ignored = is_ignored(node)

        if node.name is not None:
            if parent is None:
                namespace = self.namespace
                identity = f"{namespace}.{node.name}" if namespace else node.name
            elif isinstance(parent, TypeScope) and parent.identity is not None:
                identity = f"{parent.identity}.{node.name}"
        if isinstance(parent, TypeScope) and parent.ignored:
            ignored = True

        if ignored and identity is not None:
            self.ignored.append(identity)
        return TypeScope(name=node.name, identity=identity, ignored=ignored)

    def _open_routine(self, node: SyntaxNode) -> RoutineScope:
        parent = self.scopes[-1] if self.scopes else None
        owner: Optional[str] = None
        owner_type: Optional[TypeScope] = None
        ignored = is_ignored(node)

        if node.kind is NodeKind.ROUTINE and node.name is not None:
            if parent is None:
                owner = self.namespace
            elif isinstance(parent, TypeScope):
                owner = parent.identity
                owner_type = parent
                ignored = ignored or parent.ignored

        if ignored and owner is not None and not (owner_type and owner_type.ignored):
            self.ignored.append(f"{owner}::{node.name}")

        return RoutineScope(
            name=node.name,
            owner=owner,
            start_line=node.start_line,
            end_line=node.end_line,
            owner_type=owner_type,
            ignored=ignored,
        )
