"""Converts tree-sitter parse trees into the neutral SyntaxNode tree.

Each supported grammar has a converter that maps its node types onto
NodeKind. Grammar nodes without a mapping are flattened: their children are
converted and spliced into the parent, so the neutral tree only holds
constructs the visitors care about.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Optional

from ..exceptions import ParsingError, UnsupportedLanguageError
from ..logging_config import get_logger
from ..traversal.nodes import NodeKind, SyntaxNode
from .treesitter_parser import TreeSitterParser

logger = get_logger(__name__)


class _Converter:
    """Shared helpers; subclasses add ``_on_<grammar type>`` handlers."""

    language = ""

    def __init__(self, source: bytes) -> None:
        self.source = source

    def text(self, node: Any) -> str:
        return self.source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")

    def make(
        self,
        kind: NodeKind,
        ts_node: Any,
        children: Optional[list[SyntaxNode]] = None,
        **attrs: Any,
    ) -> SyntaxNode:
        return SyntaxNode(
            kind=kind,
            start_line=ts_node.start_point[0] + 1,
            end_line=ts_node.end_point[0] + 1,
            children=children or [],
            **attrs,
        )

    def convert(self, node: Any) -> list[SyntaxNode]:
        if node is None:
            return []
        handler: Optional[Callable[[Any], list[SyntaxNode]]] = getattr(
            self, f"_on_{node.type}", None
        )
        if handler is not None:
            return handler(node)
        return self.convert_all(node.named_children)

    def convert_all(self, nodes: list[Any]) -> list[SyntaxNode]:
        result: list[SyntaxNode] = []
        for node in nodes:
            result.extend(self.convert(node))
        return result

    def field(self, node: Any, name: str) -> Any:
        return node.child_by_field_name(name)

    def leading_comments(self, node: Any) -> list[str]:
        """Comment nodes directly above ``node`` (no blank-line gap)."""
        comments: list[str] = []
        current = node
        sibling = node.prev_named_sibling
        while sibling is not None and sibling.type == "comment":
            if sibling.end_point[0] < current.start_point[0] - 1:
                break
            comments.insert(0, self.text(sibling))
            current = sibling
            sibling = sibling.prev_named_sibling
        return comments

    def _on_comment(self, node: Any) -> list[SyntaxNode]:
        return []

    def _plain_call(self, node: Any, function: Any, arguments: list[SyntaxNode]) -> SyntaxNode:
        # A callee named directly is the operator, not an operand
        if function is not None and function.type == "identifier":
            return self.make(
                NodeKind.CALL, node, name=self.text(function), token="()", children=arguments
            )
        return self.make(NodeKind.CALL, node, token="()", children=self.convert(function) + arguments)

    def _leaf(self, kind: NodeKind, attr: str) -> Callable[[Any], list[SyntaxNode]]:
        def handler(node: Any) -> list[SyntaxNode]:
            return [self.make(kind, node, **{attr: self.text(node)})]

        return handler


class PythonConverter(_Converter):
    """Maps tree-sitter-python nodes.

    ``self``/``cls`` receivers of methods are not counted as arguments.
    """

    language = "python"
    RECEIVERS = ("self", "cls")

    def __init__(self, source: bytes) -> None:
        super().__init__(source)
        for literal in ("integer", "float", "true", "false", "none"):
            setattr(self, f"_on_{literal}", self._leaf(NodeKind.LITERAL, "value"))

    # Declarations

    def _on_import_statement(self, node: Any) -> list[SyntaxNode]:
        return []

    _on_import_from_statement = _on_import_statement
    _on_future_import_statement = _on_import_statement
    _on_global_statement = _on_import_statement
    _on_nonlocal_statement = _on_import_statement

    def _on_decorated_definition(self, node: Any) -> list[SyntaxNode]:
        result: list[SyntaxNode] = []
        for child in node.named_children:
            if child.type == "decorator":
                result.extend(self.convert_all(child.named_children))
        definition = self.field(node, "definition")
        result.extend(self._definition(definition, self.leading_comments(node)))
        return result

    def _on_class_definition(self, node: Any) -> list[SyntaxNode]:
        return self._definition(node, self.leading_comments(node))

    _on_function_definition = _on_class_definition

    def _definition(self, node: Any, comments: list[str]) -> list[SyntaxNode]:
        name_node = self.field(node, "name")
        name = self.text(name_node) if name_node is not None else None
        body = self.field(node, "body")
        docstring, statements = self._split_docstring(body)
        if docstring is not None:
            comments = comments + [docstring]

        if node.type == "class_definition":
            return [
                self.make(
                    NodeKind.TYPE,
                    node,
                    name=name,
                    comments=comments,
                    children=self.convert_all(statements),
                )
            ]

        parameters = self._parameters(
            self.field(node, "parameters"), drop_receiver=self._is_method(node)
        )
        return [
            self.make(
                NodeKind.ROUTINE,
                node,
                name=name,
                comments=comments,
                children=parameters + self.convert_all(statements),
            )
        ]

    def _split_docstring(self, body: Any) -> tuple[Optional[str], list[Any]]:
        if body is None:
            return None, []
        statements = [child for child in body.named_children]
        for index, statement in enumerate(statements):
            if statement.type == "comment":
                continue
            if (
                statement.type == "expression_statement"
                and len(statement.named_children) == 1
                and statement.named_children[0].type == "string"
            ):
                return self.text(statement), statements[:index] + statements[index + 1 :]
            break
        return None, statements

    def _is_method(self, node: Any) -> bool:
        parent = node.parent
        if parent is not None and parent.type == "decorated_definition":
            parent = parent.parent
        return (
            parent is not None
            and parent.type == "block"
            and parent.parent is not None
            and parent.parent.type == "class_definition"
        )

    def _parameters(self, params: Any, drop_receiver: bool = False) -> list[SyntaxNode]:
        if params is None:
            return []
        nodes: list[SyntaxNode] = []
        for child in params.named_children:
            if child.type in ("comment", "keyword_separator", "positional_separator"):
                continue
            nodes.append(self.make(NodeKind.PARAMETER, child, name=self._parameter_name(child)))
        if drop_receiver and nodes and nodes[0].name in self.RECEIVERS:
            nodes.pop(0)
        return nodes

    def _parameter_name(self, node: Any) -> Optional[str]:
        if node.type == "identifier":
            return self.text(node)
        if node.type in ("default_parameter", "typed_default_parameter"):
            return self._parameter_name(self.field(node, "name"))
        if node.type in ("typed_parameter", "list_splat_pattern", "dictionary_splat_pattern"):
            for child in node.named_children:
                if child.type in ("identifier", "list_splat_pattern", "dictionary_splat_pattern"):
                    return self._parameter_name(child)
        return None

    def _on_lambda(self, node: Any) -> list[SyntaxNode]:
        children = self._parameters(self.field(node, "parameters"))
        children += self.convert(self.field(node, "body"))
        return [self.make(NodeKind.ANONYMOUS_ROUTINE, node, children=children)]

    # Bindings

    def bindings(self, target: Any) -> list[SyntaxNode]:
        """Names bound by an assignment-like target become VARIABLE nodes."""
        if target is None:
            return []
        if target.type == "identifier":
            return [self.make(NodeKind.VARIABLE, target, name=self.text(target))]
        if target.type in (
            "pattern_list",
            "tuple_pattern",
            "list_pattern",
            "tuple",
            "list",
            "expression_list",
            "parenthesized_expression",
            "list_splat_pattern",
            "list_splat",
        ):
            result: list[SyntaxNode] = []
            for child in target.named_children:
                result.extend(self.bindings(child))
            return result
        return self.convert(target)

    def _on_assignment(self, node: Any) -> list[SyntaxNode]:
        children = self.bindings(self.field(node, "left"))
        right = self.field(node, "right")
        if right is None:
            return children
        children += self.convert(right)
        return [self.make(NodeKind.ASSIGN, node, token="=", children=children)]

    def _on_augmented_assignment(self, node: Any) -> list[SyntaxNode]:
        operator = self.field(node, "operator")
        children = self.bindings(self.field(node, "left")) + self.convert(self.field(node, "right"))
        token = self.text(operator) if operator is not None else "="
        return [self.make(NodeKind.ASSIGN, node, token=token, children=children)]

    def _on_named_expression(self, node: Any) -> list[SyntaxNode]:
        children = self.bindings(self.field(node, "name")) + self.convert(self.field(node, "value"))
        return [self.make(NodeKind.ASSIGN, node, token=":=", children=children)]

    def _on_as_pattern(self, node: Any) -> list[SyntaxNode]:
        result: list[SyntaxNode] = []
        for child in node.named_children:
            if child.type == "as_pattern_target":
                for target in child.named_children:
                    result.extend(self.bindings(target))
            else:
                result.extend(self.convert(child))
        return result

    def _on_for_in_clause(self, node: Any) -> list[SyntaxNode]:
        return self.bindings(self.field(node, "left")) + self.convert(self.field(node, "right"))

    # Control flow

    def _on_if_statement(self, node: Any) -> list[SyntaxNode]:
        return [self.make(NodeKind.IF, node, children=self.convert_all(node.named_children))]

    def _on_elif_clause(self, node: Any) -> list[SyntaxNode]:
        return [self.make(NodeKind.ELSE_IF, node, children=self.convert_all(node.named_children))]

    def _on_else_clause(self, node: Any) -> list[SyntaxNode]:
        children = self.convert_all(node.named_children)
        if node.parent is not None and node.parent.type == "if_statement":
            return [self.make(NodeKind.ELSE, node, children=children)]
        return children

    def _on_for_statement(self, node: Any) -> list[SyntaxNode]:
        children = self.bindings(self.field(node, "left"))
        children += self.convert(self.field(node, "right"))
        children += self.convert(self.field(node, "body"))
        children += self.convert(self.field(node, "alternative"))
        return [self.make(NodeKind.FOREACH, node, children=children)]

    def _on_while_statement(self, node: Any) -> list[SyntaxNode]:
        return [self.make(NodeKind.WHILE, node, children=self.convert_all(node.named_children))]

    def _on_except_clause(self, node: Any) -> list[SyntaxNode]:
        children: list[SyntaxNode] = []
        after_as = False
        for child in node.children:
            if child.type == "as":
                after_as = True
                continue
            if not child.is_named:
                continue
            if after_as and child.type != "block":
                children.extend(self.bindings(child))
                after_as = False
            else:
                children.extend(self.convert(child))
        return [self.make(NodeKind.CATCH, node, children=children)]

    _on_except_group_clause = _on_except_clause

    def _on_match_statement(self, node: Any) -> list[SyntaxNode]:
        return [self.make(NodeKind.SWITCH, node, children=self.convert_all(node.named_children))]

    def _on_case_clause(self, node: Any) -> list[SyntaxNode]:
        patterns = [child for child in node.named_children if child.type == "case_pattern"]
        rest = [child for child in node.named_children if child.type != "case_pattern"]
        is_default = len(patterns) == 1 and self.text(patterns[0]).strip() == "_"
        kind = NodeKind.DEFAULT if is_default else NodeKind.CASE
        return [self.make(kind, node, children=self.convert_all(rest))]

    def _on_return_statement(self, node: Any) -> list[SyntaxNode]:
        return [self.make(NodeKind.RETURN, node, children=self.convert_all(node.named_children))]

    # Expressions

    def _on_boolean_operator(self, node: Any) -> list[SyntaxNode]:
        operator = self.field(node, "operator")
        token = self.text(operator) if operator is not None else "and"
        kind = NodeKind.LOGICAL_OR if token == "or" else NodeKind.LOGICAL_AND
        children = self.convert(self.field(node, "left")) + self.convert(self.field(node, "right"))
        return [self.make(kind, node, token=token, children=children)]

    def _on_binary_operator(self, node: Any) -> list[SyntaxNode]:
        operator = self.field(node, "operator")
        children = self.convert(self.field(node, "left")) + self.convert(self.field(node, "right"))
        return [self.make(NodeKind.BINARY_OP, node, token=self.text(operator), children=children)]

    def _on_comparison_operator(self, node: Any) -> list[SyntaxNode]:
        operators = [self.text(child) for child in node.children if not child.is_named]
        token = operators[0] if operators else "=="
        return [
            self.make(
                NodeKind.BINARY_OP, node, token=token, children=self.convert_all(node.named_children)
            )
        ]

    def _on_conditional_expression(self, node: Any) -> list[SyntaxNode]:
        return [self.make(NodeKind.TERNARY, node, children=self.convert_all(node.named_children))]

    def _on_call(self, node: Any) -> list[SyntaxNode]:
        function = self.field(node, "function")
        arguments = self.convert(self.field(node, "arguments"))
        if function is not None and function.type == "attribute":
            attribute = self.field(function, "attribute")
            return [
                self.make(
                    NodeKind.METHOD_CALL,
                    node,
                    name=self.text(attribute),
                    token=".()",
                    children=self.convert(self.field(function, "object")) + arguments,
                )
            ]
        return [self._plain_call(node, function, arguments)]

    def _on_attribute(self, node: Any) -> list[SyntaxNode]:
        attribute = self.field(node, "attribute")
        return [
            self.make(
                NodeKind.PROPERTY_FETCH,
                node,
                name=self.text(attribute) if attribute is not None else None,
                children=self.convert(self.field(node, "object")),
            )
        ]

    def _on_keyword_argument(self, node: Any) -> list[SyntaxNode]:
        return self.convert(self.field(node, "value"))

    def _on_identifier(self, node: Any) -> list[SyntaxNode]:
        return [self.make(NodeKind.IDENTIFIER, node, name=self.text(node))]

    def _on_string(self, node: Any) -> list[SyntaxNode]:
        literal = self.make(NodeKind.LITERAL, node, value=self.text(node))
        interpolations = [child for child in node.named_children if child.type == "interpolation"]
        return [literal] + self.convert_all(interpolations)


class JavaScriptConverter(_Converter):
    """Maps tree-sitter-javascript nodes.

    ``else if`` chains become ELSE_IF nodes. A function or arrow function
    assigned to a named variable or class field takes that name; every
    other function expression is anonymous.
    """

    language = "javascript"
    FUNCTION_TYPES = (
        "function_expression",
        "function",
        "arrow_function",
        "generator_function",
    )

    def __init__(self, source: bytes) -> None:
        super().__init__(source)
        for literal in ("number", "true", "false", "null", "undefined", "regex"):
            setattr(self, f"_on_{literal}", self._leaf(NodeKind.LITERAL, "value"))
        for identifier in ("identifier", "shorthand_property_identifier", "this", "super"):
            setattr(self, f"_on_{identifier}", self._leaf(NodeKind.IDENTIFIER, "name"))

    def declaration_comments(self, node: Any) -> list[str]:
        comments = self.leading_comments(node)
        parent = node.parent
        while parent is not None and parent.type in (
            "export_statement",
            "lexical_declaration",
            "variable_declaration",
        ):
            comments = self.leading_comments(parent) + comments
            parent = parent.parent
        return comments

    # Declarations

    def _on_import_statement(self, node: Any) -> list[SyntaxNode]:
        return []

    def _on_class_declaration(self, node: Any) -> list[SyntaxNode]:
        name_node = self.field(node, "name")
        return [
            self.make(
                NodeKind.TYPE,
                node,
                name=self.text(name_node) if name_node is not None else None,
                comments=self.declaration_comments(node),
                children=self.convert(self.field(node, "body")),
            )
        ]

    _on_class = _on_class_declaration

    def _on_method_definition(self, node: Any) -> list[SyntaxNode]:
        # shorthand methods of object literals belong to no class
        if node.parent is not None and node.parent.type == "object":
            return self._routine(node, NodeKind.ANONYMOUS_ROUTINE, None, [])
        return self._routine(
            node, NodeKind.ROUTINE, self._property_name(self.field(node, "name")), self.leading_comments(node)
        )

    def _on_function_declaration(self, node: Any) -> list[SyntaxNode]:
        name_node = self.field(node, "name")
        return self._routine(
            node,
            NodeKind.ROUTINE,
            self.text(name_node) if name_node is not None else None,
            self.declaration_comments(node),
        )

    _on_generator_function_declaration = _on_function_declaration

    def _on_function_expression(self, node: Any) -> list[SyntaxNode]:
        return self._routine(node, NodeKind.ANONYMOUS_ROUTINE, None, [])

    _on_function = _on_function_expression
    _on_arrow_function = _on_function_expression
    _on_generator_function = _on_function_expression

    def _on_field_definition(self, node: Any) -> list[SyntaxNode]:
        value = self.field(node, "value")
        name = self._property_name(self.field(node, "property"))
        if value is not None and value.type in self.FUNCTION_TYPES:
            return self._routine(value, NodeKind.ROUTINE, name, self.leading_comments(node))
        return self.convert(value)

    def _on_variable_declarator(self, node: Any) -> list[SyntaxNode]:
        target = self.field(node, "name")
        value = self.field(node, "value")
        if value is not None and value.type in self.FUNCTION_TYPES and target.type == "identifier":
            return self._routine(value, NodeKind.ROUTINE, self.text(target), self.declaration_comments(node))
        children = self.bindings(target)
        if value is None:
            return children
        children += self.convert(value)
        return [self.make(NodeKind.ASSIGN, node, token="=", children=children)]

    def _routine(
        self, node: Any, kind: NodeKind, name: Optional[str], comments: list[str]
    ) -> list[SyntaxNode]:
        params = self.field(node, "parameters")
        if params is not None:
            parameters = self._parameters(params.named_children)
        else:
            single = self.field(node, "parameter")
            parameters = self._parameters([single]) if single is not None else []
        body = self.field(node, "body")
        if body is not None and body.type == "statement_block":
            statements = self.convert_all(body.named_children)
        else:
            statements = self.convert(body)
        return [self.make(kind, node, name=name, comments=comments, children=parameters + statements)]

    def _parameters(self, nodes: list[Any]) -> list[SyntaxNode]:
        result: list[SyntaxNode] = []
        for child in nodes:
            if child.type == "comment":
                continue
            result.append(self.make(NodeKind.PARAMETER, child, name=self._parameter_name(child)))
        return result

    def _parameter_name(self, node: Any) -> Optional[str]:
        if node.type == "identifier":
            return self.text(node)
        if node.type == "assignment_pattern":
            return self._parameter_name(self.field(node, "left"))
        if node.type == "rest_pattern":
            for child in node.named_children:
                return self._parameter_name(child)
        return None

    def _property_name(self, node: Any) -> Optional[str]:
        if node is None or node.type == "computed_property_name":
            return None
        if node.type == "string":
            return self.text(node)[1:-1]
        return self.text(node)

    # Bindings

    def bindings(self, target: Any) -> list[SyntaxNode]:
        if target is None:
            return []
        if target.type in ("identifier", "shorthand_property_identifier_pattern"):
            return [self.make(NodeKind.VARIABLE, target, name=self.text(target))]
        if target.type in ("object_pattern", "array_pattern", "rest_pattern"):
            result: list[SyntaxNode] = []
            for child in target.named_children:
                result.extend(self.bindings(child))
            return result
        if target.type in ("pair_pattern",):
            return self.bindings(self.field(target, "value"))
        if target.type in ("assignment_pattern", "object_assignment_pattern"):
            return self.bindings(self.field(target, "left")) + self.convert(self.field(target, "right"))
        return self.convert(target)

    def _on_assignment_expression(self, node: Any) -> list[SyntaxNode]:
        children = self.bindings(self.field(node, "left")) + self.convert(self.field(node, "right"))
        return [self.make(NodeKind.ASSIGN, node, token="=", children=children)]

    def _on_augmented_assignment_expression(self, node: Any) -> list[SyntaxNode]:
        operator = self.field(node, "operator")
        children = self.bindings(self.field(node, "left")) + self.convert(self.field(node, "right"))
        token = self.text(operator) if operator is not None else "="
        return [self.make(NodeKind.ASSIGN, node, token=token, children=children)]

    # Control flow

    def _on_if_statement(self, node: Any) -> list[SyntaxNode]:
        return [self.make(NodeKind.IF, node, children=self.convert_all(node.named_children))]

    def _on_else_clause(self, node: Any) -> list[SyntaxNode]:
        statements = [child for child in node.named_children if child.type != "comment"]
        if len(statements) == 1 and statements[0].type == "if_statement":
            inner = statements[0]
            return [self.make(NodeKind.ELSE_IF, inner, children=self.convert_all(inner.named_children))]
        return [self.make(NodeKind.ELSE, node, children=self.convert_all(node.named_children))]

    def _on_switch_statement(self, node: Any) -> list[SyntaxNode]:
        return [self.make(NodeKind.SWITCH, node, children=self.convert_all(node.named_children))]

    def _on_switch_case(self, node: Any) -> list[SyntaxNode]:
        return [self.make(NodeKind.CASE, node, children=self.convert_all(node.named_children))]

    def _on_switch_default(self, node: Any) -> list[SyntaxNode]:
        return [self.make(NodeKind.DEFAULT, node, children=self.convert_all(node.named_children))]

    def _on_while_statement(self, node: Any) -> list[SyntaxNode]:
        return [self.make(NodeKind.WHILE, node, children=self.convert_all(node.named_children))]

    def _on_do_statement(self, node: Any) -> list[SyntaxNode]:
        return [self.make(NodeKind.DO_WHILE, node, children=self.convert_all(node.named_children))]

    def _on_for_statement(self, node: Any) -> list[SyntaxNode]:
        return [self.make(NodeKind.FOR, node, children=self.convert_all(node.named_children))]

    def _on_for_in_statement(self, node: Any) -> list[SyntaxNode]:
        children = self.bindings(self.field(node, "left"))
        children += self.convert(self.field(node, "right"))
        children += self.convert(self.field(node, "body"))
        return [self.make(NodeKind.FOREACH, node, children=children)]

    def _on_catch_clause(self, node: Any) -> list[SyntaxNode]:
        children = self.bindings(self.field(node, "parameter")) + self.convert(self.field(node, "body"))
        return [self.make(NodeKind.CATCH, node, children=children)]

    def _on_return_statement(self, node: Any) -> list[SyntaxNode]:
        return [self.make(NodeKind.RETURN, node, children=self.convert_all(node.named_children))]

    # Expressions

    def _on_binary_expression(self, node: Any) -> list[SyntaxNode]:
        operator = self.field(node, "operator")
        token = self.text(operator) if operator is not None else ""
        kind = {"&&": NodeKind.LOGICAL_AND, "||": NodeKind.LOGICAL_OR}.get(token, NodeKind.BINARY_OP)
        children = self.convert(self.field(node, "left")) + self.convert(self.field(node, "right"))
        return [self.make(kind, node, token=token, children=children)]

    def _on_ternary_expression(self, node: Any) -> list[SyntaxNode]:
        return [self.make(NodeKind.TERNARY, node, children=self.convert_all(node.named_children))]

    def _on_call_expression(self, node: Any) -> list[SyntaxNode]:
        function = self.field(node, "function")
        arguments = self.convert(self.field(node, "arguments"))
        if function is not None and function.type == "member_expression":
            return [
                self.make(
                    NodeKind.METHOD_CALL,
                    node,
                    name=self._property_name(self.field(function, "property")),
                    token=".()",
                    children=self.convert(self.field(function, "object")) + arguments,
                )
            ]
        return [self._plain_call(node, function, arguments)]

    def _on_new_expression(self, node: Any) -> list[SyntaxNode]:
        children = self.convert(self.field(node, "constructor")) + self.convert(
            self.field(node, "arguments")
        )
        return [self.make(NodeKind.CALL, node, token="new", children=children)]

    def _on_member_expression(self, node: Any) -> list[SyntaxNode]:
        return [
            self.make(
                NodeKind.PROPERTY_FETCH,
                node,
                name=self._property_name(self.field(node, "property")),
                children=self.convert(self.field(node, "object")),
            )
        ]

    def _on_subscript_expression(self, node: Any) -> list[SyntaxNode]:
        index = self.field(node, "index")
        name = self.text(index)[1:-1] if index is not None and index.type == "string" else None
        children = self.convert(self.field(node, "object")) + self.convert(index)
        return [self.make(NodeKind.PROPERTY_FETCH, node, name=name, children=children)]

    def _on_pair(self, node: Any) -> list[SyntaxNode]:
        key = self.field(node, "key")
        children = self.convert(key) if key is not None and key.type == "computed_property_name" else []
        return children + self.convert(self.field(node, "value"))

    def _on_string(self, node: Any) -> list[SyntaxNode]:
        return [self.make(NodeKind.LITERAL, node, value=self.text(node))]

    def _on_template_string(self, node: Any) -> list[SyntaxNode]:
        literal = self.make(NodeKind.LITERAL, node, value=self.text(node))
        substitutions = [c for c in node.named_children if c.type == "template_substitution"]
        return [literal] + self.convert_all(substitutions)


CONVERTERS: dict[str, type[_Converter]] = {
    PythonConverter.language: PythonConverter,
    JavaScriptConverter.language: JavaScriptConverter,
}


class SyntaxTreeBuilder:
    """Parses source text and returns the neutral tree of one file.

    Usage:
        builder = SyntaxTreeBuilder()
        root = builder.build(source, "python", path=Path("pkg/mod.py"), namespace="pkg.mod")
    """

    def __init__(self, parser: Optional[TreeSitterParser] = None) -> None:
        self._parser = parser or TreeSitterParser()

    @property
    def languages(self) -> list[str]:
        return [lang for lang in CONVERTERS if self._parser.is_language_supported(lang)]

    def build(
        self,
        source: bytes | str,
        language: str,
        path: Optional[Path] = None,
        namespace: Optional[str] = None,
    ) -> SyntaxNode:
        """Parse ``source`` into a NAMESPACE node named ``namespace``.

        Raises:
            UnsupportedLanguageError: No converter or grammar for ``language``
            ParsingError: The source has syntax errors
        """
        converter_cls = CONVERTERS.get(language)
        if converter_cls is None or not self._parser.is_language_supported(language):
            raise UnsupportedLanguageError(language, self.languages)

        code = source.encode("utf-8") if isinstance(source, str) else source
        tree = self._parser.parse(code, language)
        filepath = path or Path("<memory>")
        if tree is None:
            raise ParsingError(filepath, language, "parser returned no tree")

        root = tree.root_node
        if root.has_error:
            line = _first_error_line(root)
            raise ParsingError(filepath, language, f"syntax error near line {line}")

        converter = converter_cls(code)
        logger.debug(f"Converting {language} tree for {filepath}")
        return converter.make(
            NodeKind.NAMESPACE,
            root,
            name=namespace or None,
            children=converter.convert_all(root.named_children),
        )


def _first_error_line(root: Any) -> int:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node.start_point[0] + 1
        stack.extend(reversed(node.children))
    return root.start_point[0] + 1
