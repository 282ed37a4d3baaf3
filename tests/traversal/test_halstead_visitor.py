"""Tests for Halstead token collection during traversal."""

from cognitive_analysis.traversal import NodeKind, SyntaxNode, traverse


def node(kind, *children, **attrs):
    return SyntaxNode(kind, children=list(children), **attrs)


class TestHalsteadMetricsVisitor:
    def test_routine_tokens(self):
        # total = price + 1
        body = node(
            NodeKind.ASSIGN,
            node(NodeKind.VARIABLE, name="total"),
            node(
                NodeKind.BINARY_OP,
                node(NodeKind.IDENTIFIER, name="price"),
                node(NodeKind.LITERAL, value="1"),
                token="+",
            ),
            token="=",
        )
        run = node(NodeKind.ROUTINE, body, name="run", start_line=1, end_line=2)
        tree = node(NodeKind.NAMESPACE, node(NodeKind.TYPE, run, name="Cart"), name="app")

        record = traverse(tree).methods[0].halstead
        assert (record.n1, record.N1) == (2, 2)
        assert (record.n2, record.N2) == (3, 3)

    def test_operator_without_token_uses_kind(self):
        run = node(
            NodeKind.ROUTINE,
            node(NodeKind.LOGICAL_AND),
            node(NodeKind.LOGICAL_AND),
            name="run",
            start_line=1,
            end_line=1,
        )
        tree = node(NodeKind.NAMESPACE, node(NodeKind.TYPE, run, name="Cart"), name="app")
        record = traverse(tree).methods[0].halstead
        assert record.n1 == 1
        assert record.N1 == 2

    def test_class_totals_cover_every_method(self):
        first = node(
            NodeKind.ROUTINE,
            node(NodeKind.IDENTIFIER, name="a"),
            name="first",
            start_line=1,
            end_line=2,
        )
        second = node(
            NodeKind.ROUTINE,
            node(NodeKind.IDENTIFIER, name="b"),
            node(NodeKind.CALL, token="()"),
            name="second",
            start_line=3,
            end_line=4,
        )
        tree = node(NodeKind.NAMESPACE, node(NodeKind.TYPE, first, second, name="Cart"), name="app")

        record = traverse(tree).class_halstead["app.Cart"]
        assert record.N2 == 2
        assert record.N1 == 1

    def test_unnamed_operand_is_skipped(self):
        run = node(
            NodeKind.ROUTINE,
            node(NodeKind.IDENTIFIER, name=None),
            name="run",
            start_line=1,
            end_line=1,
        )
        tree = node(NodeKind.NAMESPACE, node(NodeKind.TYPE, run, name="Cart"), name="app")
        assert traverse(tree).methods[0].halstead.N2 == 0
