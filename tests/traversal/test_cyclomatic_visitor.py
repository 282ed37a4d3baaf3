"""Tests for cyclomatic complexity collected during traversal."""

from cognitive_analysis.traversal import NodeKind, SyntaxNode, traverse


def node(kind, *children, **attrs):
    return SyntaxNode(kind, children=list(children), **attrs)


def routine(name, *children):
    return node(NodeKind.ROUTINE, *children, name=name, start_line=1, end_line=3)


class TestCyclomaticComplexityVisitor:
    def test_straight_line_routine(self):
        tree = node(NodeKind.NAMESPACE, node(NodeKind.TYPE, routine("run"), name="Job"), name="app")
        assert traverse(tree).methods[0].cyclomatic.complexity == 1

    def test_counts_decision_points(self):
        body = [
            node(NodeKind.IF, node(NodeKind.LOGICAL_AND), node(NodeKind.ELSE)),
            node(NodeKind.FOREACH),
            node(NodeKind.SWITCH, node(NodeKind.CASE), node(NodeKind.CASE), node(NodeKind.DEFAULT)),
            node(NodeKind.CATCH),
            node(NodeKind.TERNARY),
        ]
        tree = node(NodeKind.NAMESPACE, node(NodeKind.TYPE, routine("run", *body), name="Job"), name="app")
        record = traverse(tree).methods[0].cyclomatic

        # if, &&, foreach, switch, 2 cases, catch, ternary
        assert record.complexity == 9
        assert record.breakdown["else"] == 1
        assert record.breakdown["default"] == 1

    def test_class_complexity(self):
        tree = node(
            NodeKind.NAMESPACE,
            node(
                NodeKind.TYPE,
                routine("a", node(NodeKind.IF)),
                routine("b", node(NodeKind.WHILE), node(NodeKind.FOR)),
                name="Job",
            ),
            name="app",
        )
        result = traverse(tree)
        # 1 + (2 + 3)
        assert result.class_cyclomatic["app.Job"].complexity == 6

    def test_closure_decisions_stay_in_closure(self):
        closure = node(NodeKind.ANONYMOUS_ROUTINE, node(NodeKind.IF), node(NodeKind.WHILE))
        tree = node(
            NodeKind.NAMESPACE, node(NodeKind.TYPE, routine("run", closure), name="Job"), name="app"
        )
        assert traverse(tree).methods[0].cyclomatic.complexity == 1
