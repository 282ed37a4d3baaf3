"""Tests for scope handling: nesting, anonymous routines and ignore markers."""

from cognitive_analysis.metrics import MetricName
from cognitive_analysis.traversal import (
    IGNORE_MARKER,
    NodeKind,
    SyntaxNode,
    TraversalContext,
    is_ignored,
    traverse,
)


def node(kind, *children, **attrs):
    return SyntaxNode(kind, children=list(children), **attrs)


def routine(name, *children, **attrs):
    attrs.setdefault("start_line", 1)
    attrs.setdefault("end_line", 5)
    return node(NodeKind.ROUTINE, *children, name=name, **attrs)


def module(*children):
    return node(NodeKind.NAMESPACE, *children, name="app")


class TestNestedRoutines:
    def test_closure_counts_stay_out_of_parent(self):
        closure = node(
            NodeKind.ANONYMOUS_ROUTINE,
            node(NodeKind.IF),
            node(NodeKind.RETURN),
            node(NodeKind.VARIABLE, name="inner"),
        )
        tree = module(
            node(
                NodeKind.TYPE,
                routine("run", node(NodeKind.VARIABLE, name="outer"), closure),
                name="Job",
            )
        )
        result = traverse(tree)

        assert len(result.methods) == 1
        method = result.methods[0]
        assert method.count(MetricName.IF_COUNT) == 0
        assert method.count(MetricName.RETURN_COUNT) == 0
        assert method.count(MetricName.VARIABLE_COUNT) == 1

    def test_named_inner_function_is_not_reported(self):
        tree = module(
            node(NodeKind.TYPE, routine("run", routine("helper", node(NodeKind.IF))), name="Job")
        )
        result = traverse(tree)
        assert [m.method_name for m in result.methods] == ["run"]
        assert result.methods[0].count(MetricName.IF_COUNT) == 0

    def test_parent_resumes_after_closure(self):
        tree = module(
            node(
                NodeKind.TYPE,
                routine(
                    "run",
                    node(NodeKind.IF, node(NodeKind.ANONYMOUS_ROUTINE, node(NodeKind.IF))),
                    node(NodeKind.RETURN),
                ),
                name="Job",
            )
        )
        method = traverse(tree).methods[0]
        assert method.count(MetricName.IF_COUNT) == 1
        assert method.count(MetricName.IF_NESTING_LEVEL) == 1
        assert method.count(MetricName.RETURN_COUNT) == 1

    def test_anonymous_type_methods_are_not_reported(self):
        tree = module(node(NodeKind.TYPE, routine("run"), name=None))
        assert traverse(tree).methods == []

    def test_type_inside_routine_is_local(self):
        local = node(NodeKind.TYPE, routine("inner"), name="Local")
        tree = module(node(NodeKind.TYPE, routine("outer", local), name="Job"))
        result = traverse(tree)
        assert [m.identity for m in result.methods] == [("app.Job", "outer")]

    def test_nested_type_identity(self):
        inner = node(NodeKind.TYPE, routine("run"), name="Meta")
        tree = module(node(NodeKind.TYPE, inner, name="Model"))
        assert traverse(tree).methods[0].identity == ("app.Model.Meta", "run")


class TestIgnoreMarker:
    def test_is_ignored(self):
        assert is_ignored(SyntaxNode(NodeKind.ROUTINE, comments=[f"Legacy. {IGNORE_MARKER}"]))
        assert not is_ignored(SyntaxNode(NodeKind.ROUTINE, comments=["Plain docs"]))

    def test_ignored_routine_is_skipped(self):
        tree = module(
            node(
                NodeKind.TYPE,
                routine("keep"),
                routine("skip", comments=[IGNORE_MARKER]),
                name="Job",
            )
        )
        result = traverse(tree)
        assert [m.method_name for m in result.methods] == ["keep"]
        assert result.ignored == ["app.Job::skip"]

    def test_ignored_type_skips_all_methods(self):
        tree = module(
            node(
                NodeKind.TYPE,
                routine("a"),
                routine("b"),
                name="Generated",
                comments=[IGNORE_MARKER],
            )
        )
        result = traverse(tree)
        assert result.methods == []
        assert result.ignored == ["app.Generated"]
        assert "app.Generated" not in result.class_cyclomatic


class TestContext:
    def test_namespace_tracks_innermost_named(self):
        context = TraversalContext()
        context.enter(SyntaxNode(NodeKind.NAMESPACE, name="app"))
        context.enter(SyntaxNode(NodeKind.NAMESPACE, name=None))
        assert context.namespace == "app"

    def test_routine_is_none_inside_type_body(self):
        context = TraversalContext()
        context.enter(SyntaxNode(NodeKind.NAMESPACE, name="app"))
        context.enter(SyntaxNode(NodeKind.TYPE, name="Job"))
        assert context.routine is None
        context.enter(SyntaxNode(NodeKind.ROUTINE, name="run", start_line=1, end_line=2))
        assert context.routine is not None
        assert context.routine.owner == "app.Job"
