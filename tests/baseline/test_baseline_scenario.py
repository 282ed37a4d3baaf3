"""End-to-end: traverse, score, save a baseline, refactor, compare."""

import math

import pytest

from cognitive_analysis.baseline import Baseline
from cognitive_analysis.config import CognitiveConfig, MetricConfig
from cognitive_analysis.metrics import MetricName, MetricsCollection, ScoreCalculator
from cognitive_analysis.traversal import NodeKind, SyntaxNode, traverse


def node(kind, *children, **attrs):
    return SyntaxNode(kind, children=list(children), **attrs)


def order_module(body):
    routine = node(NodeKind.ROUTINE, *body, name="process", start_line=5, end_line=20)
    return node(NodeKind.NAMESPACE, node(NodeKind.TYPE, routine, name="Order"), name="shop")


def collect(tree, config):
    collection = MetricsCollection()
    for metrics in traverse(tree).methods:
        ScoreCalculator().calculate(metrics, config)
        collection.add(metrics)
    return collection


@pytest.fixture
def config():
    return CognitiveConfig(
        metrics={
            MetricName.IF_COUNT: MetricConfig(threshold=1, scale=1),
            MetricName.IF_NESTING_LEVEL: MetricConfig(threshold=1, scale=1),
            MetricName.ELSE_COUNT: MetricConfig(threshold=0, scale=1),
            MetricName.RETURN_COUNT: MetricConfig(threshold=1, scale=1),
        }
    )


class TestRefactorScenario:
    def test_scored_routine(self, config):
        # three ifs, two of them nested, one else and two returns
        tree = order_module(
            [
                node(NodeKind.IF, node(NodeKind.IF, node(NodeKind.RETURN))),
                node(NodeKind.IF, node(NodeKind.ELSE)),
                node(NodeKind.RETURN),
            ]
        )
        method = collect(tree, config).get("shop.Order", "process")

        assert method.count(MetricName.IF_COUNT) == 3
        assert method.count(MetricName.IF_NESTING_LEVEL) == 2
        assert method.count(MetricName.ELSE_COUNT) == 1
        assert method.count(MetricName.RETURN_COUNT) == 2
        for metric in (
            MetricName.IF_COUNT,
            MetricName.IF_NESTING_LEVEL,
            MetricName.ELSE_COUNT,
            MetricName.RETURN_COUNT,
        ):
            assert method.weight(metric) > 0
        assert method.weight(MetricName.IF_COUNT) == pytest.approx(math.log(3))
        assert method.weight(MetricName.IF_NESTING_LEVEL) == pytest.approx(math.log(2))
        assert method.score == round(sum(method.weights.values()), 3)

    def test_reduced_nesting_is_not_an_increase(self, tmp_path, config):
        before = order_module(
            [
                node(NodeKind.IF, node(NodeKind.IF, node(NodeKind.IF, node(NodeKind.RETURN)))),
                node(NodeKind.ELSE),
                node(NodeKind.RETURN),
            ]
        )
        after = order_module(
            [
                node(NodeKind.IF, node(NodeKind.IF, node(NodeKind.RETURN))),
                node(NodeKind.IF, node(NodeKind.ELSE)),
                node(NodeKind.RETURN),
            ]
        )
        service = Baseline()
        path = service.save(collect(before, config), config, tmp_path / "baseline.json")

        baseline, warnings = service.load_with_validation(path, config)
        current = collect(after, config)
        assert warnings == []
        assert service.calculate_deltas(current, baseline) == 1

        delta = current.get("shop.Order", "process").delta(MetricName.IF_NESTING_LEVEL)
        assert delta.before == pytest.approx(math.log(3))
        assert delta.after == pytest.approx(math.log(2))
        assert delta.has_increased() is False

    def test_flattened_to_single_level(self, tmp_path, config):
        deep = order_module(
            [node(NodeKind.IF, node(NodeKind.IF, node(NodeKind.IF)))]
        )
        flat = order_module([node(NodeKind.IF), node(NodeKind.IF), node(NodeKind.IF)])
        service = Baseline()
        path = service.save(collect(deep, config), config, tmp_path / "baseline.json")

        current = collect(flat, config)
        service.calculate_deltas(current, service.load(path))
        method = current.get("shop.Order", "process")

        assert method.count(MetricName.IF_NESTING_LEVEL) == 1
        delta = method.delta(MetricName.IF_NESTING_LEVEL)
        assert delta.after == 0.0
        assert delta.has_decreased()
        assert method.delta(MetricName.IF_COUNT).has_not_changed()
