"""Tests for the per-routine metrics record."""

import pytest

from cognitive_analysis.exceptions import IdentityMismatchError
from cognitive_analysis.metrics import MethodMetrics, MetricName


class TestIdentity:
    def test_identity_pair(self):
        metrics = MethodMetrics("Shop\\Cart", "total")
        assert metrics.identity == ("Shop\\Cart", "total")

    def test_identity_cannot_change(self):
        metrics = MethodMetrics("Cart", "total")
        with pytest.raises(AttributeError):
            metrics.class_name = "Other"
        with pytest.raises(AttributeError):
            metrics.method_name = "other"

    def test_other_fields_can_change(self):
        metrics = MethodMetrics("Cart", "total")
        metrics.score = 1.5
        assert metrics.score == 1.5

    def test_same_identity_is_exact(self):
        assert MethodMetrics("Cart", "total").same_identity(MethodMetrics("Cart", "total"))
        assert not MethodMetrics("Cart", "total").same_identity(MethodMetrics("cart", "total"))

    @pytest.mark.parametrize("class_name, method_name", [("", "run"), ("Job", ""), (None, "run")])
    def test_requires_names(self, class_name, method_name):
        with pytest.raises(ValueError):
            MethodMetrics(class_name, method_name)


class TestCounts:
    def test_missing_counts_default_to_zero(self):
        metrics = MethodMetrics("Job", "run", counts={MetricName.IF_COUNT: 2})
        assert metrics.count(MetricName.IF_COUNT) == 2
        assert metrics.count(MetricName.ELSE_COUNT) == 0
        assert set(metrics.counts) == set(MetricName)

    def test_weights_start_at_zero(self):
        metrics = MethodMetrics("Job", "run", counts={MetricName.IF_COUNT: 9})
        assert all(weight == 0.0 for weight in metrics.weights.values())
        assert metrics.score == 0.0

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError):
            MethodMetrics("Job", "run", counts={MetricName.IF_COUNT: -1})

    def test_line_must_be_positive(self):
        with pytest.raises(ValueError):
            MethodMetrics("Job", "run", line=0)


class TestDeltas:
    def test_deltas_from_previous_weights(self):
        previous = MethodMetrics("Job", "run", weights={MetricName.IF_COUNT: 1.0})
        current = MethodMetrics("Job", "run", weights={MetricName.IF_COUNT: 0.5})

        current.calculate_deltas(previous)

        delta = current.delta(MetricName.IF_COUNT)
        assert delta.before == 1.0
        assert delta.after == 0.5
        assert not delta.has_increased()
        assert current.delta(MetricName.ELSE_COUNT).has_not_changed()
        assert current.has_deltas()

    def test_identity_mismatch_raises(self):
        current = MethodMetrics("Job", "run")
        with pytest.raises(IdentityMismatchError):
            current.calculate_deltas(MethodMetrics("Job", "stop"))
        assert not current.has_deltas()


class TestSerialisation:
    def test_to_dict_uses_baseline_keys(self):
        metrics = MethodMetrics(
            "Job",
            "run",
            counts={MetricName.LINE_COUNT: 12},
            file="job.py",
            line=3,
            weights={MetricName.LINE_COUNT: 0.25},
        )
        metrics.score = 0.25
        data = metrics.to_dict()

        assert data["class"] == "Job"
        assert data["method"] == "run"
        assert data["lineCount"] == 12
        assert data["lineCountWeight"] == 0.25
        assert data["elseCountWeight"] == 0.0
        assert data["score"] == 0.25
        assert data["file"] == "job.py"
        assert data["line"] == 3

    def test_from_dict_restores_record(self):
        original = MethodMetrics(
            "Job",
            "run",
            counts={MetricName.IF_COUNT: 4, MetricName.ARG_COUNT: 2},
            weights={MetricName.IF_COUNT: 0.693},
            line=7,
        )
        original.score = 0.693
        restored = MethodMetrics.from_dict(original.to_dict())

        assert restored.identity == original.identity
        assert restored.counts == original.counts
        assert restored.weights == original.weights
        assert restored.score == original.score
        assert restored.line == 7
