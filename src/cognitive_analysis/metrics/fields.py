"""Named attributes of MethodMetrics used for grouping and sorting."""

from __future__ import annotations

from typing import Any, Callable, Optional

from .models import MethodMetrics
from .names import MetricName

FieldGetter = Callable[[MethodMetrics], Any]


def _count_getter(metric: MetricName) -> FieldGetter:
    return lambda m: m.count(metric)


def _weight_getter(metric: MetricName) -> FieldGetter:
    return lambda m: m.weight(metric)


def _halstead_volume(m: MethodMetrics) -> Optional[float]:
    return m.halstead.volume if m.halstead is not None else None


def _cyclomatic_complexity(m: MethodMetrics) -> Optional[int]:
    return m.cyclomatic.complexity if m.cyclomatic is not None else None


# Attributes a collection can be grouped by.
GROUP_FIELDS: dict[str, FieldGetter] = {
    "class": lambda m: m.class_name,
    "method": lambda m: m.method_name,
    "file": lambda m: m.file,
    "line": lambda m: m.line,
    "score": lambda m: m.score,
}
GROUP_FIELDS.update({metric.value: _count_getter(metric) for metric in MetricName})
GROUP_FIELDS.update({metric.weight_key: _weight_getter(metric) for metric in MetricName})

# Sortable fields; string fields compare case-insensitively.
SORT_FIELDS: dict[str, FieldGetter] = {
    "score": lambda m: m.score,
    "halstead": _halstead_volume,
    "cyclomatic": _cyclomatic_complexity,
    "class": lambda m: m.class_name,
    "method": lambda m: m.method_name,
    "file": lambda m: m.file,
}
SORT_FIELDS.update({metric.value: _count_getter(metric) for metric in MetricName})
SORT_FIELDS.update({metric.weight_key: _weight_getter(metric) for metric in MetricName})

STRING_FIELDS = frozenset({"class", "method", "file"})
