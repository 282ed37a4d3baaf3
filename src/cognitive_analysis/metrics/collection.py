"""Ordered, identity-keyed container of MethodMetrics."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional, Union

from ..exceptions import UnknownGroupAttributeError
from .fields import GROUP_FIELDS
from .models import MethodMetrics
from .sorter import MetricsSorter

Identity = tuple[str, str]


class MetricsCollection:
    """Insertion-ordered set of MethodMetrics, one per (class, method).

    ``add`` is first-wins: adding a record whose identity is already present
    leaves the collection unchanged.
    """

    def __init__(self, metrics: Iterable[MethodMetrics] = ()) -> None:
        self._metrics: dict[Identity, MethodMetrics] = {}
        for metric in metrics:
            self.add(metric)

    def add(self, metric: MethodMetrics) -> bool:
        """Insert ``metric``; returns False when its identity already exists."""
        if metric.identity in self._metrics:
            return False
        self._metrics[metric.identity] = metric
        return True

    def merge(self, other: Iterable[MethodMetrics]) -> int:
        """Add every record of ``other`` first-wins; returns how many were new."""
        return sum(1 for metric in other if self.add(metric))

    def contains(self, item: Union[MethodMetrics, Identity]) -> bool:
        identity = item.identity if isinstance(item, MethodMetrics) else tuple(item)
        return identity in self._metrics

    __contains__ = contains

    def get(self, class_name: str, method_name: str) -> Optional[MethodMetrics]:
        return self._metrics.get((class_name, method_name))

    def filter(self, predicate: Callable[[MethodMetrics], bool]) -> MetricsCollection:
        return MetricsCollection(m for m in self._metrics.values() if predicate(m))

    def filter_by_class(self, class_name: str) -> MetricsCollection:
        return self.filter(lambda m: m.class_name == class_name)

    def filter_with_score_greater_than(self, score: float) -> MetricsCollection:
        return self.filter(lambda m: m.score > score)

    def group_by(self, attribute: str) -> dict[Any, MetricsCollection]:
        """Partition by an attribute value; groups appear in first-seen order."""
        getter = GROUP_FIELDS.get(attribute)
        if getter is None:
            raise UnknownGroupAttributeError(attribute, GROUP_FIELDS)

        groups: dict[Any, MetricsCollection] = {}
        for metric in self._metrics.values():
            key = getter(metric)
            if key not in groups:
                groups[key] = MetricsCollection()
            groups[key].add(metric)
        return groups

    def sort(self, field: str, order: str = "asc") -> MetricsCollection:
        return MetricsCollection(MetricsSorter().sort(self._metrics.values(), field, order))

    def class_names(self) -> list[str]:
        return list(dict.fromkeys(m.class_name for m in self._metrics.values()))

    def count(self) -> int:
        return len(self._metrics)

    def is_empty(self) -> bool:
        return not self._metrics

    def __len__(self) -> int:
        return len(self._metrics)

    def __iter__(self) -> Iterator[MethodMetrics]:
        return iter(list(self._metrics.values()))

    def __repr__(self) -> str:
        return f"MetricsCollection({len(self._metrics)} methods)"
