"""Stable ordering of metrics collections."""

from __future__ import annotations

from typing import Any, Iterable

from ..exceptions import InvalidSortOrderError, UnknownSortFieldError
from .fields import SORT_FIELDS, STRING_FIELDS
from .models import MethodMetrics

SORT_ORDERS = ("asc", "desc")


class MetricsSorter:
    """Sorts MethodMetrics by one whitelisted field.

    Numbers compare numerically and strings case-insensitively. A missing
    value sorts as 0 (or the empty string). Equal keys keep their original
    order in both directions.
    """

    def sortable_fields(self) -> list[str]:
        return list(SORT_FIELDS)

    def sort(
        self, metrics: Iterable[MethodMetrics], field: str, order: str = "asc"
    ) -> list[MethodMetrics]:
        if field not in SORT_FIELDS:
            raise UnknownSortFieldError(field, SORT_FIELDS)
        normalized = order.lower() if isinstance(order, str) else order
        if normalized not in SORT_ORDERS:
            raise InvalidSortOrderError(str(order))

        getter = SORT_FIELDS[field]
        is_string = field in STRING_FIELDS

        def key(metric: MethodMetrics) -> Any:
            value = getter(metric)
            if is_string:
                return (value or "").casefold()
            return value if value is not None else 0

        return sorted(metrics, key=key, reverse=normalized == "desc")
