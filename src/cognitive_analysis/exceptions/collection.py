"""Caller errors raised by metrics collections."""

from typing import Iterable

from .base import CognitiveAnalysisError


class CollectionError(CognitiveAnalysisError, ValueError):
    """Base class for invalid collection operations."""
    pass


class UnknownSortFieldError(CollectionError):
    """Raised when sorting by a field that is not sortable."""

    def __init__(self, field: str, available: Iterable[str]):
        available = sorted(available)
        super().__init__(
            f"Invalid sort field: {field}",
            details={"field": field, "available": ", ".join(available)},
        )
        self.field = field
        self.available = available


class InvalidSortOrderError(CollectionError):
    """Raised when the sort order is neither asc nor desc."""

    def __init__(self, order: str):
        super().__init__(
            f"Invalid sort order: {order}",
            details={"order": order, "expected": "asc, desc"},
        )
        self.order = order


class UnknownGroupAttributeError(CollectionError):
    """Raised when grouping by an attribute metrics do not carry."""

    def __init__(self, attribute: str, available: Iterable[str]):
        available = sorted(available)
        super().__init__(
            f"Cannot group by unknown attribute: {attribute}",
            details={"attribute": attribute, "available": ", ".join(available)},
        )
        self.attribute = attribute
        self.available = available
