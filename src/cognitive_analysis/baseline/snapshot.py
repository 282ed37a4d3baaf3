"""In-memory forms of a loaded or freshly generated baseline."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Any, Iterator, Mapping, Optional, Union

from ..config import MetricConfig, compute_config_hash
from ..exceptions import InvalidBaselineSchemaError
from ..metrics.collection import MetricsCollection
from ..metrics.names import MetricName
from .schema import DATE_FORMAT, VERSION, BaselineSchemaValidator

if TYPE_CHECKING:
    from ..config import CognitiveConfig


def generate_config_hash(
    config: Union[CognitiveConfig, Mapping[MetricName, MetricConfig]],
) -> str:
    """Hash of the scoring parameters (threshold, scale, enabled per metric)."""
    metrics = getattr(config, "metrics", config)
    return compute_config_hash({name.value: metrics[name].to_dict() for name in MetricName})


def _iter_methods(metrics: Mapping[str, Any]) -> Iterator[tuple[str, str, Mapping[str, Any]]]:
    for class_name, class_data in metrics.items():
        for method_name, method_data in class_data["methods"].items():
            yield class_name, method_name, method_data


def group_metrics(collection: MetricsCollection) -> dict[str, dict[str, Any]]:
    """Class -> {"methods": method -> fields}, in collection order."""
    grouped: dict[str, dict[str, Any]] = {}
    for metric in collection:
        methods = grouped.setdefault(metric.class_name, {"methods": {}})["methods"]
        methods[metric.method_name] = metric.to_dict()
    return grouped


@dataclass(frozen=True)
class BaselineSnapshot:
    """A versioned baseline with its creation time and config hash."""

    created_at: str
    config_hash: str
    metrics: Mapping[str, Any]
    version: str = VERSION

    @classmethod
    def from_metrics_collection(
        cls,
        collection: MetricsCollection,
        config: Union[CognitiveConfig, Mapping[MetricName, MetricConfig]],
        created_at: Optional[datetime] = None,
    ) -> BaselineSnapshot:
        created_at = created_at or datetime.now()
        return cls(
            created_at=created_at.strftime(DATE_FORMAT),
            config_hash=generate_config_hash(config),
            metrics=group_metrics(collection),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BaselineSnapshot:
        return cls(
            created_at=data["createdAt"],
            config_hash=data["configHash"],
            metrics=data["metrics"],
            version=data["version"],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "createdAt": self.created_at,
            "configHash": self.config_hash,
            "metrics": self.metrics,
        }

    def iter_methods(self) -> Iterator[tuple[str, str, Mapping[str, Any]]]:
        return _iter_methods(self.metrics)

    @property
    def method_count(self) -> int:
        return sum(1 for _ in self.iter_methods())


@dataclass(frozen=True)
class LegacyBaseline:
    """An unversioned baseline: the bare metrics mapping, without a hash."""

    metrics: Mapping[str, Any]

    config_hash = None

    def to_dict(self) -> dict[str, Any]:
        return dict(self.metrics)

    def iter_methods(self) -> Iterator[tuple[str, str, Mapping[str, Any]]]:
        return _iter_methods(self.metrics)

    @property
    def method_count(self) -> int:
        return sum(1 for _ in self.iter_methods())


LoadedBaseline = Union[BaselineSnapshot, LegacyBaseline]


def parse_baseline(
    data: Any, validator: Optional[BaselineSchemaValidator] = None
) -> LoadedBaseline:
    """Validate decoded JSON and wrap it in the matching baseline type.

    Raises:
        InvalidBaselineSchemaError: With every violation found
    """
    validator = validator or BaselineSchemaValidator()
    errors = validator.validate(data)
    if errors:
        raise InvalidBaselineSchemaError(errors)
    if validator.is_versioned(data):
        return BaselineSnapshot.from_dict(data)
    return LegacyBaseline(metrics=data)
