"""Metric dimensions measured for every routine."""

from __future__ import annotations

from enum import Enum


class MetricName(str, Enum):
    """The eight cognitive dimensions.

    Values are the camelCase keys used in configuration files and baselines.
    """

    LINE_COUNT = "lineCount"
    ARG_COUNT = "argCount"
    RETURN_COUNT = "returnCount"
    VARIABLE_COUNT = "variableCount"
    PROPERTY_CALL_COUNT = "propertyCallCount"
    IF_COUNT = "ifCount"
    IF_NESTING_LEVEL = "ifNestingLevel"
    ELSE_COUNT = "elseCount"

    @property
    def weight_key(self) -> str:
        """Baseline key of the weight derived from this metric."""
        return f"{self.value}Weight"

    @property
    def label(self) -> str:
        """Short column label for tables."""
        return _LABELS[self]

    @classmethod
    def from_key(cls, key: str) -> MetricName:
        """Resolve a camelCase key, raising ValueError for unknown keys."""
        try:
            return cls(key)
        except ValueError:
            valid = ", ".join(m.value for m in cls)
            raise ValueError(f"unknown metric '{key}' (expected one of: {valid})") from None


_LABELS = {
    MetricName.LINE_COUNT: "Lines",
    MetricName.ARG_COUNT: "Args",
    MetricName.RETURN_COUNT: "Returns",
    MetricName.VARIABLE_COUNT: "Vars",
    MetricName.PROPERTY_CALL_COUNT: "Props",
    MetricName.IF_COUNT: "Ifs",
    MetricName.IF_NESTING_LEVEL: "If Nesting",
    MetricName.ELSE_COUNT: "Elses",
}
